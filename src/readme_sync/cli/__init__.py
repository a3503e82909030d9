"""Command-line interface for readme-sync.

Usage:
    readme-sync generate [--dry-run]
    readme-sync check
    readme-sync validate
    readme-sync show [commands|configs]

Global options (before the command):
    --config <path>     .readme-sync.yaml to read
    --manifest <path>   package.json to read
    --readme <path>     README to update
"""

import argparse
import json
import sys

import yaml

from readme_sync import __version__
from readme_sync.cli.manifest import cmd_show, cmd_validate
from readme_sync.cli.readme import cmd_check, cmd_generate
from readme_sync.errors import ReadmeSyncError
from readme_sync.readme import SECTIONS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-sync",
        description="Regenerate the commands and preferences tables of a README",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to .readme-sync.yaml (default: <root>/.readme-sync.yaml if present)",
    )
    parser.add_argument(
        "--manifest", default=None,
        help="Path to package.json (default: <root>/package.json)",
    )
    parser.add_argument(
        "--readme", default=None,
        help="Path to README (default: <root>/README.md)",
    )
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Render tables and update the README")
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    sub.add_parser("check", help="Exit non-zero if the README is out of date")
    sub.add_parser("validate", help="Validate the manifest")

    show = sub.add_parser("show", help="Print the rendered tables")
    show.add_argument(
        "section", nargs="?", default=None, choices=list(SECTIONS),
        help="Single section to print (default: all configured)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "generate": cmd_generate,
        "check": cmd_check,
        "validate": cmd_validate,
        "show": cmd_show,
    }

    try:
        return dispatch[args.command](args)
    except (OSError, json.JSONDecodeError, yaml.YAMLError, ReadmeSyncError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

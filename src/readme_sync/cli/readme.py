"""README CLI commands."""

import argparse
import sys

from readme_sync.config import resolve_settings
from readme_sync.readme.sync import sync_project


def _settings(args: argparse.Namespace):
    return resolve_settings(
        manifest=args.manifest,
        readme=args.readme,
        config=args.config,
    )


def cmd_generate(args: argparse.Namespace) -> int:
    settings = _settings(args)
    result = sync_project(
        settings.manifest,
        settings.readme,
        sections=settings.sections,
        dry_run=args.dry_run,
    )

    print("README Sync Results")
    print("─" * 40)
    print(f"  README:   {result['path']}")
    print(f"  Action:   {result['action']}")
    print(f"  Sections: {', '.join(result['sections']) or '(none)'}")
    if result["missing"]:
        print(f"  Missing:  {', '.join(result['missing'])}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    if not result["sections"]:
        print(
            f"ERROR: No section markers found in {result['path']}",
            file=sys.stderr,
        )
        return 1
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    settings = _settings(args)
    result = sync_project(
        settings.manifest,
        settings.readme,
        sections=settings.sections,
        dry_run=True,
    )

    if not result["sections"]:
        print(
            f"ERROR: No section markers found in {result['path']}",
            file=sys.stderr,
        )
        return 1
    if result["action"] == "updated":
        print(f"  STALE: {result['path']} is out of date (run 'readme-sync generate')")
        return 1
    print(f"  OK: {result['path']} is up to date")
    return 0

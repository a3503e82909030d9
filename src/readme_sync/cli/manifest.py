"""Manifest CLI commands."""

import argparse

from readme_sync.config import resolve_settings
from readme_sync.manifest.loader import load_manifest
from readme_sync.manifest.validator import validate_manifest
from readme_sync.tables.builders import generate_markdown


def cmd_validate(args: argparse.Namespace) -> int:
    settings = resolve_settings(
        manifest=args.manifest, readme=args.readme, config=args.config,
    )
    manifest = load_manifest(settings.manifest)
    result = validate_manifest(manifest)
    print(result.summary())
    return 0 if result.passed else 1


def cmd_show(args: argparse.Namespace) -> int:
    settings = resolve_settings(
        manifest=args.manifest, readme=args.readme, config=args.config,
    )
    tables = generate_markdown(load_manifest(settings.manifest))
    names = [args.section] if args.section else settings.sections
    for i, name in enumerate(names):
        if i:
            print()
        print(f"<!-- {name} -->")
        print()
        print(tables[name])
    return 0

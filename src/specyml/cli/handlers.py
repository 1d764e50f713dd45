"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path

from specyml.cli.targets import resolve_target
from specyml.config import SpecymlConfig
from specyml.constants.config import SYNC_TEMP_PREFIX, SYNC_TEMP_SUFFIX
from specyml.exceptions.validation import format_issues
from specyml.io import read_text, read_text_if_exists, write_text_atomic
from specyml.loading import validate_text
from specyml.rendering import RenderOptions, render_spec
from specyml.spec_file import SpecFile


def build_unified_diff(before: str, after: str, path: Path) -> str:
    """Return a unified diff between two versions of a file."""
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (synced)",
        )
    )


def handle_render(args: argparse.Namespace, config: SpecymlConfig, options: RenderOptions) -> int:
    """Print or write the default document for a target."""
    schema = resolve_target(args.target)
    text = render_spec(schema, options=options)
    if args.output is None:
        sys.stdout.write(text)
        return 0
    write_text_atomic(path=args.output, text=text, temp_prefix=SYNC_TEMP_PREFIX, temp_suffix=SYNC_TEMP_SUFFIX)
    print(f"Wrote {schema.name} defaults to {args.output}")
    return 0


def handle_validate(args: argparse.Namespace, config: SpecymlConfig, options: RenderOptions) -> int:
    """Report every issue in a YAML file."""
    schema = resolve_target(args.target)
    text = read_text(args.file)
    issues = validate_text(text, schema, strict=args.strict or config.strict)
    if issues:
        print(format_issues(issues), file=sys.stderr)
        return 2
    print(f"{args.file} is valid.")
    return 0


def handle_sync(args: argparse.Namespace, config: SpecymlConfig, options: RenderOptions) -> int:
    """Fill in missing defaults and comments, or show what would change."""
    schema = resolve_target(args.target)
    spec_file = SpecFile(args.file, schema, options=options, strict=config.strict)

    if not args.check:
        changed = spec_file.sync()
        print(f"Updated {args.file}" if changed else f"{args.file} is up to date.")
        return 0

    before = read_text_if_exists(args.file) or ""
    after = spec_file.load().render()
    if before == after:
        print(f"{args.file} is up to date.")
        return 0
    print(build_unified_diff(before, after, args.file), end="")
    return 1

"""CLI entrypoint for specyml."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from specyml import __version__
from specyml.cli.handlers import handle_render, handle_sync, handle_validate
from specyml.config import load_config
from specyml.constants.branding import CLI_DESCRIPTION
from specyml.constants.rendering import VALID_ARRAY_COMMENT_STYLES
from specyml.exceptions import ConfigError, SpecymlError
from specyml.rendering import RenderOptions

_HANDLERS = {
    "render": handle_render,
    "validate": handle_validate,
    "sync": handle_sync,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="specyml",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--config", type=Path, help="Explicit specyml.yaml config file")
    common.add_argument("--indent", type=int, default=None, help="Spaces per nesting level (default: 2)")
    common.add_argument(
        "--array-comments",
        choices=sorted(VALID_ARRAY_COMMENT_STYLES),
        default=None,
        help="Comment the first element of lists and maps, or all of them (default: first)",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", parents=[common], help="Print the default commented document")
    render.add_argument("target", help="Config spec as module.path:AttrName")
    render.add_argument("-o", "--output", type=Path, default=None, help="Write to this file instead of stdout")

    validate = subparsers.add_parser("validate", parents=[common], help="Check a YAML file against a config spec")
    validate.add_argument("target", help="Config spec as module.path:AttrName")
    validate.add_argument("file", type=Path, help="YAML file to check")
    validate.add_argument("--strict", action="store_true", help="Report unknown keys as issues")

    sync = subparsers.add_parser("sync", parents=[common], help="Add missing defaults and comments to a YAML file")
    sync.add_argument("target", help="Config spec as module.path:AttrName")
    sync.add_argument("file", type=Path, help="YAML file to update")
    sync.add_argument("--check", action="store_true", help="Print a diff and exit 1 instead of writing")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(Path.cwd(), args.config)
        options = _render_options(args, config.render_options)
        return handler(args, config, options)
    except (SpecymlError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


def _render_options(args: argparse.Namespace, base: RenderOptions) -> RenderOptions:
    """Apply command line overrides on top of the project config."""
    try:
        return RenderOptions(
            indent=args.indent if args.indent is not None else base.indent,
            array_comment_style=args.array_comments or base.array_comment_style,
            blank_line_before_comments=base.blank_line_before_comments,
        )
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


if __name__ == "__main__":
    raise SystemExit(main())

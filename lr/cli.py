"""Command-line front door for lr.

Parses CLI options, merges persisted defaults, and resolves the color theme.
Then dispatches into the listing pipeline.
"""

from __future__ import annotations

import argparse
import sys

from . import config
from .app import DEFAULT_PATHS, ListingOptions, execute
from .diagnostics import PROG_NAME
from .ui_theme import COLOR_POLICIES, available_theme_names, color_enabled, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="List information about the FILEs (the current directory by default).",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files or directories to list. Defaults to the current directory.",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_all",
        action="store_true",
        default=None,
        help="Do not ignore entries starting with '.'.",
    )
    parser.add_argument(
        "-l",
        "--long",
        dest="long_format",
        action="store_true",
        default=None,
        help="Use a long listing format.",
    )
    parser.add_argument(
        "--align",
        action="store_true",
        help="Pad long-format columns into an aligned table.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_POLICIES,
        default=None,
        help="When to style directory names (default: auto).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given -a/-l/--color/--theme choices as defaults.",
    )
    return parser


def parse_options(argv: list[str] | None = None) -> tuple[ListingOptions, argparse.Namespace]:
    """Parse ``argv`` into listing options, falling back to config defaults.

    Invalid invocations raise ``SystemExit(2)`` via argparse.
    """
    args = build_parser().parse_intermixed_args(argv)
    if args.no_color:
        args.color = "never"
    if args.show_all is None:
        args.show_all = config.load_show_hidden()
    if args.long_format is None:
        args.long_format = config.load_long_format()
    if args.color is None:
        args.color = config.load_color_policy()
    if args.theme is None:
        args.theme = config.load_theme_name()

    options = ListingOptions(
        paths=tuple(args.paths) if args.paths else DEFAULT_PATHS,
        show_all=args.show_all,
        long_format=args.long_format,
        align=args.align,
    )
    return options, args


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and list the requested paths.

    Returns ``0`` even when individual paths could not be listed; argument
    errors exit with status ``2`` before anything is listed.
    """
    options, args = parse_options(argv)
    if args.save_defaults:
        config.save_listing_defaults(
            options.show_all,
            options.long_format,
            color_policy=args.color,
            theme_name=args.theme,
        )

    stdout = sys.stdout
    theme = resolve_theme(args.theme, no_color=not color_enabled(args.color, stdout))
    return execute(options, stdout=stdout, stderr=sys.stderr, theme=theme)


if __name__ == "__main__":
    raise SystemExit(main())

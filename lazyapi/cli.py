"""Command-line front door for lazyapi.

Parses CLI options, loads the API document from a path or standard input,
and dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_style_name, load_theme_name, save_style_name, save_theme_name
from .document import DocumentLoadError, LoadedDocument, load_document, load_document_stream
from .highlight import DEFAULT_STYLE, normalize_style
from .runtime import run_browser
from .ui_theme import available_theme_names, normalize_theme_name

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``lazyapi`` command."""
    parser = argparse.ArgumentParser(
        prog="lazyapi",
        description="Browse the endpoints, components and webhooks of an OpenAPI document.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="OpenAPI document (JSON or YAML). Use '-' or omit to read standard input.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help=f"Pygments style for curl commands (default: {DEFAULT_STYLE}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--dump", action="store_true", help="Print the item listing and exit.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --theme/--style as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="lazyapi: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def read_document(path_arg: str | None) -> LoadedDocument:
    """Load the document named by ``path_arg``, or from stdin.

    Raises ``SystemExit`` with a readable message on any fatal load error.
    """
    try:
        if path_arg is None or path_arg == STDIN_PATH:
            if sys.stdin.isatty():
                raise SystemExit("No document given. Pass a path or pipe a document on standard input.")
            return load_document_stream(sys.stdin.buffer)
        path = Path(path_arg)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if path.is_dir():
            raise SystemExit(f"Not a file: {path}")
        return load_document(path)
    except DocumentLoadError as exc:
        raise SystemExit(f"Failed to load {path_arg or 'standard input'}: {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser on an API document."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    theme_name = args.theme if args.theme is not None else load_theme_name()
    style = normalize_style(args.style if args.style is not None else load_style_name())

    if args.save_defaults:
        if args.theme is not None:
            save_theme_name(normalize_theme_name(args.theme))
        if args.style is not None:
            save_style_name(style)

    document = read_document(args.path)
    for warning in document.warnings:
        logger.warning("%s: %s", document.source_name, warning)
    logger.debug(
        "loaded %s: %s %s",
        document.source_name,
        document.title,
        document.version or "(no version)",
    )

    run_browser(document, style, args.no_color, args.dump, theme_name)


if __name__ == "__main__":
    main()

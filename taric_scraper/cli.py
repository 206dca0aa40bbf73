from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

from .clipboard import ClipboardError, copy_to_clipboard
from .extract import DESCRIPTION_SELECTOR, Document, extract_descriptions
from .source import read_html
from .sql_writer import format_descriptions, write_statements


MESSAGES = {
    "stage_read": "[1/2] Reading page: {source}",
    "stage_extract": "[2/2] Extracting descriptions…",
    "found": "Found descriptions: {count}",
    "no_matches": "[warn] no elements match '{selector}', nothing to copy",
    "copied": "SQL insert statements copied to clipboard!",
    "warn_copy": "[warn] {error}",
    "file": "File: {path}",
    "error": "Error: {error}",
    "interrupted": "Interrupted by user",
    "help_desc": (
        "Extract description texts from a saved TARIC consultation page and\n"
        "format them as SQL insert tuples (index, 'EN', 'text')."
    ),
    "help_path": "Saved HTML page (default: read from stdin)",
    "help_out": "Also write the SQL to this file",
    "help_no_copy": "Do not copy the result to the clipboard",
    "help_selector": "CSS selector of the description elements",
}


def _msg(key: str, **kwargs) -> str:
    return MESSAGES.get(key, "").format(**kwargs)


def extract_and_format_descriptions(
    document: Document,
    copy: Optional[Callable[[str], None]] = copy_to_clipboard,
    selector: str = DESCRIPTION_SELECTOR,
) -> str:
    """Extract description texts from document and format them as SQL insert tuples.

    The result is printed to stdout, handed to copy (skipped when copy is None)
    and returned. When nothing matches, an empty string is returned and the
    clipboard is left untouched.
    """
    records = extract_descriptions(document, selector=selector)
    print(_msg("found", count=len(records)), file=sys.stderr, flush=True)
    if not records:
        print(_msg("no_matches", selector=selector), file=sys.stderr)
        return ""

    statements = format_descriptions(records)
    print(statements, flush=True)

    if copy is not None:
        try:
            copy(statements)
        except ClipboardError as exc:
            print(_msg("warn_copy", error=exc), file=sys.stderr)
        else:
            print(_msg("copied"), file=sys.stderr, flush=True)
    return statements


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taric-scraper",
        description=MESSAGES["help_desc"],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("path", nargs="?", default=None, help=MESSAGES["help_path"])
    p.add_argument(
        "-o",
        "--out",
        dest="out_path",
        default=None,
        help=MESSAGES["help_out"],
    )
    p.add_argument(
        "--no-copy",
        dest="no_copy",
        action="store_true",
        help=MESSAGES["help_no_copy"],
    )
    p.add_argument(
        "-s",
        "--selector",
        dest="selector",
        default=DESCRIPTION_SELECTOR,
        help=MESSAGES["help_selector"],
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    try:
        source = "stdin" if args.path in (None, "-") else args.path
        print(_msg("stage_read", source=source), file=sys.stderr, flush=True)
        html = read_html(args.path)

        print(_msg("stage_extract"), file=sys.stderr, flush=True)
        statements = extract_and_format_descriptions(
            html,
            copy=None if args.no_copy else copy_to_clipboard,
            selector=args.selector,
        )
        if not statements:
            return 1

        if args.out_path:
            write_statements(statements, args.out_path)
            print(_msg("file", path=args.out_path), file=sys.stderr)
        return 0
    except KeyboardInterrupt:
        print(_msg("interrupted"), file=sys.stderr)
        return 130
    except Exception as exc:
        print(_msg("error", error=exc), file=sys.stderr)
        return 1

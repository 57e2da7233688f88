#!/usr/bin/env python3
"""
Kindle Clippings Export - Command Line Interface

    kindle-clippings "My Clippings.txt"
        lists the titles of all documents in the file

    kindle-clippings "My Clippings.txt" {json|org} "<title>\\n<title>..."
        exports highlights and notes of the given documents
"""

import argparse
import logging
import sys
from typing import List, Optional

from .collection import parse_clippings_file
from .export import EXPORTERS, export_clippings, format_doc_titles

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kindle-clippings",
        description="Export Kindle highlights and notes from My Clippings.txt",
    )
    parser.add_argument("clippings_file", nargs="?", help="Path to My Clippings.txt file")
    parser.add_argument("format", nargs="?",
                        help="Output format for exported clippings: " + " or ".join(sorted(EXPORTERS)))
    parser.add_argument("doc_titles", nargs="?",
                        help="Newline-separated titles of the documents to export")
    parser.add_argument("--encoding", help="Encoding of the clippings file (detected by default)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command line interface main function"""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if extra or args.clippings_file is None or (args.format is not None and args.doc_titles is None):
        parser.print_usage()
        return 0

    if args.format is not None and args.format not in EXPORTERS:
        parser.error(f"invalid format: {args.format!r} (choose from {', '.join(sorted(EXPORTERS))})")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    doc_titles = args.doc_titles.splitlines() if args.doc_titles is not None else None

    try:
        result = parse_clippings_file(args.clippings_file, doc_titles, args.encoding)
    except OSError as e:
        print(f"Error opening clippings file: '{args.clippings_file}'", file=sys.stderr)
        logger.debug(f"Open failed: {e}")
        return 1

    if result.failures:
        logger.warning(f"Skipped {len(result.failures)} malformed records")

    if doc_titles is None:
        output = format_doc_titles(result.doc_titles)
        # No titles, no output
        if output:
            print(output)
        return 0

    print(export_clippings(result.clippings, doc_titles, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())

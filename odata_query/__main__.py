"""
odata_query - Run as module

Usage: python -m odata_query [FILE] [--encoded | --map] [-v]

Reads a QueryRequest JSON document from FILE (or stdin) and prints the
resulting OData query string.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from odata_query.models import QueryRequest

logger = logging.getLogger("odata_query.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m odata_query",
        description="Render an OData query string from a JSON query request.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON request file ('-' or omitted reads stdin)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--encoded", action="store_true", help="Percent-encode option values")
    mode.add_argument("--map", action="store_true", help="Print the option map as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read(path: str, stdin: TextIO) -> str:
    if path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    """Run the renderer. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = QueryRequest.from_json(_read(args.file, stdin))
    except ValidationError as e:
        logger.error(f"invalid query request: errors={e.error_count()}")
        print(e, file=sys.stderr)
        return 2
    except OSError as e:
        logger.error(f"cannot read request: file={args.file}")
        print(e, file=sys.stderr)
        return 2

    query = request.to_query()
    if args.map:
        print(json.dumps(query.to_map()), file=stdout)
    elif args.encoded:
        print(query.to_encoded_string(), file=stdout)
    else:
        print(query.to_string(), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line decoder (``typed-form`` / ``python -m typed_form``).

Usage::

    typed-form 'number::user.age=30&array::tags=a,b'
    printf 'string::x=A\nstring::x=B\n' | typed-form --ignore-empty

Structured JSON output goes to stdout; errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Any

import orjson

from .decoder import parse_typed_form
from .errors import TypedFormError
from .model import ParseOptions

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typed-form",
        description="Decode typed form field names (query-string syntax) into JSON.",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Query string(s), e.g. 'number::age=30'. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on values that cannot be cast"
    )
    parser.add_argument(
        "--ignore-empty", action="store_true", help="Skip blank values and empty list items"
    )
    parser.add_argument(
        "--separator",
        default=",",
        help="Default separator for array fields (default: ',')",
    )
    parser.add_argument(
        "--compact", action="store_true", help="Print JSON on a single line"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def read_query(parts: list[str], stdin: IO[str]) -> str:
    """Join positional queries, or stdin lines, into one query string."""
    if parts:
        return "&".join(parts)
    lines = (line.strip() for line in stdin)
    return "&".join(line for line in lines if line)


def dump_json(obj: Any, dest: IO[str], *, compact: bool = False) -> None:
    option = 0 if compact else orjson.OPT_INDENT_2
    print(orjson.dumps(obj, option=option).decode("utf-8"), file=dest)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        options = ParseOptions.from_mapping({
            "strict": args.strict,
            "ignore_empty": args.ignore_empty,
            "default_array_separator": args.separator,
        })
        query = read_query(args.query, sys.stdin)
        log.debug("Decoding query: %s", query)
        record = parse_typed_form(query, options)
    except TypedFormError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    dump_json(record, sys.stdout, compact=args.compact)
    return 0


if __name__ == "__main__":
    sys.exit(main())

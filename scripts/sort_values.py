#!/usr/bin/env python3
"""Insert values into a sorted linked list and print the result."""

import argparse
import math
from typing import Callable, Dict, List, Optional, get_args

from pydantic import ValidationError

from sorted_linked_list.config import LogLevel
from sorted_linked_list.observability import configure_logging
from sorted_linked_list.sorted_list import SortedLinkedList


def ordered_float(raw: str) -> float:
    """Parse a float, rejecting NaN since it has no place in a total order."""
    value = float(raw)
    if math.isnan(value):
        raise ValueError(f"NaN is not orderable: {raw!r}")
    return value


CONVERTERS: Dict[str, Callable[[str], object]] = {
    "int": int,
    "float": ordered_float,
    "str": str,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort values with a sorted linked list")
    parser.add_argument("values", nargs="*", help="Values to insert")
    parser.add_argument(
        "--type", dest="value_type", choices=sorted(CONVERTERS), default="int",
        help="How to interpret the values (default: int)",
    )
    parser.add_argument(
        "--remove", action="append", default=[], metavar="VALUE",
        help="Remove the first occurrence of VALUE; may be repeated",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=get_args(LogLevel),
        help="Override SORTED_LIST_LOG_LEVEL",
    )
    return parser


def _convert(parser: argparse.ArgumentParser, convert, raw: List[str]) -> list:
    converted = []
    for item in raw:
        try:
            converted.append(convert(item))
        except ValueError:
            parser.error(f"invalid value: {item!r}")
    return converted


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValidationError:
        parser.error("invalid SORTED_LIST_LOG_LEVEL; pass --log-level instead")

    convert = CONVERTERS[args.value_type]
    values = SortedLinkedList(_convert(parser, convert, args.values))
    for item in _convert(parser, convert, args.remove):
        values.remove(item)

    print(values)
    print(f"size={values.size()}")
    if not values.is_empty():
        print(f"first={values.first()}")
        print(f"last={values.last()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python
"""
Demo — четыре способа вычислить одни и те же суммы

1. Необобщённые sum_ints / sum_floats
2. Обобщённая sum_ints_or_floats с явными type arguments
3. Обобщённая sum_ints_or_floats с выводом type arguments
4. Обобщённая sum_numbers с ограничением Number
"""

import argparse
import logging
from typing import Optional, Sequence

from src.core.math.summation import (
    sum_floats,
    sum_ints,
    sum_ints_or_floats,
    sum_numbers,
)
from src.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

DEMO_INTS: dict[str, int] = {
    "first": 34,
    "second": 12,
}

DEMO_FLOATS: dict[str, float] = {
    "first": 35.98,
    "second": 26.99,
}


def format_report(ints: dict[str, int], floats: dict[str, float]) -> list[str]:
    """
    Строки отчёта: по одной на каждый способ суммирования.

    Examples:
        >>> format_report({"a": 1}, {"a": 0.5})[0]
        'Non-Generic Sums: 1 and 0.5'
    """
    return [
        f"Non-Generic Sums: {sum_ints(ints)} and {sum_floats(floats)}",
        f"Generic Sums: {sum_ints_or_floats(ints, int)} and "
        f"{sum_ints_or_floats(floats, float)}",
        f"Generic Sums, type parameters inferred: {sum_ints_or_floats(ints)} and "
        f"{sum_ints_or_floats(floats)}",
        f"Generic Sums with Constraint: {sum_numbers(ints)} and {sum_numbers(floats)}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Печать четырёх строк с суммами демонстрационных коллекций.

    Command-line arguments:
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Print generic and non-generic sums.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG)
        logger.debug("Verbose logging enabled.")
    else:
        setup_logging(level=logging.WARNING)

    for line in format_report(DEMO_INTS, DEMO_FLOATS):
        print(line)

    logger.info("Demo completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

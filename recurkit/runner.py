"""Check cases for the sequence functions and a runner for every suite."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from recurkit.cases_scalar import (
    Case,
    even_digit_cases,
    odd_digit_count_cases,
    power_of_four_cases,
    tribonacci_cases,
)
from recurkit.digits import count_even_digits, is_digits_count_odd
from recurkit.powers import is_power_of_four
from recurkit.report import CheckResult, print_result, run_check
from recurkit.sequences import (
    binary_search,
    sum_absolute_values_of_negative_elements,
)
from recurkit.tribonacci import get_tribonacci_number

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def _numbered(entries: list[tuple[tuple[Any, ...], Any]]) -> list[Case]:
    return [
        (f"test{position:02d}", args, expected)
        for position, (args, expected) in enumerate(entries, start=1)
    ]


def negative_sum_cases() -> list[Case]:
    """Cases for summing absolute values of the negative elements."""
    return _numbered(
        [
            # equivalence classes
            (([1, -2, -3, 4, -5],), 10),
            (([-1, -2, -3],), 6),
            (([1, 2, 3],), 0),
            (([0, 0, 0],), 0),
            (([1, -2, 3],), 2),
            (([-1, 2, 3],), 1),
            (([1, 2, -3],), 3),
            (([1, -2, -3, -4, -5],), 14),
            (([-1, -2, -3, -4, 5],), 10),
            (([-1, -2, 3, -4, -5],), 12),
            (([5, -5, 5, -5],), 10),
            # boundary values
            (([-7],), 7),
            (([7],), 0),
            (([0],), 0),
            # no elements to take: a negative or zero size
            (([],), 0),
            (([],), 0),
            # no collection at all
            ((None,), 0),
            (([-100, 100, _INT_MAX, _INT_MIN],), -_INT_MIN + 100),
        ]
    )


def binary_search_cases() -> list[Case]:
    """Cases for halving search of a value in a sequence."""
    return _numbered(
        [
            (([1, -2, -3, 4, -5], 4), True),
            (([-1, -2, -3], 13), False),
            (([1, 2, 3], 1), True),
            (([1, 2, 3], 2), True),
            (([1, 2, 3], 3), True),
            (([1, 2, 3], 4), False),
            (([1, 2, 3], 0), False),
            (([7], 7), True),
            (([7], -7), False),
            (([], 0), False),
            ((None, 0), False),
        ]
    )


_SUITES: dict[str, tuple[Callable[..., Any], Callable[[], list[Case]]]] = {
    "even-digits": (count_even_digits, even_digit_cases),
    "power-of-four": (is_power_of_four, power_of_four_cases),
    "odd-digit-count": (is_digits_count_odd, odd_digit_count_cases),
    "tribonacci": (get_tribonacci_number, tribonacci_cases),
    "negative-sum": (sum_absolute_values_of_negative_elements, negative_sum_cases),
    "binary-search": (binary_search, binary_search_cases),
}


def _run_suites(names: Sequence[str], stream: TextIO) -> list[CheckResult]:
    results: list[CheckResult] = []
    for suite in names:
        func, make_cases = _SUITES[suite]
        cases = make_cases()
        print(f"[{suite}]", file=stream)
        print(f"Number of tests - {len(cases)}", file=stream)
        print(file=stream)
        for name, args, expected in cases:
            result = run_check(name, func, args, expected)
            print_result(result, stream)
            results.append(result)
        print(file=stream)
    return results


def run_all(stream: TextIO | None = None) -> list[CheckResult]:
    """Run every suite, writing a report to ``stream``; return all results."""
    out = sys.stdout if stream is None else stream
    return _run_suites(list(_SUITES), out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected suites (all by default); return 0 if every check passed."""
    parser = argparse.ArgumentParser(
        prog="recurkit",
        description="Run the built-in checks and report PASS or FAIL for each.",
    )
    parser.add_argument(
        "suites",
        nargs="*",
        choices=list(_SUITES),
        metavar="SUITE",
        help=f"suites to run: {', '.join(_SUITES)} (default: all)",
    )
    options = parser.parse_args(argv)
    names = options.suites or list(_SUITES)
    results = _run_suites(names, sys.stdout)
    failed = sum(1 for result in results if not result.passed)
    print(f"Passed {len(results) - failed} of {len(results)}")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
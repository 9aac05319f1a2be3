"""Check cases for the single-number functions.

Each case is a ``(name, args, expected)`` triple suitable for
:func:`recurkit.report.run_check`. An exception class as ``expected``
means the call must raise it.
"""

from __future__ import annotations

from typing import Any

Case = tuple[str, tuple[Any, ...], Any]

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)


def _numbered(pairs: list[tuple[Any, Any]]) -> list[Case]:
    return [
        (f"test{position:02d}", (argument,), expected)
        for position, (argument, expected) in enumerate(pairs, start=1)
    ]


def even_digit_cases() -> list[Case]:
    """Cases for counting even digits of an integer."""
    return _numbered(
        [
            # equivalence classes
            (1_234_567_890, 5),
            (-13_579, 0),
            (-24_680, 5),
            (22_222, 5),
            (11_111, 0),
            (121_212, 3),
            # boundary values
            (0, 1),
            (2, 1),
            (1, 0),
            (_LLONG_MAX, 9),
            (_LLONG_MIN, 10),
        ]
    )


def power_of_four_cases() -> list[Case]:
    """Cases for recognising exact powers of four."""
    return _numbered(
        [
            # equivalence classes
            (16, True),
            (64, True),
            (256, True),
            (1024, True),
            (2, False),
            (8, False),
            (10, False),
            (200, False),
            # boundary values
            (1, True),
            (4, True),
            (0, False),
            (-4, False),
            (_INT_MAX, False),
            (_INT_MIN, False),
        ]
    )


def odd_digit_count_cases() -> list[Case]:
    """Cases for checking whether an integer has an odd number of digits."""
    return _numbered(
        [
            # equivalence classes
            (123_456_789, True),
            (12_345_678, False),
            (-12_345, True),
            (-1_234, False),
            (1_000_000_000, False),
            # boundary values
            (0, True),
            (9, True),
            (10, False),
            (999, True),
            (-9_999, False),
            (_LLONG_MAX, True),
            (_LLONG_MIN, True),
            (922_337_203_685_477_580, False),
            (-922_337_203_685_477_580, False),
        ]
    )


def tribonacci_cases() -> list[Case]:
    """Cases for tribonacci numbers by 1-based index."""
    return _numbered(
        [
            # equivalence classes
            (5, 2),
            (6, 4),
            (7, 7),
            # boundary values
            (1, 0),
            (2, 0),
            (3, 1),
            (4, 1),
            # invalid indices
            (-1, ValueError),
            (-5, ValueError),
            # large indices
            (20, 19_513),
            (35, 181_997_601),
            (40, 3_831_006_429),
        ]
    )
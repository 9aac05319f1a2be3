"""Operations over sequences of integers."""

from collections.abc import Iterable, Sequence


def sum_absolute_values_of_negative_elements(values: Iterable[int] | None) -> int:
    """Return the sum of absolute values of the negative elements.

    A missing (None) or empty collection yields 0.
    """
    if values is None:
        return 0
    return sum(-value for value in values if value < 0)


def binary_search(values: Sequence[int] | None, value: int) -> bool:
    """Return True if ``value`` is found by halving search over ``values``.

    ``values`` is expected to be sorted in ascending order. A missing or
    empty sequence yields False.
    """
    if not values:
        return False
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        current = values[middle]
        if current == value:
            return True
        if current > value:
            last = middle - 1
        else:
            first = middle + 1
    return False
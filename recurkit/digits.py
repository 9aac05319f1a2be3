"""Digit-based predicates and counters for integers."""


def _digits(number: int) -> str:
    return str(abs(number))


def count_even_digits(number: int) -> int:
    """Return how many decimal digits of ``number`` are even (zero counts as even)."""
    return sum(1 for digit in _digits(number) if int(digit) % 2 == 0)


def is_digits_count_odd(number: int) -> bool:
    """Return True if ``number`` has an odd count of decimal digits, sign ignored."""
    return len(_digits(number)) % 2 == 1
"""Checks for exact powers."""


def is_power_of_four(number: int) -> bool:
    """Return True if ``number`` equals 4**k for some k >= 0."""
    if number <= 0:
        return False
    while number % 4 == 0:
        number //= 4
    return number == 1
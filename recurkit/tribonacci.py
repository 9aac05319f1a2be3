"""Tribonacci numbers: 0, 0, 1, 1, 2, 4, 7, 13, ..."""


def get_tribonacci_number(index: int) -> int:
    """Return the tribonacci number at 1-based ``index``.

    Raises ValueError when ``index`` is not positive.
    """
    if index <= 0:
        raise ValueError(f"tribonacci index must be positive, got {index}")
    a, b, c = 0, 0, 1
    for _ in range(index - 1):
        a, b, c = b, c, a + b + c
    return a
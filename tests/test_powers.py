import pytest

from recurkit.powers import is_power_of_four

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (16, True),
        (64, True),
        (256, True),
        (1024, True),
        (2, False),
        (8, False),
        (10, False),
        (200, False),
        (1, True),
        (4, True),
        (0, False),
        (-4, False),
        (INT_MAX, False),
        (INT_MIN, False),
    ],
)
def test_is_power_of_four(number, expected):
    assert is_power_of_four(number) is expected


def test_large_power_of_four():
    assert is_power_of_four(4**40) is True
    assert is_power_of_four(2 * 4**40) is False
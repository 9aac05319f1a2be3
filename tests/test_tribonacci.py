import pytest

from recurkit.tribonacci import get_tribonacci_number


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (5, 2),
        (6, 4),
        (7, 7),
        (1, 0),
        (2, 0),
        (3, 1),
        (4, 1),
        (20, 19_513),
        (35, 181_997_601),
        (40, 3_831_006_429),
    ],
)
def test_get_tribonacci_number(index, expected):
    assert get_tribonacci_number(index) == expected


@pytest.mark.parametrize("index", [-1, -5, 0])
def test_invalid_index_raises(index):
    with pytest.raises(ValueError):
        get_tribonacci_number(index)


def test_recurrence_holds():
    for n in range(4, 30):
        assert get_tribonacci_number(n) == (
            get_tribonacci_number(n - 1)
            + get_tribonacci_number(n - 2)
            + get_tribonacci_number(n - 3)
        )
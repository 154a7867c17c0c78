import pytest

from shuffle.sequence import shifted


@pytest.mark.parametrize(
    ("distance", "expected"),
    [
        (0, [0, 1, 2, 3]),
        (1, [1, 2, 3, 0]),
        (3, [3, 0, 1, 2]),
        (-1, [3, 0, 1, 2]),
        (-2, [2, 3, 0, 1]),
        (9, [1, 2, 3, 0]),
    ],
)
def test_shifted_rotation_convention(distance, expected):
    assert shifted([0, 1, 2, 3], distance) == expected


def test_shifted_returns_new_list():
    items = [5, 6, 7]
    result = shifted(items, 1)
    assert items == [5, 6, 7]
    assert result is not items


def test_shifted_empty_input():
    assert shifted([], 3) == []
    assert shifted((), -1) == []

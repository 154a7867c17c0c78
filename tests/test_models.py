import dataclasses

import pytest

from shuffle.models import StackSnapshot, Swipe, SwipeDirection


def test_swipe_is_immutable_value():
    swipe = Swipe(3, SwipeDirection.LEFT)
    assert swipe == Swipe(3, SwipeDirection.LEFT)
    assert swipe != Swipe(3, SwipeDirection.RIGHT)
    with pytest.raises(dataclasses.FrozenInstanceError):
        swipe.index = 4


def test_swipe_accepts_opaque_direction_tokens():
    token = ("custom", 1)
    assert Swipe(0, token).direction is token


@pytest.mark.parametrize(
    ("direction", "opposite"),
    [
        (SwipeDirection.LEFT, SwipeDirection.RIGHT),
        (SwipeDirection.RIGHT, SwipeDirection.LEFT),
        (SwipeDirection.UP, SwipeDirection.DOWN),
        (SwipeDirection.DOWN, SwipeDirection.UP),
    ],
)
def test_opposite_direction(direction, opposite):
    assert direction.opposite is opposite


def test_empty_snapshot():
    snap = StackSnapshot(remaining=(), swipes=())
    assert snap.top_index is None
    assert snap.total_index_count == 0

"""Tests for the rotate/flip state machine."""

import pytest
from models.transform_state import TransformState


def test_initial_state_is_identity():
    t = TransformState()
    assert (t.rotation, t.flip_horizontal, t.flip_vertical) == (0, False, False)
    assert t.is_identity()


def test_rotate_left_wraps_to_270():
    """Rotation stays non-negative."""
    assert TransformState().rotate_left().rotation == 270


def test_rotate_right_cycles_through_quarter_turns():
    t = TransformState()
    seen = []
    for _ in range(4):
        t = t.rotate_right()
        seen.append(t.rotation)
    assert seen == [90, 180, 270, 0]


@pytest.mark.parametrize("step", ["rotate_left", "rotate_right"])
def test_four_rotations_return_to_start(step):
    start = TransformState(rotation=90, flip_horizontal=True)
    t = start
    for _ in range(4):
        t = getattr(t, step)()
    assert t == start


def test_flip_is_involution():
    t = TransformState()
    assert t.toggle_flip_horizontal().toggle_flip_horizontal() == t
    assert t.toggle_flip_vertical().toggle_flip_vertical() == t


def test_flips_are_independent():
    t = TransformState().toggle_flip_horizontal()
    assert t.flip_horizontal and not t.flip_vertical


def test_rotation_normalized():
    assert TransformState(rotation=-90).rotation == 270
    assert TransformState(rotation=450).rotation == 90


def test_non_quarter_rotation_rejected():
    with pytest.raises(ValueError):
        TransformState(rotation=45)


def test_swaps_dimensions():
    assert TransformState(rotation=90).swaps_dimensions
    assert TransformState(rotation=270).swaps_dimensions
    assert not TransformState(rotation=180).swaps_dimensions

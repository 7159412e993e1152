"""Tests for the command reducer and render/export bookkeeping."""

import cv2
import numpy as np
import pytest
from engines.compositor import render
from engines.session import (
    Download, EditorSession, EditorState, FlipHorizontal, FlipVertical,
    RotateLeft, RotateRight, SelectFilter, SetAdjustment, load_state, reduce,
)
from models.adjustments import AdjustmentVector
from models.errors import MissingImageError
from models.render_snapshot import SourceImage
from models.transform_state import TransformState
from utils.test_images import generate_noise, generate_quadrants


@pytest.fixture
def source():
    return SourceImage(pixels=generate_quadrants(100, 50), name="quadrants.png")


@pytest.fixture
def session(source):
    s = EditorSession()
    s.load(source)
    return s


def test_reducer_commands(source):
    state = load_state(source)
    state = reduce(state, SelectFilter('amber'))
    state = reduce(state, SetAdjustment('contrast', 140))
    state = reduce(state, RotateLeft())
    state = reduce(state, FlipVertical())

    assert state.filter_id == 'amber'
    assert state.adjustments.contrast == 140
    assert state.transform == TransformState(rotation=270, flip_vertical=True)
    assert state.source is source


def test_reducer_rotate_right_and_flip_horizontal(source):
    state = reduce(reduce(load_state(source), RotateRight()), FlipHorizontal())
    assert state.transform == TransformState(rotation=90, flip_horizontal=True)


def test_download_leaves_state_unchanged(source):
    state = reduce(load_state(source), SelectFilter('gold'))
    assert reduce(state, Download()) is state


def test_unknown_filter_selects_none(source):
    state = reduce(load_state(source), SelectFilter('sparkle'))
    assert state.filter_id == 'none'


def test_adjustment_values_are_clamped(source):
    state = reduce(load_state(source), SetAdjustment('brightness', 500))
    assert state.adjustments.brightness == 200


def test_unknown_command_raises(source):
    with pytest.raises(TypeError):
        reduce(load_state(source), object())


def test_load_resets_edits(session, source):
    session.dispatch(SelectFilter('vibrant'))
    session.dispatch(SetAdjustment('saturation', 180))
    session.dispatch(RotateRight())

    session.load(SourceImage(pixels=generate_noise(20, 10)))

    state = session.state
    assert state.filter_id == 'none'
    assert state.adjustments == AdjustmentVector()
    assert state.transform.is_identity()
    assert session.latest_result is None


def test_snapshots_are_numbered_in_order(session):
    a = session.apply(SelectFilter('bw'))
    b = session.apply(RotateRight())
    assert b.sequence > a.sequence
    assert a.filter_id == 'bw'
    assert b.transform.rotation == 90


def test_stale_render_is_dropped(session):
    older = render(session.apply(SelectFilter('bw')))
    newer = render(session.apply(SelectFilter('negative')))

    assert session.commit(newer)
    assert not session.commit(older)
    assert session.latest_result is newer


def test_render_for_replaced_image_is_dropped(session):
    pending = render(session.apply(SelectFilter('bw')))
    session.load(SourceImage(pixels=generate_noise(8, 8)))
    assert not session.commit(pending)
    assert session.latest_result is None


def test_render_after_clear_is_dropped(session):
    pending = render(session.apply(RotateLeft()))
    session.clear()
    assert not session.has_image
    assert not session.commit(pending)


def test_apply_without_image_raises():
    with pytest.raises(MissingImageError):
        EditorSession().apply(RotateRight())


def test_download_without_image_raises():
    with pytest.raises(MissingImageError):
        EditorSession().dispatch(Download())


def test_download_exports_latest_render(session):
    result = session.dispatch(SelectFilter('bw'))
    exported = session.dispatch(Download())
    assert exported.filename == 'edited-image.png'
    assert exported.data.startswith(b'\x89PNG')
    assert result is session.latest_result


def test_upload_then_immediate_download(session, source):
    """Download right after load exports the unedited source pixels."""
    exported = session.dispatch(Download())

    assert exported.mime_type == 'image/png'
    decoded = cv2.imdecode(np.frombuffer(exported.data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    assert np.array_equal(cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA), source.pixels)
    assert session.latest_result is not None


def test_nan_adjustment_renders_unchanged_image(session, source):
    result = session.dispatch(SetAdjustment('brightness', float('nan')))
    assert session.state.adjustments.brightness == 100
    assert np.array_equal(result.pixels, source.pixels)


def test_dispatch_returns_rotated_render(session):
    result = session.dispatch(RotateRight())
    assert (result.width, result.height) == (50, 100)


def test_empty_state_has_no_image():
    assert not EditorState().has_image

"""Tests for encoding rendered buffers."""

import cv2
import numpy as np
import pytest
from engines.exporter import encode, export
from models.errors import ExportError, MissingImageError
from models.render_snapshot import RenderResult
from utils.test_images import generate_noise


def _decode_rgba(data: bytes) -> np.ndarray:
    img = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)


@pytest.fixture
def result():
    return RenderResult(pixels=generate_noise(32, 24), sequence=1, filter_id='none')


def test_png_export_is_lossless(result):
    exported = export(result)
    assert exported.filename == 'edited-image.png'
    assert exported.mime_type == 'image/png'
    assert exported.data.startswith(b'\x89PNG')
    assert np.array_equal(_decode_rgba(exported.data), result.pixels)


def test_encode_is_deterministic(result):
    assert encode(result.pixels) == encode(result.pixels.copy())


def test_webp_export_keeps_alpha(result):
    exported = export(result, 'webp')
    assert exported.filename == 'edited-image.webp'
    decoded = cv2.imdecode(np.frombuffer(exported.data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    assert decoded.shape == (24, 32, 4)


def test_jpeg_export_drops_alpha(result):
    exported = export(result, 'jpeg')
    assert exported.filename == 'edited-image.jpg'
    assert exported.mime_type == 'image/jpeg'
    decoded = cv2.imdecode(np.frombuffer(exported.data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    assert decoded.shape == (24, 32, 3)


def test_export_without_render_raises():
    with pytest.raises(MissingImageError):
        export(None)


def test_unsupported_format_raises(result):
    with pytest.raises(ExportError):
        export(result, 'gif')


def test_wrong_buffer_shape_raises():
    with pytest.raises(ExportError):
        encode(np.zeros((4, 4, 3), dtype=np.uint8))

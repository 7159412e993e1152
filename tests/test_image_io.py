"""Tests for upload validation and decoding."""

import cv2
import numpy as np
import pytest
from models.errors import InvalidImageError
from utils.image_io import (
    MAX_UPLOAD_BYTES, decode_image, guess_mime_type, load_image, save_bytes, validate_upload,
)
from utils.test_images import generate_quadrants


def _png_bytes(rgba: np.ndarray) -> bytes:
    ok, buf = cv2.imencode('.png', cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA))
    assert ok
    return buf.tobytes()


@pytest.mark.parametrize("mime_type", ['image/png', 'image/jpeg', 'image/webp'])
def test_accepted_types(mime_type):
    validate_upload(mime_type, 1024)


@pytest.mark.parametrize("mime_type", ['image/gif', 'text/plain', None])
def test_rejected_types(mime_type):
    with pytest.raises(InvalidImageError) as exc:
        validate_upload(mime_type, 1024)
    assert exc.value.title == "Invalid file type"


def test_size_limit_is_inclusive():
    validate_upload('image/png', MAX_UPLOAD_BYTES)
    with pytest.raises(InvalidImageError) as exc:
        validate_upload('image/png', MAX_UPLOAD_BYTES + 1)
    assert exc.value.title == "File too large"
    assert exc.value.description == "Please upload an image smaller than 10MB."


def test_decode_png_to_rgba():
    rgba = generate_quadrants(40, 20)
    source = decode_image(_png_bytes(rgba), name="q.png")
    assert (source.width, source.height) == (40, 20)
    assert np.array_equal(source.pixels, rgba)
    assert source.size_bytes > 0


def test_decode_opaque_jpeg_gets_alpha():
    ok, buf = cv2.imencode('.jpg', np.full((10, 12, 3), 128, dtype=np.uint8))
    assert ok
    source = decode_image(buf.tobytes(), name="gray.jpg", mime_type='image/jpeg')
    assert source.pixels.shape == (10, 12, 4)
    assert np.all(source.pixels[..., 3] == 255)


@pytest.mark.parametrize("data", [b'', b'not an image at all'])
def test_decode_garbage_raises(data):
    with pytest.raises(InvalidImageError) as exc:
        decode_image(data)
    assert exc.value.title == "Invalid image"


def test_load_image_from_disk(tmp_path):
    path = save_bytes(_png_bytes(generate_quadrants()), tmp_path / "photo.png")
    source = load_image(path)
    assert source.name == "photo.png"
    assert source.mime_type == 'image/png'
    assert (source.width, source.height) == (100, 50)


def test_load_rejects_gif(tmp_path):
    path = tmp_path / "anim.gif"
    path.write_bytes(b'GIF89a')
    with pytest.raises(InvalidImageError):
        load_image(path)


def test_load_rejects_oversized_file_before_decoding(tmp_path):
    path = tmp_path / "huge.png"
    with open(path, 'wb') as f:
        f.truncate(MAX_UPLOAD_BYTES + 1)
    with pytest.raises(InvalidImageError) as exc:
        load_image(path)
    assert exc.value.title == "File too large"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "nope.png")


def test_guess_webp():
    assert guess_mime_type("shot.webp") == 'image/webp'
    assert guess_mime_type("shot.JPG") == 'image/jpeg'

"""Image ingestion using OpenCV: upload validation and decoding to RGBA."""

import mimetypes
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from models.errors import InvalidImageError
from models.render_snapshot import SourceImage
from utils.logging import get_logger

logger = get_logger(__name__)

ACCEPTED_MIME_TYPES = ('image/jpeg', 'image/png', 'image/webp')
ACCEPTED_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.webp')
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

mimetypes.add_type('image/webp', '.webp')


def guess_mime_type(path: Union[str, Path]) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type


def validate_upload(mime_type: Optional[str], size_bytes: Optional[int]) -> None:
    """Reject unsupported types and files over 10 MiB before decoding."""
    if mime_type not in ACCEPTED_MIME_TYPES:
        raise InvalidImageError(
            "Invalid file type",
            "Please upload an image file (PNG, JPG, or WebP).",
        )
    if size_bytes is not None and size_bytes > MAX_UPLOAD_BYTES:
        raise InvalidImageError(
            "File too large",
            "Please upload an image smaller than 10MB.",
        )


def _to_rgba8(img: np.ndarray) -> np.ndarray:
    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = np.clip(img, 0, 255).astype(np.uint8)

    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    channels = img.shape[2]
    if channels == 1:
        return cv2.cvtColor(img[:, :, 0], cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ValueError(f"Unsupported channel count: {channels}")


def decode_image(data: bytes, name: str = "image.png", mime_type: str = "image/png") -> SourceImage:
    """Decode encoded image bytes into an RGBA ``SourceImage``."""
    validate_upload(mime_type, len(data))
    buffer = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
    if img is None:
        raise InvalidImageError("Invalid image", f"Could not decode {name}.")
    return SourceImage(
        pixels=_to_rgba8(img),
        name=name,
        mime_type=mime_type,
        size_bytes=len(data),
    )


def load_image(path: Union[str, Path]) -> SourceImage:
    """Validate and decode an image file from disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    mime_type = guess_mime_type(path)
    validate_upload(mime_type, path.stat().st_size)

    source = decode_image(path.read_bytes(), name=path.name, mime_type=mime_type)
    logger.info("Decoded %s (%s, %d bytes)", path.name, mime_type, source.size_bytes)
    return source


def save_bytes(data: bytes, path: Union[str, Path]) -> Path:
    """Write an exported payload to disk."""
    path = Path(path)
    path.write_bytes(data)
    return path

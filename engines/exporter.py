"""Encode rendered buffers into downloadable image files."""

from dataclasses import dataclass
from typing import Dict, Optional

import cv2
import numpy as np

from models.errors import ExportError, MissingImageError
from models.render_snapshot import RenderResult
from utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EXPORT_STEM = "edited-image"
DEFAULT_FORMAT = 'png'


@dataclass(frozen=True)
class ExportFormat:
    extension: str
    mime_type: str
    keeps_alpha: bool
    params: tuple


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    'png': ExportFormat('.png', 'image/png', True, (cv2.IMWRITE_PNG_COMPRESSION, 3)),
    # WebP quality above 100 selects lossless mode
    'webp': ExportFormat('.webp', 'image/webp', True, (cv2.IMWRITE_WEBP_QUALITY, 101)),
    'jpeg': ExportFormat('.jpg', 'image/jpeg', False, (cv2.IMWRITE_JPEG_QUALITY, 95)),
}


@dataclass(frozen=True)
class ExportedImage:
    filename: str
    mime_type: str
    data: bytes


def _get_format(fmt: str) -> ExportFormat:
    try:
        return EXPORT_FORMATS[fmt.lower()]
    except KeyError:
        raise ExportError(f"Unsupported export format: {fmt}") from None


def encode(pixels: np.ndarray, fmt: str = DEFAULT_FORMAT) -> bytes:
    """Encode an RGBA uint8 buffer. Output depends only on buffer content."""
    spec = _get_format(fmt)
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise ExportError(f"Expected (H, W, 4) uint8 buffer, got {pixels.shape} {pixels.dtype}")

    if spec.keeps_alpha:
        bgr = cv2.cvtColor(pixels, cv2.COLOR_RGBA2BGRA)
    else:
        bgr = cv2.cvtColor(pixels, cv2.COLOR_RGBA2BGR)

    try:
        ok, buffer = cv2.imencode(spec.extension, bgr, list(spec.params))
    except cv2.error as e:
        raise ExportError(f"Encoding {fmt} failed: {e}") from e
    if not ok:
        raise ExportError(f"Encoding {fmt} failed")
    return buffer.tobytes()


def export(result: Optional[RenderResult], fmt: str = DEFAULT_FORMAT) -> ExportedImage:
    """Encode the latest render into a named file payload."""
    if result is None:
        raise MissingImageError("Nothing to export: no image has been rendered")

    spec = _get_format(fmt)
    data = encode(result.pixels, fmt)
    filename = f"{DEFAULT_EXPORT_STEM}{spec.extension}"
    logger.info("Exported %s (%dx%d, %d bytes)", filename, result.width, result.height, len(data))
    return ExportedImage(filename=filename, mime_type=spec.mime_type, data=data)

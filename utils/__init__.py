"""Shared utilities."""

from .logging import get_logger
from .metrics import Timer
from .test_images import generate_gradient, generate_color_bars, generate_quadrants, generate_demo_image
from .image_io import (
    ACCEPTED_MIME_TYPES, MAX_UPLOAD_BYTES, validate_upload, guess_mime_type,
    decode_image, load_image, save_bytes,
)

__all__ = [
    'get_logger',
    'Timer',
    'generate_gradient',
    'generate_color_bars',
    'generate_quadrants',
    'generate_demo_image',
    'ACCEPTED_MIME_TYPES',
    'MAX_UPLOAD_BYTES',
    'validate_upload',
    'guess_mime_type',
    'decode_image',
    'load_image',
    'save_bytes',
]

"""Quarter-turn rotation and mirroring of pixel buffers."""

from typing import Tuple

import cv2
import numpy as np

from models.transform_state import TransformState

_ROTATE_CODES = {
    90: cv2.ROTATE_90_CLOCKWISE,
    180: cv2.ROTATE_180,
    270: cv2.ROTATE_90_COUNTERCLOCKWISE,
}


def output_size(width: int, height: int, transform: TransformState) -> Tuple[int, int]:
    """(width, height) of the canvas after applying ``transform``."""
    if transform.swaps_dimensions:
        return height, width
    return width, height


def _flip_code(transform: TransformState):
    if transform.flip_horizontal and transform.flip_vertical:
        return -1
    if transform.flip_horizontal:
        return 1
    if transform.flip_vertical:
        return 0
    return None


def apply_transform(pixels: np.ndarray, transform: TransformState) -> np.ndarray:
    """
    Mirror then rotate clockwise, returning a new array.

    Flips act in the source image's own axes before rotation, which is the
    same as drawing with translate -> rotate -> scale(+-1, +-1) on a canvas.
    The remap is exact, no interpolation.
    """
    out = np.array(pixels, copy=True, order='C')

    code = _flip_code(transform)
    if code is not None:
        out = cv2.flip(out, code)

    if transform.rotation:
        out = cv2.rotate(out, _ROTATE_CODES[transform.rotation])

    return np.ascontiguousarray(out)

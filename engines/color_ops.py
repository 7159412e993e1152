"""Elementary per-pixel color operations.

Every operation is an affine map on RGB: ``rgb' = rgb @ M.T + offset``.
Matrices follow the W3C Filter Effects definitions of the CSS filter
functions; contrast pivots at mid-gray 128.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

GRAYSCALE = 'grayscale'
INVERT = 'invert'
SEPIA = 'sepia'
SATURATE = 'saturate'
HUE_ROTATE = 'hue_rotate'
BRIGHTNESS = 'brightness'
CONTRAST = 'contrast'

# Value of ``amount`` that leaves pixels unchanged
NEUTRAL_AMOUNT = {
    GRAYSCALE: 0.0,
    INVERT: 0.0,
    SEPIA: 0.0,
    SATURATE: 1.0,
    HUE_ROTATE: 0.0,
    BRIGHTNESS: 1.0,
    CONTRAST: 1.0,
}

MID_GRAY = 128.0


@dataclass(frozen=True)
class ColorOp:
    kind: str
    amount: float

    def __post_init__(self):
        if self.kind not in NEUTRAL_AMOUNT:
            raise ValueError(f"Unknown color operation: {self.kind}")

    def is_noop(self) -> bool:
        if self.kind == HUE_ROTATE:
            return self.amount % 360 == 0
        return self.amount == NEUTRAL_AMOUNT[self.kind]


def grayscale(amount: float = 1.0) -> ColorOp:
    return ColorOp(GRAYSCALE, float(amount))


def invert(amount: float = 1.0) -> ColorOp:
    return ColorOp(INVERT, float(amount))


def sepia(amount: float = 1.0) -> ColorOp:
    return ColorOp(SEPIA, float(amount))


def saturate(factor: float) -> ColorOp:
    return ColorOp(SATURATE, float(factor))


def hue_rotate(degrees: float) -> ColorOp:
    return ColorOp(HUE_ROTATE, float(degrees))


def brightness(factor: float) -> ColorOp:
    return ColorOp(BRIGHTNESS, float(factor))


def contrast(factor: float) -> ColorOp:
    return ColorOp(CONTRAST, float(factor))


def _grayscale_matrix(a: float) -> np.ndarray:
    a = min(max(a, 0.0), 1.0)
    r = 1.0 - a
    return np.array([
        [0.2126 + 0.7874 * r, 0.7152 - 0.7152 * r, 0.0722 - 0.0722 * r],
        [0.2126 - 0.2126 * r, 0.7152 + 0.2848 * r, 0.0722 - 0.0722 * r],
        [0.2126 - 0.2126 * r, 0.7152 - 0.7152 * r, 0.0722 + 0.9278 * r],
    ])


def _sepia_matrix(a: float) -> np.ndarray:
    a = min(max(a, 0.0), 1.0)
    r = 1.0 - a
    return np.array([
        [0.393 + 0.607 * r, 0.769 - 0.769 * r, 0.189 - 0.189 * r],
        [0.349 - 0.349 * r, 0.686 + 0.314 * r, 0.168 - 0.168 * r],
        [0.272 - 0.272 * r, 0.534 - 0.534 * r, 0.131 + 0.869 * r],
    ])


def _saturate_matrix(s: float) -> np.ndarray:
    s = max(s, 0.0)
    return np.array([
        [0.213 + 0.787 * s, 0.715 - 0.715 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 + 0.285 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 - 0.715 * s, 0.072 + 0.928 * s],
    ])


def _hue_rotate_matrix(degrees: float) -> np.ndarray:
    theta = np.deg2rad(degrees)
    c, s = np.cos(theta), np.sin(theta)
    return np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ])


def affine_for(op: ColorOp) -> Tuple[np.ndarray, np.ndarray]:
    """(3x3 matrix, 3-vector offset) for one operation, in 0..255 units."""
    zero = np.zeros(3)
    if op.kind == GRAYSCALE:
        return _grayscale_matrix(op.amount), zero
    if op.kind == SEPIA:
        return _sepia_matrix(op.amount), zero
    if op.kind == SATURATE:
        return _saturate_matrix(op.amount), zero
    if op.kind == HUE_ROTATE:
        return _hue_rotate_matrix(op.amount), zero
    if op.kind == INVERT:
        a = min(max(op.amount, 0.0), 1.0)
        return np.eye(3) * (1.0 - 2.0 * a), np.full(3, 255.0 * a)
    if op.kind == BRIGHTNESS:
        f = max(op.amount, 0.0)
        return np.eye(3) * f, zero
    # contrast
    f = max(op.amount, 0.0)
    return np.eye(3) * f, np.full(3, MID_GRAY * (1.0 - f))


def apply_op(rgb: np.ndarray, op: ColorOp) -> np.ndarray:
    """Apply one operation to float RGB data and clamp to [0, 255]."""
    m, offset = affine_for(op)
    m = m.astype(np.float32)
    offset = offset.astype(np.float32)
    R, G, B = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    out = np.stack([
        R * m[i, 0] + G * m[i, 1] + B * m[i, 2] + offset[i]
        for i in range(3)
    ], axis=-1)
    return np.clip(out, 0.0, 255.0)


def apply_ops(rgb: np.ndarray, ops: Iterable[ColorOp]) -> np.ndarray:
    """Run ``ops`` in order over a uint8 (H, W, 3) array, returning uint8."""
    active = [op for op in ops if not op.is_noop()]
    if not active:
        return np.array(rgb, dtype=np.uint8, copy=True)

    work = rgb.astype(np.float32)
    for op in active:
        work = apply_op(work, op)
    return np.rint(work).astype(np.uint8)

"""Render inputs and outputs."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from models.adjustments import AdjustmentVector
from models.transform_state import TransformState


@dataclass(frozen=True, eq=False)
class SourceImage:
    """Decoded RGBA bitmap, loaded once per upload and never mutated."""

    pixels: np.ndarray
    name: str = "image.png"
    mime_type: str = "image/png"
    size_bytes: Optional[int] = None

    def __post_init__(self):
        pixels = np.asarray(self.pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) RGBA array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("Image has no pixels")
        frozen = np.array(pixels, copy=True, order='C')
        frozen.flags.writeable = False
        object.__setattr__(self, 'pixels', frozen)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything one render pass reads. Built fresh per interaction."""

    source: SourceImage
    filter_id: str = 'none'
    adjustments: AdjustmentVector = field(default_factory=AdjustmentVector)
    transform: TransformState = field(default_factory=TransformState)
    sequence: int = 0


@dataclass
class RenderResult:
    """Rendered RGBA buffer plus bookkeeping."""

    pixels: np.ndarray
    sequence: int
    filter_id: str
    render_time_ms: float = 0.0

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

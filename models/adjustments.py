"""Tonal adjustment parameters."""

import math
from dataclasses import dataclass, fields, replace
from typing import Dict


@dataclass(frozen=True)
class AdjustmentSpec:
    """Slider metadata for one adjustment."""

    label: str
    minimum: float
    maximum: float
    step: float
    neutral: float

    def clamp(self, value: float) -> float:
        """Clamp into range; NaN and infinities fall back to ``neutral``."""
        if not math.isfinite(value):
            return float(self.neutral)
        return float(min(max(value, self.minimum), self.maximum))


ADJUSTMENT_SPECS: Dict[str, AdjustmentSpec] = {
    'brightness': AdjustmentSpec('Brightness', 0, 200, 5, 100),
    'contrast': AdjustmentSpec('Contrast', 0, 200, 5, 100),
    'saturation': AdjustmentSpec('Saturation', 0, 200, 5, 100),
    'highlights': AdjustmentSpec('Highlights', -100, 100, 5, 0),
    'shadows': AdjustmentSpec('Shadows', -100, 100, 5, 0),
}


@dataclass(frozen=True)
class AdjustmentVector:
    """
    Five tonal adjustments.

    brightness/contrast/saturation are percentages (100 = unchanged),
    highlights/shadows are signed offsets (0 = unchanged). Values outside
    the declared range are clamped, never stored as given.
    """

    brightness: float = 100.0
    contrast: float = 100.0
    saturation: float = 100.0
    highlights: float = 0.0
    shadows: float = 0.0

    def __post_init__(self):
        for f in fields(self):
            clamped = ADJUSTMENT_SPECS[f.name].clamp(getattr(self, f.name))
            object.__setattr__(self, f.name, clamped)

    def with_value(self, name: str, value: float) -> 'AdjustmentVector':
        """Return a copy with one field replaced (and clamped)."""
        if name not in ADJUSTMENT_SPECS:
            raise KeyError(f"Unknown adjustment: {name}")
        return replace(self, **{name: value})

    def is_neutral(self) -> bool:
        return all(
            getattr(self, name) == spec.neutral
            for name, spec in ADJUSTMENT_SPECS.items()
        )

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in ADJUSTMENT_SPECS}

"""Named filter presets, each a fixed sequence of elementary color ops."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from engines.color_ops import (
    ColorOp, brightness, contrast, grayscale, hue_rotate, invert, saturate, sepia
)
from utils.logging import get_logger

logger = get_logger(__name__)

NONE_FILTER = 'none'

COLOR_GROUP = 'color'
MONOCHROME_GROUP = 'monochrome'


@dataclass(frozen=True)
class FilterPreset:
    name: str
    label: str
    group: str
    ops: Tuple[ColorOp, ...]


_PRESETS: Tuple[FilterPreset, ...] = (
    FilterPreset('vibrant', 'Vibrant', COLOR_GROUP, (saturate(1.5), contrast(1.1))),
    FilterPreset('negative', 'Negative', COLOR_GROUP, (invert(1.0),)),
    FilterPreset('natural', 'Natural', COLOR_GROUP, (brightness(1.05), saturate(1.05))),
    FilterPreset('luminous', 'Luminous', COLOR_GROUP, (brightness(1.15), contrast(1.05))),
    FilterPreset('dramatic', 'Dramatic', COLOR_GROUP,
                 (contrast(1.25), saturate(1.10), brightness(0.95))),
    FilterPreset('quiet', 'Quiet', COLOR_GROUP, (saturate(0.90), brightness(0.95))),
    FilterPreset('cosy', 'Cosy', COLOR_GROUP, (sepia(0.25), saturate(1.15), brightness(1.0))),
    FilterPreset('ethereal', 'Ethereal', COLOR_GROUP,
                 (brightness(1.10), contrast(0.90), saturate(0.90))),
    FilterPreset('bw', 'B&W', MONOCHROME_GROUP, (grayscale(1.0),)),
    FilterPreset('binary', 'Binary', MONOCHROME_GROUP,
                 (contrast(2.0), grayscale(1.0), brightness(1.5))),
    FilterPreset('amber', 'Amber', MONOCHROME_GROUP, (sepia(0.60),)),
    FilterPreset('gold', 'Gold', MONOCHROME_GROUP, (sepia(0.50), saturate(1.5), brightness(1.05))),
    FilterPreset('rosegold', 'Rose Gold', MONOCHROME_GROUP,
                 (sepia(0.30), saturate(1.3), hue_rotate(330))),
    FilterPreset('neutral', 'Neutral', MONOCHROME_GROUP, (saturate(0.80), brightness(1.0))),
    FilterPreset('coolrose', 'Cool Rose', MONOCHROME_GROUP, (saturate(0.90), hue_rotate(330))),
)

IDENTITY_PRESET = FilterPreset(NONE_FILTER, 'Original', COLOR_GROUP, ())

_BY_NAME: Dict[str, FilterPreset] = {p.name: p for p in _PRESETS}
_BY_NAME[NONE_FILTER] = IDENTITY_PRESET

FILTER_IDS: Tuple[str, ...] = (NONE_FILTER,) + tuple(p.name for p in _PRESETS)


def is_known(filter_id: str) -> bool:
    return filter_id in _BY_NAME


def normalize_filter_id(filter_id: Optional[str]) -> str:
    """Return ``filter_id`` if it names a preset, otherwise ``'none'``."""
    if filter_id in _BY_NAME:
        return filter_id
    logger.warning("Unknown filter %r, falling back to %r", filter_id, NONE_FILTER)
    return NONE_FILTER


def get_preset(filter_id: str) -> FilterPreset:
    return _BY_NAME[normalize_filter_id(filter_id)]


def resolve(filter_id: str) -> Tuple[ColorOp, ...]:
    """Ordered color ops for a filter. Unknown ids resolve to the empty sequence."""
    return get_preset(filter_id).ops


def list_presets(group: Optional[str] = None) -> List[FilterPreset]:
    """Presets in display order, excluding the identity entry."""
    if group is None:
        return list(_PRESETS)
    return [p for p in _PRESETS if p.group == group]

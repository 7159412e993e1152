"""Render pipeline: geometric transform, then filter and adjustment color ops."""

from typing import List, Optional

import numpy as np

from models.adjustments import AdjustmentVector
from models.errors import MissingImageError
from models.render_snapshot import RenderResult, RenderSnapshot
from engines.color_ops import ColorOp, apply_ops, brightness, contrast, saturate
from engines.filter_catalog import normalize_filter_id, resolve
from engines.geometry import apply_transform
from utils.logging import get_logger
from utils.metrics import Timer

logger = get_logger(__name__)


def build_color_pipeline(filter_id: str, adjustments: AdjustmentVector) -> List[ColorOp]:
    """
    Ordered color ops for one render.

    Filter preset first (catalog order), then brightness, contrast and
    saturation from the adjustment sliders. Highlights and shadows are
    carried on the vector but do not map to any pixel operation.
    """
    ops = list(resolve(filter_id))
    ops.append(brightness(adjustments.brightness / 100.0))
    ops.append(contrast(adjustments.contrast / 100.0))
    ops.append(saturate(adjustments.saturation / 100.0))
    return ops


def _apply_color(oriented: np.ndarray, ops: List[ColorOp]) -> np.ndarray:
    out = oriented.copy()
    out[..., :3] = apply_ops(oriented[..., :3], ops)
    return out


def render(snapshot: Optional[RenderSnapshot]) -> RenderResult:
    """Render one snapshot into a new RGBA uint8 buffer. Never mutates the source."""
    if snapshot is None or snapshot.source is None:
        raise MissingImageError("render() called without a source image")

    source = snapshot.source
    filter_id = normalize_filter_id(snapshot.filter_id)
    timer = Timer()

    oriented = timer.measure('transform', apply_transform, source.pixels, snapshot.transform)
    ops = build_color_pipeline(filter_id, snapshot.adjustments)
    pixels = timer.measure('color', _apply_color, oriented, ops)

    logger.debug(
        "Rendered #%d %dx%d filter=%s in %.1fms",
        snapshot.sequence, pixels.shape[1], pixels.shape[0], filter_id, timer.total_ms
    )

    return RenderResult(
        pixels=pixels,
        sequence=snapshot.sequence,
        filter_id=filter_id,
        render_time_ms=timer.total_ms,
    )

"""Data models for the editor: adjustments, transforms, snapshots, errors."""

from .adjustments import AdjustmentSpec, AdjustmentVector, ADJUSTMENT_SPECS
from .transform_state import TransformState
from .render_snapshot import SourceImage, RenderSnapshot, RenderResult
from .errors import EditorError, InvalidImageError, MissingImageError, ExportError

__all__ = [
    'AdjustmentSpec',
    'AdjustmentVector',
    'ADJUSTMENT_SPECS',
    'TransformState',
    'SourceImage',
    'RenderSnapshot',
    'RenderResult',
    'EditorError',
    'InvalidImageError',
    'MissingImageError',
    'ExportError',
]

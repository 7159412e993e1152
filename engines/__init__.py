"""Render engines - pure computation, no GUI dependencies."""

from .color_ops import (
    ColorOp, grayscale, invert, sepia, saturate, hue_rotate, brightness, contrast, apply_ops
)
from .filter_catalog import (
    NONE_FILTER, FILTER_IDS, FilterPreset, resolve, normalize_filter_id, get_preset, list_presets
)
from .geometry import apply_transform, output_size
from .compositor import build_color_pipeline, render
from .exporter import EXPORT_FORMATS, ExportedImage, encode, export
from .session import (
    EditorSession, EditorState, reduce, load_state,
    SelectFilter, SetAdjustment, RotateLeft, RotateRight, FlipHorizontal, FlipVertical, Download,
)

__all__ = [
    'ColorOp',
    'grayscale',
    'invert',
    'sepia',
    'saturate',
    'hue_rotate',
    'brightness',
    'contrast',
    'apply_ops',
    'NONE_FILTER',
    'FILTER_IDS',
    'FilterPreset',
    'resolve',
    'normalize_filter_id',
    'get_preset',
    'list_presets',
    'apply_transform',
    'output_size',
    'build_color_pipeline',
    'render',
    'EXPORT_FORMATS',
    'ExportedImage',
    'encode',
    'export',
    'EditorSession',
    'EditorState',
    'reduce',
    'load_state',
    'SelectFilter',
    'SetAdjustment',
    'RotateLeft',
    'RotateRight',
    'FlipHorizontal',
    'FlipVertical',
    'Download',
]

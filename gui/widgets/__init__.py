"""GUI widgets for the editor."""

from .image_viewer import PreviewView, PreviewPanel
from .editor_sidebar import EditorSidebar
from .toast import ToastNotification

__all__ = ['PreviewView', 'PreviewPanel', 'EditorSidebar', 'ToastNotification']

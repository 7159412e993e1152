"""Error types raised by the editor core."""


class EditorError(Exception):
    """Base class for editor failures."""


class InvalidImageError(EditorError, ValueError):
    """Upload rejected at the ingestion boundary (type, size or decode)."""

    def __init__(self, title: str, description: str):
        super().__init__(f"{title}: {description}")
        self.title = title
        self.description = description


class MissingImageError(EditorError, RuntimeError):
    """Render or export requested while no image is loaded."""


class ExportError(EditorError, RuntimeError):
    """Encoding the rendered buffer failed."""

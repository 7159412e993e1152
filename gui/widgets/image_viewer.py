"""Rendered-image preview: drop zone while empty, zoomable canvas once loaded."""

import numpy as np
from PySide6.QtWidgets import (
    QGraphicsView, QGraphicsScene, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame
)
from PySide6.QtGui import QPixmap, QImage, QColor, QPainter, QPen, QBrush, QFont
from PySide6.QtCore import Qt, Signal, QRectF

from utils.image_io import ACCEPTED_EXTENSIONS, MAX_UPLOAD_BYTES

ZOOM_STEP = 1.2
ZOOM_RANGE = (0.05, 16.0)
CHECKER_SIZE = 12


def rgba_to_pixmap(image: np.ndarray) -> QPixmap:
    """Convert an RGBA uint8 array to a QPixmap (data is copied)."""
    image = np.ascontiguousarray(image)
    h, w = image.shape[:2]
    qimage = QImage(image.data, w, h, 4 * w, QImage.Format.Format_RGBA8888)
    return QPixmap.fromImage(qimage.copy())


def dropped_image_path(mime_data) -> str | None:
    """Local path of the first dropped file if it has an accepted extension."""
    if not mime_data.hasUrls():
        return None
    for url in mime_data.urls()[:1]:
        path = url.toLocalFile()
        if path.lower().endswith(ACCEPTED_EXTENSIONS):
            return path
    return None


def _checker_brush() -> QBrush:
    tile = QPixmap(CHECKER_SIZE * 2, CHECKER_SIZE * 2)
    tile.fill(QColor(58, 58, 58))
    painter = QPainter(tile)
    painter.fillRect(0, 0, CHECKER_SIZE, CHECKER_SIZE, QColor(72, 72, 72))
    painter.fillRect(CHECKER_SIZE, CHECKER_SIZE, CHECKER_SIZE, CHECKER_SIZE, QColor(72, 72, 72))
    painter.end()
    return QBrush(tile)


class PreviewView(QGraphicsView):
    """
    Shows the latest render.

    With no image loaded the viewport is an upload area: clicking it asks
    for a file, dropping a PNG/JPG/WebP file emits its path. Transparent
    pixels are drawn over a checkerboard.
    """

    imageDropped = Signal(str)
    browseRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self._item = None
        self._drag_active = False
        self._checker = _checker_brush()

        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setBackgroundBrush(QColor(36, 36, 36))
        self.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        self.setMinimumSize(240, 240)
        self.setAcceptDrops(True)
        self.viewport().setAcceptDrops(True)

        self.clear_image()

    def has_image(self) -> bool:
        return self._item is not None

    def show_render(self, image: np.ndarray):
        """
        Display a rendered buffer.

        The zoom is kept across renders of the same size and refit when the
        canvas dimensions change (a quarter turn or a new image).
        """
        pixmap = rgba_to_pixmap(image)
        refit = self._item is None or self._item.pixmap().size() != pixmap.size()

        if self._item is None:
            self._scene.clear()
            self._item = self._scene.addPixmap(pixmap)
        else:
            self._item.setPixmap(pixmap)

        if refit:
            self._scene.setSceneRect(QRectF(pixmap.rect()))
            self.fit()
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.viewport().setCursor(Qt.CursorShape.OpenHandCursor)

    def clear_image(self):
        self._scene.clear()
        self._item = None
        self.resetTransform()
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.viewport().setCursor(Qt.CursorShape.PointingHandCursor)
        self.viewport().update()

    def fit(self):
        if self._item is not None:
            self.fitInView(self._item, Qt.AspectRatioMode.KeepAspectRatio)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        super().drawBackground(painter, rect)
        if self._item is not None:
            painter.fillRect(self._item.sceneBoundingRect().intersected(rect), self._checker)

    def paintEvent(self, event):
        super().paintEvent(event)
        if self._item is not None and not self._drag_active:
            return

        painter = QPainter(self.viewport())
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        area = self.viewport().rect().adjusted(16, 16, -16, -16)

        pen = QPen(QColor(74, 158, 255) if self._drag_active else QColor(90, 90, 90), 2)
        pen.setStyle(Qt.PenStyle.DashLine)
        painter.setPen(pen)
        painter.drawRoundedRect(area, 10, 10)

        if self._item is None:
            painter.setFont(QFont("Segoe UI", 11))
            painter.setPen(QColor(160, 160, 160))
            painter.drawText(area.adjusted(0, -20, 0, -20), Qt.AlignmentFlag.AlignCenter,
                             "Click to upload or drag and drop")
            painter.setFont(QFont("Segoe UI", 9))
            painter.setPen(QColor(110, 110, 110))
            limit_mb = MAX_UPLOAD_BYTES // (1024 * 1024)
            painter.drawText(area.adjusted(0, 20, 0, 20), Qt.AlignmentFlag.AlignCenter,
                             f"PNG, JPG or WebP up to {limit_mb}MB")
        painter.end()

    def mouseReleaseEvent(self, event):
        if self._item is None and event.button() == Qt.MouseButton.LeftButton:
            self.browseRequested.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event):
        if self._item is None:
            event.ignore()
            return
        factor = ZOOM_STEP if event.angleDelta().y() > 0 else 1 / ZOOM_STEP
        zoom = self.transform().m11() * factor
        if ZOOM_RANGE[0] <= zoom <= ZOOM_RANGE[1]:
            self.scale(factor, factor)
        event.accept()

    def _set_drag_active(self, active: bool):
        self._drag_active = active
        self.viewport().update()

    def dragEnterEvent(self, event):
        if dropped_image_path(event.mimeData()):
            event.acceptProposedAction()
            self._set_drag_active(True)
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if dropped_image_path(event.mimeData()):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragLeaveEvent(self, event):
        self._set_drag_active(False)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self._set_drag_active(False)
        path = dropped_image_path(event.mimeData())
        if path is None:
            event.ignore()
            return
        event.acceptProposedAction()
        self.imageDropped.emit(path)


class PreviewPanel(QWidget):
    """PreviewView under a header with size and filter badges plus Fit/Remove."""

    imageDropped = Signal(str)
    browseRequested = Signal()
    clearClicked = Signal()

    def __init__(self, title: str = "Preview", parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header = QFrame()
        header.setObjectName("previewHeader")
        header.setStyleSheet(
            "QFrame#previewHeader { background: #2c2c2c; border: 1px solid #3a3a3a; border-radius: 6px; }"
        )
        row = QHBoxLayout(header)
        row.setContentsMargins(10, 4, 6, 4)
        row.setSpacing(6)

        title_label = QLabel(title)
        title_label.setStyleSheet("font-weight: 600; background: transparent;")
        row.addWidget(title_label)

        self._size_badge = self._badge("#c8c8c8", "#454545")
        self._filter_badge = self._badge("#9fd0ff", "#263747")
        row.addWidget(self._size_badge)
        row.addWidget(self._filter_badge)
        row.addStretch()

        self._fit_btn = QPushButton("Fit")
        self._fit_btn.setToolTip("Fit to window")
        self._remove_btn = QPushButton("Remove")
        self._remove_btn.setToolTip("Remove image")
        for btn in (self._fit_btn, self._remove_btn):
            btn.setFixedHeight(24)
            row.addWidget(btn)
        layout.addWidget(header)

        self._view = PreviewView()
        layout.addWidget(self._view, stretch=1)

        self._fit_btn.clicked.connect(self._view.fit)
        self._remove_btn.clicked.connect(self.clearClicked.emit)
        self._view.imageDropped.connect(self.imageDropped.emit)
        self._view.browseRequested.connect(self.browseRequested.emit)

        self.clear_image()

    @staticmethod
    def _badge(color: str, background: str) -> QLabel:
        badge = QLabel()
        badge.setStyleSheet(
            f"color: {color}; background: {background}; font-size: 10px; "
            "padding: 2px 7px; border-radius: 4px;"
        )
        badge.setVisible(False)
        return badge

    def show_render(self, image: np.ndarray, filter_label: str = ""):
        self._view.show_render(image)
        h, w = image.shape[:2]
        self._size_badge.setText(f"{w}×{h}")
        self._size_badge.setVisible(True)
        self._filter_badge.setText(filter_label)
        self._filter_badge.setVisible(bool(filter_label))
        self._fit_btn.setEnabled(True)
        self._remove_btn.setVisible(True)

    def clear_image(self):
        self._view.clear_image()
        self._size_badge.setVisible(False)
        self._filter_badge.setVisible(False)
        self._fit_btn.setEnabled(False)
        self._remove_btn.setVisible(False)

"""Editor tab: sidebar controls, rendered preview and the editing session."""

from pathlib import Path
from typing import Dict

import numpy as np
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QSplitter, QFileDialog, QLabel
from PySide6.QtCore import Qt, QThreadPool, QSettings

from models.errors import EditorError, InvalidImageError
from models.render_snapshot import RenderResult, RenderSnapshot, SourceImage
from engines.exporter import DEFAULT_EXPORT_STEM
from engines.filter_catalog import NONE_FILTER, get_preset
from engines.session import (
    Command, EditorSession, FlipHorizontal, FlipVertical, RotateLeft, RotateRight,
    SelectFilter, SetAdjustment,
)
from utils.image_io import load_image, save_bytes
from utils.logging import get_logger
from gui.widgets.editor_sidebar import EditorSidebar
from gui.widgets.image_viewer import PreviewPanel
from gui.widgets.toast import ToastNotification
from gui.worker import RenderWorker

logger = get_logger(__name__)


class EditorTab(QWidget):
    """
    Main editing interface.

    Layout:
    - Left: EditorSidebar (filters / adjust / transform / download)
    - Center: rendered preview

    Every sidebar action becomes a session command; the resulting snapshot is
    rendered on a single-thread pool and only the newest result is shown.
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        self._session = EditorSession()
        self._settings = QSettings("PixelPalette", "PixelPalette")
        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(1)
        self._workers: Dict[int, RenderWorker] = {}

        self._init_ui()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._sidebar = EditorSidebar()
        self._sidebar.filterSelected.connect(lambda name: self._send(SelectFilter(name)))
        self._sidebar.adjustmentChanged.connect(lambda name, value: self._send(SetAdjustment(name, value)))
        self._sidebar.rotateLeftClicked.connect(lambda: self._send(RotateLeft()))
        self._sidebar.rotateRightClicked.connect(lambda: self._send(RotateRight()))
        self._sidebar.flipHorizontalClicked.connect(lambda: self._send(FlipHorizontal()))
        self._sidebar.flipVerticalClicked.connect(lambda: self._send(FlipVertical()))
        self._sidebar.downloadClicked.connect(self.on_download)
        splitter.addWidget(self._sidebar)

        self._viewer = PreviewPanel("Preview")
        self._viewer.imageDropped.connect(self.load_path)
        self._viewer.browseRequested.connect(self.on_open)
        self._viewer.clearClicked.connect(self.clear_session)
        splitter.addWidget(self._viewer)

        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([280, 800])
        main_layout.addWidget(splitter, stretch=1)

        self._status_label = QLabel("")
        self._status_label.setStyleSheet("color: #888; font-size: 11px;")
        main_layout.addWidget(self._status_label)

    # ---- Loading ----

    def on_open(self):
        """Handle File > Open."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Image",
            "",
            "Images (*.png *.jpg *.jpeg *.webp);;All Files (*)"
        )
        if file_path:
            self.load_path(file_path)

    def load_path(self, file_path: str):
        try:
            source = load_image(file_path)
        except InvalidImageError as e:
            ToastNotification.show_toast(self, e.title, e.description, "error")
            return
        except OSError as e:
            ToastNotification.show_toast(self, "Could not open file", str(e), "error")
            return
        self.load_source(source)
        ToastNotification.show_toast(self, "Image uploaded", "Your image is ready to edit.", "success")

    def load_demo(self, name: str, pixels: np.ndarray):
        self.load_source(SourceImage(pixels=pixels, name=f"{name}.png"))

    def load_source(self, source: SourceImage):
        snapshot = self._session.load(source)
        self._viewer.clear_image()
        self._sidebar.set_has_image(True)
        self._sync_sidebar()
        self._submit(snapshot)
        self._update_statusbar(f"Loaded: {source.name} ({source.width}x{source.height})")

    def clear_session(self):
        self._session.clear()
        self._viewer.clear_image()
        self._sidebar.set_has_image(False)
        self._status_label.setText("")
        self._update_statusbar("Image removed")

    # ---- Editing ----

    def _send(self, command: Command):
        if not self._session.has_image:
            return
        try:
            snapshot = self._session.apply(command)
        except EditorError as e:
            ToastNotification.show_toast(self, "Edit failed", str(e), "error")
            return
        self._sync_sidebar()
        self._submit(snapshot)

    def _sync_sidebar(self):
        state = self._session.state
        self._sidebar.sync_state(state.filter_id, state.adjustments, state.transform)

    def _submit(self, snapshot: RenderSnapshot):
        worker = RenderWorker(snapshot)
        # Bound methods of this widget are queued onto the UI thread
        worker.signals.finished.connect(self._on_render_finished)
        worker.signals.error.connect(self._on_render_error)
        self._workers[snapshot.sequence] = worker
        self._pool.start(worker)

    def _on_render_finished(self, result: RenderResult):
        self._workers.pop(result.sequence, None)
        if not self._session.commit(result):
            return
        label = "" if result.filter_id == NONE_FILTER else get_preset(result.filter_id).label
        self._viewer.show_render(result.pixels, label)
        self._status_label.setText(
            f"{result.width}×{result.height} rendered in {result.render_time_ms:.1f}ms"
        )

    def _on_render_error(self, error_msg: str, sequence: int):
        self._workers.pop(sequence, None)
        logger.error("Render #%d failed: %s", sequence, error_msg)
        ToastNotification.show_toast(self, "Render failed", error_msg, "error")

    # ---- Export ----

    def on_download(self):
        """Encode the latest render and save it where the user chooses."""
        if not self._session.has_image or self._session.latest_result is None:
            ToastNotification.show_toast(
                self, "Download failed", "There is no rendered image to save.", "error"
            )
            return

        last_folder = self._settings.value("last_export_folder", "")
        default_path = str(Path(last_folder) / f"{DEFAULT_EXPORT_STEM}.png") if last_folder \
            else f"{DEFAULT_EXPORT_STEM}.png"
        file_path, selected = QFileDialog.getSaveFileName(
            self, "Save Edited Image",
            default_path,
            "PNG (*.png);;WebP (*.webp);;JPEG (*.jpg)"
        )
        if not file_path:
            return

        fmt = 'png'
        if selected.startswith("WebP") or file_path.lower().endswith('.webp'):
            fmt = 'webp'
        elif selected.startswith("JPEG") or file_path.lower().endswith(('.jpg', '.jpeg')):
            fmt = 'jpeg'

        try:
            exported = self._session.export(fmt)
            saved = save_bytes(exported.data, file_path)
        except (EditorError, OSError) as e:
            logger.error("Download failed: %s", e)
            ToastNotification.show_toast(
                self, "Download failed", "There was an error saving your image.", "error"
            )
            return

        self._settings.setValue("last_export_folder", str(saved.parent))
        self._update_statusbar(f"Saved: {saved.name}")
        ToastNotification.show_toast(self, "Image downloaded", "Your edited image has been saved.", "success")

    def _update_statusbar(self, message: str):
        """Update main window status bar if available."""
        main_window = self.window()
        if hasattr(main_window, 'statusBar'):
            main_window.statusBar().showMessage(message)

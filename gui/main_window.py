"""Main application window."""

from PySide6.QtWidgets import QMainWindow, QStatusBar, QMessageBox
from PySide6.QtGui import QAction

from utils.test_images import generate_demo_image
from gui.editor_tab import EditorTab

# App metadata
APP_VERSION = "1.0"
APP_NAME = "Pixel Palette"

DEMO_IMAGES = [
    ("Photo (Natural)", "photo"),
    ("Gradient", "gradient"),
    ("Color Bars", "color_bars"),
    ("Quadrants", "quadrants"),
]

ACCENT = "#4a9eff"

DARK_THEME = f"""
    QMainWindow, QWidget {{
        background-color: #202020;
        color: #e4e4e4;
        font-size: 12px;
    }}
    QPushButton {{
        background-color: #333;
        border: 1px solid #464646;
        border-radius: 6px;
        padding: 6px 10px;
    }}
    QPushButton:hover {{ background-color: #3c3c3c; }}
    QPushButton:disabled {{ color: #666; border-color: #383838; }}
    QPushButton:checked {{
        background-color: #26374d;
        border: 2px solid {ACCENT};
    }}
    QPushButton#primaryButton {{
        background-color: {ACCENT};
        border-color: {ACCENT};
        color: #fff;
        font-weight: 600;
    }}
    QSlider::groove:horizontal {{ height: 4px; background: #3a3a3a; border-radius: 2px; }}
    QSlider::sub-page:horizontal {{ background: {ACCENT}; border-radius: 2px; }}
    QSlider::handle:horizontal {{
        background: #f0f0f0;
        width: 14px;
        margin: -6px 0;
        border-radius: 7px;
    }}
    QTabWidget::pane {{ border: 1px solid #383838; border-radius: 6px; }}
    QTabBar::tab {{ background: #2a2a2a; padding: 6px 16px; color: #999; }}
    QTabBar::tab:selected {{ background: #202020; color: #fff; border-bottom: 2px solid {ACCENT}; }}
    QScrollArea {{ border: none; }}
    QStatusBar {{ background-color: #1a1a1a; color: #8a8a8a; }}
"""


class MainWindow(QMainWindow):
    """Single-image editor window: filters, adjustments, rotate/flip, download."""

    def __init__(self):
        super().__init__()

        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(1100, 720)

        self._editor = EditorTab()
        self.setCentralWidget(self._editor)

        self._init_menu()
        self._init_statusbar()
        self._apply_dark_theme()

    def _init_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")

        open_action = QAction("&Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._editor.on_open)
        file_menu.addAction(open_action)

        download_action = QAction("&Download Image...", self)
        download_action.setShortcut("Ctrl+S")
        download_action.triggered.connect(self._editor.on_download)
        file_menu.addAction(download_action)

        file_menu.addSeparator()

        clear_action = QAction("&Remove Image", self)
        clear_action.setShortcut("Ctrl+W")
        clear_action.triggered.connect(self._editor.clear_session)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        demo_menu = menubar.addMenu("&Demo")
        for label, key in DEMO_IMAGES:
            action = QAction(label, self)
            action.triggered.connect(lambda checked, k=key: self._load_demo_image(k))
            demo_menu.addAction(action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _init_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready. Load an image to begin.")

    def _load_demo_image(self, key: str):
        demo_image = generate_demo_image(key)
        if demo_image is None:
            QMessageBox.warning(self, "Demo Error", f"Could not load demo image: {key}")
            return
        self._editor.load_demo(key, demo_image)

    def _show_about(self):
        QMessageBox.about(
            self, f"About {APP_NAME}",
            f"<b>{APP_NAME}</b> {APP_VERSION}<br><br>"
            "Preview color filters, tonal adjustments and rotate/flip on a single "
            "image, then download the rendered result as PNG, WebP or JPEG."
        )

    def _apply_dark_theme(self):
        self.setStyleSheet(DARK_THEME)

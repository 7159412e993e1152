"""Dismissible toast notifications."""

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsOpacityEffect
from PySide6.QtCore import Qt, QTimer, QPropertyAnimation, QEasingCurve

TOAST_STYLES = {
    "success": {"bg": "#2d5a3d", "border": "#4ade80", "icon": "✓"},
    "error": {"bg": "#5a2d2d", "border": "#f87171", "icon": "✗"},
    "warning": {"bg": "#5a4a2d", "border": "#fbbf24", "icon": "⚠"},
    "info": {"bg": "#2d3d5a", "border": "#60a5fa", "icon": "ℹ"},
}

TOAST_MARGIN = 16
TOAST_SPACING = 8


class ToastNotification(QWidget):
    """Title + description toast shown over ``parent``; click to dismiss."""

    _active_toasts = []

    def __init__(self, parent: QWidget, title: str, description: str = "",
                 toast_type: str = "info", duration: int = 3000):
        super().__init__(parent)

        self._duration = duration
        self._closing = False
        style = TOAST_STYLES.get(toast_type, TOAST_STYLES["info"])

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip("Click to dismiss")
        self.setStyleSheet(f"""
            ToastNotification {{
                background-color: {style['bg']};
                border: 1px solid {style['border']};
                border-radius: 6px;
            }}
            QLabel {{ background: transparent; }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(10)

        icon_label = QLabel(style["icon"])
        icon_label.setStyleSheet(f"color: {style['border']}; font-size: 14px; font-weight: bold;")
        layout.addWidget(icon_label, alignment=Qt.AlignmentFlag.AlignTop)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(2)
        title_label = QLabel(title)
        title_label.setStyleSheet("color: #f0f0f0; font-size: 12px; font-weight: 600;")
        text_layout.addWidget(title_label)
        if description:
            desc_label = QLabel(description)
            desc_label.setStyleSheet("color: #d0d0d0; font-size: 11px;")
            desc_label.setWordWrap(True)
            desc_label.setMaximumWidth(300)
            text_layout.addWidget(desc_label)
        layout.addLayout(text_layout)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)

        self.adjustSize()

    def _fade(self, end: float, duration: int, curve) -> QPropertyAnimation:
        anim = QPropertyAnimation(self._opacity, b"opacity", self)
        anim.setDuration(duration)
        anim.setStartValue(self._opacity.opacity())
        anim.setEndValue(end)
        anim.setEasingCurve(curve)
        return anim

    def show_animated(self):
        ToastNotification._active_toasts.append(self)
        self._reposition_all(self.parent())
        self.show()
        self.raise_()
        self._fade(0.95, 250, QEasingCurve.Type.OutCubic).start(
            QPropertyAnimation.DeletionPolicy.DeleteWhenStopped
        )
        if self._duration > 0:
            QTimer.singleShot(self._duration, self.dismiss)

    def dismiss(self):
        if self._closing:
            return
        self._closing = True
        anim = self._fade(0.0, 200, QEasingCurve.Type.InCubic)
        anim.finished.connect(self._cleanup)
        anim.start(QPropertyAnimation.DeletionPolicy.DeleteWhenStopped)

    def mousePressEvent(self, event):
        self.dismiss()
        event.accept()

    def _cleanup(self):
        parent = self.parent()
        if self in ToastNotification._active_toasts:
            ToastNotification._active_toasts.remove(self)
        self.close()
        self.deleteLater()
        self._reposition_all(parent)

    @staticmethod
    def _reposition_all(parent):
        """Stack the parent's toasts downward from its top-right corner."""
        if parent is None:
            return
        y = TOAST_MARGIN
        for toast in ToastNotification._active_toasts:
            if toast.parent() is not parent:
                continue
            toast.move(parent.width() - toast.width() - TOAST_MARGIN, y)
            y += toast.height() + TOAST_SPACING

    @classmethod
    def show_toast(cls, parent: QWidget, title: str, description: str = "",
                   toast_type: str = "info", duration: int = 3000):
        toast = cls(parent, title, description, toast_type, duration)
        toast.show_animated()
        return toast

"""Editor sidebar: filter grid, adjustment sliders, transform buttons, download."""

from typing import Dict

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
    QSlider, QTabWidget, QButtonGroup, QStackedWidget, QScrollArea
)
from PySide6.QtCore import Qt, Signal

from models.adjustments import ADJUSTMENT_SPECS, AdjustmentVector
from engines.filter_catalog import (
    COLOR_GROUP, IDENTITY_PRESET, MONOCHROME_GROUP, NONE_FILTER, list_presets
)

FILTER_COLUMNS = 3


class EditorSidebar(QWidget):
    """
    Left-hand control panel.

    Emits one signal per user action; holds no editing state of its own
    beyond what is needed to reflect the session in the widgets.
    """

    filterSelected = Signal(str)
    adjustmentChanged = Signal(str, float)
    rotateLeftClicked = Signal()
    rotateRightClicked = Signal()
    flipHorizontalClicked = Signal()
    flipVerticalClicked = Signal()
    downloadClicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumWidth(240)
        self.setMaximumWidth(320)

        self._filter_buttons: Dict[str, QPushButton] = {}
        self._sliders: Dict[str, QSlider] = {}
        self._value_labels: Dict[str, QLabel] = {}
        self._syncing = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 8, 0)
        layout.setSpacing(8)

        title = QLabel("Editor Tools")
        title.setStyleSheet("font-size: 16px; font-weight: 600; color: #fff;")
        layout.addWidget(title)

        self._stack = QStackedWidget()
        empty = QLabel("Upload an image to start editing")
        empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty.setWordWrap(True)
        empty.setStyleSheet("color: #888;")
        self._stack.addWidget(empty)

        tabs = QTabWidget()
        tabs.addTab(self._create_filters_tab(), "Filters")
        tabs.addTab(self._create_adjust_tab(), "Adjust")
        tabs.addTab(self._create_transform_tab(), "Transform")
        self._stack.addWidget(tabs)
        layout.addWidget(self._stack, stretch=1)

        self._download_btn = QPushButton("Download Image")
        self._download_btn.setObjectName("primaryButton")
        self._download_btn.clicked.connect(self.downloadClicked.emit)
        layout.addWidget(self._download_btn)

        self.set_has_image(False)

    def _create_filters_tab(self) -> QWidget:
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(4, 8, 4, 8)
        layout.setSpacing(10)

        self._filter_group = QButtonGroup(self)
        self._filter_group.setExclusive(True)

        color_presets = [IDENTITY_PRESET] + list_presets(COLOR_GROUP)
        layout.addWidget(self._section_label("Color Filters"))
        layout.addLayout(self._filter_grid(color_presets))

        layout.addWidget(self._section_label("Monochrome"))
        layout.addLayout(self._filter_grid(list_presets(MONOCHROME_GROUP)))
        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        return scroll

    def _filter_grid(self, presets) -> QGridLayout:
        grid = QGridLayout()
        grid.setSpacing(6)
        for i, preset in enumerate(presets):
            btn = QPushButton(preset.label)
            btn.setCheckable(True)
            btn.setMinimumHeight(56)
            btn.clicked.connect(lambda checked, name=preset.name: self.filterSelected.emit(name))
            self._filter_group.addButton(btn)
            self._filter_buttons[preset.name] = btn
            grid.addWidget(btn, i // FILTER_COLUMNS, i % FILTER_COLUMNS)
        return grid

    def _create_adjust_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setContentsMargins(4, 8, 4, 8)
        layout.setSpacing(12)

        for name, spec in ADJUSTMENT_SPECS.items():
            header = QHBoxLayout()
            header.addWidget(QLabel(spec.label))
            header.addStretch()
            value_label = QLabel(f"{spec.neutral:g}")
            value_label.setStyleSheet("color: #999; font-size: 11px;")
            header.addWidget(value_label)
            layout.addLayout(header)

            slider = QSlider(Qt.Orientation.Horizontal)
            slider.setRange(int(spec.minimum), int(spec.maximum))
            slider.setSingleStep(int(spec.step))
            slider.setPageStep(int(spec.step) * 4)
            slider.setValue(int(spec.neutral))
            slider.valueChanged.connect(lambda value, n=name: self._on_slider_changed(n, value))
            layout.addWidget(slider)

            self._sliders[name] = slider
            self._value_labels[name] = value_label

        layout.addStretch()
        return tab

    def _create_transform_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setContentsMargins(4, 8, 4, 8)
        layout.setSpacing(8)

        layout.addWidget(self._section_label("Rotate"))
        rotate_row = QHBoxLayout()
        left_btn = QPushButton("⟲ Left")
        left_btn.clicked.connect(self.rotateLeftClicked.emit)
        right_btn = QPushButton("⟳ Right")
        right_btn.clicked.connect(self.rotateRightClicked.emit)
        rotate_row.addWidget(left_btn)
        rotate_row.addWidget(right_btn)
        layout.addLayout(rotate_row)

        layout.addWidget(self._section_label("Flip"))
        flip_row = QHBoxLayout()
        h_btn = QPushButton("⇋ Horizontal")
        h_btn.clicked.connect(self.flipHorizontalClicked.emit)
        v_btn = QPushButton("⇵ Vertical")
        v_btn.clicked.connect(self.flipVerticalClicked.emit)
        flip_row.addWidget(h_btn)
        flip_row.addWidget(v_btn)
        layout.addLayout(flip_row)

        self._transform_label = QLabel("")
        self._transform_label.setStyleSheet("color: #888; font-size: 11px;")
        layout.addWidget(self._transform_label)

        layout.addStretch()
        return tab

    def _section_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-weight: 600; color: #ddd;")
        return label

    def _on_slider_changed(self, name: str, value: int):
        self._value_labels[name].setText(str(value))
        if not self._syncing:
            self.adjustmentChanged.emit(name, float(value))

    def set_has_image(self, has_image: bool):
        self._stack.setCurrentIndex(1 if has_image else 0)
        self._download_btn.setVisible(has_image)

    def sync_state(self, filter_id: str, adjustments: AdjustmentVector, transform):
        """Reflect session state in the widgets without re-emitting signals."""
        self._syncing = True
        try:
            btn = self._filter_buttons.get(filter_id) or self._filter_buttons[NONE_FILTER]
            btn.setChecked(True)
            for name, value in adjustments.as_dict().items():
                self._sliders[name].setValue(int(round(value)))
            flips = [label for flag, label in (
                (transform.flip_horizontal, "H"), (transform.flip_vertical, "V")
            ) if flag]
            flip_text = "+".join(flips) if flips else "none"
            self._transform_label.setText(f"Rotation {transform.rotation}° · Flip {flip_text}")
        finally:
            self._syncing = False

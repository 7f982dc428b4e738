"""
Element Detail: picture, number/symbol/mass card with family badges, melting and boiling
points with a unit picker, and the description.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QButtonGroup,
    QFrame,
    QFormLayout,
    QWidget,
)
from PySide6.QtCore import Qt

from ..db.element import Element, Family
from ..services.preferences import get_temperature_unit, set_temperature_unit
from ..services.temperature import TemperatureUnit, UNIT_LABELS, convert_temperature, format_mass
from ..theme import BADGE_HALOGEN, BADGE_RADIOACTIVE, family_color, text_color_for
from .element_visual import element_pixmap
from .theme import badge_stylesheet


def _panel() -> QFrame:
    frame = QFrame()
    frame.setObjectName("panel")
    return frame


def _badge(text: str, background: str, foreground: str = "#ffffff") -> QLabel:
    label = QLabel(text)
    label.setStyleSheet(badge_stylesheet(background, foreground))
    return label


class ElementDetailDialog(QDialog):
    """Read-only view of one element."""

    def __init__(self, element: Element, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.element = element
        self.setWindowTitle(element.name)
        self.setMinimumSize(760, 560)
        layout = QVBoxLayout(self)

        top = QHBoxLayout()
        top.addLayout(self._build_picture_column())
        top.addStretch()
        top.addLayout(self._build_info_column())
        layout.addLayout(top)

        desc_panel = _panel()
        desc_layout = QVBoxLayout(desc_panel)
        desc = QLabel(element.desc)
        desc.setWordWrap(True)
        desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        desc.setStyleSheet("font-size: 13pt;")
        desc_layout.addWidget(desc)
        layout.addWidget(desc_panel)

        close_btn = QPushButton("Back")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn, alignment=Qt.AlignmentFlag.AlignRight)

    def _build_picture_column(self) -> QVBoxLayout:
        col = QVBoxLayout()
        name = QLabel(self.element.name)
        name.setStyleSheet(f"font-size: 24pt; font-weight: bold; color: {family_color(self.element.family)};")
        col.addWidget(name)
        picture = QLabel()
        picture.setPixmap(element_pixmap(self.element, 300))
        col.addWidget(picture)
        col.addStretch()
        return col

    def _build_info_column(self) -> QVBoxLayout:
        col = QVBoxLayout()
        card = _panel()
        card_layout = QVBoxLayout(card)
        card_layout.addWidget(QLabel(f"Element #{self.element.id}"))
        symbol = QLabel(self.element.symbol)
        symbol.setAlignment(Qt.AlignmentFlag.AlignCenter)
        symbol.setStyleSheet("font-size: 20pt; font-weight: bold;")
        card_layout.addWidget(symbol)
        mass = QLabel(f"Atomic Mass: {format_mass(self.element.mass)}")
        mass.setAlignment(Qt.AlignmentFlag.AlignCenter)
        mass.setStyleSheet("font-weight: bold;")
        card_layout.addWidget(mass)

        badges = QHBoxLayout()
        badges.addStretch()
        family = self.element.family
        badges.addWidget(_badge(family.value, family_color(family), text_color_for(family)))
        if self.element.is_halogen:
            badges.addWidget(_badge("Halogen", BADGE_HALOGEN, "#1c1c1e"))
        elif family is Family.ACTINIDE:
            badges.addWidget(_badge("Radioactive", BADGE_RADIOACTIVE))
        badges.addStretch()
        card_layout.addLayout(badges)
        col.addWidget(card)

        if self.element.melting is not None or self.element.boiling is not None:
            col.addWidget(self._build_temperature_panel())
        col.addStretch()
        return col

    def _build_temperature_panel(self) -> QFrame:
        panel = _panel()
        layout = QVBoxLayout(panel)

        picker = QHBoxLayout()
        picker.setSpacing(0)
        self.unit_group = QButtonGroup(self)
        self.unit_group.setExclusive(True)
        current = get_temperature_unit()
        for unit in TemperatureUnit:
            btn = QPushButton(UNIT_LABELS[unit])
            btn.setCheckable(True)
            btn.setChecked(unit == current)
            self.unit_group.addButton(btn, int(unit))
            picker.addWidget(btn)
        self.unit_group.idClicked.connect(self._on_unit_changed)
        layout.addLayout(picker)

        form = QFormLayout()
        self.melting_label: QLabel | None = None
        self.boiling_label: QLabel | None = None
        if self.element.melting is not None:
            self.melting_label = QLabel()
            form.addRow("Melting point:", self.melting_label)
        if self.element.boiling is not None:
            self.boiling_label = QLabel()
            form.addRow("Boiling point:", self.boiling_label)
        layout.addLayout(form)
        self._show_temperatures(current)
        return panel

    def _show_temperatures(self, unit: int) -> None:
        if self.melting_label is not None and self.element.melting is not None:
            self.melting_label.setText(convert_temperature(unit, self.element.melting))
        if self.boiling_label is not None and self.element.boiling is not None:
            self.boiling_label.setText(convert_temperature(unit, self.element.boiling))

    def _on_unit_changed(self, unit: int) -> None:
        self._show_temperatures(unit)
        set_temperature_unit(unit)

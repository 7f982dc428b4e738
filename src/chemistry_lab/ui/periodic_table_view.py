"""
Periodic table page: one tile per element in a grid, click opens Element Detail.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QPushButton,
    QScrollArea,
)
from PySide6.QtCore import Qt, Signal

from ..db.element import Element
from ..services.app_state import AppState
from ..services.table_layout import load_table, F_BLOCK_FIRST_ROW
from ..theme import text_color_for
from .theme import TILE_WIDTH, TILE_HEIGHT, tile_stylesheet


class ElementTile(QPushButton):
    """Colored square with atomic number, symbol and mass."""

    def __init__(self, element: Element, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.element = element
        self.setFixedSize(TILE_WIDTH, TILE_HEIGHT)
        self.setStyleSheet(tile_stylesheet(element.family))
        self.setToolTip(f"{element.name} ({element.family.value})")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(3, 1, 3, 2)
        layout.setSpacing(0)
        number = QLabel(str(element.id))
        symbol = QLabel(element.symbol)
        mass = QLabel(str(element.mass))
        fg = text_color_for(element.family)
        number.setStyleSheet(f"font-size: 7pt; font-weight: 600; color: {fg}; background: transparent;")
        symbol.setStyleSheet(f"font-size: 11pt; font-weight: bold; color: {fg}; background: transparent;")
        mass.setStyleSheet(f"font-size: 6pt; font-weight: 600; color: {fg}; background: transparent;")
        symbol.setAlignment(Qt.AlignmentFlag.AlignCenter)
        mass.setAlignment(Qt.AlignmentFlag.AlignCenter)
        for label in (number, symbol, mass):
            # Clicks go to the button
            label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
            layout.addWidget(label)


class PeriodicTableView(QWidget):
    """Builds the table from the store each time refresh() is called."""

    elementSelected = Signal(object)

    def __init__(self, app_state: AppState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.app_state = app_state
        layout = QVBoxLayout(self)

        title = QLabel("Periodic Table of Elements")
        title.setObjectName("page_title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)
        self.subtitle = QLabel("Select an element")
        self.subtitle.setObjectName("page_subtitle")
        self.subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.subtitle)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        layout.addWidget(self._scroll)

        self.refresh()

    def refresh(self) -> None:
        """Reopen the store, rebuild every tile, close the store."""
        conn = self.app_state.open_store()
        try:
            slots = load_table(conn)
        finally:
            self.app_state.release(conn)

        # setWidget deletes the previous host and its tiles
        host = QWidget()
        self._scroll.setWidget(host)
        outer = QHBoxLayout(host)
        outer.addStretch()
        grid = QGridLayout()
        grid.setSpacing(2)
        outer.addLayout(grid)
        outer.addStretch()

        if not slots:
            self.subtitle.setText("No element data available")
            return
        self.subtitle.setText("Select an element")
        grid.setRowMinimumHeight(F_BLOCK_FIRST_ROW - 1, TILE_HEIGHT // 2)
        for slot in slots:
            tile = ElementTile(slot.element)
            tile.clicked.connect(lambda checked=False, e=slot.element: self.elementSelected.emit(e))
            grid.addWidget(tile, slot.row, slot.column)

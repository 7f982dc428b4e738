"""
Main window: menu bar, navigation (Home | Periodic Table | Quiz), stacked pages.
Element Detail opens as a dialog over the table.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QStackedWidget,
    QHBoxLayout,
    QMessageBox,
    QApplication,
    QListWidget,
    QListWidgetItem,
)
from PySide6.QtCore import Qt, QByteArray
from PySide6.QtGui import QColor, QFontMetrics, QPalette

from ..db.element import Element
from ..services.app_state import AppState
from ..services import preferences


def _restore_window_geometry(window: QMainWindow) -> None:
    """Restore main window size and position from preferences if available."""
    geom_b64 = preferences.get_window_geometry()
    if not geom_b64:
        return
    data = QByteArray.fromBase64(geom_b64.encode("utf-8"))
    if data.isEmpty():
        return
    window.restoreGeometry(data)


def _save_window_geometry(window: QMainWindow) -> None:
    """Persist main window size and position to preferences."""
    data = window.saveGeometry()
    if data.isEmpty():
        return
    preferences.set_window_geometry(data.toBase64().data().decode("utf-8"))


class MainWindow(QMainWindow):
    """Main application window with navigation and stacked content."""

    PAGES = ["Home", "Periodic Table", "Quiz"]

    def __init__(self, app_state: AppState) -> None:
        super().__init__()
        self.app_state = app_state
        self.setWindowTitle("Chemistry Lab")
        self.setMinimumSize(800, 600)
        self.resize(1000, 700)
        _restore_window_geometry(self)

        self._build_menu_bar()
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)

        self.stacked = QStackedWidget()
        self.stacked.setObjectName("main_content")
        from .home_view import HomeView
        from .periodic_table_view import PeriodicTableView
        from .quiz_view import QuizView
        self.home_view = HomeView()
        self.table_view = PeriodicTableView(app_state)
        self.quiz_view = QuizView(app_state)
        self.stacked.addWidget(self.home_view)
        self.stacked.addWidget(self.table_view)
        self.stacked.addWidget(self.quiz_view)
        self.home_view.openTable.connect(lambda: self._go_to_page(self.PAGES.index("Periodic Table")))
        self.home_view.openQuiz.connect(self._open_quiz)
        self.table_view.elementSelected.connect(self._on_element_selected)

        self.nav_list = QListWidget()
        self.nav_list.setObjectName("nav_list")
        self.nav_list.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        # Force selection palette to theme colors so platform default never appears
        from .theme import COLOR_BACKGROUND, COLOR_TEXT_HEADER
        pal = self.nav_list.palette()
        pal.setColor(QPalette.ColorRole.Highlight, QColor(COLOR_BACKGROUND))
        pal.setColor(QPalette.ColorRole.HighlightedText, QColor(COLOR_TEXT_HEADER))
        self.nav_list.setPalette(pal)
        for name in self.PAGES:
            self.nav_list.addItem(QListWidgetItem(name))
        self.nav_list.setCurrentRow(0)
        self.nav_list.currentRowChanged.connect(self.stacked.setCurrentIndex)
        fm = QFontMetrics(self.nav_list.font())
        text_width = max(fm.horizontalAdvance(name) for name in self.PAGES)
        self.nav_list.setFixedWidth(text_width + 48)

        main_layout.addWidget(self.nav_list)
        main_layout.addWidget(self.stacked, 1)

    def closeEvent(self, event) -> None:
        _save_window_geometry(self)
        self.app_state.close()
        super().closeEvent(event)

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")
        file_menu.addAction("&Reload Table", self._on_reload_table)
        file_menu.addSeparator()
        file_menu.addAction("E&xit", QApplication.quit)
        view_menu = menubar.addMenu("&View")
        for i, name in enumerate(self.PAGES):
            view_menu.addAction(name, lambda checked=False, idx=i: self._go_to_page(idx))
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction("&About", self._on_about)

    def _go_to_page(self, index: int) -> None:
        self.nav_list.setCurrentRow(index)
        self.stacked.setCurrentIndex(index)

    def _open_quiz(self) -> None:
        self.quiz_view.new_question()
        self._go_to_page(self.PAGES.index("Quiz"))

    def _on_element_selected(self, element: Element) -> None:
        from .element_detail import ElementDetailDialog
        ElementDetailDialog(element, self).exec()

    def _on_reload_table(self) -> None:
        self.table_view.refresh()
        self.statusBar().showMessage("Periodic table reloaded.", 3000)

    def _on_about(self) -> None:
        QMessageBox.about(
            self,
            "About Chemistry Lab",
            "Chemistry Lab\n\nExplore the elements of the periodic table and test yourself with a quiz.",
        )

"""
Dark lab theme: QPalette and QSS for the app shell, plus stylesheet helpers for
periodic table tiles and element badges.
"""

from PySide6.QtGui import QPalette, QColor, QFont
from PySide6.QtWidgets import QApplication

from ..theme import family_color, text_color_for


# Slate background, teal accent
COLOR_BACKGROUND = "#101418"
COLOR_SURFACE = "#161b22"
COLOR_CARD = "#1f2630"
COLOR_BORDER = "#2d3743"
COLOR_ACCENT = "#2ec4b6"
COLOR_ACCENT_DIM = "#1d6f68"
COLOR_TEXT = "#e6edf3"
COLOR_TEXT_HEADER = "#f5f7fa"
COLOR_TEXT_MUTED = "#8b98a5"

# Periodic table tile size in px
TILE_WIDTH = 42
TILE_HEIGHT = 50


def dark_palette() -> QPalette:
    p = QPalette()
    roles = {
        QPalette.ColorRole.Window: COLOR_BACKGROUND,
        QPalette.ColorRole.WindowText: COLOR_TEXT,
        QPalette.ColorRole.Base: COLOR_SURFACE,
        QPalette.ColorRole.AlternateBase: COLOR_CARD,
        QPalette.ColorRole.Text: COLOR_TEXT,
        QPalette.ColorRole.Button: COLOR_CARD,
        QPalette.ColorRole.ButtonText: COLOR_TEXT,
        QPalette.ColorRole.Highlight: COLOR_ACCENT_DIM,
        QPalette.ColorRole.HighlightedText: COLOR_TEXT_HEADER,
        QPalette.ColorRole.Link: COLOR_ACCENT,
        QPalette.ColorRole.PlaceholderText: COLOR_TEXT_MUTED,
    }
    for role, color in roles.items():
        p.setColor(role, QColor(color))
    return p


def dark_stylesheet() -> str:
    """QSS for the window shell: menus, nav list, page titles, panels and buttons."""
    return f"""
        QMainWindow, QDialog, QWidget {{
            background-color: {COLOR_BACKGROUND};
            color: {COLOR_TEXT};
        }}
        QMenuBar, QMenu {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_TEXT};
        }}
        QMenuBar::item:selected, QMenu::item:selected {{
            background-color: {COLOR_ACCENT_DIM};
        }}
        QPushButton {{
            background-color: {COLOR_CARD};
            border: 1px solid {COLOR_BORDER};
            border-radius: 6px;
            padding: 6px 14px;
        }}
        QPushButton:hover {{
            border-color: {COLOR_ACCENT};
        }}
        QPushButton:pressed, QPushButton:checked {{
            background-color: {COLOR_ACCENT_DIM};
            color: {COLOR_TEXT_HEADER};
        }}
        QPushButton#pill {{
            border-radius: 16px;
            padding: 8px 22px;
            font-weight: 600;
        }}
        QLabel#page_title {{
            color: {COLOR_TEXT_HEADER};
            font-size: 24pt;
            font-weight: bold;
        }}
        QLabel#page_subtitle {{
            color: {COLOR_TEXT_MUTED};
            font-size: 13pt;
        }}
        QFrame#panel {{
            background-color: {COLOR_CARD};
            border-radius: 12px;
        }}
        QFrame#panel QLabel {{
            background-color: transparent;
        }}
        QListWidget#nav_list {{
            background-color: {COLOR_SURFACE};
            border: none;
            outline: none;
        }}
        QListWidget#nav_list::item {{
            color: {COLOR_TEXT_MUTED};
            padding: 10px 12px;
            border-left: 3px solid transparent;
        }}
        QListWidget#nav_list::item:selected {{
            background-color: {COLOR_BACKGROUND};
            color: {COLOR_TEXT_HEADER};
            border-left: 3px solid {COLOR_ACCENT};
        }}
        QStackedWidget#main_content {{
            border-left: 1px solid {COLOR_BORDER};
        }}
    """


def tile_stylesheet(family: str) -> str:
    """QSS for a periodic table tile in the family color."""
    return (
        f"QPushButton {{ background-color: {family_color(family)}; color: {text_color_for(family)};"
        f" border: none; border-radius: 5px; padding: 0; }}"
        f"QPushButton:hover {{ border: 2px solid {COLOR_TEXT_HEADER}; }}"
    )


def badge_stylesheet(background: str, foreground: str = "#ffffff") -> str:
    """QSS for a capsule badge label."""
    return (
        f"QLabel {{ background-color: {background}; color: {foreground};"
        f" border-radius: 10px; padding: 4px 10px; font-weight: 600; }}"
    )


def apply_theme(app: QApplication) -> None:
    """Apply the palette, stylesheet and saved base font size."""
    app.setPalette(dark_palette())
    app.setStyleSheet(dark_stylesheet())
    from ..services.preferences import get_base_font_size
    size = get_base_font_size()
    if size > 0:
        font = QFont(app.font())
        font.setPointSize(size)
        app.setFont(font)

"""Styles QSS pour GPX Replay.
Palette sombre, accents bleus pour les actions et cyan pour la lecture.
"""

# Palette de couleurs
COLOR_BACKGROUND = "#1e1e1e"
COLOR_PANEL = "#252525"
COLOR_SURFACE = "#2d2d2d"
COLOR_ACCENT = "#2a4d69"
COLOR_ACCENT_SUCCESS = "#4caf50"
COLOR_PLAYBACK = "#00E5FF"
COLOR_TEXT_PRIMARY = "#e0e0e0"
COLOR_TEXT_SECONDARY = "#b0b0b0"
COLOR_BORDER = "#3a3a3a"
COLOR_HOVER = "#333333"
COLOR_PRESSED = "#1a1a1a"
COLOR_INPUT_BG = "#181818"

WINDOW_STYLE = f"""
QMainWindow {{
    background-color: {COLOR_BACKGROUND};
    color: {COLOR_TEXT_PRIMARY};
}}
QWidget {{
    background-color: {COLOR_BACKGROUND};
    color: {COLOR_TEXT_PRIMARY};
    font-family: 'Segoe UI', 'Roboto', 'Inter', sans-serif;
    font-size: 13px;
}}
QDockWidget::title {{
    text-align: left;
    background: {COLOR_PANEL};
    padding-left: 12px;
    padding-top: 8px;
    padding-bottom: 8px;
    font-weight: bold;
    border-bottom: 1px solid {COLOR_BORDER};
}}
QScrollBar:vertical {{
    border: none;
    background: {COLOR_BACKGROUND};
    width: 12px;
    margin: 0px;
}}
QScrollBar::handle:vertical {{
    background: #4a4a4a;
    min-height: 20px;
    margin: 2px;
}}
QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}
QStatusBar {{
    background: {COLOR_PANEL};
    color: {COLOR_TEXT_SECONDARY};
    border-top: 1px solid {COLOR_BORDER};
}}
"""

MENU_BAR_STYLE = f"""
QMenuBar {{
    background-color: {COLOR_PANEL};
    color: {COLOR_TEXT_PRIMARY};
    border-bottom: 1px solid {COLOR_BORDER};
}}
QMenuBar::item {{
    background-color: transparent;
    padding: 4px 10px;
}}
QMenuBar::item:selected {{
    background-color: #3E3E3E;
}}
QMenu {{
    background-color: #2A2A2A;
    color: {COLOR_TEXT_PRIMARY};
    border: 1px solid #3E3E3E;
}}
QMenu::item {{
    padding: 4px 20px;
}}
QMenu::item:selected {{
    background-color: {COLOR_ACCENT};
    color: white;
}}
"""

BUTTON_STYLE = f"""
QPushButton {{
    background-color: {COLOR_ACCENT};
    color: white;
    border: 1px solid {COLOR_BORDER};
    padding: 10px 18px;
    font-weight: 700;
}}
QPushButton:hover {{
    background-color: #3b6d93;
    border-color: #4b7aa5;
}}
QPushButton:pressed {{
    background-color: #203548;
}}
QPushButton:disabled {{
    background-color: {COLOR_PANEL};
    color: {COLOR_TEXT_SECONDARY};
}}
"""

BUTTON_SECONDARY_STYLE = f"""
QPushButton {{
    background-color: {COLOR_PANEL};
    color: {COLOR_TEXT_PRIMARY};
    border: 1px solid {COLOR_BORDER};
    padding: 8px 14px;
    font-weight: 600;
}}
QPushButton:hover {{
    background-color: {COLOR_HOVER};
    border-color: #5a5a5a;
}}
QPushButton:pressed {{
    background-color: {COLOR_PRESSED};
}}
"""

# Boutons de vitesse (cochables, un seul actif)
SPEED_BUTTON_STYLE = f"""
QToolButton {{
    background: #2a2a2a;
    color: {COLOR_TEXT_PRIMARY};
    border: none;
    padding: 6px 10px;
    min-width: 36px;
    font-weight: 700;
}}
QToolButton:hover {{ background: {COLOR_HOVER}; }}
QToolButton:checked {{
    background: {COLOR_ACCENT};
    color: white;
}}
"""

GROUPBOX_STYLE = f"""
QGroupBox {{
    border: 1px solid {COLOR_BORDER};
    margin-top: 16px;
    padding: 18px 14px 14px 14px;
    font-weight: 700;
    color: {COLOR_TEXT_SECONDARY};
    background-color: {COLOR_PANEL};
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 5px;
    left: 10px;
    color: {COLOR_ACCENT};
    background-color: {COLOR_PANEL};
}}
"""

LABEL_STYLE = f"""
QLabel {{
    color: {COLOR_TEXT_PRIMARY};
    background-color: transparent;
    font-weight: 500;
}}
"""

INPUT_STYLE = f"""
QLineEdit {{
    background: {COLOR_INPUT_BG};
    color: {COLOR_TEXT_PRIMARY};
    border: 1px solid {COLOR_BORDER};
    padding: 6px;
}}
QLineEdit:focus {{
    border-color: {COLOR_ACCENT};
}}
"""

LIST_STYLE = f"""
QListWidget {{
    background: {COLOR_INPUT_BG};
    color: {COLOR_TEXT_PRIMARY};
    border: 1px solid {COLOR_BORDER};
}}
QListWidget::item {{
    padding: 4px;
}}
"""

DROP_ZONE_STYLE = f"""
QLabel {{
    border: 2px dashed {COLOR_BORDER};
    color: {COLOR_TEXT_SECONDARY};
    background-color: {COLOR_INPUT_BG};
    padding: 18px;
    font-style: italic;
}}
"""

DROP_ZONE_ACTIVE_STYLE = f"""
QLabel {{
    border: 2px dashed {COLOR_PLAYBACK};
    color: {COLOR_PLAYBACK};
    background-color: {COLOR_SURFACE};
    padding: 18px;
    font-weight: bold;
}}
"""

SLIDER_STYLE = f"""
QSlider::groove:horizontal {{
    height: 6px;
    background: {COLOR_INPUT_BG};
    border: 1px solid {COLOR_BORDER};
}}
QSlider::sub-page:horizontal {{
    background: {COLOR_ACCENT};
}}
QSlider::handle:horizontal {{
    background: {COLOR_PLAYBACK};
    width: 12px;
    margin: -5px 0;
    border-radius: 6px;
}}
"""

PROGRESS_BAR_STYLE = f"""
QProgressBar {{
    border: none;
    border-radius: 4px;
    text-align: center;
    background-color: {COLOR_INPUT_BG};
    color: white;
    height: 8px;
}}
QProgressBar::chunk {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {COLOR_ACCENT}, stop:1 {COLOR_ACCENT_SUCCESS});
    border-radius: 4px;
}}
"""

"""
To-Do Tracker dark stylesheet (QSS).
"""

BG_PRIMARY = "#0f0f1a"
BG_SECONDARY = "#161625"
BG_TERTIARY = "#1e1e33"
BG_INPUT = "#1a1a2e"
SURFACE = "#252542"

ACCENT = "#8b5cf6"
ACCENT_GLOW = "#a78bfa"
ACCENT_DEEP = "#6d28d9"
SUCCESS = "#10b981"

TEXT_PRIMARY = "#f1f0f7"
TEXT_SECONDARY = "#8b89a6"
TEXT_DONE = "#4a4862"

BORDER = "#2a2a45"
DANGER = "#ef4444"

MAIN_STYLESHEET = f"""
QWidget {{
    background-color: {BG_PRIMARY};
    color: {TEXT_PRIMARY};
    font-family: "Segoe UI Variable", "Segoe UI", sans-serif;
    font-size: 13px;
}}

QLabel#headerLabel {{
    font-size: 17px;
    font-weight: 700;
}}

QLineEdit#taskInput {{
    background-color: {BG_INPUT};
    border: 1px solid {BORDER};
    border-radius: 8px;
    padding: 6px 10px;
}}
QLineEdit#taskInput:focus {{
    border: 1px solid {ACCENT};
}}

QPushButton#addButton, QPushButton#clearCompletedButton {{
    background-color: {ACCENT};
    color: white;
    border: none;
    border-radius: 8px;
    padding: 6px 14px;
    font-weight: 600;
}}
QPushButton#addButton:hover, QPushButton#clearCompletedButton:hover {{
    background-color: {ACCENT_DEEP};
}}

QCheckBox#tagChip {{
    background-color: {BG_TERTIARY};
    border: 1px solid {BORDER};
    border-radius: 6px;
    padding: 2px 6px;
}}
QCheckBox#tagChip:checked {{
    border: 1px solid {ACCENT_GLOW};
}}

QFrame#taskItem {{
    background-color: {BG_TERTIARY};
    border: 1px solid {BORDER};
    border-radius: 10px;
}}
QFrame#taskItemDone {{
    background-color: {BG_SECONDARY};
    border: 1px solid {BORDER};
    border-radius: 10px;
}}
QLabel#taskTitleDone {{
    color: {TEXT_DONE};
    text-decoration: line-through;
}}
QLabel#taskTags {{
    color: {TEXT_SECONDARY};
    font-size: 11px;
}}

QPushButton#deleteButton {{
    background: transparent;
    color: {TEXT_SECONDARY};
    border: none;
    font-size: 15px;
}}
QPushButton#deleteButton:hover {{
    color: {DANGER};
}}

QLabel#emptyLabel {{
    color: {TEXT_SECONDARY};
}}

QStatusBar {{
    color: {TEXT_SECONDARY};
}}
"""

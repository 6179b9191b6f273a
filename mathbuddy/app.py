"""
app.py
Math Buddy calculator window, using PyQt6.

The window holds one CalculatorState and replaces it on every click or key
press; all arithmetic lives in mathbuddy.state.

Features:
 - Digits, decimal point, + - × ÷, chained left-to-right evaluation
 - AC (clear) and DEL (backspace)
 - Pending operand and operator shown above the display
 - Keyboard support (digits, . + - * /, Enter or =, Esc, Backspace)
 - Ctrl+C copies the display
 - Light/Dark theme toggle, remembered in the config file

To run:
    mathbuddy
or
    python -m mathbuddy
"""

import logging
import os
import sys

from PyQt6 import QtWidgets, QtCore, QtGui

from . import keys
from .config import load_config, save_config
from .state import INITIAL

logger = logging.getLogger(__name__)


def setup_logging():
    level_name = os.getenv("MATHBUDDY_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger("mathbuddy")
    root.setLevel(level)

    if root.handlers:
        return root

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    root.addHandler(sh)
    # one handler is enough, do not repeat lines through the root logger
    root.propagate = False
    return root


# Qt keys without a printable character
_NAMED_KEYS = {
    QtCore.Qt.Key.Key_Enter: "Enter",
    QtCore.Qt.Key.Key_Return: "Return",
    QtCore.Qt.Key.Key_Escape: "Escape",
    QtCore.Qt.Key.Key_Backspace: "Backspace",
}

# (row, col, label, key, variant)
BUTTONS = [
    (0, 0, "AC", "Escape", "clear"), (0, 1, "DEL", "Backspace", "clear"), (0, 2, "÷", "÷", "operator"), (0, 3, "×", "×", "operator"),
    (1, 0, "7", "7", "number"), (1, 1, "8", "8", "number"), (1, 2, "9", "9", "number"), (1, 3, "−", "-", "operator"),
    (2, 0, "4", "4", "number"), (2, 1, "5", "5", "number"), (2, 2, "6", "6", "number"), (2, 3, "+", "+", "operator"),
    (3, 0, "1", "1", "number"), (3, 1, "2", "2", "number"), (3, 2, "3", "3", "number"), (3, 3, "=", "=", "equals"),
    (4, 0, "0", "0", "number"), (4, 1, ".", ".", "number"),
]


def key_name(event) -> str:
    """Translate a QKeyEvent into the key names used by mathbuddy.keys."""
    name = _NAMED_KEYS.get(event.key())
    if name:
        return name
    return event.text()


# ----------------------------
# UI Components
# ----------------------------
class RoundedButton(QtWidgets.QPushButton):
    def __init__(self, text, key, on_press, variant="number", min_h=56):
        super().__init__(text)
        self.key = key
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(min_h)
        self.setFont(QtGui.QFont("Segoe UI", 14, QtGui.QFont.Weight.DemiBold))
        self.setProperty("variant", variant)
        # buttons must not steal keyboard focus from the window
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.clicked.connect(lambda: on_press(key))


class CalcWindow(QtWidgets.QWidget):
    def __init__(self, config=None, config_path=None):
        super().__init__()
        self.setWindowTitle("Math Buddy")
        self.setMinimumSize(340, 520)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

        self.config_path = config_path
        self.config = config if config is not None else load_config(config_path)
        self.state = INITIAL

        self._build_ui()
        self._apply_styles()
        self._connect_shortcuts()
        self._update_display()

    def _build_ui(self):
        main = QtWidgets.QVBoxLayout(self)
        main.setContentsMargins(16, 16, 16, 16)
        main.setSpacing(8)

        # Top bar: title, theme toggle
        topbar = QtWidgets.QHBoxLayout()
        titles = QtWidgets.QVBoxLayout()
        title = QtWidgets.QLabel("✨ Math Buddy ✨")
        title.setObjectName("title")
        title.setFont(QtGui.QFont("Segoe UI", 16, QtGui.QFont.Weight.Bold))
        titles.addWidget(title)
        subtitle = QtWidgets.QLabel("Your friendly calculator")
        titles.addWidget(subtitle)
        topbar.addLayout(titles)
        topbar.addStretch()

        self.theme_btn = QtWidgets.QPushButton("🌗")
        self.theme_btn.setToolTip("Toggle theme")
        self.theme_btn.setFixedSize(36, 28)
        self.theme_btn.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.theme_btn.clicked.connect(self.toggle_theme)
        topbar.addWidget(self.theme_btn)
        main.addLayout(topbar)

        # Pending line (small) + display
        self.expr_label = QtWidgets.QLabel("")
        self.expr_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.expr_label.setFont(QtGui.QFont(self.config["font_family"], 11))
        main.addWidget(self.expr_label)

        self.result_edit = QtWidgets.QLineEdit("0")
        self.result_edit.setReadOnly(True)
        self.result_edit.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.result_edit.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.result_edit.setFont(QtGui.QFont(self.config["font_family"], int(self.config["display_font_size"]),
                                             QtGui.QFont.Weight.Bold))
        self.result_edit.setMinimumHeight(72)
        self.result_edit.setFrame(False)
        main.addWidget(self.result_edit)

        self.grid = QtWidgets.QGridLayout()
        self.grid.setSpacing(8)
        self.buttons = {}
        for r, c, label, key, variant in BUTTONS:
            btn = RoundedButton(label, key, self.press, variant)
            self.grid.addWidget(btn, r, c)
            self.buttons[label] = btn
        main.addLayout(self.grid)

        tip = QtWidgets.QLabel("Tip: You can use your keyboard! ⌨️")
        tip.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        main.addWidget(tip)

    def _connect_shortcuts(self):
        copy_sc = QtGui.QShortcut(QtGui.QKeySequence("Ctrl+C"), self)
        copy_sc.activated.connect(self.copy_result)

    def _apply_styles(self):
        self.setStyleSheet(self._stylesheet())

    def _stylesheet(self):
        if self.config.get("dark_mode"):
            bg = "#0F1724"
            text = "#E6EEF3"
            sub = "#9FB4C8"
            number = "rgba(255,255,255,0.06)"
            operator = "#7C3AED"
            equals = "#DB2777"
            clear = "#B91C1C"
        else:
            bg = "#FDF4FF"
            text = "#1F2937"
            sub = "#6B7280"
            number = "#FFFFFF"
            operator = "#A78BFA"
            equals = "#F472B6"
            clear = "#F87171"
        return f"""
            QWidget {{
                background: {bg};
                color: {text};
                font-family: "{self.config["font_family"]}", "Inter", sans-serif;
            }}
            QLineEdit {{ background: transparent; color: {text}; }}
            QLabel {{ color: {sub}; }}
            QLabel#title {{ color: {operator}; }}
            QPushButton {{
                background: {number};
                color: {text};
                border: none;
                border-radius: 10px;
                padding: 8px;
            }}
            QPushButton[variant="operator"] {{ background: {operator}; color: white; }}
            QPushButton[variant="equals"] {{ background: {equals}; color: white; }}
            QPushButton[variant="clear"] {{ background: {clear}; color: white; }}
            QPushButton:pressed {{ background: rgba(0,0,0,0.12); }}
        """

    # ----------------------------
    # Input
    # ----------------------------
    def press(self, key: str):
        """Single entry point for button clicks and key presses."""
        try:
            self.state = keys.press(self.state, key)
        except Exception:
            logger.exception("Could not handle key %r", key)
            return
        logger.debug("%r -> %s", key, self.state)
        self._update_display()

    def keyPressEvent(self, event):
        name = key_name(event)
        if name and keys.is_bound(name):
            # swallow bound keys, "/" included, so nothing else reacts to them
            event.accept()
            self.press(name)
            return
        super().keyPressEvent(event)

    # ----------------------------
    # Theme & clipboard
    # ----------------------------
    def toggle_theme(self):
        self.config["dark_mode"] = not self.config.get("dark_mode")
        self._apply_styles()
        save_config(self.config, self.config_path)

    def copy_result(self):
        cb = QtWidgets.QApplication.clipboard()
        cb.setText(self.result_edit.text())

    def _update_display(self):
        self.result_edit.setText(self.state.display)
        self.expr_label.setText(self.state.pending_line)


# ----------------------------
# Run app
# ----------------------------
def main():
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    window = CalcWindow()
    window.show()
    logger.info("Math Buddy started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

"""
app.py
Scientific calculator window (PyQt6).

The window only draws state and forwards clicks and key presses; all the
calculator logic lives in scicalc.evaluator.

 - Basic keypad: digits, decimal point, + - × ÷ %, C, =
 - Scientific keypad (Tab toggles): brackets, backspace, π, e, 2nd layer,
   trig / inverse trig in DEG, RAD or GRAD, hyperbolics, roots, logs,
   n!, nPr, nCr, xʸ
 - Memory: MC, MR, M+, M-
 - History panel (click to reuse) with plain-text export
 - Light/Dark theme toggle

To run:
    python -m scicalc
"""

import logging
import sys

from PyQt6 import QtWidgets, QtCore, QtGui

from .config import Settings
from .errors import CalculatorError
from .evaluator import Evaluator
from .functions import E, PI
from .history import write_history
from .keymap import handle_key
from .state import BinaryOp, CalculatorState, MemoryOp, Mode, UnaryFn

logger = logging.getLogger(__name__)

_NAMED_KEYS = {
    QtCore.Qt.Key.Key_Enter: "Enter",
    QtCore.Qt.Key.Key_Return: "Return",
    QtCore.Qt.Key.Key_Escape: "Escape",
    QtCore.Qt.Key.Key_Backspace: "Backspace",
    QtCore.Qt.Key.Key_Tab: "Tab",
}


# ----------------------------
# UI Components
# ----------------------------
class RoundedButton(QtWidgets.QPushButton):
    def __init__(self, text, slot=None, min_h=44):
        super().__init__(text)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(min_h)
        self.setFont(QtGui.QFont("Segoe UI", 11))
        # keys belong to the window, not to whichever button was clicked last
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        if slot:
            self.clicked.connect(slot)


class CalcWindow(QtWidgets.QWidget):
    def __init__(self, settings=None, evaluator=None):
        super().__init__()
        self.settings = settings or Settings()
        self.settings.validate()
        self.evaluator = evaluator or Evaluator(
            CalculatorState(angle_unit=self.settings.angle_unit, mode=self.settings.start_mode)
        )
        self.dark_mode = self.settings.dark_mode
        self.show_secondary = False

        self.setWindowTitle("Calculator")
        self.setMinimumSize(380, 520)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

        self._build_ui()
        self._apply_styles()
        self._refresh()

    def _build_ui(self):
        ev = self.evaluator
        main = QtWidgets.QHBoxLayout(self)
        main.setContentsMargins(12, 12, 12, 12)

        left = QtWidgets.QVBoxLayout()
        left.setSpacing(8)

        # Top bar: title, theme toggle, mode toggle
        topbar = QtWidgets.QHBoxLayout()
        self.title = QtWidgets.QLabel("Calculator")
        self.title.setFont(QtGui.QFont("Segoe UI", 14, QtGui.QFont.Weight.DemiBold))
        topbar.addWidget(self.title)
        topbar.addStretch()

        self.theme_btn = QtWidgets.QPushButton("🌗")
        self.theme_btn.setToolTip("Toggle theme")
        self.theme_btn.setFixedSize(36, 28)
        self.theme_btn.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.theme_btn.clicked.connect(self.toggle_theme)
        topbar.addWidget(self.theme_btn)

        self.mode_btn = QtWidgets.QPushButton("⇄")
        self.mode_btn.setToolTip("Press Tab to switch mode")
        self.mode_btn.setFixedSize(36, 28)
        self.mode_btn.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.mode_btn.clicked.connect(self.toggle_mode)
        topbar.addWidget(self.mode_btn)
        left.addLayout(topbar)

        # Trace label (small) + display
        self.trace_label = QtWidgets.QLabel("")
        self.trace_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.trace_label.setFont(QtGui.QFont("Consolas", 11))
        left.addWidget(self.trace_label)

        self.display_edit = QtWidgets.QLineEdit("0")
        self.display_edit.setReadOnly(True)
        self.display_edit.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.display_edit.setFont(QtGui.QFont("Consolas", 26, QtGui.QFont.Weight.Bold))
        self.display_edit.setMinimumHeight(64)
        self.display_edit.setFrame(False)
        self.display_edit.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        left.addWidget(self.display_edit)

        # Scientific keypad: (row, col, text, slot); rows "1st"/"2nd" swap places
        sci = [
            (0, 0, "MC", lambda: self._run(ev.memory_op, MemoryOp.CLEAR)),
            (0, 1, "MR", lambda: self._run(ev.memory_op, MemoryOp.RECALL)),
            (0, 2, "M+", lambda: self._run(ev.memory_op, MemoryOp.ADD)),
            (0, 3, "M-", lambda: self._run(ev.memory_op, MemoryOp.SUBTRACT)),
            (0, 4, "deg", lambda: self._run(ev.cycle_angle_unit)),
            (1, 0, "(", lambda: self._run(ev.enter_bracket, "(")),
            (1, 1, ")", lambda: self._run(ev.enter_bracket, ")")),
            (1, 2, "{", lambda: self._run(ev.enter_bracket, "{")),
            (1, 3, "}", lambda: self._run(ev.enter_bracket, "}")),
            (1, 4, "⌫", lambda: self._run(ev.backspace)),
            (2, 0, "[", lambda: self._run(ev.enter_bracket, "[")),
            (2, 1, "]", lambda: self._run(ev.enter_bracket, "]")),
            (2, 2, "π", lambda: self._run(ev.apply_constant, PI, "π")),
            (2, 3, "e", lambda: self._run(ev.apply_constant, E, "e")),
            (2, 4, "2nd", self.toggle_secondary),
            (5, 0, "sinh", lambda: self._run(ev.apply_unary_function, UnaryFn.SINH)),
            (5, 1, "cosh", lambda: self._run(ev.apply_unary_function, UnaryFn.COSH)),
            (5, 2, "tanh", lambda: self._run(ev.apply_unary_function, UnaryFn.TANH)),
            (5, 3, "√x", lambda: self._run(ev.apply_unary_function, UnaryFn.SQRT)),
            (5, 4, "∛x", lambda: self._run(ev.apply_unary_function, UnaryFn.CBRT)),
            (6, 0, "ln", lambda: self._run(ev.apply_unary_function, UnaryFn.LN)),
            (6, 1, "log", lambda: self._run(ev.apply_unary_function, UnaryFn.LOG10)),
            (6, 2, "n!", lambda: self._run(ev.apply_unary_function, UnaryFn.FACTORIAL)),
            (6, 3, "nPr", lambda: self._run(ev.apply_binary_operator, BinaryOp.PERMUTATION)),
            (6, 4, "nCr", lambda: self._run(ev.apply_binary_operator, BinaryOp.COMBINATION)),
        ]
        first_layer = [
            (3, 0, "sin", lambda: self._run(ev.apply_unary_function, UnaryFn.SIN)),
            (3, 1, "cos", lambda: self._run(ev.apply_unary_function, UnaryFn.COS)),
            (3, 2, "tan", lambda: self._run(ev.apply_unary_function, UnaryFn.TAN)),
            (3, 3, "xʸ", lambda: self._run(ev.apply_binary_operator, BinaryOp.POWER)),
            (3, 4, "eˣ", lambda: self._run(ev.apply_unary_function, UnaryFn.EXP)),
        ]
        second_layer = [
            (4, 0, "sin⁻¹", lambda: self._run(ev.apply_unary_function, UnaryFn.ASIN)),
            (4, 1, "cos⁻¹", lambda: self._run(ev.apply_unary_function, UnaryFn.ACOS)),
            (4, 2, "tan⁻¹", lambda: self._run(ev.apply_unary_function, UnaryFn.ATAN)),
            (4, 3, "x²", lambda: self._run(ev.apply_unary_function, UnaryFn.SQUARE)),
            (4, 4, "1/x", lambda: self._run(ev.apply_unary_function, UnaryFn.RECIPROCAL)),
        ]

        self.sci_panel = QtWidgets.QWidget()
        self.sci_grid = QtWidgets.QGridLayout(self.sci_panel)
        self.sci_grid.setContentsMargins(0, 0, 0, 0)
        self.sci_grid.setSpacing(6)
        self.first_layer_btns = []
        self.second_layer_btns = []
        for r, c, t, slot in sci:
            btn = RoundedButton(t, slot, min_h=34)
            self.sci_grid.addWidget(btn, r, c)
            if t == "deg":
                self.angle_btn = btn
            elif t == "2nd":
                self.layer_btn = btn
        for rows, bucket in ((first_layer, self.first_layer_btns), (second_layer, self.second_layer_btns)):
            for r, c, t, slot in rows:
                btn = RoundedButton(t, slot, min_h=34)
                self.sci_grid.addWidget(btn, r, c)
                bucket.append(btn)
        left.addWidget(self.sci_panel)

        # Basic keypad
        self.grid = QtWidgets.QGridLayout()
        self.grid.setSpacing(8)
        btns = [
            (0, 0, "C", lambda: self._run(ev.clear)),
            (0, 1, "÷", lambda: self._run(ev.apply_binary_operator, BinaryOp.DIVIDE)),
            (0, 2, "×", lambda: self._run(ev.apply_binary_operator, BinaryOp.MULTIPLY)),
            (0, 3, "-", lambda: self._run(ev.apply_binary_operator, BinaryOp.SUBTRACT)),
            (0, 4, "+", lambda: self._run(ev.apply_binary_operator, BinaryOp.ADD)),
            (4, 2, ".", lambda: self._run(ev.enter_decimal_point)),
            (4, 3, "%", lambda: self._run(ev.apply_binary_operator, BinaryOp.PERCENT)),
        ]
        digit_cells = {
            "7": (1, 0), "8": (1, 1), "9": (1, 2),
            "4": (2, 0), "5": (2, 1), "6": (2, 2),
            "1": (3, 0), "2": (3, 1), "3": (3, 2),
        }
        for d, (r, c) in digit_cells.items():
            btns.append((r, c, d, lambda _=False, d=d: self._run(ev.enter_digit, d)))
        for r, c, t, slot in btns:
            self.grid.addWidget(RoundedButton(t, slot), r, c)
        self.grid.addWidget(RoundedButton("0", lambda: self._run(ev.enter_digit, "0")), 4, 0, 1, 2)
        self.grid.addWidget(RoundedButton("=", lambda: self._run(ev.apply_equals)), 3, 4, 2, 1)
        left.addLayout(self.grid)

        main.addLayout(left, 3)

        # Right: history panel
        self.history_panel = QtWidgets.QVBoxLayout()
        header = QtWidgets.QHBoxLayout()
        hlabel = QtWidgets.QLabel("History")
        hlabel.setFont(QtGui.QFont("Segoe UI", 12, QtGui.QFont.Weight.DemiBold))
        header.addWidget(hlabel)
        header.addStretch()
        self.export_btn = QtWidgets.QPushButton("Export")
        self.export_btn.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.export_btn.clicked.connect(self.export_history)
        header.addWidget(self.export_btn)
        self.history_panel.addLayout(header)

        note = QtWidgets.QLabel("History is lost when the calculator closes")
        note.setFont(QtGui.QFont("Segoe UI", 8))
        self.history_panel.addWidget(note)

        self.history_list = QtWidgets.QListWidget()
        self.history_list.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.history_list.itemClicked.connect(self.on_history_click)
        self.history_panel.addWidget(self.history_list)
        main.addLayout(self.history_panel, 2)

    def _stylesheet(self):
        if self.dark_mode:
            bg = "#0F1724"
            card = "rgba(255,255,255,0.04)"
            text = "#E6EEF3"
            sub = "#9FB4C8"
            btn = "rgba(255,255,255,0.04)"
            hover = "rgba(255,255,255,0.08)"
        else:
            bg = "#F6F7FB"
            card = "rgba(0,0,0,0.04)"
            text = "#0F1724"
            sub = "#4B5563"
            btn = "rgba(0,0,0,0.04)"
            hover = "rgba(0,0,0,0.08)"
        return f"""
            QWidget {{
                background: {bg};
                color: {text};
                font-family: "Segoe UI", "Inter", sans-serif;
            }}
            QLineEdit {{ background: transparent; color: {text}; }}
            QLabel {{ color: {sub}; }}
            QListWidget {{
                background: {card};
                border-radius: 10px;
                padding: 6px;
            }}
            QPushButton {{
                background: {btn};
                color: {text};
                border: none;
                border-radius: 10px;
                padding: 6px;
            }}
            QPushButton:hover {{ background: {hover}; }}
            QPushButton:pressed {{ background: rgba(0,0,0,0.12); }}
        """

    def _apply_styles(self):
        self.setStyleSheet(self._stylesheet())

    # ----------------------------
    # Evaluator plumbing
    # ----------------------------
    def _run(self, action, *args):
        try:
            action(*args)
        except CalculatorError as exc:
            logger.warning("ignored input: %s", exc)
        self._refresh()

    def _refresh(self):
        state = self.evaluator.state
        scientific = state.mode is Mode.SCIENTIFIC

        self.display_edit.setText(state.display)
        self.trace_label.setText(state.trace)
        self.title.setText("Scientific Calculator" if scientific else "Calculator")
        self.angle_btn.setText(state.angle_unit.value)

        self.sci_panel.setVisible(scientific)
        for b in self.first_layer_btns:
            b.setVisible(not self.show_secondary)
        for b in self.second_layer_btns:
            b.setVisible(self.show_secondary)
        self.layer_btn.setText("1st" if self.show_secondary else "2nd")

        # history only grows, so only the tail needs adding
        for entry in state.history[self.history_list.count():]:
            self.history_list.addItem(entry)
            self.history_list.scrollToBottom()
        self.export_btn.setEnabled(bool(state.history))

    # ----------------------------
    # Panel actions
    # ----------------------------
    def toggle_mode(self):
        self.show_secondary = False
        self._run(self.evaluator.toggle_mode)

    def toggle_secondary(self):
        self.show_secondary = not self.show_secondary
        self._refresh()

    def toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self._apply_styles()

    def on_history_click(self, item):
        self._run(self.evaluator.recall_history_entry, item.text())

    def export_history(self):
        path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Export history", self.settings.export_filename, "Text files (*.txt)"
        )
        if not path:
            return
        try:
            write_history(path, self.evaluator.state.history)
        except OSError as exc:
            logger.error("history export to %s failed: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Export failed", str(exc))

    # ----------------------------
    # Keyboard handling
    # ----------------------------
    def focusNextPrevChild(self, next):
        # Tab switches mode instead of moving focus
        return False

    def keyPressEvent(self, event):
        key = _NAMED_KEYS.get(event.key(), event.text())
        if key == "Tab":
            self.show_secondary = False
        before = self.evaluator.state
        try:
            handled = handle_key(self.evaluator, key)
        except CalculatorError as exc:
            logger.warning("ignored key %r: %s", key, exc)
            return
        if not handled:
            super().keyPressEvent(event)
            return
        if self.evaluator.state is not before:
            self._refresh()


# ----------------------------
# Run app
# ----------------------------
def main(settings=None):
    settings = settings or Settings()
    settings.validate()
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QtWidgets.QApplication(sys.argv)
    window = CalcWindow(settings)
    window.show()
    sys.exit(app.exec())


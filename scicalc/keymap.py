"""Keyboard shortcuts.

Keys are named the way a key event reports them: the typed character for
printable keys, and "Enter", "Return", "Escape", "Backspace", "Tab" for the
rest. The window translates its own key codes into these names.
"""

from typing import Callable, Dict

from .evaluator import Evaluator
from .state import BinaryOp, CLOSING_BRACKETS, OPENING_BRACKETS

KEY_MAP: Dict[str, Callable[[Evaluator], object]] = {
    ".": Evaluator.enter_decimal_point,
    "Enter": Evaluator.apply_equals,
    "Return": Evaluator.apply_equals,
    "=": Evaluator.apply_equals,
    "Escape": Evaluator.clear,
    "Backspace": Evaluator.backspace,
    "Tab": Evaluator.toggle_mode,
}

for _d in "0123456789":
    KEY_MAP[_d] = lambda ev, d=_d: ev.enter_digit(d)
for _op in (BinaryOp.ADD, BinaryOp.SUBTRACT, BinaryOp.MULTIPLY, BinaryOp.DIVIDE,
            BinaryOp.POWER, BinaryOp.PERCENT):
    KEY_MAP[_op.value] = lambda ev, op=_op: ev.apply_binary_operator(op)
for _b in OPENING_BRACKETS + CLOSING_BRACKETS:
    KEY_MAP[_b] = lambda ev, b=_b: ev.enter_bracket(b)


def handle_key(evaluator: Evaluator, key: str) -> bool:
    """Run the action bound to ``key``. Returns False for unbound keys."""
    action = KEY_MAP.get(key)
    if action is None:
        return False
    action(evaluator)
    return True

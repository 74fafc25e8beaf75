"""scicalc - scientific calculator with a PyQt6 window.

The calculator itself (scicalc.evaluator) is plain Python and can be driven
without Qt:

    from scicalc import Evaluator, BinaryOp
    ev = Evaluator()
    ev.enter_digit("5"); ev.apply_binary_operator(BinaryOp.ADD)
    ev.enter_digit("3"); ev.apply_equals().display   # '8'

Usage:
    python -m scicalc        # open the calculator window
"""

from .errors import CalculatorError, HistoryEntryError, InvalidInputError
from .evaluator import Evaluator
from .history import export_history, write_history
from .state import AngleUnit, BinaryOp, CalculatorState, MemoryOp, Mode, UnaryFn

__version__ = "0.1.0"

__all__ = [
    "AngleUnit",
    "BinaryOp",
    "CalculatorError",
    "CalculatorState",
    "Evaluator",
    "HistoryEntryError",
    "InvalidInputError",
    "MemoryOp",
    "Mode",
    "UnaryFn",
    "export_history",
    "write_history",
]

"""Calculator state and the enums that flow through it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AngleUnit(str, Enum):
    DEGREES = "deg"
    RADIANS = "rad"
    GRADIANS = "grad"

    def next(self) -> AngleUnit:
        order = list(AngleUnit)
        return order[(order.index(self) + 1) % len(order)]


class Mode(str, Enum):
    """Keypad layout: basic keys only, or the full scientific set."""

    NORMAL = "normal"
    SCIENTIFIC = "scientific"


class BinaryOp(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    PERCENT = "%"
    PERMUTATION = "nPr"
    COMBINATION = "nCr"


class UnaryFn(str, Enum):
    SQRT = "sqrt"
    CBRT = "cbrt"
    SQUARE = "square"
    RECIPROCAL = "1/x"
    FACTORIAL = "fact"
    LN = "ln"
    LOG10 = "log"
    EXP = "exp"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"

    @property
    def symbol(self) -> str:
        """Label used in the trace and history when none is given."""
        return _UNARY_SYMBOLS.get(self, self.value)


_UNARY_SYMBOLS = {
    UnaryFn.SQRT: "√",
    UnaryFn.CBRT: "∛",
    UnaryFn.SQUARE: "sqr",
    UnaryFn.FACTORIAL: "n!",
    UnaryFn.ASIN: "sin⁻¹",
    UnaryFn.ACOS: "cos⁻¹",
    UnaryFn.ATAN: "tan⁻¹",
}


class MemoryOp(str, Enum):
    ADD = "M+"
    SUBTRACT = "M-"
    RECALL = "MR"
    CLEAR = "MC"


OPENING_BRACKETS = "({["
CLOSING_BRACKETS = ")}]"


@dataclass(frozen=True)
class CalculatorState:
    """Everything the calculator shows or remembers during one session.

    Instances are never mutated; every input event produces a new one via
    ``dataclasses.replace``. ``pending_operation`` is only ever set together
    with ``first_operand``, and ``history`` only grows (``clear`` keeps it).
    """

    display: str = "0"
    trace: str = ""
    first_operand: Optional[float] = None
    pending_operation: Optional[BinaryOp] = None
    awaiting_new_entry: bool = True
    angle_unit: AngleUnit = AngleUnit.DEGREES
    memory: float = 0.0
    open_brackets: int = 0
    history: tuple[str, ...] = ()
    mode: Mode = Mode.NORMAL

    @property
    def has_pending(self) -> bool:
        return self.first_operand is not None and self.pending_operation is not None

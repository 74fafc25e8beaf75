"""Input handling: one pure transition per kind of key press.

Every function here takes a ``CalculatorState`` plus the input and returns the
next state; nothing is mutated in place. ``Evaluator`` is the thin owner that
keeps the current state for a window and swaps it on every event.

Binary operators chain strictly left to right with no precedence, so
``2 + 3 * 4 =`` gives 20. Brackets are counted for display only and never
group anything.
"""

import logging
from dataclasses import replace
from typing import Optional

from . import functions
from .errors import InvalidInputError
from .formatting import format_number, is_numeral, parse_number
from .history import result_of
from .state import (
    CLOSING_BRACKETS,
    OPENING_BRACKETS,
    AngleUnit,
    BinaryOp,
    CalculatorState,
    MemoryOp,
    Mode,
    UnaryFn,
)

logger = logging.getLogger(__name__)


def _record(state: CalculatorState, calculation: str) -> tuple:
    logger.debug("history += %r", calculation)
    return state.history + (calculation,)


def _editable(display: str) -> str:
    # a result such as "NaN" or "1e+21" can't be typed onto
    if not is_numeral(display) or "e" in display.lower():
        return "0"
    return display


def _resolve(first: float, op: BinaryOp, second: float):
    result = functions.apply_binary(op, first, second)
    calculation = (
        f"{format_number(first)} {op.value} {format_number(second)} = {format_number(result)}"
    )
    return result, calculation


# ----------------------------
# Number entry
# ----------------------------
def enter_digit(state: CalculatorState, digits: str) -> CalculatorState:
    """Type one digit, or several in a row."""
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidInputError(f"not a digit: {digits!r}")
    for d in digits:
        if state.awaiting_new_entry:
            display = d
        else:
            current = _editable(state.display)
            display = d if current == "0" else current + d
        state = replace(state, display=display, trace=state.trace + d,
                        awaiting_new_entry=False)
    return state


def enter_decimal_point(state: CalculatorState) -> CalculatorState:
    if "." in state.display:
        return state
    return replace(state, display=_editable(state.display) + ".",
                   trace=state.trace + ".", awaiting_new_entry=False)


def enter_bracket(state: CalculatorState, symbol: str) -> CalculatorState:
    if symbol in OPENING_BRACKETS and len(symbol) == 1:
        count = state.open_brackets + 1
    elif symbol in CLOSING_BRACKETS and len(symbol) == 1:
        if state.open_brackets == 0:
            logger.debug("ignoring %r with no open bracket", symbol)
            return state
        count = state.open_brackets - 1
    else:
        raise InvalidInputError(f"not a bracket: {symbol!r}")
    return replace(state, open_brackets=count, trace=state.trace + symbol,
                   awaiting_new_entry=True)


def backspace(state: CalculatorState) -> CalculatorState:
    """Drop the last character of both the display and the trace.

    Removing an opening bracket from the trace lowers the bracket count and
    removing a closing one raises it, never below zero.
    """
    awaiting = state.awaiting_new_entry
    display = state.display[:-1]
    if len(state.display) <= 1 or not is_numeral(display):
        display, awaiting = "0", True

    removed = state.trace[-1:]
    count = state.open_brackets
    if removed and removed in OPENING_BRACKETS:
        count = max(count - 1, 0)
    elif removed and removed in CLOSING_BRACKETS:
        count += 1

    return replace(state, display=display, trace=state.trace[:-1],
                   open_brackets=count, awaiting_new_entry=awaiting)


def apply_constant(state: CalculatorState, value: float, symbol: str) -> CalculatorState:
    return replace(state, display=format_number(value), trace=state.trace + symbol,
                   awaiting_new_entry=True)


# ----------------------------
# Operations
# ----------------------------
def apply_unary_function(
    state: CalculatorState, fn: UnaryFn, symbol: Optional[str] = None
) -> CalculatorState:
    fn = UnaryFn(fn)
    value = parse_number(state.display)
    result = functions.apply_unary(fn, value, state.angle_unit)
    calculation = f"{symbol or fn.symbol}({format_number(value)}) = {format_number(result)}"
    return replace(state, display=format_number(result), trace=calculation,
                   history=_record(state, calculation), awaiting_new_entry=True)


def apply_binary_operator(state: CalculatorState, op: BinaryOp) -> CalculatorState:
    op = BinaryOp(op)
    current = parse_number(state.display)
    if state.first_operand is None:
        state = replace(state, first_operand=current,
                        trace=f"{state.trace} {op.value} ")
    elif state.pending_operation is not None:
        result, calculation = _resolve(state.first_operand, state.pending_operation, current)
        state = replace(state, display=format_number(result), first_operand=result,
                        trace=f"{format_number(result)} {op.value} ",
                        history=_record(state, calculation))
    return replace(state, pending_operation=op, awaiting_new_entry=True)


def apply_equals(state: CalculatorState) -> CalculatorState:
    if not state.has_pending:
        logger.debug("equals with nothing pending")
        return state
    result, calculation = _resolve(state.first_operand, state.pending_operation,
                                   parse_number(state.display))
    return replace(state, display=format_number(result), trace=calculation,
                   history=_record(state, calculation), first_operand=None,
                   pending_operation=None, awaiting_new_entry=True)


def clear(state: CalculatorState) -> CalculatorState:
    """Reset the entry; history, memory and angle unit survive."""
    return replace(state, display="0", trace="", first_operand=None,
                   pending_operation=None, awaiting_new_entry=True, open_brackets=0)


def memory_op(state: CalculatorState, kind: MemoryOp) -> CalculatorState:
    try:
        kind = MemoryOp(kind)
    except ValueError:
        raise InvalidInputError(f"unknown memory operation: {kind!r}") from None

    if kind is MemoryOp.ADD:
        state = replace(state, memory=state.memory + parse_number(state.display))
    elif kind is MemoryOp.SUBTRACT:
        state = replace(state, memory=state.memory - parse_number(state.display))
    elif kind is MemoryOp.RECALL:
        shown = format_number(state.memory)
        state = replace(state, display=shown, trace=f"Memory Recall ({shown})")
    else:
        state = replace(state, memory=0.0)
    return replace(state, awaiting_new_entry=True)


def recall_history_entry(state: CalculatorState, entry: str) -> CalculatorState:
    """Bring a past result back onto the display."""
    return replace(state, display=result_of(entry), trace=entry, first_operand=None,
                   pending_operation=None, awaiting_new_entry=True)


# ----------------------------
# Modes
# ----------------------------
def set_angle_unit(state: CalculatorState, unit: AngleUnit) -> CalculatorState:
    return replace(state, angle_unit=AngleUnit(unit))


def cycle_angle_unit(state: CalculatorState) -> CalculatorState:
    return replace(state, angle_unit=state.angle_unit.next())


def toggle_mode(state: CalculatorState) -> CalculatorState:
    mode = Mode.SCIENTIFIC if state.mode is Mode.NORMAL else Mode.NORMAL
    return replace(state, mode=mode)


class Evaluator:
    """Owns the state of one calculator session."""

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state or CalculatorState()

    def _apply(self, transition, *args) -> CalculatorState:
        self.state = transition(self.state, *args)
        return self.state

    def enter_digit(self, digits: str) -> CalculatorState:
        return self._apply(enter_digit, digits)

    def enter_decimal_point(self) -> CalculatorState:
        return self._apply(enter_decimal_point)

    def enter_bracket(self, symbol: str) -> CalculatorState:
        return self._apply(enter_bracket, symbol)

    def backspace(self) -> CalculatorState:
        return self._apply(backspace)

    def apply_constant(self, value: float, symbol: str) -> CalculatorState:
        return self._apply(apply_constant, value, symbol)

    def apply_unary_function(self, fn: UnaryFn, symbol: Optional[str] = None) -> CalculatorState:
        return self._apply(apply_unary_function, fn, symbol)

    def apply_binary_operator(self, op: BinaryOp) -> CalculatorState:
        return self._apply(apply_binary_operator, op)

    def apply_equals(self) -> CalculatorState:
        return self._apply(apply_equals)

    def clear(self) -> CalculatorState:
        return self._apply(clear)

    def memory_op(self, kind: MemoryOp) -> CalculatorState:
        return self._apply(memory_op, kind)

    def recall_history_entry(self, entry: str) -> CalculatorState:
        return self._apply(recall_history_entry, entry)

    def set_angle_unit(self, unit: AngleUnit) -> CalculatorState:
        return self._apply(set_angle_unit, unit)

    def cycle_angle_unit(self) -> CalculatorState:
        return self._apply(cycle_angle_unit)

    def toggle_mode(self) -> CalculatorState:
        return self._apply(toggle_mode)

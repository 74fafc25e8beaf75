"""Exceptions raised for malformed input events.

Bad math never raises here; it turns into NaN or Infinity. These are only for
events the calculator cannot interpret at all.
"""


class CalculatorError(Exception):
    pass


class InvalidInputError(CalculatorError, ValueError):
    """An input event the evaluator has no meaning for (e.g. digit 'x')."""


class HistoryEntryError(CalculatorError, ValueError):
    """A history record that carries no '= result' part."""

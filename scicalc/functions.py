"""Function table: the math behind every key.

Plain doubles in, plain doubles out. Nothing here raises on bad math: numpy
runs with all floating-point warnings silenced, so a domain error comes back
as NaN and an overflow as +/-Infinity, and both flow on into whatever the
user presses next.
"""

import math
from typing import Callable, Dict

import numpy as np

from .state import AngleUnit, BinaryOp, UnaryFn

PI = math.pi
E = math.e

# radians per unit
_ANGLE_FACTORS = {
    AngleUnit.DEGREES: PI / 180,
    AngleUnit.RADIANS: 1.0,
    AngleUnit.GRADIANS: PI / 200,
}


def to_radians(value: float, unit: AngleUnit) -> float:
    return float(np.multiply(value, _ANGLE_FACTORS[unit]))


def from_radians(value: float, unit: AngleUnit) -> float:
    return float(np.divide(value, _ANGLE_FACTORS[unit]))


# ----------------------------
# Combinatorics
# ----------------------------
def factorial(n: float) -> float:
    """Iterative product 2..n as a double.

    Negative input is NaN. Non-integers multiply up to floor(n), and a NaN
    input never enters the loop so it gives 1.
    """
    if n < 0:
        return math.nan
    if n == 0:
        return 1.0
    result = 1.0
    i = 2
    while i <= n:
        result *= i
        if math.isinf(result):
            break
        i += 1
    return result


def permutation(n: float, r: float) -> float:
    if n < r:
        return math.nan
    return _div(factorial(n), factorial(n - r))


def combination(n: float, r: float) -> float:
    if n < r:
        return math.nan
    return _div(factorial(n), factorial(r) * factorial(n - r))


# ----------------------------
# Binary operations
# ----------------------------
def _div(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(a, b))


def divide(a: float, b: float) -> float:
    if b == 0:
        return math.nan
    return _div(a, b)


def power(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


def percent(a: float, b: float) -> float:
    """b percent of a."""
    with np.errstate(all="ignore"):
        return float(np.float64(a) * (np.float64(b) / 100))


def _arith(ufunc) -> Callable[[float, float], float]:
    def apply(a: float, b: float) -> float:
        with np.errstate(all="ignore"):
            return float(ufunc(np.float64(a), np.float64(b)))
    return apply


BINARY_FUNCS: Dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: _arith(np.add),
    BinaryOp.SUBTRACT: _arith(np.subtract),
    BinaryOp.MULTIPLY: _arith(np.multiply),
    BinaryOp.DIVIDE: divide,
    BinaryOp.POWER: power,
    BinaryOp.PERCENT: percent,
    BinaryOp.PERMUTATION: permutation,
    BinaryOp.COMBINATION: combination,
}


def apply_binary(op: BinaryOp, a: float, b: float) -> float:
    return BINARY_FUNCS[BinaryOp(op)](a, b)


# ----------------------------
# Unary functions
# ----------------------------
def _ufunc(fn) -> Callable[[float], float]:
    def apply(x: float) -> float:
        with np.errstate(all="ignore"):
            return float(fn(np.float64(x)))
    return apply


UNARY_FUNCS: Dict[UnaryFn, Callable[[float], float]] = {
    UnaryFn.SQRT: _ufunc(np.sqrt),
    UnaryFn.CBRT: _ufunc(np.cbrt),
    UnaryFn.SQUARE: _ufunc(np.square),
    UnaryFn.RECIPROCAL: _ufunc(np.reciprocal),
    UnaryFn.FACTORIAL: factorial,
    UnaryFn.LN: _ufunc(np.log),
    UnaryFn.LOG10: _ufunc(np.log10),
    UnaryFn.EXP: _ufunc(np.exp),
    UnaryFn.SIN: _ufunc(np.sin),
    UnaryFn.COS: _ufunc(np.cos),
    UnaryFn.TAN: _ufunc(np.tan),
    UnaryFn.ASIN: _ufunc(np.arcsin),
    UnaryFn.ACOS: _ufunc(np.arccos),
    UnaryFn.ATAN: _ufunc(np.arctan),
    # hyperbolics always work in radians
    UnaryFn.SINH: _ufunc(np.sinh),
    UnaryFn.COSH: _ufunc(np.cosh),
    UnaryFn.TANH: _ufunc(np.tanh),
}

_FORWARD_TRIG = {UnaryFn.SIN, UnaryFn.COS, UnaryFn.TAN}
_INVERSE_TRIG = {UnaryFn.ASIN, UnaryFn.ACOS, UnaryFn.ATAN}


def apply_unary(fn: UnaryFn, x: float, unit: AngleUnit = AngleUnit.RADIANS) -> float:
    fn = UnaryFn(fn)
    if fn in _FORWARD_TRIG:
        return UNARY_FUNCS[fn](to_radians(x, unit))
    if fn in _INVERSE_TRIG:
        return from_radians(UNARY_FUNCS[fn](x), unit)
    return UNARY_FUNCS[fn](x)

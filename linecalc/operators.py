"""
Binary operator semantics over Integer and Float values.

Every table lists all four (left kind, right kind) combinations. Arithmetic
always yields an Integer: a Float result is truncated toward zero, and a
Float right operand of an Integer left operand is truncated before use.
Relational and logical operators yield Integer 1 or 0.
"""
import math
import operator
from typing import Callable, Type

from linecalc.errors import DivisionByZero, NumericOverflow, UnsupportedOperands
from linecalc.parser import BinaryOperator
from linecalc.utils import trunc_div, trunc_mod
from linecalc.value import BinaryOperationImpl, Float, Integer, Value, fits_integer, from_bool

BinaryOperationImplTable = list[tuple[tuple[Type[Value], Type[Value]], BinaryOperationImpl]]

KINDS: list[Type[Value]] = [Integer, Float]


def _integer(op_name: str, v: int) -> Integer:
    if not fits_integer(v):
        raise NumericOverflow(op_name, v)
    return Integer(v)


def _truncate(op_name: str, x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        raise NumericOverflow(op_name, x)
    v = math.trunc(x)
    if not fits_integer(v):
        raise NumericOverflow(op_name, x)
    return v


def _arithmetic_impls(op_name: str, fn: Callable[[float, float], float]) -> BinaryOperationImplTable:
    return [
        ((Integer, Integer), lambda a, b: _integer(op_name, fn(a.v, b.v))),  # type: ignore
        ((Integer, Float), lambda a, b: _integer(op_name, fn(a.v, _truncate(op_name, b.v)))),  # type: ignore
        ((Float, Integer), lambda a, b: _integer(op_name, _truncate(op_name, fn(a.v, b.v)))),  # type: ignore
        ((Float, Float), lambda a, b: _integer(op_name, _truncate(op_name, fn(a.v, b.v)))),  # type: ignore
    ]


add_impls = _arithmetic_impls("Addition", operator.add)
sub_impls = _arithmetic_impls("Subtraction", operator.sub)
mul_impls = _arithmetic_impls("Multiplication", operator.mul)


def _check_divisor(a: Value, b: Value) -> None:
    if b.is_zero():
        raise DivisionByZero(a, b)


def _div_int_int(a: Integer, b: Integer) -> Value:
    _check_divisor(a, b)
    return _integer("Division", trunc_div(a.v, b.v))


def _div_int_float(a: Integer, b: Float) -> Value:
    _check_divisor(a, b)
    divisor = _truncate("Division", b.v)
    if divisor == 0:
        # 0 < |b| < 1 truncates to a zero divisor
        raise DivisionByZero(a, b)
    return _integer("Division", trunc_div(a.v, divisor))


def _div_float(a: Value, b: Value) -> Value:
    _check_divisor(a, b)
    return _integer("Division", _truncate("Division", a.v / b.v))  # type: ignore


div_impls: BinaryOperationImplTable = [
    ((Integer, Integer), _div_int_int),  # type: ignore
    ((Integer, Float), _div_int_float),  # type: ignore
    ((Float, Integer), _div_float),
    ((Float, Float), _div_float),
]


def _mod_int_int(a: Integer, b: Integer) -> Value:
    _check_divisor(a, b)
    return _integer("Modulo", trunc_mod(a.v, b.v))


def _mod_float(a: Value, b: Value) -> Value:
    raise UnsupportedOperands("Modulo", a, b)


mod_impls: BinaryOperationImplTable = [
    ((Integer, Integer), _mod_int_int),  # type: ignore
    ((Integer, Float), _mod_float),
    ((Float, Integer), _mod_float),
    ((Float, Float), _mod_float),
]


def _relational_impls(compare: Callable[[float, float], bool]) -> BinaryOperationImplTable:
    # mixed kinds compare the Integer as a float, never the other way round
    return [
        ((Integer, Integer), lambda a, b: from_bool(compare(a.v, b.v))),  # type: ignore
        ((Integer, Float), lambda a, b: from_bool(compare(float(a.v), b.v))),  # type: ignore
        ((Float, Integer), lambda a, b: from_bool(compare(a.v, float(b.v)))),  # type: ignore
        ((Float, Float), lambda a, b: from_bool(compare(a.v, b.v))),  # type: ignore
    ]


eq_impls = _relational_impls(operator.eq)
ne_impls = _relational_impls(operator.ne)
lt_impls = _relational_impls(operator.lt)
gt_impls = _relational_impls(operator.gt)
le_impls = _relational_impls(operator.le)
ge_impls = _relational_impls(operator.ge)


def _logical_impls(combine: Callable[[bool, bool], bool]) -> BinaryOperationImplTable:
    return [
        ((left, right), lambda a, b: from_bool(combine(a.is_truthy(), b.is_truthy())))
        for left in KINDS
        for right in KINDS
    ]


and_impls = _logical_impls(lambda a, b: a and b)
or_impls = _logical_impls(lambda a, b: a or b)


OPERATOR_TABLES: dict[BinaryOperator, tuple[str, BinaryOperationImplTable]] = {
    BinaryOperator.ADD: ("Addition", add_impls),
    BinaryOperator.SUB: ("Subtraction", sub_impls),
    BinaryOperator.MUL: ("Multiplication", mul_impls),
    BinaryOperator.DIV: ("Division", div_impls),
    BinaryOperator.MOD: ("Modulo", mod_impls),
    BinaryOperator.EQ: ("Equality", eq_impls),
    BinaryOperator.NE: ("Inequality", ne_impls),
    BinaryOperator.LT: ("Less than", lt_impls),
    BinaryOperator.GT: ("Greater than", gt_impls),
    BinaryOperator.LE: ("Less than or equal", le_impls),
    BinaryOperator.GE: ("Greater than or equal", ge_impls),
    BinaryOperator.AND: ("Logical and", and_impls),
    BinaryOperator.OR: ("Logical or", or_impls),
}


def eval_binary_operation(op: BinaryOperator, a: Value, b: Value) -> Value:
    op_name, table = OPERATOR_TABLES[op]
    for operand in (a, b):
        if isinstance(operand, Integer) and not fits_integer(operand.v):
            raise NumericOverflow(op_name, operand.v)
    for (type_a, type_b), impl in table:
        if isinstance(a, type_a) and isinstance(b, type_b):
            return impl(a, b)
    else:
        raise UnsupportedOperands(op_name, a, b)

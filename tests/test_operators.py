import pytest

from linecalc.errors import DivisionByZero, NumericOverflow, UnsupportedOperands
from linecalc.operators import OPERATOR_TABLES, eval_binary_operation
from linecalc.parser import BinaryOperator
from linecalc.value import INTEGER_MAX, INTEGER_MIN, Float, Integer, Value

ALL_KIND_PAIRS = {(Integer, Integer), (Integer, Float), (Float, Integer), (Float, Float)}


@pytest.mark.parametrize("op", list(BinaryOperator))
def test_every_operator_covers_all_kind_pairs(op: BinaryOperator) -> None:
    _, table = OPERATOR_TABLES[op]
    kind_pairs = [kinds for kinds, _ in table]
    assert len(kind_pairs) == 4
    assert set(kind_pairs) == ALL_KIND_PAIRS


@pytest.mark.parametrize(
    "op, a, b, expected",
    [
        pytest.param(BinaryOperator.ADD, Integer(2), Integer(3), Integer(5)),
        pytest.param(BinaryOperator.ADD, Integer(2), Float(2.5), Integer(4)),
        pytest.param(BinaryOperator.ADD, Float(2.5), Integer(1), Integer(3)),
        pytest.param(BinaryOperator.ADD, Float(-2.5), Integer(1), Integer(-1)),
        pytest.param(BinaryOperator.ADD, Float(1.5), Float(1.6), Integer(3)),
        pytest.param(BinaryOperator.SUB, Integer(5), Integer(8), Integer(-3)),
        pytest.param(BinaryOperator.SUB, Integer(1), Float(2.7), Integer(-1)),
        pytest.param(BinaryOperator.SUB, Float(4.5), Integer(1), Integer(3)),
        pytest.param(BinaryOperator.SUB, Float(1.0), Float(3.5), Integer(-2)),
        pytest.param(BinaryOperator.MUL, Integer(3), Integer(7), Integer(21)),
        pytest.param(BinaryOperator.MUL, Integer(3), Float(2.9), Integer(6)),
        pytest.param(BinaryOperator.MUL, Float(2.5), Integer(3), Integer(7)),
        pytest.param(BinaryOperator.MUL, Float(-0.5), Float(3.0), Integer(-1)),
        pytest.param(BinaryOperator.DIV, Integer(20), Integer(4), Integer(5)),
        pytest.param(BinaryOperator.DIV, Integer(-7), Integer(2), Integer(-3)),
        pytest.param(BinaryOperator.DIV, Integer(7), Float(2.9), Integer(3)),
        pytest.param(BinaryOperator.DIV, Float(7.5), Integer(2), Integer(3)),
        pytest.param(BinaryOperator.DIV, Float(-7.5), Float(2.0), Integer(-3)),
        pytest.param(BinaryOperator.MOD, Integer(7), Integer(3), Integer(1)),
        pytest.param(BinaryOperator.MOD, Integer(-7), Integer(3), Integer(-1)),
        pytest.param(BinaryOperator.MOD, Integer(7), Integer(-3), Integer(1)),
    ],
)
def test_arithmetic_always_returns_truncated_integer(op: BinaryOperator, a: Value, b: Value, expected: Value) -> None:
    result = eval_binary_operation(op, a, b)
    assert result == expected
    assert type(result) is Integer


@pytest.mark.parametrize(
    "op, a, b",
    [
        pytest.param(BinaryOperator.DIV, Integer(1), Integer(0)),
        pytest.param(BinaryOperator.DIV, Integer(1), Float(0.0)),
        pytest.param(BinaryOperator.DIV, Float(1.0), Integer(0)),
        pytest.param(BinaryOperator.DIV, Float(1.0), Float(-0.0)),
        pytest.param(BinaryOperator.DIV, Integer(7), Float(0.5)),
        pytest.param(BinaryOperator.MOD, Integer(1), Integer(0)),
    ],
)
def test_division_by_zero(op: BinaryOperator, a: Value, b: Value) -> None:
    with pytest.raises(DivisionByZero):
        eval_binary_operation(op, a, b)


@pytest.mark.parametrize(
    "a, b",
    [
        pytest.param(Integer(7), Float(2.0)),
        pytest.param(Float(7.0), Integer(2)),
        pytest.param(Float(7.0), Float(2.0)),
    ],
)
def test_modulo_is_integer_only(a: Value, b: Value) -> None:
    with pytest.raises(UnsupportedOperands):
        eval_binary_operation(BinaryOperator.MOD, a, b)


def test_non_finite_result_has_no_integer_value() -> None:
    with pytest.raises(NumericOverflow):
        eval_binary_operation(BinaryOperator.MUL, Float(1e308), Float(10.0))
    with pytest.raises(NumericOverflow):
        eval_binary_operation(BinaryOperator.ADD, Integer(1), Float(float("nan")))


def test_non_numeric_operand_is_rejected() -> None:
    with pytest.raises(UnsupportedOperands) as exc_info:
        eval_binary_operation(BinaryOperator.ADD, Integer(1), "1")  # type: ignore
    assert str(exc_info.value) == "Addition is not defined for Integer and str"


@pytest.mark.parametrize(
    "op, a, b, expected",
    [
        pytest.param(BinaryOperator.EQ, Integer(2), Integer(2), 1),
        pytest.param(BinaryOperator.EQ, Integer(2), Float(2.0), 1),
        # the Integer is widened to Float, so 2 != 2.5
        pytest.param(BinaryOperator.EQ, Integer(2), Float(2.5), 0),
        pytest.param(BinaryOperator.EQ, Float(2.5), Integer(2), 0),
        pytest.param(BinaryOperator.EQ, Float(0.5), Float(0.5), 1),
        pytest.param(BinaryOperator.NE, Integer(1), Integer(2), 1),
        pytest.param(BinaryOperator.NE, Integer(2), Float(2.5), 1),
        pytest.param(BinaryOperator.NE, Float(2.0), Integer(2), 0),
        pytest.param(BinaryOperator.NE, Float(1.0), Float(1.0), 0),
        pytest.param(BinaryOperator.LT, Integer(1), Integer(2), 1),
        pytest.param(BinaryOperator.LT, Integer(2), Float(2.5), 1),
        pytest.param(BinaryOperator.LT, Float(2.5), Integer(2), 0),
        pytest.param(BinaryOperator.LT, Float(-1.0), Float(-0.5), 1),
        pytest.param(BinaryOperator.GT, Integer(3), Integer(2), 1),
        pytest.param(BinaryOperator.GT, Integer(2), Float(2.5), 0),
        pytest.param(BinaryOperator.GT, Float(2.5), Integer(2), 1),
        pytest.param(BinaryOperator.GT, Float(1.0), Float(1.0), 0),
        pytest.param(BinaryOperator.LE, Integer(2), Integer(2), 1),
        pytest.param(BinaryOperator.LE, Integer(3), Float(2.5), 0),
        pytest.param(BinaryOperator.LE, Float(2.0), Integer(2), 1),
        pytest.param(BinaryOperator.LE, Float(2.5), Float(2.4), 0),
        pytest.param(BinaryOperator.GE, Integer(1), Integer(2), 0),
        pytest.param(BinaryOperator.GE, Integer(3), Float(2.5), 1),
        pytest.param(BinaryOperator.GE, Float(1.5), Integer(2), 0),
        pytest.param(BinaryOperator.GE, Float(2.5), Float(2.5), 1),
        pytest.param(BinaryOperator.AND, Integer(1), Integer(5), 1),
        pytest.param(BinaryOperator.AND, Integer(1), Float(0.0), 0),
        pytest.param(BinaryOperator.AND, Float(0.5), Integer(3), 1),
        pytest.param(BinaryOperator.AND, Float(0.0), Float(1.0), 0),
        pytest.param(BinaryOperator.OR, Integer(0), Integer(0), 0),
        pytest.param(BinaryOperator.OR, Integer(0), Float(-0.1), 1),
        pytest.param(BinaryOperator.OR, Float(0.5), Integer(0), 1),
        pytest.param(BinaryOperator.OR, Float(0.0), Float(0.0), 0),
    ],
)
def test_relational_and_logical_yield_zero_or_one(op: BinaryOperator, a: Value, b: Value, expected: int) -> None:
    result = eval_binary_operation(op, a, b)
    assert type(result) is Integer
    assert result == Integer(expected)


@pytest.mark.parametrize(
    "op, a, b",
    [
        pytest.param(BinaryOperator.ADD, Integer(INTEGER_MAX), Integer(1)),
        pytest.param(BinaryOperator.SUB, Integer(INTEGER_MIN), Integer(1)),
        pytest.param(BinaryOperator.MUL, Integer(2**62), Integer(4)),
        pytest.param(BinaryOperator.DIV, Integer(INTEGER_MIN), Integer(-1)),
        pytest.param(BinaryOperator.ADD, Float(1e300), Integer(1)),
        pytest.param(BinaryOperator.ADD, Integer(1), Float(1e300)),
        pytest.param(BinaryOperator.DIV, Float(1e300), Float(1e-300)),
        pytest.param(BinaryOperator.ADD, Integer(INTEGER_MAX), Float(1.5)),
        # operands built outside the 64-bit range are rejected before any float conversion
        pytest.param(BinaryOperator.LT, Integer(10**400), Float(1.0)),
        pytest.param(BinaryOperator.EQ, Float(1.0), Integer(-(10**400))),
    ],
)
def test_results_outside_integer_range_overflow(op: BinaryOperator, a: Value, b: Value) -> None:
    with pytest.raises(NumericOverflow):
        eval_binary_operation(op, a, b)


def test_integer_range_bounds_are_reachable() -> None:
    assert eval_binary_operation(BinaryOperator.SUB, Integer(INTEGER_MAX), Integer(0)) == Integer(INTEGER_MAX)
    assert eval_binary_operation(BinaryOperator.SUB, Integer(INTEGER_MIN + 1), Integer(1)) == Integer(INTEGER_MIN)
    assert eval_binary_operation(BinaryOperator.GT, Integer(INTEGER_MAX), Float(1.0)) == Integer(1)

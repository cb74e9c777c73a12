from dataclasses import dataclass
from typing import TYPE_CHECKING

from linecalc.value import Value

if TYPE_CHECKING:
    from linecalc.tokenizer import Token


class CalcError(Exception):
    """Base for every error that aborts a run"""


@dataclass
class UndefinedVariable(CalcError):
    name: str

    def __str__(self) -> str:
        return f"Undefined variable: {self.name!r}"


@dataclass
class DivisionByZero(CalcError):
    dividend: Value
    divisor: Value

    def __str__(self) -> str:
        return f"Division by zero: {self.dividend} / {self.divisor}"


@dataclass
class MalformedExpression(CalcError):
    errmsg: str
    tokens: list["Token"]
    error_token_idx: int

    def __str__(self) -> str:
        line = " ".join(t.lexeme for t in self.tokens)
        parsed = " ".join(t.lexeme for t in self.tokens[: self.error_token_idx])
        caret_offset = len(parsed) + 1 if parsed else 0
        return "\n".join([f"Malformed expression: {self.errmsg}", line, " " * caret_offset + "^"])


class MissingAssignmentOperator(MalformedExpression):
    pass


@dataclass
class UnclassifiableToken(CalcError):
    fragment: str

    def __str__(self) -> str:
        return f"Unclassifiable token: {self.fragment!r}"


@dataclass
class UnsupportedOperands(CalcError):
    op_name: str
    left: Value
    right: Value

    def __str__(self) -> str:
        return f"{self.op_name} is not defined for {_describe(self.left)} and {_describe(self.right)}"


@dataclass
class NumericOverflow(CalcError):
    op_name: str
    result: int | float

    def __str__(self) -> str:
        return f"{self.op_name} result is outside the 64-bit Integer range"


@dataclass
class VariableKindMismatch(CalcError):
    name: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"Variable {self.name!r} is {self.actual}, expected {self.expected}"


@dataclass
class IndexOutOfRange(CalcError):
    name: str
    index: int
    length: int

    def __str__(self) -> str:
        return f"Index {self.index} is out of range for array {self.name!r} of length {self.length}"


def _describe(value: object) -> str:
    return value.type_name() if isinstance(value, Value) else type(value).__name__

import enum
from dataclasses import dataclass

from linecalc.errors import MalformedExpression, MissingAssignmentOperator
from linecalc.tokenizer import Token, TokenType
from linecalc.utils import PrintableEnum
from linecalc.value import Value


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    EQ = enum.auto()
    NE = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    LE = enum.auto()
    GE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()


OPERATOR_SYMBOLS = {
    "+": BinaryOperator.ADD,
    "-": BinaryOperator.SUB,
    "*": BinaryOperator.MUL,
    "/": BinaryOperator.DIV,
    "%": BinaryOperator.MOD,
    "==": BinaryOperator.EQ,
    "!=": BinaryOperator.NE,
    "<": BinaryOperator.LT,
    ">": BinaryOperator.GT,
    "<=": BinaryOperator.LE,
    ">=": BinaryOperator.GE,
    "&&": BinaryOperator.AND,
    "||": BinaryOperator.OR,
}


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass
class VariableRef:
    name: str


@dataclass
class ArrayElementRef:
    name: str
    index: int


Expression = Value | VariableRef | ArrayElementRef | BinaryOperation


@dataclass
class PrintStatement:
    name: str


@dataclass
class IgnoredStatement:
    """A lone number or operator; such a line has no effect"""

    token: Token


@dataclass
class AssignStatement:
    target: str
    tokens: list[Token]
    expression_start: int

    @property
    def expression_tokens(self) -> list[Token]:
        return self.tokens[self.expression_start :]


Statement = PrintStatement | AssignStatement | IgnoredStatement


def parse_line(tokens: list[Token]) -> Statement:
    """Checks the shape of a non-empty line: ``name`` or ``name = expression``"""
    if not tokens:
        raise MalformedExpression("Empty line", tokens=tokens, error_token_idx=0)

    if len(tokens) == 1:
        if tokens[0].type is not TokenType.IDENTIFIER:
            return IgnoredStatement(token=tokens[0])
        return PrintStatement(name=tokens[0].lexeme)

    if tokens[1].type is not TokenType.ASSIGN:
        raise MissingAssignmentOperator(
            f"Assignment operator expected, found {tokens[1].type}", tokens=tokens, error_token_idx=1
        )
    if tokens[0].type is not TokenType.IDENTIFIER:
        raise MalformedExpression(
            f"Assignment target must be a variable, found {tokens[0].type}", tokens=tokens, error_token_idx=0
        )
    return AssignStatement(target=tokens[0].lexeme, tokens=tokens, expression_start=2)

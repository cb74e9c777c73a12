import enum
import re
from dataclasses import dataclass
from typing import Optional

from linecalc.errors import UnclassifiableToken
from linecalc.utils import PrintableEnum
from linecalc.value import Integer, fits_integer


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    ADDITIVE = enum.auto()
    MULTIPLICATIVE = enum.auto()
    ASSIGN = enum.auto()
    END = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    value: Optional[Integer] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.ADDITIVE,
    "-": TokenType.ADDITIVE,
    "*": TokenType.MULTIPLICATIVE,
    "/": TokenType.MULTIPLICATIVE,
    "%": TokenType.MULTIPLICATIVE,
    "=": TokenType.ASSIGN,
}

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def split_line(line: str) -> list[str]:
    fragments: list[str] = []
    current = ""
    for char in line:
        if char in SINGLE_CHAR_TOKENS:
            if current:
                fragments.append(current)
                current = ""
            fragments.append(char)
        elif char.isspace():
            if current:
                fragments.append(current)
                current = ""
        else:
            current += char
    if current:
        fragments.append(current)
    return fragments


def _integer_literal(fragment: str) -> Optional[int]:
    """Value of a decimal literal, or None when it is not one or does not fit an Integer"""
    if not INTEGER_LITERAL.fullmatch(fragment) or len(fragment.lstrip("+-0")) > 19:
        return None
    v = int(fragment)
    return v if fits_integer(v) else None


def classify(fragment: str) -> Token:
    if not fragment or any(c.isspace() for c in fragment):
        # split_line never produces these
        raise UnclassifiableToken(fragment)
    if fragment in SINGLE_CHAR_TOKENS:
        return Token(type=SINGLE_CHAR_TOKENS[fragment], lexeme=fragment)
    literal = _integer_literal(fragment)
    if literal is not None:
        return Token(type=TokenType.NUMBER, lexeme=fragment, value=Integer(literal))
    return Token(type=TokenType.IDENTIFIER, lexeme=fragment)


def tokenize(line: str) -> list[Token]:
    return [classify(fragment) for fragment in split_line(line)]


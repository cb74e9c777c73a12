import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // rounds toward -inf)"""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div, so the sign follows the dividend"""
    return a - b * trunc_div(a, b)

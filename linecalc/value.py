import abc
from dataclasses import dataclass
from typing import Callable


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...

    @abc.abstractmethod
    def is_zero(self) -> bool:
        ...

    def is_truthy(self) -> bool:
        return not self.is_zero()


BinaryOperationImpl = Callable[[Value, Value], Value]

# Integer is a signed 64-bit value
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


def fits_integer(v: int) -> bool:
    return INTEGER_MIN <= v <= INTEGER_MAX


@dataclass(frozen=True)
class Integer(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "Integer"

    def is_zero(self) -> bool:
        return self.v == 0

    def __str__(self) -> str:
        return str(self.v)


@dataclass(frozen=True)
class Float(Value):
    v: float

    @classmethod
    def type_name(cls) -> str:
        return "Float"

    def is_zero(self) -> bool:
        return self.v == 0.0

    def __str__(self) -> str:
        return repr(self.v)


TRUE = Integer(1)
FALSE = Integer(0)


def from_bool(flag: bool) -> Integer:
    return TRUE if flag else FALSE


def zero_of(kind: type[Value]) -> Value:
    if kind is Integer:
        return Integer(0)
    elif kind is Float:
        return Float(0.0)
    else:
        raise TypeError(f"No zero value for {kind!r}")

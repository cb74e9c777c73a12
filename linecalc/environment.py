from dataclasses import dataclass
from typing import Iterator, Sequence, Type

from linecalc.errors import IndexOutOfRange, NumericOverflow, UndefinedVariable, VariableKindMismatch
from linecalc.value import Integer, Value, fits_integer, zero_of


@dataclass(frozen=True)
class ScalarVariable:
    name: str
    value: Value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ArrayVariable:
    name: str
    values: tuple[Value, ...]

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values) + "]"


Variable = ScalarVariable | ArrayVariable


def _check_range(value: Value) -> None:
    if isinstance(value, Integer) and not fits_integer(value.v):
        raise NumericOverflow("Assignment", value.v)


class Environment:
    """Variables of one run. Assignment replaces the whole entry, so a name may change kind."""

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = dict()

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables.values())

    def names(self) -> list[str]:
        return list(self._variables)

    def declare(self, name: str, kind: Type[Value] = Integer) -> None:
        self._variables[name] = ScalarVariable(name=name, value=zero_of(kind))

    def assign(self, name: str, value: Value | Sequence[Value]) -> None:
        if isinstance(value, Value):
            _check_range(value)
            self._variables[name] = ScalarVariable(name=name, value=value)
        else:
            values = tuple(value)
            for v in values:
                if not isinstance(v, Value):
                    raise TypeError(f"Array {name!r} can only hold Integer and Float values, got {v!r}")
                _check_range(v)
            self._variables[name] = ArrayVariable(name=name, values=values)

    def assign_element(self, name: str, index: int, value: Value) -> None:
        _check_range(value)
        array = self._lookup_array(name)
        self._check_index(array, index)
        values = list(array.values)
        values[index] = value
        self._variables[name] = ArrayVariable(name=name, values=tuple(values))

    def lookup(self, name: str) -> Variable:
        if name not in self._variables:
            raise UndefinedVariable(name)
        return self._variables[name]

    def lookup_scalar(self, name: str) -> Value:
        variable = self.lookup(name)
        if not isinstance(variable, ScalarVariable):
            raise VariableKindMismatch(name, expected="a scalar", actual="an array")
        return variable.value

    def lookup_array_element(self, name: str, index: int) -> Value:
        array = self._lookup_array(name)
        self._check_index(array, index)
        return array.values[index]

    def _lookup_array(self, name: str) -> ArrayVariable:
        variable = self.lookup(name)
        if not isinstance(variable, ArrayVariable):
            raise VariableKindMismatch(name, expected="an array", actual="a scalar")
        return variable

    @staticmethod
    def _check_index(array: ArrayVariable, index: int) -> None:
        # negative indices are out of range, no wrap-around
        if not 0 <= index < len(array.values):
            raise IndexOutOfRange(array.name, index, len(array.values))

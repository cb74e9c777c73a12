from typing import Callable, Iterable, Optional

from linecalc.environment import Environment, ScalarVariable
from linecalc.parser import AssignStatement, IgnoredStatement, PrintStatement, parse_line
from linecalc.runtime import evaluate_tokens
from linecalc.tokenizer import tokenize
from linecalc.value import Value


class Interpreter:
    """
    Runs source lines one at a time against a single Environment.

    A line holding only a variable name writes its value to ``output``; a line
    ``name = expression`` stores the value of the expression. Blank lines are
    skipped, as are lines holding a lone number or operator. Any CalcError
    propagates and the caller decides whether to go on.
    """

    def __init__(self, environment: Optional[Environment] = None, output: Callable[[str], None] = print) -> None:
        self.environment = environment if environment is not None else Environment()
        self.output = output

    def run_line(self, line: str) -> Optional[Value]:
        tokens = tokenize(line)
        if not tokens:
            return None

        statement = parse_line(tokens)
        if isinstance(statement, PrintStatement):
            variable = self.environment.lookup(statement.name)
            self.output(str(variable))
            return variable.value if isinstance(variable, ScalarVariable) else None
        elif isinstance(statement, AssignStatement):
            result = evaluate_tokens(statement.tokens, self.environment, start=statement.expression_start)
            self.environment.assign(statement.target, result)
            return result
        elif isinstance(statement, IgnoredStatement):
            return None
        else:
            raise TypeError(f"Unexpected statement type: {statement!r}")

    def run_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.run_line(line)

    def run_source(self, source: str) -> None:
        self.run_lines(source.splitlines())

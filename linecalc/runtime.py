from linecalc.environment import Environment
from linecalc.errors import MalformedExpression
from linecalc.operators import eval_binary_operation
from linecalc.parser import OPERATOR_SYMBOLS, ArrayElementRef, BinaryOperation, Expression, VariableRef
from linecalc.tokenizer import Token, TokenType
from linecalc.value import Value


def evaluate_tokens(tokens: list[Token], environment: Environment, start: int = 0) -> Value:
    """
    Evaluates ``tokens[start:]`` as one arithmetic expression.

    ``* / %`` bind tighter than ``+ -``; operators of the same class fold left
    to right. Operands are looked up as they are reached, so an undefined
    variable is reported before any malformation further right.
    """
    if _at_end(tokens, start):
        raise MalformedExpression("Missing token: expression expected", tokens=tokens, error_token_idx=start)
    result, _ = _evaluate_equation(tokens, start, environment)
    return result


def _at_end(tokens: list[Token], i: int) -> bool:
    return i >= len(tokens) or tokens[i].type is TokenType.END


def _evaluate_equation(tokens: list[Token], i: int, environment: Environment) -> tuple[Value, int]:
    result, i = _evaluate_term(tokens, i, environment)
    while not _at_end(tokens, i):
        operator_token = tokens[i]
        if operator_token.type is not TokenType.ADDITIVE:
            raise MalformedExpression(
                f"Missing operator: found {operator_token.type}", tokens=tokens, error_token_idx=i
            )
        right, i = _evaluate_term(tokens, i + 1, environment)
        result = eval_binary_operation(OPERATOR_SYMBOLS[operator_token.lexeme], result, right)
    return result, i


def _evaluate_term(tokens: list[Token], i: int, environment: Environment) -> tuple[Value, int]:
    result, i = _evaluate_operand(tokens, i, environment)
    while not _at_end(tokens, i):
        operator_token = tokens[i]
        if operator_token.type is TokenType.ADDITIVE:
            break  # left for _evaluate_equation
        if operator_token.type is not TokenType.MULTIPLICATIVE:
            raise MalformedExpression(
                f"Missing operator: found {operator_token.type}", tokens=tokens, error_token_idx=i
            )
        right, i = _evaluate_operand(tokens, i + 1, environment)
        result = eval_binary_operation(OPERATOR_SYMBOLS[operator_token.lexeme], result, right)
    return result, i


def _evaluate_operand(tokens: list[Token], i: int, environment: Environment) -> tuple[Value, int]:
    if _at_end(tokens, i):
        raise MalformedExpression("Missing token: operand expected", tokens=tokens, error_token_idx=i)
    token = tokens[i]
    if token.type is TokenType.NUMBER and token.value is not None:
        return token.value, i + 1
    elif token.type is TokenType.IDENTIFIER:
        return environment.lookup_scalar(token.lexeme), i + 1
    else:
        raise MalformedExpression(f"Missing operand: found {token.type}", tokens=tokens, error_token_idx=i)


def evaluate_expression(expression: Expression, environment: Environment) -> Value:
    """
    Tree-walking evaluation. Both operands of a BinaryOperation are evaluated,
    left first, before the operator is applied; grouping is whatever the tree says.
    """
    if isinstance(expression, Value):
        return expression
    elif isinstance(expression, VariableRef):
        return environment.lookup_scalar(expression.name)
    elif isinstance(expression, ArrayElementRef):
        return environment.lookup_array_element(expression.name, expression.index)
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate_expression(expression.left, environment)
        right_res = evaluate_expression(expression.right, environment)
        return eval_binary_operation(expression.operator, left_res, right_res)
    else:
        raise TypeError(f"Unexpected expression type: {expression!r}")

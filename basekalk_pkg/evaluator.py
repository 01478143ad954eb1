"""Stack-machine evaluation of postfix token sequences.

Operands stay unresolved on the stack until an operator needs them, so that
an assignment can still see the SymbolToken it is assigning to.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping, Sequence

from .converter import check_base, is_digit_string, to_base10
from .functions import DEFAULT_REGISTRY, FunctionSpec
from .logging_config import get_logger
from .types import (
    ArgumentError,
    FunctionToken,
    LhsNotSymbolError,
    LiteralToken,
    MissingOperatorError,
    NumberToken,
    OperatorArityError,
    OperatorToken,
    SymbolToken,
    Token,
    TokenValueError,
    UndefinedNameError,
    UnknownOperatorError,
    UnsupportedFunctionError,
)

logger = get_logger("evaluator")


# -----------------------------
# Float arithmetic
# -----------------------------


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _power(a: float, b: float) -> float:
    if a == 0 and b < 0:
        # Odd integer exponents keep the sign of zero
        if b == math.floor(b) and b % 2 == 1:
            return math.copysign(math.inf, a)
        return math.inf
    try:
        return math.pow(a, b)
    except ValueError:
        # Negative base with a fractional exponent
        return math.nan
    except OverflowError:
        if a < 0 and b == math.floor(b) and b % 2 == 1:
            return -math.inf
        return math.inf


def apply_operator(op: str, a: float, b: float) -> float:
    """Apply a binary arithmetic operator with IEEE-754 float semantics."""
    if op == "^":
        return _power(a, b)
    elif op == "*":
        return a * b
    elif op == "/":
        return _divide(a, b)
    elif op == "%":
        return _remainder(a, b)
    elif op == "+":
        return a + b
    elif op == "-":
        return a - b
    raise UnknownOperatorError(f"Unknown operator '{op}'")


# -----------------------------
# Resolution
# -----------------------------


def token_to_number(token: Token, base: int, symbols: Mapping[str, float]) -> float:
    """Resolve a stack entry to a float.

    Literals are converted from ``base`` here, which is where digit and
    decimal-point errors surface.
    """
    if isinstance(token, NumberToken):
        return token.value
    if isinstance(token, LiteralToken):
        value = to_base10(token.digits, base)
        return -value if token.negative else value
    if isinstance(token, SymbolToken):
        if token.name in symbols:
            return symbols[token.name]
        # Unbound names like "ff" read as numbers when every char is a digit of base
        if is_digit_string(token.name, base):
            return to_base10(token.name, base)
        raise UndefinedNameError(f"Name Error: '{token.name}'")
    raise TokenValueError(
        f"Value Error: expected literal or symbol, got {token.kind}"
    )


def _call_function(
    token: FunctionToken,
    base: int,
    symbols: MutableMapping[str, float],
    functions: Mapping[str, FunctionSpec],
) -> float:
    if token.name not in functions:
        raise UndefinedNameError(f"Name Error: '{token.name}'")
    spec = functions[token.name]
    if spec.arity != len(token.args):
        raise ArgumentError(
            f"Argument Error: {token.name} expects {spec.arity} argument(s), got {len(token.args)}"
        )
    if not spec.builtin or spec.compute is None:
        raise UnsupportedFunctionError(
            f"Unsupported Error: non-builtin functions (namely, '{token.name}') are not supported"
        )
    args = [evaluate(arg, base, symbols, functions) for arg in token.args]
    return spec.compute(*args)


def evaluate(
    postfix: Sequence[Token],
    base: int,
    symbols: MutableMapping[str, float],
    functions: Mapping[str, FunctionSpec] = DEFAULT_REGISTRY,
) -> float:
    """Evaluate a postfix token sequence.

    Args:
        postfix: Tokens as produced by ``lexer.tokenize``
        base: Input base used to convert literals, 2-61
        symbols: Variable table; assignments are written into it
        functions: Function registry

    Returns:
        The value of the expression. An empty sequence evaluates to 0.

    Raises:
        UnsupportedBaseError: ``base`` outside the supported range
        EvaluationError: any evaluation failure (see types.py for subclasses)
        ConversionError: a literal is not valid in ``base``
    """
    check_base(base)

    stack: list[Token] = []
    for token in postfix:
        if isinstance(token, (NumberToken, LiteralToken, SymbolToken)):
            stack.append(token)
        elif isinstance(token, OperatorToken):
            if len(stack) < 2:
                raise OperatorArityError(
                    f"Operator {token.op} requires two operands, found {len(stack)} only"
                )
            if token.op == "=":
                value = token_to_number(stack.pop(), base, symbols)
                target = stack.pop()
                if not isinstance(target, SymbolToken):
                    raise LhsNotSymbolError(
                        f"Syntax Error: expected symbol on lhs of '=', got {target.kind}"
                    )
                symbols[target.name] = value
                stack.append(target)
            else:
                b = token_to_number(stack.pop(), base, symbols)
                a = token_to_number(stack.pop(), base, symbols)
                stack.append(NumberToken(apply_operator(token.op, a, b)))
        elif isinstance(token, FunctionToken):
            stack.append(NumberToken(_call_function(token, base, symbols, functions)))
        else:
            raise TokenValueError(f"Unknown token type '{type(token).__name__}'")

    if not stack:
        return 0.0
    if len(stack) == 1:
        result = token_to_number(stack.pop(), base, symbols)
        logger.debug("Evaluated %d tokens in base %d to %r", len(postfix), base, result)
        return result
    raise MissingOperatorError("Syntax Error: expected operator")

"""Public API for Basekalk.

The three stage functions ``lex``, ``evaluate`` and ``format_result`` raise
CalcError subclasses. ``calculate`` runs all three and returns a structured
EvalResult instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence

from . import config
from .converter import from_base10
from .evaluator import evaluate as _evaluate
from .functions import DEFAULT_REGISTRY, FunctionSpec
from .lexer import clear_lex_cache, tokenize
from .logging_config import get_logger
from .symbols import SymbolTable
from .types import CalcError, EvalResult, Token, ValidationError

logger = get_logger("api")

__all__ = [
    "lex",
    "evaluate",
    "format_result",
    "calculate",
    "validate_expression",
    "clear_lex_cache",
]


def lex(text: str) -> tuple[Token, ...]:
    """Lex an infix expression into postfix tokens.

    Results are memoised per distinct text, so the same expression is only
    lexed once no matter how many bases it is later evaluated in.

    Raises:
        ValidationError: input longer than config.MAX_INPUT_LENGTH
        ParseError: unknown token or unmatched function bracket
    """
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    return tokenize(text)


def evaluate(
    tokens: Sequence[Token],
    input_base: int,
    symbols: MutableMapping[str, float],
    functions: Mapping[str, FunctionSpec] | None = None,
) -> float:
    """Evaluate postfix tokens with literals read in ``input_base``.

    Example:
        >>> from basekalk_pkg.api import evaluate, lex
        >>> from basekalk_pkg.symbols import SymbolTable
        >>> evaluate(lex("ff + 1"), 16, SymbolTable())
        256.0
    """
    if functions is None:
        functions = DEFAULT_REGISTRY
    return _evaluate(tokens, input_base, symbols, functions)


def format_result(value: float, output_base: int) -> str:
    """Render a value in ``output_base``.

    Example:
        >>> from basekalk_pkg.api import format_result
        >>> format_result(10.0, 16)
        'a'
    """
    return from_base10(value, output_base)


def calculate(
    text: str,
    input_base: int | None = None,
    output_base: int | None = None,
    symbols: MutableMapping[str, float] | None = None,
    functions: Mapping[str, FunctionSpec] | None = None,
) -> EvalResult:
    """Lex, evaluate and format one expression.

    Args:
        text: Infix expression (e.g. "ff*2", "x = 101")
        input_base: Base of numeric literals (default: config.DEFAULT_INPUT_BASE)
        output_base: Base of the rendered result (default: config.DEFAULT_OUTPUT_BASE)
        symbols: Variable table to read and assign; a fresh one if omitted
        functions: Function registry (default: built-ins)

    Returns:
        EvalResult; on failure ``ok`` is False and ``error``/``error_code``
        describe the first error hit.

    Example:
        >>> from basekalk_pkg.api import calculate
        >>> calculate("1010", input_base=2, output_base=16).result
        'a'
    """
    if input_base is None:
        input_base = config.DEFAULT_INPUT_BASE
    if output_base is None:
        output_base = config.DEFAULT_OUTPUT_BASE
    if symbols is None:
        symbols = SymbolTable()

    text = text.strip()
    if not text:
        return EvalResult(ok=True, input_base=input_base, output_base=output_base)

    try:
        tokens = lex(text)
        value = evaluate(tokens, input_base, symbols, functions)
        rendered = format_result(value, output_base)
    except CalcError as e:
        logger.info(
            "Calculation of %r failed: %s", text, e, extra={"error_code": e.code}
        )
        return EvalResult(
            ok=False,
            input_base=input_base,
            output_base=output_base,
            error=e.message,
            error_code=e.code,
        )
    return EvalResult(
        ok=True,
        result=rendered,
        value=value,
        input_base=input_base,
        output_base=output_base,
    )


def validate_expression(text: str) -> tuple[bool, str | None]:
    """Check that an expression lexes, without evaluating it.

    Digit validity depends on the input base and is only checked during
    evaluation, so "zz" is valid here.

    Example:
        >>> from basekalk_pkg.api import validate_expression
        >>> validate_expression("2 @ 3")
        (False, "Unknown token '@'")
    """
    try:
        lex(text)
        return True, None
    except CalcError as e:
        return False, str(e)

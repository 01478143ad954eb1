"""Lexer and shunting-yard conversion from infix text to postfix tokens.

Lexing is independent of the input base: numeric literals are kept as raw
digit strings and only converted by the evaluator. The same token sequence
can therefore be evaluated under any input base without re-lexing.
"""

from __future__ import annotations

from functools import lru_cache

from . import config
from .config import (
    CACHE_SIZE_LEX,
    DECIMAL_DIGITS,
    DECIMAL_POINT,
    DIGIT_ALPHABET,
    OPERATOR_PRECEDENCE,
    SYMBOL_CHARS,
    SYMBOL_START_CHARS,
    WHITESPACE,
)
from .logging_config import get_logger
from .types import (
    FunctionToken,
    LiteralToken,
    OperatorToken,
    SymbolToken,
    Token,
    UnknownTokenError,
    UnmatchedBracketError,
    ValidationError,
)

logger = get_logger("lexer")


def find_matching_bracket(text: str, start: int = 0) -> int:
    """Return the index of the ')' closing the first '(' at or after ``start``, or -1."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _match_operator(text: str, pos: int) -> str | None:
    match = None
    for op in OPERATOR_PRECEDENCE:
        if text.startswith(op, pos) and (match is None or len(op) > len(match)):
            match = op
    return match


def _push_operator(token: OperatorToken, stack: list[OperatorToken], postfix: list[Token]) -> None:
    """Place an operator using shunting-yard precedence rules."""
    if not stack or token.op == "(":
        stack.append(token)
        return
    rank = OPERATOR_PRECEDENCE[token.op]
    if OPERATOR_PRECEDENCE[stack[-1].op] > rank:
        stack.append(token)
        return
    # Equal precedence pops too, so every operator is left-associative
    while stack and OPERATOR_PRECEDENCE[stack[-1].op] <= rank:
        postfix.append(stack.pop())
    stack.append(token)


@lru_cache(maxsize=CACHE_SIZE_LEX)
def tokenize(text: str, depth: int = 0) -> tuple[Token, ...]:
    """Convert an infix expression into a postfix token sequence.

    Args:
        text: Infix expression (e.g. "x = 2 * (ff + 1)", "sqrt(10)")
        depth: Number of enclosing function calls ``text`` is an argument of

    Returns:
        Tuple of tokens in postfix order

    Raises:
        UnmatchedBracketError: a function call's '(' has no matching ')'
        UnknownTokenError: a character no rule accepts (including ',')
        ValidationError: function calls nested deeper than config.MAX_NESTING_DEPTH
    """
    if depth > config.MAX_NESTING_DEPTH:
        raise ValidationError(
            f"Expression too deeply nested (max {config.MAX_NESTING_DEPTH} function calls)",
            "TOO_DEEP",
        )
    text += " "
    stack: list[OperatorToken] = []
    postfix: list[Token] = []
    can_be_negative = True
    is_negative = False

    i = 0
    while i < len(text):
        char = text[i]

        if char in WHITESPACE:
            i += 1
            continue

        # A sign only counts when it directly precedes a literal
        if (
            char == "-"
            and can_be_negative
            and i + 1 < len(text)
            and text[i + 1] in DECIMAL_DIGITS
        ):
            is_negative = True
            can_be_negative = False
            i += 1
            continue

        if char in DECIMAL_DIGITS:
            j = i
            while j < len(text) and (text[j] in DIGIT_ALPHABET or text[j] == DECIMAL_POINT):
                j += 1
            postfix.append(LiteralToken(text[i:j], is_negative))
            is_negative = False
            can_be_negative = False
            i = j
            continue

        if char == ")":
            can_be_negative = False
            # An unmatched ')' just drains whatever is on the stack
            while stack:
                top = stack.pop()
                if top.op == "(":
                    break
                postfix.append(top)
            i += 1
            continue

        if char in SYMBOL_START_CHARS:
            j = i
            while j < len(text) and text[j] in SYMBOL_CHARS:
                j += 1
            name = text[i:j]
            can_be_negative = False
            i = j
            if text[i] != "(":
                postfix.append(SymbolToken(name))
                continue

            close = find_matching_bracket(text, i)
            if close == -1:
                raise UnmatchedBracketError(
                    f"Syntax Error: unmatched bracket '{text[i]}'"
                )
            # TODO: split on top-level commas once multi-argument builtins exist
            arg = tokenize(text[i + 1 : close], depth + 1)
            postfix.append(FunctionToken(name, (arg,) if arg else ()))
            i = close + 1
            continue

        op = _match_operator(text, i)
        if op is not None:
            can_be_negative = True
            _push_operator(OperatorToken(op), stack, postfix)
            i += len(op)
            continue

        raise UnknownTokenError(f"Unknown token '{char}'")

    while stack:
        postfix.append(stack.pop())

    logger.debug("Lexed %r into %d postfix tokens", text.rstrip(), len(postfix))
    return tuple(postfix)


def clear_lex_cache() -> None:
    """Drop all memoised token sequences."""
    tokenize.cache_clear()

"""Token definitions, result dataclasses and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union


# -----------------------------
# Tokens
# -----------------------------


@dataclass(frozen=True)
class NumberToken:
    """A resolved value. Only the evaluator produces these."""

    kind: ClassVar[str] = "number"
    value: float


@dataclass(frozen=True)
class LiteralToken:
    """A numeric literal kept as raw digits until the input base is known."""

    kind: ClassVar[str] = "literal"
    digits: str
    negative: bool = False


@dataclass(frozen=True)
class OperatorToken:
    kind: ClassVar[str] = "operator"
    op: str


@dataclass(frozen=True)
class SymbolToken:
    kind: ClassVar[str] = "symbol"
    name: str


@dataclass(frozen=True)
class FunctionToken:
    """A function call; each argument is its own postfix sequence."""

    kind: ClassVar[str] = "function"
    name: str
    args: tuple[tuple[Token, ...], ...] = ()


Token = Union[NumberToken, LiteralToken, OperatorToken, SymbolToken, FunctionToken]


# -----------------------------
# Results
# -----------------------------


@dataclass
class EvalResult:
    """Result of one lex/evaluate/format cycle."""

    ok: bool
    result: str | None = None
    value: float | None = None
    input_base: int | None = None
    output_base: int | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.input_base is not None:
            result_dict["input_base"] = self.input_base
        if self.output_base is not None:
            result_dict["output_base"] = self.output_base
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.input_base is not None:
            parts.append(f"input_base={self.input_base!r}")
        if self.output_base is not None:
            parts.append(f"output_base={self.output_base!r}")
        return f"EvalResult({', '.join(parts)})"


# -----------------------------
# Errors
# -----------------------------


class CalcError(Exception):
    """Base class for every error raised by the expression engine."""

    default_code = "CALC_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(CalcError):
    """Raised when input validation fails."""

    default_code = "VALIDATION_ERROR"


class ConversionError(CalcError):
    """Raised when converting between a base-N digit string and a float fails."""

    default_code = "CONVERSION_ERROR"


class UnsupportedBaseError(ConversionError):
    default_code = "UNSUPPORTED_BASE"


class InvalidDigitError(ConversionError):
    default_code = "INVALID_DIGIT"


class MultipleDecimalPointsError(ConversionError):
    default_code = "MULTIPLE_DECIMAL_POINTS"


class ParseError(CalcError):
    """Raised when lexing fails."""

    default_code = "PARSE_ERROR"


class UnmatchedBracketError(ParseError):
    default_code = "UNMATCHED_BRACKET"


class UnknownTokenError(ParseError):
    default_code = "UNKNOWN_TOKEN"


class EvaluationError(CalcError):
    """Raised when a postfix sequence cannot be evaluated."""

    default_code = "EVALUATION_ERROR"


class OperatorArityError(EvaluationError):
    default_code = "OPERATOR_ARITY"


class LhsNotSymbolError(EvaluationError):
    default_code = "LHS_NOT_SYMBOL"


class UndefinedNameError(EvaluationError):
    """Unknown variable or function name."""

    default_code = "NAME_ERROR"


class ArgumentError(EvaluationError):
    """Wrong argument count, or an argument outside a function's domain."""

    default_code = "ARGUMENT_ERROR"


class UnsupportedFunctionError(EvaluationError):
    default_code = "UNSUPPORTED"


class MissingOperatorError(EvaluationError):
    default_code = "MISSING_OPERATOR"


class TokenValueError(EvaluationError):
    default_code = "VALUE_ERROR"


class UnknownOperatorError(EvaluationError):
    default_code = "UNKNOWN_OPERATOR"

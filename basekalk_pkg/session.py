"""Interactive session state with stage-level caching.

A Session plays the part of the presentation layer's controller: it keeps
the last tokens and value around so that

- new input text is lexed once,
- changing the input base re-evaluates the cached tokens without re-lexing,
- changing the output base only re-formats the cached value.
"""

from __future__ import annotations

from collections.abc import Mapping

from . import config
from .api import evaluate, format_result, lex
from .functions import DEFAULT_REGISTRY, FunctionSpec
from .logging_config import get_logger
from .symbols import SymbolTable
from .types import CalcError, EvalResult, Token

logger = get_logger("session")


class Session:
    """Holds a symbol table, the active bases and the cached pipeline stages."""

    def __init__(
        self,
        input_base: int | None = None,
        output_base: int | None = None,
        symbols: SymbolTable | None = None,
        functions: Mapping[str, FunctionSpec] | None = None,
    ):
        self.input_base = config.DEFAULT_INPUT_BASE if input_base is None else input_base
        self.output_base = config.DEFAULT_OUTPUT_BASE if output_base is None else output_base
        self.symbols = SymbolTable() if symbols is None else symbols
        self.functions = DEFAULT_REGISTRY if functions is None else functions
        self.text = ""
        self._tokens: tuple[Token, ...] | None = None
        self._value: float | None = None
        self.last_result = EvalResult(
            ok=True, input_base=self.input_base, output_base=self.output_base
        )

    def submit(self, text: str) -> EvalResult:
        """Run a new expression through every stage."""
        self.text = text.strip()
        self._tokens = None
        self._value = None
        if not self.text:
            return self._finish(EvalResult(ok=True))
        try:
            self._tokens = lex(self.text)
        except CalcError as e:
            return self._fail(e)
        return self._run_from_evaluate()

    def set_input_base(self, base: int) -> EvalResult:
        """Switch the input base and re-evaluate the cached tokens."""
        if base == self.input_base:
            return self.last_result
        self.input_base = base
        self._value = None
        if self._tokens is None:
            return self._restate()
        return self._run_from_evaluate()

    def set_output_base(self, base: int) -> EvalResult:
        """Switch the output base and re-format the cached value."""
        if base == self.output_base:
            return self.last_result
        self.output_base = base
        if self._value is not None:
            return self._run_format()
        if self._tokens is not None:
            return self._run_from_evaluate()
        return self._restate()

    def _run_from_evaluate(self) -> EvalResult:
        try:
            self._value = evaluate(self._tokens, self.input_base, self.symbols, self.functions)
        except CalcError as e:
            self._value = None
            return self._fail(e)
        return self._run_format()

    def _run_format(self) -> EvalResult:
        try:
            rendered = format_result(self._value, self.output_base)
        except CalcError as e:
            return self._fail(e)
        return self._finish(EvalResult(ok=True, result=rendered, value=self._value))

    def _fail(self, error: CalcError) -> EvalResult:
        logger.info(
            "Session calculation of %r failed: %s",
            self.text,
            error,
            extra={"error_code": error.code},
        )
        return self._finish(EvalResult(ok=False, error=error.message, error_code=error.code))

    def _restate(self) -> EvalResult:
        """Repeat the last outcome under the current bases (nothing to recompute)."""
        last = self.last_result
        return self._finish(EvalResult(ok=last.ok, error=last.error, error_code=last.error_code))

    def _finish(self, result: EvalResult) -> EvalResult:
        result.input_base = self.input_base
        result.output_base = self.output_base
        self.last_result = result
        return result

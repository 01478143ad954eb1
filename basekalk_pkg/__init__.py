"""Basekalk package: arbitrary-base expression lexer, evaluator, converter and CLI."""

__all__ = [
    "config",
    "converter",
    "lexer",
    "evaluator",
    "symbols",
    "functions",
    "session",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "lex",
    "evaluate",
    "format_result",
    "calculate",
    "validate_expression",
    "clear_lex_cache",
]

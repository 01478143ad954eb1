"""Centralized configuration for Basekalk.

This module defines:
- The digit alphabet and the range of supported bases
- Character classes used by the lexer
- Operator precedence table
- Output limits (fractional digits) and input validation limits
- Cache sizes and default bases

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with BASEKALK_)
"""

import math
import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("basekalk")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Digit alphabet: the position of a character is its digit value
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DECIMAL_DIGITS = "0123456789"
DECIMAL_POINT = "."

MIN_BASE = 2
MAX_BASE = len(DIGIT_ALPHABET) - 1  # 61
# Up to base 36 only lowercase letters are digits, so input is case-folded
CASE_INSENSITIVE_MAX_BASE = DIGIT_ALPHABET.index("z") + 1

# Lexer character classes
SYMBOL_START_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ$_"
SYMBOL_CHARS = SYMBOL_START_CHARS + DECIMAL_DIGITS
WHITESPACE = " \t\r\n"

# Lower number binds tighter
OPERATOR_PRECEDENCE = {
    "^": 1,
    "*": 2,
    "/": 2,
    "%": 3,
    "+": 3,
    "-": 3,
    "(": 4,
    "=": 5,
}

# Output configuration
MAX_FRACTION_DIGITS = int(os.getenv("BASEKALK_MAX_FRACTION_DIGITS", "15"))
DEFAULT_INPUT_BASE = int(os.getenv("BASEKALK_INPUT_BASE", "10"))
DEFAULT_OUTPUT_BASE = int(os.getenv("BASEKALK_OUTPUT_BASE", "10"))

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("BASEKALK_MAX_INPUT_LENGTH", "10000"))  # characters

# Deepest allowed nesting of function calls, e.g. sqrt(sqrt(...))
MAX_NESTING_DEPTH = int(os.getenv("BASEKALK_MAX_NESTING_DEPTH", "100"))

# Logging level when none is passed to setup_logging or --log-level
LOG_LEVEL = os.getenv("BASEKALK_LOG_LEVEL", "WARNING")

# Cache configuration
CACHE_SIZE_LEX = int(os.getenv("BASEKALK_CACHE_SIZE_LEX", "1024"))

# Symbols every new session starts with
DEFAULT_CONSTANTS = {
    "pi": math.pi,
}

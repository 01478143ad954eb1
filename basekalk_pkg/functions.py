"""Built-in function registry.

Every built-in takes one float and returns a float. Domain errors yield NaN
and overflow yields infinity, matching plain IEEE-754 arithmetic, except
``fac`` which rejects fractional input with an ArgumentError.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Callable, Optional

from .types import ArgumentError

# Largest n for which n! fits in a double
_MAX_FACTORIAL = 170


@dataclass(frozen=True)
class FunctionSpec:
    """A registry entry: name, arity and the native computation."""

    name: str
    arity: int
    compute: Optional[Callable[..., float]] = None
    builtin: bool = True


def _ieee(func: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap a math function so domain errors give NaN and overflow gives inf."""

    def wrapper(x: float) -> float:
        try:
            return func(x)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def factorial(n: float) -> float:
    """Integer factorial of a non-negative whole number.

    Values <= 0 return 1. Results beyond the float range return infinity.

    Raises:
        ArgumentError: ``n`` is not a whole number
    """
    if n <= 0:
        return 1.0
    if math.isinf(n):
        return math.inf
    if math.isnan(n) or n != math.floor(n):
        raise ArgumentError(
            "Argument Error: factorial is not defined for fractional values"
        )
    if n > _MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(int(n)))


BUILTIN_FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec("sin", 1, _ieee(math.sin)),
    FunctionSpec("cos", 1, _ieee(math.cos)),
    FunctionSpec("tan", 1, _ieee(math.tan)),
    FunctionSpec("asin", 1, _ieee(math.asin)),
    FunctionSpec("acos", 1, _ieee(math.acos)),
    FunctionSpec("atan", 1, _ieee(math.atan)),
    FunctionSpec("exp", 1, _ieee(math.exp)),
    FunctionSpec("sqrt", 1, _ieee(math.sqrt)),
    FunctionSpec("cbrt", 1, _ieee(math.cbrt)),
    FunctionSpec("fac", 1, factorial),
)


class FunctionRegistry(Mapping):
    """Read-only name -> FunctionSpec mapping."""

    def __init__(self, specs: tuple[FunctionSpec, ...] | list[FunctionSpec] = BUILTIN_FUNCTIONS):
        self._specs = {spec.name: spec for spec in specs}

    def __getitem__(self, name: str) -> FunctionSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"FunctionRegistry({sorted(self._specs)!r})"


DEFAULT_REGISTRY = FunctionRegistry()

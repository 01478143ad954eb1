"""Variable storage shared across evaluations within a session."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .config import DEFAULT_CONSTANTS
from .logging_config import get_logger

logger = get_logger("symbols")


class SymbolTable(Mapping):
    """Mutable name -> float mapping.

    Values are only ever added or overwritten; there is no deletion. A new
    table is seeded with ``DEFAULT_CONSTANTS`` unless ``initial`` is given.
    """

    def __init__(self, initial: Mapping[str, float] | None = None):
        source = DEFAULT_CONSTANTS if initial is None else initial
        self._values: dict[str, float] = {name: float(v) for name, v in source.items()}

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __setitem__(self, name: str, value: float) -> None:
        self.set(name, value)

    def set(self, name: str, value: float) -> None:
        """Bind ``name`` to ``value``, replacing any earlier binding."""
        logger.debug("Assigning %s = %r", name, value)
        self._values[name] = float(value)

    def copy(self) -> SymbolTable:
        return SymbolTable(self._values)

    def __repr__(self) -> str:
        return f"SymbolTable({self._values!r})"

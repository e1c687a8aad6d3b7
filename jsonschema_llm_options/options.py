"""Configuration for the data transformer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

SYMBOLS_ENV = "JSONSCHEMA_LLM_OPTIONS_SYMBOLS"
MAX_DETAIL_ENV = "JSONSCHEMA_LLM_OPTIONS_MAX_DETAIL"


@dataclass(frozen=True)
class TransformOptions:
    """Options for the data transformer.

    Args:
        symbols: Extra symbol names to register alongside the ones the
            schema declares (e.g. values accepted by plain ``symbol`` fields).
        max_detail_len: Maximum length of rendered values in error details.
    """

    symbols: frozenset = field(default_factory=frozenset)
    max_detail_len: int = 200

    def __post_init__(self) -> None:
        if isinstance(self.symbols, str):
            raise ValueError("symbols must be a collection of names, not a string")
        object.__setattr__(self, "symbols", frozenset(self.symbols))
        for name in self.symbols:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"symbol names must be non-empty text, got {name!r}")
        if self.max_detail_len <= 0:
            raise ValueError("max_detail_len must be positive")

    @classmethod
    def from_env(cls) -> TransformOptions:
        """Build options from environment variables.

        ``JSONSCHEMA_LLM_OPTIONS_SYMBOLS`` is a comma-separated list of extra
        symbol names; ``JSONSCHEMA_LLM_OPTIONS_MAX_DETAIL`` overrides
        ``max_detail_len``.
        """
        raw_symbols = os.environ.get(SYMBOLS_ENV, "")
        symbols = frozenset(s.strip() for s in raw_symbols.split(",") if s.strip())

        raw_max = os.environ.get(MAX_DETAIL_ENV)
        if raw_max:
            try:
                max_detail_len = int(raw_max)
            except ValueError:
                raise ValueError(
                    f"{MAX_DETAIL_ENV} must be an integer, got {raw_max!r}"
                ) from None
            return cls(symbols=symbols, max_detail_len=max_detail_len)
        return cls(symbols=symbols)


def truncate(s: str | None, max_len: int = 200) -> str:
    if s is None:
        return "<null>"
    return s if len(s) <= max_len else s[:max_len] + "..."

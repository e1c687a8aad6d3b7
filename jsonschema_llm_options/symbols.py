"""Explicit symbol registry used for text-to-symbol conversion."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from jsonschema_llm_options.types import (
    ArrayType,
    DynamicMapType,
    EnumType,
    InlineObjectType,
    Schema,
    Symbol,
    TypeTag,
)


class SymbolRegistry:
    """Read-only lookup from text to canonical ``Symbol`` instances.

    Registries are built once, usually from the schema's own declared
    symbols, and never grow afterwards. Text that is not registered can't
    become a symbol.
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Iterable[str] = ()) -> None:
        table: dict[str, Symbol] = {}
        for name in symbols:
            if not isinstance(name, str):
                raise TypeError(f"symbol names must be text, got {name!r}")
            # first registration wins
            table.setdefault(
                str(name), name if isinstance(name, Symbol) else Symbol(name)
            )
        self._symbols = table

    @classmethod
    def from_schema(cls, schema: Schema, extra: Iterable[str] = ()) -> SymbolRegistry:
        """Collect symbol enum values and symbols found in defaults.

        Field keys are not registered: they name fields, not values.
        Declared instances come before ``extra`` so they stay canonical.
        """
        values: list[str] = []
        _collect_schema(schema, values)
        return cls([*values, *extra])

    def get(self, text: str) -> Optional[Symbol]:
        return self._symbols.get(text)

    def __contains__(self, text: object) -> bool:
        return text in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolRegistry({sorted(self._symbols)!r})"


def _collect_schema(schema: Schema, values: list[str]) -> None:
    for _, spec in schema:
        _collect_type(spec.type, values)
        if spec.has_default:
            _collect_value(spec.default, values)
        if spec.keys is not None:
            _collect_schema(spec.keys, values)


def _collect_type(tag: TypeTag, values: list[str]) -> None:
    if isinstance(tag, EnumType):
        values.extend(v for v in tag.values if isinstance(v, Symbol))
    elif isinstance(tag, ArrayType):
        _collect_type(tag.item, values)
    elif isinstance(tag, InlineObjectType):
        _collect_schema(tag.schema, values)
    elif isinstance(tag, DynamicMapType):
        _collect_type(tag.key_kind, values)
        _collect_type(tag.value_kind, values)


def _collect_value(value: Any, values: list[str]) -> None:
    if isinstance(value, Symbol):
        values.append(value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _collect_value(item, values)
    elif isinstance(value, dict):
        for k, v in value.items():
            _collect_value(k, values)
            _collect_value(v, values)

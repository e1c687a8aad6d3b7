"""Result values and composite output types for the data transformer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

from jsonschema_llm_options.exceptions import TransformError
from jsonschema_llm_options.types import Symbol

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful transformation."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed transformation carrying a single ``TransformError``."""

    error: TransformError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


TransformResult = Union[Ok, Err]


@dataclass(frozen=True)
class Record:
    """Ordered ``(Symbol, value)`` pairs for schema-declared objects.

    Field order follows the schema. Lookup works by key like a mapping;
    iterating yields the pairs.
    """

    fields: tuple = ()

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        for name, value in self.fields:
            if name == key:
                return value
        return default

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.fields)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def keys(self) -> list[Symbol]:
        return [name for name, _ in self.fields]

    def values(self) -> list[Any]:
        return [value for _, value in self.fields]

    def items(self) -> list[tuple]:
        return list(self.fields)

    def to_dict(self) -> dict:
        return dict(self.fields)


def to_json_value(value: Any) -> Any:
    """Convert transformer output back to a plain, string-keyed value tree.

    Records and dicts become dicts with ``str`` keys, symbols become
    ``str``, tuples become lists. Other values are returned unchanged.
    """
    if isinstance(value, (Record, dict)):
        pairs = value.fields if isinstance(value, Record) else value.items()
        return {str(k): to_json_value(v) for k, v in pairs}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, Symbol):
        return str(value)
    return value

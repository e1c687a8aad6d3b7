"""Type descriptor model: Schema, FieldSpec, type tags and symbols."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union

from jsonschema_llm_options.exceptions import SchemaDefinitionError


class Symbol(str):
    """An identifier value, distinct from arbitrary text.

    Symbols subclass ``str`` so that compiled documents holding them stay
    JSON-serialisable; ``isinstance(value, Symbol)`` tells them apart from
    plain text. Canonical instances live in a ``SymbolRegistry``.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Any = _NoDefault()


# ---------------------------------------------------------------------------
# Type tags
# ---------------------------------------------------------------------------


class Scalar(str, enum.Enum):
    """Leaf type tags."""

    STRING = "string"
    SYMBOL = "symbol"
    INTEGER = "integer"
    NON_NEG_INTEGER = "non_neg_integer"
    POS_INTEGER = "pos_integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ObjectType:
    """Object with schema-declared keys (taken from ``FieldSpec.keys``).

    Args:
        strict: ``True`` for the keyword-list spelling (extra keys forbidden,
            transformed into a ``Record``), ``False`` for the ``map`` shorthand
            (extra keys allowed, transformed into a ``dict``).
    """

    strict: bool = True


@dataclass(frozen=True)
class DynamicMapType:
    """Object whose keys are not known to the schema."""

    key_kind: TypeTag
    value_kind: TypeTag


@dataclass(frozen=True)
class InlineObjectType:
    """Array item carrying its own nested schema."""

    schema: Schema


@dataclass(frozen=True)
class ArrayType:
    item: TypeTag


@dataclass(frozen=True)
class EnumType:
    values: tuple

    @property
    def all_symbols(self) -> bool:
        return all(isinstance(v, Symbol) for v in self.values)


@dataclass(frozen=True)
class CustomType:
    """Opaque type validated by an external callable (never invoked here)."""

    validator: Any = field(compare=False)


@dataclass(frozen=True)
class UnknownType:
    raw: Any = None


TypeTag = Union[
    Scalar,
    ObjectType,
    DynamicMapType,
    InlineObjectType,
    ArrayType,
    EnumType,
    CustomType,
    UnknownType,
]

_TYPE_NAMES: dict[str, TypeTag] = {
    "string": Scalar.STRING,
    "atom": Scalar.SYMBOL,
    "symbol": Scalar.SYMBOL,
    "integer": Scalar.INTEGER,
    "non_neg_integer": Scalar.NON_NEG_INTEGER,
    "pos_integer": Scalar.POS_INTEGER,
    "float": Scalar.FLOAT,
    "boolean": Scalar.BOOLEAN,
    "keyword_list": ObjectType(strict=True),
    "map": ObjectType(strict=False),
}

_TAG_CLASSES = (
    Scalar,
    ObjectType,
    DynamicMapType,
    InlineObjectType,
    ArrayType,
    EnumType,
    CustomType,
    UnknownType,
)


def parse_type(raw: Any) -> TypeTag:
    """Turn a literal type spelling into a type tag.

    Unrecognised spellings degrade to ``UnknownType`` instead of failing.
    """
    if isinstance(raw, _TAG_CLASSES):
        return raw
    if isinstance(raw, str):
        return _TYPE_NAMES.get(raw, UnknownType(raw))
    if isinstance(raw, (tuple, list)) and raw and isinstance(raw[0], str):
        head, rest = raw[0], raw[1:]
        if head == "map" and len(rest) == 2:
            return DynamicMapType(parse_type(rest[0]), parse_type(rest[1]))
        if head == "list" and len(rest) == 1:
            sub = rest[0]
            if (
                isinstance(sub, (tuple, list))
                and len(sub) == 2
                and sub[0] == "keyword_list"
            ):
                return ArrayType(InlineObjectType(Schema.from_literal(sub[1])))
            return ArrayType(parse_type(sub))
        if head == "in" and len(rest) == 1 and isinstance(rest[0], (tuple, list)):
            return EnumType(tuple(rest[0]))
        if head == "custom" and rest:
            return CustomType(rest[0] if len(rest) == 1 else tuple(rest))
    return UnknownType(raw)


# ---------------------------------------------------------------------------
# FieldSpec / Schema
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one schema field.

    Args:
        type: The field's type tag.
        required: Whether the field must be present when it has no default.
        default: Value used when the field is absent. ``NO_DEFAULT`` means no
            default; any other value, falsy ones included, is a default.
        doc: Human-readable description, surfaced in function specs.
        keys: Nested schema for object, dynamic map and array-of-object types.
    """

    type: TypeTag
    required: bool = False
    default: Any = NO_DEFAULT
    doc: Optional[str] = None
    keys: Optional[Schema] = None

    def __post_init__(self) -> None:
        if self.doc is not None and not isinstance(self.doc, str):
            raise SchemaDefinitionError(
                f"field doc must be text, got {type(self.doc).__name__}"
            )

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FieldSpec:
        keys = options.get("keys")
        return cls(
            type=parse_type(options.get("type")),
            required=bool(options.get("required", False)),
            default=options["default"] if "default" in options else NO_DEFAULT,
            doc=options.get("doc"),
            keys=Schema.from_literal(keys) if keys is not None else None,
        )


SchemaLiteral = Union["Schema", Mapping[str, Any], list, tuple]


@dataclass(frozen=True)
class Schema:
    """Ordered sequence of ``(key, FieldSpec)`` pairs.

    Keys are unique within one level. Order drives output field order.
    """

    fields: tuple = ()

    def __post_init__(self) -> None:
        normalized = []
        seen = set()
        for key, spec in self.fields:
            if not isinstance(key, str):
                raise SchemaDefinitionError(
                    f"schema keys must be text, got {key!r}"
                )
            if key in seen:
                raise SchemaDefinitionError(f"duplicate schema key {key!r}")
            if not isinstance(spec, FieldSpec):
                raise SchemaDefinitionError(
                    f"schema field {key!r} must be a FieldSpec, got {type(spec).__name__}"
                )
            seen.add(key)
            normalized.append((Symbol(key), spec))
        object.__setattr__(self, "fields", tuple(normalized))

    @classmethod
    def from_literal(cls, literal: SchemaLiteral) -> Schema:
        """Build a Schema from a list of ``(key, options)`` pairs or a dict.

        ``options`` is a dict with ``type``, ``required``, ``default``,
        ``doc`` and ``keys`` entries, or an already-built ``FieldSpec``.

        Example::

            Schema.from_literal([
                ("name", {"type": "string", "required": True}),
                ("age", {"type": "integer", "default": 30}),
            ])
        """
        if isinstance(literal, Schema):
            return literal
        if isinstance(literal, Mapping):
            pairs = list(literal.items())
        elif isinstance(literal, (list, tuple)):
            pairs = list(literal)
        else:
            raise SchemaDefinitionError(
                f"schema must be a list of pairs or a mapping, got {type(literal).__name__}"
            )

        fields = []
        for pair in pairs:
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise SchemaDefinitionError(
                    f"schema entries must be (key, options) pairs, got {pair!r}"
                )
            key, options = pair
            if isinstance(options, FieldSpec):
                spec = options
            elif isinstance(options, Mapping):
                spec = FieldSpec.from_options(options)
            else:
                raise SchemaDefinitionError(
                    f"options for {key!r} must be a mapping, got {type(options).__name__}"
                )
            fields.append((key, spec))
        return cls(tuple(fields))

    def __iter__(self) -> Iterator[tuple]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, key: str) -> FieldSpec:
        for name, spec in self.fields:
            if name == key:
                return spec
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.fields)

    def keys(self) -> list[Symbol]:
        return [name for name, _ in self.fields]

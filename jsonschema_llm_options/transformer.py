"""Data transformer: decoded JSON value tree → typed, schema-shaped data.

Transformation is all-or-nothing. Every recursive step returns an ``Ok`` or
``Err`` value and the first ``Err`` is passed straight back up, so no
partial structure ever reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import structlog

from jsonschema_llm_options.exceptions import (
    MissingRequiredField,
    ShapeMismatch,
    Unhandled,
    UnknownSymbol,
)
from jsonschema_llm_options.options import TransformOptions, truncate
from jsonschema_llm_options.results import Err, Ok, Record, TransformResult
from jsonschema_llm_options.symbols import SymbolRegistry
from jsonschema_llm_options.types import (
    ArrayType,
    DynamicMapType,
    EnumType,
    FieldSpec,
    InlineObjectType,
    ObjectType,
    Scalar,
    Schema,
    SchemaLiteral,
    TypeTag,
)

# routed through stdlib logging: silent until the application configures it
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

ROOT_KEY = "<root>"


def transform_json(
    value: Any,
    schema: SchemaLiteral,
    *,
    registry: Optional[SymbolRegistry] = None,
    options: Optional[TransformOptions] = None,
) -> TransformResult:
    """Transform a decoded JSON value (e.g. an LLM response) against a schema.

    Handles:

    - applying defaults for missing fields and checking required ones
    - converting text to registered symbols for symbol fields, and to the
      declared values of symbol enums
    - nested objects, lists and dynamic maps

    Scalar values are passed through unchanged; range, enum membership and
    custom validation belong to the semantic validator run afterwards.

    Args:
        value: The decoded JSON object with text keys.
        schema: The option schema (literal or ``Schema``).
        registry: Symbols text may be converted to. Defaults to the symbols
            declared by ``schema`` plus ``options.symbols``.
        options: Transformer options.

    Returns:
        ``Ok(Record)`` with fields in schema order, or ``Err`` carrying the
        first failure.
    """
    options = options or TransformOptions()
    schema = Schema.from_literal(schema)
    if registry is None:
        registry = SymbolRegistry.from_schema(schema, options.symbols)

    if not isinstance(value, Mapping):
        result: TransformResult = Err(ShapeMismatch(ROOT_KEY, "object"))
    else:
        try:
            result = _Transformer(registry).record(value, schema, "")
        except Exception as e:
            logger.debug("transform_unhandled", error=repr(e))
            detail = truncate(f"{type(e).__name__}: {e}", options.max_detail_len)
            result = Err(Unhandled(detail))

    if isinstance(result, Err):
        logger.debug(
            "transform_failed", kind=result.error.kind, error=str(result.error)
        )
    return result


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else str(key)


class _Transformer:
    """Type-directed descent bound to one symbol registry."""

    def __init__(self, registry: SymbolRegistry) -> None:
        self.registry = registry

    def record(self, raw: Mapping, schema: Schema, path: str) -> TransformResult:
        pairs = self.fields(raw, schema, path)
        if isinstance(pairs, Err):
            return pairs
        return Ok(Record(tuple(pairs.value)))

    def mapping(self, raw: Mapping, schema: Schema, path: str) -> TransformResult:
        pairs = self.fields(raw, schema, path)
        if isinstance(pairs, Err):
            return pairs
        return Ok(dict(pairs.value))

    def fields(self, raw: Mapping, schema: Schema, path: str) -> TransformResult:
        pairs = []
        for key, spec in schema:
            field_path = _join(path, key)
            if key in raw:
                result = self.field(raw[key], spec, field_path)
            else:
                result = self.missing(spec, field_path)
            if isinstance(result, Err):
                return result
            pairs.append((key, result.value))
        return Ok(pairs)

    def missing(self, spec: FieldSpec, path: str) -> TransformResult:
        if spec.has_default:
            return Ok(spec.default)
        if spec.required:
            return Err(MissingRequiredField(path))
        return Ok(None)

    def field(self, raw: Any, spec: FieldSpec, path: str) -> TransformResult:
        # null counts as omitted for every kind
        if raw is None:
            return Ok(None)
        return self.value(raw, spec.type, spec.keys, path)

    def value(
        self, raw: Any, tag: TypeTag, keys: Optional[Schema], path: str
    ) -> TransformResult:
        if tag is Scalar.SYMBOL:
            return self.symbol(raw)

        if isinstance(tag, EnumType):
            if isinstance(raw, str) and tag.all_symbols:
                return self.enum_symbol(raw, tag)
            return Ok(raw)

        if isinstance(tag, ObjectType):
            if not isinstance(raw, Mapping):
                return Err(ShapeMismatch(path, "object"))
            nested = keys or Schema()
            if tag.strict:
                return self.record(raw, nested, path)
            return self.mapping(raw, nested, path)

        if isinstance(tag, InlineObjectType):
            if not isinstance(raw, Mapping):
                return Err(ShapeMismatch(path, "object"))
            return self.record(raw, tag.schema, path)

        if isinstance(tag, DynamicMapType):
            return self.dynamic_map(raw, tag, path)

        if isinstance(tag, ArrayType):
            return self.array(raw, tag, keys, path)

        # scalars, custom and unknown types pass through
        return Ok(raw)

    def symbol(self, raw: Any) -> TransformResult:
        if not isinstance(raw, str):
            return Ok(raw)
        symbol = self.registry.get(raw)
        if symbol is None:
            return Err(UnknownSymbol(raw))
        return Ok(symbol)

    def enum_symbol(self, raw: str, tag: EnumType) -> TransformResult:
        # only the enum's own declared instances, never other registered symbols
        for declared in tag.values:
            if declared == raw:
                return Ok(declared)
        return Err(UnknownSymbol(raw))

    def array(
        self, raw: Any, tag: ArrayType, keys: Optional[Schema], path: str
    ) -> TransformResult:
        if not isinstance(raw, (list, tuple)):
            return Err(ShapeMismatch(path, "array"))
        item_keys = keys if isinstance(tag.item, ObjectType) else None
        items = []
        for index, item in enumerate(raw):
            result = self.value(item, tag.item, item_keys, f"{path}[{index}]")
            if isinstance(result, Err):
                return result
            items.append(result.value)
        return Ok(items)

    def dynamic_map(self, raw: Any, tag: DynamicMapType, path: str) -> TransformResult:
        if not isinstance(raw, Mapping):
            return Err(ShapeMismatch(path, "object"))
        converted = {}
        for raw_key, raw_value in raw.items():
            key = self.map_key(raw_key, tag.key_kind)
            if isinstance(key, Err):
                return key
            value = self.value(raw_value, tag.value_kind, None, _join(path, raw_key))
            if isinstance(value, Err):
                return value
            converted[key.value] = value.value
        return Ok(converted)

    def map_key(self, raw_key: Any, kind: TypeTag) -> TransformResult:
        if kind is Scalar.SYMBOL:
            return self.symbol(raw_key)
        if kind is Scalar.STRING:
            return Ok(str(raw_key))
        return Ok(raw_key)

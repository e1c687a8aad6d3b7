"""Structural checks and the interfaces of external validators."""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

import jsonschema
import jsonschema.exceptions

from jsonschema_llm_options.compiler import to_json_schema
from jsonschema_llm_options.results import Err, Ok, Record, to_json_value
from jsonschema_llm_options.types import (
    ArrayType,
    FieldSpec,
    InlineObjectType,
    ObjectType,
    Schema,
    SchemaLiteral,
)


@runtime_checkable
class CustomValidator(Protocol):
    """Single-argument validator carried by ``custom`` type tags.

    The transformer only carries the reference; the semantic validator is
    the one that calls it.
    """

    def __call__(self, value: Any) -> Union[Ok, Err]:
        """Return ``Ok(value)`` on success or ``Err`` with a message."""
        ...


@runtime_checkable
class SemanticValidator(Protocol):
    """Re-checks what the transformer deliberately skips.

    Numeric ranges, enum membership and custom validators are enforced by
    an implementation of this protocol, fed the transformer's output
    verbatim together with the same schema.
    """

    def validate(self, data: Any, schema: Schema) -> Union[Ok, Err]:
        ...


def structural_errors(data: Any, schema: SchemaLiteral) -> list[str]:
    """Validate transformer output against the schema's compiled document.

    ``data`` is converted to its string-keyed form first, so records,
    dicts with symbol keys and symbol values can all be checked. A ``None``
    under an optional field is dropped before checking, since the
    transformer yields ``None`` for omitted optional fields. A ``None``
    under a required field is kept and reported as a type error.

    Returns:
        A list of error messages, empty when the data is valid.
    """
    schema = Schema.from_literal(schema)
    document = to_json_schema(schema)
    instance = to_json_value(_prune(data, schema))
    try:
        jsonschema.Draft202012Validator.check_schema(document)
    except jsonschema.exceptions.SchemaError as e:
        return [f"Schema validation error: {e.message}"]
    validator = jsonschema.Draft202012Validator(document)
    return [str(e.message) for e in validator.iter_errors(instance)]


def _prune(value: Any, schema: Schema) -> Any:
    if isinstance(value, Record):
        pairs = value.fields
    elif isinstance(value, dict):
        pairs = value.items()
    else:
        return value
    pruned = {}
    for key, item in pairs:
        if key not in schema:
            pruned[key] = item
        elif item is None and not schema[key].required:
            continue
        else:
            pruned[key] = _prune_field(item, schema[key])
    return pruned


def _prune_field(value: Any, spec: FieldSpec) -> Any:
    tag = spec.type
    if isinstance(tag, ObjectType):
        return _prune(value, spec.keys or Schema())
    if isinstance(tag, InlineObjectType):
        return _prune(value, tag.schema)
    if isinstance(tag, ArrayType) and isinstance(value, (list, tuple)):
        if isinstance(tag.item, InlineObjectType):
            return [_prune(item, tag.item.schema) for item in value]
        if isinstance(tag.item, ObjectType):
            return [_prune(item, spec.keys or Schema()) for item in value]
    return value

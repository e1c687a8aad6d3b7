"""Schema compilers: option schema → JSON Schema / function spec.

Compilation is total: unknown type tags degrade to an empty (permissive)
fragment instead of failing.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

from jsonschema_llm_options.types import (
    ArrayType,
    CustomType,
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

_SCALAR_FRAGMENTS: dict[Scalar, dict[str, Any]] = {
    Scalar.STRING: {"type": "string"},
    Scalar.SYMBOL: {"type": "string"},
    Scalar.INTEGER: {"type": "integer"},
    Scalar.NON_NEG_INTEGER: {"type": "integer", "minimum": 0},
    Scalar.POS_INTEGER: {"type": "integer", "minimum": 1},
    Scalar.FLOAT: {"type": "number"},
    Scalar.BOOLEAN: {"type": "boolean"},
}


def to_json_schema(schema: SchemaLiteral) -> dict[str, Any]:
    """Convert an option schema to a JSON Schema document.

    Example::

        to_json_schema([
            ("name", {"type": "string", "required": True}),
            ("age", {"type": "integer", "default": 30}),
        ])
        # {"type": "object",
        #  "properties": {"name": {"type": "string"},
        #                 "age": {"type": "integer", "default": 30}},
        #  "required": ["name"]}

    ``required`` lists required keys in schema order and is left out when
    no field is required.
    """
    schema = Schema.from_literal(schema)

    properties = {str(key): _compile_field(spec) for key, spec in schema}
    required = [str(key) for key, spec in schema if spec.required]

    document: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        document["required"] = required
    return document


def to_function_spec(
    name: str, description: str, schema: SchemaLiteral
) -> dict[str, Any]:
    """Convert an option schema to a function spec for LLM function calling.

    Each top-level property carries its field's ``doc`` as ``description``.
    Docs of nested fields are not surfaced.

    Args:
        name: The name of the function the LLM should call.
        description: What the function does.
        schema: The option schema describing the function parameters.

    Returns:
        ``{"name": ..., "description": ..., "parameters": <JSON Schema>}``
    """
    if not isinstance(name, str) or not name.strip():
        raise ValueError("name must be non-empty text")
    if not isinstance(description, str):
        raise ValueError("description must be text")

    schema = Schema.from_literal(schema)
    parameters = to_json_schema(schema)

    for key, spec in schema:
        if spec.doc is not None:
            parameters["properties"][str(key)]["description"] = spec.doc

    return {
        "name": name,
        "description": description,
        "parameters": parameters,
    }


def _compile_field(spec: FieldSpec) -> dict[str, Any]:
    fragment = _compile_type(spec.type, spec.keys)
    # presence, not truthiness: False and 0 defaults are emitted too
    if spec.has_default:
        fragment["default"] = copy.deepcopy(spec.default)
    return fragment


def _compile_type(tag: TypeTag, keys: Optional[Schema]) -> dict[str, Any]:
    if isinstance(tag, Scalar):
        return dict(_SCALAR_FRAGMENTS[tag])

    if isinstance(tag, ObjectType):
        nested = to_json_schema(keys or Schema())
        if tag.strict:
            nested["additionalProperties"] = False
        return nested

    if isinstance(tag, DynamicMapType):
        fragment: dict[str, Any] = {"type": "object"}
        if keys:
            fragment.update(to_json_schema(keys))
        return fragment

    if isinstance(tag, ArrayType):
        if isinstance(tag.item, InlineObjectType):
            items = to_json_schema(tag.item.schema)
            items["additionalProperties"] = False
        elif isinstance(tag.item, ObjectType):
            # list of objects described by the field's own keys
            items = _compile_type(tag.item, keys)
        else:
            items = _compile_type(tag.item, None)
        return {"type": "array", "items": items}

    if isinstance(tag, EnumType):
        return {"enum": copy.deepcopy(list(tag.values))}

    if isinstance(tag, CustomType):
        return {"type": "string"}

    return {}

"""OptionsSchemaEngine: one schema, compiled once, used in both directions."""

from __future__ import annotations

import copy
from typing import Any, Optional

from jsonschema_llm_options.compiler import to_function_spec, to_json_schema
from jsonschema_llm_options.options import TransformOptions
from jsonschema_llm_options.results import Err, TransformResult
from jsonschema_llm_options.symbols import SymbolRegistry
from jsonschema_llm_options.transformer import transform_json
from jsonschema_llm_options.types import Schema, SchemaLiteral
from jsonschema_llm_options.validation import structural_errors


class OptionsSchemaEngine:
    """Binds an option schema to its compiled document and symbol registry.

    The schema is parsed, compiled and scanned for symbols once at init
    time; every call after that is pure.

    Usage::

        engine = OptionsSchemaEngine([
            ("name", {"type": "string", "required": True}),
            ("age", {"type": "integer", "default": 30}),
        ])
        spec = engine.function_spec("create_user", "Create a new user")
        result = engine.transform({"name": "Bo"})
        user = result.unwrap()

    Args:
        schema: The option schema (literal or ``Schema``).
        options: Transformer options. Extra ``symbols`` are added to the
            registry built from the schema.
    """

    def __init__(
        self, schema: SchemaLiteral, options: Optional[TransformOptions] = None
    ) -> None:
        self._options = options or TransformOptions()
        self._schema = Schema.from_literal(schema)
        self._registry = SymbolRegistry.from_schema(
            self._schema, self._options.symbols
        )
        self._document = to_json_schema(self._schema)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def registry(self) -> SymbolRegistry:
        return self._registry

    def json_schema(self) -> dict[str, Any]:
        """Return a copy of the compiled JSON Schema document."""
        return copy.deepcopy(self._document)

    def function_spec(self, name: str, description: str) -> dict[str, Any]:
        return to_function_spec(name, description, self._schema)

    def transform(self, value: Any) -> TransformResult:
        return transform_json(
            value, self._schema, registry=self._registry, options=self._options
        )

    def transform_or_raise(self, value: Any) -> Any:
        """Like ``transform`` but raises the ``TransformError`` on failure."""
        return self.transform(value).unwrap()

    def check(self, value: Any) -> list[str]:
        """Transform ``value`` and check the result's structure.

        Returns the transform error's message if transformation fails,
        otherwise the structural errors of the typed result (empty when
        valid). A null sent for a required field is reported as a type
        error, as validating the raw input would report it.
        """
        result = self.transform(value)
        if isinstance(result, Err):
            return [str(result.error)]
        return structural_errors(result.value, self._schema)

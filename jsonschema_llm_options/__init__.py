"""jsonschema-llm-options: option schemas for LLM structured output.

Compiles a declarative option schema into a JSON Schema document or a
function-calling spec, and transforms decoded LLM output back into typed,
schema-shaped data.

Public API re-exports for consumer convenience.
"""

import logging

from jsonschema_llm_options.compiler import to_function_spec, to_json_schema
from jsonschema_llm_options.engine import OptionsSchemaEngine
from jsonschema_llm_options.exceptions import (
    EngineError,
    MissingRequiredField,
    ResponseParsingError,
    SchemaDefinitionError,
    ShapeMismatch,
    TransformError,
    Unhandled,
    UnknownSymbol,
)
from jsonschema_llm_options.formatter import ToolFormatter
from jsonschema_llm_options.formatters.chat_completions import (
    ChatCompletionsToolFormatter,
)
from jsonschema_llm_options.formatters.claude import ClaudeToolFormatter
from jsonschema_llm_options.formatters.gemini import GeminiToolFormatter
from jsonschema_llm_options.options import TransformOptions
from jsonschema_llm_options.results import Err, Ok, Record, TransformResult, to_json_value
from jsonschema_llm_options.symbols import SymbolRegistry
from jsonschema_llm_options.transformer import transform_json
from jsonschema_llm_options.types import FieldSpec, Schema, Symbol
from jsonschema_llm_options.validation import (
    CustomValidator,
    SemanticValidator,
    structural_errors,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChatCompletionsToolFormatter",
    "ClaudeToolFormatter",
    "CustomValidator",
    "EngineError",
    "Err",
    "FieldSpec",
    "GeminiToolFormatter",
    "MissingRequiredField",
    "Ok",
    "OptionsSchemaEngine",
    "Record",
    "ResponseParsingError",
    "Schema",
    "SchemaDefinitionError",
    "SemanticValidator",
    "ShapeMismatch",
    "Symbol",
    "SymbolRegistry",
    "ToolFormatter",
    "TransformError",
    "TransformOptions",
    "TransformResult",
    "Unhandled",
    "UnknownSymbol",
    "structural_errors",
    "to_function_spec",
    "to_json_schema",
    "to_json_value",
    "transform_json",
]

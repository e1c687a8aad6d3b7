"""Exception hierarchy for jsonschema-llm-options."""

from __future__ import annotations


class EngineError(RuntimeError):
    """Base exception for schema engine failures."""


class SchemaDefinitionError(EngineError, ValueError):
    """A schema literal could not be turned into a Schema."""


class ResponseParsingError(EngineError):
    """Formatter couldn't extract tool-call arguments from an LLM response."""


class TransformError(EngineError):
    """Base class for data transformer failures.

    Transform errors are returned inside ``Err`` values rather than raised;
    ``Err.unwrap()`` raises them for callers that prefer exceptions.
    """

    kind = "transform_error"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingRequiredField(TransformError):
    """A required field with no default was absent from the input."""

    kind = "missing_required_field"

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Required key {self.key} not found in response"


class UnknownSymbol(TransformError):
    """Text could not be converted to a registered symbol."""

    kind = "unknown_symbol"

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"Unknown symbol {self.text!r}: not a registered symbol"


class ShapeMismatch(TransformError):
    """A composite value was expected but the input had another shape."""

    kind = "shape_mismatch"

    def __init__(self, key: str, expected: str) -> None:
        super().__init__(key, expected)
        self.key = key
        self.expected = expected

    def __str__(self) -> str:
        return f"Expected {self.expected} for key {self.key}"


class Unhandled(TransformError):
    """Catch-all for unexpected failures during transformation."""

    kind = "unhandled"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Failed to transform JSON: {self.detail}"

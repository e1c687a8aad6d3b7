"""Strategy interface for turning function specs into provider tools."""

from __future__ import annotations

import json
from typing import Any, Mapping, Protocol, runtime_checkable

from jsonschema_llm_options.options import truncate


@runtime_checkable
class ToolFormatter(Protocol):
    """Strategy interface for formatting tools per provider.

    Each provider has its own tool definition and tool-call response shape.
    Implementations wrap a function spec and pull the decoded call arguments
    back out, ready for ``transform_json``.
    """

    def format_tool(self, function_spec: Mapping[str, Any]) -> dict[str, Any]:
        """Wrap a function spec into a provider-specific tool definition.

        Args:
            function_spec: Output of ``to_function_spec``.

        Returns:
            The tool definition to place in the provider request.
        """
        ...

    def extract_arguments(self, response: Mapping[str, Any]) -> Mapping[str, Any]:
        """Extract the tool-call arguments from a decoded provider response.

        Args:
            response: The provider response body, already decoded.

        Returns:
            The arguments object the model produced.

        Raises:
            ResponseParsingError: If the response holds no usable tool call.
        """
        ...


def render_response(response: Any, max_len: int = 200) -> str:
    """Render a decoded response for error messages, truncated."""
    try:
        text = json.dumps(response, default=str)
    except (TypeError, ValueError):
        text = repr(response)
    return truncate(text, max_len)

"""Anthropic Claude Messages API tool formatter."""

from __future__ import annotations

from typing import Any, Mapping

from jsonschema_llm_options.exceptions import ResponseParsingError
from jsonschema_llm_options.formatter import render_response


class ClaudeToolFormatter:
    """Anthropic Claude Messages API tool formatter (tool-use wire format).

    The function spec's ``parameters`` become the tool's ``input_schema``.
    Extracts arguments from ``content[].type == "tool_use" → input``.
    """

    def format_tool(self, function_spec: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "name": function_spec["name"],
            "description": function_spec.get("description", ""),
            "input_schema": function_spec["parameters"],
        }

    def extract_arguments(self, response: Mapping[str, Any]) -> Mapping[str, Any]:
        try:
            content = response.get("content")
            if not content or not isinstance(content, list):
                raise ResponseParsingError(
                    f"Claude response missing 'content' array: "
                    f"{render_response(response)}"
                )

            for block in content:
                if block.get("type") == "tool_use":
                    input_data = block.get("input")
                    if isinstance(input_data, Mapping):
                        return input_data

            raise ResponseParsingError(
                f"Claude response contains no 'tool_use' content block: "
                f"{render_response(response)}"
            )
        except ResponseParsingError:
            raise
        except Exception as e:
            raise ResponseParsingError(
                f"Failed to parse Claude response: {render_response(response)}"
            ) from e

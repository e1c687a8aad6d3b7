"""OpenAI Chat Completions tool formatter."""

from __future__ import annotations

import json
from typing import Any, Mapping

from jsonschema_llm_options.exceptions import ResponseParsingError
from jsonschema_llm_options.formatter import render_response


class ChatCompletionsToolFormatter:
    """OpenAI Chat Completions API tool formatter.

    Wraps the function spec as ``{"type": "function", "function": ...}``.
    Works with any endpoint that speaks the Chat Completions wire format
    (OpenAI, Azure OpenAI, etc.).

    Extracts arguments from
    ``choices[0].message.tool_calls[0].function.arguments``, which the API
    sends as JSON text.

    Args:
        strict: Ask the provider for strict schema adherence.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def format_tool(self, function_spec: Mapping[str, Any]) -> dict[str, Any]:
        function = dict(function_spec)
        if self.strict:
            function["strict"] = True
        return {"type": "function", "function": function}

    def extract_arguments(self, response: Mapping[str, Any]) -> Mapping[str, Any]:
        try:
            choices = response.get("choices")
            if not choices or not isinstance(choices, list):
                raise ResponseParsingError(
                    f"Chat Completions response missing 'choices' array: "
                    f"{render_response(response)}"
                )

            message = choices[0].get("message")
            if message is None:
                raise ResponseParsingError(
                    f"Chat Completions response missing 'choices[0].message': "
                    f"{render_response(response)}"
                )

            tool_calls = message.get("tool_calls")
            if not tool_calls or not isinstance(tool_calls, list):
                raise ResponseParsingError(
                    f"Chat Completions message has no 'tool_calls': "
                    f"{render_response(response)}"
                )

            arguments = tool_calls[0].get("function", {}).get("arguments")
            if isinstance(arguments, str):
                arguments = json.loads(arguments)

            if not isinstance(arguments, Mapping):
                raise ResponseParsingError(
                    f"Chat Completions tool arguments are not an object: "
                    f"{render_response(response)}"
                )

            return arguments
        except ResponseParsingError:
            raise
        except Exception as e:
            raise ResponseParsingError(
                f"Failed to parse Chat Completions response: {render_response(response)}"
            ) from e

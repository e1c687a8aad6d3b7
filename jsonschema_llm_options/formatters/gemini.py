"""Google Gemini generateContent tool formatter."""

from __future__ import annotations

from typing import Any, Mapping

from jsonschema_llm_options.exceptions import ResponseParsingError
from jsonschema_llm_options.formatter import render_response


class GeminiToolFormatter:
    """Google Gemini generateContent API tool formatter.

    Wraps the function spec in ``functionDeclarations``. Extracts arguments
    from the first ``candidates[0].content.parts[].functionCall.args``.
    """

    def format_tool(self, function_spec: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "functionDeclarations": [
                {
                    "name": function_spec["name"],
                    "description": function_spec.get("description", ""),
                    "parameters": function_spec["parameters"],
                }
            ]
        }

    def extract_arguments(self, response: Mapping[str, Any]) -> Mapping[str, Any]:
        try:
            candidates = response.get("candidates")
            if not candidates or not isinstance(candidates, list):
                raise ResponseParsingError(
                    f"Gemini response missing 'candidates' array: "
                    f"{render_response(response)}"
                )

            first = candidates[0]

            if first.get("finishReason") == "SAFETY":
                raise ResponseParsingError(
                    f"Gemini response blocked by SAFETY filter: "
                    f"{render_response(response)}"
                )

            parts = (first.get("content") or {}).get("parts")
            if not parts or not isinstance(parts, list):
                raise ResponseParsingError(
                    f"Gemini response missing 'candidates[0].content.parts': "
                    f"{render_response(response)}"
                )

            for part in parts:
                call = part.get("functionCall")
                if call is not None:
                    args = call.get("args", {})
                    if not isinstance(args, Mapping):
                        raise ResponseParsingError(
                            f"Gemini 'functionCall.args' is not an object: "
                            f"{render_response(response)}"
                        )
                    return args

            raise ResponseParsingError(
                f"Gemini response contains no 'functionCall' part: "
                f"{render_response(response)}"
            )
        except ResponseParsingError:
            raise
        except Exception as e:
            raise ResponseParsingError(
                f"Failed to parse Gemini response: {render_response(response)}"
            ) from e

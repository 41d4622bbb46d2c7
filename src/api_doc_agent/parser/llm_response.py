"""Parse LLM output into an Operation."""

import json
import re

from pydantic import ValidationError

from api_doc_agent.errors import EnrichmentError
from api_doc_agent.parser.base import Operation

DEFAULT_SUMMARY = "API endpoint"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_RESPONSES = {"200": {"description": "Successful response"}}


def parse_llm_response(text: str) -> Operation:
    """Build an Operation from a model response that should contain a JSON object.

    Raises EnrichmentError when no valid JSON object can be recovered.
    """
    try:
        data = json.loads(_extract_json(text))
    except json.JSONDecodeError as e:
        raise EnrichmentError(f"Model response is not valid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise EnrichmentError("Model response is not a JSON object")

    data["summary"] = data.get("summary") or DEFAULT_SUMMARY
    data["description"] = data.get("description") or DEFAULT_DESCRIPTION
    data["responses"] = data.get("responses") or dict(DEFAULT_RESPONSES)
    if not data.get("parameters"):
        data.pop("parameters", None)

    try:
        return Operation.model_validate(data)
    except ValidationError as e:
        raise EnrichmentError(f"Model response does not describe an operation: {e}") from e


def _extract_json(text: str) -> str:
    """Extract JSON from a response that might contain Markdown code blocks or extra prose."""
    match = re.search(r"```(?:json)?\s*\n?(\{.*?\})\s*```", text, re.DOTALL)
    if match:
        return match.group(1)
    match = re.search(r"\{.*\}", text, re.DOTALL)
    if match:
        return match.group(0)
    return text.strip()

"""
Helpers for reading JSON out of free-text LLM replies.

Models routinely wrap the requested JSON in prose or code fences. The
outermost object is sliced out before parsing.
"""

import json
import logging
from typing import Any

from interview_guide.core.exceptions import MalformedResponse

logger = logging.getLogger(__name__)


def extract_json(response: str) -> str:
    """
    Slice the outermost ``{...}`` span out of an LLM reply.

    Returns the text unchanged when it holds no such span.
    """
    json_start = response.find("{")
    json_end = response.rfind("}")
    if json_start != -1 and json_end != -1 and json_end > json_start:
        return response[json_start:json_end + 1]
    return response


def parse_response(response: str | None) -> Any:
    """
    Parse the JSON carried by an LLM reply.

    Raises:
        MalformedResponse: If no parseable JSON is found
    """
    if response is None:
        raise MalformedResponse("LLM returned no content")

    json_str = extract_json(response)
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse LLM JSON: {e}")
        raise MalformedResponse(
            f"LLM response is not valid JSON: {e}",
            details={"preview": response[:200]},
        ) from e

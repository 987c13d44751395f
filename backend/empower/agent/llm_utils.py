"""Helpers for reading JSON out of LLM replies."""

import json
import re
from collections.abc import Iterator
from typing import Any

from empower.core.logging import get_logger

logger = get_logger(__name__)

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_CODE_BLOCK = re.compile(r"```[a-zA-Z]*\s*\n(.*?)\n\s*```", re.DOTALL)


def _loads_lenient(text: str) -> Any | None:
    """json.loads after stripping whitespace and trailing commas; None on failure."""
    try:
        return json.loads(_TRAILING_COMMA.sub(r"\1", text.strip()))
    except ValueError:
        return None


def _first_balanced_json(text: str) -> str | None:
    """Return the first balanced {...} or [...] span, ignoring brackets in strings."""
    start = next((i for i, ch in enumerate(text) if ch in "{["), None)
    if start is None:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in "{[":
            depth += 1
        elif ch in "}]":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def _candidates(content: str) -> Iterator[tuple[str, str]]:
    yield "direct", content

    block = _CODE_BLOCK.search(content)
    if block:
        yield "code_block", block.group(1)

    span = _first_balanced_json(content)
    if span:
        yield "substring", span


def parse_llm_json_response(content: str | None) -> dict[str, Any] | list[Any]:
    """Parse JSON from an LLM reply.

    Tries, in order: the whole reply, the first fenced code block, and the
    first balanced JSON span inside surrounding prose. Trailing commas are
    tolerated in every case.

    Raises:
        ValueError: If content is empty or no candidate parses
    """
    if not content:
        raise ValueError("Empty LLM response")

    for strategy, candidate in _candidates(content):
        result = _loads_lenient(candidate)
        if isinstance(result, dict | list):
            logger.debug("Parsed LLM JSON", strategy=strategy)
            return result

    logger.error("Failed to parse LLM JSON response", content_preview=content[:200])
    raise ValueError("Failed to parse LLM JSON response: no valid JSON found")


def parse_llm_json_object(content: str | None) -> dict[str, Any]:
    """Like parse_llm_json_response, but the result must be a JSON object."""
    result = parse_llm_json_response(content)
    if not isinstance(result, dict):
        raise ValueError(f"Expected a JSON object, got {type(result).__name__}")
    return result

"""Tolerant JSON extraction from raw LLM responses.

Models routinely wrap the object in markdown fences or prose, leave trailing
commas, or forget to quote keys. These helpers recover the object when that
can be done without guessing at content.
"""

import json
import logging
import re
from typing import Any

from ..config import EnvVar, get_environment

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json|JSON)?[ \t]*\n?([\s\S]*?)\n?[ \t]*```")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_UNQUOTED_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*:)")

# Preambles seen in chat-tuned model output, matched case-insensitively.
_PREAMBLES = (
    "here is the json:",
    "here's the json:",
    "json output:",
    "output:",
    "result:",
    "json:",
)


def _loads_object(text: str) -> dict[str, Any] | None:
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def _balanced_object(text: str) -> str | None:
    """Slice the first brace-balanced ``{...}``, skipping braces in strings."""
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def _strip_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text)


def _quote_keys(text: str) -> str:
    """Quote bare identifier keys. Can misfire inside string values."""
    return _UNQUOTED_KEY.sub(r'\1"\2"\3', _strip_trailing_commas(text))


def repair_json(content: str) -> dict[str, Any] | None:
    """Extract a JSON object from a raw model response.

    Tries, in order: strict parsing, the first fenced code block, text after
    a known preamble ("Here is the JSON:"), the first balanced ``{...}``
    and finally the whole text. Each candidate is tried as-is and then with
    trailing commas removed, and then with bare keys quoted as well.

    Args:
        content: Raw response text.

    Returns:
        The parsed object, or None if no JSON object could be recovered.
        Top-level arrays and scalars are not objects and yield None.

    Example:
        >>> repair_json('```json\\n{"label": "Hi",}\\n```')
        {'label': 'Hi'}
    """
    text = content.strip()
    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    candidates: list[str] = []
    fenced = _FENCE.search(text)
    if fenced:
        candidates.append(fenced.group(1).strip())
    lowered = text.lower()
    for prefix in _PREAMBLES:
        if lowered.startswith(prefix):
            candidates.append(text[len(prefix) :].strip())
            break
    candidates.append(text)

    for candidate in candidates:
        for attempt in (candidate, _strip_trailing_commas(candidate), _quote_keys(candidate)):
            parsed = _loads_object(attempt)
            if parsed is None:
                sliced = _balanced_object(attempt)
                parsed = _loads_object(sliced) if sliced else None
            if parsed is not None:
                logger.debug("Recovered JSON object from malformed response")
                return parsed

    logger.debug(f"Could not recover a JSON object from {len(content)} characters")
    return None


def parse_json_object(content: str, repair: bool | None = None) -> dict[str, Any] | None:
    """Parse a JSON object, repairing it when enabled.

    Args:
        content: Raw text.
        repair: Use repair_json. Defaults to COSMO_REPAIR_JSON.

    Returns:
        The parsed object, or None.
    """
    if get_environment(EnvVar.REPAIR_JSON, override=repair):
        return repair_json(content)
    return _loads_object(content.strip())


__all__ = ["repair_json", "parse_json_object"]

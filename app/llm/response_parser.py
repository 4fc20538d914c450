"""Lenient parsing of model output into JSON objects and string lists."""

import json
import re
from typing import Any

_LIST_DELIMITERS = re.compile(r"\n|,|;")
_BULLET_PREFIX = re.compile(r"^[-•*\d.)\s]+")


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse model output as a JSON object, tolerating Markdown fences.

    Returns an empty dict when the content is not a JSON object.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def as_string_list(value: Any) -> list[str]:
    """Coerce a model field into a list of non-empty strings.

    Accepts a list, a JSON-encoded list, a ``{"terms": [...]}`` object, or a
    string delimited by newlines, commas or semicolons.
    """
    if not value:
        return []
    if isinstance(value, list):
        return _non_empty(value)
    if isinstance(value, dict):
        terms = value.get("terms")
        return _non_empty(terms) if isinstance(terms, list) else []

    text = str(value)
    decoded = _try_json(text)
    if isinstance(decoded, list):
        return _non_empty(decoded)
    if isinstance(decoded, dict) and isinstance(decoded.get("terms"), list):
        return _non_empty(decoded["terms"])
    return [part.strip() for part in _LIST_DELIMITERS.split(text) if part.strip()]


def clean_bullets(value: Any) -> list[str]:
    """Coerce model output into bullet strings without leading list markers."""
    if not value:
        return []
    if isinstance(value, list):
        return _strip_markers(value)

    text = str(value)
    decoded = _try_json(text)
    if isinstance(decoded, list):
        return _strip_markers(decoded)
    if isinstance(decoded, dict) and isinstance(decoded.get("bullets"), list):
        return _strip_markers(decoded["bullets"])
    return _strip_markers(line.strip() for line in text.split("\n"))


def _try_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def _non_empty(items: list[Any]) -> list[str]:
    return [text for text in (str(item) for item in items) if text]


def _strip_markers(items: Any) -> list[str]:
    bullets = (_BULLET_PREFIX.sub("", str(item)).strip() for item in items)
    return [bullet for bullet in bullets if bullet]

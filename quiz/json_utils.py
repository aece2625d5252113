"""JSON parsing helpers.

Models sometimes wrap JSON in Markdown fences or extra prose. These helpers
extract the first top-level JSON object and parse it.
"""

from __future__ import annotations

import json
from typing import Any


def extract_first_json_object(text: str) -> str:
    """Return the first balanced {...} JSON object found in the text.

    If no object can be extracted, the original text is returned.
    """
    if not text:
        return ""

    start = text.find("{")
    if start < 0:
        return text

    depth = 0
    in_string = False
    escaped = False
    for i, char in enumerate(text[start:], start):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    # Unbalanced JSON; return original for best-effort debugging.
    return text


def safe_parse_json(text: str) -> dict[str, Any]:
    """Parse a JSON object from a model response.

    Strategy:
    1) Try full parse.
    2) Extract first JSON object and parse again.
    3) Return {} on failure.
    """
    try:
        data = json.loads(text)
        return data if isinstance(data, dict) else {}
    except json.JSONDecodeError:
        pass

    extracted = extract_first_json_object(text)
    try:
        data = json.loads(extracted)
        return data if isinstance(data, dict) else {}
    except json.JSONDecodeError:
        return {}

import json
import re
from typing import Any, Optional, Dict

FENCED_JSON_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


def extract_fenced_json(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decode the first ```json fenced block in text.

    Returns None when there is no such block, when the block is not valid
    JSON, or when it decodes to something other than an object.
    """
    if not text:
        return None

    match = FENCED_JSON_PATTERN.search(text)
    if not match or not match.group(1):
        return None

    candidate = match.group(1)
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        # Raw newlines/tabs inside string values are common in model output.
        try:
            parsed = json.loads(candidate, strict=False)
        except json.JSONDecodeError:
            return None

    if not isinstance(parsed, dict):
        return None
    return parsed


def truncate(text: Optional[str], limit: int) -> str:
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "... [truncated]"

"""
JSON encoding and decoding for the Authlete wire format.
"""

import json
from typing import Any, Dict, Optional

from ..types.errors import JsonParseError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _parse_int(text: str):
    # Identifiers beyond the signed 64-bit range travel as decimal strings.
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return text
    return value


def decode_json(text: str) -> Any:
    """Decode a JSON document, keeping out-of-range integers as strings."""
    try:
        return json.loads(text, parse_int=_parse_int)
    except (TypeError, ValueError) as e:
        raise JsonParseError(f"Failed to parse JSON: {e}", cause=e)


def decode_json_object(text: str) -> Dict[str, Any]:
    """Decode a JSON document that must be an object."""
    value = decode_json(text)
    if not isinstance(value, dict):
        raise JsonParseError(
            f"Expected a JSON object but got {type(value).__name__}.")
    return value


def encode_json(value: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False)
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


def extract_result_message(body: Optional[str]) -> Optional[str]:
    """Best-effort lookup of ``resultMessage`` in a response body."""
    if not body:
        return None
    try:
        value = json.loads(body)
    except ValueError:
        return None
    if not isinstance(value, dict):
        return None
    message = value.get('resultMessage')
    return message if isinstance(message, str) else None

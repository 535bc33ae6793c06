"""
JSON text columns.

Tags and checklist items are stored as JSON-encoded text. Rows written by
older clients may hold a plain string, ``NULL`` or malformed JSON; all of
those read back as an empty list.
"""
import json


def decode_list(value):
    if isinstance(value, list):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if not isinstance(value, str) or not value.strip():
        return []
    try:
        parsed = json.loads(value)
    except ValueError:
        return []
    return parsed if isinstance(parsed, list) else []


def encode_list(values):
    return json.dumps(list(values or []))

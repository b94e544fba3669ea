"""
Helpers for reading loosely-typed values out of decoded feed records.
"""

from typing import Any, Optional
from urllib.parse import quote

TRUE_FLAGS = {"1", "yes", "true"}
FALSE_FLAGS = {"0", "no", "false"}
SEGMENT_SAFE = "!'()*"


def text_value(value: Any) -> Optional[str]:
    """
    Return the text of a decoded leaf.

    Elements carrying both attributes and text decode to a mapping with the
    text under ``content``; elements with a ``name`` child are read through it.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        for key in ("content", "name"):
            if value.get(key) is not None:
                return text_value(value[key])
        return None
    value = str(value).strip()
    return value or None


def parse_flag(value: Any) -> Optional[bool]:
    """Parse a streamable-style flag (1/0, yes/no, true/false)."""
    if isinstance(value, bool):
        return value
    text = text_value(value)
    if text is None:
        return None
    text = text.lower()
    if text in TRUE_FLAGS:
        return True
    if text in FALSE_FLAGS:
        return False
    return None


def parse_number(value: Any) -> Optional[float]:
    """Parse a numeric field, returning None when it is absent or not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = text_value(value)
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def escape_segment(segment: str) -> str:
    """Percent-escape one URL path segment, slashes included; RFC 2396 marks stay literal."""
    return quote(segment, safe=SEGMENT_SAFE)

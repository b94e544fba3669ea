"""
Utility modules for audioscrobbler.
"""

from .field_parsers import text_value, parse_flag, parse_number, escape_segment

__all__ = [
    'text_value',
    'parse_flag',
    'parse_number',
    'escape_segment',
]

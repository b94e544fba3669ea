"""
Feed Decoder Module
Turns an Audioscrobbler XML document into plain nested dicts and lists.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Union

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import DecodeError


class XmlFeedDecoder:
    """
    Simple XML-to-structure decoder.

    The root element becomes a dict of its attributes and children:

    - an element name becomes a key; repeated siblings become a list
    - a text-only element becomes its stripped text, an empty one ``None``
    - an element with attributes (or children) and text keeps the text under ``content``
    """

    def decode(self, text: Union[bytes, str]) -> Dict[str, Any]:
        """
        Decode a feed document.

        Raises:
            DecodeError: If the payload is not well-formed XML
        """
        try:
            root = ET.fromstring(text)
        except (ET.ParseError, ValueError) as e:
            raise DecodeError(f"{ERROR_MESSAGES['DECODE_FAILED']} feed: {e}") from e

        value = self._element_to_value(root)
        if isinstance(value, dict):
            return value
        return {} if value is None else {"content": value}

    def _element_to_value(self, element: ET.Element) -> Any:
        text = (element.text or "").strip()
        children = list(element)

        if not children and not element.attrib:
            return text or None

        value: Dict[str, Any] = dict(element.attrib)

        grouped: Dict[str, List[Any]] = {}
        for child in children:
            grouped.setdefault(child.tag, []).append(self._element_to_value(child))

        for tag, values in grouped.items():
            value[tag] = values[0] if len(values) == 1 else values

        if text:
            value["content"] = text

        return value

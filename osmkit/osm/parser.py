"""
OSM response parser

Parses OSM API response bodies into ElementTree elements
"""

import xml.etree.ElementTree as ET

from ..exceptions import XmlParseError


def parse_response(text: str) -> ET.Element:
    """
    Parse an XML response body
    
    Raises:
        XmlParseError: If the body is not well-formed XML
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise XmlParseError(f"Response is not well-formed XML: {e}") from e

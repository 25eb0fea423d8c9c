"""
Upstream body parsers
Turn raw JSON or XML text into the canonical mapping/sequence structure
"""

import json
from typing import Any, Optional, Tuple
from xml.parsers.expat import ExpatError

import xmltodict

from app.utils.result import Result


def _empty_element_to_text(path, key: str, value: Optional[Any]) -> Tuple[str, Any]:
    """Childless elements with no text become empty strings instead of None"""
    return key, "" if value is None else value


def parse_json(text: str) -> Result[Any, str]:
    """Parse a JSON body"""
    try:
        return Result.ok(json.loads(text))
    except (TypeError, ValueError) as e:
        return Result.err(f"Malformed JSON: {e}")


def parse_xml(text: str) -> Result[Any, str]:
    """
    Parse an XML body into nested dicts.

    Text content is trimmed, a tag seen once under its parent stays a single
    entry, a repeated tag becomes a list in document order. Attributes are
    merged as plain keys.
    """
    try:
        parsed = xmltodict.parse(
            text,
            attr_prefix="",
            cdata_key="_",
            strip_whitespace=True,
            postprocessor=_empty_element_to_text,
        )
    except (ExpatError, ValueError) as e:
        return Result.err(f"Malformed XML: {e}")
    return Result.ok(parsed)

"""Attribute parsing for include directives.

Turns the attribute tail of a directive such as
``title="Home" active="yes" /`` into ``{"title": "Home", "active": "yes"}``.
"""
from __future__ import annotations

import re
from typing import Dict

# key="value": word-character key, non-empty value with no embedded double quote
ATTRIBUTE_PATTERN = re.compile(r'(\w+)="([^"]+)"')


def parse_attributes(attr_string: str) -> Dict[str, str]:
    """Parse ``key="value"`` pairs from an include directive's attribute string.

    Parsing is total: fragments that don't match (unterminated quotes,
    non-word keys, stray text) are skipped without error. When a key repeats,
    the last occurrence wins.

    Args:
        attr_string: Attribute text following ``src="..."``, already trimmed

    Returns:
        Mapping of attribute name to value

    Example:
        >>> parse_attributes('title="Home"  bad=x  data-x="1" name="Bob"')
        {'title': 'Home', 'x': '1', 'name': 'Bob'}
    """
    attributes: Dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(attr_string):
        attributes[match.group(1)] = match.group(2)
    return attributes


__all__ = ["ATTRIBUTE_PATTERN", "parse_attributes"]

"""Placeholder substitution.

Handles ``{{ name }}`` tokens (whitespace around the name is optional):
- inside components, from the including directive's attributes
- at page level, after all includes are expanded, per the configured policy
"""
from __future__ import annotations

import logging
import re
from typing import Mapping

from .base import ContentTransformer, TransformContext

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")

POLICY_KEEP = "keep"
POLICY_STRIP = "strip"
PLACEHOLDER_POLICIES = (POLICY_KEEP, POLICY_STRIP)


def substitute_placeholders(text: str, attributes: Mapping[str, str]) -> str:
    """Replace every placeholder with its attribute value.

    Names missing from ``attributes`` are removed (replaced with ``""``), not
    left in place.

    Example:
        >>> substitute_placeholders("Hi {{ name }}{{missing}}!", {"name": "Bob"})
        'Hi Bob!'
    """

    def replacer(match: re.Match[str]) -> str:
        return attributes.get(match.group(1)) or ""

    return PLACEHOLDER_PATTERN.sub(replacer, text)


class PagePlaceholderTransformer(ContentTransformer):
    """Apply the page-level placeholder policy.

    Runs after include expansion, so any token it sees was written in the page
    itself (or in a component the depth cap never reached).

    Policies:
    - keep:  leave tokens untouched, record them as unresolved
    - strip: remove tokens, warning once per name
    """

    def __init__(self, policy: str = POLICY_KEEP) -> None:
        if policy not in PLACEHOLDER_POLICIES:
            raise ValueError(
                f"Unknown placeholder policy: {policy!r} (expected one of {', '.join(PLACEHOLDER_POLICIES)})"
            )
        self.policy = policy

    def transform(self, content: str, context: TransformContext) -> str:
        if self.policy == POLICY_KEEP:
            for name in PLACEHOLDER_PATTERN.findall(content):
                context.record_placeholder(name, stripped=False)
            return content

        def replacer(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in context.placeholders_stripped:
                logger.warning("Removing unresolved placeholder {{ %s }}", name)
                context.warn(f"Removed unresolved placeholder: {name}")
            context.record_placeholder(name, stripped=True)
            return ""

        return PLACEHOLDER_PATTERN.sub(replacer, content)


__all__ = [
    "PLACEHOLDER_PATTERN",
    "PLACEHOLDER_POLICIES",
    "POLICY_KEEP",
    "POLICY_STRIP",
    "PagePlaceholderTransformer",
    "substitute_placeholders",
]

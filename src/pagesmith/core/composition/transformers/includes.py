"""Include resolution for page composition.

Handles:
- <include src="path" key="value" />  - self-closing form
- <include src="path" key="value">    - void form, no closing tag

Each directive is replaced by the component file's text with its
``{{ name }}`` placeholders filled from the directive's attributes. The
inserted text may itself contain directives, so the text is rescanned pass
after pass until a pass finds nothing or the depth cap is reached.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Tuple

from .attributes import parse_attributes
from .base import ContentTransformer, TransformContext
from .placeholders import substitute_placeholders

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10

# <include src="PATH" REST/?>; REST stops at the first ">" (so attribute values can't hold one)
# and keeps any trailing "/", which the attribute parser ignores
INCLUDE_PATTERN = re.compile(r'<include\s+src="([^"]+)"([^>]*)/?>')


def missing_include_marker(src: str) -> str:
    """Diagnostic comment emitted in place of a directive whose component can't be read."""
    return f"<!-- Include Error: {src} not found or processed -->"


class IncludeResolver(ContentTransformer):
    """Resolve <include> directives against a fixed component root.

    Every ``src`` is resolved relative to ``context.component_root``, also for
    directives that arrive inside another component. Components are read fresh
    for every occurrence.

    Failures never propagate: a missing or unreadable component becomes a
    diagnostic comment, and hitting the depth cap returns the text expanded
    so far with a warning recorded on the context.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize with maximum number of expansion passes.

        Args:
            max_depth: Pass cap; at most ``max_depth + 1`` passes run (default 10)
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be 0 or greater, got {max_depth}")
        self.max_depth = max_depth

    def transform(self, content: str, context: TransformContext) -> str:
        """Resolve all include directives in content.

        Args:
            content: Page text with <include> directives
            context: Transform context with component_root

        Returns:
            Content with includes expanded
        """
        return self.expand(content, context, max_depth=self.max_depth)

    def expand(self, content: str, context: TransformContext, max_depth: int) -> str:
        """Run expansion passes until a pass matches nothing or ``max_depth`` is exceeded."""
        depth = 0
        while True:
            if depth > max_depth:
                message = (
                    f"Maximum include depth ({max_depth}) exceeded; "
                    "check for circular includes. Output is partially expanded."
                )
                logger.warning(message)
                context.depth_exceeded = True
                context.warn(message)
                return content

            depth += 1
            context.record_pass()
            content, replaced = self._expand_pass(content, context)
            if not replaced:
                return content

    def _expand_pass(self, content: str, context: TransformContext) -> Tuple[str, int]:
        """One left-to-right sweep; returns the new text and the number of directives replaced."""

        def replace_include(match: re.Match[str]) -> str:
            src = match.group(1)
            return self._resolve_single_include(src, match.group(2).strip(), context)

        return INCLUDE_PATTERN.subn(replace_include, content)

    def _resolve_single_include(self, src: str, attr_string: str, context: TransformContext) -> str:
        """Load one component and fill its placeholders.

        Args:
            src: Component path from the directive
            attr_string: Trimmed attribute text after ``src="..."``
            context: Transform context

        Returns:
            Component text with placeholders substituted, or the diagnostic marker
        """
        full_path = self._resolve_path(src, context)
        try:
            component = full_path.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.warning("Could not read include file %s: %s", full_path, e)
            context.record_missing(src)
            context.warn(f"Include not found: {src}")
            return missing_include_marker(src)

        logger.debug("Included %s from %s", src, full_path)
        context.record_include(src)
        return substitute_placeholders(component, parse_attributes(attr_string))

    def _resolve_path(self, src: str, context: TransformContext) -> Path:
        """Join ``src`` onto the component root; a leading "/" does not escape the root."""
        root = context.component_root or Path.cwd()
        return root / src.lstrip("/")


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "INCLUDE_PATTERN",
    "IncludeResolver",
    "missing_include_marker",
]

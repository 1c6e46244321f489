"""Public include-resolution helpers.

A small, stable API for callers that want expanded text without building a
TemplateEngine or reading a report:

- ``resolve(text, component_root)`` is a pure function of its inputs and never
  raises; missing components become diagnostic comments and include cycles
  are cut off at the depth cap.
- ``resolve_strict`` reuses the same transformer and fails closed when a
  component is missing or the depth cap was hit.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from pagesmith.core.exceptions import IncludeResolutionError

from .transformers.base import TransformContext
from .transformers.includes import DEFAULT_MAX_DEPTH, IncludeResolver


def resolve(
    text: str,
    component_root: Union[str, Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Expand every <include> directive in ``text``.

    Args:
        text: Page text
        component_root: Directory every include ``src`` resolves against
        max_depth: Include pass cap

    Returns:
        Expanded text (partially expanded if the depth cap was hit)
    """
    ctx = TransformContext(component_root=Path(component_root))
    return IncludeResolver(max_depth=max_depth).transform(text, ctx)


def resolve_strict(
    text: str,
    component_root: Union[str, Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Like ``resolve`` but raise instead of degrading.

    Raises:
        IncludeResolutionError: When a component is missing or the depth cap was hit.
    """
    ctx = TransformContext(component_root=Path(component_root))
    rendered = IncludeResolver(max_depth=max_depth).transform(text, ctx)

    if ctx.includes_missing:
        missing = ", ".join(sorted(ctx.includes_missing))
        raise IncludeResolutionError(
            f"Include resolution failed: missing component(s): {missing}",
            context={"missing": sorted(ctx.includes_missing)},
        )
    if ctx.depth_exceeded:
        raise IncludeResolutionError(
            f"Include resolution failed: maximum include depth ({max_depth}) exceeded",
            context={"max_depth": max_depth, "passes": ctx.passes},
        )
    return rendered


__all__ = ["resolve", "resolve_strict"]

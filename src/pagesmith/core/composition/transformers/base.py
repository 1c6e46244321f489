"""Base class for content transformers in the TemplateEngine.

The TemplateEngine runs a page through a pipeline of transformers.
Each transformer handles one category of template processing.

Transformation Order:
1. INCLUDES      - <include src="..." key="value" />, repeated until stable
2. PLACEHOLDERS  - page-level {{ name }} tokens left after expansion
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass
class TransformContext:
    """Context provided to transformers while processing one page.

    A fresh context is built for every top-level call, so resolving one page
    never observes state left behind by another.
    """

    # Fixed root every include src is resolved against (also when nested)
    component_root: Optional[Path] = None

    # Tracking for reports
    includes_resolved: Set[str] = field(default_factory=set)
    includes_missing: Set[str] = field(default_factory=set)
    passes: int = 0
    depth_exceeded: bool = False
    placeholders_stripped: Set[str] = field(default_factory=set)
    placeholders_unresolved: Set[str] = field(default_factory=set)
    warnings: List[str] = field(default_factory=list)

    def record_include(self, src: str) -> None:
        """Record that an include was expanded."""
        self.includes_resolved.add(src)

    def record_missing(self, src: str) -> None:
        """Record that an include target could not be read."""
        self.includes_missing.add(src)

    def record_pass(self) -> None:
        """Record one full expansion pass."""
        self.passes += 1

    def record_placeholder(self, name: str, stripped: bool) -> None:
        """Record a page-level placeholder that survived expansion."""
        if stripped:
            self.placeholders_stripped.add(name)
        else:
            self.placeholders_unresolved.add(name)

    def warn(self, message: str) -> None:
        """Attach a warning to the page report."""
        self.warnings.append(message)


class ContentTransformer(ABC):
    """Abstract base class for content transformers.

    Transformers are stateless and receive context through transform().

    Example:
        class UppercaseTransformer(ContentTransformer):
            def transform(self, content: str, context: TransformContext) -> str:
                return content.upper()
    """

    @abstractmethod
    def transform(self, content: str, context: TransformContext) -> str:
        """Transform content using this transformer's rules.

        Args:
            content: Input content to transform
            context: TransformContext with paths and tracking

        Returns:
            Transformed content
        """
        ...

    def get_name(self) -> str:
        """Get transformer name for logging/debugging."""
        return self.__class__.__name__


class TransformerPipeline:
    """Execute a sequence of transformers on content.

    Example:
        pipeline = TransformerPipeline([
            IncludeResolver(max_depth=10),
            PagePlaceholderTransformer(policy="keep"),
        ])
        result = pipeline.execute(content, context)
    """

    def __init__(self, transformers: List[ContentTransformer]) -> None:
        self.transformers = transformers

    def execute(self, content: str, context: TransformContext) -> str:
        """Execute all transformers in sequence."""
        result = content
        for transformer in self.transformers:
            logger.debug("Running %s", transformer.get_name())
            result = transformer.transform(result, context)
        return result

"""Template Engine for page composition.

The TemplateEngine runs page text through a two-step transformation pipeline
and returns the expanded page together with a ResolutionReport.

Transformation Pipeline:
1. INCLUDES      - <include src="..." key="value" />, multi-pass, depth-capped
2. PLACEHOLDERS  - page-level {{ name }} per policy (keep | strip)
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from .report import ResolutionReport
from .transformers.base import TransformContext, TransformerPipeline
from .transformers.includes import DEFAULT_MAX_DEPTH, IncludeResolver
from .transformers.placeholders import POLICY_KEEP, PagePlaceholderTransformer


class TemplateEngine:
    """Include/placeholder transformation engine.

    Usage:
        engine = TemplateEngine(component_root=Path("src/components"))
        html, report = engine.process(page_text, page_name="index.html")
    """

    def __init__(
        self,
        component_root: Path,
        max_depth: int = DEFAULT_MAX_DEPTH,
        placeholder_policy: str = POLICY_KEEP,
    ) -> None:
        """Initialize the template engine.

        Args:
            component_root: Directory every include ``src`` resolves against
            max_depth: Include pass cap
            placeholder_policy: Page-level placeholder policy ("keep" or "strip")
        """
        self.component_root = Path(component_root)
        self.max_depth = max_depth
        self.placeholder_policy = placeholder_policy

        self.pipeline = self._build_pipeline()

    def _build_pipeline(self) -> TransformerPipeline:
        return TransformerPipeline([
            IncludeResolver(max_depth=self.max_depth),
            PagePlaceholderTransformer(policy=self.placeholder_policy),
        ])

    def process(
        self,
        content: str,
        page_name: str = "unknown",
        source_path: Optional[Path] = None,
    ) -> Tuple[str, ResolutionReport]:
        """Process page text through the transformation pipeline.

        Never raises for missing components or include cycles; both show up
        as warnings on the report.

        Args:
            content: Raw page text
            page_name: Name used in the report
            source_path: Page file the text came from, if any

        Returns:
            Tuple of (expanded content, report)
        """
        context = TransformContext(component_root=self.component_root)

        result = self.pipeline.execute(content, context)

        report = ResolutionReport(
            page_name=page_name,
            source_path=source_path,
            includes_resolved=context.includes_resolved,
            includes_missing=context.includes_missing,
            passes=context.passes,
            depth_exceeded=context.depth_exceeded,
            placeholders_stripped=context.placeholders_stripped,
            placeholders_unresolved=context.placeholders_unresolved,
        )
        for warning in context.warnings:
            report.add_warning(warning)

        return result, report

    def process_batch(self, pages: Dict[str, str]) -> Dict[str, Tuple[str, ResolutionReport]]:
        """Process multiple pages independently.

        Args:
            pages: Dict mapping page name to raw text

        Returns:
            Dict mapping page name to (expanded content, report)
        """
        return {name: self.process(content, page_name=name) for name, content in pages.items()}

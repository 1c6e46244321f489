"""Composition reporting dataclasses.

Provides structured reports for page resolution and whole-site builds.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Set


@dataclass
class ResolutionReport:
    """Report from resolving a single page.

    Contains everything observed while expanding the page:
    - Components included and components missing
    - Passes run and whether the depth cap was hit
    - Page-level placeholders stripped or left in place
    - Warnings
    """

    page_name: str
    timestamp: datetime = field(default_factory=datetime.now)
    source_path: Optional[Path] = None
    output_path: Optional[Path] = None

    includes_resolved: Set[str] = field(default_factory=set)
    includes_missing: Set[str] = field(default_factory=set)
    passes: int = 0
    depth_exceeded: bool = False
    placeholders_stripped: Set[str] = field(default_factory=set)
    placeholders_unresolved: Set[str] = field(default_factory=set)

    warnings: List[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if there are any warnings."""
        return bool(self.warnings)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "page_name": self.page_name,
            "timestamp": self.timestamp.isoformat(),
            "source_path": str(self.source_path) if self.source_path else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "includes_resolved": sorted(self.includes_resolved),
            "includes_missing": sorted(self.includes_missing),
            "passes": self.passes,
            "depth_exceeded": self.depth_exceeded,
            "placeholders_stripped": sorted(self.placeholders_stripped),
            "placeholders_unresolved": sorted(self.placeholders_unresolved),
            "warnings": self.warnings,
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Page: {self.page_name}",
            f"  Includes: {len(self.includes_resolved)} resolved, {len(self.includes_missing)} missing",
            f"  Passes: {self.passes}{' (depth cap hit)' if self.depth_exceeded else ''}",
        ]
        if self.placeholders_stripped:
            lines.append(f"  Placeholders removed: {', '.join(sorted(self.placeholders_stripped))}")
        if self.placeholders_unresolved:
            lines.append(f"  Placeholders kept: {', '.join(sorted(self.placeholders_unresolved))}")

        if self.warnings:
            lines.append(f"  Warnings: {len(self.warnings)}")
            for w in self.warnings[:3]:  # Show first 3
                lines.append(f"    - {w}")

        return "\n".join(lines)


@dataclass
class BuildReport:
    """Report from building a whole site."""

    output_dir: Path
    timestamp: datetime = field(default_factory=datetime.now)
    pages: List[ResolutionReport] = field(default_factory=list)
    copied_files: List[Path] = field(default_factory=list)
    copied_assets: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    css_compiled: bool = False
    duration_seconds: float = 0.0

    @property
    def page_count(self) -> int:
        """Pages rendered."""
        return len(self.pages)

    @property
    def warning_count(self) -> int:
        """Pages with warnings."""
        return sum(1 for r in self.pages if r.warnings)

    @property
    def has_errors(self) -> bool:
        """Per-file write/copy failures occurred."""
        return bool(self.errors)

    def add_page(self, report: ResolutionReport) -> None:
        """Add an individual page report."""
        self.pages.append(report)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_dir": str(self.output_dir),
            "timestamp": self.timestamp.isoformat(),
            "pages": [r.to_dict() for r in self.pages],
            "copied_files": [str(p) for p in self.copied_files],
            "copied_assets": self.copied_assets,
            "skipped": self.skipped,
            "errors": self.errors,
            "css_compiled": self.css_compiled,
            "duration_seconds": round(self.duration_seconds, 3),
            "warning_count": self.warning_count,
        }

    def summary(self) -> str:
        """Generate build summary."""
        lines = [
            f"Build Report: {self.output_dir}",
            f"  Pages: {self.page_count}",
            f"  Copied files: {len(self.copied_files)}",
            f"  Assets: {', '.join(self.copied_assets) if self.copied_assets else 'none'}",
            f"  Pages with warnings: {self.warning_count}",
        ]
        if self.errors:
            lines.append(f"  Errors: {len(self.errors)}")
            for e in self.errors[:3]:
                lines.append(f"    - {e}")

        for r in self.pages:
            if r.has_issues:
                lines.append(f"  - {r.page_name}: {len(r.warnings)} warning(s)")

        lines.append(f"Build completed in {self.duration_seconds:.2f} seconds")
        return "\n".join(lines)


__all__ = ["ResolutionReport", "BuildReport"]

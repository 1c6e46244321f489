"""Page composition: include expansion and placeholder substitution."""
from .engine import TemplateEngine
from .report import BuildReport, ResolutionReport
from .resolution import resolve, resolve_strict

__all__ = [
    "TemplateEngine",
    "BuildReport",
    "ResolutionReport",
    "resolve",
    "resolve_strict",
]

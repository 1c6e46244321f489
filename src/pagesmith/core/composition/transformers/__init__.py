"""Content transformers for the TemplateEngine pipeline."""
from .attributes import ATTRIBUTE_PATTERN, parse_attributes
from .base import ContentTransformer, TransformContext, TransformerPipeline
from .includes import DEFAULT_MAX_DEPTH, INCLUDE_PATTERN, IncludeResolver, missing_include_marker
from .placeholders import (
    PLACEHOLDER_PATTERN,
    PLACEHOLDER_POLICIES,
    POLICY_KEEP,
    POLICY_STRIP,
    PagePlaceholderTransformer,
    substitute_placeholders,
)

__all__ = [
    # Base
    "ContentTransformer",
    "TransformContext",
    "TransformerPipeline",
    # Attributes
    "ATTRIBUTE_PATTERN",
    "parse_attributes",
    # Includes
    "DEFAULT_MAX_DEPTH",
    "INCLUDE_PATTERN",
    "IncludeResolver",
    "missing_include_marker",
    # Placeholders
    "PLACEHOLDER_PATTERN",
    "PLACEHOLDER_POLICIES",
    "POLICY_KEEP",
    "POLICY_STRIP",
    "PagePlaceholderTransformer",
    "substitute_placeholders",
]

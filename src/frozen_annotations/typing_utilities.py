"""
Re-export utilities module for cleaner imports.

This allows: from frozen_annotations.typing_utilities import is_union
Instead of: from frozen_annotations.meta.typing.utilities import is_union
"""

from .meta.typing.utilities import (
    is_union,
    is_optional,
    is_annotated,
    annotated_metadata,
    matches_annotation,
    resolve_annotation_types,
)

__all__ = [
    "is_union",
    "is_optional",
    "is_annotated",
    "annotated_metadata",
    "matches_annotation",
    "resolve_annotation_types",
]

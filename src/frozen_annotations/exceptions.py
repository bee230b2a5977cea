"""
Re-export exceptions module for cleaner imports.

This allows: from frozen_annotations.exceptions import AnnotationTypeError
Instead of: from frozen_annotations.meta.annotations.errors import AnnotationTypeError
"""

from .abstract.exceptions.traced_exceptions import TracedException, format_exception
from .meta.annotations.errors import (
    AnnotationError,
    AnnotationTypeError,
    AnnotationModificationError,
    AnnotationCompositionError,
    AnnotationConfigError,
    UnmatchedUnionValueError,
)

__all__ = [
    "TracedException",
    "format_exception",
    "AnnotationError",
    "AnnotationTypeError",
    "AnnotationModificationError",
    "AnnotationCompositionError",
    "AnnotationConfigError",
    "UnmatchedUnionValueError",
]

"""Errors raised while building, attaching or reading annotations."""

from ...abstract.exceptions.traced_exceptions import TracedException


class AnnotationError(TracedException):
    """Base class of every annotation error."""


class AnnotationTypeError(AnnotationError):
    """Signals a value that does not match the declared type of an annotation field."""


class AnnotationModificationError(AnnotationError):
    """Signals an attempt to modify an annotation object or annotation class."""


class AnnotationCompositionError(AnnotationError):
    """Signals annotations that are individually valid but inconsistent together."""


class AnnotationConfigError(AnnotationError):
    """Signals generation options that could not be read from a mapping or a file."""


class UnmatchedUnionValueError(AnnotationError):
    """Signals a union tag matching no constructor while no fallback is configured."""

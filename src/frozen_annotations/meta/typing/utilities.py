"""Type annotation utility functions.

This module provides helper functions for working with Python type annotations,
including utilities for checking union types, optional types, resolving forward
references in annotations and checking a value against an annotation.
"""
from typing import Annotated, Any, Literal, Union, get_origin, get_args, get_type_hints
from types import UnionType, NoneType

type Annotation = Any


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def is_optional(annotation: Annotation) -> bool:
    """Check if an annotation is an optional. An optional is a Union with NoneType.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is an optional.
    """
    return is_union(annotation) and NoneType in get_args(annotation)


def is_annotated(annotation: Annotation) -> bool:
    """Check if an annotation is an ``Annotated[T, ...]`` form."""
    return get_origin(annotation) is Annotated


def annotated_metadata(annotation: Annotation) -> tuple[Any, ...]:
    """Metadata carried by an ``Annotated[T, ...]`` annotation, empty for anything else."""
    if not is_annotated(annotation):
        return ()
    return tuple(annotation.__metadata__)


def resolve_annotation_types(annotations: dict[str, Any]) -> dict[str, Annotation]:
    """
    Get type hints from a dictionary of annotations. See typing.get_type_hints.

    This function is useful when you want to get the type hints from a dictionary
    of annotations instead of a class or a function.

    Args:
        annotations (dict[str, Any]): A dictionary of annotations.

    Returns:
        dict[str, Any]: A dictionary of type hints.
    """
    X = type("X", (), {"__annotations__": annotations})
    return get_type_hints(X)


def matches_annotation(annotation: Annotation, value: Any) -> bool:
    """Check that a value matches an annotation.

    Only the top level of generic containers is checked: ``[1, "2"]`` matches
    ``list[int]``. Unions match when any member matches.

    Args:
        annotation (Annotation): A resolved annotation.
        value (Any): The value to check.

    Returns:
        bool: Whether the value matches the annotation.
    """
    if annotation is Any:
        return True
    if annotation is None or annotation is NoneType:
        return value is None
    if isinstance(annotation, type):
        return isinstance(value, annotation)

    origin = get_origin(annotation)
    if origin is None:
        # Something went wrong, a bare TypeVar or a string that was never resolved.
        raise TypeError(f"Cannot check a value against annotation: {annotation!r}.")
    if is_union(origin):
        return any(matches_annotation(arg, value) for arg in get_args(annotation))
    if origin is Literal:
        return value in get_args(annotation)
    if origin is Annotated:
        return matches_annotation(get_args(annotation)[0], value)
    return matches_annotation(origin, value)

"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: Attaching annotation objects to classes and functions, and finding them
            again. Attached annotations are stored on the target itself as a tuple, in
            source order, and are never inherited.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any

from ..classes.frozen import FrozenValue
from .defaults import FrozenDefaults
from .errors import AnnotationCompositionError


def _attached(target: Any) -> tuple[Any, ...]:
    try:
        return vars(target).get(FrozenDefaults.ATTACHED_ATTRIBUTE, ())
    except TypeError:
        # No __dict__, nothing can have been attached.
        return ()


def attach[T](annotation: FrozenValue, target: T) -> T:
    """Attach an annotation to a class or a function.

    Decorators apply bottom-up, so the new annotation is put first to keep the
    attached tuple in source order.

    Args:
        annotation (FrozenValue): The annotation to attach.
        target (T): The class or function receiving it.

    Raises:
        AnnotationCompositionError: Raised when the target cannot hold attributes.

    Returns:
        T: The target, unchanged otherwise.
    """
    attached = _attached(target)
    try:
        setattr(target, FrozenDefaults.ATTACHED_ATTRIBUTE, (annotation, *attached))
    except (AttributeError, TypeError) as e:
        raise AnnotationCompositionError(
            f"Cannot attach {annotation!r} to {target!r}: it does not accept attributes."
        ) from e
    return target


def annotations_of[A](target: Any, kind: type[A] | None = None) -> tuple[A, ...]:
    """Annotations attached to ``target``, in source order.

    Args:
        target (Any): A class or a function.
        kind (type[A] | None, optional): Keep only annotations of this class. Defaults to
            None, which keeps all of them.

    Returns:
        tuple[A, ...]: The attached annotations.
    """
    attached = _attached(target)
    if kind is None:
        return attached
    return tuple(a for a in attached if isinstance(a, kind))


def annotation_of[A](target: Any, kind: type[A]) -> A | None:
    """First annotation of class ``kind`` attached to ``target``, or None."""
    return next(iter(annotations_of(target, kind)), None)


class Attachable(FrozenValue):
    """Annotation usable as a decorator.

    >>> @UnionValue("SpecialCase")
    ... def special(a: str, b: int): ...
    """

    def __call__[T](self, target: T) -> T:
        return attach(self, target)

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
Description: Immutable value objects. A FrozenValue declares its fields as class
            annotations; instances check their values against those annotations once,
            at construction, and can never be modified afterwards. Neither can the
            classes themselves.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from enum import Enum
from typing import Any, ClassVar, NoReturn, get_origin, get_type_hints

from ..annotations.errors import AnnotationModificationError, AnnotationTypeError
from ..typing.utilities import matches_annotation


def _own_fields(cls: type) -> tuple[str, ...]:
    """Public, non ClassVar annotated names declared in the body of ``cls``."""
    return tuple(
        k
        for k, v in inspect.get_annotations(cls).items()
        if not k.startswith("_") and v is not ClassVar and get_origin(v) is not ClassVar
    )


class FrozenMeta(type):
    """Metaclass collecting the fields of a FrozenValue and locking the class."""

    __fields__: tuple[str, ...]
    __field_types__: dict[str, Any]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        **kwargs: Any,
    ) -> Any:
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        # base fields first, then the ones declared here.
        fields: list[str] = []
        for base in reversed(cls.__mro__[1:]):
            if isinstance(base, FrozenMeta):
                fields.extend(k for k in base.__fields__ if k not in fields)
        fields.extend(k for k in _own_fields(cls) if k not in fields)

        hints = get_type_hints(cls)
        type.__setattr__(cls, "__fields__", tuple(fields))
        type.__setattr__(cls, "__field_types__", {k: hints[k] for k in fields})
        return cls

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation class '{cls.__name__}' cannot be modified."
        )

    def __delattr__(cls, name: str) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation class '{cls.__name__}' cannot be deleted."
        )


class FrozenValue(metaclass=FrozenMeta):
    """Base class of immutable, type checked value objects.

    Sub-classes declare their fields as annotations and call ``_freeze`` from their
    ``__init__``:

        >>> class Point(FrozenValue):
        ...     x: int
        ...     y: int
        ...     def __init__(self, x: int, y: int) -> None:
        ...         self._freeze(x=x, y=y)

        >>> Point(1, 2)
        Point(x=1, y=2)

        >>> Point(1, 2).x = 3 # raises AnnotationModificationError.

        >>> Point(1, "2") # raises AnnotationTypeError.
    """

    __fields__: ClassVar[tuple[str, ...]]
    __field_types__: ClassVar[dict[str, Any]]

    def _freeze(self, **values: Any) -> None:
        """Check and store the value of every field. Only meant to be called once.

        Raises:
            AnnotationTypeError: Raised when a value does not match its field annotation,
                or when a field is missing or unknown.
        """
        unknown = set(values) - set(self.__fields__)
        if unknown:
            raise AnnotationTypeError(
                f"Unknown field(s) {sorted(unknown)} for '{type(self).__name__}'."
            )
        for name in self.__fields__:
            if name not in values:
                raise AnnotationTypeError(
                    f"Missing value for field '{name}' of '{type(self).__name__}'."
                )
            value = self._coerce(name, values[name])
            if not matches_annotation(self.__field_types__[name], value):
                raise AnnotationTypeError(
                    f"Field '{name}' of '{type(self).__name__}' expects "
                    f"{self.__field_types__[name]!r}, got {value!r} of type "
                    f"'{type(value).__name__}'."
                )
            object.__setattr__(self, name, value)

    def _coerce(self, name: str, value: Any) -> Any:
        """Coerce the raw value of a field before it is checked.

        Enum fields accept the value of one of their members.
        """
        annotation = self.__field_types__[name]
        if (
            isinstance(annotation, type)
            and issubclass(annotation, Enum)
            and not isinstance(value, annotation)
        ):
            try:
                return annotation(value)
            except ValueError as e:
                choices = ", ".join(repr(m.value) for m in annotation)
                raise AnnotationTypeError(
                    f"Field '{name}' of '{type(self).__name__}' expects one of {choices},"
                    f" got {value!r}."
                ) from e
        return value

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, k) for k in self.__fields__)

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a (name, value) dictionary, in declaration order."""
        return {k: getattr(self, k) for k in self.__fields__}

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of '{type(self).__name__}' cannot be modified. Reason:"
            " annotations are immutable."
        )

    def __delattr__(self, name: str) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of '{type(self).__name__}' cannot be deleted. Reason:"
            " annotations are immutable."
        )

    def _key(self) -> tuple[tuple[type, Any], ...]:
        # Field types take part so that True and 1 stay distinct values.
        return tuple((type(v), v) for v in self._values())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"

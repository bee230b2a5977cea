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
Description: Namespaces (class) of constants. The well-known names shared between
            frozen_annotations and the generators reading it are declared with it.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Iterator
from typing import Any, NoReturn, Callable, ClassVar, get_origin, get_type_hints

from ...abstract.exceptions.traced_exceptions import TracedException
from ..typing.utilities import matches_annotation


class ConstantsInstantiationError(TracedException):
    """Instantiation error of a Constants class."""


class ConstantsCompositionError(TracedException):
    """Composition error of a Constants class."""


class ConstantsModificationError(TracedException):
    """Modification error of a Constants class."""


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disalowed function is added.
    Disallowed functions are __new__ and __init__.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.

    Raises:
        ConstantsCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise ConstantsCompositionError(
            f"Constant class '{name}' is disallowed to have __new__ or __init__"
            " method since it shall never be instantiated."
        )


def _instantiation_error(name: str) -> Callable[..., NoReturn]:
    """Helper to format an error message when trying to instantiate a Constants class.

    Args:
        name (str): name of the class.

    Returns:
        Callable[..., NoReturn]: A callable that throws an instantiation error when called.
    """

    def f(*_: Any, **__: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"Cannot instantiate constant class '{name}'. Constant class cannot be instantiated."
        )

    return f


def _own_constants(cls: type, allow_private: bool) -> tuple[str, ...]:
    """Names of the constants declared in the body of ``cls``, in declaration order."""
    return tuple(
        k
        for k, v in inspect.get_annotations(cls).items()
        if (allow_private or not k.startswith("_"))
        and v is not ClassVar
        and get_origin(v) is not ClassVar
    )


def _verify_annotations(cls: type, constants: tuple[str, ...]) -> None:
    """Verify that no annotated member value is missing and that values match their type.

    Args:
        cls (type): the freshly created constant class.
        constants (tuple[str, ...]): names of the constants declared by ``cls``.

    Raises:
        ConstantsCompositionError: Raised when an annotated member value is missing or
            does not match its annotation.
    """
    annotations = get_type_hints(cls)
    for key in constants:
        # Ensure that any annotated member has a value.
        if key not in vars(cls):
            raise ConstantsCompositionError(
                f"Attribute '{key}' needs a value in constant class '{cls.__name__}'."
            )

        value = vars(cls)[key]
        try:
            valid = matches_annotation(annotations[key], value)
        except TypeError as e:
            raise ConstantsCompositionError(
                f"Annotation {annotations[key]!r} of constant '{key}' in class "
                f"'{cls.__name__}' cannot be checked."
            ) from e
        if not valid:
            raise ConstantsCompositionError(
                f"Value {value!r} of constant '{key}' in class '{cls.__name__}' does not "
                f"match its annotation {annotations[key]!r}."
            )


class ConstantsMetaclass(type):
    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:

        # verify that no function is added.
        _verify_functions(name, namespace)

        # add an __new__ method that throws an error.
        namespace["__new__"] = _instantiation_error(name)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        own = _own_constants(cls, allow_private)
        _verify_annotations(cls, own)

        # superclasses constants come first.
        constants_names: list[str] = []
        for base in bases:
            if isinstance(base, ConstantsMetaclass):
                constants_names.extend(
                    k for k in base.__constants__ if k not in constants_names
                )
        constants_names.extend(k for k in own if k not in constants_names)

        type.__setattr__(cls, "__constants__", tuple(constants_names))
        return cls

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be modified. Reason: Constant"
            " class cannot be modified."
        )

    def __delattr__(cls, name: str) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be deleted. Reason: Constant"
            " class cannot be modified."
        )

    def __repr__(cls) -> str:
        """Returns a string representation of the class."""
        constants = ", ".join(f"{k}={getattr(cls, k)!r}" for k in cls.__constants__)
        return f"<ConstantNamespace {cls.__name__}({constants})>"

    def __iter__(cls) -> Iterator[str]:
        return iter(cls.__constants__)

    def __contains__(cls, name: str) -> bool:
        """Check if a constant name exists."""
        return name in cls.__constants__

    def __len__(cls) -> int:
        """Return the number of constants."""
        return len(cls.__constants__)

    def items(cls) -> list[tuple[str, Any]]:
        """Return all constants as (name, value) pairs."""
        return [(k, getattr(cls, k)) for k in cls.__constants__]

    def keys(cls) -> tuple[str, ...]:
        """Return all constant names."""
        return cls.__constants__

    def values(cls) -> tuple[Any, ...]:
        """Return all constant values."""
        return tuple(getattr(cls, k) for k in cls.__constants__)

    def get(cls, name: str, default: Any = None) -> Any:
        """Get a constant value with optional default."""
        if name not in cls.__constants__:
            return default
        return getattr(cls, name)


class ConstantNamespace(metaclass=ConstantsMetaclass, allow_private=False):
    """Base class to create namespaces (class) of constants.
    Examples:
        >>> class MyConstants(ConstantNamespace):
        ...    A = 1 # this is not a constant. It needs annotation.
        ...    _A: int = 1 # this is not a constant unless allow_private=True.
        ...    B: int = 2 # this is a constant.
        ...    C: int = "3" # raises ConstantsCompositionError. Values must match.

        >>> MyConstants.B
        2

        >>> MyConstants.B = 3 # raises ConstantsModificationError.
    """

    __constants__: ClassVar[tuple[str, ...]]

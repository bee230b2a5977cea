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
Description: Annotations attached to a single constructor or constructor parameter:
            assertions, default values, extra interfaces and mixins, and custom union
            values.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from types import NoneType
from typing import Annotated, Any, ForwardRef, Literal, get_args, get_origin

from ..classes.frozen import FrozenValue
from ..typing.utilities import is_union
from .attachment import Attachable
from .errors import AnnotationTypeError


class AssertionSpec(Attachable):
    """Adds an ``assert`` to the generated constructor.

        >>> class Person:
        ...     @Assert("name.strip()", "name cannot be empty")
        ...     @Assert("age >= 0")
        ...     def __init__(self, name: str, age: int): ...

    The expression is forwarded as is, it is never parsed nor evaluated here.
    """

    eval: str
    message: str | None

    def __init__(self, eval: str, message: str | None = None) -> None:  # pylint: disable=redefined-builtin
        self._freeze(eval=eval, message=message)


class DefaultValue(FrozenValue):
    """Default value of a constructor parameter, used both when constructing and when
    deserializing:

        >>> class Example:
        ...     def __init__(self, value: Annotated[int, Default(42)]): ...

    is equivalent to ``value: int = 42`` with 42 also used for a missing JSON key.
    """

    default_value: Any

    def __init__(self, default_value: Any) -> None:
        self._freeze(default_value=default_value)


def _type_name(ref: Any) -> str:
    if isinstance(ref, str):
        return ref
    if isinstance(ref, ForwardRef):
        return ref.__forward_arg__
    if isinstance(ref, (list, tuple)):
        return f"[{', '.join(_type_name(a) for a in ref)}]"
    if ref is Ellipsis:
        return "..."
    if ref is None or ref is NoneType:
        return "None"
    origin = get_origin(ref)
    if origin is not None:
        args = ", ".join(_type_name(a) for a in get_args(ref))
        return f"{_type_name(origin)}[{args}]"
    return getattr(ref, "__qualname__", None) or getattr(ref, "__name__", repr(ref))


class _TypeReference(Attachable):
    """Carries a reference to a type: a class, a parametrized generic, or a name."""

    type_ref: Any

    def __init__(self, type_ref: Any) -> None:
        if is_union(type_ref) or get_origin(type_ref) in (Literal, Annotated):
            raise AnnotationTypeError(
                f"'{type(self).__name__}' cannot reference {type_ref!r}: unions, literals"
                " and annotated types are not classes."
            )
        if not (
            isinstance(type_ref, type)
            or (isinstance(type_ref, str) and type_ref.strip())
            or get_origin(type_ref) is not None
        ):
            raise AnnotationTypeError(
                f"'{type(self).__name__}' expects a class, a parametrized generic or a"
                f" non empty type name, got {type_ref!r}."
            )
        self._freeze(type_ref=type_ref)

    @property
    def type_name(self) -> str:
        """The reference rendered as source text, ``"Area[House]"`` for ``Area[House]``."""
        return _type_name(self.type_ref)


class InterfaceSpec(_TypeReference):
    """Makes the constructor's class implement ``type_ref``.

        >>> class Example:
        ...     @Implements("AdministrativeArea[House]")
        ...     def city(name: str, population: int): ...

    Abstract members of the interface must be provided by the class itself.
    """


class MixinSpec(_TypeReference):
    """Makes the constructor's class mix ``type_ref`` in.

    Same rules as InterfaceSpec apply to the mixin members.
    """


class UnionValueOverride(Attachable):
    """Value identifying a constructor in serialized unions, used verbatim.

        >>> class MyResponse:
        ...     @UnionValue("SpecialCase")
        ...     def special(a: str, b: int): ...

    Takes precedence over GenerationOptions.union_value_case.
    """

    value: str

    def __init__(self, value: str) -> None:
        self._freeze(value=value)


Assert = AssertionSpec
Default = DefaultValue
Implements = InterfaceSpec
With = MixinSpec
UnionValue = UnionValueOverride
FrozenUnionValue = UnionValueOverride

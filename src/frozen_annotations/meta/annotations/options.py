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
Description: Generation options of a frozen class. Flags a class as needing to be
            processed by the generator and tells it how unions are de/serialized.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import re
from enum import Enum
from typing import Any

from .attachment import Attachable, annotations_of
from .defaults import FrozenDefaults
from .errors import AnnotationCompositionError, AnnotationTypeError

_SEPARATORS = re.compile(r"[\W_]+")
# Leading and trailing underscores are kept around the rendered words.
_AFFIXES = re.compile(r"(_*)(.*?)(_*)", re.DOTALL)


def split_words(name: str) -> list[str]:
    """Split an identifier on underscores, dashes and camelCase boundaries.

    Acronyms stay whole (``"HTTPServer"`` gives ``"HTTP"``, ``"Server"``) and digits
    stick to the word before them. Letters of any script are handled.
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(name):
        start = 0
        for i in range(1, len(chunk)):
            previous, current, following = chunk[i - 1], chunk[i], chunk[i + 1 : i + 2]
            if current.isupper() and (not previous.isupper() or following.islower()):
                words.append(chunk[start:i])
                start = i
        if chunk:
            words.append(chunk[start:])
    return words


class UnionCaseStyle(Enum):
    """Options for automatic union values renaming."""

    # Use the name without changes.
    NONE = "none"
    # Encodes a constructor named `kebabCase` with a JSON value `kebab-case`.
    KEBAB = "kebab"
    # Encodes a constructor named `pascalCase` with a JSON value `PascalCase`.
    PASCAL = "pascal"
    # Encodes a constructor named `snakeCase` with a JSON value `snake_case`.
    SNAKE = "snake"

    def apply(self, name: str) -> str:
        """Render a constructor name with this style.

        Args:
            name (str): The constructor name, in camelCase or snake_case.

        Returns:
            str: The renamed value. Names without any word are returned unchanged, leading
                and trailing underscores are kept.
        """
        prefix, core, suffix = _AFFIXES.fullmatch(name).groups()  # type: ignore[union-attr]
        words = split_words(core)
        if self is UnionCaseStyle.NONE or not words:
            return name
        match self:
            case UnionCaseStyle.KEBAB:
                rendered = "-".join(w.lower() for w in words)
            case UnionCaseStyle.SNAKE:
                rendered = "_".join(w.lower() for w in words)
            case UnionCaseStyle.PASCAL:
                rendered = "".join(w[0].upper() + w[1:] for w in words)
            case _:
                raise AssertionError(f"Unhandled union case style {self!r}.")
        return f"{prefix}{rendered}{suffix}"


class GenerationOptions(Attachable):
    """Flags a class as needing to be processed by the generator and allows passing options.

    Every option is optional; None means "let the generator use its default".

    union_key:
        The JSON key holding which constructor a serialized union value was built with.
        ``"runtimeType"`` when None:

            >>> @Frozen(union_key="type")
            ... class Union: ...

            Union.first().to_json()  # {"type": "first"}

    union_value_case:
        How constructor names are renamed to build that value. A constructor annotated
        with UnionValueOverride ignores it.

    fallback_union:
        The constructor used when a serialized value names no known constructor.
        ``"default"`` names the unnamed constructor. When None, an unknown value is a
        decoding error.

    maybe_map, maybe_when:
        Set to False to skip generating the ``maybe_map``/``maybe_when`` helpers of
        unions. None behaves as True.
    """

    union_key: str | None
    union_value_case: UnionCaseStyle
    fallback_union: str | None
    maybe_map: bool | None
    maybe_when: bool | None

    def __init__(
        self,
        *,
        union_key: str | None = None,
        union_value_case: UnionCaseStyle | str = UnionCaseStyle.NONE,
        fallback_union: str | None = None,
        maybe_map: bool | None = None,
        maybe_when: bool | None = None,
    ) -> None:
        self._freeze(
            union_key=union_key,
            union_value_case=union_value_case,
            fallback_union=fallback_union,
            maybe_map=maybe_map,
            maybe_when=maybe_when,
        )

    @property
    def effective_union_key(self) -> str:
        return FrozenDefaults.UNION_KEY if self.union_key is None else self.union_key

    @property
    def effective_maybe_map(self) -> bool:
        return self.maybe_map is not False

    @property
    def effective_maybe_when(self) -> bool:
        return self.maybe_when is not False

    def replace(self, **changes: Any) -> "GenerationOptions":
        """Return a copy with some options changed.

        Raises:
            AnnotationTypeError: Raised for unknown options or mistyped values.
        """
        unknown = set(changes) - set(self.__fields__)
        if unknown:
            raise AnnotationTypeError(
                f"Unknown option(s) {sorted(unknown)} for '{type(self).__name__}'."
            )
        return type(self)(**(self.to_dict() | changes))


frozen = GenerationOptions()
"""Default options. Decorating a class with it flags it for the generator."""


def options_of(cls: type) -> GenerationOptions:
    """Generation options attached to a class, or the default ones.

    Args:
        cls (type): The decorated class.

    Raises:
        AnnotationCompositionError: Raised when several options are attached.

    Returns:
        GenerationOptions: The attached options, ``frozen`` when none is attached.
    """
    attached = annotations_of(cls, GenerationOptions)
    if len(attached) > 1:
        raise AnnotationCompositionError(
            f"Class '{cls.__name__}' has {len(attached)} generation options attached,"
            " expected at most one."
        )
    return attached[0] if attached else frozen


Frozen = GenerationOptions
FrozenUnionCase = UnionCaseStyle

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
Description: How union values are named and matched back to constructors. Serialized
            unions are flat JSON objects where one key (GenerationOptions.union_key,
            "runtimeType" by default) holds the value naming the constructor:

                {"runtimeType": "special", "a": "...", "b": 42}

            The value of a constructor is, by precedence: its UnionValueOverride, its
            name renamed with GenerationOptions.union_value_case, its name.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from ..classes.frozen import FrozenValue
from .defaults import FrozenDefaults
from .errors import AnnotationCompositionError, UnmatchedUnionValueError
from .markers import UnionValueOverride
from .options import GenerationOptions, frozen

logger = logging.getLogger(__name__)

type Variant = tuple[str, UnionValueOverride | None]


def union_value_for(
    constructor_name: str,
    options: GenerationOptions = frozen,
    override: UnionValueOverride | None = None,
) -> str:
    """Value identifying a constructor in its serialized form.

    Args:
        constructor_name (str): Name of the constructor. An empty name is the unnamed
            constructor, named "default".
        options (GenerationOptions, optional): Options of the union. Defaults to frozen.
        override (UnionValueOverride | None, optional): Custom value of the constructor.

    Returns:
        str: The union value.
    """
    if override is not None:
        return override.value
    name = constructor_name or FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME
    return options.union_value_case.apply(name)


class UnionTagTable(FrozenValue):
    """Two-way mapping between the constructors of a union and their union values.

        >>> table = UnionTagTable(
        ...     [("", None), ("special", UnionValue("SpecialCase"))],
        ...     Frozen(fallback_union="default"),
        ... )
        >>> table.constructor_for("SpecialCase")
        'special'
        >>> table.constructor_for("surprise")
        'default'
    """

    options: GenerationOptions
    tags: Mapping[str, str]
    constructors: Mapping[str, str]

    def __init__(
        self, variants: Iterable[Variant], options: GenerationOptions = frozen
    ) -> None:
        """Build the table of a union.

        Args:
            variants (Iterable[Variant]): (constructor name, override or None) pairs.
            options (GenerationOptions, optional): Options of the union. Defaults to frozen.

        Raises:
            AnnotationCompositionError: Raised when two constructors share a name or a
                union value, or when the fallback names no constructor.
        """
        tags: dict[str, str] = {}
        constructors: dict[str, str] = {}
        for constructor_name, override in variants:
            name = constructor_name or FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME
            if name in tags:
                raise AnnotationCompositionError(
                    f"Constructor '{name}' is declared more than once."
                )
            tag = union_value_for(name, options, override)
            if tag in constructors:
                raise AnnotationCompositionError(
                    f"Constructors '{constructors[tag]}' and '{name}' are both serialized"
                    f" with the union value '{tag}'."
                )
            tags[name] = tag
            constructors[tag] = name
            logger.debug("Constructor '%s' is serialized as '%s'.", name, tag)

        fallback = options.fallback_union
        if fallback is not None:
            fallback = fallback or FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME
        if fallback is not None and fallback not in tags:
            raise AnnotationCompositionError(
                f"Fallback constructor '{fallback}' is not declared. Declared"
                f" constructors: {', '.join(tags) or 'none'}."
            )

        self._freeze(
            options=options,
            tags=MappingProxyType(tags),
            constructors=MappingProxyType(constructors),
        )

    @property
    def union_key(self) -> str:
        return self.options.effective_union_key

    @property
    def fallback(self) -> str | None:
        """Constructor built for unknown union values, ``"default"`` for the unnamed one."""
        if self.options.fallback_union is None:
            return None
        return self.options.fallback_union or FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME

    def tag_for(self, constructor_name: str) -> str:
        """Union value of a declared constructor.

        Raises:
            AnnotationCompositionError: Raised when the constructor is not declared.
        """
        name = constructor_name or FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME
        try:
            return self.tags[name]
        except KeyError as e:
            raise AnnotationCompositionError(
                f"Constructor '{name}' is not declared in this union."
            ) from e

    def constructor_for(self, tag: Any) -> str:
        """Constructor to build for a union value.

        Raises:
            UnmatchedUnionValueError: Raised when nothing matches and no fallback is set.
        """
        if isinstance(tag, str) and tag in self.constructors:
            return self.constructors[tag]
        if self.fallback is not None:
            logger.debug(
                "Union value %r matches no constructor, falling back to '%s'.",
                tag,
                self.fallback,
            )
            return self.fallback
        raise UnmatchedUnionValueError(
            f"Union value {tag!r} matches no constructor. Expected one of:"
            f" {', '.join(repr(t) for t in self.constructors)}."
        )

    def tag_of(self, payload: Mapping[str, Any]) -> Any:
        """Union value stored in a serialized union.

        Raises:
            UnmatchedUnionValueError: Raised when the union key is missing.
        """
        try:
            return payload[self.union_key]
        except KeyError as e:
            raise UnmatchedUnionValueError(
                f"Serialized union has no '{self.union_key}' key."
            ) from e

    def constructor_of(self, payload: Mapping[str, Any]) -> str:
        """Constructor to build for a serialized union. A missing union key is treated
        as an unknown union value.
        """
        return self.constructor_for(payload.get(self.union_key))

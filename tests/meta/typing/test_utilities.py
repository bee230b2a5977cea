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
Description: Tests for the type annotation utilities.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Optional, TypeVar, Union

import pytest

from frozen_annotations.typing_utilities import (
    is_union,
    is_optional,
    is_annotated,
    annotated_metadata,
    matches_annotation,
    resolve_annotation_types,
)


# =============================================================================
# Annotation Shapes
# =============================================================================


class TestAnnotationShapes:
    """Test the predicates on annotation shapes."""

    def test_is_union(self):
        assert is_union(int | str)
        assert is_union(Union[int, str])
        assert not is_union(int)
        assert not is_union(list[int])

    def test_is_optional(self):
        assert is_optional(int | None)
        assert is_optional(Optional[str])
        assert not is_optional(int | str)
        assert not is_optional(None)

    def test_annotated(self):
        hint = Annotated[int, "meta", 42]
        assert is_annotated(hint)
        assert annotated_metadata(hint) == ("meta", 42)
        assert not is_annotated(int)
        assert annotated_metadata(int) == ()

    def test_resolve_annotation_types(self):
        resolved = resolve_annotation_types({"a": "int", "b": "str | None"})
        assert resolved["a"] is int
        assert resolved["b"] == str | None


# =============================================================================
# Value Matching
# =============================================================================


class TestMatchesAnnotation:
    """Test checking values against annotations."""

    @pytest.mark.parametrize(
        "annotation, value, expected",
        [
            (int, 1, True),
            (int, "1", False),
            (str, "a", True),
            (bool, True, True),
            (bool, 1, False),
            (Any, object(), True),
            (None, None, True),
            (None, 0, False),
            (str | None, None, True),
            (str | None, "a", True),
            (str | None, 1, False),
            (Literal["a", "b"], "a", True),
            (Literal["a", "b"], "c", False),
            (Annotated[int, "meta"], 3, True),
            (Annotated[int, "meta"], "3", False),
            (list[int], [1, "2"], True),
            (list[int], (1, 2), False),
            (Mapping[str, str], MappingProxyType({}), True),
            (type, int, True),
        ],
    )
    def test_matches(self, annotation, value, expected):
        assert matches_annotation(annotation, value) is expected

    def test_unresolvable_annotation_raises(self):
        T = TypeVar("T")
        with pytest.raises(TypeError):
            matches_annotation(T, 1)

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
Description: Tests for reading generation options from mappings and TOML files.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging

import pytest

from frozen_annotations import (
    GenerationOptions,
    UnionCaseStyle,
    frozen,
    load_options,
    options_from_mapping,
    options_to_mapping,
)
from frozen_annotations.exceptions import AnnotationConfigError, AnnotationTypeError


# =============================================================================
# Mappings
# =============================================================================


class TestOptionsFromMapping:
    """Test building options from plain mappings."""

    def test_empty_mapping(self):
        assert options_from_mapping({}) == frozen

    def test_camel_case_keys(self):
        options = options_from_mapping(
            {
                "unionKey": "type",
                "unionValueCase": "pascal",
                "fallbackUnion": "fallback",
                "maybeMap": False,
                "maybeWhen": True,
            }
        )
        assert options == GenerationOptions(
            union_key="type",
            union_value_case=UnionCaseStyle.PASCAL,
            fallback_union="fallback",
            maybe_map=False,
            maybe_when=True,
        )

    def test_snake_case_keys(self):
        options = options_from_mapping({"union_key": "type", "maybe_when": False})
        assert options.union_key == "type"
        assert options.maybe_when is False

    def test_unknown_key(self):
        with pytest.raises(AnnotationConfigError, match="'unionkey'"):
            options_from_mapping({"unionkey": "type"})

    def test_key_given_twice(self):
        with pytest.raises(AnnotationConfigError, match="more than once"):
            options_from_mapping({"unionKey": "a", "union_key": "b"})

    def test_invalid_value(self):
        with pytest.raises(AnnotationConfigError) as exc_info:
            options_from_mapping({"unionValueCase": "camel"})
        assert isinstance(exc_info.value.__cause__, AnnotationTypeError)


class TestOptionsToMapping:
    """Test rendering options as camelCase mappings."""

    def test_defaults_are_omitted(self):
        assert options_to_mapping(frozen) == {}

    def test_set_options(self):
        options = GenerationOptions(
            union_key="type", union_value_case="kebab", maybe_map=False
        )
        mapping = options_to_mapping(options)
        assert mapping == {"unionKey": "type", "unionValueCase": "kebab", "maybeMap": False}
        assert options_from_mapping(mapping) == options


# =============================================================================
# TOML Files
# =============================================================================


class TestLoadOptions:
    """Test reading options from TOML files."""

    def test_pyproject(self, tmp_path, caplog):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "demo"\n\n'
            '[tool.frozen_annotations]\nunionKey = "type"\nunionValueCase = "snake"\n',
            encoding="utf-8",
        )
        with caplog.at_level(logging.DEBUG, logger="frozen_annotations"):
            options = load_options(path)
        assert options == GenerationOptions(union_key="type", union_value_case="snake")
        assert "Loading generation options" in caplog.text

    def test_pyproject_without_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
        assert load_options(path) is frozen

    def test_dedicated_file_top_level(self, tmp_path):
        path = tmp_path / "frozen.toml"
        path.write_text('fallbackUnion = "fallback"\nmaybeWhen = false\n', encoding="utf-8")
        options = load_options(str(path))
        assert options.fallback_union == "fallback"
        assert options.maybe_when is False

    def test_dedicated_file_table(self, tmp_path):
        path = tmp_path / "frozen.toml"
        path.write_text('[unions]\nunion_key = "kind"\n', encoding="utf-8")
        assert load_options(path, table="unions").union_key == "kind"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AnnotationConfigError) as exc_info:
            load_options(tmp_path / "missing.toml")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "frozen.toml"
        path.write_text("unionKey = \n", encoding="utf-8")
        with pytest.raises(AnnotationConfigError):
            load_options(path)

    def test_table_is_not_a_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool]\nfrozen_annotations = "type"\n', encoding="utf-8")
        with pytest.raises(AnnotationConfigError, match="must be a table"):
            load_options(path)

    def test_tool_is_not_a_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('tool = "x"\n', encoding="utf-8")
        with pytest.raises(AnnotationConfigError, match="'tool' in .* must be a table"):
            load_options(path)

    def test_invalid_options(self, tmp_path):
        path = tmp_path / "frozen.toml"
        path.write_text("maybeMap = 1\n", encoding="utf-8")
        with pytest.raises(AnnotationConfigError) as exc_info:
            load_options(path)
        assert isinstance(exc_info.value.root_cause(), AnnotationTypeError)

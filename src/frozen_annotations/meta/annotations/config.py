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
Description: Generation options read from plain mappings and TOML files, so that a
            generator can take project wide options without decorating every class.
            Keys use the camelCase names generators exchange (unionKey, ...); the
            Python names (union_key, ...) are accepted too.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .defaults import FrozenDefaults
from .errors import AnnotationConfigError, AnnotationTypeError
from .options import GenerationOptions, frozen

logger = logging.getLogger(__name__)

_CAMEL_KEYS: dict[str, str] = {
    "unionKey": "union_key",
    "unionValueCase": "union_value_case",
    "fallbackUnion": "fallback_union",
    "maybeMap": "maybe_map",
    "maybeWhen": "maybe_when",
}
_SNAKE_KEYS: dict[str, str] = {v: k for k, v in _CAMEL_KEYS.items()}


def options_from_mapping(mapping: Mapping[str, Any]) -> GenerationOptions:
    """Build generation options from a mapping.

    Args:
        mapping (Mapping[str, Any]): Option name to value. Missing options keep their
            default.

    Raises:
        AnnotationConfigError: Raised for unknown keys, options given twice, or values
            of the wrong type.

    Returns:
        GenerationOptions: The options.
    """
    kwargs: dict[str, Any] = {}
    for key, value in mapping.items():
        name = _CAMEL_KEYS.get(key, key)
        if name not in _SNAKE_KEYS:
            raise AnnotationConfigError(
                f"Unknown generation option '{key}'. Known options:"
                f" {', '.join(_CAMEL_KEYS)}."
            )
        if name in kwargs:
            raise AnnotationConfigError(
                f"Generation option '{_SNAKE_KEYS[name]}' is given more than once."
            )
        kwargs[name] = value

    try:
        return GenerationOptions(**kwargs)
    except AnnotationTypeError as e:
        raise AnnotationConfigError(f"Invalid generation options: {e}") from e


def options_to_mapping(options: GenerationOptions) -> dict[str, Any]:
    """camelCase mapping of the options that are set. Inverse of options_from_mapping."""
    mapping: dict[str, Any] = {}
    for name, value in options.to_dict().items():
        if value is None:
            continue
        if name == "union_value_case":
            if value is frozen.union_value_case:
                continue
            value = value.value
        mapping[_SNAKE_KEYS[name]] = value
    return mapping


def load_options(
    path: str | Path, table: str = FrozenDefaults.CONFIG_TABLE
) -> GenerationOptions:
    """Read generation options from a TOML file.

    ``pyproject.toml`` files are read from ``[tool.<table>]``. Other files are read from
    ``[<table>]`` when it exists, from their top level otherwise.

    Args:
        path (str | Path): The TOML file.
        table (str, optional): Name of the table holding the options.

    Raises:
        AnnotationConfigError: Raised when the file cannot be read or parsed, or when the
            options are invalid.

    Returns:
        GenerationOptions: The options, ``frozen`` when a pyproject has no such table.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise AnnotationConfigError(f"Could not read generation options from '{path}'.") from e

    if path.name == "pyproject.toml":
        tool = document.get("tool", {})
        if not isinstance(tool, Mapping):
            raise AnnotationConfigError(f"'tool' in '{path}' must be a table.")
        section = tool.get(table)
    else:
        section = document.get(table, document)

    if section is None:
        logger.debug("No [tool.%s] table in '%s', using default options.", table, path)
        return frozen
    if not isinstance(section, Mapping):
        raise AnnotationConfigError(f"'{table}' in '{path}' must be a table.")

    logger.debug("Loading generation options from '%s': %s", path, dict(section))
    try:
        return options_from_mapping(section)
    except AnnotationConfigError as e:
        raise AnnotationConfigError(f"Invalid generation options in '{path}'.") from e

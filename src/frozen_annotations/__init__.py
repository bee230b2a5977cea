"""
frozen_annotations: Annotations for a frozen classes and unions code generator.

This library provides:
- GenerationOptions (Frozen) and UnionCaseStyle to configure generated classes
- Assert, Default, Implements, With and UnionValue for single constructors
- Discovery of attached annotations and of Annotated default values
- Union value naming and matching, as generators must implement it
- Options loading from TOML files
"""

from .meta.classes.frozen import FrozenValue
from .meta.annotations.attachment import attach, annotation_of, annotations_of
from .meta.annotations.options import (
    GenerationOptions,
    UnionCaseStyle,
    Frozen,
    FrozenUnionCase,
    frozen,
    options_of,
)
from .meta.annotations.markers import (
    AssertionSpec,
    DefaultValue,
    InterfaceSpec,
    MixinSpec,
    UnionValueOverride,
    Assert,
    Default,
    Implements,
    With,
    UnionValue,
    FrozenUnionValue,
)
from .meta.annotations.introspection import defaults_of
from .meta.annotations.unions import UnionTagTable, union_value_for
from .meta.annotations.config import load_options, options_from_mapping, options_to_mapping
from .meta.annotations.defaults import DEFAULT_CONSTRUCTOR_NAME, DEFAULT_UNION_KEY

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Options
    "GenerationOptions",
    "UnionCaseStyle",
    "Frozen",
    "FrozenUnionCase",
    "frozen",
    "options_of",
    # Markers
    "AssertionSpec",
    "DefaultValue",
    "InterfaceSpec",
    "MixinSpec",
    "UnionValueOverride",
    "Assert",
    "Default",
    "Implements",
    "With",
    "UnionValue",
    "FrozenUnionValue",
    # Discovery
    "FrozenValue",
    "attach",
    "annotation_of",
    "annotations_of",
    "defaults_of",
    # Unions
    "UnionTagTable",
    "union_value_for",
    "DEFAULT_UNION_KEY",
    "DEFAULT_CONSTRUCTOR_NAME",
    # Config
    "load_options",
    "options_from_mapping",
    "options_to_mapping",
]

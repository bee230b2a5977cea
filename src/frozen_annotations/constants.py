"""
Re-export constants module for cleaner imports.

This allows: from frozen_annotations.constants import ConstantNamespace
Instead of: from frozen_annotations.meta.classes.constants import ConstantNamespace
"""

from .meta.classes.constants import (
    ConstantNamespace,
    ConstantsMetaclass,
    ConstantsCompositionError,
    ConstantsInstantiationError,
    ConstantsModificationError,
)
from .meta.annotations.defaults import (
    FrozenDefaults,
    DEFAULT_UNION_KEY,
    DEFAULT_CONSTRUCTOR_NAME,
)

__all__ = [
    "ConstantNamespace",
    "ConstantsMetaclass",
    "ConstantsCompositionError",
    "ConstantsInstantiationError",
    "ConstantsModificationError",
    "FrozenDefaults",
    "DEFAULT_UNION_KEY",
    "DEFAULT_CONSTRUCTOR_NAME",
]

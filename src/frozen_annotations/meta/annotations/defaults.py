"""Well-known names shared by frozen_annotations and the generators reading it."""

from ..classes.constants import ConstantNamespace


class FrozenDefaults(ConstantNamespace):
    """Names a generator relies on when an annotation leaves them unspecified."""

    UNION_KEY: str = "runtimeType"
    DEFAULT_CONSTRUCTOR_NAME: str = "default"
    ATTACHED_ATTRIBUTE: str = "__frozen_annotations__"
    CONFIG_TABLE: str = "frozen_annotations"


DEFAULT_UNION_KEY = FrozenDefaults.UNION_KEY
DEFAULT_CONSTRUCTOR_NAME = FrozenDefaults.DEFAULT_CONSTRUCTOR_NAME

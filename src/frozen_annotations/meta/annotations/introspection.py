"""Reading the annotations a generator needs from a declaration."""

from typing import Any, get_type_hints

from ..typing.utilities import annotated_metadata
from .errors import AnnotationCompositionError
from .markers import DefaultValue


def defaults_of(target: Any) -> dict[str, Any]:
    """Default values declared with ``Annotated[T, DefaultValue(x)]``.

    Classes are read from their body annotations, callables from their parameters.

    Args:
        target (Any): A class or a callable.

    Raises:
        AnnotationCompositionError: Raised when a parameter carries several defaults.

    Returns:
        dict[str, Any]: Parameter name to its default value, in declaration order.
    """
    hints = get_type_hints(target, include_extras=True)
    hints.pop("return", None)

    defaults: dict[str, Any] = {}
    for name, hint in hints.items():
        found = [m for m in annotated_metadata(hint) if isinstance(m, DefaultValue)]
        if len(found) > 1:
            raise AnnotationCompositionError(
                f"Parameter '{name}' of {target!r} has {len(found)} default values."
            )
        if found:
            defaults[name] = found[0].default_value
    return defaults

"""
Shared types for the unpresentation module.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union

from modules.unpresentation.core.exceptions import ConfigurationException

# A submitted form only ever carries strings and booleans; an absent field
# is a missing key, never a sentinel value.
RawValue = Union[str, bool]
RawInput = Dict[str, RawValue]


@dataclass(frozen=True)
class CheckboxStates:
    """Values emitted for a checkbox field when it is checked or unchecked."""
    checked: Any = True
    unchecked: Any = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckboxStates":
        """
        Build states from a ``{"checked": ..., "unchecked": ...}`` mapping.

        Missing entries fall back to True/False.
        """
        return cls(
            checked=data.get('checked', True),
            unchecked=data.get('unchecked', False)
        )


def as_field_names(value: Any, owner: str, attribute: str) -> Tuple[str, ...]:
    """
    Normalize a declared list of field names to a tuple.

    Args:
        value: Declared names (list, tuple, set...), None for no fields
        owner: Class or form name (for messages)
        attribute: Declaration being checked, e.g. "checkboxes"

    Returns:
        Tuple of field names

    Raises:
        ConfigurationException: If value is a bare string, a mapping, not
            iterable, or holds anything but strings
    """
    if value is None:
        return ()

    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ConfigurationException(
            f"{owner}.{attribute} must be a list of field names, got {type(value).__name__}"
        )

    names = tuple(value)
    invalid = [name for name in names if not isinstance(name, str) or not name]
    if invalid:
        raise ConfigurationException(
            f"{owner}.{attribute} holds invalid field names: {invalid!r}"
        )

    return names

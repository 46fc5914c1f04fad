"""
Accessor registry system.

Provides decorator-based registration of accessor overrides. An accessor
computes the value of a field instead of reading it from the raw input,
which allows derived fields that were never submitted.
"""

from typing import Any, Callable, Dict, Mapping

from modules.unpresentation.core.exceptions import ConfigurationException
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

ACCESSOR_ATTRIBUTE = "__accessor_field__"

AccessorTable = Dict[str, Callable[[Any], Any]]


def accessor(field: str):
    """
    Decorator to mark a method as the accessor override for a field.

    Usage:
        class CustomerForm(Unpresenter):
            @accessor("full_name")
            def get_full_name(self):
                return f"{self.get('first_name')} {self.get('last_name')}"

    Args:
        field: Name of the field the method resolves

    Returns:
        Decorator function
    """
    if not field:
        raise ConfigurationException("Accessor field name must not be empty")

    def decorator(func: Callable[[Any], Any]) -> Callable[[Any], Any]:
        setattr(func, ACCESSOR_ATTRIBUTE, field)
        return func

    return decorator


def build_accessor_table(
    class_name: str,
    namespace: Mapping[str, Any],
    inherited: Mapping[str, Callable[[Any], Any]]
) -> AccessorTable:
    """
    Build the accessor table for a class from its own namespace.

    Accessors declared on the class replace inherited accessors for the
    same field.

    Args:
        class_name: Name of the class being built (for messages)
        namespace: The class ``__dict__``
        inherited: Accessor table of the parent class

    Returns:
        Mapping of field name to accessor function

    Raises:
        ConfigurationException: If two methods of the class claim one field
    """
    table: AccessorTable = dict(inherited)
    declared: Dict[str, str] = {}

    for attr_name, member in namespace.items():
        field = getattr(member, ACCESSOR_ATTRIBUTE, None)
        if field is None:
            continue

        if field in declared:
            raise ConfigurationException(
                f"{class_name} declares two accessors for '{field}': "
                f"{declared[field]} and {attr_name}"
            )

        if field in table:
            logger.debug(f"{class_name}.{attr_name} overrides inherited accessor for '{field}'")

        declared[field] = attr_name
        table[field] = member
        logger.debug(f"Registered accessor: {class_name}.{attr_name} -> {field}")

    return table


def list_accessors(table: Mapping[str, Callable[[Any], Any]]) -> Dict[str, str]:
    """
    List the accessors of a table.

    Returns:
        Dictionary mapping field names to method names
    """
    return {
        field: func.__name__
        for field, func in table.items()
    }

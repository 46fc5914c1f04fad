"""
Unpresentation core module.

Contains exceptions, shared types, date conversion and the accessor registry.
"""

from modules.unpresentation.core.exceptions import (
    UnpresenterException,
    ConfigurationException,
    UnknownAttributeError,
    DateParseError,
    ValidationException,
)
from modules.unpresentation.core.types import CheckboxStates, RawInput, RawValue
from modules.unpresentation.core.date_converter import DateConverter, to_date, to_display_string
from modules.unpresentation.core.registry import accessor, list_accessors

__all__ = [
    'UnpresenterException',
    'ConfigurationException',
    'UnknownAttributeError',
    'DateParseError',
    'ValidationException',
    'CheckboxStates',
    'RawInput',
    'RawValue',
    'DateConverter',
    'to_date',
    'to_display_string',
    'accessor',
    'list_accessors',
]

"""
Custom exceptions for unpresentation module.
"""

from typing import Any, Dict, List, Optional


class UnpresenterException(Exception):
    """Base exception for unpresentation module."""
    pass


class ConfigurationException(UnpresenterException):
    """Exception raised for invalid unpresenter or form definitions."""
    pass


class UnknownAttributeError(UnpresenterException, KeyError):
    """
    Exception raised when a field cannot be resolved.

    The key is neither an accessor override, a declared checkbox, a declared
    date nor present in the raw input.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown attribute key: {key}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class DateParseError(UnpresenterException, ValueError):
    """Exception raised when a non-empty string does not match the date format."""

    def __init__(self, value: str, date_format: str):
        self.value = value
        self.date_format = date_format
        super().__init__(f"Could not parse '{value}' with date format '{date_format}'")


class ValidationException(UnpresenterException):
    """
    Exception carrying the field level errors reported by a validator.

    The summary message is rarely displayed since errors are per field;
    callers render ``validation_errors`` instead.

    Example:
        try:
            form.validate(is_update=False)
        except ValidationException as e:
            for field, messages in e.get_validation_errors().items():
                print(field, messages)
    """

    def __init__(
        self,
        validation_errors: Dict[str, List[str]],
        message: str = "Validation Failed",
        previous: Optional[BaseException] = None
    ):
        """
        Args:
            validation_errors: Mapping of field name to ordered messages
            message: Summary message
            previous: Optional underlying cause
        """
        super().__init__(message)
        self.message = message
        self.validation_errors = {
            field: list(messages) for field, messages in validation_errors.items()
        }
        if previous is not None:
            self.__cause__ = previous

    @property
    def previous(self) -> Optional[BaseException]:
        return self.__cause__

    def get_validation_errors(self) -> Dict[str, List[str]]:
        """Return the mapping of field name to validation messages."""
        return self.validation_errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'message': self.message,
            'errors': self.validation_errors,
        }

"""
Date conversion between display strings and date values.

Dates arrive from a form as strings in one display format (31/12/2024 by
default) and leave as ``datetime.date`` instances ready for storage.
"""

import re
from datetime import date, datetime
from typing import Optional

from modules.unpresentation.core.exceptions import DateParseError
from shared.utils.config import settings

# One strftime directive, including the escaped "%%"
_DIRECTIVE = re.compile(r'%.')


def _pad_year(date_format: str, year: int) -> str:
    """
    Substitute a four digit year for every %Y directive.

    strftime does not zero-pad years below 1000 on every platform while
    strptime requires four digits.
    """
    return _DIRECTIVE.sub(
        lambda match: f"{year:04d}" if match.group() == '%Y' else match.group(),
        date_format
    )


def to_display_string(value: Optional[date], date_format: Optional[str] = None) -> str:
    """
    Format a date for display.

    Args:
        value: Date (or datetime) to format, None for no date
        date_format: strftime format, defaults to settings.DATE_FORMAT

    Returns:
        Formatted date string, empty string for None

    Example:
        >>> to_display_string(date(2024, 12, 31))
        "31/12/2024"
    """
    if value is None:
        return ""

    fmt = date_format or settings.DATE_FORMAT
    return value.strftime(_pad_year(fmt, value.year))


def to_date(value: Optional[str], date_format: Optional[str] = None) -> Optional[date]:
    """
    Parse a display string into a date.

    Parsing is strict: the whole string must match the format.

    Args:
        value: Display string, empty string for no date
        date_format: strptime format, defaults to settings.DATE_FORMAT

    Returns:
        Parsed date, or None for an empty string

    Raises:
        DateParseError: If the string does not match the format
    """
    if value is None or value == "":
        return None

    fmt = date_format or settings.DATE_FORMAT

    try:
        return datetime.strptime(str(value), fmt).date()
    except ValueError as e:
        raise DateParseError(str(value), fmt) from e


class DateConverter:
    """
    Mixin giving a class one configurable date format.

    Subclasses set ``date_format`` to override the application default.
    """

    date_format: Optional[str] = None

    def get_date_format(self) -> str:
        return self.date_format or settings.DATE_FORMAT

    def convert_date_to_string(self, value: Optional[date]) -> str:
        return to_display_string(value, self.get_date_format())

    def convert_to_date(self, value: Optional[str]) -> Optional[date]:
        return to_date(value, self.get_date_format())

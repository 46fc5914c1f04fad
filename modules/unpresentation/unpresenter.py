"""
Unpresenter - converts raw form input into application-ready values.

An unpresenter does the reverse of a presenter: it takes what the UI
submitted (strings, checkbox presence) and turns it into the values the
application stores (dates, booleans, computed fields).

A field is resolved in a fixed order:
1. Accessor override declared with @accessor
2. Checkbox rule (present in input = checked, absent = unchecked)
3. Date rule (parsed with the class date format, "" = no date)
4. Raw input value
5. UnknownAttributeError
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from modules.unpresentation.core.date_converter import DateConverter
from modules.unpresentation.core.exceptions import (
    ConfigurationException,
    UnknownAttributeError,
    ValidationException,
)
from modules.unpresentation.core.registry import AccessorTable, build_accessor_table
from modules.unpresentation.core.types import CheckboxStates, RawInput, RawValue, as_field_names
from modules.unpresentation.validation import PydanticValidator, Validator
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class FieldAccess(ABC):
    """
    Uniform indexed access to fields.

    Subclasses implement has/get/set/delete; the ``in`` and ``[]`` operators
    delegate to them.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        pass

    @abstractmethod
    def get(self, key: str) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: RawValue) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: RawValue) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)


class Unpresenter(DateConverter, FieldAccess):
    """
    Base class for converting submitted form data to storage format.

    Subclasses declare which fields are checkboxes and dates, add accessor
    overrides for computed fields and supply validation rules.

    Usage:
        class CustomerForm(Unpresenter):
            checkboxes = ("subscribed",)
            dates = ("date_of_birth",)

            @accessor("full_name")
            def get_full_name(self):
                return f"{self['first_name']} {self['last_name']}"

            def get_validation_rules(self, is_update):
                return CustomerRules

        form = CustomerForm(request_data)
        form.validate(is_update=False)
        record = form.transform_all()
    """

    checkboxes: Tuple[str, ...] = ()
    dates: Tuple[str, ...] = ()
    checkbox_states: CheckboxStates = CheckboxStates()
    validator: Validator = PydanticValidator()

    _accessors: AccessorTable = {}

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)

        cls.checkboxes = as_field_names(cls.checkboxes, cls.__name__, "checkboxes")
        cls.dates = as_field_names(cls.dates, cls.__name__, "dates")

        overlap = set(cls.checkboxes) & set(cls.dates)
        if overlap:
            raise ConfigurationException(
                f"{cls.__name__} declares fields as both checkbox and date: {sorted(overlap)}"
            )

        cls._accessors = build_accessor_table(cls.__name__, vars(cls), cls._accessors)

    def __init__(
        self,
        data: Mapping[str, RawValue],
        checkbox_states: Optional[CheckboxStates] = None,
        validator: Optional[Validator] = None
    ):
        """
        Initialize unpresenter with submitted data.

        Args:
            data: Raw input mapping of field name to submitted value
            checkbox_states: Optional values for checked/unchecked, overrides the class default
            validator: Optional validator, overrides the class default
        """
        self._input: RawInput = {}
        self.set_input(data)

        if checkbox_states is not None:
            self.checkbox_states = checkbox_states
        if validator is not None:
            self.validator = validator

    def set_input(self, data: Mapping[str, RawValue]) -> None:
        """Replace the raw input."""
        self._input = dict(data)

    @property
    def raw_input(self) -> RawInput:
        """Copy of the raw input."""
        return dict(self._input)

    def get_checkboxes(self) -> Tuple[str, ...]:
        return self.checkboxes

    def get_dates(self) -> Tuple[str, ...]:
        return self.dates

    def get_accessors(self) -> AccessorTable:
        return self._accessors

    def get_validation_rules(self, is_update: bool) -> Any:
        """
        Return the validation rules to be applied.

        Args:
            is_update: True when validating changes to an existing record

        Returns:
            Rule set understood by the validator, None for no rules
        """
        return None

    def validate(self, is_update: bool = False) -> None:
        """
        Validate the raw input.

        Args:
            is_update: True to apply the rules for an update

        Raises:
            ValidationException: If the validator reports any failing field
        """
        rule_set = self.get_validation_rules(is_update)
        result = self.validator.validate(self.raw_input, rule_set)

        if result.failed:
            logger.info(
                f"{type(self).__name__} validation failed for fields: {sorted(result.messages)}"
            )
            raise ValidationException(result.messages)

    def resolve(self, key: str) -> Any:
        """
        Resolve a field to its application-level value.

        Args:
            key: Field name

        Returns:
            Transformed value

        Raises:
            UnknownAttributeError: If the field cannot be resolved
            DateParseError: If a date field holds an unparseable string
        """
        accessor_func = self._accessors.get(key)
        if accessor_func is not None:
            return accessor_func(self)

        return self.get_attribute_value(key)

    def get_attribute_value(self, key: str) -> Any:
        """
        Obtain a value from the raw input, applying the checkbox and date rules.

        Accessor overrides are not consulted.
        """
        if key in self.get_checkboxes():
            return self.checkbox_value(key)

        if key in self.get_dates():
            # A date field that was never submitted reads as no date
            return self.convert_to_date(self._input.get(key, ""))

        if key in self._input:
            return self._input[key]

        logger.debug(f"{type(self).__name__} cannot resolve field '{key}'")
        raise UnknownAttributeError(key)

    def checkbox_value(self, key: str) -> Any:
        """
        Process a checkbox: the field is only submitted when it is checked,
        whatever value it carries.
        """
        if key in self._input:
            return self.checkbox_states.checked
        return self.checkbox_states.unchecked

    def transform_all(self) -> Dict[str, Any]:
        """
        Transform every field to its storage format.

        Every input field except checkboxes is resolved, then every declared
        checkbox is resolved whether or not it was submitted.

        Returns:
            Dictionary of field name to transformed value
        """
        output: Dict[str, Any] = {}
        checkboxes = self.get_checkboxes()

        for key in list(self._input):
            if key not in checkboxes:
                output[key] = self.resolve(key)

        for checkbox in checkboxes:
            output[checkbox] = self.resolve(checkbox)

        return output

    # Indexed access

    def has(self, key: str) -> bool:
        """
        True if the key was submitted or is a declared checkbox; an unchecked
        checkbox always has a value even though it is missing from the input.
        """
        return key in self._input or key in self.get_checkboxes()

    def get(self, key: str) -> Any:
        return self.resolve(key)

    def set(self, key: str, value: RawValue) -> None:
        self._input[key] = value

    def delete(self, key: str) -> None:
        del self._input[key]

    def __getattr__(self, name: str) -> Any:
        # Only called for names not found normally; private names are never fields
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.resolve(name)
        except UnknownAttributeError as e:
            # A missing dependency inside an accessor is not a missing attribute
            if e.key != name:
                raise
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute or field '{name}'"
            ) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={sorted(self._input)})"

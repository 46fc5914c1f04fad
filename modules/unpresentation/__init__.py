"""
Unpresentation module.

Converts raw form input into typed, storage-ready values.

Main components:
- Unpresenter: Field resolver and whole-input transformer
- accessor: Decorator declaring computed fields
- DateConverter / to_date / to_display_string: Date conversion
- ValidationException: Raised with per-field messages when validation fails
- FormConfigLoader: Builds unpresenters from YAML form definitions

Usage:
    from modules.unpresentation import Unpresenter, ValidationException

    class CustomerForm(Unpresenter):
        checkboxes = ("subscribed",)
        dates = ("date_of_birth",)

    form = CustomerForm(request_data)
    try:
        form.validate(is_update=False)
    except ValidationException as e:
        return render_errors(e.get_validation_errors())

    record = form.transform_all()
"""

from modules.unpresentation.core import (
    CheckboxStates,
    ConfigurationException,
    DateConverter,
    DateParseError,
    UnknownAttributeError,
    UnpresenterException,
    ValidationException,
    accessor,
    list_accessors,
    to_date,
    to_display_string,
)
from modules.unpresentation.core.config_loader import FormConfigLoader, load_form_config
from modules.unpresentation.unpresenter import FieldAccess, Unpresenter
from modules.unpresentation.validation import (
    CallableValidator,
    PydanticValidator,
    Validator,
    ValidatorResult,
)

__all__ = [
    'Unpresenter',
    'FieldAccess',
    'accessor',
    'list_accessors',
    'CheckboxStates',
    'DateConverter',
    'to_date',
    'to_display_string',
    'UnpresenterException',
    'ConfigurationException',
    'UnknownAttributeError',
    'DateParseError',
    'ValidationException',
    'FormConfigLoader',
    'load_form_config',
    'Validator',
    'ValidatorResult',
    'PydanticValidator',
    'CallableValidator',
]

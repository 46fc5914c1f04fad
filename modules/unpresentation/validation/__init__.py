"""
Validation collaborator module.

The unpresenter delegates rule checking to a Validator and only consumes
its pass/fail verdict and per-field messages.
"""

from modules.unpresentation.validation.base import Validator, ValidatorResult
from modules.unpresentation.validation.validators import (
    CallableValidator,
    FORM_ERRORS_KEY,
    PydanticValidator,
)

__all__ = [
    'Validator',
    'ValidatorResult',
    'PydanticValidator',
    'CallableValidator',
    'FORM_ERRORS_KEY',
]

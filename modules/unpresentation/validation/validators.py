"""
Built-in validator adapters.

- PydanticValidator: rule sets are pydantic models (default)
- CallableValidator: rule checking delegated to a plain function
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from modules.unpresentation.validation.base import Validator, ValidatorResult
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

# Errors not attached to a single field (model validators)
FORM_ERRORS_KEY = "__all__"


class PydanticValidator(Validator):
    """
    Validate raw input with a pydantic model used as the rule set.

    Errors are grouped by the first element of their location so nested
    errors are reported against the submitted field.

    Example:
        class CustomerRules(BaseModel):
            email: str = Field(pattern=r".+@.+")
            age: int = Field(ge=18)

        result = PydanticValidator().validate({"email": "x"}, CustomerRules)
        result.messages  # {"email": [...], "age": ["Field required"]}
    """

    def validate(
        self,
        data: Mapping[str, Any],
        rule_set: Optional[Type[BaseModel]]
    ) -> ValidatorResult:
        if rule_set is None:
            return ValidatorResult.passed()

        if not (isinstance(rule_set, type) and issubclass(rule_set, BaseModel)):
            raise TypeError(
                f"PydanticValidator expects a BaseModel subclass, got {type(rule_set).__name__}"
            )

        try:
            rule_set.model_validate(dict(data))
        except ValidationError as e:
            messages = self._group_errors(e)
            logger.debug(f"{rule_set.__name__} rejected fields: {sorted(messages)}")
            return ValidatorResult(failed=True, messages=messages)

        return ValidatorResult.passed()

    @staticmethod
    def _group_errors(error: ValidationError) -> Dict[str, List[str]]:
        messages: Dict[str, List[str]] = {}
        for detail in error.errors():
            loc = detail.get('loc') or ()
            field = str(loc[0]) if loc else FORM_ERRORS_KEY
            messages.setdefault(field, []).append(detail.get('msg', 'Invalid value'))
        return messages


class CallableValidator(Validator):
    """
    Adapt a plain function into a Validator.

    The function receives ``(data, rule_set)`` and returns a mapping of
    field name to messages; an empty mapping means the input passed.
    """

    def __init__(self, func: Callable[[Mapping[str, Any], Any], Mapping[str, List[str]]]):
        self.func = func

    def validate(self, data: Mapping[str, Any], rule_set: Any) -> ValidatorResult:
        return ValidatorResult.from_messages(self.func(data, rule_set) or {})

"""
Tests for validation delegation and ValidationException.
"""

from typing import Optional

import pytest
from pydantic import BaseModel, Field, model_validator

from modules.unpresentation import (
    CallableValidator,
    PydanticValidator,
    Unpresenter,
    ValidationException,
    Validator,
    ValidatorResult,
)
from modules.unpresentation.validation import FORM_ERRORS_KEY


class CreateRules(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    age: int = Field(ge=18)


class UpdateRules(BaseModel):
    email: Optional[str] = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")


class PasswordRules(BaseModel):
    password: str
    password_confirmation: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.password_confirmation:
            raise ValueError("passwords do not match")
        return self


class SignupForm(Unpresenter):
    checkboxes = ("subscribed",)

    def get_validation_rules(self, is_update):
        return UpdateRules if is_update else CreateRules


class RecordingValidator(Validator):
    def __init__(self):
        self.calls = []

    def validate(self, data, rule_set):
        self.calls.append((data, rule_set))
        return ValidatorResult.passed()


def test_validation_exception_defaults():
    errors = {"email": ["Email is required", "Email is invalid"]}
    exc = ValidationException(errors)

    assert str(exc) == "Validation Failed"
    assert exc.message == "Validation Failed"
    assert exc.get_validation_errors() == errors
    assert exc.previous is None
    assert exc.to_dict() == {"message": "Validation Failed", "errors": errors}


def test_validation_exception_keeps_cause_and_message():
    cause = RuntimeError("validator crashed")
    exc = ValidationException({}, message="Could not validate", previous=cause)

    assert str(exc) == "Could not validate"
    assert exc.previous is cause
    assert exc.__cause__ is cause


def test_validation_exception_copies_errors():
    errors = {"email": ["bad"]}
    exc = ValidationException(errors)

    errors["email"].append("worse")

    assert exc.get_validation_errors() == {"email": ["bad"]}


def test_validate_passes_without_rules():
    Unpresenter({"anything": "goes"}).validate(is_update=False)


def test_validate_raises_with_every_failing_field():
    form = SignupForm({"email": "not-an-email", "age": "12"})

    with pytest.raises(ValidationException) as exc_info:
        form.validate(is_update=False)

    errors = exc_info.value.get_validation_errors()
    assert set(errors) == {"email", "age"}
    assert all(errors[field] for field in errors)


def test_validate_reports_missing_fields():
    with pytest.raises(ValidationException) as exc_info:
        SignupForm({}).validate(is_update=False)

    assert set(exc_info.value.get_validation_errors()) == {"email", "age"}


def test_validate_passes_with_valid_input():
    SignupForm({"email": "a@example.com", "age": "30"}).validate(is_update=False)


def test_validate_uses_update_rules():
    form = SignupForm({"subscribed": "on"})

    form.validate(is_update=True)

    with pytest.raises(ValidationException):
        form.validate(is_update=False)


def test_validate_hands_raw_input_and_rules_to_validator():
    validator = RecordingValidator()
    form = SignupForm({"email": "a@example.com"}, validator=validator)

    form.validate(is_update=True)

    assert validator.calls == [({"email": "a@example.com"}, UpdateRules)]


def test_validate_matches_exactly_the_reported_fields():
    reported = {"postcode": ["Postcode is invalid"], "phone": ["Too short", "Digits only"]}
    validator = CallableValidator(lambda data, rules: reported)

    with pytest.raises(ValidationException) as exc_info:
        Unpresenter({"postcode": "x"}, validator=validator).validate(is_update=False)

    assert exc_info.value.get_validation_errors() == reported


def test_validate_has_no_side_effect_on_success():
    form = SignupForm({"email": "a@example.com", "age": "30"})

    form.validate(is_update=False)

    assert form.raw_input == {"email": "a@example.com", "age": "30"}


def test_pydantic_validator_groups_model_errors():
    result = PydanticValidator().validate(
        {"password": "a", "password_confirmation": "b"},
        PasswordRules
    )

    assert result.failed
    assert list(result.messages) == [FORM_ERRORS_KEY]
    assert "passwords do not match" in result.messages[FORM_ERRORS_KEY][0]


def test_pydantic_validator_rejects_non_model_rule_set():
    with pytest.raises(TypeError):
        PydanticValidator().validate({}, {"email": "required"})


def test_callable_validator_ignores_fields_without_messages():
    validator = CallableValidator(lambda data, rules: {"email": [], "age": ["Too young"]})

    result = validator.validate({}, None)

    assert result.failed
    assert result.messages == {"age": ["Too young"]}


def test_callable_validator_passes_on_empty_mapping():
    result = CallableValidator(lambda data, rules: {}).validate({}, None)

    assert not result.failed
    assert result.messages == {}

"""
Tests for building unpresenters from YAML form definitions.
"""

from datetime import date
from pathlib import Path

import pytest
import yaml

from modules.unpresentation import (
    CheckboxStates,
    ConfigurationException,
    FormConfigLoader,
    Unpresenter,
    accessor,
    load_form_config,
)

PROJECT_FORMS = Path(__file__).parent.parent / "config" / "forms" / "forms.yaml"


@pytest.fixture
def forms_file(tmp_path: Path) -> Path:
    path = tmp_path / "forms.yaml"
    path.write_text(
        "forms:\n"
        "  customer:\n"
        "    checkboxes: [subscribed]\n"
        "    dates: [date_of_birth]\n"
        "  booking:\n"
        "    checkboxes: [breakfast_included]\n"
        "    dates: [arrival]\n"
        "    date_format: '%Y-%m-%d'\n"
        "    checkbox_states: {checked: 'Y', unchecked: 'N'}\n"
        "  broken:\n"
        "    checkboxes: [flag]\n"
        "    dates: [flag]\n"
        "  typo:\n"
        "    checkbox: [flag]\n",
        encoding="utf-8"
    )
    return path


def test_build_unpresenter(forms_file: Path):
    CustomerUnpresenter = FormConfigLoader(str(forms_file)).build_unpresenter("customer")

    assert CustomerUnpresenter.__name__ == "CustomerUnpresenter"
    assert issubclass(CustomerUnpresenter, Unpresenter)

    form = CustomerUnpresenter({"date_of_birth": "01/02/1990"})
    assert form.transform_all() == {"date_of_birth": date(1990, 2, 1), "subscribed": False}


def test_build_unpresenter_with_format_and_states(forms_file: Path):
    BookingUnpresenter = FormConfigLoader(str(forms_file)).build_unpresenter("booking")

    form = BookingUnpresenter({"arrival": "2024-12-25", "breakfast_included": "1"})

    assert BookingUnpresenter.checkbox_states == CheckboxStates(checked="Y", unchecked="N")
    assert form.transform_all() == {"arrival": date(2024, 12, 25), "breakfast_included": "Y"}


def test_build_unpresenter_from_custom_base(forms_file: Path):
    class NamedForm(Unpresenter):
        @accessor("greeting")
        def get_greeting(self):
            return f"Hello {self['name']}"

    CustomerUnpresenter = FormConfigLoader(str(forms_file)).build_unpresenter("customer", base=NamedForm)

    assert CustomerUnpresenter({"name": "Ada"}).resolve("greeting") == "Hello Ada"


def test_overlapping_fields_rejected(forms_file: Path):
    with pytest.raises(ConfigurationException):
        FormConfigLoader(str(forms_file)).build_unpresenter("broken")


def test_unknown_keys_rejected(forms_file: Path):
    with pytest.raises(ConfigurationException):
        FormConfigLoader(str(forms_file)).get_form("typo")


def test_unknown_form_rejected(forms_file: Path):
    with pytest.raises(ConfigurationException):
        FormConfigLoader(str(forms_file)).get_form("missing")


def test_missing_file_gives_empty_config(tmp_path: Path):
    loader = FormConfigLoader(str(tmp_path / "absent.yaml"))

    assert loader.load() == {"forms": {}}
    assert loader.get_forms() == {}


def test_invalid_yaml_raises(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("forms: [unclosed\n", encoding="utf-8")

    with pytest.raises(yaml.YAMLError):
        FormConfigLoader(str(path)).load()


def test_reload_picks_up_changes(forms_file: Path):
    loader = FormConfigLoader(str(forms_file))
    assert "customer" in loader.get_forms()

    forms_file.write_text("forms:\n  other: {}\n", encoding="utf-8")
    loader.reload()

    assert set(loader.get_forms()) == {"other"}
    assert loader.build_unpresenter("other").checkboxes == ()


def test_project_forms_file_loads():
    config = load_form_config(str(PROJECT_FORMS))

    assert {"customer", "booking"} <= set(config["forms"])


@pytest.mark.parametrize("body", [
    "    checkboxes: subscribed\n",
    "    dates: date_of_birth\n",
    "    checkboxes: {subscribed: true}\n",
    "    checkbox_states: 'Y'\n",
    "    checkbox_states: [Y, N]\n",
])
def test_malformed_form_definition_rejected(tmp_path: Path, body: str):
    path = tmp_path / "forms.yaml"
    path.write_text("forms:\n  customer:\n" + body, encoding="utf-8")
    loader = FormConfigLoader(str(path))

    with pytest.raises(ConfigurationException):
        loader.get_form("customer")
    with pytest.raises(ConfigurationException):
        loader.build_unpresenter("customer")

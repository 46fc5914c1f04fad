"""
Form configuration loader.

Loads form definitions (checkboxes, dates, date format, checkbox states)
from YAML so simple forms need no subclass of their own.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Type, TYPE_CHECKING

import yaml

from modules.unpresentation.core.exceptions import ConfigurationException
from modules.unpresentation.core.types import CheckboxStates, as_field_names
from shared.utils.config import settings
from shared.utils.logger import log_error, setup_logger

if TYPE_CHECKING:
    from modules.unpresentation.unpresenter import Unpresenter

logger = setup_logger(__name__)

_FORM_KEYS = {'checkboxes', 'dates', 'date_format', 'checkbox_states'}


class FormConfigLoader:
    """
    Loads form definitions from a YAML file.

    Expected layout:
        forms:
          customer:
            checkboxes: [subscribed]
            dates: [date_of_birth]
            date_format: "%d/%m/%Y"
            checkbox_states:
              checked: 1
              unchecked: 0
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to form definitions YAML file
                        If None, uses settings.FORMS_CONFIG_PATH
        """
        self.config_path = Path(config_path or settings.FORMS_CONFIG_PATH)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
        """
        if not self.config_path.exists():
            logger.warning(
                f"Form config file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            log_error(logger, e, f"Failed to parse form config {self.config_path}")
            raise

        logger.info(f"Loaded form config from: {self.config_path}")
        return self._config

    def get_forms(self) -> Dict[str, Any]:
        """Return all form definitions keyed by form name."""
        if self._config is None:
            self.load()

        return self._config.get('forms') or {}

    def get_form(self, name: str) -> Dict[str, Any]:
        """
        Get the definition of a single form.

        Raises:
            ConfigurationException: If the form is not defined or malformed
        """
        forms = self.get_forms()
        if name not in forms:
            raise ConfigurationException(
                f"Form '{name}' not defined in {self.config_path}"
            )

        definition = forms[name] or {}
        if not isinstance(definition, dict):
            raise ConfigurationException(f"Form '{name}' must be a mapping")

        unknown = set(definition) - _FORM_KEYS
        if unknown:
            raise ConfigurationException(
                f"Form '{name}' has unknown keys: {sorted(unknown)}"
            )

        for attribute in ('checkboxes', 'dates'):
            as_field_names(definition.get(attribute), name, attribute)

        states = definition.get('checkbox_states')
        if states is not None and not isinstance(states, dict):
            raise ConfigurationException(
                f"Form '{name}' checkbox_states must be a mapping of checked/unchecked values"
            )

        return definition

    def build_unpresenter(
        self,
        name: str,
        base: Optional[Type["Unpresenter"]] = None
    ) -> Type["Unpresenter"]:
        """
        Create an Unpresenter subclass from a form definition.

        Args:
            name: Form name in the configuration
            base: Class to derive from, defaults to Unpresenter

        Returns:
            New Unpresenter subclass
        """
        if base is None:
            from modules.unpresentation.unpresenter import Unpresenter
            base = Unpresenter

        definition = self.get_form(name)
        attributes: Dict[str, Any] = {
            'checkboxes': as_field_names(definition.get('checkboxes'), name, 'checkboxes'),
            'dates': as_field_names(definition.get('dates'), name, 'dates'),
        }

        if definition.get('date_format'):
            attributes['date_format'] = definition['date_format']

        if definition.get('checkbox_states') is not None:
            attributes['checkbox_states'] = CheckboxStates.from_dict(definition['checkbox_states'])

        class_name = ''.join(part.capitalize() for part in name.split('_')) + 'Unpresenter'
        logger.debug(f"Building {class_name} from form definition '{name}'")
        return type(class_name, (base,), attributes)

    def _get_default_config(self) -> Dict[str, Any]:
        return {'forms': {}}

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()


def load_form_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Convenience function to load form configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration dictionary
    """
    loader = FormConfigLoader(config_path)
    return loader.load()

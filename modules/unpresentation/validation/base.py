"""
Base classes and data models for the validator collaborator.

The unpresenter never interprets validation rules itself. It hands the raw
input and an opaque rule set to a Validator and only looks at the result:
- Validator: Abstract base class for all validator adapters
- ValidatorResult: Standard result format
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, List, Mapping


@dataclass
class ValidatorResult:
    """
    Standard validator result format.

    ``messages`` maps each failing field to its ordered messages.
    """
    failed: bool
    messages: Dict[str, List[str]] = dataclass_field(default_factory=dict)

    @classmethod
    def passed(cls) -> "ValidatorResult":
        return cls(failed=False)

    @classmethod
    def from_messages(cls, messages: Mapping[str, List[str]]) -> "ValidatorResult":
        """Build a result that fails when any field has messages."""
        cleaned = {field: list(msgs) for field, msgs in messages.items() if msgs}
        return cls(failed=bool(cleaned), messages=cleaned)


class Validator(ABC):
    """
    Abstract base class for validator adapters.

    Example:
        class AlwaysPasses(Validator):
            def validate(self, data, rule_set):
                return ValidatorResult.passed()
    """

    @abstractmethod
    def validate(self, data: Mapping[str, Any], rule_set: Any) -> ValidatorResult:
        """
        Validate input data against a rule set.

        Args:
            data: Raw input mapping
            rule_set: Rules in whatever form the adapter understands,
                      None meaning no rules

        Returns:
            ValidatorResult object
        """
        pass

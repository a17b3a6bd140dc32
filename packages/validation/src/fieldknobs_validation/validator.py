"""Validator: evaluates a rule collection and merges the outcomes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .result import ValidationResult
from .rules import ValidationRule

logger = logging.getLogger(__name__)


class Validator:
    """Ordered collection of rules evaluated together against one value.

    Subclasses declare their rules by overriding ``build_rules``; ad hoc
    validators pass ``rules`` directly. Every rule is evaluated on every
    call (there is no short circuit), highest priority first, and the
    results are merged so the caller sees every distinct failure.

    Validators hold no per-call state and may be shared between threads.
    """

    name = "validator"

    def __init__(self, rules: Iterable[ValidationRule] | None = None, name: str | None = None):
        """Initialize the validator.

        Args:
            rules: Rules to evaluate; defaults to ``build_rules()``
            name: Optional name overriding the class-level ``name``
        """
        self._rules = list(rules) if rules is not None else self.build_rules()
        if name is not None:
            self.name = name

    def build_rules(self) -> list[ValidationRule]:
        """Declare this validator's rules. Subclasses override."""
        return []

    @property
    def rules(self) -> list[ValidationRule]:
        """Rules in declaration order."""
        return list(self._rules)

    def ordered_rules(self) -> list[ValidationRule]:
        """Rules in evaluation order: priority descending, ties in declaration order."""
        return sorted(self._rules, key=lambda rule: rule.priority, reverse=True)

    def validate(self, value: str) -> ValidationResult:
        """Validate a value against every rule.

        Args:
            value: Input string

        Returns:
            Merged ValidationResult of all rules
        """
        results = [rule.validate(value) for rule in self.ordered_rules()]
        result = ValidationResult.merge_all(results)
        logger.debug(
            f"Validator '{self.name}' ran {len(results)} rules: "
            f"{len(result.errors or ())} errors"
        )
        return result

    def is_valid(self, value: str) -> bool:
        """Check whether a value passes every rule."""
        return self.validate(value).is_valid

    def validate_many(self, values: Iterable[str]) -> list[ValidationResult]:
        """Validate several values independently.

        Args:
            values: Input strings

        Returns:
            One ValidationResult per value, in input order
        """
        return [self.validate(value) for value in values]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, rules={self._rules!r})"

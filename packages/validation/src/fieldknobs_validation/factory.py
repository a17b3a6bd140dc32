"""Factory for building validators from configuration."""

import logging
import re
from pathlib import Path
from typing import Any

from fieldknobs_common import ConfigurationError
from fieldknobs_config import FactoryBase, load_config

from .error import ValidationError
from .lookups import LOOKUPS
from .patterns import RegexPattern
from .rules import (
    AlwaysValidRule,
    FullNameRule,
    LengthRule,
    MembershipRule,
    NonAsciiRule,
    NonEmptyRule,
    RangeLengthRule,
    RegexRule,
    StateRule,
    ValidationRule,
)
from .validator import Validator
from .validators import create_stock_validator, stock_validator_names

logger = logging.getLogger(__name__)


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Configuration Options:
        name (str): Validator name
        extends (str): Optional stock validator whose rules come first
        rules (list): List of rule definitions

    Rule Definition Options:
        type (str): non_ascii, non_empty, length, range_length, full_name,
            pattern, membership, state or always_valid
        priority (int): Evaluation priority (default: 0)
        message (str): Optional error message replacing the rule's default
        recovery (str): Optional recovery hint (used with message)
        length (int): Exact length for ``length``
        min, max (int): Bounds for ``range_length``
        pattern (str) / pattern_name (str): Regex or stock pattern for ``pattern``
        values (list) / lookup (str): Allowed values for ``membership``

    Example Configuration:
        validators:
          - name: username
            rules:
              - type: non_ascii
              - type: range_length
                min: 3
                max: 20
                priority: 1
              - type: pattern
                pattern: "^[a-z0-9_]+$"
                message: Invalid Username
                recovery: Use lowercase letters, digits and underscores
          - name: contact_email
            extends: email
    """

    def create(self, **config: Any) -> Validator:
        """Create a Validator instance from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If ``extends`` names an unknown stock validator,
                a pattern does not compile, an integer parameter is not an
                integer, or membership values are not strings
        """
        name = config.get("name", "unnamed_validator")
        logger.info(f"Creating validator: {name}")

        rules: list[ValidationRule] = []
        extends = config.get("extends")
        if extends:
            rules.extend(self._stock_rules(name, extends))

        rules.extend(self._build_rules(config.get("rules", [])))
        return Validator(rules, name=name)

    def _stock_rules(self, name: str, extends: str) -> list[ValidationRule]:
        try:
            return create_stock_validator(extends).rules
        except KeyError as e:
            raise ConfigurationError(
                f"Validator '{name}' extends unknown validator '{extends}'",
                context={"validator": name, "extends": extends, "available": stock_validator_names()},
            ) from e

    def _build_rules(self, rule_configs: list[dict[str, Any]]) -> list[ValidationRule]:
        """Build rule objects from configuration, skipping unusable entries."""
        rules: list[ValidationRule] = []
        for config in rule_configs:
            rule = self._build_rule(config)
            if rule is not None:
                rules.append(rule)
        return rules

    def _build_rule(self, config: dict[str, Any]) -> ValidationRule | None:
        rule_type = str(config.get("type", "")).lower()
        priority = self._int_param(config, "priority", 0)
        error = self._build_error(config)

        if rule_type == "non_ascii":
            return NonAsciiRule(priority, error)

        elif rule_type == "non_empty":
            return NonEmptyRule(priority, error)

        elif rule_type == "length":
            if config.get("length") is None:
                logger.warning("Length rule configuration missing 'length', skipping")
                return None
            return LengthRule(self._int_param(config, "length"), priority, error)

        elif rule_type == "range_length":
            if config.get("min") is None or config.get("max") is None:
                logger.warning("Range length rule configuration needs 'min' and 'max', skipping")
                return None
            return RangeLengthRule(
                self._int_param(config, "min"), self._int_param(config, "max"), priority, error
            )

        elif rule_type == "full_name":
            return FullNameRule(priority, error)

        elif rule_type == "pattern":
            return self._build_pattern_rule(config, priority, error)

        elif rule_type == "membership":
            return self._build_membership_rule(config, priority, error)

        elif rule_type == "state":
            return StateRule(priority=priority, validation_error=error)

        elif rule_type == "always_valid":
            return AlwaysValidRule(priority, error)

        logger.warning(f"Unknown rule type: {rule_type}")
        return None

    def _int_param(self, config: dict[str, Any], key: str, default: int | None = None) -> int:
        """Read an integer rule parameter, accepting ints and integer strings."""
        value = config.get(key, default)
        error = ConfigurationError(
            f"Rule parameter '{key}' must be an integer, got {value!r}",
            context={"rule": config, "key": key},
        )
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise error
        try:
            return int(value)
        except ValueError as e:
            raise error from e

    def _build_error(self, config: dict[str, Any]) -> ValidationError | None:
        message = config.get("message")
        if message is None:
            return None
        return ValidationError(str(message), config.get("recovery"))

    def _build_pattern_rule(
        self,
        config: dict[str, Any],
        priority: int,
        error: ValidationError | None,
    ) -> ValidationRule | None:
        pattern_name = config.get("pattern_name")
        if pattern_name:
            try:
                return RegexRule(RegexPattern.from_name(pattern_name), priority, error)
            except KeyError as e:
                raise ConfigurationError(
                    f"Unknown pattern name: {pattern_name}",
                    context={"pattern_name": pattern_name, "available": [p.name for p in RegexPattern]},
                ) from e

        pattern = config.get("pattern")
        if not pattern:
            logger.warning("Pattern rule configuration missing 'pattern', skipping")
            return None
        try:
            return RegexRule(str(pattern), priority, error)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid regular expression: {pattern}",
                context={"pattern": pattern, "error": str(e)},
            ) from e

    def _build_membership_rule(
        self,
        config: dict[str, Any],
        priority: int,
        error: ValidationError | None,
    ) -> ValidationRule | None:
        lookup_name = config.get("lookup")
        if lookup_name:
            if lookup_name not in LOOKUPS:
                raise ConfigurationError(
                    f"Unknown lookup table: {lookup_name}",
                    context={"lookup": lookup_name, "available": list(LOOKUPS)},
                )
            return MembershipRule(LOOKUPS[lookup_name], priority, error)

        values = config.get("values", [])
        if not values:
            logger.warning("Membership rule configuration missing 'values' or 'lookup', skipping")
            return None
        non_strings = [v for v in values if not isinstance(v, str)]
        if non_strings:
            raise ConfigurationError(
                f"Membership values must be strings, got {non_strings!r}; quote them in YAML",
                context={"rule": config, "key": "values"},
            )
        return MembershipRule({v: v for v in values}, priority, error)


def load_validators(source: str | Path | dict[str, Any]) -> dict[str, Validator]:
    """Build every validator listed under ``validators`` in a config source.

    Args:
        source: YAML/JSON file path or configuration dictionary

    Returns:
        Mapping of validator name to Validator, in configuration order

    Raises:
        ConfigurationError: If two entries share a validator name
    """
    config = load_config(source)
    validators: dict[str, Validator] = {}
    for validator in validator_factory.create_many(config.get("validators", [])):
        if validator.name in validators:
            raise ConfigurationError(
                f"Duplicate validator name in configuration: {validator.name}",
                context={"validator": validator.name},
            )
        validators[validator.name] = validator
    return validators


# Create singleton instance for registration
validator_factory = ValidatorFactory()

"""Named lookup of ready-to-use validators."""

from __future__ import annotations

import logging

from fieldknobs_common import Registry

from .result import ValidationResult
from .validator import Validator
from .validators import create_stock_validator, stock_validator_names

logger = logging.getLogger(__name__)


class ValidatorRegistry(Registry[Validator]):
    """Registry of validator instances keyed by name.

    Validators are stateless, so one registered instance serves every caller.
    """

    def __init__(self, name: str = "validators"):
        super().__init__(name)

    def add(self, validator: Validator, allow_overwrite: bool = False) -> None:
        """Register a validator under its own ``name``."""
        self.register(validator.name, validator, allow_overwrite=allow_overwrite)
        logger.debug(f"Registered validator '{validator.name}' in {self.name}")

    def validate(self, name: str, value: str) -> ValidationResult:
        """Validate ``value`` with the validator registered as ``name``.

        Raises:
            NotFoundError: If no validator has that name
        """
        return self.get(name).validate(value)

    def is_valid(self, name: str, value: str) -> bool:
        return self.validate(name, value).is_valid


def default_registry() -> ValidatorRegistry:
    """Create a registry holding one instance of every stock validator."""
    registry = ValidatorRegistry()
    for name in stock_validator_names():
        registry.add(create_stock_validator(name))
    return registry

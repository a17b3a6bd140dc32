"""Factory contract for building objects from configuration."""

from typing import Any


class FactoryBase:
    """Base class for factory objects.

    Factories that inherit from this should implement the create method.
    The config loader hands each factory the keyword arguments found in one
    configuration entry.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError("Subclasses must implement create method")

    def create_many(self, configs: list[dict[str, Any]]) -> list[Any]:
        """Create one object per configuration entry, preserving order."""
        return [self.create(**config) for config in configs]

"""Common utilities and base classes for fieldknobs packages.

- **Exceptions**: Shared exception hierarchy with context support
- **Registry**: Generic registry pattern for managing named items
"""

from fieldknobs_common.exceptions import (
    ConfigurationError,
    FieldknobsError,
    NotFoundError,
    OperationError,
    SerializationError,
)
from fieldknobs_common.registry import Registry

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "FieldknobsError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "SerializationError",
    # Registry
    "Registry",
]

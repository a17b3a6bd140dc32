"""Shared exception hierarchy for the fieldknobs packages.

Field validation failures are never raised: they are returned as data inside a
``ValidationResult``. The exceptions here cover the other side of the fence,
i.e. mistakes made while *setting up* validation: a bad configuration file, an
unknown validator name, a duplicate registration.

Example:
    ```python
    from fieldknobs_common.exceptions import FieldknobsError, NotFoundError

    try:
        registry.get("postal_code")
    except NotFoundError as e:
        logger.error(f"Error: {e}")
        logger.error(f"Available: {e.context['available_keys']}")
    ```
"""

from typing import Any, Dict


class FieldknobsError(Exception):
    """Base exception for all fieldknobs packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (keys, paths, names)
        details: Alternative to context (takes precedence when both are given)

    Example:
        ```python
        error = FieldknobsError(
            "Validator build failed",
            context={"validator": "username"}
        )
        str(error)
        # 'Validator build failed'
        error.context
        # {'validator': 'username'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(FieldknobsError):
    """Raised when configuration is invalid or missing.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown stock validator",
            context={"extends": "passport", "validator": "travel_doc"}
        )
        ```
    """

    pass


class NotFoundError(FieldknobsError):
    """Raised when a requested item is not found.

    Typical case: looking up a validator by a name nobody registered.
    """

    pass


class OperationError(FieldknobsError):
    """Raised when an operation fails.

    Example:
        ```python
        raise OperationError(
            "Item 'email' already registered in validators",
            context={"key": "email", "registry": "validators"}
        )
        ```
    """

    pass


class SerializationError(FieldknobsError):
    """Raised when serialization or deserialization fails.

    Example:
        ```python
        raise SerializationError(
            "Cannot deserialize validation error",
            context={"data": {"recovery": "retry"}, "missing": "message"}
        )
        ```
    """

    pass


__all__ = [
    "FieldknobsError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "SerializationError",
]

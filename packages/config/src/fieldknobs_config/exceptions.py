"""Custom exceptions for the config package.

Built on the common exception framework from fieldknobs_common.
"""

from fieldknobs_common import ConfigurationError, NotFoundError

# Short alias used throughout the config package
ConfigError = ConfigurationError


class ConfigFileNotFoundError(NotFoundError):
    """Raised when a configuration file does not exist."""

    pass


class MissingVariableError(ConfigurationError):
    """Raised when a ${VAR} reference has no value and no default."""

    pass

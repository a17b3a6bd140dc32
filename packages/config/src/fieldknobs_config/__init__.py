"""fieldknobs Config Package

Configuration loading and factory contracts for building validators
from YAML or JSON definitions.
"""

from .builders import FactoryBase
from .exceptions import ConfigError, ConfigFileNotFoundError, MissingVariableError
from .loader import load_config
from .substitution import VariableSubstitution, substitute_env_vars

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "FactoryBase",
    "MissingVariableError",
    "VariableSubstitution",
    "load_config",
    "substitute_env_vars",
]

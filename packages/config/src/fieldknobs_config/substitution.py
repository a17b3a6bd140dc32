"""Environment variable substitution for configuration values."""

import os
import re
from typing import Any, Dict, List, Union

from .exceptions import MissingVariableError


class VariableSubstitution:
    """Handles environment variable substitution in configuration values.

    Supports patterns:
    - ${VAR} - Replace with environment variable VAR, error if not found
    - ${VAR:default} - Replace with VAR or use default if not found
    - ${VAR:-default} - Same as above (bash-style)

    A value that consists of exactly one reference is converted to an int,
    float or bool when the resolved text looks like one, so numeric settings
    such as ``max: ${USERNAME_MAX:20}`` stay numeric.
    """

    VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::(-)?([^}]*))?\}')

    _TRUE = ('true', 'yes', 'on')
    _FALSE = ('false', 'no', 'off')

    def substitute(self, value: Any) -> Any:
        """Recursively substitute environment variables in a value.

        Args:
            value: Value to process (string, dict, list, or anything else)

        Returns:
            Value with environment variables substituted

        Raises:
            MissingVariableError: If a variable is unset and has no default
        """
        if isinstance(value, str):
            return self._substitute_string(value)
        elif isinstance(value, dict):
            return self._substitute_dict(value)
        elif isinstance(value, list):
            return [self.substitute(item) for item in value]
        return value

    def has_variables(self, value: Any) -> bool:
        """Check if a value contains ${...} references anywhere."""
        if isinstance(value, str):
            return bool(self.VAR_PATTERN.search(value))
        elif isinstance(value, dict):
            return any(self.has_variables(v) for v in value.values())
        elif isinstance(value, list):
            return any(self.has_variables(item) for item in value)
        return False

    def _resolve(self, match: re.Match) -> str:
        var_name = match.group(1)
        if var_name in os.environ:
            return os.environ[var_name]
        if match.group(2) is not None or match.group(3) is not None:
            return match.group(3) or ""
        raise MissingVariableError(
            f"Environment variable '{var_name}' not found",
            context={"variable": var_name},
        )

    def _substitute_string(self, text: str) -> Union[str, int, float, bool]:
        match = self.VAR_PATTERN.fullmatch(text)
        if match:
            return self._convert_type(self._resolve(match))
        return self.VAR_PATTERN.sub(self._resolve, text)

    def _substitute_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # Keys are not substituted, only values
        return {key: self.substitute(value) for key, value in data.items()}

    def _convert_type(self, value: str) -> Union[str, int, float, bool]:
        lowered = value.lower()
        if lowered in self._TRUE:
            return True
        if lowered in self._FALSE:
            return False

        for convert in (int, float):
            try:
                return convert(value)
            except ValueError:
                continue

        return value


def substitute_env_vars(data: Any) -> Any:
    """Substitute environment variables in a configuration structure."""
    return VariableSubstitution().substitute(data)


__all__: List[str] = ["VariableSubstitution", "substitute_env_vars"]

"""Load configuration dictionaries from YAML/JSON files."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError, ConfigFileNotFoundError
from .substitution import VariableSubstitution

logger = logging.getLogger(__name__)


def load_config(
    source: Union[str, Path, Dict[str, Any]],
    substitute: bool = True,
) -> Dict[str, Any]:
    """Load a configuration dictionary.

    Args:
        source: A dictionary, or a path to a ``.yaml``/``.yml``/``.json`` file
        substitute: Whether to resolve ``${VAR}`` references

    Returns:
        Configuration dictionary (a copy when ``source`` is a dict)

    Raises:
        ConfigFileNotFoundError: If the file does not exist
        ConfigError: If the format is unsupported or the top level is not a mapping
    """
    if isinstance(source, dict):
        data = copy.deepcopy(source)
    elif isinstance(source, (str, Path)):
        data = _load_file(Path(source))
    else:
        raise ConfigError(
            f"Invalid source type: {type(source).__name__}",
            context={"source": repr(source)},
        )

    if substitute:
        data = VariableSubstitution().substitute(data)
    return data


def _load_file(path: Path) -> Dict[str, Any]:
    path = path.resolve()
    if not path.exists():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported file format: {suffix}",
                context={"path": str(path)},
            )

    logger.debug(f"Loaded configuration from {path}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration root must be a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data

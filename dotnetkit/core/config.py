"""
Settings for DotNetKit.

Settings come from defaults, optionally overridden by a YAML file. The file is
taken from an explicit argument or from the DOTNETKIT_CONFIG environment
variable.

Example file::

    # dotnetkit.yaml
    dotnet_root: /opt/dotnet       # skip discovery and use this root
    root_env_var: DOTNET_ROOT
    path_env_var: PATH
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOTNETKIT_CONFIG"
DEFAULT_ROOT_ENV_VAR = "DOTNET_ROOT"
DEFAULT_PATH_ENV_VAR = "PATH"


@dataclass
class DotNetKitSettings:
    """
    Resolved DotNetKit settings.

    Attributes:
        root_env_var: Environment variable naming an explicit installation root
        path_env_var: Environment variable holding the executable search path
        dotnet_root: Explicit installation root; bypasses discovery when set
    """

    root_env_var: str = DEFAULT_ROOT_ENV_VAR
    path_env_var: str = DEFAULT_PATH_ENV_VAR
    dotnet_root: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DotNetKitSettings":
        """
        Build settings from a parsed configuration mapping.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown setting: {key}")
                continue
            if value is None:
                continue
            if key == "dotnet_root":
                value = Path(str(value)).expanduser()
            elif not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"Setting '{key}' must be a non-empty string, got {value!r}"
                )
            kwargs[key] = value

        return cls(**kwargs)


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required but missing, is not valid
            YAML, or does not contain a mapping
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration in {config_file} must be a mapping, "
            f"got {type(config).__name__}"
        )

    return config


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DotNetKitSettings:
    """
    Load settings from an explicit file or the DOTNETKIT_CONFIG variable.

    An explicitly passed file must exist; a file named by the environment
    variable is optional.

    Args:
        config_file: Explicit YAML settings file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        DotNetKitSettings with file values applied over defaults
    """
    if environ is None:
        environ = os.environ

    required = config_file is not None
    if config_file is None:
        env_value = environ.get(CONFIG_ENV_VAR)
        if not env_value:
            return DotNetKitSettings()
        config_file = Path(env_value)

    return DotNetKitSettings.from_dict(load_yaml_config(config_file, required=required))


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_ROOT_ENV_VAR",
    "DEFAULT_PATH_ENV_VAR",
    "DotNetKitSettings",
    "load_yaml_config",
    "load_settings",
]

"""
Install options for funcsetup.

Options can come from three places, later ones overriding earlier ones:

1. A YAML options file::

       version: "1.16"
       destination: bin
       binarySource: https://mirror.example.com/func_linux_amd64

2. Action inputs (INPUT_VERSION, INPUT_BINARYSOURCE, ...)
3. Command-line flags

Empty values are treated as unset at every level. All scalars in the options
file are read as strings.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .core.context import runner_inputs
from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Accepted spellings of each option, in file and input form
OPTION_ALIASES = {
    "binary": ("binary",),
    "version": ("version",),
    "destination": ("destination",),
    "name": ("name",),
    "binary_source": ("binary_source", "binarysource", "binary-source"),
}


@dataclass(frozen=True)
class InstallOptions:
    """
    Inputs of one install run.

    Attributes:
        binary: Release asset override; bypasses platform detection
        version: Version string or 'latest' (default: latest)
        destination: Target directory (default: current directory)
        name: Installed file base name (default: 'func')
        binary_source: Full download URL override
    """

    binary: Optional[str] = None
    version: Optional[str] = None
    destination: Optional[str] = None
    name: Optional[str] = None
    binary_source: Optional[str] = None

    def merged(self, other: "InstallOptions") -> "InstallOptions":
        """Return a copy with every non-empty option of other applied."""
        updates = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name)
        }
        return replace(self, **updates)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InstallOptions":
        """
        Build options from a mapping, accepting any alias spelling.

        Raises:
            ConfigError: If an option value is not a scalar
        """
        normalized = {str(k).lower(): v for k, v in data.items()}
        values = {}
        for field_name, aliases in OPTION_ALIASES.items():
            for alias in aliases:
                value = normalized.get(alias)
                if value is None:
                    continue
                if isinstance(value, (dict, list)):
                    raise ConfigError(f"Option '{alias}' must be a string")
                text = str(value).strip()
                if text:
                    values[field_name] = text
                    break
        return cls(**values)


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML options file.

    Args:
        config_file: Path to YAML file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigError: If the file is required and missing, or is not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            # Scalars stay text so versions like 1.10 are not read as floats
            config = yaml.load(f, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}", cause=e) from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigError(f"Expected a mapping in {config_file}")
    return config


def load_options(
    env: Mapping[str, str],
    config_file: Optional[Path] = None,
    overrides: Optional[InstallOptions] = None,
) -> InstallOptions:
    """
    Resolve install options from file, action inputs and overrides.

    Args:
        env: Environment holding INPUT_* variables
        config_file: Optional YAML options file (must exist when given)
        overrides: Options from the command line

    Returns:
        Merged InstallOptions
    """
    options = InstallOptions()
    if config_file is not None:
        options = options.merged(
            InstallOptions.from_mapping(load_yaml_config(config_file, required=True))
        )
    options = options.merged(InstallOptions.from_mapping(runner_inputs(env)))
    if overrides is not None:
        options = options.merged(overrides)
    logger.debug(f"Install options: {options}")
    return options


__all__ = [
    "InstallOptions",
    "load_yaml_config",
    "load_options",
]

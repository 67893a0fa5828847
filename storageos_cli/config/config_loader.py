# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Configuration file loading utilities.

Provides a three-level resolution chain for locating the config file:
  1. Explicit path (--config)
  2. Environment variable (STORAGEOS_CONFIG)
  3. Default path (~/.config/storageos/config.yaml)
"""

import os
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from storageos_cli.config.environment import CONFIG_FILE_PATH_VAR
from storageos_cli.config.provider import DEFAULT_CONFIG_FILE_PATH
from storageos_cli.exceptions import ConfigFileError


class ConfigFile(BaseModel):
    """Schema of the YAML config file. Every key is optional."""

    no_auth_cache: Optional[bool] = Field(
        default=None, alias="noAuthCache", description="Disable the auth session cache"
    )
    endpoints: Optional[List[str]] = Field(default=None, description="StorageOS API endpoints")
    cache_dir: Optional[str] = Field(default=None, alias="cacheDir", description="Cache directory")
    timeout: Optional[str] = Field(
        default=None, description="Command timeout as a duration string, e.g. 15s"
    )
    username: Optional[str] = Field(default=None, description="Username to authenticate with")
    password: Optional[str] = Field(default=None, description="Password to authenticate with")
    password_command: Optional[str] = Field(
        default=None,
        alias="passwordCommand",
        description="Command whose trimmed output is used as the password",
    )
    use_ids: Optional[bool] = Field(
        default=None, alias="useIds", description="Treat arguments as unique identifiers"
    )
    namespace: Optional[str] = Field(default=None, description="Namespace to operate in")
    output: Optional[str] = Field(default=None, description="Output format")

    model_config = {"extra": "forbid", "populate_by_name": True}


def resolve_config_path(
    explicit_path: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
    env_var: str = CONFIG_FILE_PATH_VAR,
    default_path: str = DEFAULT_CONFIG_FILE_PATH,
) -> Tuple[Path, bool]:
    """Resolve the config file path using the three-level chain.

    Resolution order:
      1. ``explicit_path`` (if provided)
      2. Path from environment variable ``env_var``
      3. ``default_path``

    Returns:
        The path, and whether it was explicitly chosen (levels 1 and 2).
        Existence is not checked here.
    """
    # Level 1: explicit path
    if explicit_path:
        return Path(explicit_path).expanduser(), True

    # Level 2: environment variable
    environ = environ if environ is not None else os.environ
    env_val = environ.get(env_var)
    if env_val:
        return Path(env_val).expanduser(), True

    # Level 3: default location
    return Path(default_path).expanduser(), False


def load_yaml_config(path: Path) -> ConfigFile:
    """Load and validate a YAML config file.

    Args:
        path: Path to the YAML config file.

    Returns:
        The validated config file contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigFileError: If the file is not valid YAML, is not a mapping, or
            holds unknown or mistyped keys.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigFileError(str(path), f"invalid YAML: {e}") from e

    if data is None:
        return ConfigFile()
    if not isinstance(data, dict):
        raise ConfigFileError(str(path), "expected a mapping of settings")

    try:
        return ConfigFile.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigFileError(str(path), problems) from e

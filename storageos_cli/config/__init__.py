# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Layered configuration: flags > environment > config file > defaults."""

import os
from typing import Mapping, Optional

from storageos_cli.config.config_loader import ConfigFile, load_yaml_config, resolve_config_path
from storageos_cli.config.environment import EnvironmentProvider
from storageos_cli.config.file import FileProvider
from storageos_cli.config.flags import CONFIG_FILE_FLAG, FlagProvider, FlagSet
from storageos_cli.config.provider import (
    DEFAULT_NAMESPACE_NAME,
    ConfigProvider,
    DefaultProvider,
)


def build_provider(
    flags: FlagSet,
    environ: Optional[Mapping[str, str]] = None,
) -> ConfigProvider:
    """Wire the full resolution chain for one CLI invocation.

    The config file's own location is resolved from the flag and
    environment alone, so the file layer never has to consult itself.
    """
    environ = environ if environ is not None else os.environ
    explicit = flags.get(CONFIG_FILE_FLAG, "") if flags.is_changed(CONFIG_FILE_FLAG) else None
    path, required = resolve_config_path(explicit, environ)

    provider: ConfigProvider = DefaultProvider()
    provider = FileProvider(provider, path, required=required)
    provider = EnvironmentProvider(provider, environ)
    return FlagProvider(flags, provider)


__all__ = [
    "ConfigFile",
    "ConfigProvider",
    "DEFAULT_NAMESPACE_NAME",
    "DefaultProvider",
    "EnvironmentProvider",
    "FileProvider",
    "FlagProvider",
    "FlagSet",
    "build_provider",
    "load_yaml_config",
    "resolve_config_path",
]

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Configuration sourced from the YAML config file."""

from datetime import timedelta
from pathlib import Path
from typing import List, Optional

from storageos_cli.config.config_loader import ConfigFile, load_yaml_config
from storageos_cli.config.environment import run_password_command
from storageos_cli.config.provider import ConfigProvider
from storageos_cli.exceptions import ConfigFileError
from storageos_cli.output.format import Format
from storageos_cli.utils.logger import get_logger
from storageos_cli.utils.parsing import parse_duration

logger = get_logger(__name__)


class FileProvider(ConfigProvider):
    """Reads settings from a YAML document, parsed on first use.

    A file that does not exist is an empty layer unless ``required`` is set,
    which is the case when the user chose the path explicitly.
    """

    def __init__(self, fallback: ConfigProvider, path: Path, required: bool = False):
        self.fallback = fallback
        self.path = path
        self.required = required
        self._config: Optional[ConfigFile] = None

    def _load(self) -> ConfigFile:
        if self._config is None:
            try:
                self._config = load_yaml_config(self.path)
                logger.debug("loaded config file %s", self.path)
            except FileNotFoundError as e:
                if self.required:
                    raise ConfigFileError(str(self.path), "no such file") from e
                logger.debug("no config file at %s", self.path)
                self._config = ConfigFile()
        return self._config

    def auth_cache_disabled(self) -> bool:
        value = self._load().no_auth_cache
        if value is None:
            return self.fallback.auth_cache_disabled()
        return value

    def api_endpoints(self) -> List[str]:
        value = self._load().endpoints
        if not value:
            return self.fallback.api_endpoints()
        return list(value)

    def cache_dir(self) -> str:
        value = self._load().cache_dir
        if not value:
            return self.fallback.cache_dir()
        return value

    def command_timeout(self) -> timedelta:
        value = self._load().timeout
        if not value:
            return self.fallback.command_timeout()
        return parse_duration(value)

    def username(self) -> str:
        value = self._load().username
        if not value:
            return self.fallback.username()
        return value

    def password(self) -> str:
        config = self._load()
        if config.password_command:
            return run_password_command(config.password_command)
        if not config.password:
            return self.fallback.password()
        return config.password

    def use_ids(self) -> bool:
        value = self._load().use_ids
        if value is None:
            return self.fallback.use_ids()
        return value

    def namespace(self) -> str:
        value = self._load().namespace
        if value is None:
            return self.fallback.namespace()
        return value

    def output_format(self) -> Format:
        value = self._load().output
        if value is None:
            return self.fallback.output_format()
        return Format.parse(value)

    def config_file_path(self) -> str:
        return str(self.path)

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Configuration provider contract and the static defaults at the bottom of
every resolution chain.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from pathlib import Path
from typing import List

from storageos_cli.output.format import Format

DEFAULT_API_ENDPOINT = "http://localhost:5705"
DEFAULT_CACHE_DIR = str(Path.home() / ".cache" / "storageos")
DEFAULT_COMMAND_TIMEOUT = timedelta(seconds=15)
DEFAULT_USERNAME = "storageos"
DEFAULT_PASSWORD = "storageos"
DEFAULT_USE_IDS = False
DEFAULT_NAMESPACE_NAME = "default"
DEFAULT_OUTPUT_FORMAT = Format.TEXT
DEFAULT_AUTH_CACHE_DISABLED = False
DEFAULT_CONFIG_FILE_PATH = str(Path.home() / ".config" / "storageos" / "config.yaml")


class ConfigProvider(ABC):
    """Accessors for every global configuration setting.

    Each accessor may raise a ``ConfigError`` when the value it found is
    malformed. Layered providers consult their fallback only when they hold
    no value of their own.
    """

    @abstractmethod
    def auth_cache_disabled(self) -> bool: ...

    @abstractmethod
    def api_endpoints(self) -> List[str]: ...

    @abstractmethod
    def cache_dir(self) -> str: ...

    @abstractmethod
    def command_timeout(self) -> timedelta: ...

    @abstractmethod
    def username(self) -> str: ...

    @abstractmethod
    def password(self) -> str: ...

    @abstractmethod
    def use_ids(self) -> bool: ...

    @abstractmethod
    def namespace(self) -> str: ...

    @abstractmethod
    def output_format(self) -> Format: ...

    @abstractmethod
    def config_file_path(self) -> str: ...


class DefaultProvider(ConfigProvider):
    """The bottom of the chain. Never fails."""

    def auth_cache_disabled(self) -> bool:
        return DEFAULT_AUTH_CACHE_DISABLED

    def api_endpoints(self) -> List[str]:
        return [DEFAULT_API_ENDPOINT]

    def cache_dir(self) -> str:
        return DEFAULT_CACHE_DIR

    def command_timeout(self) -> timedelta:
        return DEFAULT_COMMAND_TIMEOUT

    def username(self) -> str:
        return DEFAULT_USERNAME

    def password(self) -> str:
        return DEFAULT_PASSWORD

    def use_ids(self) -> bool:
        return DEFAULT_USE_IDS

    def namespace(self) -> str:
        return DEFAULT_NAMESPACE_NAME

    def output_format(self) -> Format:
        return DEFAULT_OUTPUT_FORMAT

    def config_file_path(self) -> str:
        return DEFAULT_CONFIG_FILE_PATH

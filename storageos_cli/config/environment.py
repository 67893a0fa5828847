# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Configuration sourced from ``STORAGEOS_*`` environment variables.

An unset or empty variable defers to the fallback provider. A variable that
is set but malformed is an error and never defers.
"""

import os
import shlex
import subprocess
from datetime import timedelta
from typing import List, Mapping, Optional

from storageos_cli.config.provider import ConfigProvider
from storageos_cli.exceptions import PasswordCommandError
from storageos_cli.output.format import Format
from storageos_cli.utils.logger import get_logger
from storageos_cli.utils.parsing import parse_bool, parse_duration

logger = get_logger(__name__)

AUTH_CACHE_DISABLED_VAR = "STORAGEOS_NO_AUTH_CACHE"
API_ENDPOINTS_VAR = "STORAGEOS_ENDPOINTS"
CACHE_DIR_VAR = "STORAGEOS_CACHE_DIR"
COMMAND_TIMEOUT_VAR = "STORAGEOS_API_TIMEOUT"
USERNAME_VAR = "STORAGEOS_USERNAME"
PASSWORD_VAR = "STORAGEOS_PASSWORD"
PASSWORD_COMMAND_VAR = "STORAGEOS_PASSWORD_COMMAND"
USE_IDS_VAR = "STORAGEOS_USE_IDS"
NAMESPACE_VAR = "STORAGEOS_NAMESPACE"
OUTPUT_FORMAT_VAR = "STORAGEOS_OUTPUT_FORMAT"
CONFIG_FILE_PATH_VAR = "STORAGEOS_CONFIG"

ENV_CONFIG_HELP = [
    (AUTH_CACHE_DISABLED_VAR, "Disables the caching of authenticated sessions by the CLI"),
    (API_ENDPOINTS_VAR, "Comma separated StorageOS API endpoints for the CLI to connect to"),
    (CACHE_DIR_VAR, "Directory for the CLI to cache re-usable data to"),
    (COMMAND_TIMEOUT_VAR, "Duration a command is given to complete before aborting"),
    (USERNAME_VAR, "Username used for authentication"),
    (PASSWORD_VAR, "Password used for authentication"),
    (PASSWORD_COMMAND_VAR, "Command whose output is used as the password"),
    (USE_IDS_VAR, "Treat resource arguments as unique identifiers instead of names"),
    (NAMESPACE_VAR, "Namespace to operate in"),
    (OUTPUT_FORMAT_VAR, "Output format: text, json or yaml"),
    (CONFIG_FILE_PATH_VAR, "Path of the config file"),
]


def run_password_command(command: str) -> str:
    """Execute ``command`` and return its trimmed standard output."""
    argv = shlex.split(command)
    if not argv:
        raise PasswordCommandError(reason="empty command")

    logger.debug("running password command %s", argv[0])
    try:
        result = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise PasswordCommandError(reason=str(e)) from e

    if result.returncode != 0:
        raise PasswordCommandError(exit_code=result.returncode)

    try:
        return result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise PasswordCommandError(reason="output is not valid UTF-8") from e


class EnvironmentProvider(ConfigProvider):
    """Reads settings from the process environment."""

    def __init__(self, fallback: ConfigProvider, environ: Optional[Mapping[str, str]] = None):
        self.fallback = fallback
        self._environ = environ if environ is not None else os.environ

    def _get(self, name: str) -> str:
        return self._environ.get(name, "")

    def auth_cache_disabled(self) -> bool:
        value = self._get(AUTH_CACHE_DISABLED_VAR)
        if not value:
            return self.fallback.auth_cache_disabled()
        return parse_bool(value)

    def api_endpoints(self) -> List[str]:
        value = self._get(API_ENDPOINTS_VAR)
        if not value:
            return self.fallback.api_endpoints()
        return value.split(",")

    def cache_dir(self) -> str:
        value = self._get(CACHE_DIR_VAR)
        if not value:
            return self.fallback.cache_dir()
        return value

    def command_timeout(self) -> timedelta:
        value = self._get(COMMAND_TIMEOUT_VAR)
        if not value:
            return self.fallback.command_timeout()
        return parse_duration(value)

    def username(self) -> str:
        value = self._get(USERNAME_VAR)
        if not value:
            return self.fallback.username()
        return value

    def password(self) -> str:
        command = self._get(PASSWORD_COMMAND_VAR)
        if command:
            return run_password_command(command)

        value = self._get(PASSWORD_VAR)
        if not value:
            return self.fallback.password()
        return value

    def use_ids(self) -> bool:
        value = self._get(USE_IDS_VAR)
        if not value:
            return self.fallback.use_ids()
        return parse_bool(value)

    def namespace(self) -> str:
        value = self._get(NAMESPACE_VAR)
        if not value:
            return self.fallback.namespace()
        return value

    def output_format(self) -> Format:
        value = self._get(OUTPUT_FORMAT_VAR)
        if not value:
            return self.fallback.output_format()
        return Format.parse(value)

    def config_file_path(self) -> str:
        value = self._get(CONFIG_FILE_PATH_VAR)
        if not value:
            return self.fallback.config_file_path()
        return value

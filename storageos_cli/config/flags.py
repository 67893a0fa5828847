# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Configuration sourced from the root command's global options."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Set

import typer

from storageos_cli.config.provider import ConfigProvider
from storageos_cli.output.format import Format
from storageos_cli.utils.parsing import parse_duration

AUTH_CACHE_DISABLED_FLAG = "no_auth_cache"
API_ENDPOINTS_FLAG = "endpoints"
CACHE_DIR_FLAG = "cache_dir"
COMMAND_TIMEOUT_FLAG = "timeout"
USERNAME_FLAG = "username"
PASSWORD_FLAG = "password"
USE_IDS_FLAG = "use_ids"
NAMESPACE_FLAG = "namespace"
OUTPUT_FORMAT_FLAG = "output"
CONFIG_FILE_FLAG = "config"


@dataclass
class FlagSet:
    """Parsed option values plus the names the user actually gave."""

    values: Dict[str, Any] = field(default_factory=dict)
    changed: Set[str] = field(default_factory=set)

    @classmethod
    def from_context(cls, ctx: typer.Context) -> "FlagSet":
        changed = set()
        for name in ctx.params:
            # by name, typer may vendor its own click
            source = ctx.get_parameter_source(name)
            if source is not None and source.name == "COMMANDLINE":
                changed.add(name)
        return cls(values=dict(ctx.params), changed=changed)

    def is_changed(self, name: str) -> bool:
        return name in self.changed

    def get(self, name: str, default: Any = None) -> Any:
        value = self.values.get(name)
        return default if value is None else value


class FlagProvider(ConfigProvider):
    """Highest priority layer.

    A flag only counts when it was given on the command line. Endpoints,
    cache dir, timeout and credentials also defer when given empty.
    """

    def __init__(self, flags: FlagSet, fallback: ConfigProvider):
        self.flags = flags
        self.fallback = fallback

    def auth_cache_disabled(self) -> bool:
        if not self.flags.is_changed(AUTH_CACHE_DISABLED_FLAG):
            return self.fallback.auth_cache_disabled()
        return bool(self.flags.get(AUTH_CACHE_DISABLED_FLAG, False))

    def api_endpoints(self) -> List[str]:
        hosts = list(self.flags.get(API_ENDPOINTS_FLAG, []))
        if not hosts or not self.flags.is_changed(API_ENDPOINTS_FLAG):
            return self.fallback.api_endpoints()
        return hosts

    def cache_dir(self) -> str:
        value = self.flags.get(CACHE_DIR_FLAG, "")
        if not value or not self.flags.is_changed(CACHE_DIR_FLAG):
            return self.fallback.cache_dir()
        return value

    def command_timeout(self) -> timedelta:
        if not self.flags.is_changed(COMMAND_TIMEOUT_FLAG):
            return self.fallback.command_timeout()
        raw = self.flags.get(COMMAND_TIMEOUT_FLAG, "")
        timeout = parse_duration(raw) if raw else timedelta(0)
        if not timeout:
            return self.fallback.command_timeout()
        return timeout

    def username(self) -> str:
        value = self.flags.get(USERNAME_FLAG, "")
        if not value or not self.flags.is_changed(USERNAME_FLAG):
            return self.fallback.username()
        return value

    def password(self) -> str:
        value = self.flags.get(PASSWORD_FLAG, "")
        if not value or not self.flags.is_changed(PASSWORD_FLAG):
            return self.fallback.password()
        return value

    def use_ids(self) -> bool:
        if not self.flags.is_changed(USE_IDS_FLAG):
            return self.fallback.use_ids()
        return bool(self.flags.get(USE_IDS_FLAG, False))

    def namespace(self) -> str:
        if not self.flags.is_changed(NAMESPACE_FLAG):
            return self.fallback.namespace()
        return self.flags.get(NAMESPACE_FLAG, "")

    def output_format(self) -> Format:
        if not self.flags.is_changed(OUTPUT_FORMAT_FLAG):
            return self.fallback.output_format()
        return Format.parse(self.flags.get(OUTPUT_FORMAT_FLAG, ""))

    def config_file_path(self) -> str:
        if not self.flags.is_changed(CONFIG_FILE_FLAG):
            return self.fallback.config_file_path()
        return self.flags.get(CONFIG_FILE_FLAG, "")

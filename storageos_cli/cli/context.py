# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Runtime context and client factory for CLI commands."""

import os
from dataclasses import dataclass, field
from typing import Optional, TextIO

import typer

from storageos_cli import __version__
from storageos_cli.apiclient import (
    AuthCachedTransport,
    Client,
    Deadline,
    OpenAPITransport,
    SessionCache,
    Transport,
)
from storageos_cli.config import ConfigProvider, FlagSet, build_provider
from storageos_cli.exceptions import ConfigError
from storageos_cli.output import Displayer, Format, select_displayer
from storageos_cli.utils.logger import get_logger

logger = get_logger(__name__)

USER_AGENT_PREFIX = "storageos-cli"


def user_agent() -> str:
    return f"{USER_AGENT_PREFIX}/{__version__}"


def create_transport(config: ConfigProvider, deadline: Optional[Deadline] = None) -> Transport:
    """Build the transport for the configured endpoint.

    Sessions are cached in the cache directory unless the auth cache is
    disabled.
    """
    endpoint = config.api_endpoints()[0]
    transport: Transport = OpenAPITransport(endpoint, user_agent(), deadline=deadline)
    if config.auth_cache_disabled():
        return transport

    cache_dir = config.cache_dir()
    os.makedirs(cache_dir, mode=0o700, exist_ok=True)
    return AuthCachedTransport(transport, SessionCache(cache_dir), endpoint)


@dataclass
class CLIContext:
    """Shared state for one CLI invocation."""

    flags: FlagSet = field(default_factory=FlagSet)
    out: Optional[TextIO] = None
    _config: Optional[ConfigProvider] = field(default=None, init=False, repr=False)
    _client: Optional[Client] = field(default=None, init=False, repr=False)

    @property
    def config(self) -> ConfigProvider:
        if self._config is None:
            self._config = build_provider(self.flags)
        return self._config

    @property
    def output_format(self) -> Format:
        """The configured format, or text when it cannot be resolved."""
        try:
            return self.config.output_format()
        except ConfigError:
            return Format.TEXT

    def displayer(self) -> Displayer:
        return select_displayer(self.config.output_format(), self.out)

    def get_client(self, deadline: Optional[Deadline] = None) -> Client:
        """Create an API client for the configured endpoint."""
        if self._client is not None:
            return self._client

        self._client = Client(create_transport(self.config, deadline))
        return self._client

    def close_client(self) -> None:
        """Close the client if it has been created."""
        if self._client is None:
            return
        self._client.close()
        self._client = None


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Return a typed CLI context from Typer context."""
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context is not initialized")
    return ctx.obj

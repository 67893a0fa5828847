# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Exception handling and shared run wrapper for CLI commands."""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type, TypeVar

import typer

from storageos_cli.apiclient import Client, Deadline, compose
from storageos_cli.cli.context import CLIContext, get_cli_context
from storageos_cli.config import DEFAULT_NAMESPACE_NAME, ConfigProvider
from storageos_cli.exceptions import (
    APIConnectionError,
    ArgumentError,
    ConfigError,
    DeadlineExceededError,
    InvalidArgNumError,
    NamespaceIDRequiredError,
    NoNamespaceSpecifiedError,
    StorageOSError,
    TargetOrSelectorError,
)
from storageos_cli.output import Displayer, Format
from storageos_cli.output.base import to_serializable
from storageos_cli.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID_USAGE = 2
EXIT_CONNECTION = 3

P = TypeVar("P")


def output_error(
    ctx: CLIContext,
    *,
    message: str,
    code: str,
    exit_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Print error in JSON or plain format then exit."""
    details = details or {}
    if ctx.output_format == Format.JSON:
        payload = {
            "ok": False,
            "error": {
                "code": code,
                "message": message,
                "details": to_serializable(details),
            },
        }
        typer.echo(json.dumps(payload, ensure_ascii=False), err=True)
    else:
        typer.echo(f"ERROR[{code}]: {message}", err=True)
    raise typer.Exit(exit_code)


def handle_command_error(ctx: CLIContext, exc: Exception) -> None:
    """Normalize command exceptions into user-facing output and exit codes."""
    if isinstance(exc, (typer.Exit, typer.Abort, typer.BadParameter)):
        raise exc

    if isinstance(exc, (ArgumentError, ConfigError)):
        exit_code = EXIT_INVALID_USAGE
    elif isinstance(exc, (APIConnectionError, DeadlineExceededError)):
        exit_code = EXIT_CONNECTION
    else:
        exit_code = EXIT_FAILURE

    if isinstance(exc, StorageOSError):
        output_error(
            ctx,
            message=exc.message,
            code=exc.code,
            details=exc.details,
            exit_code=exit_code,
        )

    logger.debug("unexpected error", exc_info=exc)
    output_error(
        ctx,
        message=str(exc),
        code="CLI_ERROR",
        exit_code=EXIT_FAILURE,
        details={"exception": type(exc).__name__},
    )


@dataclass
class Invocation:
    """What a command body gets to work with once the guards have passed."""

    client: Client
    config: ConfigProvider
    display: Displayer
    namespace: str = ""

    @property
    def use_ids(self) -> bool:
        return self.config.use_ids()

    def params(
        self,
        params_cls: Type[P],
        cas_version: Optional[str] = None,
        use_async: bool = False,
        **extra: Any,
    ) -> P:
        """Request parameters, using the command timeout as the async deadline."""
        timeout = self.config.command_timeout() if use_async else None
        return compose(params_cls, cas_version, use_async, timeout, **extra)


def _check_guards(
    config: ConfigProvider,
    arity: Optional[Tuple[Sequence[str], int, str]],
    namespaced: bool,
    targets: Sequence[str],
    selectors: Sequence[str],
) -> str:
    if arity is not None:
        args, expected, usage = arity
        if len(args) != expected:
            raise InvalidArgNumError(list(args), expected, usage)

    namespace = ""
    if namespaced:
        namespace = config.namespace()
        if not namespace:
            raise NoNamespaceSpecifiedError()

    if selectors and targets:
        raise TargetOrSelectorError()

    if namespaced and config.use_ids() and namespace == DEFAULT_NAMESPACE_NAME:
        raise NamespaceIDRequiredError()

    return namespace


def run(
    ctx: typer.Context,
    fn: Callable[[Invocation], Any],
    *,
    arity: Optional[Tuple[Sequence[str], int, str]] = None,
    namespaced: bool = False,
    targets: Sequence[str] = (),
    selectors: Sequence[str] = (),
) -> None:
    """Execute an API command: guards, deadline, authentication, then ``fn``.

    Args:
        ctx: Typer context.
        fn: Command body.
        arity: ``(args, expected, usage)`` when an exact argument count is required.
        namespaced: Whether the command operates within a namespace.
        targets: Resource names or IDs given as arguments.
        selectors: Label selectors given with ``--selector``.
    """
    cli_ctx = get_cli_context(ctx)
    try:
        config = cli_ctx.config
        display = cli_ctx.displayer()
        namespace = _check_guards(config, arity, namespaced, targets, selectors)

        deadline = Deadline(config.command_timeout())
        client = cli_ctx.get_client(deadline)
        client.authenticate(config.username(), config.password())

        fn(Invocation(client=client, config=config, display=display, namespace=namespace))
    except Exception as exc:  # noqa: BLE001
        handle_command_error(cli_ctx, exc)
    finally:
        cli_ctx.close_client()

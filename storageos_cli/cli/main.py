# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoint for the StorageOS CLI."""

from typing import List, Optional

import typer

from storageos_cli.cli.commands import register_commands
from storageos_cli.cli.context import CLIContext
from storageos_cli.config import FlagSet
from storageos_cli.config.environment import ENV_CONFIG_HELP
from storageos_cli.utils.logger import set_verbose


def _environment_epilog() -> str:
    lines = ["Environment variables:"]
    lines.extend(f"{name}: {description}" for name, description in ENV_CONFIG_HELP)
    return "\n\n".join(lines)


app = typer.Typer(
    help="Storage for Cloud Native Applications. Manage a StorageOS cluster.",
    epilog=_environment_epilog(),
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from storageos_cli import __version__

        typer.echo(f"StorageOS CLI version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    endpoints: Optional[List[str]] = typer.Option(
        None, "--endpoints", help="set the list of endpoints which are used when connecting to the StorageOS API"
    ),
    cache_dir: str = typer.Option(
        "", "--cache-dir", help="set the directory used by the StorageOS CLI to cache data that can be used for future commands"
    ),
    timeout: str = typer.Option(
        "", "--timeout", help="set the timeout duration to use for execution of the command, e.g. 15s"
    ),
    username: str = typer.Option(
        "", "--username", help="set the StorageOS account username to authenticate as"
    ),
    password: str = typer.Option(
        "", "--password", help="set the StorageOS account password to authenticate with"
    ),
    use_ids: bool = typer.Option(
        False,
        "--use-ids",
        help="specify existing StorageOS resources by their unique identifiers instead of by their names",
    ),
    namespace: str = typer.Option(
        "", "--namespace", "-n", help="specifies the namespace to operate within for commands that require one"
    ),
    output: str = typer.Option(
        "", "--output", "-o", help="specifies the output format (one of [json yaml text])"
    ),
    config: str = typer.Option(
        "", "--config", "-c", help="specifies the config file path"
    ),
    no_auth_cache: bool = typer.Option(
        False, "--no-auth-cache", help="disable the CLI's caching of authentication sessions"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log debug output to stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Configure shared CLI options."""
    # Only options given on the command line take part in configuration;
    # everything else resolves through environment > config file > defaults.
    set_verbose(verbose)
    ctx.obj = CLIContext(flags=FlagSet.from_context(ctx))


register_commands(app)


if __name__ == "__main__":
    app()

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Version command."""

import typer


def register(app: typer.Typer) -> None:
    """Register version command."""

    @app.command("version")
    def version_command() -> None:
        """View version information for the StorageOS CLI."""
        from storageos_cli import __version__

        typer.echo(f"StorageOS CLI version: {__version__}")

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command registration for the StorageOS CLI."""

import typer

from storageos_cli.cli.commands import (
    apply,
    attach,
    create,
    delete,
    describe,
    detach,
    get,
    nfs,
    update,
    version,
)


def register_commands(app: typer.Typer) -> None:
    """Register all supported commands into the root CLI app."""
    create.register(app)
    get.register(app)
    describe.register(app)
    update.register(app)
    delete.register(app)
    attach.register(app)
    detach.register(app)
    apply.register(app)
    nfs.register(app)
    version.register(app)

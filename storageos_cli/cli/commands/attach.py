# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Attach command."""

from typing import List, Optional

import typer

from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.output.models import VolumeAttachment


def register(app: typer.Typer) -> None:
    """Register attach command."""

    @app.command("attach")
    def attach_command(
        ctx: typer.Context,
        args: Optional[List[str]] = typer.Argument(None, help="volume and node to attach it to"),
    ) -> None:
        """Attach a volume to a node."""
        args = args or []

        def _attach(inv: Invocation) -> None:
            ns_id = resolve.namespace_id(inv)
            vol_id = resolve.volume_id(inv, ns_id, args[0])
            node_id = resolve.node_id(inv, args[1])
            inv.client.attach_volume(ns_id, vol_id, node_id)
            inv.display.confirm(VolumeAttachment(volume=args[0], node=args[1]))

        run(
            ctx,
            _attach,
            arity=(args, 2, "storageos attach [volume] [node]"),
            namespaced=True,
        )

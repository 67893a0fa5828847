# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Detach command."""

from typing import List, Optional

import typer

from storageos_cli.apiclient.params import DetachVolumeParams
from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import async_option, cas_option
from storageos_cli.output.models import VolumeDetachment


def register(app: typer.Typer) -> None:
    """Register detach command."""

    @app.command("detach")
    def detach_command(
        ctx: typer.Context,
        args: Optional[List[str]] = typer.Argument(None, help="volume to detach"),
        cas: Optional[str] = cas_option(),
        use_async: bool = async_option(),
    ) -> None:
        """Detach a volume from its current location."""
        args = args or []

        def _detach(inv: Invocation) -> None:
            ns_id = resolve.namespace_id(inv)
            vol_id = resolve.volume_id(inv, ns_id, args[0])
            inv.client.detach_volume(
                ns_id, vol_id, inv.params(DetachVolumeParams, cas, use_async)
            )
            if use_async:
                inv.display.async_request()
                return
            inv.display.confirm(VolumeDetachment(volume=args[0]))

        run(
            ctx,
            _detach,
            arity=(args, 1, "storageos detach [volume]"),
            namespaced=True,
        )

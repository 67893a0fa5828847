# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""NFS commands: attaching volumes for NFS and configuring their exports."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from storageos_cli.apiclient.params import (
    AttachNFSVolumeParams,
    UpdateNFSVolumeExportsParams,
    UpdateNFSVolumeMountEndpointParams,
)
from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import async_option, cas_option
from storageos_cli.exceptions import ArgumentError
from storageos_cli.models import NFSExportConfig
from storageos_cli.output.models import NFSUpdate

nfs_app = typer.Typer(help="Make changes and attach NFS volumes", no_args_is_help=True)


def load_exports(path: str) -> List[NFSExportConfig]:
    """Read a JSON list of export configurations."""
    try:
        data = json.loads(Path(path).read_text())
    except OSError as e:
        raise ArgumentError(f"unable to read exports file {path}: {e.strerror}", {"path": path}) from e
    except ValueError as e:
        raise ArgumentError(f"invalid JSON in exports file {path}: {e}", {"path": path}) from e

    if not isinstance(data, list):
        raise ArgumentError(f"exports file {path} must hold a JSON list", {"path": path})
    try:
        return [NFSExportConfig.model_validate(item) for item in data]
    except ValidationError as e:
        raise ArgumentError(f"invalid export in {path}: {e}", {"path": path}) from e


@nfs_app.command("attach")
def nfs_attach_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume to attach for NFS"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Attach a volume so that it is served over NFS."""
    args = args or []

    def _attach(inv: Invocation) -> None:
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        inv.client.attach_nfs_volume(
            ns_id, vol_id, inv.params(AttachNFSVolumeParams, cas, use_async)
        )
        if use_async:
            inv.display.async_request()
            return
        inv.display.confirm(NFSUpdate(volume=args[0], action="attach"))

    run(ctx, _attach, arity=(args, 1, "storageos nfs attach [volume]"), namespaced=True)


@nfs_app.command("endpoint")
def nfs_endpoint_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume and its NFS mount endpoint"),
    cas: Optional[str] = cas_option(),
) -> None:
    """Set the address an NFS volume is mounted from, e.g. 10.0.0.1:/."""
    args = args or []

    def _endpoint(inv: Invocation) -> None:
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        inv.client.update_nfs_volume_mount_endpoint(
            ns_id, vol_id, args[1], inv.params(UpdateNFSVolumeMountEndpointParams, cas)
        )
        inv.display.confirm(NFSUpdate(volume=args[0], action="endpoint", endpoint=args[1]))

    run(
        ctx,
        _endpoint,
        arity=(args, 2, "storageos nfs endpoint [volume] [endpoint]"),
        namespaced=True,
    )


@nfs_app.command("exports")
def nfs_exports_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None, help="volume and a JSON file holding its list of exports"
    ),
    cas: Optional[str] = cas_option(),
) -> None:
    """Replace the NFS export configuration of a volume."""
    args = args or []

    def _exports(inv: Invocation) -> None:
        exports = load_exports(args[1])
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        inv.client.update_nfs_volume_exports(
            ns_id, vol_id, exports, inv.params(UpdateNFSVolumeExportsParams, cas)
        )
        inv.display.confirm(NFSUpdate(volume=args[0], action="exports", exports=len(exports)))

    run(
        ctx,
        _exports,
        arity=(args, 2, "storageos nfs exports [volume] [exports file]"),
        namespaced=True,
    )


def register(app: typer.Typer) -> None:
    """Register nfs command group."""
    app.add_typer(nfs_app, name="nfs")

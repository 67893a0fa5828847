# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Update commands: changes to existing volumes and cluster settings."""

from typing import Any, Dict, List, Optional

import typer

from storageos_cli.apiclient.params import (
    ResizeVolumeParams,
    SetReplicasParams,
    UpdateClusterParams,
    UpdateVolumeParams,
)
from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import async_option, cas_option
from storageos_cli.exceptions import ArgumentError
from storageos_cli.models import Volume
from storageos_cli.output.models import ClusterView, ReplicasUpdate, VolumeUpdate
from storageos_cli.utils.labels import parse_label_pairs
from storageos_cli.utils.size import parse_bytes

update_app = typer.Typer(help="Make changes to existing resources", no_args_is_help=True)
volume_app = typer.Typer(help="Make changes to an existing volume", no_args_is_help=True)


def _show_update(inv: Invocation, vol: Optional[Volume], use_async: bool) -> None:
    if use_async or vol is None:
        inv.display.async_request()
        return
    inv.display.show(VolumeUpdate.from_volume(vol))


@volume_app.command("description")
def update_volume_description_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume name and the new description"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Set a volume's description."""
    args = args or []

    def _update(inv: Invocation) -> None:
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        vol = inv.client.update_volume_description(
            ns_id, vol_id, args[1], inv.params(UpdateVolumeParams, cas, use_async)
        )
        _show_update(inv, vol, use_async)

    run(
        ctx,
        _update,
        arity=(args, 2, "storageos update volume description [volume] [description]"),
        namespaced=True,
    )


@volume_app.command("labels")
def update_volume_labels_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None, help="volume name and the full set of labels, e.g. a=1,b=2"
    ),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Replace a volume's labels."""
    args = args or []

    def _update(inv: Invocation) -> None:
        labels = parse_label_pairs([args[1]])
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        vol = inv.client.update_volume_labels(
            ns_id, vol_id, labels, inv.params(UpdateVolumeParams, cas, use_async)
        )
        _show_update(inv, vol, use_async)

    run(
        ctx,
        _update,
        arity=(args, 2, "storageos update volume labels [volume] [labels]"),
        namespaced=True,
    )


@volume_app.command("replicas")
def update_volume_replicas_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume name and the replica count"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Set the number of replicas a volume maintains."""
    args = args or []

    def _update(inv: Invocation) -> None:
        try:
            replicas = int(args[1])
        except ValueError as e:
            raise ArgumentError(
                f"invalid replica count {args[1]!r}", {"replicas": args[1]}
            ) from e
        if replicas < 0:
            raise ArgumentError(f"invalid replica count {args[1]!r}", {"replicas": args[1]})

        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        inv.client.set_replicas(
            ns_id, vol_id, replicas, inv.params(SetReplicasParams, cas, use_async)
        )
        if use_async:
            inv.display.async_request()
            return
        inv.display.confirm(ReplicasUpdate(volume=args[0], replicas=replicas))

    run(
        ctx,
        _update,
        arity=(args, 2, "storageos update volume replicas [volume] [replica count]"),
        namespaced=True,
    )


@volume_app.command("size")
def update_volume_size_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume name and the new size, e.g. 42GiB"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Update a volume's size."""
    args = args or []

    def _update(inv: Invocation) -> None:
        size_bytes = parse_bytes(args[1])
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        vol = inv.client.resize_volume(
            ns_id, vol_id, size_bytes, inv.params(ResizeVolumeParams, cas, use_async)
        )
        _show_update(inv, vol, use_async)

    run(
        ctx,
        _update,
        arity=(args, 2, "storageos update volume size [volume] [size]"),
        namespaced=True,
    )


@update_app.command("cluster")
def update_cluster_command(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="the log level: debug, info, warn or error"
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="the log format: default or json"
    ),
    disable_telemetry: Optional[bool] = typer.Option(
        None, "--disable-telemetry/--enable-telemetry", help="toggle telemetry reporting"
    ),
    disable_crash_reporting: Optional[bool] = typer.Option(
        None,
        "--disable-crash-reporting/--enable-crash-reporting",
        help="toggle crash reporting",
    ),
    disable_version_check: Optional[bool] = typer.Option(
        None,
        "--disable-version-check/--enable-version-check",
        help="toggle the check for newer product versions",
    ),
    cas: Optional[str] = cas_option(),
) -> None:
    """Update cluster-wide configuration. Settings not given keep their current value."""
    changes: Dict[str, Any] = {
        key: value
        for key, value in (
            ("log_level", log_level),
            ("log_format", log_format),
            ("disable_telemetry", disable_telemetry),
            ("disable_crash_reporting", disable_crash_reporting),
            ("disable_version_check", disable_version_check),
        )
        if value is not None
    }

    def _update(inv: Invocation) -> None:
        current = inv.client.get_cluster()
        updated = inv.client.update_cluster(
            current.model_copy(update=changes), inv.params(UpdateClusterParams, cas)
        )
        inv.display.show(ClusterView.from_cluster(updated, inv.client.list_nodes()))

    run(ctx, _update)


update_app.add_typer(volume_app, name="volume")


def register(app: typer.Typer) -> None:
    """Register update command group."""
    app.add_typer(update_app, name="update")

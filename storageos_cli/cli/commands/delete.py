# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Delete commands."""

from typing import List, Optional

import typer

from storageos_cli.apiclient.params import (
    DeleteNamespaceParams,
    DeleteNodeParams,
    DeletePolicyGroupParams,
    DeleteUserParams,
    DeleteVolumeParams,
)
from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import async_option, cas_option
from storageos_cli.ids import NamespaceID
from storageos_cli.output.models import (
    NamespaceDeletion,
    NodeDeletion,
    PolicyGroupDeletion,
    UserDeletion,
    VolumeDeletion,
)

delete_app = typer.Typer(help="Delete resources in the cluster", no_args_is_help=True)


@delete_app.command("volume")
def delete_volume_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="volume name, or ID with --use-ids"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
    offline_delete: bool = typer.Option(
        False,
        "--offline-delete",
        help="request deletion of an offline volume; its data is not removed until the node reboots",
    ),
) -> None:
    """Delete a volume. By default the target volume must be online."""
    args = args or []

    def _delete(inv: Invocation) -> None:
        ns_id = resolve.namespace_id(inv)
        vol_id = resolve.volume_id(inv, ns_id, args[0])
        params = inv.params(DeleteVolumeParams, cas, use_async, offline_delete=offline_delete)
        inv.client.delete_volume(ns_id, vol_id, params)
        if use_async:
            inv.display.async_request()
            return
        inv.display.deleted(VolumeDeletion(id=vol_id, namespace=ns_id))

    run(
        ctx,
        _delete,
        arity=(args, 1, "storageos delete volume [flags] VOLUME"),
        namespaced=True,
    )


@delete_app.command("namespace")
def delete_namespace_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="namespace name, or ID with --use-ids"),
    cas: Optional[str] = cas_option(),
) -> None:
    """Delete a namespace. The namespace must hold no volumes."""
    args = args or []

    def _delete(inv: Invocation) -> None:
        if inv.use_ids:
            ns_id = NamespaceID(args[0])
        else:
            ns_id = inv.client.get_namespace_by_name(args[0]).id
        inv.client.delete_namespace(ns_id, inv.params(DeleteNamespaceParams, cas))
        inv.display.deleted(NamespaceDeletion(id=ns_id))

    run(ctx, _delete, arity=(args, 1, "storageos delete namespace [flags] NAME"))


@delete_app.command("user")
def delete_user_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="username, or ID with --use-ids"),
    cas: Optional[str] = cas_option(),
) -> None:
    """Delete a user account."""
    args = args or []

    def _delete(inv: Invocation) -> None:
        uid = resolve.user_id(inv, args[0])
        inv.client.delete_user(uid, inv.params(DeleteUserParams, cas))
        inv.display.deleted(UserDeletion(id=uid))

    run(ctx, _delete, arity=(args, 1, "storageos delete user [flags] USERNAME"))


@delete_app.command("policy-group")
def delete_policy_group_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="policy group name, or ID with --use-ids"),
    cas: Optional[str] = cas_option(),
) -> None:
    """Delete a policy group."""
    args = args or []

    def _delete(inv: Invocation) -> None:
        gid = resolve.policy_group_id(inv, args[0])
        inv.client.delete_policy_group(gid, inv.params(DeletePolicyGroupParams, cas))
        inv.display.deleted(PolicyGroupDeletion(id=gid))

    run(ctx, _delete, arity=(args, 1, "storageos delete policy-group [flags] NAME"))


@delete_app.command("node")
def delete_node_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="node name, or ID with --use-ids"),
    cas: Optional[str] = cas_option(),
    use_async: bool = async_option(),
) -> None:
    """Remove a decommissioned node from the cluster. The node must be offline."""
    args = args or []

    def _delete(inv: Invocation) -> None:
        uid = resolve.node_id(inv, args[0])
        inv.client.delete_node(uid, inv.params(DeleteNodeParams, cas, use_async))
        if use_async:
            inv.display.async_request()
            return
        inv.display.deleted(NodeDeletion(id=uid))

    run(ctx, _delete, arity=(args, 1, "storageos delete node [flags] NODE"))


def register(app: typer.Typer) -> None:
    """Register delete command group."""
    app.add_typer(delete_app, name="delete")

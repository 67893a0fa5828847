# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Create commands."""

from typing import List, Optional

import typer

from storageos_cli.apiclient.params import CreateVolumeParams
from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import ASYNC_HELP
from storageos_cli.exceptions import ArgumentError
from storageos_cli.ids import NamespaceID
from storageos_cli.models import (
    LABEL_NO_CACHE,
    LABEL_NO_COMPRESS,
    LABEL_REPLICAS,
    LABEL_THROTTLE,
    PolicySpec,
)
from storageos_cli.output.models import UserView, VolumeView
from storageos_cli.utils.labels import parse_label_pairs
from storageos_cli.utils.size import parse_bytes

create_app = typer.Typer(help="Create new resources", no_args_is_help=True)

_ACCESS_MODES = {"ro": True, "rw": False}


def _split_values(values: Optional[List[str]]) -> List[str]:
    """Flatten repeated and comma separated option values."""
    out: List[str] = []
    for value in values or []:
        out.extend(part.strip() for part in value.split(",") if part.strip())
    return out


def parse_rule(inv: Invocation, rule: str) -> PolicySpec:
    """Build a policy spec from ``namespace:resource:ro|rw``.

    The namespace is a name unless IDs are in use; ``*`` grants every
    resource type.
    """
    parts = rule.split(":")
    if len(parts) != 3 or not all(parts):
        raise ArgumentError(
            f"invalid policy rule {rule!r}, expected namespace:resource:ro|rw",
            {"rule": rule},
        )
    ns, resource, mode = parts
    if mode not in _ACCESS_MODES:
        raise ArgumentError(
            f"invalid access mode {mode!r} in policy rule {rule!r}, expected ro or rw",
            {"rule": rule},
        )
    ns_id = NamespaceID(ns) if inv.use_ids else inv.client.get_namespace_by_name(ns).id
    return PolicySpec(namespace_id=ns_id, resource_type=resource, read_only=_ACCESS_MODES[mode])


@create_app.command("user")
def create_user_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="username for the new account"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="the password to assign to the new user account",
    ),
    admin: bool = typer.Option(False, "--admin", help="grant cluster administrator privileges"),
    groups: Optional[List[str]] = typer.Option(
        None, "--groups", help="policy groups to make the user a member of"
    ),
) -> None:
    """Create a new user account."""
    args = args or []

    def _create(inv: Invocation) -> None:
        group_ids = resolve.policy_group_ids(inv, _split_values(groups))
        user = inv.client.create_user(args[0], password, admin, group_ids)
        inv.display.show(UserView.from_user(user, resolve.policy_group_map(inv)))

    run(ctx, _create, arity=(args, 1, "storageos create user [flags] USERNAME"))


@create_app.command("volume")
def create_volume_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="name of the new volume"),
    description: str = typer.Option("", "--description", "-d", help="a human-friendly description"),
    fs_type: str = typer.Option("ext4", "--fs-type", "-f", help="the filesystem format of the volume"),
    size: str = typer.Option("5GiB", "--size", "-s", help="the capacity to provision, e.g. 42GiB"),
    labels: Optional[List[str]] = typer.Option(
        None, "--labels", "-l", help="an optional set of labels to assign, in key=value form"
    ),
    replicas: int = typer.Option(0, "--replicas", "-r", help="the number of replicas to maintain"),
    no_cache: bool = typer.Option(False, "--no-cache", help="disable caching for the volume"),
    no_compress: bool = typer.Option(
        False, "--no-compress", help="disable compression of data at rest and in transit"
    ),
    throttle: bool = typer.Option(False, "--throttle", help="deprioritise the volume's disk I/O"),
    use_async: bool = typer.Option(False, "--async", help=ASYNC_HELP),
) -> None:
    """Provision a new volume in the current namespace."""
    args = args or []

    def _create(inv: Invocation) -> None:
        size_bytes = parse_bytes(size)
        label_set = parse_label_pairs(labels or [])
        if replicas:
            label_set[LABEL_REPLICAS] = str(replicas)
        if no_cache:
            label_set[LABEL_NO_CACHE] = "true"
        if no_compress:
            label_set[LABEL_NO_COMPRESS] = "true"
        if throttle:
            label_set[LABEL_THROTTLE] = "true"

        ns = resolve.namespace(inv)
        vol = inv.client.create_volume(
            ns.id,
            args[0],
            description,
            fs_type,
            size_bytes,
            label_set,
            inv.params(CreateVolumeParams, use_async=use_async),
        )
        if use_async:
            inv.display.async_request()
            return
        inv.display.show(VolumeView.from_volume(vol, ns, resolve.node_map(inv)))

    run(
        ctx,
        _create,
        arity=(args, 1, "storageos create volume [flags] VOLUME"),
        namespaced=True,
    )


@create_app.command("namespace")
def create_namespace_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="name of the new namespace"),
    labels: Optional[List[str]] = typer.Option(
        None, "--labels", "-l", help="an optional set of labels to assign, in key=value form"
    ),
) -> None:
    """Create a new namespace."""
    args = args or []
    run(
        ctx,
        lambda inv: inv.display.show(
            inv.client.create_namespace(args[0], parse_label_pairs(labels or []))
        ),
        arity=(args, 1, "storageos create namespace [flags] NAME"),
    )


@create_app.command("policy-group")
def create_policy_group_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="name of the new policy group"),
    rules: Optional[List[str]] = typer.Option(
        None,
        "--rules",
        "-r",
        help="access rules of the form namespace:resource:ro|rw; resource may be *",
    ),
) -> None:
    """Create a new policy group."""
    args = args or []

    def _create(inv: Invocation) -> None:
        specs = [parse_rule(inv, rule) for rule in _split_values(rules)]
        inv.display.show(inv.client.create_policy_group(args[0], specs))

    run(ctx, _create, arity=(args, 1, "storageos create policy-group [flags] NAME"))


def register(app: typer.Typer) -> None:
    """Register create command group."""
    app.add_typer(create_app, name="create")

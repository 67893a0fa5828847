# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Get commands: tabular summaries of resources."""

from typing import List, Optional

import typer

from storageos_cli.cli import views
from storageos_cli.cli.errors import run
from storageos_cli.cli.options import selector_option, targets_argument
from storageos_cli.models import Namespace, Node, PolicyGroup
from storageos_cli.output.models import UserView, VolumeView

get_app = typer.Typer(help="Fetch basic details for resources", no_args_is_help=True)


@get_app.command("node")
def get_node_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("node"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Fetch node details."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(inv, views.nodes(inv, names, selector), names, Node),
        targets=names,
        selectors=selector,
    )


@get_app.command("volume")
def get_volume_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("volume"),
    selector: Optional[List[str]] = selector_option(),
    all_namespaces: bool = typer.Option(
        False, "--all-namespaces", "-A", help="fetch volumes from all namespaces"
    ),
) -> None:
    """Fetch volume details."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.volumes(inv, names, selector, all_namespaces), names, VolumeView
        ),
        namespaced=not all_namespaces,
        targets=names,
        selectors=selector,
    )


@get_app.command("namespace")
def get_namespace_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("namespace"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Fetch namespace details."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(inv, views.namespaces(inv, names, selector), names, Namespace),
        targets=names,
        selectors=selector,
    )


@get_app.command("user")
def get_user_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("user"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Fetch user details."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(inv, views.users(inv, names, selector), names, UserView),
        targets=names,
        selectors=selector,
    )


@get_app.command("policy-group")
def get_policy_group_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("policy group"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Fetch policy group details."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.policy_groups(inv, names, selector), names, PolicyGroup
        ),
        targets=names,
        selectors=selector,
    )


@get_app.command("cluster")
def get_cluster_command(ctx: typer.Context) -> None:
    """Fetch cluster-wide configuration details."""
    run(ctx, lambda inv: inv.display.show(views.cluster(inv)))


@get_app.command("licence")
def get_licence_command(ctx: typer.Context) -> None:
    """Fetch the licence applied to the cluster."""
    run(ctx, lambda inv: inv.display.show(views.licence(inv)))


def register(app: typer.Typer) -> None:
    """Register get command group."""
    app.add_typer(get_app, name="get")

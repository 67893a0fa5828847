# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Describe commands: every detail of a resource, with IDs resolved to names."""

from typing import List, Optional

import typer

from storageos_cli.cli import views
from storageos_cli.cli.errors import run
from storageos_cli.cli.options import selector_option, targets_argument
from storageos_cli.models import Namespace, PolicyGroup
from storageos_cli.output.models import NodeDescription, UserView, VolumeView

describe_app = typer.Typer(help="Fetch extended details for resources", no_args_is_help=True)


@describe_app.command("node")
def describe_node_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("node"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Show detailed information for nodes, including the volume deployments they host."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.node_descriptions(inv, names, selector), names, NodeDescription, True
        ),
        targets=names,
        selectors=selector,
    )


@describe_app.command("volume")
def describe_volume_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("volume"),
    selector: Optional[List[str]] = selector_option(),
    all_namespaces: bool = typer.Option(
        False, "--all-namespaces", "-A", help="describe volumes from all namespaces"
    ),
) -> None:
    """Show detailed information for volumes."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.volumes(inv, names, selector, all_namespaces), names, VolumeView, True
        ),
        namespaced=not all_namespaces,
        targets=names,
        selectors=selector,
    )


@describe_app.command("namespace")
def describe_namespace_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("namespace"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Show detailed information for namespaces."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.namespaces(inv, names, selector), names, Namespace, True
        ),
        targets=names,
        selectors=selector,
    )


@describe_app.command("user")
def describe_user_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("user"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Show detailed information for users."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(inv, views.users(inv, names, selector), names, UserView, True),
        targets=names,
        selectors=selector,
    )


@describe_app.command("policy-group")
def describe_policy_group_command(
    ctx: typer.Context,
    names: Optional[List[str]] = targets_argument("policy group"),
    selector: Optional[List[str]] = selector_option(),
) -> None:
    """Show detailed information for policy groups."""
    names, selector = names or [], selector or []
    run(
        ctx,
        lambda inv: views.display(
            inv, views.policy_groups(inv, names, selector), names, PolicyGroup, True
        ),
        targets=names,
        selectors=selector,
    )


@describe_app.command("cluster")
def describe_cluster_command(ctx: typer.Context) -> None:
    """Show cluster-wide configuration and the nodes that make up the cluster."""
    run(ctx, lambda inv: inv.display.describe(views.cluster(inv)))


@describe_app.command("licence")
def describe_licence_command(ctx: typer.Context) -> None:
    """Show the licence applied to the cluster."""
    run(ctx, lambda inv: inv.display.describe(views.licence(inv)))


def register(app: typer.Typer) -> None:
    """Register describe command group."""
    app.add_typer(describe_app, name="describe")

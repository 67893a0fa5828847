# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Fetching resources and building the records ``get`` and ``describe`` display."""

from typing import Any, List, Sequence, Type

from storageos_cli.cli import resolve
from storageos_cli.cli.errors import Invocation
from storageos_cli.exceptions import ArgumentError
from storageos_cli.models import Namespace, Node, PolicyGroup
from storageos_cli.output.models import (
    ClusterView,
    LicenceView,
    NodeDescription,
    UserView,
    VolumeView,
)
from storageos_cli.utils.selectors import SelectorSet


def nodes(inv: Invocation, refs: Sequence[str], selectors: Sequence[str]) -> List[Node]:
    client = inv.client
    return resolve.fetch_targets(
        inv,
        refs,
        selectors,
        client.get_list_nodes_by_uid,
        client.get_list_nodes_by_name,
        client.list_nodes,
    )


def node_descriptions(
    inv: Invocation, refs: Sequence[str], selectors: Sequence[str]
) -> List[NodeDescription]:
    found = nodes(inv, refs, selectors)
    if not found:
        return []
    all_volumes = inv.client.get_all_volumes()
    ns_map = resolve.namespace_map(inv)
    return [NodeDescription.from_node(n, all_volumes, ns_map) for n in found]


def volumes(
    inv: Invocation,
    refs: Sequence[str],
    selectors: Sequence[str],
    all_namespaces: bool = False,
) -> List[VolumeView]:
    """Volumes of the current namespace, or of every namespace."""
    client = inv.client
    if all_namespaces:
        if refs:
            raise ArgumentError("volume names cannot be given with --all-namespaces")
        found = SelectorSet.from_strings(*selectors).filter(client.get_all_volumes())
        ns_map = resolve.namespace_map(inv)
    else:
        ns = resolve.namespace(inv)
        found = resolve.fetch_targets(
            inv,
            refs,
            selectors,
            lambda *uids: client.get_namespace_volumes_by_uid(ns.id, *uids),
            lambda *names: client.get_namespace_volumes_by_name(ns.id, *names),
            lambda: client.list_volumes(ns.id),
        )
        ns_map = {ns.id: ns}

    node_map = resolve.node_map(inv) if found else {}
    return [
        VolumeView.from_volume(
            vol,
            ns_map.get(vol.namespace_id, Namespace(id=vol.namespace_id)),
            node_map,
        )
        for vol in found
    ]


def namespaces(inv: Invocation, refs: Sequence[str], selectors: Sequence[str]) -> List[Namespace]:
    client = inv.client
    return resolve.fetch_targets(
        inv,
        refs,
        selectors,
        client.get_list_namespaces_by_uid,
        client.get_list_namespaces_by_name,
        client.list_namespaces,
    )


def users(inv: Invocation, refs: Sequence[str], selectors: Sequence[str]) -> List[UserView]:
    client = inv.client
    found = resolve.fetch_targets(
        inv,
        refs,
        selectors,
        client.get_list_users_by_uid,
        client.get_list_users_by_username,
        client.list_users,
    )
    if not found:
        return []
    groups = resolve.policy_group_map(inv)
    return [UserView.from_user(u, groups) for u in found]


def policy_groups(
    inv: Invocation, refs: Sequence[str], selectors: Sequence[str]
) -> List[PolicyGroup]:
    client = inv.client
    return resolve.fetch_targets(
        inv,
        refs,
        selectors,
        client.get_list_policy_groups_by_uid,
        client.get_list_policy_groups_by_name,
        client.list_policy_groups,
    )


def cluster(inv: Invocation) -> ClusterView:
    return ClusterView.from_cluster(inv.client.get_cluster(), inv.client.list_nodes())


def licence(inv: Invocation) -> LicenceView:
    return LicenceView.from_licence(inv.client.get_licence())


def display(
    inv: Invocation,
    items: List[Any],
    refs: Sequence[str],
    kind: Type,
    detailed: bool = False,
) -> None:
    """Show one resource when exactly one was asked for, otherwise a list."""
    if len(refs) == 1 and len(items) == 1:
        if detailed:
            inv.display.describe(items[0])
        else:
            inv.display.show(items[0])
    elif detailed:
        inv.display.describe_list(items, kind)
    else:
        inv.display.show_list(items, kind)

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Turning command arguments into resource IDs.

With ``--use-ids`` arguments are taken as unique identifiers verbatim;
otherwise they are names and looked up through the client.
"""

from typing import Callable, Dict, List, Sequence, TypeVar

from storageos_cli.cli.errors import Invocation
from storageos_cli.ids import NamespaceID, NodeID, PolicyGroupID, UserID, VolumeID
from storageos_cli.models import Namespace, Node, PolicyGroup
from storageos_cli.utils.selectors import SelectorSet

T = TypeVar("T")


def namespace(inv: Invocation) -> Namespace:
    """The namespace the command operates in."""
    if inv.use_ids:
        return inv.client.get_namespace(NamespaceID(inv.namespace))
    return inv.client.get_namespace_by_name(inv.namespace)


def namespace_id(inv: Invocation) -> NamespaceID:
    if inv.use_ids:
        return NamespaceID(inv.namespace)
    return inv.client.get_namespace_by_name(inv.namespace).id


def volume_id(inv: Invocation, ns_id: NamespaceID, ref: str) -> VolumeID:
    if inv.use_ids:
        return VolumeID(ref)
    return inv.client.get_volume_by_name(ns_id, ref).id


def node_id(inv: Invocation, ref: str) -> NodeID:
    if inv.use_ids:
        return NodeID(ref)
    return inv.client.get_node_by_name(ref).id


def user_id(inv: Invocation, ref: str) -> UserID:
    if inv.use_ids:
        return UserID(ref)
    return inv.client.get_user_by_name(ref).id


def policy_group_id(inv: Invocation, ref: str) -> PolicyGroupID:
    if inv.use_ids:
        return PolicyGroupID(ref)
    return inv.client.get_policy_group_by_name(ref).id


def policy_group_ids(inv: Invocation, refs: List[str]) -> List[PolicyGroupID]:
    if not refs:
        return []
    if inv.use_ids:
        return [PolicyGroupID(ref) for ref in refs]
    return [g.id for g in inv.client.get_list_policy_groups_by_name(*refs)]


def node_map(inv: Invocation) -> Dict[NodeID, Node]:
    return {n.id: n for n in inv.client.list_nodes()}


def namespace_map(inv: Invocation) -> Dict[NamespaceID, Namespace]:
    return {ns.id: ns for ns in inv.client.list_namespaces()}


def policy_group_map(inv: Invocation) -> Dict[PolicyGroupID, PolicyGroup]:
    return {g.id: g for g in inv.client.list_policy_groups()}


def fetch_targets(
    inv: Invocation,
    refs: Sequence[str],
    selectors: Sequence[str],
    by_uid: Callable[..., List[T]],
    by_name: Callable[..., List[T]],
    list_all: Callable[[], List[T]],
) -> List[T]:
    """The resources named by ``refs``, or all of them, narrowed by ``selectors``.

    Every named resource must exist; the result keeps the order of ``refs``.
    """
    selector_set = SelectorSet.from_strings(*selectors)
    if not refs:
        items = list_all()
    elif inv.use_ids:
        items = by_uid(*refs)
    else:
        items = by_name(*refs)
    return selector_set.filter(items)

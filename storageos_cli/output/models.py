# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Display records.

API resources refer to each other by ID. The records here carry the
human-readable names alongside, resolved by the command before display.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from storageos_cli.ids import (
    ClusterID,
    DeploymentID,
    NamespaceID,
    NodeID,
    PolicyGroupID,
    UserID,
    VolumeID,
)
from storageos_cli.models import (
    Cluster,
    Deployment,
    Licence,
    Namespace,
    NFSConfig,
    Node,
    PolicyGroup,
    SyncProgress,
    User,
    Volume,
)
from storageos_cli.models.base import Labels

UNKNOWN_NODE_NAME = "unknown"


class View(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def _node_name(nodes: Mapping[NodeID, Node], uid: NodeID) -> str:
    node = nodes.get(uid)
    return node.name if node is not None else UNKNOWN_NODE_NAME


# ============= Volumes =============


class DeploymentView(View):
    id: DeploymentID
    node_id: NodeID = Field(alias="nodeID")
    node_name: str
    health: str = ""
    promotable: bool = False
    sync_progress: Optional[SyncProgress] = None

    @classmethod
    def from_deployment(cls, d: Deployment, nodes: Mapping[NodeID, Node]) -> "DeploymentView":
        return cls(
            id=d.id,
            node_id=d.node_id,
            node_name=_node_name(nodes, d.node_id),
            health=d.health,
            promotable=d.promotable,
            sync_progress=d.sync_progress,
        )


class VolumeView(View):
    id: VolumeID
    name: str
    description: str = ""
    attached_on: NodeID = Field(default=NodeID(""), alias="attachedOn")
    attached_on_name: str = ""
    attachment_type: str = ""
    nfs: NFSConfig = Field(default_factory=NFSConfig)
    namespace_id: NamespaceID = Field(alias="namespaceID")
    namespace_name: str = ""
    labels: Labels = Field(default_factory=dict)
    filesystem: str = ""
    size_bytes: int = 0
    master: Optional[DeploymentView] = None
    replicas: List[DeploymentView] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: str = ""

    @classmethod
    def from_volume(
        cls, vol: Volume, namespace: Namespace, nodes: Mapping[NodeID, Node]
    ) -> "VolumeView":
        """Build the view, naming each node through ``nodes``.

        A node missing from the mapping is shown as ``unknown``.
        """
        attached_on_name = ""
        if vol.attached_on:
            attached_on_name = _node_name(nodes, vol.attached_on)

        return cls(
            id=vol.id,
            name=vol.name,
            description=vol.description,
            attached_on=vol.attached_on,
            attached_on_name=attached_on_name,
            attachment_type=vol.attachment_type.value,
            nfs=vol.nfs,
            namespace_id=vol.namespace_id,
            namespace_name=namespace.name,
            labels=dict(vol.labels),
            filesystem=vol.filesystem,
            size_bytes=vol.size_bytes,
            master=(
                DeploymentView.from_deployment(vol.master, nodes) if vol.master is not None else None
            ),
            replicas=[DeploymentView.from_deployment(r, nodes) for r in vol.replicas],
            created_at=vol.created_at,
            updated_at=vol.updated_at,
            version=vol.version,
        )


class VolumeUpdate(View):
    """The fields a volume update can change."""

    id: VolumeID
    name: str
    description: str = ""
    size_bytes: int = 0
    labels: Labels = Field(default_factory=dict)
    replicas: int = 0

    @classmethod
    def from_volume(cls, vol: Volume) -> "VolumeUpdate":
        return cls(
            id=vol.id,
            name=vol.name,
            description=vol.description,
            size_bytes=vol.size_bytes,
            labels=dict(vol.labels),
            replicas=vol.replica_count(),
        )


# ============= Nodes =============


class HostedVolume(View):
    """A volume deployment found on a node."""

    id: VolumeID
    name: str
    namespace_id: NamespaceID = Field(alias="namespaceID")
    namespace_name: str = ""
    deployment_id: DeploymentID = Field(alias="deploymentID")
    kind: str
    health: str = ""


class NodeDescription(View):
    id: NodeID
    name: str
    health: str = ""
    capacity_total: int = 0
    capacity_free: int = 0
    io_address: str = ""
    supervisor_address: str = ""
    gossip_address: str = ""
    clustering_address: str = ""
    labels: Labels = Field(default_factory=dict)
    hosted_volumes: List[HostedVolume] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: str = ""

    @classmethod
    def from_node(
        cls,
        node: Node,
        volumes: List[Volume],
        namespaces: Mapping[NamespaceID, Namespace],
    ) -> "NodeDescription":
        """Describe ``node`` together with the deployments of ``volumes`` it hosts."""
        hosted = []
        for vol in volumes:
            deployments = []
            if vol.master is not None:
                deployments.append(("master", vol.master))
            deployments.extend(("replica", r) for r in vol.replicas)

            for kind, d in deployments:
                if d.node_id != node.id:
                    continue
                ns = namespaces.get(vol.namespace_id)
                hosted.append(
                    HostedVolume(
                        id=vol.id,
                        name=vol.name,
                        namespace_id=vol.namespace_id,
                        namespace_name=ns.name if ns is not None else "",
                        deployment_id=d.id,
                        kind=kind,
                        health=d.health,
                    )
                )

        capacity = node.capacity
        return cls(
            id=node.id,
            name=node.name,
            health=node.health,
            capacity_total=capacity.total if capacity else 0,
            capacity_free=capacity.free if capacity else 0,
            io_address=node.io_address,
            supervisor_address=node.supervisor_address,
            gossip_address=node.gossip_address,
            clustering_address=node.clustering_address,
            labels=dict(node.labels),
            hosted_volumes=hosted,
            created_at=node.created_at,
            updated_at=node.updated_at,
            version=node.version,
        )


# ============= Users =============


class PolicyGroupRef(View):
    id: PolicyGroupID
    name: str = ""


class UserView(View):
    id: UserID
    username: str
    is_admin: bool = False
    groups: List[PolicyGroupRef] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: str = ""

    @classmethod
    def from_user(
        cls, user: User, groups: Optional[Mapping[PolicyGroupID, PolicyGroup]] = None
    ) -> "UserView":
        groups = groups or {}
        refs = []
        for gid in user.groups:
            group = groups.get(gid)
            refs.append(PolicyGroupRef(id=gid, name=group.name if group is not None else ""))

        return cls(
            id=user.id,
            username=user.username,
            is_admin=user.is_admin,
            groups=refs,
            created_at=user.created_at,
            updated_at=user.updated_at,
            version=user.version,
        )


# ============= Cluster =============


class ClusterView(View):
    id: ClusterID
    disable_telemetry: bool = False
    disable_crash_reporting: bool = False
    disable_version_check: bool = False
    log_level: str = ""
    log_format: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: str = ""
    nodes: List[Node] = Field(default_factory=list)

    @classmethod
    def from_cluster(cls, c: Cluster, nodes: Optional[List[Node]] = None) -> "ClusterView":
        return cls(
            id=c.id,
            disable_telemetry=c.disable_telemetry,
            disable_crash_reporting=c.disable_crash_reporting,
            disable_version_check=c.disable_version_check,
            log_level=c.log_level,
            log_format=c.log_format,
            created_at=c.created_at,
            updated_at=c.updated_at,
            version=c.version,
            nodes=list(nodes or []),
        )


class LicenceView(View):
    cluster_id: ClusterID = Field(alias="clusterID")
    expires_at: Optional[datetime] = None
    cluster_capacity_bytes: int = 0
    used_bytes: int = 0
    kind: str = ""
    features: List[str] = Field(default_factory=list)
    customer_name: str = ""

    @classmethod
    def from_licence(cls, lic: Licence) -> "LicenceView":
        return cls(
            cluster_id=lic.cluster_id,
            expires_at=lic.expires_at,
            cluster_capacity_bytes=lic.cluster_capacity_bytes,
            used_bytes=lic.used_bytes,
            kind=lic.kind,
            features=sorted(lic.features),
            customer_name=lic.customer_name,
        )


# ============= Confirmations =============


class NodeDeletion(View):
    id: NodeID


class VolumeDeletion(View):
    id: VolumeID
    namespace: NamespaceID


class NamespaceDeletion(View):
    id: NamespaceID


class UserDeletion(View):
    id: UserID


class PolicyGroupDeletion(View):
    id: PolicyGroupID


class VolumeAttachment(View):
    volume: str
    node: str


class VolumeDetachment(View):
    volume: str


class NFSUpdate(View):
    """Confirmation of an NFS change to a volume."""

    volume: str
    action: str
    endpoint: str = ""
    exports: int = 0


class ReplicasUpdate(View):
    volume: str
    replicas: int

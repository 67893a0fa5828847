# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Transport interface for the StorageOS API.

The client resolves names and composes parameters; a transport only moves
requests and responses and maps failures onto the exception hierarchy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from storageos_cli.apiclient.params import (
    AttachNFSVolumeParams,
    CreateVolumeParams,
    DeleteNamespaceParams,
    DeleteNodeParams,
    DeletePolicyGroupParams,
    DeleteUserParams,
    DeleteVolumeParams,
    DetachVolumeParams,
    ResizeVolumeParams,
    SetReplicasParams,
    UpdateClusterParams,
    UpdateLicenceParams,
    UpdateNFSVolumeExportsParams,
    UpdateNFSVolumeMountEndpointParams,
    UpdateVolumeParams,
)
from storageos_cli.ids import NamespaceID, NodeID, PolicyGroupID, UserID, VolumeID
from storageos_cli.models import (
    Cluster,
    Licence,
    Namespace,
    NFSExportConfig,
    Node,
    PolicyGroup,
    PolicySpec,
    User,
    Volume,
)


@dataclass
class AuthSession:
    """An authenticated API session."""

    token: str
    expires_at: datetime
    user_id: str = ""


class Transport(ABC):
    """Abstract base class for StorageOS API transports."""

    # ============= Lifecycle =============

    @abstractmethod
    def authenticate(self, username: str, password: str) -> AuthSession:
        """Log in and use the resulting session for later requests."""
        ...

    @abstractmethod
    def use_session(self, session: AuthSession) -> None:
        """Use an existing session instead of logging in."""
        ...

    def close(self) -> None:
        """Release any held connections."""

    # ============= Nodes =============

    @abstractmethod
    def get_node(self, uid: NodeID) -> Node: ...

    @abstractmethod
    def list_nodes(self) -> List[Node]: ...

    @abstractmethod
    def delete_node(self, uid: NodeID, params: Optional[DeleteNodeParams] = None) -> None: ...

    # ============= Namespaces =============

    @abstractmethod
    def get_namespace(self, uid: NamespaceID) -> Namespace: ...

    @abstractmethod
    def list_namespaces(self) -> List[Namespace]: ...

    @abstractmethod
    def create_namespace(self, name: str, labels: Dict[str, str]) -> Namespace: ...

    @abstractmethod
    def delete_namespace(
        self, uid: NamespaceID, params: Optional[DeleteNamespaceParams] = None
    ) -> None: ...

    # ============= Volumes =============

    @abstractmethod
    def get_volume(self, namespace_id: NamespaceID, uid: VolumeID) -> Volume: ...

    @abstractmethod
    def list_volumes(self, namespace_id: NamespaceID) -> List[Volume]: ...

    @abstractmethod
    def create_volume(
        self,
        namespace_id: NamespaceID,
        name: str,
        description: str,
        fs_type: str,
        size_bytes: int,
        labels: Dict[str, str],
        params: Optional[CreateVolumeParams] = None,
    ) -> Volume: ...

    @abstractmethod
    def delete_volume(
        self,
        namespace_id: NamespaceID,
        uid: VolumeID,
        params: Optional[DeleteVolumeParams] = None,
    ) -> None: ...

    @abstractmethod
    def attach_volume(
        self, namespace_id: NamespaceID, volume_id: VolumeID, node_id: NodeID
    ) -> None: ...

    @abstractmethod
    def detach_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[DetachVolumeParams] = None,
    ) -> None: ...

    @abstractmethod
    def update_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        description: str,
        labels: Dict[str, str],
        params: Optional[UpdateVolumeParams] = None,
    ) -> Optional[Volume]: ...

    @abstractmethod
    def resize_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        size_bytes: int,
        params: Optional[ResizeVolumeParams] = None,
    ) -> Optional[Volume]: ...

    @abstractmethod
    def set_replicas(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        replicas: int,
        params: Optional[SetReplicasParams] = None,
    ) -> None: ...

    @abstractmethod
    def attach_nfs_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[AttachNFSVolumeParams] = None,
    ) -> None: ...

    @abstractmethod
    def update_nfs_volume_exports(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        exports: List[NFSExportConfig],
        params: Optional[UpdateNFSVolumeExportsParams] = None,
    ) -> None: ...

    @abstractmethod
    def update_nfs_volume_mount_endpoint(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        endpoint: str,
        params: Optional[UpdateNFSVolumeMountEndpointParams] = None,
    ) -> None: ...

    # ============= Users and policy groups =============

    @abstractmethod
    def get_user(self, uid: UserID) -> User: ...

    @abstractmethod
    def list_users(self) -> List[User]: ...

    @abstractmethod
    def create_user(
        self, username: str, password: str, with_admin: bool, groups: List[PolicyGroupID]
    ) -> User: ...

    @abstractmethod
    def delete_user(self, uid: UserID, params: Optional[DeleteUserParams] = None) -> None: ...

    @abstractmethod
    def get_policy_group(self, uid: PolicyGroupID) -> PolicyGroup: ...

    @abstractmethod
    def list_policy_groups(self) -> List[PolicyGroup]: ...

    @abstractmethod
    def create_policy_group(self, name: str, specs: List[PolicySpec]) -> PolicyGroup: ...

    @abstractmethod
    def delete_policy_group(
        self, uid: PolicyGroupID, params: Optional[DeletePolicyGroupParams] = None
    ) -> None: ...

    # ============= Cluster =============

    @abstractmethod
    def get_cluster(self) -> Cluster: ...

    @abstractmethod
    def update_cluster(
        self, resource: Cluster, params: Optional[UpdateClusterParams] = None
    ) -> Cluster: ...

    @abstractmethod
    def get_licence(self) -> Licence: ...

    @abstractmethod
    def update_licence(
        self, licence: bytes, params: Optional[UpdateLicenceParams] = None
    ) -> Licence: ...

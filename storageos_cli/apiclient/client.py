# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""StorageOS API client.

The API identifies every resource by an opaque unique identifier, while
users think in names. The client bridges the two: name lookups fetch the
full collection from the transport and scan it, so they cost more than the
corresponding lookups by ID. Nothing is cached between calls.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

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
from storageos_cli.apiclient.transport import AuthSession, Transport
from storageos_cli.exceptions import (
    AlreadyExistsError,
    InvalidRequestError,
    InvalidUserCreationError,
    NamespaceNotFoundError,
    NodeNotFoundError,
    PolicyGroupNotFoundError,
    ResourceNotFoundError,
    TransportNotConfiguredError,
    UserExistsError,
    UserNotFoundError,
    VolumeNotFoundError,
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
from storageos_cli.utils.logger import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


def _find_by(
    resources: Iterable[R],
    key: Callable[[R], str],
    wanted: str,
    not_found: Callable[[], ResourceNotFoundError],
) -> R:
    for resource in resources:
        if key(resource) == wanted:
            return resource
    raise not_found()


def _filter_strict(
    resources: List[R],
    keys: Sequence[str],
    key: Callable[[R], str],
    not_found: Callable[[str], ResourceNotFoundError],
) -> List[R]:
    """Select ``resources`` matching ``keys``, in the order the keys were given.

    With no keys the collection is returned untouched. When several resources
    share a key the last one seen wins. A key with no match fails the whole
    call.
    """
    if not keys:
        return resources

    retrieved: Dict[str, R] = {}
    for resource in resources:
        k = key(resource)
        if k in retrieved:
            logger.debug("duplicate key %r in listing, keeping the later resource", k)
        retrieved[k] = resource

    filtered = []
    for k in keys:
        if k not in retrieved:
            raise not_found(k)
        filtered.append(retrieved[k])
    return filtered


class Client:
    """Resolves names to resources and forwards operations to a transport."""

    def __init__(self, transport: Optional[Transport] = None):
        self._transport = transport

    def configure_transport(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            raise TransportNotConfiguredError()
        return self._transport

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()

    def authenticate(self, username: str, password: str) -> AuthSession:
        return self.transport.authenticate(username, password)

    # ============= Nodes =============

    def get_node(self, uid: NodeID) -> Node:
        return self.transport.get_node(uid)

    def list_nodes(self) -> List[Node]:
        return self.transport.list_nodes()

    def get_node_by_name(self, name: str) -> Node:
        """Return the node called ``name``.

        Fetches every node in the cluster and returns the first whose name
        matches exactly.
        """
        return _find_by(
            self.transport.list_nodes(),
            lambda n: n.name,
            name,
            lambda: NodeNotFoundError(name=name),
        )

    def get_list_nodes_by_uid(self, *uids: NodeID) -> List[Node]:
        return _filter_strict(
            self.transport.list_nodes(),
            uids,
            lambda n: n.id,
            lambda k: NodeNotFoundError(uid=k),
        )

    def get_list_nodes_by_name(self, *names: str) -> List[Node]:
        return _filter_strict(
            self.transport.list_nodes(),
            names,
            lambda n: n.name,
            lambda k: NodeNotFoundError(name=k),
        )

    def delete_node(self, uid: NodeID, params: Optional[DeleteNodeParams] = None) -> None:
        self.transport.delete_node(uid, params)

    # ============= Namespaces =============

    def get_namespace(self, uid: NamespaceID) -> Namespace:
        return self.transport.get_namespace(uid)

    def list_namespaces(self) -> List[Namespace]:
        return self.transport.list_namespaces()

    def get_namespace_by_name(self, name: str) -> Namespace:
        return _find_by(
            self.transport.list_namespaces(),
            lambda ns: ns.name,
            name,
            lambda: NamespaceNotFoundError(name=name),
        )

    def get_list_namespaces_by_uid(self, *uids: NamespaceID) -> List[Namespace]:
        return _filter_strict(
            self.transport.list_namespaces(),
            uids,
            lambda ns: ns.id,
            lambda k: NamespaceNotFoundError(uid=k),
        )

    def get_list_namespaces_by_name(self, *names: str) -> List[Namespace]:
        return _filter_strict(
            self.transport.list_namespaces(),
            names,
            lambda ns: ns.name,
            lambda k: NamespaceNotFoundError(name=k),
        )

    def create_namespace(self, name: str, labels: Optional[Dict[str, str]] = None) -> Namespace:
        return self.transport.create_namespace(name, labels or {})

    def delete_namespace(
        self, uid: NamespaceID, params: Optional[DeleteNamespaceParams] = None
    ) -> None:
        self.transport.delete_namespace(uid, params)

    # ============= Volumes =============

    def get_volume(self, namespace_id: NamespaceID, uid: VolumeID) -> Volume:
        return self.transport.get_volume(namespace_id, uid)

    def list_volumes(self, namespace_id: NamespaceID) -> List[Volume]:
        return self.transport.list_volumes(namespace_id)

    def get_volume_by_name(self, namespace_id: NamespaceID, name: str) -> Volume:
        """Return the volume called ``name`` within the namespace ``namespace_id``."""
        return _find_by(
            self.transport.list_volumes(namespace_id),
            lambda v: v.name,
            name,
            lambda: VolumeNotFoundError(name=name),
        )

    def get_namespace_volumes_by_uid(
        self, namespace_id: NamespaceID, *uids: VolumeID
    ) -> List[Volume]:
        return _filter_strict(
            self.transport.list_volumes(namespace_id),
            uids,
            lambda v: v.id,
            lambda k: VolumeNotFoundError(uid=k),
        )

    def get_namespace_volumes_by_name(
        self, namespace_id: NamespaceID, *names: str
    ) -> List[Volume]:
        return _filter_strict(
            self.transport.list_volumes(namespace_id),
            names,
            lambda v: v.name,
            lambda k: VolumeNotFoundError(name=k),
        )

    def get_all_volumes(self) -> List[Volume]:
        """Return the volumes of every namespace, grouped by namespace."""
        volumes: List[Volume] = []
        for ns in self.transport.list_namespaces():
            volumes.extend(self.transport.list_volumes(ns.id))
        return volumes

    def create_volume(
        self,
        namespace_id: NamespaceID,
        name: str,
        description: str = "",
        fs_type: str = "ext4",
        size_bytes: int = 0,
        labels: Optional[Dict[str, str]] = None,
        params: Optional[CreateVolumeParams] = None,
    ) -> Volume:
        return self.transport.create_volume(
            namespace_id, name, description, fs_type, size_bytes, labels or {}, params
        )

    def delete_volume(
        self,
        namespace_id: NamespaceID,
        uid: VolumeID,
        params: Optional[DeleteVolumeParams] = None,
    ) -> None:
        self.transport.delete_volume(namespace_id, uid, params)

    def attach_volume(
        self, namespace_id: NamespaceID, volume_id: VolumeID, node_id: NodeID
    ) -> None:
        self.transport.attach_volume(namespace_id, volume_id, node_id)

    def detach_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[DetachVolumeParams] = None,
    ) -> None:
        self.transport.detach_volume(namespace_id, volume_id, params)

    def update_volume_description(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        description: str,
        params: Optional[UpdateVolumeParams] = None,
    ) -> Optional[Volume]:
        """Replace a volume's description, keeping its current labels."""
        current = self.transport.get_volume(namespace_id, volume_id)
        return self.transport.update_volume(
            namespace_id, volume_id, description, current.labels, params
        )

    def update_volume_labels(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        labels: Dict[str, str],
        params: Optional[UpdateVolumeParams] = None,
    ) -> Optional[Volume]:
        """Replace a volume's labels, keeping its current description."""
        current = self.transport.get_volume(namespace_id, volume_id)
        return self.transport.update_volume(
            namespace_id, volume_id, current.description, labels, params
        )

    def resize_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        size_bytes: int,
        params: Optional[ResizeVolumeParams] = None,
    ) -> Optional[Volume]:
        return self.transport.resize_volume(namespace_id, volume_id, size_bytes, params)

    def set_replicas(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        replicas: int,
        params: Optional[SetReplicasParams] = None,
    ) -> None:
        self.transport.set_replicas(namespace_id, volume_id, replicas, params)

    def attach_nfs_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[AttachNFSVolumeParams] = None,
    ) -> None:
        self.transport.attach_nfs_volume(namespace_id, volume_id, params)

    def update_nfs_volume_exports(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        exports: List[NFSExportConfig],
        params: Optional[UpdateNFSVolumeExportsParams] = None,
    ) -> None:
        self.transport.update_nfs_volume_exports(namespace_id, volume_id, exports, params)

    def update_nfs_volume_mount_endpoint(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        endpoint: str,
        params: Optional[UpdateNFSVolumeMountEndpointParams] = None,
    ) -> None:
        self.transport.update_nfs_volume_mount_endpoint(namespace_id, volume_id, endpoint, params)

    # ============= Users =============

    def get_user(self, uid: UserID) -> User:
        return self.transport.get_user(uid)

    def list_users(self) -> List[User]:
        return self.transport.list_users()

    def get_user_by_name(self, username: str) -> User:
        return _find_by(
            self.transport.list_users(),
            lambda u: u.username,
            username,
            lambda: UserNotFoundError(name=username),
        )

    def get_list_users_by_uid(self, *uids: UserID) -> List[User]:
        return _filter_strict(
            self.transport.list_users(),
            uids,
            lambda u: u.id,
            lambda k: UserNotFoundError(uid=k),
        )

    def get_list_users_by_username(self, *usernames: str) -> List[User]:
        return _filter_strict(
            self.transport.list_users(),
            usernames,
            lambda u: u.username,
            lambda k: UserNotFoundError(name=k),
        )

    def create_user(
        self,
        username: str,
        password: str,
        with_admin: bool = False,
        groups: Sequence[PolicyGroupID] = (),
    ) -> User:
        try:
            return self.transport.create_user(username, password, with_admin, list(groups))
        except AlreadyExistsError as e:
            raise UserExistsError(username) from e
        except InvalidRequestError as e:
            if isinstance(e, InvalidUserCreationError):
                raise
            raise InvalidUserCreationError(e.reason) from e

    def delete_user(self, uid: UserID, params: Optional[DeleteUserParams] = None) -> None:
        self.transport.delete_user(uid, params)

    # ============= Policy groups =============

    def get_policy_group(self, uid: PolicyGroupID) -> PolicyGroup:
        return self.transport.get_policy_group(uid)

    def list_policy_groups(self) -> List[PolicyGroup]:
        return self.transport.list_policy_groups()

    def get_policy_group_by_name(self, name: str) -> PolicyGroup:
        return _find_by(
            self.transport.list_policy_groups(),
            lambda g: g.name,
            name,
            lambda: PolicyGroupNotFoundError(name=name),
        )

    def get_list_policy_groups_by_uid(self, *uids: PolicyGroupID) -> List[PolicyGroup]:
        return _filter_strict(
            self.transport.list_policy_groups(),
            uids,
            lambda g: g.id,
            lambda k: PolicyGroupNotFoundError(uid=k),
        )

    def get_list_policy_groups_by_name(self, *names: str) -> List[PolicyGroup]:
        return _filter_strict(
            self.transport.list_policy_groups(),
            names,
            lambda g: g.name,
            lambda k: PolicyGroupNotFoundError(name=k),
        )

    def create_policy_group(self, name: str, specs: Sequence[PolicySpec]) -> PolicyGroup:
        return self.transport.create_policy_group(name, list(specs))

    def delete_policy_group(
        self, uid: PolicyGroupID, params: Optional[DeletePolicyGroupParams] = None
    ) -> None:
        self.transport.delete_policy_group(uid, params)

    # ============= Cluster =============

    def get_cluster(self) -> Cluster:
        return self.transport.get_cluster()

    def update_cluster(
        self, resource: Cluster, params: Optional[UpdateClusterParams] = None
    ) -> Cluster:
        return self.transport.update_cluster(resource, params)

    def get_licence(self) -> Licence:
        return self.transport.get_licence()

    def update_licence(
        self, licence: bytes, params: Optional[UpdateLicenceParams] = None
    ) -> Licence:
        return self.transport.update_licence(licence, params)

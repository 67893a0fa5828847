# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Volume resources and their deployments."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from storageos_cli.ids import DeploymentID, NamespaceID, NodeID, VolumeID
from storageos_cli.models.base import Labels, Resource, Timestamped
from storageos_cli.utils.parsing import parse_bool

LABEL_NO_CACHE = "storageos.com/nocache"
LABEL_NO_COMPRESS = "storageos.com/nocompress"
LABEL_REPLICAS = "storageos.com/replicas"
LABEL_THROTTLE = "storageos.com/throttle"


class AttachType(str, Enum):
    """How a volume is consumed. ``host`` means by the node it is attached to."""

    UNKNOWN = "unknown"
    DETACHED = "detached"
    NFS = "nfs"
    HOST = "host"


class SyncProgress(Resource):
    """Point-in-time snapshot of a replica catching up with its master."""

    bytes_remaining: int = Field(default=0, alias="bytesRemaining")
    throughput_bytes: int = Field(default=0, alias="throughputBytes")
    estimated_seconds_remaining: int = Field(default=0, alias="estimatedSecondsRemaining")


class Deployment(Resource):
    """A master or replica instance of a volume on a node."""

    id: DeploymentID
    node_id: NodeID = Field(alias="nodeID")
    health: str = ""
    promotable: bool = False
    sync_progress: Optional[SyncProgress] = Field(default=None, alias="syncProgress")


class NFSExportACLIdentity(Resource):
    identity_type: str = Field(default="", alias="identityType")
    matcher: str = ""


class NFSExportACLSquashConfig(Resource):
    gid: int = 0
    uid: int = 0
    squash: str = ""


class NFSExportACL(Resource):
    identity: NFSExportACLIdentity = Field(default_factory=NFSExportACLIdentity)
    squash_config: NFSExportACLSquashConfig = Field(
        default_factory=NFSExportACLSquashConfig, alias="squashConfig"
    )
    access_level: str = Field(default="", alias="accessLevel")


class NFSExportConfig(Resource):
    export_id: int = Field(default=0, alias="exportID")
    path: str = ""
    pseudo_path: str = Field(default="", alias="pseudoPath")
    acls: List[NFSExportACL] = Field(default_factory=list)


class NFSConfig(Resource):
    exports: List[NFSExportConfig] = Field(default_factory=list)
    service_endpoint: str = Field(default="", alias="serviceEndpoint")


class Volume(Timestamped):
    """A StorageOS volume, scoped to a namespace."""

    id: VolumeID
    name: str = ""
    description: str = ""
    attached_on: NodeID = Field(default=NodeID(""), alias="attachedOn")
    attachment_type: AttachType = Field(default=AttachType.UNKNOWN, alias="attachmentType")
    nfs: NFSConfig = Field(default_factory=NFSConfig)

    namespace_id: NamespaceID = Field(alias="namespaceID")
    labels: Labels = Field(default_factory=dict)
    filesystem: str = ""
    size_bytes: int = Field(default=0, alias="sizeBytes")

    master: Optional[Deployment] = None
    replicas: List[Deployment] = Field(default_factory=list)

    def _label_flag(self, key: str) -> bool:
        value = self.labels.get(key)
        if value is None:
            return False
        return parse_bool(value)

    def is_caching_disabled(self) -> bool:
        return self._label_flag(LABEL_NO_CACHE)

    def is_compression_disabled(self) -> bool:
        return self._label_flag(LABEL_NO_COMPRESS)

    def is_throttle_enabled(self) -> bool:
        """Whether the volume's disk I/O is deprioritised."""
        return self._label_flag(LABEL_THROTTLE)

    def replica_count(self) -> int:
        """Desired replica count from the replicas label; 0 when unset."""
        value = self.labels.get(LABEL_REPLICAS)
        if not value:
            return 0
        return int(value)

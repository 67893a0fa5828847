# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Records describing StorageOS API resources."""

from storageos_cli.models.cluster import Cluster
from storageos_cli.models.licence import Licence
from storageos_cli.models.namespace import Namespace
from storageos_cli.models.node import CapacityStats, Node
from storageos_cli.models.policygroup import PolicyGroup, PolicyGroupMember, PolicySpec
from storageos_cli.models.user import User
from storageos_cli.models.volume import (
    LABEL_NO_CACHE,
    LABEL_NO_COMPRESS,
    LABEL_REPLICAS,
    LABEL_THROTTLE,
    AttachType,
    Deployment,
    NFSConfig,
    NFSExportACL,
    NFSExportACLIdentity,
    NFSExportACLSquashConfig,
    NFSExportConfig,
    SyncProgress,
    Volume,
)

__all__ = [
    "AttachType",
    "CapacityStats",
    "Cluster",
    "Deployment",
    "LABEL_NO_CACHE",
    "LABEL_NO_COMPRESS",
    "LABEL_REPLICAS",
    "LABEL_THROTTLE",
    "Licence",
    "NFSConfig",
    "NFSExportACL",
    "NFSExportACLIdentity",
    "NFSExportACLSquashConfig",
    "NFSExportConfig",
    "Namespace",
    "Node",
    "PolicyGroup",
    "PolicyGroupMember",
    "PolicySpec",
    "SyncProgress",
    "User",
    "Volume",
]

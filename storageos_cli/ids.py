# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typed identifiers for StorageOS API resources.

Every resource kind has its own identifier type so a volume ID cannot be
passed where a node ID is expected without a type checker noticing. At
runtime they are plain strings.
"""

from typing import NewType

NodeID = NewType("NodeID", str)
VolumeID = NewType("VolumeID", str)
NamespaceID = NewType("NamespaceID", str)
UserID = NewType("UserID", str)
PolicyGroupID = NewType("PolicyGroupID", str)
ClusterID = NewType("ClusterID", str)
DeploymentID = NewType("DeploymentID", str)

__all__ = [
    "ClusterID",
    "DeploymentID",
    "NamespaceID",
    "NodeID",
    "PolicyGroupID",
    "UserID",
    "VolumeID",
]

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from typing import Optional

from pydantic import BaseModel, Field

from storageos_cli.ids import NodeID
from storageos_cli.models.base import Labels, Timestamped


class CapacityStats(BaseModel):
    """Storage capacity of a node, in bytes."""

    total: int = 0
    free: int = 0

    model_config = {"extra": "ignore"}

    @property
    def used(self) -> int:
        return self.total - self.free


class Node(Timestamped):
    """A StorageOS cluster node."""

    id: NodeID
    name: str = ""
    health: str = Field(default="unknown", description="online, offline or unknown")
    capacity: Optional[CapacityStats] = None

    io_address: str = Field(default="", alias="ioAddress")
    supervisor_address: str = Field(default="", alias="supervisorAddress")
    gossip_address: str = Field(default="", alias="gossipAddress")
    clustering_address: str = Field(default="", alias="clusteringAddress")

    labels: Labels = Field(default_factory=dict)

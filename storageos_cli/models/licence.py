# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from storageos_cli.ids import ClusterID
from storageos_cli.models.base import Resource


class Licence(Resource):
    """The product licence applied to a cluster and the features it unlocks."""

    cluster_id: ClusterID = Field(default=ClusterID(""), alias="clusterID")
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")
    cluster_capacity_bytes: int = Field(default=0, alias="clusterCapacityBytes")
    used_bytes: int = Field(default=0, alias="usedBytes")
    kind: str = ""
    customer_name: str = Field(default="", alias="customerName")
    features: List[str] = Field(default_factory=list)
    version: str = ""

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from typing import List

from pydantic import Field

from storageos_cli.ids import NamespaceID, PolicyGroupID, UserID
from storageos_cli.models.base import Resource, Timestamped


class PolicySpec(Resource):
    """Grants access to one resource type within a namespace."""

    namespace_id: NamespaceID = Field(default=NamespaceID(""), alias="namespaceID")
    resource_type: str = Field(default="", alias="resourceType")
    read_only: bool = Field(default=False, alias="readOnly")


class PolicyGroupMember(Resource):
    id: UserID
    username: str = Field(default="", alias="name")


class PolicyGroup(Timestamped):
    id: PolicyGroupID
    name: str = ""
    specs: List[PolicySpec] = Field(default_factory=list)
    users: List[PolicyGroupMember] = Field(default_factory=list)

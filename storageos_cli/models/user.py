# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from typing import List

from pydantic import Field

from storageos_cli.ids import PolicyGroupID, UserID
from storageos_cli.models.base import Timestamped


class User(Timestamped):
    """A StorageOS user account. The API calls the username ``name``."""

    id: UserID
    username: str = Field(default="", alias="name")
    is_admin: bool = Field(default=False, alias="isAdmin")
    groups: List[PolicyGroupID] = Field(default_factory=list)

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from storageos_cli.ids import NamespaceID
from storageos_cli.models.base import Labels, Timestamped


class Namespace(Timestamped):
    """A namespace scopes volumes."""

    id: NamespaceID
    name: str = ""
    labels: Labels = Field(default_factory=dict)

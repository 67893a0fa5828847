# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from storageos_cli.ids import ClusterID
from storageos_cli.models.base import Timestamped


class Cluster(Timestamped):
    """Cluster wide settings. There is exactly one per deployment."""

    id: ClusterID = ClusterID("")

    disable_telemetry: bool = Field(default=False, alias="disableTelemetry")
    disable_crash_reporting: bool = Field(default=False, alias="disableCrashReporting")
    disable_version_check: bool = Field(default=False, alias="disableVersionCheck")

    log_level: str = Field(default="info", alias="logLevel")
    log_format: str = Field(default="default", alias="logFormat")

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""StorageOS CLI package."""

from storageos_cli.cli.main import app

__all__ = ["app"]

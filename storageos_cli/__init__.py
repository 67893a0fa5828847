# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""StorageOS management CLI."""

__version__ = "0.3.0"

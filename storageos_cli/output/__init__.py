# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Rendering of command results as text, JSON or YAML."""

from storageos_cli.output.base import Displayer, select_displayer
from storageos_cli.output.format import Format

__all__ = ["Displayer", "Format", "select_displayer"]

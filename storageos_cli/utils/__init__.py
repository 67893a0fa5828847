# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Utility functions and helpers."""

from storageos_cli.utils.labels import format_labels, parse_label_pairs
from storageos_cli.utils.logger import default_logger, get_logger
from storageos_cli.utils.parsing import format_duration, parse_bool, parse_duration
from storageos_cli.utils.selectors import Selector, SelectorSet
from storageos_cli.utils.size import format_bytes, parse_bytes

__all__ = [
    "Selector",
    "SelectorSet",
    "default_logger",
    "format_bytes",
    "format_duration",
    "format_labels",
    "get_logger",
    "parse_bool",
    "parse_bytes",
    "parse_duration",
    "parse_label_pairs",
]

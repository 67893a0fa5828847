# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Label sets given on the command line as ``key=value`` pairs."""

from typing import Dict, Iterable

from storageos_cli.exceptions import InvalidLabelError


def parse_label_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """Build a label set from ``key=value`` strings.

    Each item may itself hold several comma separated pairs, so both
    ``--labels a=1 --labels b=2`` and ``--labels a=1,b=2`` work. A repeated
    key keeps its last value.
    """
    labels: Dict[str, str] = {}
    for item in pairs:
        for pair in item.split(","):
            pair = pair.strip()
            if not pair:
                continue
            key, sep, value = pair.partition("=")
            key = key.strip()
            if not sep:
                raise InvalidLabelError(pair)
            if not key:
                raise InvalidLabelError(pair, "label key must not be empty")
            labels[key] = value.strip()
    return labels


def format_labels(labels: Dict[str, str]) -> str:
    """Render a label set as sorted ``key=value`` pairs joined by commas."""
    return ",".join(f"{key}={labels[key]}" for key in sorted(labels))

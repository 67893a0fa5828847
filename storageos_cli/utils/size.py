# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Human readable byte sizes."""

import re

from storageos_cli.exceptions import InvalidSizeError

_UNITS = {
    "": 1,
    "b": 1,
    "k": 1000,
    "kb": 1000,
    "m": 1000**2,
    "mb": 1000**2,
    "g": 1000**3,
    "gb": 1000**3,
    "t": 1000**4,
    "tb": 1000**4,
    "p": 1000**5,
    "pb": 1000**5,
    "ki": 1024,
    "kib": 1024,
    "mi": 1024**2,
    "mib": 1024**2,
    "gi": 1024**3,
    "gib": 1024**3,
    "ti": 1024**4,
    "tib": 1024**4,
    "pi": 1024**5,
    "pib": 1024**5,
}

_SIZE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")

_BASE2_SUFFIXES = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def parse_bytes(value: str) -> int:
    """Parse sizes such as ``42GiB``, ``10gb`` or ``512`` into bytes.

    Units are case-insensitive. SI units (KB, MB, GB) are powers of 1000 and
    IEC units (KiB, MiB, GiB) powers of 1024.
    """
    match = _SIZE.match(value)
    if not match:
        raise InvalidSizeError(value)

    number, unit = match.groups()
    multiplier = _UNITS.get(unit.lower())
    if multiplier is None:
        raise InvalidSizeError(value)

    return int(float(number) * multiplier)


def format_bytes(size: int) -> str:
    """Format a byte count using base 2 units, e.g. ``5.0GiB``."""
    value = float(size)
    for suffix in _BASE2_SUFFIXES:
        if value < 1024 or suffix == _BASE2_SUFFIXES[-1]:
            if suffix == "B":
                return f"{int(value)}B"
            return f"{value:.1f}{suffix}"
        value /= 1024
    return f"{size}B"

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Parsers for configuration values: booleans and durations."""

import re
from datetime import timedelta

from storageos_cli.exceptions import InvalidBooleanError, InvalidDurationError

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_bool(value: str) -> bool:
    """Parse a boolean the way the StorageOS tooling always has.

    Accepts 1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False.
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidBooleanError(value)


def parse_duration(value: str) -> timedelta:
    """Parse a duration string such as ``15s``, ``1m30s`` or ``1.5h``.

    A bare ``0`` is accepted. Every other number needs a unit.
    """
    text = value.strip()
    if not text:
        raise InvalidDurationError(value)

    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    if text == "0":
        return timedelta(0)

    seconds = 0.0
    pos = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            raise InvalidDurationError(value)
        seconds += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()

    if pos == 0 or pos != len(text):
        raise InvalidDurationError(value)

    return timedelta(seconds=sign * seconds)


def format_duration(duration: timedelta) -> str:
    """Render a timedelta as a duration string the API understands."""
    total_ms = round(duration.total_seconds() * 1000)
    if total_ms == 0:
        return "0s"

    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)

    hours, rem = divmod(total_ms, 3600 * 1000)
    minutes, rem = divmod(rem, 60 * 1000)
    seconds, millis = divmod(rem, 1000)

    out = sign
    if hours:
        out += f"{hours}h"
    if minutes:
        out += f"{minutes}m"
    if seconds or millis:
        if millis:
            out += f"{seconds}.{millis:03d}".rstrip("0") + "s"
        else:
            out += f"{seconds}s"
    return out

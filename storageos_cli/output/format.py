# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Output formats supported by the CLI."""

from enum import Enum
from typing import List

from storageos_cli.exceptions import InvalidOutputFormatError


class Format(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def values(cls) -> List[str]:
        return [f.value for f in cls]

    @classmethod
    def parse(cls, value: str) -> "Format":
        """Parse a format name, raising when it is not one of the supported formats."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidOutputFormatError(value, cls.values()) from None

    def __str__(self) -> str:
        return self.value

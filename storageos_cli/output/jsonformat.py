# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""JSON output."""

import json
from typing import Any

from storageos_cli.output.base import StructuredDisplayer

JSON_INDENT = 4


class JSONDisplayer(StructuredDisplayer):
    def render(self, data: Any) -> str:
        return json.dumps(data, ensure_ascii=False, indent=JSON_INDENT)

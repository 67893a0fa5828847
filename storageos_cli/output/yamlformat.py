# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""YAML output."""

from typing import Any

import yaml

from storageos_cli.output.base import StructuredDisplayer


class YAMLDisplayer(StructuredDisplayer):
    def render(self, data: Any) -> str:
        # typer.echo adds the final newline
        return yaml.safe_dump(
            data, default_flow_style=False, sort_keys=False, allow_unicode=True
        ).rstrip("\n")

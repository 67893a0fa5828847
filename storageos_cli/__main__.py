# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Allow `python -m storageos_cli`."""

from storageos_cli.cli.main import app

if __name__ == "__main__":
    app()

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Options shared by several commands."""

from typing import Any

import typer

CAS_HELP = (
    "make changes to the resource conditional upon matching the provided version; "
    "without it version checking is skipped"
)
ASYNC_HELP = (
    "perform the operation asynchronously, using the configured timeout as the "
    "deadline for completion"
)


def cas_option() -> Any:
    return typer.Option(None, "--cas", help=CAS_HELP)


def async_option() -> Any:
    return typer.Option(False, "--async", help=ASYNC_HELP)


def selector_option() -> Any:
    return typer.Option(
        None,
        "--selector",
        "-l",
        help="filter returned results by label selectors: key=value, key==value or key!=value",
    )


def targets_argument(kind: str) -> Any:
    return typer.Argument(None, help=f"{kind} names, or IDs with --use-ids", show_default=False)

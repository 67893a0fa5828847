# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Apply commands."""

from pathlib import Path
from typing import List, Optional

import typer

from storageos_cli.apiclient.params import UpdateLicenceParams
from storageos_cli.cli.errors import Invocation, run
from storageos_cli.cli.options import cas_option
from storageos_cli.exceptions import ArgumentError
from storageos_cli.output.models import LicenceView

apply_app = typer.Typer(help="Apply a change to resources in the cluster", no_args_is_help=True)


def read_licence(args: List[str], from_stdin: bool) -> bytes:
    """Licence key bytes from the file argument or standard input."""
    if from_stdin:
        if args:
            raise ArgumentError("cannot read the licence from a file and stdin at once")
        return typer.get_binary_stream("stdin").read()

    if len(args) != 1:
        raise ArgumentError(
            "must specify exactly one licence file, or --from-stdin",
            {"args": list(args)},
        )
    try:
        return Path(args[0]).read_bytes()
    except OSError as e:
        raise ArgumentError(
            f"unable to read licence file {args[0]}: {e.strerror}", {"path": args[0]}
        ) from e


@apply_app.command("licence")
def apply_licence_command(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, help="path of the licence key file"),
    from_stdin: bool = typer.Option(
        False, "--from-stdin", help="read the licence key from standard input"
    ),
    cas: Optional[str] = cas_option(),
) -> None:
    """Apply a product licence to the cluster."""
    args = args or []

    def _apply(inv: Invocation) -> None:
        key = read_licence(args, from_stdin)
        lic = inv.client.update_licence(key, inv.params(UpdateLicenceParams, cas))
        inv.display.show(LicenceView.from_licence(lic))

    run(ctx, _apply)


def register(app: typer.Typer) -> None:
    """Register apply command group."""
    app.add_typer(apply_app, name="apply")

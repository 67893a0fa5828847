# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for collecting global options from a typer context."""

from typing import List, Optional

import typer
from typer.testing import CliRunner

from storageos_cli.config import FlagSet
from storageos_cli.config.flags import NAMESPACE_FLAG, OUTPUT_FORMAT_FLAG, USE_IDS_FLAG


def _collect(*args: str) -> FlagSet:
    captured = {}
    app = typer.Typer()

    @app.callback()
    def main(
        ctx: typer.Context,
        namespace: str = typer.Option("", "--namespace", "-n"),
        output: str = typer.Option("", "--output", "-o"),
        use_ids: bool = typer.Option(False, "--use-ids"),
        endpoints: Optional[List[str]] = typer.Option(None, "--endpoints"),
    ) -> None:
        captured["flags"] = FlagSet.from_context(ctx)

    @app.command()
    def noop() -> None:
        pass

    result = CliRunner().invoke(app, [*args, "noop"])
    assert result.exit_code == 0, result.output
    return captured["flags"]


class TestFlagSetFromContext:
    def test_given_options_are_changed(self):
        flags = _collect("-n", "prod", "-o", "json", "--use-ids")
        assert flags.changed == {NAMESPACE_FLAG, OUTPUT_FORMAT_FLAG, USE_IDS_FLAG}
        assert flags.get(NAMESPACE_FLAG) == "prod"
        assert flags.get(OUTPUT_FORMAT_FLAG) == "json"
        assert flags.get(USE_IDS_FLAG) is True

    def test_defaults_are_not_changed(self):
        flags = _collect()
        assert flags.changed == set()
        assert flags.get(NAMESPACE_FLAG) == ""

    def test_explicit_empty_value_is_changed(self):
        flags = _collect("--namespace", "")
        assert flags.is_changed(NAMESPACE_FLAG)
        assert flags.get(NAMESPACE_FLAG) == ""

    def test_repeated_list_option(self):
        flags = _collect("--endpoints", "http://a:5705", "--endpoints", "http://b:5705")
        assert flags.is_changed("endpoints")
        assert list(flags.get("endpoints")) == ["http://a:5705", "http://b:5705"]

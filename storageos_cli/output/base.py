# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Displayer interface and selection by output format."""

from abc import ABC, abstractmethod
from dataclasses import asdict, is_dataclass
from datetime import datetime, timedelta
from typing import Any, Optional, Sequence, TextIO, Type

import typer
from pydantic import BaseModel

from storageos_cli.output.format import Format
from storageos_cli.utils.parsing import format_duration

ASYNC_REQUEST_MESSAGE = "request submitted"


def to_serializable(value: Any) -> Any:
    """Convert rich Python values to JSON-serializable primitives."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, "to_dict"):
        return to_serializable(value.to_dict())
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if is_dataclass(value):
        return to_serializable(asdict(value))
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, dict):
        return {str(k): to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_serializable(item) for item in value]
    return str(value)


class Displayer(ABC):
    """Writes command results to an output stream in one format.

    ``kind`` is the record type of a list, needed to lay out an empty list.
    """

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out

    def _echo(self, text: str) -> None:
        typer.echo(text, file=self._out)

    @abstractmethod
    def show(self, item: Any) -> None:
        """A single resource, as shown by ``get``, ``create`` and ``update``."""

    @abstractmethod
    def show_list(self, items: Sequence[Any], kind: Type) -> None: ...

    @abstractmethod
    def describe(self, item: Any) -> None:
        """A single resource in full detail."""

    @abstractmethod
    def describe_list(self, items: Sequence[Any], kind: Type) -> None: ...

    @abstractmethod
    def deleted(self, confirmation: Any) -> None: ...

    @abstractmethod
    def confirm(self, confirmation: Any) -> None:
        """Acknowledge an action with no resource to show, e.g. attach."""

    @abstractmethod
    def async_request(self) -> None:
        """Acknowledge a request accepted for asynchronous completion."""


def select_displayer(fmt: Format, out: Optional[TextIO] = None) -> Displayer:
    """Return the displayer for ``fmt``."""
    from storageos_cli.output.jsonformat import JSONDisplayer
    from storageos_cli.output.text import TextDisplayer
    from storageos_cli.output.yamlformat import YAMLDisplayer

    if fmt == Format.JSON:
        return JSONDisplayer(out)
    if fmt == Format.YAML:
        return YAMLDisplayer(out)
    return TextDisplayer(out)


class StructuredDisplayer(Displayer):
    """Displayer for machine readable formats: every result is dumped as data."""

    @abstractmethod
    def render(self, data: Any) -> str: ...

    def _emit(self, value: Any) -> None:
        self._echo(self.render(to_serializable(value)))

    def show(self, item: Any) -> None:
        self._emit(item)

    def show_list(self, items: Sequence[Any], kind: Type) -> None:
        self._emit(list(items))

    def describe(self, item: Any) -> None:
        self._emit(item)

    def describe_list(self, items: Sequence[Any], kind: Type) -> None:
        self._emit(list(items))

    def deleted(self, confirmation: Any) -> None:
        self._emit(confirmation)

    def confirm(self, confirmation: Any) -> None:
        self._emit(confirmation)

    def async_request(self) -> None:
        self._emit({"message": ASYNC_REQUEST_MESSAGE})

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Equality based label selectors used by ``get`` and ``describe``."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, TypeVar

from storageos_cli.exceptions import InvalidSelectorError

T = TypeVar("T")


@dataclass(frozen=True)
class Selector:
    """A single ``key=value`` or ``key!=value`` requirement."""

    key: str
    value: str
    negate: bool = False

    def matches(self, labels: Dict[str, str]) -> bool:
        if self.negate:
            return labels.get(self.key) != self.value
        return self.key in labels and labels[self.key] == self.value

    @classmethod
    def parse(cls, text: str) -> "Selector":
        text = text.strip()
        for op, negate in (("!=", True), ("==", False), ("=", False)):
            key, sep, value = text.partition(op)
            if sep:
                key = key.strip()
                if not key or "=" in key or "!" in key:
                    break
                return cls(key=key, value=value.strip(), negate=negate)
        raise InvalidSelectorError(text)


class SelectorSet:
    """A conjunction of selectors; an empty set matches everything."""

    def __init__(self, selectors: Sequence[Selector] = ()):
        self.selectors: List[Selector] = list(selectors)

    @classmethod
    def from_strings(cls, *values: str) -> "SelectorSet":
        selectors = []
        for value in values:
            for part in value.split(","):
                if part.strip():
                    selectors.append(Selector.parse(part))
        return cls(selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def matches(self, labels: Dict[str, str]) -> bool:
        return all(s.matches(labels or {}) for s in self.selectors)

    def filter(self, resources: Iterable[T]) -> List[T]:
        """Keep the resources whose ``labels`` satisfy every selector."""
        return [r for r in resources if self.matches(getattr(r, "labels", {}))]

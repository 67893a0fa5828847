# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command-wide deadline shared by every request a command makes."""

import time
from datetime import timedelta
from typing import Callable

from storageos_cli.exceptions import DeadlineExceededError


class Deadline:
    """A point in time after which no further request may be sent."""

    def __init__(self, timeout: timedelta, clock: Callable[[], float] = time.monotonic):
        self.timeout = timeout
        self._clock = clock
        self._expires = clock() + timeout.total_seconds()

    def remaining(self) -> float:
        """Seconds left, raising once none are."""
        left = self._expires - self._clock()
        if left <= 0:
            raise DeadlineExceededError(timeout=self.timeout.total_seconds())
        return left

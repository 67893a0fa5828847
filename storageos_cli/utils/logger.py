# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Logging utilities for the StorageOS CLI.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "STORAGEOS_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(
    name: str = "storageos_cli",
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Get a configured logger.

    Loggers below the package root share the root's handler, so only
    storageos_cli itself gets a handler attached.

    Args:
        name: Logger name
        format_string: Custom format string

    Returns:
        Configured logger
    """
    root = logging.getLogger("storageos_cli")

    if not root.handlers:
        log_level_str = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, log_level_str, logging.WARNING)

        # stdout carries command output, so logs go to stderr.
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(level)

    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger to DEBUG when verbose output is requested."""
    if verbose:
        get_logger().setLevel(logging.DEBUG)


# Default logger instance
default_logger = get_logger()

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""StorageOS API client, transports and request parameters."""

from storageos_cli.apiclient.cache import AuthCachedTransport, SessionCache
from storageos_cli.apiclient.client import Client
from storageos_cli.apiclient.deadline import Deadline
from storageos_cli.apiclient.http import OpenAPITransport
from storageos_cli.apiclient.params import compose
from storageos_cli.apiclient.transport import AuthSession, Transport

__all__ = [
    "AuthCachedTransport",
    "AuthSession",
    "Client",
    "Deadline",
    "OpenAPITransport",
    "SessionCache",
    "Transport",
    "compose",
]

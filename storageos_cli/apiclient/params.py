# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Optional parameters for mutating API requests.

``cas_version`` opts a request into compare-and-set: when it is ``None`` the
server is told to ignore resource versions entirely. ``async_max`` asks the
server to accept the request and finish it in the background within the
given duration.
"""

from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Any, Dict, Optional, Type, TypeVar

from storageos_cli.utils.parsing import format_duration

P = TypeVar("P")


@dataclass
class CASParams:
    cas_version: Optional[str] = None


@dataclass
class AsyncParams:
    async_max: Optional[timedelta] = None


@dataclass
class CASAsyncParams(CASParams):
    async_max: Optional[timedelta] = None


@dataclass
class CreateVolumeParams(AsyncParams):
    pass


@dataclass
class DeleteVolumeParams(CASAsyncParams):
    offline_delete: bool = False


@dataclass
class DeleteNodeParams(CASAsyncParams):
    pass


@dataclass
class DeleteNamespaceParams(CASParams):
    pass


@dataclass
class DeleteUserParams(CASParams):
    pass


@dataclass
class DeletePolicyGroupParams(CASParams):
    pass


@dataclass
class DetachVolumeParams(CASAsyncParams):
    pass


@dataclass
class UpdateVolumeParams(CASAsyncParams):
    pass


@dataclass
class ResizeVolumeParams(CASAsyncParams):
    pass


@dataclass
class SetReplicasParams(CASAsyncParams):
    pass


@dataclass
class AttachNFSVolumeParams(CASAsyncParams):
    pass


@dataclass
class UpdateNFSVolumeExportsParams(CASParams):
    pass


@dataclass
class UpdateNFSVolumeMountEndpointParams(CASParams):
    pass


@dataclass
class UpdateClusterParams(CASParams):
    pass


@dataclass
class UpdateLicenceParams(CASParams):
    pass


def compose(
    params_cls: Type[P],
    cas_version: Optional[str] = None,
    use_async: bool = False,
    timeout: Optional[timedelta] = None,
    **extra: Any,
) -> P:
    """Build request parameters from what the user asked for.

    Args:
        params_cls: The parameter dataclass for the operation.
        cas_version: The version given with ``--cas``, or ``None`` when the
            flag was not used. An empty string still opts into CAS.
        use_async: Whether ``--async`` was given.
        timeout: The resolved command timeout, used as the async deadline.
        **extra: Operation specific fields, e.g. ``offline_delete``.

    Raises:
        TypeError: If the operation does not support the requested mode.
    """
    names = {f.name for f in fields(params_cls)}
    kwargs: Dict[str, Any] = dict(extra)

    if cas_version is not None:
        if "cas_version" not in names:
            raise TypeError(f"{params_cls.__name__} does not support a CAS version")
        kwargs["cas_version"] = cas_version

    if use_async:
        if "async_max" not in names:
            raise TypeError(f"{params_cls.__name__} does not support asynchronous requests")
        kwargs["async_max"] = timeout

    return params_cls(**kwargs)


def version_query(params: Optional[Any]) -> Dict[str, str]:
    """Query parameters controlling version checking and async execution."""
    query = {"ignoreVersion": "true"}
    cas_version = getattr(params, "cas_version", None)
    if cas_version is not None:
        query["ignoreVersion"] = "false"
        query["version"] = cas_version

    async_max = getattr(params, "async_max", None)
    if async_max is not None:
        query["asyncMax"] = format_duration(async_max)

    return query

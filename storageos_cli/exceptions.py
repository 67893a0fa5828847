# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Unified exception classes for the StorageOS CLI.

Each error carries a stable ``code`` used for JSON error output and for
choosing the process exit code.
"""

from typing import List, Optional


class StorageOSError(Exception):
    """Base exception for all StorageOS CLI errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


# ============= Resource Errors =============


class ResourceNotFoundError(StorageOSError):
    """A named or identified resource is absent.

    Built with either ``uid`` or ``name``; the message names whichever was
    used to look the resource up.
    """

    resource_type = "resource"

    def __init__(self, uid: str = "", name: str = "", message: Optional[str] = None):
        if message is None:
            if uid:
                message = f"{self.resource_type} with ID {uid} not found"
            elif name:
                message = f"{self.resource_type} with name {name} not found"
            else:
                message = f"{self.resource_type} not found"
        super().__init__(
            message,
            code="NOT_FOUND",
            details={"type": self.resource_type, "id": uid, "name": name},
        )
        self.uid = uid
        self.name = name

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.uid == other.uid
            and self.name == other.name
            and self.message == other.message
        )

    def __hash__(self):
        return hash((type(self), self.uid, self.name))


class NotFoundError(ResourceNotFoundError):
    """The API reported that the requested resource does not exist."""


class NodeNotFoundError(ResourceNotFoundError):
    resource_type = "node"


class VolumeNotFoundError(ResourceNotFoundError):
    resource_type = "volume"


class NamespaceNotFoundError(ResourceNotFoundError):
    resource_type = "namespace"


class UserNotFoundError(ResourceNotFoundError):
    resource_type = "user"


class PolicyGroupNotFoundError(ResourceNotFoundError):
    resource_type = "policy group"


class AlreadyExistsError(StorageOSError):
    """Resource already exists."""

    def __init__(self, message: str = "resource already exists", details: Optional[dict] = None):
        super().__init__(message, code="ALREADY_EXISTS", details=details)


class UserExistsError(AlreadyExistsError):
    """A user creation request used a username which is already taken."""

    def __init__(self, username: str):
        super().__init__(
            f"another user with username {username} already exists",
            details={"username": username},
        )
        self.username = username


# ============= Invalid Request Errors =============


class InvalidRequestError(StorageOSError):
    """The API rejected the request payload during validation."""

    summary = "request is invalid"

    def __init__(self, details: str = ""):
        message = self.summary
        if details:
            message = f"{message}: {details}"
        super().__init__(message, code="INVALID_REQUEST", details={"reason": details})
        self.reason = details


class InvalidUserCreationError(InvalidRequestError):
    summary = "user creation request is invalid"


# ============= Argument Errors =============


class ArgumentError(StorageOSError):
    """The caller supplied an invalid combination of flags or arguments."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="INVALID_ARGUMENT", details=details)


class TargetOrSelectorError(ArgumentError):
    def __init__(self):
        super().__init__(
            "a target name or unique identifier cannot be used with a label selector"
        )


class NamespaceIDRequiredError(ArgumentError):
    def __init__(self):
        super().__init__("namespace ID must be specified when using resource IDs")


class NoNamespaceSpecifiedError(ArgumentError):
    def __init__(self):
        super().__init__("must specify a namespace to operate within")


class InvalidArgNumError(ArgumentError):
    """Wrong number of positional arguments."""

    def __init__(self, args: List[str], expected: int, usage: str):
        super().__init__(
            f"expected {expected} argument(s) but got {len(args)}, usage: {usage}",
            details={"args": list(args), "expected": expected},
        )


class InvalidSizeError(ArgumentError):
    def __init__(self, value: str):
        super().__init__(
            f"invalid size {value!r}, expected a number with an optional unit such as 42GiB",
            details={"value": value},
        )


class InvalidLabelError(ArgumentError):
    def __init__(self, value: str, reason: str = "expected key=value"):
        super().__init__(f"invalid label {value!r}: {reason}", details={"value": value})


class InvalidSelectorError(ArgumentError):
    def __init__(self, value: str):
        super().__init__(
            f"invalid label selector {value!r}, expected key=value, key==value or key!=value",
            details={"value": value},
        )


# ============= Configuration Errors =============


class ConfigError(StorageOSError):
    """A configuration value could not be resolved."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="CONFIG", details=details)


class InvalidDurationError(ConfigError):
    def __init__(self, value: str):
        super().__init__(f"invalid duration {value!r}", details={"value": value})


class InvalidBooleanError(ConfigError):
    def __init__(self, value: str):
        super().__init__(f"invalid boolean {value!r}", details={"value": value})


class InvalidOutputFormatError(ConfigError):
    def __init__(self, value: str, valid: List[str]):
        super().__init__(
            f"unknown output format {value!r} (valid formats: {', '.join(valid)})",
            details={"value": value, "valid": valid},
        )


class ConfigFileError(ConfigError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"config file {path}: {reason}", details={"path": path})


class PasswordCommandError(ConfigError):
    def __init__(self, exit_code: Optional[int] = None, reason: str = ""):
        if exit_code is not None:
            message = f"password command exited with error code {exit_code}"
        else:
            message = f"password command failed: {reason}"
        super().__init__(message, details={"exit_code": exit_code})
        self.exit_code = exit_code


# ============= Transport Errors =============


class TransportError(StorageOSError):
    """Network or API failure, passed through without local interpretation."""


class APIError(TransportError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, code="API_ERROR", details={"status_code": status_code})
        self.status_code = status_code


class UnauthenticatedError(TransportError):
    def __init__(self, message: str = "authentication failed"):
        super().__init__(message, code="UNAUTHENTICATED")


class PermissionDeniedError(TransportError):
    def __init__(self, message: str = "permission denied"):
        super().__init__(message, code="PERMISSION_DENIED")


class ConflictError(TransportError):
    def __init__(self, message: str = "conflict"):
        super().__init__(message, code="CONFLICT")


class StaleWriteError(TransportError):
    """The CAS version sent with a mutating request did not match."""

    def __init__(self, message: str = "the resource has been modified since the version given"):
        super().__init__(message, code="STALE_WRITE")


class UnavailableError(TransportError):
    def __init__(self, message: str = "service unavailable"):
        super().__init__(message, code="UNAVAILABLE")


class APIConnectionError(TransportError):
    def __init__(self, endpoint: str, reason: str = ""):
        message = f"failed to connect to the StorageOS API at {endpoint}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="CONNECTION_ERROR", details={"endpoint": endpoint})


class DeadlineExceededError(TransportError):
    """Operation timed out."""

    def __init__(self, operation: str = "command", timeout: Optional[float] = None):
        message = f"{operation} timed out"
        if timeout:
            message += f" after {timeout:g}s"
        super().__init__(
            message, code="DEADLINE_EXCEEDED", details={"operation": operation, "timeout": timeout}
        )


class TransportNotConfiguredError(StorageOSError):
    def __init__(self):
        super().__init__(
            "the API client must be configured with a transport before use",
            code="NOT_INITIALIZED",
        )

# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""HTTP transport for the StorageOS v2 API.

Implements the Transport interface with httpx against the ``/v2`` routes,
authenticating with a bearer token obtained from ``/auth/login``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from storageos_cli.apiclient.deadline import Deadline
from storageos_cli.apiclient.params import (
    AttachNFSVolumeParams,
    CreateVolumeParams,
    DeleteNamespaceParams,
    DeleteNodeParams,
    DeletePolicyGroupParams,
    DeleteUserParams,
    DeleteVolumeParams,
    DetachVolumeParams,
    ResizeVolumeParams,
    SetReplicasParams,
    UpdateClusterParams,
    UpdateLicenceParams,
    UpdateNFSVolumeExportsParams,
    UpdateNFSVolumeMountEndpointParams,
    UpdateVolumeParams,
    version_query,
)
from storageos_cli.apiclient.transport import AuthSession, Transport
from storageos_cli.exceptions import (
    AlreadyExistsError,
    APIConnectionError,
    APIError,
    ConflictError,
    DeadlineExceededError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    StaleWriteError,
    StorageOSError,
    UnauthenticatedError,
    UnavailableError,
)
from storageos_cli.ids import NamespaceID, NodeID, PolicyGroupID, UserID, VolumeID
from storageos_cli.models import (
    Cluster,
    Licence,
    Namespace,
    NFSExportConfig,
    Node,
    PolicyGroup,
    PolicySpec,
    User,
    Volume,
)
from storageos_cli.utils.logger import get_logger

logger = get_logger(__name__)

API_PREFIX = "/v2"
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_SESSION_TTL = timedelta(minutes=5)

# Status code to exception class mapping
STATUS_TO_EXCEPTION: Dict[int, Type[StorageOSError]] = {
    401: UnauthenticatedError,
    403: PermissionDeniedError,
    409: ConflictError,
    412: StaleWriteError,
    503: UnavailableError,
}


def _with_version(body: Dict[str, Any], params: Optional[Any]) -> Dict[str, Any]:
    cas_version = getattr(params, "cas_version", None)
    if cas_version is not None:
        body["version"] = cas_version
    return body


M = TypeVar("M", bound=BaseModel)


def _decode(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise APIError(
            f"unexpected {model.__name__} in API response: {e.error_count()} invalid field(s)"
        ) from e


def _decode_list(model: Type[M], data: Any) -> List[M]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise APIError(f"expected a list of {model.__name__} in API response")
    return [_decode(model, item) for item in data]


class OpenAPITransport(Transport):
    """Synchronous StorageOS API transport.

    Examples:
        transport = OpenAPITransport("http://localhost:5705", "storageos-cli/0.3.0")
        transport.authenticate("storageos", "storageos")
        nodes = transport.list_nodes()
    """

    def __init__(
        self,
        endpoint: str,
        user_agent: str,
        deadline: Optional[Deadline] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize OpenAPITransport.

        Args:
            endpoint: Base URL of a StorageOS API node.
            user_agent: Value for the User-Agent header.
            deadline: Command deadline bounding every request.
            transport: Optional httpx transport, used by tests.
        """
        self.endpoint = endpoint.rstrip("/")
        self.deadline = deadline
        self._http = httpx.Client(
            base_url=self.endpoint + API_PREFIX,
            headers={"User-Agent": user_agent},
            timeout=DEFAULT_REQUEST_TIMEOUT,
            transport=transport,
        )

    # ============= Lifecycle =============

    def close(self) -> None:
        self._http.close()

    def use_session(self, session: AuthSession) -> None:
        self._http.headers["Authorization"] = f"Bearer {session.token}"

    def authenticate(self, username: str, password: str) -> AuthSession:
        data = self._request(
            "POST",
            "/auth/login",
            json={"username": username, "password": password},
            raw=True,
        )
        try:
            body = data.json() if data.content else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        session_info = body.get("session") or {}

        token = data.headers.get("Authorization", "")
        if token.startswith("Bearer "):
            token = token[len("Bearer ") :]
        token = token or session_info.get("token", "")
        if not token:
            raise UnauthenticatedError("the API did not return a session token")

        ttl = DEFAULT_SESSION_TTL
        if session_info.get("expiresInSeconds"):
            ttl = timedelta(seconds=int(session_info["expiresInSeconds"]))

        session = AuthSession(
            token=token,
            expires_at=datetime.now(timezone.utc) + ttl,
            user_id=body.get("id", ""),
        )
        self.use_session(session)
        return session

    # ============= Internal Helpers =============

    def _timeout(self) -> float:
        if self.deadline is None:
            return DEFAULT_REQUEST_TIMEOUT
        return self.deadline.remaining()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        conflict: Type[StorageOSError] = ConflictError,
        raw: bool = False,
    ) -> Any:
        """Send a request and decode the response or raise the mapped error."""
        timeout = self._timeout()
        logger.debug("%s %s%s %s", method, API_PREFIX, path, params or "")
        try:
            response = self._http.request(
                method, path, json=json, params=params, timeout=timeout
            )
        except httpx.ConnectTimeout as e:
            raise APIConnectionError(self.endpoint, str(e)) from e
        except httpx.TimeoutException as e:
            raise DeadlineExceededError("request", timeout) from e
        except httpx.TransportError as e:
            raise APIConnectionError(self.endpoint, str(e)) from e

        if not response.is_success:
            self._raise_for_status(response, conflict)
        if raw:
            return response
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"malformed JSON in API response: {e}", response.status_code) from e

    def _raise_for_status(self, response: httpx.Response, conflict: Type[StorageOSError]) -> None:
        """Raise appropriate exception based on status code."""
        message = ""
        try:
            data = response.json()
            if isinstance(data, dict):
                message = data.get("error", "") or data.get("message", "")
        except ValueError:
            message = response.text
        message = message or f"HTTP {response.status_code}"
        status = response.status_code

        if status == 400:
            raise InvalidRequestError(message)
        if status == 404:
            raise NotFoundError(message=message)
        if status == 409:
            raise conflict(message)

        exc_class = STATUS_TO_EXCEPTION.get(status)
        if exc_class is not None:
            raise exc_class(message)
        raise APIError(message, status)

    # ============= Nodes =============

    def get_node(self, uid: NodeID) -> Node:
        return _decode(Node, self._request("GET", f"/nodes/{uid}"))

    def list_nodes(self) -> List[Node]:
        return _decode_list(Node, self._request("GET", "/nodes"))

    def delete_node(self, uid: NodeID, params: Optional[DeleteNodeParams] = None) -> None:
        self._request("DELETE", f"/nodes/{uid}", params=version_query(params))

    # ============= Namespaces =============

    def get_namespace(self, uid: NamespaceID) -> Namespace:
        return _decode(Namespace, self._request("GET", f"/namespaces/{uid}"))

    def list_namespaces(self) -> List[Namespace]:
        return _decode_list(Namespace, self._request("GET", "/namespaces"))

    def create_namespace(self, name: str, labels: Dict[str, str]) -> Namespace:
        data = self._request(
            "POST",
            "/namespaces",
            json={"name": name, "labels": labels},
            conflict=AlreadyExistsError,
        )
        return _decode(Namespace, data)

    def delete_namespace(
        self, uid: NamespaceID, params: Optional[DeleteNamespaceParams] = None
    ) -> None:
        self._request("DELETE", f"/namespaces/{uid}", params=version_query(params))

    # ============= Volumes =============

    def _volume_path(self, namespace_id: NamespaceID, volume_id: VolumeID) -> str:
        return f"/namespaces/{namespace_id}/volumes/{volume_id}"

    def get_volume(self, namespace_id: NamespaceID, uid: VolumeID) -> Volume:
        return _decode(Volume, self._request("GET", self._volume_path(namespace_id, uid)))

    def list_volumes(self, namespace_id: NamespaceID) -> List[Volume]:
        return _decode_list(Volume, self._request("GET", f"/namespaces/{namespace_id}/volumes"))

    def create_volume(
        self,
        namespace_id: NamespaceID,
        name: str,
        description: str,
        fs_type: str,
        size_bytes: int,
        labels: Dict[str, str],
        params: Optional[CreateVolumeParams] = None,
    ) -> Volume:
        query = version_query(params)
        query.pop("ignoreVersion")
        data = self._request(
            "POST",
            f"/namespaces/{namespace_id}/volumes",
            json={
                "name": name,
                "description": description,
                "fsType": fs_type,
                "sizeBytes": size_bytes,
                "labels": labels,
                "namespaceID": namespace_id,
            },
            params=query or None,
            conflict=AlreadyExistsError,
        )
        if data is None:
            return Volume(id=VolumeID(""), name=name, namespace_id=namespace_id)
        return _decode(Volume, data)

    def delete_volume(
        self,
        namespace_id: NamespaceID,
        uid: VolumeID,
        params: Optional[DeleteVolumeParams] = None,
    ) -> None:
        query = version_query(params)
        if params is not None and params.offline_delete:
            query["offlineDelete"] = "true"
        self._request("DELETE", self._volume_path(namespace_id, uid), params=query)

    def attach_volume(
        self, namespace_id: NamespaceID, volume_id: VolumeID, node_id: NodeID
    ) -> None:
        self._request(
            "POST",
            self._volume_path(namespace_id, volume_id) + "/attach",
            json={"nodeID": node_id},
        )

    def detach_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[DetachVolumeParams] = None,
    ) -> None:
        self._request(
            "DELETE",
            self._volume_path(namespace_id, volume_id) + "/attach",
            params=version_query(params),
        )

    def update_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        description: str,
        labels: Dict[str, str],
        params: Optional[UpdateVolumeParams] = None,
    ) -> Optional[Volume]:
        data = self._request(
            "PUT",
            self._volume_path(namespace_id, volume_id),
            json=_with_version({"description": description, "labels": labels}, params),
            params=version_query(params),
        )
        return _decode(Volume, data) if data is not None else None

    def resize_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        size_bytes: int,
        params: Optional[ResizeVolumeParams] = None,
    ) -> Optional[Volume]:
        data = self._request(
            "PUT",
            self._volume_path(namespace_id, volume_id) + "/size",
            json=_with_version({"sizeBytes": size_bytes}, params),
            params=version_query(params),
        )
        return _decode(Volume, data) if data is not None else None

    def set_replicas(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        replicas: int,
        params: Optional[SetReplicasParams] = None,
    ) -> None:
        self._request(
            "PUT",
            self._volume_path(namespace_id, volume_id) + "/replicas",
            json=_with_version({"replicas": replicas}, params),
            params=version_query(params),
        )

    def attach_nfs_volume(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        params: Optional[AttachNFSVolumeParams] = None,
    ) -> None:
        self._request(
            "POST",
            self._volume_path(namespace_id, volume_id) + "/nfs/attach",
            json=_with_version({}, params),
            params=version_query(params),
        )

    def update_nfs_volume_exports(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        exports: List[NFSExportConfig],
        params: Optional[UpdateNFSVolumeExportsParams] = None,
    ) -> None:
        body = {"exportConfigs": [e.model_dump(by_alias=True) for e in exports]}
        self._request(
            "PUT",
            self._volume_path(namespace_id, volume_id) + "/nfs/export-config",
            json=_with_version(body, params),
            params=version_query(params),
        )

    def update_nfs_volume_mount_endpoint(
        self,
        namespace_id: NamespaceID,
        volume_id: VolumeID,
        endpoint: str,
        params: Optional[UpdateNFSVolumeMountEndpointParams] = None,
    ) -> None:
        self._request(
            "PUT",
            self._volume_path(namespace_id, volume_id) + "/nfs/mount-endpoint",
            json=_with_version({"mountEndpoint": endpoint}, params),
            params=version_query(params),
        )

    # ============= Users and policy groups =============

    def get_user(self, uid: UserID) -> User:
        return _decode(User, self._request("GET", f"/users/{uid}"))

    def list_users(self) -> List[User]:
        return _decode_list(User, self._request("GET", "/users"))

    def create_user(
        self, username: str, password: str, with_admin: bool, groups: List[PolicyGroupID]
    ) -> User:
        data = self._request(
            "POST",
            "/users",
            json={
                "username": username,
                "password": password,
                "isAdmin": with_admin,
                "groups": list(groups),
            },
            conflict=AlreadyExistsError,
        )
        return _decode(User, data)

    def delete_user(self, uid: UserID, params: Optional[DeleteUserParams] = None) -> None:
        self._request("DELETE", f"/users/{uid}", params=version_query(params))

    def get_policy_group(self, uid: PolicyGroupID) -> PolicyGroup:
        return _decode(PolicyGroup, self._request("GET", f"/policies/{uid}"))

    def list_policy_groups(self) -> List[PolicyGroup]:
        return _decode_list(PolicyGroup, self._request("GET", "/policies"))

    def create_policy_group(self, name: str, specs: List[PolicySpec]) -> PolicyGroup:
        data = self._request(
            "POST",
            "/policies",
            json={"name": name, "specs": [s.model_dump(by_alias=True) for s in specs]},
            conflict=AlreadyExistsError,
        )
        return _decode(PolicyGroup, data)

    def delete_policy_group(
        self, uid: PolicyGroupID, params: Optional[DeletePolicyGroupParams] = None
    ) -> None:
        self._request("DELETE", f"/policies/{uid}", params=version_query(params))

    # ============= Cluster =============

    def get_cluster(self) -> Cluster:
        return _decode(Cluster, self._request("GET", "/cluster"))

    def update_cluster(
        self, resource: Cluster, params: Optional[UpdateClusterParams] = None
    ) -> Cluster:
        body = resource.model_dump(
            by_alias=True,
            include={
                "disable_telemetry",
                "disable_crash_reporting",
                "disable_version_check",
                "log_level",
                "log_format",
            },
        )
        data = self._request(
            "PUT", "/cluster", json=_with_version(body, params), params=version_query(params)
        )
        return _decode(Cluster, data)

    def get_licence(self) -> Licence:
        return _decode(Licence, self._request("GET", "/cluster/licence"))

    def update_licence(
        self, licence: bytes, params: Optional[UpdateLicenceParams] = None
    ) -> Licence:
        data = self._request(
            "PUT",
            "/cluster/licence",
            json=_with_version({"key": licence.decode("utf-8")}, params),
            params=version_query(params),
        )
        return _decode(Licence, data)

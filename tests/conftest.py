# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: an in-memory transport and a CLI wired to it."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest

from storageos_cli.apiclient import AuthSession, Client, Transport
from storageos_cli.exceptions import AlreadyExistsError, NotFoundError
from storageos_cli.ids import (
    ClusterID,
    DeploymentID,
    NamespaceID,
    NodeID,
    PolicyGroupID,
    UserID,
    VolumeID,
)
from storageos_cli.models import (
    Cluster,
    Deployment,
    Licence,
    Namespace,
    Node,
    PolicyGroup,
    PolicySpec,
    User,
    Volume,
)

CREATED = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeTransport(Transport):
    """Transport holding resources in memory and recording every mutating call."""

    def __init__(self):
        self.nodes: List[Node] = []
        self.namespaces: List[Namespace] = []
        self.volumes: Dict[NamespaceID, List[Volume]] = {}
        self.users: List[User] = []
        self.groups: List[PolicyGroup] = []
        self.cluster = Cluster(id=ClusterID("cluster-1"), created_at=CREATED, version="NQ")
        self.licence = Licence(
            cluster_id=ClusterID("cluster-1"),
            cluster_capacity_bytes=5 * 1024**4,
            used_bytes=1024**3,
            kind="professional",
            features=["nfs", "csi"],
            customer_name="acme",
        )
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.logins: List[Tuple[str, str]] = []
        self.session: Optional[AuthSession] = None
        self.closed = False

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def called(self, name: str) -> List[Tuple[Any, ...]]:
        return [args for call, args in self.calls if call == name]

    # Lifecycle

    def authenticate(self, username: str, password: str) -> AuthSession:
        self.logins.append((username, password))
        self.session = AuthSession(
            token="token", expires_at=datetime.now(timezone.utc) + timedelta(minutes=5)
        )
        return self.session

    def use_session(self, session: AuthSession) -> None:
        self.session = session

    def close(self) -> None:
        self.closed = True

    # Nodes

    def get_node(self, uid):
        for n in self.nodes:
            if n.id == uid:
                return n
        raise NotFoundError(message=f"node {uid} not found")

    def list_nodes(self):
        return list(self.nodes)

    def delete_node(self, uid, params=None):
        self._record("delete_node", uid, params)

    # Namespaces

    def get_namespace(self, uid):
        for ns in self.namespaces:
            if ns.id == uid:
                return ns
        raise NotFoundError(message=f"namespace {uid} not found")

    def list_namespaces(self):
        return list(self.namespaces)

    def create_namespace(self, name, labels):
        self._record("create_namespace", name, labels)
        ns = Namespace(id=NamespaceID(f"ns-{name}"), name=name, labels=labels, created_at=CREATED)
        self.namespaces.append(ns)
        return ns

    def delete_namespace(self, uid, params=None):
        self._record("delete_namespace", uid, params)

    # Volumes

    def get_volume(self, namespace_id, uid):
        for vol in self.volumes.get(namespace_id, []):
            if vol.id == uid:
                return vol
        raise NotFoundError(message=f"volume {uid} not found")

    def list_volumes(self, namespace_id):
        return list(self.volumes.get(namespace_id, []))

    def create_volume(self, namespace_id, name, description, fs_type, size_bytes, labels, params=None):
        self._record(
            "create_volume", namespace_id, name, description, fs_type, size_bytes, labels, params
        )
        if any(v.name == name for v in self.volumes.get(namespace_id, [])):
            raise AlreadyExistsError(f"volume {name} already exists")
        vol = Volume(
            id=VolumeID(f"vol-{name}"),
            name=name,
            description=description,
            namespace_id=namespace_id,
            labels=labels,
            filesystem=fs_type,
            size_bytes=size_bytes,
            created_at=CREATED,
        )
        self.volumes.setdefault(namespace_id, []).append(vol)
        return vol

    def delete_volume(self, namespace_id, uid, params=None):
        self._record("delete_volume", namespace_id, uid, params)

    def attach_volume(self, namespace_id, volume_id, node_id):
        self._record("attach_volume", namespace_id, volume_id, node_id)

    def detach_volume(self, namespace_id, volume_id, params=None):
        self._record("detach_volume", namespace_id, volume_id, params)

    def update_volume(self, namespace_id, volume_id, description, labels, params=None):
        self._record("update_volume", namespace_id, volume_id, description, labels, params)
        vol = self.get_volume(namespace_id, volume_id)
        return vol.model_copy(update={"description": description, "labels": labels})

    def resize_volume(self, namespace_id, volume_id, size_bytes, params=None):
        self._record("resize_volume", namespace_id, volume_id, size_bytes, params)
        vol = self.get_volume(namespace_id, volume_id)
        return vol.model_copy(update={"size_bytes": size_bytes})

    def set_replicas(self, namespace_id, volume_id, replicas, params=None):
        self._record("set_replicas", namespace_id, volume_id, replicas, params)

    def attach_nfs_volume(self, namespace_id, volume_id, params=None):
        self._record("attach_nfs_volume", namespace_id, volume_id, params)

    def update_nfs_volume_exports(self, namespace_id, volume_id, exports, params=None):
        self._record("update_nfs_volume_exports", namespace_id, volume_id, exports, params)

    def update_nfs_volume_mount_endpoint(self, namespace_id, volume_id, endpoint, params=None):
        self._record("update_nfs_volume_mount_endpoint", namespace_id, volume_id, endpoint, params)

    # Users and policy groups

    def get_user(self, uid):
        for u in self.users:
            if u.id == uid:
                return u
        raise NotFoundError(message=f"user {uid} not found")

    def list_users(self):
        return list(self.users)

    def create_user(self, username, password, with_admin, groups):
        self._record("create_user", username, password, with_admin, groups)
        if any(u.username == username for u in self.users):
            raise AlreadyExistsError("username taken")
        user = User(
            id=UserID(f"user-{username}"),
            username=username,
            is_admin=with_admin,
            groups=list(groups),
            created_at=CREATED,
        )
        self.users.append(user)
        return user

    def delete_user(self, uid, params=None):
        self._record("delete_user", uid, params)

    def get_policy_group(self, uid):
        for g in self.groups:
            if g.id == uid:
                return g
        raise NotFoundError(message=f"policy group {uid} not found")

    def list_policy_groups(self):
        return list(self.groups)

    def create_policy_group(self, name, specs):
        self._record("create_policy_group", name, specs)
        group = PolicyGroup(id=PolicyGroupID(f"pg-{name}"), name=name, specs=specs)
        self.groups.append(group)
        return group

    def delete_policy_group(self, uid, params=None):
        self._record("delete_policy_group", uid, params)

    # Cluster

    def get_cluster(self):
        return self.cluster

    def update_cluster(self, resource, params=None):
        self._record("update_cluster", resource, params)
        self.cluster = resource
        return resource

    def get_licence(self):
        return self.licence

    def update_licence(self, licence, params=None):
        self._record("update_licence", licence, params)
        return self.licence


def _deployment(uid: str, node: str, health: str = "ready") -> Deployment:
    return Deployment(id=DeploymentID(uid), node_id=NodeID(node), health=health)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A small cluster: two nodes, two namespaces, two volumes, two users, one group."""
    t = FakeTransport()
    t.nodes = [
        Node(id=NodeID("node-1"), name="alpha", health="online", labels={"zone": "a"}, created_at=CREATED),
        Node(id=NodeID("node-2"), name="beta", health="online", labels={"zone": "b"}, created_at=CREATED),
    ]
    t.namespaces = [
        Namespace(id=NamespaceID("ns-default"), name="default", created_at=CREATED),
        Namespace(id=NamespaceID("ns-prod"), name="prod", labels={"env": "prod"}, created_at=CREATED),
    ]
    t.volumes = {
        NamespaceID("ns-default"): [
            Volume(
                id=VolumeID("vol-1"),
                name="db",
                namespace_id=NamespaceID("ns-default"),
                labels={"app": "db", "storageos.com/replicas": "1"},
                size_bytes=5 * 1024**3,
                attached_on=NodeID("node-1"),
                master=_deployment("dep-1", "node-1"),
                replicas=[_deployment("dep-2", "node-2")],
                created_at=CREATED,
                version="Mw",
            ),
            Volume(
                id=VolumeID("vol-2"),
                name="cache",
                namespace_id=NamespaceID("ns-default"),
                labels={"app": "web"},
                size_bytes=1024**3,
                master=_deployment("dep-3", "node-gone", "unknown"),
                created_at=CREATED,
            ),
        ],
        NamespaceID("ns-prod"): [
            Volume(
                id=VolumeID("vol-3"),
                name="db",
                namespace_id=NamespaceID("ns-prod"),
                master=_deployment("dep-4", "node-2"),
                created_at=CREATED,
            ),
        ],
    }
    t.groups = [
        PolicyGroup(
            id=PolicyGroupID("pg-1"),
            name="devs",
            specs=[PolicySpec(namespace_id=NamespaceID("ns-default"), resource_type="*")],
            created_at=CREATED,
        ),
    ]
    t.users = [
        User(id=UserID("user-1"), username="alice", groups=[PolicyGroupID("pg-1")], created_at=CREATED),
        User(id=UserID("user-2"), username="bob", is_admin=True, created_at=CREATED),
    ]
    return t


@pytest.fixture
def client(fake_transport) -> Client:
    return Client(fake_transport)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear STORAGEOS_* variables and point the config file at an empty file."""
    import os

    for name in list(os.environ):
        if name.startswith("STORAGEOS_"):
            monkeypatch.delenv(name, raising=False)
    config = tmp_path / "config.yaml"
    config.write_text("")
    monkeypatch.setenv("STORAGEOS_CONFIG", str(config))
    return config


@pytest.fixture
def cli(monkeypatch, clean_env, fake_transport):
    """Run the CLI against the fake transport; returns a callable taking argv."""
    from typer.testing import CliRunner

    import storageos_cli.cli.context as context_module
    from storageos_cli.cli.main import app

    monkeypatch.setattr(
        context_module, "create_transport", lambda config, deadline=None: fake_transport
    )
    runner = CliRunner()

    def invoke(*args: str, input: Optional[str] = None):
        return runner.invoke(app, list(args), input=input)

    return invoke

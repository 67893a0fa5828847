# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Human readable output: tables for listings, key/value blocks for descriptions."""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, TextIO, Tuple, Type

from tabulate import tabulate

from storageos_cli.models import Namespace, Node, PolicyGroup
from storageos_cli.output.base import ASYNC_REQUEST_MESSAGE, Displayer
from storageos_cli.output.models import (
    ClusterView,
    DeploymentView,
    LicenceView,
    NamespaceDeletion,
    NFSUpdate,
    NodeDeletion,
    NodeDescription,
    PolicyGroupDeletion,
    ReplicasUpdate,
    UserDeletion,
    UserView,
    VolumeAttachment,
    VolumeDeletion,
    VolumeDetachment,
    VolumeUpdate,
    VolumeView,
)
from storageos_cli.utils.labels import format_labels
from storageos_cli.utils.size import format_bytes

_MAX_COL_WIDTH = 256

Row = List[Any]


def _truncate(val: Any) -> Any:
    """Truncate a value to _MAX_COL_WIDTH for table display."""
    s = str(val) if not isinstance(val, str) else val
    return s[: _MAX_COL_WIDTH - 3] + "..." if len(s) > _MAX_COL_WIDTH else val


def format_age(then: Optional[datetime], now: datetime) -> str:
    """Compact age such as ``42s``, ``5m``, ``3h`` or ``12d``."""
    if then is None:
        return ""
    if then.tzinfo is None:
        then = then.replace(tzinfo=timezone.utc)
    seconds = max(int((now - then).total_seconds()), 0)
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if seconds >= size:
            return f"{seconds // size}{unit}"
    return f"{seconds}s"


def _location(vol: VolumeView) -> str:
    if vol.master is None:
        return ""
    return f"{vol.master.node_name} ({vol.master.health})"


def _replica_summary(vol: VolumeView) -> str:
    ready = sum(1 for r in vol.replicas if r.health == "ready")
    return f"{ready}/{len(vol.replicas)}"


def _deployment_line(d: DeploymentView) -> str:
    line = f"{d.node_name} ({d.node_id}) {d.health}"
    if d.sync_progress is not None:
        line += (
            f", {format_bytes(d.sync_progress.bytes_remaining)} remaining,"
            f" {d.sync_progress.estimated_seconds_remaining}s to go"
        )
    return line


class TextDisplayer(Displayer):
    """Plain text tables in the style of kubectl."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        super().__init__(out)
        self._now = now

    # ============= Tables =============

    def _age(self, then: Optional[datetime]) -> str:
        return format_age(then, self._now())

    def _columns(self) -> Dict[Type, Tuple[List[str], Callable[[Any], Row]]]:
        return {
            Node: (
                ["NAME", "HEALTH", "AGE", "LABELS"],
                lambda n: [n.name, n.health, self._age(n.created_at), format_labels(n.labels)],
            ),
            VolumeView: (
                ["NAMESPACE", "NAME", "SIZE", "LOCATION", "ATTACHED ON", "REPLICAS", "AGE"],
                lambda v: [
                    v.namespace_name,
                    v.name,
                    format_bytes(v.size_bytes),
                    _location(v),
                    v.attached_on_name,
                    _replica_summary(v),
                    self._age(v.created_at),
                ],
            ),
            Namespace: (
                ["NAME", "AGE"],
                lambda ns: [ns.name, self._age(ns.created_at)],
            ),
            UserView: (
                ["NAME", "ROLE", "AGE", "GROUPS"],
                lambda u: [
                    u.username,
                    "admin" if u.is_admin else "user",
                    self._age(u.created_at),
                    ",".join(g.name or g.id for g in u.groups),
                ],
            ),
            PolicyGroup: (
                ["NAME", "USERS", "SPECS", "AGE"],
                lambda g: [g.name, len(g.users), len(g.specs), self._age(g.created_at)],
            ),
            ClusterView: (
                ["ID", "LOG LEVEL", "LOG FORMAT", "NODES", "AGE"],
                lambda c: [c.id, c.log_level, c.log_format, len(c.nodes), self._age(c.created_at)],
            ),
            LicenceView: (
                ["CLUSTER CAPACITY", "USED", "KIND", "EXPIRATION", "FEATURES"],
                lambda lic: [
                    format_bytes(lic.cluster_capacity_bytes),
                    format_bytes(lic.used_bytes),
                    lic.kind,
                    lic.expires_at.isoformat() if lic.expires_at else "",
                    ",".join(lic.features),
                ],
            ),
            VolumeUpdate: (
                ["NAME", "DESCRIPTION", "SIZE", "LABELS"],
                lambda u: [u.name, u.description, format_bytes(u.size_bytes), format_labels(u.labels)],
            ),
        }

    def _table(self, items: Sequence[Any], kind: Type) -> str:
        headers, row = self._columns()[kind]
        values = [[_truncate(v) for v in row(item)] for item in items]
        return tabulate(values, headers=headers, tablefmt="plain")

    def show(self, item: Any) -> None:
        self._echo(self._table([item], type(item)))

    def show_list(self, items: Sequence[Any], kind: Type) -> None:
        self._echo(self._table(items, kind))

    # ============= Descriptions =============

    def _fields(self, item: Any) -> List[Tuple[str, Any]]:
        if isinstance(item, NodeDescription):
            return [
                ("ID", item.id),
                ("Name", item.name),
                ("Health", item.health),
                ("Addresses:", ""),
                ("  Data Transfer address", item.io_address),
                ("  Gossip address", item.gossip_address),
                ("  Supervisor address", item.supervisor_address),
                ("  Clustering address", item.clustering_address),
                ("Labels", format_labels(item.labels)),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
                ("Version", item.version),
                ("Available capacity", self._capacity(item)),
                ("Local volume deployments:", ""),
            ] + [
                (f"  {hv.namespace_name}/{hv.name}", f"{hv.kind} {hv.deployment_id} {hv.health}")
                for hv in item.hosted_volumes
            ]
        if isinstance(item, VolumeView):
            fields = [
                ("ID", item.id),
                ("Name", item.name),
                ("Description", item.description),
                ("AttachedOn", self._attached_on(item)),
                ("Attachment Type", item.attachment_type),
                ("NFS", ""),
                ("  Service Endpoint", item.nfs.service_endpoint),
                ("  Exports", len(item.nfs.exports)),
                ("Namespace", f"{item.namespace_name} ({item.namespace_id})"),
                ("Labels", format_labels(item.labels)),
                ("Filesystem", item.filesystem),
                ("Size", f"{format_bytes(item.size_bytes)} ({item.size_bytes} bytes)"),
                ("Version", item.version),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
            ]
            if item.master is not None:
                fields.append(("Master:", ""))
                fields.append(("  ID", item.master.id))
                fields.append(("  Node", _deployment_line(item.master)))
            if item.replicas:
                fields.append(("Replicas:", ""))
                for r in item.replicas:
                    fields.append(("  ID", r.id))
                    fields.append(("  Node", _deployment_line(r)))
            return fields
        if isinstance(item, Namespace):
            return [
                ("ID", item.id),
                ("Name", item.name),
                ("Labels", format_labels(item.labels)),
                ("Version", item.version),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
            ]
        if isinstance(item, UserView):
            return [
                ("ID", item.id),
                ("Username", item.username),
                ("Is Admin", item.is_admin),
                ("Groups", ",".join(g.name or g.id for g in item.groups)),
                ("Version", item.version),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
            ]
        if isinstance(item, PolicyGroup):
            fields = [
                ("ID", item.id),
                ("Name", item.name),
                ("Version", item.version),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
                ("Users", ",".join(u.username for u in item.users)),
                ("Specs:", ""),
            ]
            for spec in item.specs:
                access = "read-only" if spec.read_only else "read-write"
                fields.append((f"  {spec.namespace_id}", f"{spec.resource_type} {access}"))
            return fields
        if isinstance(item, ClusterView):
            return [
                ("ID", item.id),
                ("Disable Telemetry", item.disable_telemetry),
                ("Disable Crash Reporting", item.disable_crash_reporting),
                ("Disable Version Check", item.disable_version_check),
                ("Log Level", item.log_level),
                ("Log Format", item.log_format),
                ("Created at", self._timestamp(item.created_at)),
                ("Updated at", self._timestamp(item.updated_at)),
                ("Version", item.version),
                ("Nodes:", ""),
            ] + [(f"  {n.name}", f"{n.id} {n.health}") for n in item.nodes]
        if isinstance(item, LicenceView):
            return [
                ("ClusterID", item.cluster_id),
                ("Expiration", self._timestamp(item.expires_at)),
                ("Capacity", format_bytes(item.cluster_capacity_bytes)),
                ("Used", format_bytes(item.used_bytes)),
                ("Kind", item.kind),
                ("Customer name", item.customer_name),
                ("Features", ",".join(item.features)),
            ]
        raise TypeError(f"cannot describe {type(item).__name__}")

    def _timestamp(self, when: Optional[datetime]) -> str:
        if when is None:
            return ""
        return f"{when.isoformat()} ({self._age(when)} ago)"

    @staticmethod
    def _attached_on(vol: VolumeView) -> str:
        if not vol.attached_on:
            return ""
        return f"{vol.attached_on_name} ({vol.attached_on})"

    @staticmethod
    def _capacity(item: NodeDescription) -> str:
        if not item.capacity_total:
            return ""
        used = item.capacity_total - item.capacity_free
        return (
            f"{format_bytes(item.capacity_free)}/{format_bytes(item.capacity_total)}"
            f" ({format_bytes(used)} in use)"
        )

    def _block(self, item: Any) -> str:
        rows = [[key, _truncate(value)] for key, value in self._fields(item)]
        return tabulate(rows, tablefmt="plain")

    def describe(self, item: Any) -> None:
        self._echo(self._block(item))

    def describe_list(self, items: Sequence[Any], kind: Type) -> None:
        self._echo("\n\n".join(self._block(item) for item in items))

    # ============= Confirmations =============

    def deleted(self, confirmation: Any) -> None:
        if isinstance(confirmation, VolumeDeletion):
            self._echo(f"deleted volume {confirmation.id} from namespace {confirmation.namespace}")
        elif isinstance(confirmation, NodeDeletion):
            self._echo(f"deleted node {confirmation.id}")
        elif isinstance(confirmation, NamespaceDeletion):
            self._echo(f"deleted namespace {confirmation.id}")
        elif isinstance(confirmation, UserDeletion):
            self._echo(f"deleted user {confirmation.id}")
        elif isinstance(confirmation, PolicyGroupDeletion):
            self._echo(f"deleted policy group {confirmation.id}")
        else:
            raise TypeError(f"unknown deletion {type(confirmation).__name__}")

    def confirm(self, confirmation: Any) -> None:
        if isinstance(confirmation, VolumeAttachment):
            self._echo(f"attached volume {confirmation.volume} to node {confirmation.node}")
        elif isinstance(confirmation, VolumeDetachment):
            self._echo(f"detached volume {confirmation.volume}")
        elif isinstance(confirmation, ReplicasUpdate):
            self._echo(
                f"set replica count of volume {confirmation.volume} to {confirmation.replicas}"
            )
        elif isinstance(confirmation, NFSUpdate):
            if confirmation.action == "attach":
                self._echo(f"attached volume {confirmation.volume} for NFS")
            elif confirmation.action == "endpoint":
                self._echo(
                    f"set NFS mount endpoint of volume {confirmation.volume}"
                    f" to {confirmation.endpoint}"
                )
            else:
                self._echo(
                    f"updated NFS exports of volume {confirmation.volume}"
                    f" ({confirmation.exports} export(s))"
                )
        else:
            raise TypeError(f"unknown confirmation {type(confirmation).__name__}")

    def async_request(self) -> None:
        self._echo(ASYNC_REQUEST_MESSAGE)

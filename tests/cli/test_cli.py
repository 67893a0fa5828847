# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""End-to-end tests of the command tree against an in-memory transport."""

import json
from datetime import timedelta

import yaml

from storageos_cli.exceptions import APIConnectionError
from storageos_cli.ids import NamespaceID, NodeID, VolumeID
from storageos_cli.models import NFSExportConfig


class TestVersion:
    def test_version_command(self, cli):
        result = cli("version")
        assert result.exit_code == 0
        assert result.output.strip() == "StorageOS CLI version: 0.3.0"

    def test_version_flag(self, cli):
        result = cli("--version")
        assert result.exit_code == 0
        assert "StorageOS CLI version: 0.3.0" in result.output

    def test_help_lists_commands(self, cli):
        result = cli("--help")
        assert result.exit_code == 0
        for command in ("get", "describe", "create", "delete", "update", "attach", "nfs"):
            assert command in result.output
        assert "STORAGEOS_NAMESPACE" in result.output


class TestGet:
    def test_nodes(self, cli, fake_transport):
        result = cli("get", "node")
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].split()[:2] == ["NAME", "HEALTH"]
        assert "alpha" in lines[1]
        assert "beta" in lines[2]
        assert fake_transport.logins == [("storageos", "storageos")]
        assert fake_transport.closed

    def test_node_selector(self, cli):
        result = cli("get", "node", "-l", "zone=b")
        assert result.exit_code == 0
        assert "beta" in result.output
        assert "alpha" not in result.output

    def test_missing_node(self, cli):
        result = cli("get", "node", "gamma")
        assert result.exit_code == 1
        assert "node with name gamma not found" in result.output

    def test_name_and_selector(self, cli):
        result = cli("get", "node", "alpha", "-l", "zone=a")
        assert result.exit_code == 2
        assert "cannot be used with a label selector" in result.output

    def test_volumes_in_default_namespace(self, cli):
        result = cli("get", "volume")
        assert result.exit_code == 0, result.output
        assert "db" in result.output
        assert "cache" in result.output
        assert "alpha (ready)" in result.output

    def test_single_volume(self, cli):
        result = cli("get", "volume", "db")
        assert result.exit_code == 0
        assert "db" in result.output
        assert "cache" not in result.output

    def test_namespace_from_env(self, cli, monkeypatch):
        monkeypatch.setenv("STORAGEOS_NAMESPACE", "prod")
        result = cli("get", "volume")
        assert result.exit_code == 0
        assert "cache" not in result.output
        assert "prod" in result.output

    def test_namespace_flag_beats_env(self, cli, monkeypatch):
        monkeypatch.setenv("STORAGEOS_NAMESPACE", "default")
        result = cli("-n", "prod", "get", "volume")
        assert result.exit_code == 0
        assert "cache" not in result.output

    def test_all_namespaces(self, cli):
        result = cli("get", "volume", "-A")
        assert result.exit_code == 0
        assert "prod" in result.output
        assert "cache" in result.output

    def test_all_namespaces_with_names(self, cli):
        result = cli("get", "volume", "-A", "db")
        assert result.exit_code == 2

    def test_empty_namespace(self, cli):
        result = cli("-n", "", "get", "volume")
        assert result.exit_code == 2
        assert "must specify a namespace" in result.output

    def test_use_ids_with_default_namespace(self, cli):
        result = cli("--use-ids", "get", "volume")
        assert result.exit_code == 2
        assert "namespace ID must be specified" in result.output

    def test_use_ids(self, cli):
        result = cli("--use-ids", "-n", "ns-default", "get", "volume", "vol-2")
        assert result.exit_code == 0, result.output
        assert "cache" in result.output

    def test_json_output(self, cli):
        result = cli("-o", "json", "get", "node", "alpha")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["id"] == "node-1"
        assert data["labels"] == {"zone": "a"}

    def test_yaml_output(self, cli):
        result = cli("-o", "yaml", "get", "namespace")
        assert result.exit_code == 0
        assert [ns["name"] for ns in yaml.safe_load(result.output)] == ["default", "prod"]

    def test_invalid_output_format(self, cli, monkeypatch):
        monkeypatch.setenv("STORAGEOS_OUTPUT_FORMAT", "xml")
        result = cli("get", "node")
        assert result.exit_code == 2
        assert "unknown output format 'xml'" in result.output

    def test_json_error(self, cli):
        result = cli("-o", "json", "get", "user", "carol")
        assert result.exit_code == 1
        assert '"code": "NOT_FOUND"' in result.output

    def test_users_show_group_names(self, cli):
        result = cli("get", "user", "alice")
        assert result.exit_code == 0
        assert "devs" in result.output

    def test_cluster(self, cli):
        result = cli("get", "cluster")
        assert result.exit_code == 0
        assert "cluster-1" in result.output

    def test_licence(self, cli):
        result = cli("get", "licence")
        assert result.exit_code == 0
        assert "professional" in result.output
        assert "csi,nfs" in result.output

    def test_connection_failure(self, cli, fake_transport, monkeypatch):
        def refuse(username, password):
            raise APIConnectionError("http://localhost:5705", "connection refused")

        monkeypatch.setattr(fake_transport, "authenticate", refuse)
        result = cli("get", "node")
        assert result.exit_code == 3
        assert "failed to connect" in result.output


class TestDescribe:
    def test_node_lists_deployments(self, cli):
        result = cli("describe", "node", "beta")
        assert result.exit_code == 0, result.output
        assert "default/db" in result.output
        assert "prod/db" in result.output

    def test_volume(self, cli):
        result = cli("describe", "volume", "db")
        assert result.exit_code == 0
        assert "default (ns-default)" in result.output
        assert "Replicas:" in result.output

    def test_policy_group(self, cli):
        result = cli("describe", "policy-group", "devs")
        assert result.exit_code == 0
        assert "ns-default" in result.output


class TestCreate:
    def test_volume_labels(self, cli, fake_transport):
        result = cli(
            "create", "volume", "data", "-l", "app=x", "--replicas", "2", "--no-cache", "-s", "1GiB"
        )
        assert result.exit_code == 0, result.output
        ns_id, name, _, fs_type, size_bytes, labels, params = fake_transport.called(
            "create_volume"
        )[0]
        assert (ns_id, name, fs_type, size_bytes) == ("ns-default", "data", "ext4", 1024**3)
        assert labels == {
            "app": "x",
            "storageos.com/replicas": "2",
            "storageos.com/nocache": "true",
        }
        assert params.async_max is None
        assert "data" in result.output

    def test_volume_async(self, cli, fake_transport):
        result = cli("--timeout", "30s", "create", "volume", "data", "--async")
        assert result.exit_code == 0
        assert result.output.strip() == "request submitted"
        params = fake_transport.called("create_volume")[0][-1]
        assert params.async_max == timedelta(seconds=30)

    def test_volume_exists(self, cli):
        result = cli("create", "volume", "db")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_invalid_size(self, cli, fake_transport):
        result = cli("create", "volume", "data", "-s", "lots")
        assert result.exit_code == 2
        assert fake_transport.called("create_volume") == []

    def test_user(self, cli, fake_transport):
        result = cli("create", "user", "carol", "--password", "pw", "--groups", "devs")
        assert result.exit_code == 0, result.output
        assert fake_transport.called("create_user") == [("carol", "pw", False, ["pg-1"])]
        assert "carol" in result.output
        assert "devs" in result.output

    def test_user_password_prompt(self, cli, fake_transport):
        result = cli("create", "user", "carol", input="pw\npw\n")
        assert result.exit_code == 0, result.output
        assert fake_transport.called("create_user")[0][1] == "pw"

    def test_user_taken(self, cli):
        result = cli("create", "user", "alice", "--password", "pw")
        assert result.exit_code == 1
        assert "another user with username alice already exists" in result.output

    def test_namespace(self, cli, fake_transport):
        result = cli("create", "namespace", "staging", "-l", "env=staging")
        assert result.exit_code == 0
        assert fake_transport.called("create_namespace") == [("staging", {"env": "staging"})]

    def test_policy_group(self, cli, fake_transport):
        result = cli("create", "policy-group", "ops", "-r", "default:volume:ro,prod:*:rw")
        assert result.exit_code == 0, result.output
        name, specs = fake_transport.called("create_policy_group")[0]
        assert name == "ops"
        assert [(s.namespace_id, s.resource_type, s.read_only) for s in specs] == [
            ("ns-default", "volume", True),
            ("ns-prod", "*", False),
        ]

    def test_policy_group_bad_rule(self, cli):
        result = cli("create", "policy-group", "ops", "-r", "default:volume")
        assert result.exit_code == 2
        assert "invalid policy rule" in result.output

    def test_wrong_arity(self, cli):
        result = cli("create", "namespace")
        assert result.exit_code == 2
        assert "expected 1 argument(s) but got 0" in result.output


class TestDelete:
    def test_volume(self, cli, fake_transport):
        result = cli("delete", "volume", "db")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "deleted volume vol-1 from namespace ns-default"
        ns_id, vol_id, params = fake_transport.called("delete_volume")[0]
        assert (ns_id, vol_id) == (NamespaceID("ns-default"), VolumeID("vol-1"))
        assert params.cas_version is None
        assert params.offline_delete is False

    def test_volume_cas_and_offline(self, cli, fake_transport):
        result = cli("delete", "volume", "db", "--cas", "Mw", "--offline-delete")
        assert result.exit_code == 0
        params = fake_transport.called("delete_volume")[0][-1]
        assert params.cas_version == "Mw"
        assert params.offline_delete is True

    def test_volume_async(self, cli, fake_transport):
        result = cli("delete", "volume", "db", "--async")
        assert result.exit_code == 0
        assert result.output.strip() == "request submitted"
        assert fake_transport.called("delete_volume")[0][-1].async_max == timedelta(seconds=15)

    def test_volume_too_many_args(self, cli, fake_transport):
        result = cli("delete", "volume", "db", "cache")
        assert result.exit_code == 2
        assert "storageos delete volume [flags] VOLUME" in result.output
        assert fake_transport.called("delete_volume") == []

    def test_missing_volume(self, cli):
        result = cli("delete", "volume", "ghost")
        assert result.exit_code == 1
        assert "volume with name ghost not found" in result.output

    def test_namespace(self, cli, fake_transport):
        result = cli("delete", "namespace", "prod")
        assert result.exit_code == 0
        assert result.output.strip() == "deleted namespace ns-prod"

    def test_user_by_id(self, cli, fake_transport):
        result = cli("--use-ids", "delete", "user", "user-9")
        assert result.exit_code == 0
        assert fake_transport.called("delete_user")[0][0] == "user-9"

    def test_node(self, cli, fake_transport):
        result = cli("delete", "node", "beta")
        assert result.exit_code == 0
        assert result.output.strip() == "deleted node node-2"


class TestUpdate:
    def test_description(self, cli, fake_transport):
        result = cli("update", "volume", "description", "db", "primary store")
        assert result.exit_code == 0, result.output
        assert "primary store" in result.output
        _, _, description, labels, _ = fake_transport.called("update_volume")[0]
        assert description == "primary store"
        assert labels["app"] == "db"

    def test_labels(self, cli, fake_transport):
        result = cli("update", "volume", "labels", "cache", "tier=1,app=web")
        assert result.exit_code == 0
        assert fake_transport.called("update_volume")[0][3] == {"tier": "1", "app": "web"}

    def test_size(self, cli, fake_transport):
        result = cli("update", "volume", "size", "db", "10GiB")
        assert result.exit_code == 0
        assert fake_transport.called("resize_volume")[0][2] == 10 * 1024**3
        assert "10.0GiB" in result.output

    def test_replicas(self, cli, fake_transport):
        result = cli("update", "volume", "replicas", "db", "2")
        assert result.exit_code == 0
        assert result.output.strip() == "set replica count of volume db to 2"
        assert fake_transport.called("set_replicas")[0][2] == 2

    def test_replicas_not_a_number(self, cli, fake_transport):
        result = cli("update", "volume", "replicas", "db", "two")
        assert result.exit_code == 2
        assert fake_transport.called("set_replicas") == []

    def test_async(self, cli):
        result = cli("update", "volume", "description", "db", "x", "--async")
        assert result.exit_code == 0
        assert result.output.strip() == "request submitted"

    def test_cluster(self, cli, fake_transport):
        result = cli("update", "cluster", "--log-level", "debug", "--disable-telemetry")
        assert result.exit_code == 0, result.output
        resource, _ = fake_transport.called("update_cluster")[0]
        assert resource.log_level == "debug"
        assert resource.disable_telemetry is True
        assert resource.log_format == "default"


class TestAttachDetach:
    def test_attach(self, cli, fake_transport):
        result = cli("attach", "cache", "beta")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "attached volume cache to node beta"
        assert fake_transport.called("attach_volume") == [
            (NamespaceID("ns-default"), VolumeID("vol-2"), NodeID("node-2"))
        ]

    def test_attach_needs_node(self, cli):
        result = cli("attach", "cache")
        assert result.exit_code == 2

    def test_detach(self, cli, fake_transport):
        result = cli("detach", "db")
        assert result.exit_code == 0
        assert result.output.strip() == "detached volume db"
        assert fake_transport.called("detach_volume")[0][1] == "vol-1"


class TestNFS:
    def test_attach(self, cli, fake_transport):
        result = cli("nfs", "attach", "db")
        assert result.exit_code == 0
        assert result.output.strip() == "attached volume db for NFS"

    def test_endpoint(self, cli, fake_transport):
        result = cli("nfs", "endpoint", "db", "10.0.0.1:/")
        assert result.exit_code == 0
        assert fake_transport.called("update_nfs_volume_mount_endpoint")[0][2] == "10.0.0.1:/"

    def test_exports(self, cli, fake_transport, tmp_path):
        exports = tmp_path / "exports.json"
        exports.write_text(
            json.dumps(
                [
                    {
                        "exportID": 1,
                        "path": "/",
                        "pseudoPath": "/db",
                        "acls": [
                            {
                                "identity": {"identityType": "cidr", "matcher": "10.0.0.0/8"},
                                "squashConfig": {"uid": 0, "gid": 0, "squash": "root"},
                                "accessLevel": "rw",
                            }
                        ],
                    }
                ]
            )
        )
        result = cli("nfs", "exports", "db", str(exports))
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "updated NFS exports of volume db (1 export(s))"
        sent = fake_transport.called("update_nfs_volume_exports")[0][2]
        assert isinstance(sent[0], NFSExportConfig)
        assert sent[0].acls[0].identity.matcher == "10.0.0.0/8"

    def test_exports_invalid_file(self, cli, tmp_path):
        exports = tmp_path / "exports.json"
        exports.write_text('{"path": "/"}')
        result = cli("nfs", "exports", "db", str(exports))
        assert result.exit_code == 2
        assert "must hold a JSON list" in result.output

    def test_exports_missing_file(self, cli, tmp_path):
        result = cli("nfs", "exports", "db", str(tmp_path / "nope.json"))
        assert result.exit_code == 2


class TestApplyLicence:
    def test_from_stdin(self, cli, fake_transport):
        result = cli("apply", "licence", "--from-stdin", input="LICENCE-KEY")
        assert result.exit_code == 0, result.output
        assert fake_transport.called("update_licence")[0][0] == b"LICENCE-KEY"
        assert "professional" in result.output

    def test_from_file(self, cli, fake_transport, tmp_path):
        key = tmp_path / "licence.dat"
        key.write_bytes(b"FILE-KEY")
        result = cli("apply", "licence", str(key))
        assert result.exit_code == 0
        assert fake_transport.called("update_licence")[0][0] == b"FILE-KEY"

    def test_file_and_stdin(self, cli, tmp_path):
        result = cli("apply", "licence", str(tmp_path / "x"), "--from-stdin", input="K")
        assert result.exit_code == 2

    def test_no_source(self, cli):
        result = cli("apply", "licence")
        assert result.exit_code == 2
        assert "exactly one licence file" in result.output

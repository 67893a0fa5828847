# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for config_loader utilities."""

from pathlib import Path

import pytest

from storageos_cli.config.config_loader import ConfigFile, load_yaml_config, resolve_config_path
from storageos_cli.exceptions import ConfigFileError


class TestResolveConfigPath:
    """Tests for resolve_config_path."""

    def test_explicit_path(self, tmp_path):
        path, explicit = resolve_config_path(str(tmp_path / "a.yaml"), environ={})
        assert path == tmp_path / "a.yaml"
        assert explicit is True

    def test_env_var_path(self, tmp_path):
        env = {"STORAGEOS_CONFIG": str(tmp_path / "env.yaml")}
        path, explicit = resolve_config_path(None, environ=env)
        assert path == tmp_path / "env.yaml"
        assert explicit is True

    def test_explicit_takes_priority_over_env(self, tmp_path):
        env = {"STORAGEOS_CONFIG": str(tmp_path / "env.yaml")}
        path, _ = resolve_config_path(str(tmp_path / "flag.yaml"), environ=env)
        assert path == tmp_path / "flag.yaml"

    def test_empty_env_var_ignored(self, tmp_path):
        default = str(tmp_path / "default.yaml")
        path, explicit = resolve_config_path(
            None, environ={"STORAGEOS_CONFIG": ""}, default_path=default
        )
        assert path == Path(default)
        assert explicit is False

    def test_default_path(self, tmp_path):
        default = str(tmp_path / "default.yaml")
        path, explicit = resolve_config_path(None, environ={}, default_path=default)
        assert path == Path(default)
        assert explicit is False

    def test_expands_user(self):
        path, _ = resolve_config_path("~/storageos.yaml", environ={})
        assert "~" not in str(path)


class TestLoadYamlConfig:
    """Tests for load_yaml_config."""

    def test_full_document(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text(
            "noAuthCache: true\n"
            "endpoints:\n"
            "  - http://10.0.0.1:5705\n"
            "  - http://10.0.0.2:5705\n"
            "cacheDir: /tmp/cache\n"
            "timeout: 30s\n"
            "username: admin\n"
            "password: secret\n"
            "useIds: false\n"
            "namespace: prod\n"
            "output: json\n"
        )
        cfg = load_yaml_config(conf)
        assert cfg.no_auth_cache is True
        assert cfg.endpoints == ["http://10.0.0.1:5705", "http://10.0.0.2:5705"]
        assert cfg.cache_dir == "/tmp/cache"
        assert cfg.timeout == "30s"
        assert cfg.username == "admin"
        assert cfg.password == "secret"
        assert cfg.use_ids is False
        assert cfg.namespace == "prod"
        assert cfg.output == "json"

    def test_empty_file(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("")
        assert load_yaml_config(conf) == ConfigFile()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("endpoints: [unclosed\n")
        with pytest.raises(ConfigFileError, match="invalid YAML"):
            load_yaml_config(conf)

    def test_not_a_mapping(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("- a\n- b\n")
        with pytest.raises(ConfigFileError, match="mapping"):
            load_yaml_config(conf)

    def test_unknown_key(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("endpoint: http://localhost:5705\n")
        with pytest.raises(ConfigFileError, match="endpoint"):
            load_yaml_config(conf)

    def test_wrong_type(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("endpoints: 5\n")
        with pytest.raises(ConfigFileError, match="endpoints"):
            load_yaml_config(conf)

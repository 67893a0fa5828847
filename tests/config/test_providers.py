# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the layered configuration providers."""

import shlex
import sys
from datetime import timedelta

import pytest
import yaml

from storageos_cli.config import (
    DefaultProvider,
    EnvironmentProvider,
    FileProvider,
    FlagProvider,
    FlagSet,
    build_provider,
)
from storageos_cli.config.environment import run_password_command
from storageos_cli.config.provider import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_NAMESPACE_NAME,
)
from storageos_cli.exceptions import (
    ConfigFileError,
    InvalidBooleanError,
    InvalidDurationError,
    InvalidOutputFormatError,
    PasswordCommandError,
)
from storageos_cli.output import Format


def _python_command(code: str) -> str:
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


def _flags(**values) -> FlagSet:
    return FlagSet(values=values, changed=set(values))


class TestDefaultProvider:
    def test_defaults(self):
        p = DefaultProvider()
        assert p.api_endpoints() == [DEFAULT_API_ENDPOINT]
        assert p.command_timeout() == DEFAULT_COMMAND_TIMEOUT == timedelta(seconds=15)
        assert p.username() == "storageos"
        assert p.password() == "storageos"
        assert p.use_ids() is False
        assert p.namespace() == DEFAULT_NAMESPACE_NAME == "default"
        assert p.output_format() == Format.TEXT
        assert p.auth_cache_disabled() is False


class TestEnvironmentProvider:
    def test_values(self):
        env = {
            "STORAGEOS_ENDPOINTS": "http://a:5705,http://b:5705",
            "STORAGEOS_API_TIMEOUT": "1m",
            "STORAGEOS_USERNAME": "admin",
            "STORAGEOS_PASSWORD": "secret",
            "STORAGEOS_USE_IDS": "true",
            "STORAGEOS_NAMESPACE": "prod",
            "STORAGEOS_OUTPUT_FORMAT": "yaml",
            "STORAGEOS_NO_AUTH_CACHE": "1",
            "STORAGEOS_CACHE_DIR": "/tmp/x",
        }
        p = EnvironmentProvider(DefaultProvider(), env)
        assert p.api_endpoints() == ["http://a:5705", "http://b:5705"]
        assert p.command_timeout() == timedelta(minutes=1)
        assert p.username() == "admin"
        assert p.password() == "secret"
        assert p.use_ids() is True
        assert p.namespace() == "prod"
        assert p.output_format() == Format.YAML
        assert p.auth_cache_disabled() is True
        assert p.cache_dir() == "/tmp/x"

    def test_empty_values_fall_through(self):
        env = {"STORAGEOS_USERNAME": "", "STORAGEOS_NAMESPACE": "", "STORAGEOS_USE_IDS": ""}
        p = EnvironmentProvider(DefaultProvider(), env)
        assert p.username() == "storageos"
        assert p.namespace() == "default"
        assert p.use_ids() is False

    def test_malformed_boolean(self):
        p = EnvironmentProvider(DefaultProvider(), {"STORAGEOS_USE_IDS": "yes"})
        with pytest.raises(InvalidBooleanError):
            p.use_ids()

    def test_malformed_duration(self):
        p = EnvironmentProvider(DefaultProvider(), {"STORAGEOS_API_TIMEOUT": "soon"})
        with pytest.raises(InvalidDurationError):
            p.command_timeout()

    def test_malformed_output_format(self):
        p = EnvironmentProvider(DefaultProvider(), {"STORAGEOS_OUTPUT_FORMAT": "xml"})
        with pytest.raises(InvalidOutputFormatError):
            p.output_format()

    def test_password_command_has_priority(self):
        env = {
            "STORAGEOS_PASSWORD": "direct",
            "STORAGEOS_PASSWORD_COMMAND": _python_command("print('from-command')"),
        }
        p = EnvironmentProvider(DefaultProvider(), env)
        assert p.password() == "from-command"


class TestRunPasswordCommand:
    def test_trims_output(self):
        assert run_password_command(_python_command("print('  hunter2  ')")) == "hunter2"

    def test_non_zero_exit(self):
        with pytest.raises(PasswordCommandError) as exc_info:
            run_password_command(_python_command("import sys; sys.exit(3)"))
        assert exc_info.value.exit_code == 3
        assert exc_info.value.message == "password command exited with error code 3"

    def test_missing_binary(self, tmp_path):
        with pytest.raises(PasswordCommandError):
            run_password_command(str(tmp_path / "no-such-binary"))

    def test_empty_command(self):
        with pytest.raises(PasswordCommandError):
            run_password_command("   ")

    def test_undecodable_output(self):
        with pytest.raises(PasswordCommandError) as exc_info:
            run_password_command(_python_command("import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"))
        assert exc_info.value.message == "password command failed: output is not valid UTF-8"


class TestFileProvider:
    def test_values(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("username: fileuser\nnamespace: ''\noutput: json\ntimeout: 20s\n")
        p = FileProvider(DefaultProvider(), conf)
        assert p.username() == "fileuser"
        assert p.namespace() == ""
        assert p.output_format() == Format.JSON
        assert p.command_timeout() == timedelta(seconds=20)
        assert p.password() == "storageos"
        assert p.config_file_path() == str(conf)

    def test_missing_optional_file(self, tmp_path):
        p = FileProvider(DefaultProvider(), tmp_path / "missing.yaml")
        assert p.username() == "storageos"

    def test_missing_required_file(self, tmp_path):
        p = FileProvider(DefaultProvider(), tmp_path / "missing.yaml", required=True)
        with pytest.raises(ConfigFileError):
            p.username()

    def test_password_command_has_priority(self, tmp_path):
        conf = tmp_path / "config.yaml"
        command = _python_command("print('cmd')")
        conf.write_text(yaml.safe_dump({"password": "direct", "passwordCommand": command}))
        p = FileProvider(DefaultProvider(), conf)
        assert p.password() == "cmd"


class TestFlagProvider:
    def test_unchanged_flags_defer(self):
        flags = FlagSet(values={"username": "ignored", "use_ids": True}, changed=set())
        p = FlagProvider(flags, DefaultProvider())
        assert p.username() == "storageos"
        assert p.use_ids() is False

    def test_changed_flags_win(self):
        p = FlagProvider(
            _flags(
                username="flaguser",
                endpoints=["http://flag:5705"],
                timeout="5s",
                use_ids=True,
                namespace="ns",
                output="yaml",
            ),
            DefaultProvider(),
        )
        assert p.username() == "flaguser"
        assert p.api_endpoints() == ["http://flag:5705"]
        assert p.command_timeout() == timedelta(seconds=5)
        assert p.use_ids() is True
        assert p.namespace() == "ns"
        assert p.output_format() == Format.YAML

    def test_empty_credentials_fall_through(self):
        p = FlagProvider(_flags(username="", password="", cache_dir=""), DefaultProvider())
        assert p.username() == "storageos"
        assert p.password() == "storageos"

    def test_zero_timeout_falls_through(self):
        p = FlagProvider(_flags(timeout="0"), DefaultProvider())
        assert p.command_timeout() == DEFAULT_COMMAND_TIMEOUT

    def test_empty_namespace_is_kept(self):
        p = FlagProvider(_flags(namespace=""), DefaultProvider())
        assert p.namespace() == ""

    def test_invalid_output(self):
        p = FlagProvider(_flags(output="xml"), DefaultProvider())
        with pytest.raises(InvalidOutputFormatError):
            p.output_format()


class TestBuildProvider:
    def test_precedence(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("username: file\nnamespace: file-ns\noutput: yaml\n")
        env = {"STORAGEOS_CONFIG": str(conf), "STORAGEOS_NAMESPACE": "env-ns"}
        p = build_provider(_flags(output="json"), env)
        assert p.username() == "file"
        assert p.namespace() == "env-ns"
        assert p.output_format() == Format.JSON

    def test_config_flag_selects_file(self, tmp_path):
        conf = tmp_path / "flag.yaml"
        conf.write_text("username: from-flag-file\n")
        p = build_provider(_flags(config=str(conf)), {})
        assert p.username() == "from-flag-file"
        assert p.config_file_path() == str(conf)

    def test_explicit_missing_file_fails(self, tmp_path):
        p = build_provider(_flags(config=str(tmp_path / "missing.yaml")), {})
        with pytest.raises(ConfigFileError):
            p.username()

    def test_malformed_env_beats_valid_file(self, tmp_path):
        conf = tmp_path / "config.yaml"
        conf.write_text("useIds: true\n")
        env = {"STORAGEOS_CONFIG": str(conf), "STORAGEOS_USE_IDS": "nope"}
        p = build_provider(FlagSet(), env)
        with pytest.raises(InvalidBooleanError):
            p.use_ids()

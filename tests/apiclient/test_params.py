# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
from datetime import timedelta

import pytest

from storageos_cli.apiclient import compose
from storageos_cli.apiclient.params import (
    CreateVolumeParams,
    DeleteNamespaceParams,
    DeleteVolumeParams,
    version_query,
)


class TestCompose:
    def test_defaults(self):
        assert compose(DeleteVolumeParams) == DeleteVolumeParams()

    def test_cas_and_async(self):
        params = compose(DeleteVolumeParams, "Mw", True, timedelta(seconds=15), offline_delete=True)
        assert params.cas_version == "Mw"
        assert params.async_max == timedelta(seconds=15)
        assert params.offline_delete is True

    def test_empty_cas_version_still_opts_in(self):
        assert compose(DeleteNamespaceParams, "").cas_version == ""

    def test_cas_unsupported(self):
        with pytest.raises(TypeError, match="CAS"):
            compose(CreateVolumeParams, cas_version="Mw")

    def test_async_unsupported(self):
        with pytest.raises(TypeError, match="asynchronous"):
            compose(DeleteNamespaceParams, use_async=True, timeout=timedelta(seconds=1))


class TestVersionQuery:
    def test_none(self):
        assert version_query(None) == {"ignoreVersion": "true"}

    def test_cas(self):
        assert version_query(DeleteNamespaceParams(cas_version="Mw")) == {
            "ignoreVersion": "false",
            "version": "Mw",
        }

    def test_async(self):
        query = version_query(DeleteVolumeParams(async_max=timedelta(minutes=1, seconds=30)))
        assert query == {"ignoreVersion": "true", "asyncMax": "1m30s"}

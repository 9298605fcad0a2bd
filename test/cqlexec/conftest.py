#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

import logging

import pytest

from cql_exec.config import CqlExecConfig
from util import FakeCluster


@pytest.fixture
def cluster():
    return FakeCluster(keyspaces={"ks1"})


# "config" fixture: a configuration that would run nothing, tests fill in
# the options they need. The script points to a file that doesn't exist.
@pytest.fixture
def config(tmp_path):
    return CqlExecConfig(cql_script=tmp_path / "exec.cql")


@pytest.fixture
def info_log(caplog):
    caplog.set_level(logging.INFO, logger="cql_exec")
    return caplog

#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""Pytest plugin running cql-exec before the integration tests.

With --cql-exec the configured statements are executed once, when the test
session starts and before any test is collected, e.g. to create the schema
the tests expect. The plugin is registered through the "pytest11" entry
point and does nothing unless --cql-exec is given.
"""

from __future__ import annotations

import logging

import pytest

from cql_exec.config import build_config
from cql_exec.errors import CqlExecError
from cql_exec.goal import CqlExecGoal

logger = logging.getLogger(__name__)

# pytest option name -> CqlExecConfig field
OPTIONS = {
    "cql_exec_host": "rpc_address",
    "cql_exec_port": "rpc_port",
    "cql_exec_skip": "skip",
    "cql_exec_skip_if_keyspace_is_present": "skip_if_keyspace_is_present",
    "cql_exec_script": "cql_script",
    "cql_exec_statement": "cql_statement",
    "cql_exec_keyspace": "keyspace",
    "cql_exec_key_validator": "key_validator",
    "cql_exec_comparator": "comparator",
    "cql_exec_default_validator": "default_validator",
}


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("cql-exec", "execute CQL statements before the tests")
    group.addoption("--cql-exec", action="store_true", default=False,
                    help="Execute CQL statements when the test session starts")
    group.addoption("--cql-exec-config", action="store", default=None,
                    help="YAML file with cql-exec configuration options")
    group.addoption("--cql-exec-host", action="store", default=None,
                    help="Address of the node (default: localhost)")
    group.addoption("--cql-exec-port", action="store", type=int, default=None,
                    help="CQL port of the node (default: 9042)")
    group.addoption("--cql-exec-skip", action="store_true", default=None,
                    help="Do not execute anything")
    group.addoption("--cql-exec-skip-if-keyspace-is-present", action="store", default=None,
                    help="Do not execute anything if this keyspace exists")
    group.addoption("--cql-exec-script", action="store", default=None,
                    help="CQL script to execute (default: <rootdir>/src/cassandra/cql/exec.cql)")
    group.addoption("--cql-exec-statement", action="store", default=None,
                    help="CQL statement(s) to execute if there is no script")
    group.addoption("--cql-exec-keyspace", action="store", default=None,
                    help="Keyspace to execute the statements in")
    group.addoption("--cql-exec-key-validator", action="store", default=None,
                    help="Type of the row keys (default: BytesType)")
    group.addoption("--cql-exec-comparator", action="store", default=None,
                    help="Type of the column names (default: BytesType)")
    group.addoption("--cql-exec-default-validator", action="store", default=None,
                    help="Type of the column values (default: BytesType)")


def config_from_pytest(config: pytest.Config):
    overrides = {field: config.getoption(option) for option, field in OPTIONS.items()}
    return build_config(config.getoption("cql_exec_config"), overrides, basedir=config.rootpath)


def pytest_sessionstart(session: pytest.Session) -> None:
    if not session.config.getoption("cql_exec"):
        return
    try:
        config = config_from_pytest(session.config)
        logger.info("Running cql-exec against %s:%s", config.rpc_address, config.rpc_port)
        CqlExecGoal(config).execute()
    except CqlExecError as e:
        pytest.exit(f"cql-exec failed: {e}", returncode=pytest.ExitCode.INTERNAL_ERROR)

#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""Execute CQL statements against a running node, e.g. before integration tests."""

from cql_exec.config import CqlExecConfig
from cql_exec.errors import (
    ConfigurationError,
    CqlExecError,
    DecodeError,
    ExecutionError,
    ScriptVanishedError,
)
from cql_exec.goal import CqlExecGoal

__all__ = [
    "ConfigurationError",
    "CqlExecConfig",
    "CqlExecError",
    "CqlExecGoal",
    "DecodeError",
    "ExecutionError",
    "ScriptVanishedError",
]

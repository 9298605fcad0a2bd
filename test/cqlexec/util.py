#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

# In-memory stand-ins for a CQL node, used by the cql-exec unit tests.
# Note that fixtures aren't here - they are in conftest.py.

from contextlib import contextmanager

from cql_exec.session import Column, CqlResult, CqlRow, KeyspaceNotFound


def make_row(key, *columns):
    return CqlRow(key, tuple(Column(name, value) for name, value in columns))


class FakeSession:
    def __init__(self, cluster):
        self.cluster = cluster

    def describe_keyspace(self, name):
        self.cluster.calls.append(("describe_keyspace", name))
        if self.cluster.describe_error is not None:
            raise self.cluster.describe_error
        if name not in self.cluster.keyspaces:
            raise KeyspaceNotFound(name)
        return name

    def set_keyspace(self, name):
        self.cluster.calls.append(("set_keyspace", name))
        if name not in self.cluster.keyspaces:
            raise RuntimeError(f"Keyspace '{name}' does not exist")

    def execute_query(self, query):
        assert isinstance(query, bytes)
        statement = query.decode("utf-8")
        self.cluster.calls.append(("execute_query", statement))
        if statement in self.cluster.errors:
            raise self.cluster.errors[statement]
        return self.cluster.results.get(statement, CqlResult())


class FakeCluster:
    """Records every call made through the sessions it hands out.

    `results` maps a statement to the CqlResult it returns, `errors` maps a
    statement to the exception it raises.
    """

    def __init__(self, keyspaces=(), results=None, errors=None, describe_error=None):
        self.keyspaces = set(keyspaces)
        self.results = results or {}
        self.errors = errors or {}
        self.describe_error = describe_error
        self.calls = []
        self.opened = 0
        self.closed = 0

    @contextmanager
    def connect(self):
        self.opened += 1
        try:
            yield FakeSession(self)
        finally:
            self.closed += 1

    def executed(self):
        return [arg for call, arg in self.calls if call == "execute_query"]

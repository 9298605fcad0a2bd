#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""The small RPC surface cql-exec needs from a CQL node.

RpcSession exposes the three calls the tool makes (describe a keyspace,
select a keyspace, execute a query) and hands back rows in the
key/name/value byte form that the type codecs decode. Every session is
scoped: it is opened for one unit of work and shut down afterwards, see
execute_in_session().
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cassandra import UnresolvableContactPoints             # type: ignore
from cassandra.auth import PlainTextAuthProvider           # type: ignore
from cassandra.cluster import Cluster, NoHostAvailable     # type: ignore # pylint: disable=no-name-in-module
from cassandra.query import SimpleStatement, tuple_factory  # type: ignore

from cql_exec.errors import ExecutionError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from contextlib import AbstractContextManager
    from typing import TypeVar

    T = TypeVar("T")
    SessionFactory = Callable[[], AbstractContextManager["RpcSession"]]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    name: bytes
    value: bytes


@dataclass(frozen=True)
class CqlRow:
    key: bytes
    columns: tuple[Column, ...]


@dataclass(frozen=True)
class CqlResult:
    rows: tuple[CqlRow, ...] = ()


class KeyspaceNotFound(KeyError):
    pass


def rows_from_result_set(result_set, protocol_version: int) -> tuple[CqlRow, ...]:
    """Convert driver rows (tuples) back to their wire bytes.

    The key of a row is its first selected column. Every non-null column,
    the first one included, becomes a Column named after the selected column.
    """
    names = result_set.column_names
    if not names:
        return ()
    types = result_set.column_types
    rows = []
    for values in result_set:
        columns = tuple(Column(name.encode("utf-8"), cqltype.to_binary(value, protocol_version))
                        for name, cqltype, value in zip(names, types, values)
                        if value is not None)
        key = columns[0].value if values[0] is not None else b""
        rows.append(CqlRow(key, columns))
    return tuple(rows)


class RpcSession:
    def __init__(self, session, protocol_version: int):
        self._session = session
        self.protocol_version = protocol_version

    def describe_keyspace(self, name: str):
        keyspace = self._session.cluster.metadata.keyspaces.get(name)
        if keyspace is None:
            raise KeyspaceNotFound(name)
        return keyspace

    def set_keyspace(self, name: str) -> None:
        self._session.set_keyspace(name)

    def execute_query(self, query: bytes) -> CqlResult:
        # All pages are fetched here, the session does not outlive the call.
        result_set = self._session.execute(SimpleStatement(query.decode("utf-8")))
        return CqlResult(rows_from_result_set(result_set, self.protocol_version))


@contextmanager
def rpc_session(address: str, port: int, username: str | None = None, password: str | None = None,
                protocol_version: int = 4) -> Iterator[RpcSession]:
    auth_provider = None
    if username:
        auth_provider = PlainTextAuthProvider(username=username, password=password)
    try:
        # An address that doesn't resolve is already rejected here.
        cluster = Cluster(contact_points=[address],
                          port=int(port),
                          protocol_version=protocol_version,
                          auth_provider=auth_provider,
                          compression=False)
    except UnresolvableContactPoints as e:
        raise ExecutionError(f"Cannot connect to {address}:{port}: {e}") from e
    try:
        try:
            session = cluster.connect()
        except (NoHostAvailable, UnresolvableContactPoints) as e:
            raise ExecutionError(f"Cannot connect to {address}:{port}: {e}") from e
        session.row_factory = tuple_factory
        logger.debug("Connected to %s:%s", address, port)
        yield RpcSession(session, protocol_version)
    finally:
        cluster.shutdown()


def execute_in_session(connect: SessionFactory, operation: Callable[[RpcSession], T]) -> T:
    """Run `operation` with a fresh session from `connect`, always closing it."""
    with connect() as session:
        return operation(session)

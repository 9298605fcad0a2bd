#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cql_exec.errors import ExecutionError
from cql_exec.session import execute_in_session
from cql_exec.statements import is_blank

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cql_exec.session import CqlRow, RpcSession, SessionFactory


logger = logging.getLogger(__name__)

_END = object()


class ExecutionResult:
    """Forward-only cursor over the rows returned for one statement.

    It can be drained once; afterwards next() raises StopIteration.
    """

    def __init__(self, statement: str, rows: Iterable[CqlRow]):
        self.statement = statement
        self._rows = iter(rows)
        self._lookahead = _END

    def has_next(self) -> bool:
        if self._lookahead is _END:
            self._lookahead = next(self._rows, _END)
        return self._lookahead is not _END

    def __iter__(self) -> ExecutionResult:
        return self

    def __next__(self) -> CqlRow:
        if not self.has_next():
            raise StopIteration
        row, self._lookahead = self._lookahead, _END
        return row

    def __repr__(self) -> str:
        return f"ExecutionResult({self.statement!r})"


def execute_statement(connect: SessionFactory, statement: str, keyspace: str | None = None) -> ExecutionResult:
    """Execute one statement in its own session, optionally inside `keyspace`."""

    def operation(session: RpcSession) -> ExecutionResult:
        if not is_blank(keyspace):
            logger.info("setting keyspace: %s", keyspace)
            try:
                session.set_keyspace(keyspace)
            except Exception as e:
                raise ExecutionError(f"Could not set keyspace {keyspace} for statement {statement!r}: {e}",
                                     statement) from e
        logger.debug("Executing %r", statement)
        try:
            result = session.execute_query(statement.encode("utf-8"))
        except Exception as e:
            raise ExecutionError(f"Failed to execute {statement!r}: {e}", statement) from e
        return ExecutionResult(statement, result.rows)

    return execute_in_session(connect, operation)

#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""The cql-exec goal: run CQL statements and print the rows they return."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from cql_exec.codecs import resolve_type
from cql_exec.executor import execute_statement
from cql_exec.printer import print_results
from cql_exec.session import execute_in_session, rpc_session
from cql_exec.statements import is_blank, load_statement, split_statements

if TYPE_CHECKING:
    from cql_exec.config import CqlExecConfig
    from cql_exec.executor import ExecutionResult
    from cql_exec.session import RpcSession, SessionFactory


logger = logging.getLogger(__name__)


class CqlExecGoal:
    def __init__(self, config: CqlExecConfig, connect: SessionFactory | None = None):
        self.config = config
        if connect is None:
            connect = functools.partial(rpc_session,
                                        config.rpc_address,
                                        config.rpc_port,
                                        username=config.username,
                                        password=config.password,
                                        protocol_version=config.protocol_version)
        self.connect = connect

    def keyspace_exists(self, name: str) -> bool:
        def probe(session: RpcSession) -> bool:
            try:
                session.describe_keyspace(name)
            except Exception as e:  # pylint: disable=broad-except
                # A failed describe can't be told apart from a missing keyspace.
                logger.debug("describe_keyspace(%s) failed, assuming it does not exist: %s", name, e)
                return False
            return True

        return execute_in_session(self.connect, probe)

    def should_skip(self) -> bool:
        if self.config.skip:
            return True
        name = self.config.skip_if_keyspace_is_present
        return not is_blank(name) and self.keyspace_exists(name)

    def execute(self) -> list[ExecutionResult]:
        """Run the goal and return the (drained) results, in statement order.

        Raises ConfigurationError before any remote call if the type names or
        the script are unusable, and ExecutionError on the first statement
        that fails; the statements after it are not executed.
        """
        config = self.config
        if config.skip:
            logger.info("Skipping cql-exec: skip is set")
            return []

        protocol_version = config.protocol_version
        key_codec = resolve_type(config.key_validator, protocol_version)
        comparator_codec = resolve_type(config.comparator, protocol_version)
        value_codec = resolve_type(config.default_validator, protocol_version)

        cql = load_statement(config.cql_statement, config.cql_script)
        if is_blank(cql):
            logger.warning("No CQL provided. Nothing to do.")
            return []

        if self.should_skip():
            logger.info("Skipping cql-exec: keyspace %s is present", config.skip_if_keyspace_is_present)
            return []

        results = [execute_statement(self.connect, statement, config.keyspace)
                   for statement in split_statements(cql)]
        print_results(results, key_codec, comparator_codec, value_codec)
        return results

#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""cql-exec
Execute CQL statements from a script file or the command line against a
running node and print the returned rows. Stops at the first failure.
Usage:
  cql-exec --cql-script ./schema.cql [--host 127.0.0.1 --port 9042]
  cql-exec -e "SELECT * FROM system.local" --key-validator UTF8Type
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING

from cql_exec.config import build_config
from cql_exec.errors import CqlExecError
from cql_exec.goal import CqlExecGoal

if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger("cql_exec")


def get_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cql-exec",
                                 description="Execute CQL statements and print the returned rows")
    ap.add_argument('--config', help="YAML file with configuration options")
    ap.add_argument('--host', dest='rpc_address', help="Address of a node (default: localhost)")
    ap.add_argument('--port', dest='rpc_port', type=int, help="CQL port (default: 9042)")
    ap.add_argument('--skip', action='store_true', default=None, help="Do nothing")
    ap.add_argument('--skip-if-keyspace-is-present', metavar='KEYSPACE',
                    help="Do nothing if this keyspace already exists")
    ap.add_argument('--basedir', default=os.getcwd(),
                    help="Directory the default script is looked up in (default: current directory)")
    ap.add_argument('--cql-script',
                    help="CQL script to execute, replaces --cql-statement if it exists "
                         "(default: <basedir>/src/cassandra/cql/exec.cql)")
    ap.add_argument('-e', '--cql-statement', help="CQL statement(s) to execute, separated by ';'")
    ap.add_argument('-k', '--keyspace', help="Keyspace to execute the statements in")
    ap.add_argument('--key-validator', help="Type of the row keys (default: BytesType)")
    ap.add_argument('--comparator', help="Type of the column names (default: BytesType)")
    ap.add_argument('--default-validator', help="Type of the column values (default: BytesType)")
    ap.add_argument('--username')
    ap.add_argument('--password')
    ap.add_argument('--protocol-version', type=int, help="CQL protocol version (default: 4)")
    ap.add_argument('-v', '--verbosity', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default='INFO',
                    help="python log level")
    return ap


def setup_logging(level: str) -> None:
    stream_log = logging.StreamHandler()
    stream_log.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root = logging.getLogger()
    root.addHandler(stream_log)
    root.setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(args.verbosity)
    overrides = {name: getattr(args, name) for name in (
        "rpc_address", "rpc_port", "skip", "skip_if_keyspace_is_present", "cql_script", "cql_statement",
        "keyspace", "key_validator", "comparator", "default_validator", "username", "password",
        "protocol_version")}
    try:
        config = build_config(args.config, overrides, basedir=args.basedir)
        CqlExecGoal(config).execute()
    except CqlExecError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

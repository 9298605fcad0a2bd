#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cql_exec.codecs import TypeCodec
    from cql_exec.executor import ExecutionResult


logger = logging.getLogger(__name__)

SEPARATOR = "-" * 47


def print_results(results: Iterable[ExecutionResult], key_codec: TypeCodec, comparator_codec: TypeCodec,
                  value_codec: TypeCodec) -> None:
    """Log every row of every result, draining the results one by one."""
    logger.info(SEPARATOR)
    for result in results:
        for row in result:
            logger.info("Row key: %s", key_codec.get_string(row.key))
            logger.info(SEPARATOR)
            for column in row.columns:
                logger.info(" name: %s", comparator_codec.get_string(column.name))
                logger.info(" value: %s", value_codec.get_string(column.value))
                logger.info(SEPARATOR)

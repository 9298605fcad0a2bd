#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CqlExecError(Exception):
    """Base class for everything that makes a cql-exec run fail."""


class ConfigurationError(CqlExecError):
    """Bad configuration or input, detected before talking to the server."""


class ScriptVanishedError(ConfigurationError):
    def __init__(self, path: Path):
        super().__init__(f"Cql file '{path}' was deleted before I could read it")
        self.path = path


class ExecutionError(CqlExecError):
    """A remote call failed.

    `statement` is the CQL statement being executed, or None when the failure
    happened before any statement was sent (e.g. while connecting).
    """

    def __init__(self, message: str, statement: str | None = None):
        super().__init__(message)
        self.statement = statement


class DecodeError(CqlExecError):
    def __init__(self, typename: str, raw: bytes):
        super().__init__(f"Could not decode 0x{raw.hex()} as {typename}")
        self.typename = typename
        self.raw = raw

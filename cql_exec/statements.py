#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cql_exec.errors import ConfigurationError, ScriptVanishedError

if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)

DELIMITER = ";"


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def load_statement(cql_statement: str | None, cql_script: Path | None) -> str | None:
    """Return the CQL text to run.

    An existing script file wins over the inline statement, its content is
    returned verbatim.
    """
    if cql_script is None or not cql_script.is_file():
        return cql_statement
    logger.info("Loading cql from %s", cql_script)
    try:
        return cql_script.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ScriptVanishedError(cql_script) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not parse or load cql file '{cql_script}': {e}") from e


def split_statements(text: str) -> list[str]:
    """Split `text` on every delimiter.

    Fragments between adjacent delimiters, after a trailing delimiter, or
    consisting only of whitespace are dropped. The others are returned
    verbatim. The split is purely lexical, a ";" inside a string literal
    splits the statement too.
    """
    if DELIMITER not in text:
        return [text]
    return [fragment for fragment in text.split(DELIMITER) if not is_blank(fragment)]

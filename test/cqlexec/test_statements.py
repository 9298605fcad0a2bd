#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

import pathlib
import re

import pytest

from cql_exec.errors import ConfigurationError, ScriptVanishedError
from cql_exec.statements import is_blank, load_statement, split_statements


@pytest.mark.parametrize("text", [
    "SELECT * FROM t",
    "  SELECT * FROM t\n",
    "INSERT INTO t (k, v) VALUES (1, 'x')",
])
def test_split_without_delimiter(text):
    assert split_statements(text) == [text]


def test_split_keeps_order_and_text():
    assert split_statements("INSERT a;UPDATE b;DELETE c") == ["INSERT a", "UPDATE b", "DELETE c"]
    assert split_statements("INSERT a;\nUPDATE b") == ["INSERT a", "\nUPDATE b"]


# A trailing delimiter does not produce an empty statement.
def test_split_trailing_delimiter():
    assert split_statements("a;b;") == ["a", "b"]


def test_split_drops_empty_and_blank_fragments():
    assert split_statements("a;;b") == ["a", "b"]
    assert split_statements(";a") == ["a"]
    assert split_statements("CREATE TABLE t (k int PRIMARY KEY);\n\n") == ["CREATE TABLE t (k int PRIMARY KEY)"]
    assert split_statements("a; \n\t;b") == ["a", "b"]
    assert split_statements(";;;") == []


# The split is lexical, it doesn't know about string literals.
def test_split_inside_literal():
    assert split_statements("INSERT INTO t (k, v) VALUES (1, 'a;b')") == \
        ["INSERT INTO t (k, v) VALUES (1, 'a", "b')"]


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \n\t")
    assert not is_blank(" x ")


def test_load_inline_statement_without_script(tmp_path):
    assert load_statement("SELECT 1", None) == "SELECT 1"
    assert load_statement("SELECT 1", tmp_path / "missing.cql") == "SELECT 1"
    assert load_statement(None, None) is None


def test_load_directory_is_not_a_script(tmp_path):
    assert load_statement("SELECT 1", tmp_path) == "SELECT 1"


def test_load_script_wins_over_statement(tmp_path):
    script = tmp_path / "exec.cql"
    script.write_text("CREATE KEYSPACE ks;\nUSE ks;\n", encoding="utf-8")
    assert load_statement("SELECT 1", script) == "CREATE KEYSPACE ks;\nUSE ks;\n"


def test_load_empty_script_wins_over_statement(tmp_path):
    script = tmp_path / "exec.cql"
    script.write_text("")
    assert load_statement("SELECT 1", script) == ""


def test_load_vanished_script(tmp_path, monkeypatch):
    script = tmp_path / "exec.cql"
    script.write_text("SELECT 1")

    def read_text(self, *args, **kwargs):
        raise FileNotFoundError(str(self))
    monkeypatch.setattr(pathlib.Path, "read_text", read_text)

    with pytest.raises(ScriptVanishedError, match="was deleted before I could read it") as excinfo:
        load_statement(None, script)
    assert excinfo.value.path == script


def test_load_unreadable_script(tmp_path, monkeypatch):
    script = tmp_path / "exec.cql"
    script.write_text("SELECT 1")

    def read_text(self, *args, **kwargs):
        raise PermissionError(str(self))
    monkeypatch.setattr(pathlib.Path, "read_text", read_text)

    with pytest.raises(ConfigurationError, match="Could not parse or load cql file") as excinfo:
        load_statement(None, script)
    assert not isinstance(excinfo.value, ScriptVanishedError)


def test_load_script_not_utf8(tmp_path):
    script = tmp_path / "exec.cql"
    script.write_bytes(b"SELECT \xff\xfe")
    with pytest.raises(ConfigurationError, match=re.escape(str(script))):
        load_statement(None, script)

#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""Configuration of a cql-exec run.

Values come from three sources, with increasing priority (if two sources
provide the same option, the higher priority one wins):
1. the defaults of CqlExecConfig
2. an optional YAML file, whose keys are the CqlExecConfig field names
3. options given explicitly on the command line (or to pytest)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from cql_exec.codecs import DEFAULT_TYPE
from cql_exec.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


DEFAULT_CQL_SCRIPT = Path("src", "cassandra", "cql", "exec.cql")


def default_cql_script(basedir: Path | str) -> Path:
    return Path(basedir) / DEFAULT_CQL_SCRIPT


def parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigurationError(f"Invalid {name}: {value!r}, expected true or false")


@dataclass
class CqlExecConfig:
    rpc_address: str = "localhost"
    rpc_port: int = 9042
    # Skip the whole run.
    skip: bool = False
    # Skip the run if a keyspace of this name already exists.
    skip_if_keyspace_is_present: str | None = None
    # Script to execute. If it exists, it replaces cql_statement.
    cql_script: Path | None = None
    cql_statement: str | None = None
    # Keyspace to use for every statement.
    keyspace: str | None = None
    # Marshal type names used to print row keys, column names and values.
    key_validator: str = DEFAULT_TYPE
    comparator: str = DEFAULT_TYPE
    default_validator: str = DEFAULT_TYPE
    username: str | None = None
    password: str | None = None
    protocol_version: int = 4

    @classmethod
    def field_names(cls) -> set[str]:
        return {field.name for field in dataclasses.fields(cls)}

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> CqlExecConfig:
        unknown = set(values) - cls.field_names()
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
        values = dict(values)
        try:
            for name in ("rpc_port", "protocol_version"):
                if values.get(name) is not None:
                    values[name] = int(values[name])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid {name}: {values[name]!r}") from e
        if values.get("cql_script") is not None:
            values["cql_script"] = Path(values["cql_script"])
        if values.get("skip") is not None:
            values["skip"] = parse_bool("skip", values["skip"])
        return cls(**{name: value for name, value in values.items() if value is not None})

    def merged(self, overrides: Mapping[str, Any]) -> CqlExecConfig:
        """Return a copy with every non-None value of `overrides` applied."""
        values = dataclasses.asdict(self)
        values.update({name: value for name, value in overrides.items() if value is not None})
        return self.from_mapping(values)


def load_config_file(path: Path | str) -> dict[str, Any]:
    path = Path(path)
    try:
        cfg = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Could not read config file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse config file '{path}': {e}") from e
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigurationError(f"Config file '{path}' must contain a mapping, got {type(cfg).__name__}")
    unknown = set(cfg) - CqlExecConfig.field_names()
    if unknown:
        raise ConfigurationError(f"Unknown option(s) in config file '{path}': {', '.join(sorted(map(str, unknown)))}")
    return cfg


def build_config(config_file: Path | str | None, overrides: Mapping[str, Any],
                 basedir: Path | str | None = None) -> CqlExecConfig:
    """Layer the defaults, `config_file` and `overrides`.

    If no script was configured anywhere and `basedir` is given, the script
    defaults to src/cassandra/cql/exec.cql under `basedir`.
    """
    config = CqlExecConfig()
    if config_file is not None:
        config = config.merged(load_config_file(config_file))
    config = config.merged(overrides)
    if config.cql_script is None and basedir is not None:
        config.cql_script = default_cql_script(basedir)
    return config

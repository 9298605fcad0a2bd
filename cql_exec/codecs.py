#
# Copyright (C) 2026-present ScyllaDB
#
# SPDX-License-Identifier: LicenseRef-ScyllaDB-Source-Available-1.0
#

"""Resolution of Cassandra marshal type names into byte decoders.

The names are the ones used in schema definitions and by the old
Thrift-era tooling, e.g. "BytesType", "org.apache.cassandra.db.marshal.UTF8Type"
or "CompositeType(UTF8Type, Int32Type)". Parsing and deserialization are done
by the driver's type classes (cassandra.cqltypes); this module only validates
the result and renders decoded values as text.
"""

from __future__ import annotations

import re

from cassandra.cqltypes import _UnrecognizedType, lookup_casstype  # type: ignore

from cql_exec.errors import ConfigurationError, DecodeError

DEFAULT_TYPE = "BytesType"


def _unrecognized(cqltype) -> list[str]:
    if issubclass(cqltype, _UnrecognizedType):
        return [cqltype.__name__]
    names = []
    for subtype in getattr(cqltype, "subtypes", ()):
        names.extend(_unrecognized(subtype))
    return names


def _well_formed(typename: str) -> bool:
    """Check that parentheses balance and no type parameter is empty.

    The driver's parser accepts e.g. "CompositeType(UTF8Type" or
    "CompositeType(UTF8Type,)" and quietly builds a type from them.
    """
    depth = 0
    previous = None  # None, "name", "(", ")" or ","
    for token in re.findall(r"[(),]|[^(),]+", typename):
        token = token.strip()
        if not token:
            continue
        if token == "(":
            if previous != "name":
                return False
            depth += 1
        elif token in (")", ","):
            if previous not in ("name", ")") or depth == 0:
                return False
            if token == ")":
                depth -= 1
        elif previous not in (None, "(", ","):
            return False
        else:
            token = "name"
        previous = token
    return depth == 0 and previous in ("name", ")")


def render(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return str(value)


class TypeCodec:
    def __init__(self, typename: str, cqltype, protocol_version: int):
        self.typename = typename
        self.cqltype = cqltype
        self.protocol_version = protocol_version

    def decode(self, raw: bytes):
        try:
            return self.cqltype.from_binary(raw, self.protocol_version)
        except Exception as e:
            raise DecodeError(self.typename, raw) from e

    def get_string(self, raw: bytes) -> str:
        return render(self.decode(raw))

    def __repr__(self) -> str:
        return f"TypeCodec({self.typename!r})"


def resolve_type(typename: str, protocol_version: int = 4) -> TypeCodec:
    """Resolve `typename` to a codec, or raise ConfigurationError."""
    if not typename or not typename.strip():
        raise ConfigurationError("Empty type name")
    if not _well_formed(typename):
        raise ConfigurationError(f"Could not parse type name: {typename}")
    try:
        cqltype = lookup_casstype(typename.strip())
    except ValueError as e:
        raise ConfigurationError(f"Could not parse type name: {typename}") from e
    unknown = _unrecognized(cqltype)
    if unknown:
        raise ConfigurationError(f"Could not parse type name: {typename} "
                                 f"(unknown type {', '.join(unknown)})")
    return TypeCodec(typename, cqltype, protocol_version)

from __future__ import annotations

import datetime
import typing

import happybase

from cfschema import data

__all__ = ("HbConnection",)


class HbConnection(data.StoreConnection):
    """A store connection backed by an HBase Thrift gateway."""

    def __init__(self, /, connection: happybase.Connection):
        self._con: typing.Final[happybase.Connection] = connection

    @staticmethod
    def open(*, store_config: data.StoreConfig) -> HbConnection:
        kwargs: dict[str, typing.Any] = {"host": store_config.host or "localhost"}
        if store_config.port is not None:
            kwargs["port"] = store_config.port
        if store_config.timeout_millis is not None:
            kwargs["timeout"] = store_config.timeout_millis
        if store_config.table_prefix is not None:
            kwargs["table_prefix"] = store_config.table_prefix

        return HbConnection(happybase.Connection(**kwargs))

    def close(self) -> None:
        self._con.close()

    def create_table(self, *, table_name: str, column_families: frozenset[str]) -> None:
        self._con.create_table(table_name, {family: dict() for family in sorted(column_families)})

    def delete(self, *, table_name: str, row_key: str) -> None:
        self._con.table(table_name).delete(row_key.encode("utf-8"))

    def delete_table(self, /, table_name: str) -> None:
        self._con.delete_table(table_name, disable=True)

    def get(self, *, table_name: str, row_key: str) -> data.Cells | None:
        raw = self._con.table(table_name).row(row_key.encode("utf-8"))
        if not raw:
            return None

        cells: data.Cells = {}
        for key, value in raw.items():
            family, _, qualifier = key.decode("utf-8").partition(":")
            cells.setdefault(family, {})[qualifier] = value
        return cells

    def get_column_families(self, /, table_name: str) -> frozenset[str]:
        return frozenset(
            _decode_name(name).rstrip(":") for name in self._con.table(table_name).families().keys()
        )

    def put(self, *, table_name: str, row_key: str, cells: data.Cells) -> None:
        self._con.table(table_name).put(
            row_key.encode("utf-8"),
            {
                f"{family}:{qualifier}".encode("utf-8"): _encode_value(value)
                for family, values in cells.items()
                for qualifier, value in values.items()
            },
        )

    def table_exists(self, /, table_name: str) -> bool:
        return table_name in {_decode_name(name) for name in self._con.tables()}


def _decode_name(name: bytes | str, /) -> str:
    if isinstance(name, bytes):
        return name.decode("utf-8")
    return name


def _encode_value(value: typing.Any, /) -> bytes:
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, datetime.datetime):
        return value.isoformat().encode("utf-8")
    return str(value).encode("utf-8")

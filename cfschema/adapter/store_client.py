from __future__ import annotations

import typing
import uuid

from loguru import logger

from cfschema import data

__all__ = ("StoreClient",)


class StoreClient:
    """The only path from this package to the store.

    The checks here run even when a caller skips the builders in ``cfschema.service``.
    """

    def __init__(self, /, connection: data.StoreConnection):
        self._connection: typing.Final[data.StoreConnection] = connection

    @property
    def connection(self) -> data.StoreConnection:
        return self._connection

    @property
    def is_create_table_supported(self) -> bool:
        return True

    def create_table(
        self,
        table_name: str | None,
        column_families: typing.Iterable[str] | None,
    ) -> None:
        if isinstance(column_families, (str, bytes)):
            raise data.ColumnFamiliesNotACollection(column_families=column_families)

        if not table_name or not column_families:
            raise data.TableNameOrColumnFamiliesMissing()

        families = frozenset(column_families)
        if not families or any(not family.strip() for family in families):
            raise data.TableNameOrColumnFamiliesMissing()

        logger.debug(f"Creating table {table_name} with column families {sorted(families)}.")
        self._connection.create_table(table_name=table_name, column_families=families)
        logger.info(f"Created table {table_name}.")

    def delete_row(self, *, table_name: str, row_key: str) -> None:
        self._check_table_exists(table_name)
        self._connection.delete(table_name=table_name, row_key=row_key)

    def drop_table(self, /, table_name: str) -> None:
        self._check_table_exists(table_name)
        self._connection.delete_table(table_name)
        logger.info(f"Dropped table {table_name}.")

    def get_column_families(self, /, table_name: str) -> frozenset[str]:
        self._check_table_exists(table_name)
        return self._connection.get_column_families(table_name)

    def get_row(self, *, table_name: str, row_key: str) -> data.Cells | None:
        self._check_table_exists(table_name)
        return self._connection.get(table_name=table_name, row_key=row_key)

    def put_row(self, /, row: data.Row) -> str:
        table_name = row.table.table_name
        self._check_table_exists(table_name)

        if row.id_value is None:
            row_key = uuid.uuid4().hex
        else:
            row_key = data.to_row_key(row.id_value)

        logger.debug(f"Putting row {row_key} into {table_name}.")
        self._connection.put(table_name=table_name, row_key=row_key, cells=row.cells())
        return row_key

    def table_exists(self, /, table_name: str) -> bool:
        return self._connection.table_exists(table_name)

    def _check_table_exists(self, /, table_name: str) -> None:
        if not self._connection.table_exists(table_name):
            raise data.TableDoesntExist(table_name=table_name)

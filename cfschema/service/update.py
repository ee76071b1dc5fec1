import typing

from loguru import logger

from cfschema import data
from cfschema.adapter.store_client import StoreClient

__all__ = ("delete_row", "drop_table", "insert_row")


def insert_row(client: StoreClient, /, row: data.Row) -> str:
    row_key = client.put_row(row)
    logger.debug(f"Inserted row {row_key} into {row.table.table_name}.")
    return row_key


def delete_row(client: StoreClient, /, table: data.Table, *, id_value: typing.Any) -> None:
    if table.id_column is None:
        raise data.ColumnNotInTable(column_name=data.ID_COLUMN_NAME, table_name=table.table_name)

    client.delete_row(table_name=table.table_name, row_key=data.to_row_key(id_value))
    logger.debug(f"Deleted row {id_value} from {table.table_name}.")


def drop_table(client: StoreClient, /, schema: data.Schema, table_name: str) -> None:
    match schema:
        case data.MutableSchema():
            client.drop_table(table_name)
            schema.remove_table(table_name)
        case _:
            raise data.NotAMutableSchema(schema=schema)

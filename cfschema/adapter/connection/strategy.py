import contextlib
import typing

from loguru import logger

from cfschema import data
from cfschema.adapter.connection.hb import HbConnection
from cfschema.adapter.connection.memory import MemoryConnection

__all__ = ("create", "open_connection")


def create(*, store_config: data.StoreConfig) -> data.StoreConnection:
    if store_config.api == data.API.HAPPYBASE:
        return HbConnection.open(store_config=store_config)
    elif store_config.api == data.API.MEMORY:
        return MemoryConnection()

    raise NotImplementedError(
        f"The api specified, {store_config.api!s}, does not have a StoreConnection implementation."
    )


@contextlib.contextmanager
def open_connection(*, store_config: data.StoreConfig) -> typing.Generator[data.StoreConnection, None, None]:
    con = create(store_config=store_config)
    logger.debug(f"Opened connection to {store_config!r}.")
    try:
        yield con
    finally:
        con.close()
        logger.debug(f"Closed connection to {store_config!r}.")

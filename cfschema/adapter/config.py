import functools
import json
import pathlib
import typing

import pydantic

from cfschema import data

__all__ = ("load",)


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config:
    if not config_file.exists():
        raise data.ConfigError(f"The config file specified, {config_file.resolve()!s}, does not exist.")

    try:
        with config_file.open("r") as fh:
            d = typing.cast(dict[str, typing.Any], json.load(fh))
    except json.JSONDecodeError as e:
        raise data.ConfigError(f"The config file, {config_file!s}, is not valid json: {e!s}") from e

    if "schema-name" not in d.keys():
        raise data.ConfigError("config file is missing an entry for 'schema-name'.")

    schema_name: typing.Final[str] = d["schema-name"]

    if "stores" not in d.keys():
        raise data.ConfigError("config file is missing an entry for 'stores'.")

    stores = tuple(_parse_store_dict(store_dict) for store_dict in d["stores"])

    try:
        return data.Config(schema_name=schema_name, stores=stores)
    except pydantic.ValidationError as e:
        raise data.ConfigError(f"An error occurred while loading the config file: {e!s}") from e


def _parse_store_dict(store_dict: dict[str, typing.Any], /) -> data.StoreConfig:
    for key in ("store-id", "api"):
        if key not in store_dict.keys():
            raise data.ConfigError(f"store entry in config file is missing an entry for {key!r}.")

    store_id: typing.Final[str] = store_dict["store-id"]

    try:
        api: typing.Final[data.API] = data.API(store_dict["api"])
    except ValueError as e:
        raise data.ConfigError(
            f"could not convert api entry, {store_dict['api']!r}, to a data.API instance."
        ) from e

    if api == data.API.HAPPYBASE and not store_dict.get("host"):
        raise data.ConfigError(f"store entry, {store_id}, uses the happybase api, so it must provide a 'host'.")

    try:
        return data.StoreConfig(
            store_id=store_id,
            api=api,
            host=store_dict.get("host"),
            port=store_dict.get("port"),
            table_prefix=store_dict.get("table-prefix"),
            timeout_millis=store_dict.get("timeout-millis"),
        )
    except pydantic.ValidationError as e:
        raise data.ConfigError(f"store entry, {store_id}, is invalid: {e!s}") from e

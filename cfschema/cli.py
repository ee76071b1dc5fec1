import argparse
import pathlib
import sys
import typing

import pydantic
from loguru import logger

from cfschema import adapter, data, service

__all__ = ("build_parser", "main", "parse_args")


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class CreateTableArgs:
    store: str
    table: str
    families: tuple[str, ...]
    columns: tuple[str, ...]


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class DropTableArgs:
    store: str
    table: str


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class FamiliesArgs:
    store: str
    table: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cfschema")
    parser.add_argument("--config", type=pathlib.Path, default=None)
    subparser = parser.add_subparsers(dest="command")

    create_table_parser = subparser.add_parser("create-table", help="Create a table with the given column families.")
    drop_table_parser = subparser.add_parser(
        "drop-table",
        help=f"Drop a table. Not available for {data.API.MEMORY} stores, which start empty on every run.",
    )
    families_parser = subparser.add_parser(
        "families",
        help=f"List the column families of a table. Not available for {data.API.MEMORY} stores, which start empty on every run.",
    )

    create_table_parser.add_argument("--store", type=str, required=True)
    create_table_parser.add_argument("--table", type=str, required=True)
    create_table_parser.add_argument("--family", dest="families", action="append", default=[])
    create_table_parser.add_argument("--column", dest="columns", action="append", default=[])

    drop_table_parser.add_argument("--store", type=str, required=True)
    drop_table_parser.add_argument("--table", type=str, required=True)

    families_parser.add_argument("--store", type=str, required=True)
    families_parser.add_argument("--table", type=str, required=True)

    return parser


def parse_args(args: argparse.Namespace, /) -> CreateTableArgs | DropTableArgs | FamiliesArgs:
    match cmd := args.command:
        case "create-table":
            if not args.store:
                raise data.InvalidArgument("--store is required.")

            if not args.table:
                raise data.InvalidArgument("--table is required.")

            return CreateTableArgs(
                store=args.store,
                table=args.table,
                families=tuple(args.families),
                columns=tuple(args.columns),
            )
        case "drop-table":
            if not args.store:
                raise data.InvalidArgument("--store is required.")

            if not args.table:
                raise data.InvalidArgument("--table is required.")

            return DropTableArgs(store=args.store, table=args.table)
        case "families":
            if not args.store:
                raise data.InvalidArgument("--store is required.")

            if not args.table:
                raise data.InvalidArgument("--table is required.")

            return FamiliesArgs(store=args.store, table=args.table)
        case _:
            raise data.InvalidArgument(f"Unrecognized command, {cmd!r}.")


def _run(
    cmd_args: CreateTableArgs | DropTableArgs | FamiliesArgs,
    /,
    *,
    config: data.Config,
) -> list[str]:
    store_config = config.store(cmd_args.store)
    if store_config is None:
        raise data.ConfigError(
            f"--store was {cmd_args.store}, but could not find a store entry by that name in the config file."
        )

    if store_config.api == data.API.MEMORY and not isinstance(cmd_args, CreateTableArgs):
        raise data.InvalidArgument(
            f"--store {cmd_args.store} is a {data.API.MEMORY} store, which starts empty on every run, "
            f"so it has no tables to inspect or drop."
        )

    with adapter.connection.open_connection(store_config=store_config) as con:
        client = adapter.StoreClient(con)
        schema = data.MutableSchema(name=config.schema_name)

        match cmd_args:
            case CreateTableArgs(table=table, families=families, columns=columns):
                builder = service.create_table(client, schema, table, families)
                for column in columns:
                    builder.with_column(column)
                builder.execute()
                return [f"Created {table}."]
            case DropTableArgs(table=table):
                service.drop_table(client, schema, table)
                return [f"Dropped {table}."]
            case FamiliesArgs(table=table):
                return sorted(client.get_column_families(table))
            case _:
                raise data.InvalidArgument(f"Unrecognized arguments, {cmd_args!r}.")


def main(argv: typing.Sequence[str] | None = None) -> int:
    try:
        if not getattr(sys, "frozen", False):
            logger.remove()
            logger.add(sys.stderr, level="INFO")

        logger.add(adapter.fs.get_log_folder() / "error.log", rotation="5 MB", retention="7 days", level="ERROR")

        ns = build_parser().parse_args(sys.argv[1:] if argv is None else argv)

        cfg = adapter.config.load(config_file=ns.config or adapter.fs.get_config_path())

        for line in _run(parse_args(ns), config=cfg):
            print(line)

        logger.info("Done.")
        return 0
    except data.CfSchemaError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.exception(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())

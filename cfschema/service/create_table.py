from __future__ import annotations

import dataclasses
import enum
import typing

from loguru import logger

from cfschema import data
from cfschema.adapter.store_client import StoreClient

__all__ = ("BuilderState", "CreateTableBuilder", "CreateTableRequest", "create_table")


class BuilderState(enum.Enum):
    OPEN = "open"
    EXECUTED = "executed"


@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateTableRequest:
    schema: data.MutableSchema
    table_name: str
    column_families: frozenset[str] | None
    columns: tuple[data.Column, ...]


class CreateTableBuilder:
    """Collects a create-table request and sends it to the store when ``execute`` is called.

    Column families may be given up front or set later with ``set_column_families``; they are only
    checked when the request is executed, so a failed ``execute`` can be corrected and retried.
    """

    def __init__(
        self,
        *,
        client: StoreClient,
        schema: data.MutableSchema,
        table_name: str,
        column_families: typing.Iterable[str] | None,
    ):
        self._client: typing.Final[StoreClient] = client
        self._state = BuilderState.OPEN
        self._request = CreateTableRequest(
            schema=schema,
            table_name=table_name,
            column_families=_to_frozenset(column_families),
            columns=(),
        )

    @property
    def request(self) -> CreateTableRequest:
        return self._request

    @property
    def state(self) -> BuilderState:
        return self._state

    def set_column_families(self, /, column_families: typing.Iterable[str] | None) -> CreateTableBuilder:
        self._request = dataclasses.replace(self._request, column_families=_to_frozenset(column_families))
        return self

    def with_column(
        self,
        name: str,
        /,
        data_type: data.DataType | None = None,
    ) -> CreateTableBuilder:
        column = data.Column.parse(name, data_type)
        columns = tuple(col for col in self._request.columns if col.name != column.name)
        self._request = dataclasses.replace(self._request, columns=columns + (column,))
        return self

    def execute(self) -> data.Table:
        if self._state == BuilderState.EXECUTED:
            raise data.BuilderAlreadyExecuted(table_name=self._request.table_name)

        _validate(self._request)

        self._client.create_table(self._request.table_name, self._request.column_families)

        table = _to_table(self._request)
        self._request.schema.add_table(table)
        self._state = BuilderState.EXECUTED
        logger.info(f"Added {table.table_name} to {self._request.schema}.")
        return table

    def __repr__(self) -> str:
        return f"CreateTableBuilder(table_name={self._request.table_name!r}, state={self._state.value!r})"


def create_table(
    client: StoreClient,
    schema: data.Schema,
    table_name: str,
    column_families: typing.Iterable[str] | None = None,
) -> CreateTableBuilder:
    match schema:
        case data.MutableSchema():
            return CreateTableBuilder(
                client=client,
                schema=schema,
                table_name=table_name,
                column_families=column_families,
            )
        case _:
            raise data.NotAMutableSchema(schema=schema)


def _validate(request: CreateTableRequest, /) -> None:
    if not request.column_families:
        raise data.MissingColumnFamilies()

    for col in request.columns:
        if col.family is not None and col.family not in request.column_families:
            raise data.UnknownColumnFamily(column_name=col.name, table_name=request.table_name)


def _to_table(request: CreateTableRequest, /) -> data.Table:
    families = typing.cast(frozenset[str], request.column_families)
    declared = {col.family for col in request.columns if col.family is not None}

    columns: list[data.Column] = []
    if not any(col.is_identifier for col in request.columns):
        columns.append(data.Column.identifier())
    columns.extend(request.columns)
    # families without a declared column are still writable as a whole
    columns.extend(
        data.Column(family=family, qualifier=None, data_type=data.DataType.Map)
        for family in sorted(families - declared)
    )

    return data.Table(
        schema_name=request.schema.name,
        table_name=request.table_name,
        columns=tuple(columns),
        column_families=families,
    )


def _to_frozenset(column_families: typing.Iterable[str] | None, /) -> frozenset[str] | None:
    if column_families is None:
        return None
    if isinstance(column_families, (str, bytes)):
        raise data.ColumnFamiliesNotACollection(column_families=column_families)
    return frozenset(column_families)

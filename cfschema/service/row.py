from __future__ import annotations

import collections.abc
import typing

from cfschema import data

__all__ = ("RowBuilder", "build_row")


_UNSET: typing.Final = object()


class RowBuilder:
    """Stages the values of a single row of ``table``.

    Every column must belong to the table, and the identifier column can only be given a value once.
    """

    def __init__(self, /, table: data.Table):
        self._table: typing.Final[data.Table] = table
        self._id_value: typing.Any = _UNSET
        self._values: dict[data.Column, typing.Any] = {}

    @property
    def table(self) -> data.Table:
        return self._table

    def id(self, /, value: typing.Any) -> RowBuilder:
        id_column = self._table.id_column
        if id_column is None:
            raise data.ColumnNotInTable(column_name=data.ID_COLUMN_NAME, table_name=self._table.table_name)

        if self._id_value is not _UNSET:
            raise data.MultipleIdentifierValues(table_name=self._table.table_name)

        self._id_value = value
        return self

    def value(self, column: data.Column | str, /, value: typing.Any) -> RowBuilder:
        if isinstance(column, str):
            column = data.Column.parse(column)

        if column.is_identifier:
            return self.id(value)

        if not self._table.has_column(column):
            raise data.ColumnNotInTable(column_name=column.name, table_name=self._table.table_name)

        if column.qualifier is None and not isinstance(value, collections.abc.Mapping):
            raise data.InvalidArgument(
                f"The value for the column family, {column.family}, must be a mapping of qualifier to value, "
                f"but got {type(value).__name__}."
            )

        self._values[self._resolve(column)] = value
        return self

    def build(self) -> data.Row:
        values: dict[data.Column, typing.Any] = {}
        if self._id_value is not _UNSET:
            values[typing.cast(data.Column, self._table.id_column)] = self._id_value
        values.update(self._values)
        return data.Row(self._table, values)

    def _resolve(self, /, column: data.Column) -> data.Column:
        # use the table's own declaration so the row carries the declared data type
        declared = self._table.get_column(column.name)
        if declared is None:
            return column
        return declared


def build_row(
    table: data.Table,
    /,
    *,
    id_value: typing.Any | None = None,
    values: typing.Mapping[str, typing.Mapping[str, typing.Any]] | None = None,
) -> data.Row:
    builder = RowBuilder(table)
    if id_value is not None:
        builder.id(id_value)

    for family, qualifier_values in (values or {}).items():
        for qualifier, value in qualifier_values.items():
            builder.value(data.Column.parse(f"{family}:{qualifier}"), value)

    return builder.build()

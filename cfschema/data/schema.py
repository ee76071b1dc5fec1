from __future__ import annotations

import dataclasses
import typing

from cfschema.data.table import Table

__all__ = ("ImmutableSchema", "MutableSchema", "Schema")


class MutableSchema:
    def __init__(self, *, name: str, tables: typing.Iterable[Table] = ()):
        self._name: typing.Final[str] = name
        self._tables: dict[str, Table] = {table.table_name: table for table in tables}

    @property
    def name(self) -> str:
        return self._name

    @property
    def tables(self) -> tuple[Table, ...]:
        return tuple(self._tables.values())

    @property
    def table_names(self) -> tuple[str, ...]:
        return tuple(self._tables.keys())

    def get_table(self, /, table_name: str) -> Table | None:
        return self._tables.get(table_name)

    def add_table(self, /, table: Table) -> None:
        self._tables[table.table_name] = table

    def remove_table(self, /, table_name: str) -> Table | None:
        return self._tables.pop(table_name, None)

    def __repr__(self) -> str:
        return f"MutableSchema(name={self._name!r})"

    def __str__(self) -> str:
        return self.__repr__()


@dataclasses.dataclass(frozen=True, kw_only=True)
class ImmutableSchema:
    name: str
    tables: tuple[Table, ...]

    @property
    def table_names(self) -> tuple[str, ...]:
        return tuple(table.table_name for table in self.tables)

    def get_table(self, /, table_name: str) -> Table | None:
        return next((table for table in self.tables if table.table_name == table_name), None)

    @staticmethod
    def of(schema: MutableSchema | ImmutableSchema, /) -> ImmutableSchema:
        return ImmutableSchema(name=schema.name, tables=tuple(schema.tables))

    def __repr__(self) -> str:
        return f"ImmutableSchema(name={self.name!r})"

    def __str__(self) -> str:
        return self.__repr__()


Schema: typing.TypeAlias = MutableSchema | ImmutableSchema

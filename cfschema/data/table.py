from __future__ import annotations

import pydantic

from cfschema.data.column import Column

__all__ = ("Table",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class Table:
    schema_name: str
    table_name: str
    columns: tuple[Column, ...]
    column_families: frozenset[str]

    @property
    def id_column(self) -> Column | None:
        return next((col for col in self.columns if col.is_identifier), None)

    def get_column(self, /, name: str) -> Column | None:
        return next((col for col in self.columns if col.name == name), None)

    def has_column(self, /, column: Column) -> bool:
        if column.is_identifier:
            return self.id_column is not None

        if column.family not in self.column_families:
            return False

        # a declared family-level column covers every qualifier under it
        return any(
            col.family == column.family and (col.qualifier is None or col.qualifier == column.qualifier)
            for col in self.columns
        )

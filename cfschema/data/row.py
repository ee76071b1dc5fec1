from __future__ import annotations

import dataclasses
import typing

from cfschema.data.column import Column
from cfschema.data.table import Table

__all__ = ("Row", "to_row_key")


def to_row_key(value: typing.Any, /) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, str):
        return value
    return str(value)


@dataclasses.dataclass(frozen=True)
class Row:
    table: Table
    values: dict[Column, typing.Any]

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self.values.keys())

    @property
    def id_value(self) -> typing.Any | None:
        return next((v for col, v in self.values.items() if col.is_identifier), None)

    def cells(self) -> dict[str, dict[str, typing.Any]]:
        """Group the non-identifier values by family, then by qualifier.

        A value set on a family-level column must be a mapping of qualifier to value.
        """
        result: dict[str, dict[str, typing.Any]] = {}
        for col, value in self.values.items():
            if col.family is None:
                continue

            family = result.setdefault(col.family, {})
            if col.qualifier is None:
                family.update({str(k): v for k, v in dict(value).items()})
            else:
                family[col.qualifier] = value
        return result

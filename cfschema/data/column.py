from __future__ import annotations

import dataclasses

from cfschema.data.data_type import DataType
from cfschema.data.error import InvalidColumnName

__all__ = ("Column", "ID_COLUMN_NAME")


ID_COLUMN_NAME = "_id"


@dataclasses.dataclass(frozen=True)
class Column:
    """A column is either the identifier column or a cell under exactly one column family.

    A column with a family but no qualifier stands for the whole family.
    """

    family: str | None
    qualifier: str | None
    data_type: DataType

    @property
    def name(self) -> str:
        if self.family is None:
            return ID_COLUMN_NAME

        if self.qualifier is None:
            return self.family

        return f"{self.family}:{self.qualifier}"

    @property
    def is_identifier(self) -> bool:
        return self.family is None

    @staticmethod
    def identifier(*, data_type: DataType = DataType.Binary) -> Column:
        return Column(family=None, qualifier=None, data_type=data_type)

    @staticmethod
    def parse(name: str, /, data_type: DataType | None = None) -> Column:
        if name == ID_COLUMN_NAME:
            return Column.identifier(data_type=data_type or DataType.Binary)

        family, sep, qualifier = name.partition(":")
        if not family or (sep and not qualifier):
            raise InvalidColumnName(column_name=name)

        if not sep:
            return Column(family=family, qualifier=None, data_type=data_type or DataType.Map)

        return Column(family=family, qualifier=qualifier, data_type=data_type or DataType.Binary)

    def __str__(self) -> str:
        return self.name

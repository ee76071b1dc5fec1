import typing

from cfschema import data

__all__ = ("get_column_families",)


def get_column_families(columns: typing.Iterable[data.Column], /) -> set[str]:
    return {col.family for col in columns if col.family is not None}

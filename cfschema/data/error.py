from __future__ import annotations

import typing

__all__ = (
    "BuilderAlreadyExecuted",
    "CfSchemaError",
    "ColumnFamiliesNotACollection",
    "ColumnNotInTable",
    "ConfigError",
    "DomainRuleViolation",
    "InvalidArgument",
    "InvalidColumnName",
    "MissingColumnFamilies",
    "MultipleIdentifierValues",
    "NotAMutableSchema",
    "StoreError",
    "TableAlreadyExists",
    "TableDoesntExist",
    "TableNameOrColumnFamiliesMissing",
    "UnknownColumnFamily",
)


class CfSchemaError(Exception):
    """Base class for errors occurring in the cfschema codebase"""


class InvalidArgument(CfSchemaError, ValueError):
    """The caller passed something that can be rejected without contacting the store."""


class DomainRuleViolation(CfSchemaError):
    """The request is well-typed, but the store's rules don't allow it."""


class StoreError(CfSchemaError):
    """Error arising from a store connection."""


class ConfigError(CfSchemaError):
    """Error arising from loading the config file."""


class NotAMutableSchema(InvalidArgument):
    def __init__(self, *, schema: typing.Any):
        super().__init__(f"Not a mutable schema: {schema}")


class TableNameOrColumnFamiliesMissing(InvalidArgument):
    def __init__(self) -> None:
        super().__init__("Can't create a table without having the tableName or columnFamilies")


class ColumnFamiliesNotACollection(InvalidArgument):
    def __init__(self, *, column_families: str | bytes):
        super().__init__(
            f"The column families must be a collection of names, but got the single value {column_families!r}."
        )


class ColumnNotInTable(InvalidArgument):
    def __init__(self, *, column_name: str, table_name: str):
        super().__init__(f"The column, {column_name}, doesn't belong to the table, {table_name}.")


class MultipleIdentifierValues(InvalidArgument):
    def __init__(self, *, table_name: str):
        super().__init__(f"A row for {table_name} can only have one value for the identifier column.")


class InvalidColumnName(InvalidArgument):
    def __init__(self, *, column_name: str):
        super().__init__(
            f"The column name, {column_name!r}, is not of the form 'family' or 'family:qualifier'."
        )


class MissingColumnFamilies(DomainRuleViolation):
    def __init__(self) -> None:
        super().__init__("Creating a table without columnFamilies")


class UnknownColumnFamily(DomainRuleViolation):
    def __init__(self, *, column_name: str, table_name: str):
        super().__init__(
            f"The column, {column_name}, belongs to a column family that {table_name} is not being created with."
        )


class BuilderAlreadyExecuted(DomainRuleViolation):
    def __init__(self, *, table_name: str):
        super().__init__(f"The create table request for {table_name} has already been executed.")


class TableDoesntExist(StoreError):
    def __init__(self, *, table_name: str):
        super().__init__(f"The table, {table_name}, doesn't exist.")


class TableAlreadyExists(StoreError):
    def __init__(self, *, table_name: str):
        super().__init__(f"The table, {table_name}, already exists.")

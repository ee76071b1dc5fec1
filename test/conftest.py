import typing

import pytest

from cfschema import adapter, data
from cfschema.adapter.connection.memory import MemoryConnection

TABLE_NAME = "table_for_junit"
CF_FOO = "foo"
CF_BAR = "bar"
Q_HELLO = "hello"
Q_HEY = "hey"
Q_BAH = "bah"


@pytest.fixture(scope="function")
def memory_connection_fixture() -> typing.Generator[MemoryConnection, None, None]:
    con = MemoryConnection()
    yield con
    con.close()


@pytest.fixture(scope="function")
def client_fixture(memory_connection_fixture: MemoryConnection) -> adapter.StoreClient:
    return adapter.StoreClient(memory_connection_fixture)


@pytest.fixture(scope="function")
def schema_fixture() -> data.MutableSchema:
    return data.MutableSchema(name="test-schema")


@pytest.fixture(scope="function")
def foo_bar_table_fixture() -> data.Table:
    return create_table_def(TABLE_NAME, with_id=True, families=(CF_FOO, CF_BAR))


def create_table_def(table_name: str, *, with_id: bool, families: typing.Iterable[str]) -> data.Table:
    columns: list[data.Column] = []
    if with_id:
        columns.append(data.Column.identifier())

    families = tuple(families)
    for family in families:
        columns.append(data.Column(family=family, qualifier=Q_HELLO, data_type=data.DataType.Text))
        columns.append(data.Column(family=family, qualifier=Q_HEY, data_type=data.DataType.Text))
        columns.append(data.Column(family=family, qualifier=Q_BAH, data_type=data.DataType.Int))

    return data.Table(
        schema_name="test-schema",
        table_name=table_name,
        columns=tuple(columns),
        column_families=frozenset(families),
    )


@pytest.fixture(scope="function")
def table_factory() -> typing.Callable[..., data.Table]:
    return create_table_def

import pytest

from cfschema import adapter, data, service
from cfschema.adapter.connection.memory import MemoryConnection


def test_wrong_schema(client_fixture: adapter.StoreClient, schema_fixture: data.MutableSchema) -> None:
    immutable_schema = data.ImmutableSchema.of(schema_fixture)
    with pytest.raises(data.InvalidArgument) as e:
        service.create_table(client_fixture, immutable_schema, "table_for_junit").execute()
    assert str(e.value) == f"Not a mutable schema: {immutable_schema}"
    assert not client_fixture.table_exists("table_for_junit")


def test_wrong_schema_fails_before_execute(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    with pytest.raises(data.NotAMutableSchema):
        service.create_table(client_fixture, data.ImmutableSchema.of(schema_fixture), "t", {"foo"})


def test_create_table_without_column_families(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    with pytest.raises(data.DomainRuleViolation) as e:
        service.create_table(client_fixture, schema_fixture, "table_for_junit").execute()
    assert str(e.value) == "Creating a table without columnFamilies"


@pytest.mark.parametrize("column_families", [None, set(), frozenset(), []])
def test_column_families_missing_fails_at_execute(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
    column_families: object,
) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit", column_families)
    assert builder.state == service.BuilderState.OPEN
    with pytest.raises(data.MissingColumnFamilies) as e:
        builder.execute()
    assert str(e.value) == "Creating a table without columnFamilies"
    assert builder.state == service.BuilderState.OPEN
    assert schema_fixture.get_table("table_for_junit") is None


def test_column_families_set_to_none_after_constructor(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit", {"foo"})
    builder.set_column_families(None)
    with pytest.raises(data.MissingColumnFamilies):
        builder.execute()


def test_create_table_without_id_column(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
    table_factory,
) -> None:
    table = table_factory("table_for_junit", with_id=False, families=("foo", "bar"))
    row = service.build_row(table, values={"foo": {"hello": "world"}, "bar": {"hey": "yo"}})
    column_families = service.get_column_families(row.columns)

    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit")
    builder.set_column_families(column_families)
    builder.execute()

    _check_successfully_inserted_table(client_fixture, schema_fixture)


def test_setting_column_families_after_constructor(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
    foo_bar_table_fixture: data.Table,
) -> None:
    row = service.build_row(
        foo_bar_table_fixture,
        id_value="row-1",
        values={"foo": {"hello": "world"}, "bar": {"hey": "yo"}},
    )
    column_families = service.get_column_families(row.columns)

    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit")
    builder.set_column_families({"other"})
    builder.set_column_families(column_families)
    builder.execute()

    _check_successfully_inserted_table(client_fixture, schema_fixture)
    assert builder.state == service.BuilderState.EXECUTED


def test_create_table_column_families_in_constructor(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
    foo_bar_table_fixture: data.Table,
) -> None:
    row = service.build_row(foo_bar_table_fixture, id_value="row-1", values={"foo": {"hello": "world"}, "bar": {"bah": 1}})
    column_families = service.get_column_families(row.columns)

    service.create_table(client_fixture, schema_fixture, "table_for_junit", column_families).execute()

    _check_successfully_inserted_table(client_fixture, schema_fixture)


def test_retry_after_setting_column_families(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit")
    with pytest.raises(data.MissingColumnFamilies):
        builder.execute()

    builder.set_column_families(["foo", "bar"])
    table = builder.execute()

    assert table.column_families == frozenset({"foo", "bar"})
    _check_successfully_inserted_table(client_fixture, schema_fixture)


def test_execute_twice(client_fixture: adapter.StoreClient, schema_fixture: data.MutableSchema) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "table_for_junit", {"foo"})
    builder.execute()
    with pytest.raises(data.BuilderAlreadyExecuted):
        builder.execute()


def test_store_error_is_not_wrapped(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    service.create_table(client_fixture, schema_fixture, "table_for_junit", {"foo"}).execute()
    other_schema = data.MutableSchema(name="other")
    with pytest.raises(data.TableAlreadyExists):
        service.create_table(client_fixture, other_schema, "table_for_junit", {"foo"}).execute()
    assert other_schema.get_table("table_for_junit") is None


def test_created_table_columns(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    table = (
        service.create_table(client_fixture, schema_fixture, "customer", {"info", "stats"})
        .with_column("info:name", data.DataType.Text)
        .with_column("info:email", data.DataType.Text)
        .execute()
    )

    assert [col.name for col in table.columns] == ["_id", "info:name", "info:email", "stats"]
    assert table.schema_name == "test-schema"
    assert table.get_column("info:name").data_type == data.DataType.Text
    assert table.get_column("stats").data_type == data.DataType.Map


def test_declared_column_outside_column_families(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "customer", {"info"}).with_column("stats:visits")
    with pytest.raises(data.UnknownColumnFamily):
        builder.execute()
    assert not client_fixture.table_exists("customer")


def test_validation_runs_before_store_call(schema_fixture: data.MutableSchema) -> None:
    con = _RecordingConnection()
    client = adapter.StoreClient(con)
    with pytest.raises(data.MissingColumnFamilies):
        service.create_table(client, schema_fixture, "table_for_junit", set()).execute()
    assert con.created == []


class _RecordingConnection(MemoryConnection):
    def __init__(self) -> None:
        super().__init__()
        self.created: list[tuple[str, frozenset[str]]] = []

    def create_table(self, *, table_name: str, column_families: frozenset[str]) -> None:
        self.created.append((table_name, column_families))
        super().create_table(table_name=table_name, column_families=column_families)


def _check_successfully_inserted_table(client: adapter.StoreClient, schema: data.MutableSchema) -> None:
    assert client.table_exists("table_for_junit")
    assert client.get_column_families("table_for_junit") == frozenset({"foo", "bar"})
    assert "table_for_junit" in schema.table_names
    table = schema.get_table("table_for_junit")
    assert table is not None
    assert table.column_families == frozenset({"foo", "bar"})


def test_single_family_string_is_rejected(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    with pytest.raises(data.InvalidArgument):
        service.create_table(client_fixture, schema_fixture, "t2", "foo")

    builder = service.create_table(client_fixture, schema_fixture, "t2")
    with pytest.raises(data.ColumnFamiliesNotACollection):
        builder.set_column_families("foo")

    builder.set_column_families({"foo"})
    table = builder.execute()
    assert table.column_families == frozenset({"foo"})
    assert client_fixture.get_column_families("t2") == frozenset({"foo"})


def test_blank_family_name_is_rejected_by_the_store_client(
    client_fixture: adapter.StoreClient,
    schema_fixture: data.MutableSchema,
) -> None:
    builder = service.create_table(client_fixture, schema_fixture, "t2", {""})
    with pytest.raises(data.TableNameOrColumnFamiliesMissing):
        builder.execute()
    assert builder.state == service.BuilderState.OPEN
    assert schema_fixture.get_table("t2") is None

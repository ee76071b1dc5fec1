from __future__ import annotations

import copy

from cfschema import data

__all__ = ("MemoryConnection",)


class MemoryConnection(data.StoreConnection):
    def __init__(self) -> None:
        self._families: dict[str, frozenset[str]] = {}
        self._rows: dict[str, dict[str, data.Cells]] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def create_table(self, *, table_name: str, column_families: frozenset[str]) -> None:
        if table_name in self._families:
            raise data.TableAlreadyExists(table_name=table_name)

        self._families[table_name] = frozenset(column_families)
        self._rows[table_name] = {}

    def delete(self, *, table_name: str, row_key: str) -> None:
        self._table_rows(table_name).pop(row_key, None)

    def delete_table(self, /, table_name: str) -> None:
        self._table_rows(table_name)
        del self._families[table_name]
        del self._rows[table_name]

    def get(self, *, table_name: str, row_key: str) -> data.Cells | None:
        cells = self._table_rows(table_name).get(row_key)
        if cells is None:
            return None
        return copy.deepcopy(cells)

    def get_column_families(self, /, table_name: str) -> frozenset[str]:
        self._table_rows(table_name)
        return self._families[table_name]

    def put(self, *, table_name: str, row_key: str, cells: data.Cells) -> None:
        rows = self._table_rows(table_name)
        if unknown := set(cells.keys()) - self._families[table_name]:
            raise data.StoreError(
                f"The column families, {', '.join(sorted(unknown))}, don't exist in {table_name}."
            )

        existing = rows.setdefault(row_key, {})
        for family, values in cells.items():
            existing.setdefault(family, {}).update(copy.deepcopy(values))

    def table_exists(self, /, table_name: str) -> bool:
        return table_name in self._families

    def _table_rows(self, /, table_name: str) -> dict[str, data.Cells]:
        if table_name not in self._rows:
            raise data.TableDoesntExist(table_name=table_name)
        return self._rows[table_name]

    def __repr__(self) -> str:
        return f"MemoryConnection(tables={sorted(self._families)!r})"


if __name__ == "__main__":
    con = MemoryConnection()
    con.create_table(table_name="customer", column_families=frozenset({"info"}))
    con.put(table_name="customer", row_key="1", cells={"info": {"name": "Steve"}})
    print(con.get(table_name="customer", row_key="1"))

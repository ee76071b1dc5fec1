import abc
import typing

__all__ = ("Cells", "StoreConnection")


Cells: typing.TypeAlias = dict[str, dict[str, typing.Any]]


class StoreConnection(abc.ABC):
    @abc.abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def create_table(self, *, table_name: str, column_families: frozenset[str]) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, *, table_name: str, row_key: str) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def delete_table(self, /, table_name: str) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, *, table_name: str, row_key: str) -> Cells | None:
        raise NotImplementedError

    @abc.abstractmethod
    def get_column_families(self, /, table_name: str) -> frozenset[str]:
        raise NotImplementedError

    @abc.abstractmethod
    def put(self, *, table_name: str, row_key: str, cells: Cells) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def table_exists(self, /, table_name: str) -> bool:
        raise NotImplementedError

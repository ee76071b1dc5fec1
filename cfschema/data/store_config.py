import pydantic

from cfschema.data.api import API

__all__ = ("StoreConfig",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class StoreConfig:
    store_id: str
    api: API
    host: str | None
    port: pydantic.PositiveInt | None
    table_prefix: str | None
    timeout_millis: pydantic.PositiveInt | None

    def __repr__(self) -> str:
        return f"StoreConfig(store_id={self.store_id!r}, api={self.api!r})"

import pydantic

from cfschema.data.store_config import StoreConfig

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Config:
    schema_name: str
    stores: tuple[StoreConfig, ...]

    def store(self, /, store_id: str) -> StoreConfig | None:
        return next((store for store in self.stores if store.store_id == store_id), None)

    def __repr__(self) -> str:
        return f"Config(schema_name={self.schema_name!r}, stores={self.stores})"

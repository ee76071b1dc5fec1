import enum

__all__ = ("API",)


class API(enum.Enum):
    HAPPYBASE = "happybase"
    MEMORY = "memory"

    def __repr__(self) -> str:
        return f"API.{self.name}"

    def __str__(self) -> str:
        return self.value

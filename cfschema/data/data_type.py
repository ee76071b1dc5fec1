import enum

__all__ = ("DataType",)


# noinspection PyArgumentList
class DataType(enum.Enum):
    Binary = enum.auto()
    Int = enum.auto()
    Map = enum.auto()
    Text = enum.auto()

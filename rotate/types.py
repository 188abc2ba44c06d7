"""Base types of the language."""

from __future__ import annotations

from enum import Enum, auto


class BaseType(Enum):
    """The fundamental type categories of a value."""

    INVALID = auto()
    VOID = auto()
    INT = auto()
    UINT = auto()
    FLOAT = auto()
    CHAR = auto()
    BOOL = auto()
    ARRAY = auto()
    STRUCT = auto()
    ENUM = auto()
    ID = auto()
    TBD = auto()


_NAMES: dict[BaseType, str] = {
    BaseType.VOID: "VOID",
    BaseType.INT: "INT",
    BaseType.BOOL: "BOOL",
    BaseType.CHAR: "CHAR",
    BaseType.UINT: "uint",
    BaseType.FLOAT: "FLOAT",
    BaseType.ARRAY: "ARRAY",
    BaseType.ENUM: "ENUM",
    BaseType.STRUCT: "STRUCT",
    BaseType.INVALID: "INVALID",
    BaseType.ID: "ID",
    BaseType.TBD: "TBD",
}


def base_type_name(base_type: BaseType) -> str:
    """Return the display name of a base type."""
    try:
        return _NAMES[base_type]
    except KeyError:
        raise ValueError(f"unknown base type: {base_type!r}") from None
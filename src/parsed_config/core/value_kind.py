from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

class ValueKind(Enum):
    ORIGINAL = "original"
    MAP = "map"
    LIST = "list"
    INTEGER = "integer"
    BOOLEAN = "boolean"

def kind_for(default: Any) -> ValueKind:
    """Pick the representation a default asks for, checked as map, list, integer, boolean"""
    if default is None:
        return ValueKind.ORIGINAL
    if isinstance(default, Mapping):
        return ValueKind.MAP
    if isinstance(default, Sequence) and not isinstance(default, (str, bytes)):
        return ValueKind.LIST
    # bool is an int subclass
    if isinstance(default, bool):
        return ValueKind.BOOLEAN
    if isinstance(default, int):
        return ValueKind.INTEGER
    return ValueKind.ORIGINAL

from .value_parser import ValueParser
from .patterns import MAP_SHAPE, INTEGER

__all__ = ['ValueParser', 'MAP_SHAPE', 'INTEGER']

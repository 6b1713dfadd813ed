from .parsed_value import ParsedValue
from .value_kind import ValueKind, kind_for

__all__ = ['ParsedValue', 'ValueKind', 'kind_for']

"""Config values pre-parsed into every type they can be read as."""

from .core import ParsedValue, ValueKind
from .parsing import ValueParser
from .config import ValueConfig
from .registry import ConfigRegistry
from .errors import ParsedConfigError, MapParseError, ValueTypeError

__all__ = [
    'ParsedValue',
    'ValueKind',
    'ValueParser',
    'ValueConfig',
    'ConfigRegistry',
    'ParsedConfigError',
    'MapParseError',
    'ValueTypeError'
]

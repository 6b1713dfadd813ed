import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from parsed_config.config import ValueConfig, DEFAULT_CONFIG
from parsed_config.core.value_kind import ValueKind, kind_for
from parsed_config.errors import MapParseError, ValueTypeError
from parsed_config.parsing.value_parser import ValueParser

logger = logging.getLogger(__name__)

T = TypeVar('T')

@dataclass(frozen=True, eq=False)
class ParsedValue:
    """A config value pre-parsed into every representation it supports.

    Text values are parsed once, on construction, into a list, a boolean,
    an integer and (when the text looks like ``key:value`` pairs) a map.
    Any other value is kept as is and only ever returned as itself.

    Retrieving with a default returns the representation matching the
    default's type, or the default when there is none. Retrieving without
    a default returns the original value.
    """
    original: Any
    config: Optional[ValueConfig] = field(default=None, repr=False, compare=False)
    as_list: Optional[Tuple[str, ...]] = field(init=False, default=None)
    as_map: Optional[Mapping[str, str]] = field(init=False, default=None)
    as_boolean: Optional[bool] = field(init=False, default=None)
    as_integer: Optional[int] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.original, str):
            return

        config = self.config or DEFAULT_CONFIG
        text = self.original

        object.__setattr__(self, 'as_list', tuple(ValueParser.split_unique(text, config.list_separator)))
        # YAML would read "on"/"off" as booleans, plain text does not
        object.__setattr__(self, 'as_boolean', ValueParser.parse_boolean(text))
        if ValueParser.looks_like_map(text):
            object.__setattr__(self, 'as_map', MappingProxyType(self._parse_map(text, config)))
        object.__setattr__(self, 'as_integer', ValueParser.parse_integer(text))

    @staticmethod
    def _parse_map(text: str, config: ValueConfig) -> Dict[str, str]:
        parsed: Dict[str, str] = {}
        try:
            ValueParser.parse_entries(
                text,
                parsed.__setitem__,
                config.map_entry_separator,
                config.key_value_separator
            )
        except MapParseError as e:
            logger.warning(f"Error attempting to parse {text} to a map - {e}")
            logger.warning("This value will only be available as a string or a list")
            if config.warning_handler:
                try:
                    config.warning_handler(e)
                except Exception as handler_error:
                    logger.error(f"Warning handler failed: {handler_error}")
            parsed.clear()
        return parsed

    def get(self, default: Any = None) -> Any:
        """Get the value coerced to the type of default, or default if it can't be"""
        if default is None or type(default) is type(self.original):
            return self.original
        kind = kind_for(default)
        if kind is ValueKind.ORIGINAL:
            return default
        return self.get_as(kind, default)

    def get_as(self, kind: ValueKind, default: Any = None) -> Any:
        """Get one representation by kind, or default if it is unavailable"""
        if kind is ValueKind.ORIGINAL:
            value = self.original
        elif kind is ValueKind.MAP:
            # returned containers are copies
            value = None if self.as_map is None else dict(self.as_map)
        elif kind is ValueKind.LIST:
            value = None if self.as_list is None else list(self.as_list)
        elif kind is ValueKind.INTEGER:
            value = self.as_integer
        else:
            value = self.as_boolean
        return default if value is None else value

    def get_typed(self, expected_type: Type[T]) -> Optional[T]:
        """Get the original value, which the caller expects to be of expected_type"""
        value = self.original
        if value is None:
            return None
        if isinstance(value, expected_type) and not (isinstance(value, bool) and expected_type is int):
            return value
        raise ValueTypeError(
            f"Config value {value!r} is {type(value).__name__}, not {expected_type.__name__}"
        )

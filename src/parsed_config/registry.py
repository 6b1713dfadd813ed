import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Type, TypeVar

from parsed_config.config import ValueConfig
from parsed_config.core.parsed_value import ParsedValue

logger = logging.getLogger(__name__)

T = TypeVar('T')

@dataclass
class ConfigRegistry:
    """Parsed values for a loaded config, keyed by property name"""
    values: Dict[str, ParsedValue] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping, config: Optional[ValueConfig] = None) -> 'ConfigRegistry':
        """Wrap every entry of raw, with nested mappings also reachable by dotted key"""
        registry = cls()
        registry._add_entries(raw, "", config)
        logger.debug(f"Loaded {len(registry.values)} config properties")
        return registry

    def _add_entries(self, raw: Mapping, prefix: str, config: Optional[ValueConfig]) -> None:
        for key, value in raw.items():
            name = f"{prefix}{key}"
            self.values[name] = ParsedValue(value, config)
            if isinstance(value, Mapping):
                self._add_entries(value, f"{name}.", config)

    def get_property(self, name: str, default: Any = None) -> Any:
        """Get a property coerced to the type of default, or default if unset"""
        value = self.values.get(name)
        if value is None:
            return default
        return value.get(default)

    def get_typed(self, name: str, expected_type: Type[T]) -> Optional[T]:
        """Get a property that must exist and be of expected_type"""
        if name not in self.values:
            raise KeyError(name)
        return self.values[name].get_typed(expected_type)

    def keys(self) -> Iterator[str]:
        return iter(self.values)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

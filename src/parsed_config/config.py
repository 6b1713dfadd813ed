from typing import Optional, Callable

from parsed_config.errors import MapParseError

class ValueConfig:
    def __init__(
        self,
        list_separator: str = ",",
        map_entry_separator: str = ";",
        key_value_separator: str = ":",
        warning_handler: Optional[Callable[[MapParseError], None]] = None
    ):
        self.list_separator = list_separator
        self.map_entry_separator = map_entry_separator
        self.key_value_separator = key_value_separator
        self.warning_handler = warning_handler

DEFAULT_CONFIG = ValueConfig()

from typing import Callable, Dict, List, Optional

from parsed_config.errors import MapParseError
from parsed_config.parsing.patterns import MAP_SHAPE, INTEGER, INT_MIN, INT_MAX

class ValueParser:
    @staticmethod
    def split_unique(text: str, separator: str = ",") -> List[str]:
        """Split text into unique, stripped, non-empty items in first-seen order"""
        items: Dict[str, None] = {}
        for item in text.split(separator):
            item = item.strip()
            if item:
                items.setdefault(item)
        return list(items)

    @staticmethod
    def parse_entries(
        text: str,
        emit: Callable[[str, str], None],
        entry_separator: str = ";",
        key_value_separator: str = ":"
    ) -> None:
        """Call emit once per key/value entry, raising MapParseError on a malformed entry"""
        for entry in text.split(entry_separator):
            if not entry.strip():
                continue

            if key_value_separator not in entry:
                raise MapParseError(entry, f"missing '{key_value_separator}'")

            key, value = entry.split(key_value_separator, 1)
            key = key.strip()
            value = value.strip()

            if not key:
                raise MapParseError(entry, "empty key")
            if not value:
                raise MapParseError(entry, "empty value")

            emit(key, value)

    @staticmethod
    def parse_boolean(text: str) -> bool:
        return text.lower() == "true"

    @staticmethod
    def parse_integer(text: str) -> Optional[int]:
        """Parse a base-10 integer literal, None if text is not one"""
        if not INTEGER.fullmatch(text):
            return None
        value = int(text)
        if value < INT_MIN or value > INT_MAX:
            return None
        return value

    @staticmethod
    def looks_like_map(text: str) -> bool:
        return MAP_SHAPE.search(text) is not None

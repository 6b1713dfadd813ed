class ParsedConfigError(Exception):
    """Base error for config value failures"""
    pass

class MapParseError(ParsedConfigError):
    """Error when a map-shaped value has a malformed entry"""

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"Unable to parse map entry '{entry}': {reason}")

class ValueTypeError(ParsedConfigError, TypeError):
    """Error when a stored value does not have the requested type"""
    pass

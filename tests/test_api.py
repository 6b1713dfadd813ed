"""Public package surface tests"""
import parsed_config
from parsed_config import ConfigRegistry, ParsedValue, ValueKind, ValueParser, ValueConfig

def test_exports() -> None:
    for name in parsed_config.__all__:
        assert hasattr(parsed_config, name)

def test_end_to_end() -> None:
    """Test loading raw values and reading them back typed"""
    registry = ConfigRegistry.from_mapping(
        {"log_level": "info", "max_samples": "2000", "hosts": "a|b|a"},
        ValueConfig(list_separator="|")
    )
    assert registry.get_property("log_level", "warning") == "info"
    assert registry.get_property("max_samples", 100) == 2000
    assert registry.get_property("hosts", []) == ["a", "b"]

    value = ParsedValue("a:b")
    assert value.get_as(ValueKind.MAP) == {"a": "b"}
    assert ValueParser.split_unique("x,x") == ["x"]

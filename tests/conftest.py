import pytest
import logging
from unittest.mock import Mock
from typing import Dict, Any

from parsed_config.config import ValueConfig

# Raw values as a YAML or properties loader would hand them over
SAMPLE_PROPERTIES: Dict[str, Any] = {
    'app_name': 'My Application',
    'enabled': 'TRUE',
    'port': '8080',
    'labels': 'env:prod;team:core',
    'ignore_status_codes': '404,500,404',
    'broken_labels': 'env:prod;team',
    'already_bool': True,
    'already_int': 3,
    'empty': None,
    'transaction_tracer': {
        'enabled': 'false',
        'record_sql': 'obfuscated',
        'stack_trace_threshold': '5',
    },
}

# Basic Test Configuration
@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Configure logging for tests"""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler()]
    )

@pytest.fixture
def sample_properties() -> Dict[str, Any]:
    """Raw config mapping covering every value shape"""
    return dict(SAMPLE_PROPERTIES)

@pytest.fixture
def warning_handler() -> Mock:
    """Mock handler for map parse warnings"""
    return Mock()

@pytest.fixture
def value_config(warning_handler: Mock) -> ValueConfig:
    """Config with default separators and a mock warning handler"""
    return ValueConfig(warning_handler=warning_handler)

"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures shared across all test modules.
"""

import pytest
import os
import sys
from datetime import date
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Thursday, in a 31-day month of a leap year
FIXED_TODAY = date(2024, 7, 18)


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture
def today():
    """The date every relative recognizer treats as today"""
    return FIXED_TODAY


@pytest.fixture
def clock(today):
    """Clock returning the fixed date"""
    return lambda: today


@pytest.fixture
def test_env_vars():
    """Set up test environment variables"""
    test_vars = {
        'DATE_FRAGMENTS_LOCALE': 'en',
        'DATE_FRAGMENTS_ORDER': 'dmy',
        'LOG_LEVEL': 'ERROR'  # Reduce log noise during tests
    }

    # Save original values
    original_values = {}
    for key, value in test_vars.items():
        original_values[key] = os.environ.get(key)
        os.environ[key] = value

    yield test_vars

    # Restore original values
    for key, value in original_values.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value

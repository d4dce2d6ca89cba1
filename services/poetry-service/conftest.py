"""
Pytest configuration for poetry-service tests
"""

import os

# Logging uses the base configuration without development overrides
os.environ.setdefault("ENVIRONMENT", "testing")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )

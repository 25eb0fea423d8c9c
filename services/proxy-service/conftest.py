"""
Pytest configuration for proxy-service tests
"""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )

import pytest
from dining_status.core import config


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Run every test against the real fetch path with default limits"""
    original_use_mock = config.settings.USE_MOCK
    original_max_redirects = config.settings.MAX_REDIRECTS
    original_busy_threshold = config.settings.BUSY_THRESHOLD

    config.settings.USE_MOCK = False
    config.settings.MAX_REDIRECTS = 3
    config.settings.BUSY_THRESHOLD = 70

    yield

    config.settings.USE_MOCK = original_use_mock
    config.settings.MAX_REDIRECTS = original_max_redirects
    config.settings.BUSY_THRESHOLD = original_busy_threshold

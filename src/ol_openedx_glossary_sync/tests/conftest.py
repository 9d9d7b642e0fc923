"""Common test configuration"""

import pytest
import responses
from edx_django_utils.cache import TieredCache


@pytest.fixture()
def mocked_responses():
    """Mock requests responses"""
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture(autouse=True)
def clear_tiered_cache():
    """Keep cached users and previews from leaking between tests"""
    TieredCache.dangerous_clear_all_tiers()
    yield
    TieredCache.dangerous_clear_all_tiers()

"""
idn-area — Root conftest for pytest

Shared fixtures available to all test modules.

@file conftest.py
"""

import pytest
from rest_framework.test import APIClient

from areas.services import AreaRepository
from tests.factories import seed_hierarchy


@pytest.fixture
def api_client():
    """Anonymous DRF test client."""
    return APIClient()


@pytest.fixture
def repository(db):
    """Finders bound to the test database."""
    return AreaRepository()


@pytest.fixture
def hierarchy(db):
    """A small slice of the real hierarchy (see ``tests.factories.seed_hierarchy``)."""
    return seed_hierarchy()

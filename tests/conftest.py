"""Pytest configuration for test path setup."""
import os
import sys

import pytest

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from veni_vici.errors import CatApiError  # noqa: E402
from veni_vici.models import Breed  # noqa: E402


class FakeCatApiClient:
    """Stands in for CatApiClient; records every call it receives."""

    def __init__(self, breeds=None, images=None, error=None):
        self.breeds = breeds or []
        self.images = images if images is not None else []
        self.error = error
        self.calls = []

    def list_breeds(self):
        self.calls.append(("list_breeds",))
        if self.error:
            raise self.error
        return list(self.breeds)

    def search_images(self, breed_id, limit=1):
        self.calls.append(("search_images", breed_id, limit))
        if self.error:
            raise self.error
        return list(self.images)


@pytest.fixture
def catalog():
    return (
        Breed(id="abys", name="Abyssinian"),
        Breed(id="beng", name="Bengal"),
        Breed(id="sphy", name="Sphynx"),
    )


@pytest.fixture
def fake_client():
    return FakeCatApiClient()


@pytest.fixture
def failing_client():
    return FakeCatApiClient(error=CatApiError("HTTP 500"))

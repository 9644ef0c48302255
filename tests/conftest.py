from unittest.mock import Mock

import pytest
from faker import Faker

from pmr_trip.geo import GeoPoint
from pmr_trip.settings import TaxiSettings
from pmr_trip.taxi import TaxiSimulator, create_faker_instance


@pytest.fixture
def fake() -> Faker:
    """Seeded Faker instance for deterministic test data."""
    return create_faker_instance(seed=42)


@pytest.fixture
def gare_de_lyon() -> GeoPoint:
    return GeoPoint.of(48.8447, 2.3736)


@pytest.fixture
def champs_elysees() -> GeoPoint:
    return GeoPoint.of(48.8698, 2.3078)


@pytest.fixture
def taxi_settings() -> TaxiSettings:
    return TaxiSettings(total_ticks=100, animation_seconds=30.0, persist_every=10)


@pytest.fixture
def simulator(taxi_settings) -> TaxiSimulator:
    return TaxiSimulator(taxi_settings)


@pytest.fixture
def mock_sink():
    """Mock snapshot store for tracking tests."""
    return Mock()

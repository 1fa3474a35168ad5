import json

import pytest
from httpx import ASGITransport, AsyncClient

from carrierpricing.main import app
from carrierpricing.api.quotes import get_quote_engine
from carrierpricing.core.config import settings
from carrierpricing.models.quote import CarrierOffer
from carrierpricing.services.carrier_catalog import CarrierCatalog, StaticCatalog
from carrierpricing.services.pricing import QuoteEngine


PICKUP_POSTCODE = "SW1A1AA"
DELIVERY_POSTCODE = "EC2A3LT"


class MockCatalog(CarrierCatalog):
    """Fixed offers for small vans, recording every lookup."""

    def __init__(self, offers=None):
        if offers is None:
            offers = [
                CarrierOffer(carrier_name="MockService1", markup=20, delivery_time=1),
                CarrierOffer(carrier_name="MockService2", markup=10, delivery_time=5),
            ]
        self.offers = offers
        self.lookups = []

    def find_offers(self, vehicle_type: str):
        self.lookups.append(vehicle_type)
        if vehicle_type != "small_van":
            return []
        return list(self.offers)


@pytest.fixture
def mock_catalog():
    return MockCatalog()


@pytest.fixture
def quote_engine(mock_catalog):
    return QuoteEngine(mock_catalog)


@pytest.fixture
def static_engine():
    return QuoteEngine(StaticCatalog())


@pytest.fixture
async def test_client(quote_engine):
    app.dependency_overrides[get_quote_engine] = lambda: quote_engine
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_basic_quote_data():
    return {
        "pickup_postcode": PICKUP_POSTCODE,
        "delivery_postcode": DELIVERY_POSTCODE,
    }


@pytest.fixture
def valid_vehicle_quote_data():
    return {
        "pickup_postcode": PICKUP_POSTCODE,
        "delivery_postcode": DELIVERY_POSTCODE,
        "vehicle": "bicycle",
    }


@pytest.fixture
def valid_carrier_quote_data():
    return {
        "pickup_postcode": PICKUP_POSTCODE,
        "delivery_postcode": DELIVERY_POSTCODE,
        "vehicle": "small_van",
    }


@pytest.fixture
def catalog_file_factory(tmp_path):
    def _write_catalog(carriers, name="carriers.json"):
        path = tmp_path / name
        if isinstance(carriers, str):
            path.write_text(carriers)
        else:
            path.write_text(json.dumps(carriers))
        return path

    return _write_catalog


@pytest.fixture
def sample_carriers():
    return [
        {
            "carrier_name": "RoyalPackages",
            "base_price": 50,
            "services": [
                {"delivery_time": 1, "markup": 30, "vehicles": ["small_van", "large_van"]},
                {"delivery_time": 3, "markup": 10, "vehicles": ["parcel_car"]},
            ],
        },
        {
            "carrier_name": "Hercules",
            "base_price": 20,
            "services": [
                {"delivery_time": 5, "markup": 15, "vehicles": ["small_van"]},
            ],
        },
    ]


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "catalog: marks tests related to carrier catalogs"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )


"""Carrier catalogs: sources of carrier offers per vehicle type"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from carrierpricing.core.config import Settings
from carrierpricing.core.enums import CatalogSource, VehicleType
from carrierpricing.core.errors import CatalogLoadError
from carrierpricing.models.quote import CarrierOffer

logger = logging.getLogger(__name__)


class CarrierCatalog(ABC):

    @abstractmethod
    def find_offers(self, vehicle_type: str) -> List[CarrierOffer]:
        """Return the offers valid for vehicle_type; empty when there are none."""


STATIC_OFFERS = {
    VehicleType.SMALL_VAN.value: (
        CarrierOffer(carrier_name="RoyalPackages", markup=80, delivery_time=1),
        CarrierOffer(carrier_name="Hercules", markup=35, delivery_time=5),
        CarrierOffer(carrier_name="CollectTimes", markup=70, delivery_time=1),
    ),
}


class StaticCatalog(CarrierCatalog):
    """Hard-coded offers, only available for small vans."""

    def find_offers(self, vehicle_type: str) -> List[CarrierOffer]:
        return list(STATIC_OFFERS.get(vehicle_type, ()))


class ServiceRecord(BaseModel):
    model_config = ConfigDict(strict=True)

    delivery_time: int
    markup: int
    vehicles: List[str]


class CarrierRecord(BaseModel):
    model_config = ConfigDict(strict=True)

    carrier_name: str
    base_price: int
    services: List[ServiceRecord]


_carrier_records = TypeAdapter(List[CarrierRecord])


class FileBackedCatalog(CarrierCatalog):
    """
    Offers loaded once from a JSON document of carrier records.

    Each carrier has a base price and a list of services; a service applies
    to every vehicle it lists, with markup = carrier base price + service markup.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise CatalogLoadError(f"cannot read carrier catalog {self.path}: {e}") from e

        try:
            carriers = _carrier_records.validate_json(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"malformed carrier catalog {self.path}: {e}") from e

        self._carriers: Tuple[CarrierRecord, ...] = tuple(carriers)
        logger.info(f"Loaded {len(self._carriers)} carriers from {self.path}")

    @property
    def carrier_count(self) -> int:
        return len(self._carriers)

    def find_offers(self, vehicle_type: str) -> List[CarrierOffer]:
        offers = []
        for carrier in self._carriers:
            for service in carrier.services:
                for vehicle in service.vehicles:
                    if vehicle == vehicle_type:
                        offers.append(CarrierOffer(
                            carrier_name=carrier.carrier_name,
                            markup=carrier.base_price + service.markup,
                            delivery_time=service.delivery_time,
                        ))
        return offers


def build_catalog(settings: Settings) -> CarrierCatalog:
    try:
        source = CatalogSource(settings.CATALOG_SOURCE)
    except ValueError as e:
        raise CatalogLoadError(f"unknown catalog source: {settings.CATALOG_SOURCE!r}") from e

    if source == CatalogSource.FILE:
        logger.info(f"Using file-backed carrier catalog: {settings.CATALOG_FILE}")
        return FileBackedCatalog(settings.CATALOG_FILE)

    logger.info("Using static carrier catalog")
    return StaticCatalog()

import logging
import re
from types import MappingProxyType

from carrierpricing.core.enums import VehicleType
from carrierpricing.core.errors import InvalidPostcode, InvalidVehicle, NoCarrierServices
from carrierpricing.models.quote import BasicQuote, CarrierPrice, CarrierQuote, VehicleQuote
from carrierpricing.schemas.quote import BasicQuoteRequest, CarrierQuoteRequest, VehicleQuoteRequest
from carrierpricing.services.carrier_catalog import CarrierCatalog

logger = logging.getLogger(__name__)

VALID_VEHICLE_TYPES = frozenset(v.value for v in VehicleType)

VEHICLE_MARKUP = MappingProxyType({
    VehicleType.BICYCLE.value: 1.10,
    VehicleType.MOTORBIKE.value: 1.15,
    VehicleType.PARCEL_CAR.value: 1.20,
    VehicleType.SMALL_VAN.value: 1.30,
    VehicleType.LARGE_VAN.value: 1.40,
})

POSTCODE_DISTANCE_DIVISOR = 100000000
MAX_POSTCODE_VALUE = 2 ** 63 - 1

_BASE36 = re.compile(r"[0-9A-Za-z]+")

# 2**63 - 1 is 1Y2P0IJ32E8E7 in base 36
MAX_POSTCODE_DIGITS = 13


def parse_postcode(postcode: str) -> int:
    # int(x, 36) alone would also accept signs, whitespace and underscores
    if not _BASE36.fullmatch(postcode):
        raise InvalidPostcode()
    digits = postcode.lstrip("0") or "0"
    if len(digits) > MAX_POSTCODE_DIGITS:
        raise InvalidPostcode()
    value = int(digits, 36)
    if value > MAX_POSTCODE_VALUE:
        raise InvalidPostcode()
    return value


def is_vehicle_valid(vehicle_type: str) -> bool:
    return vehicle_type in VALID_VEHICLE_TYPES


def compute_base_price(pickup_postcode: str, delivery_postcode: str) -> int:
    pickup = parse_postcode(pickup_postcode)
    delivery = parse_postcode(delivery_postcode)
    return abs(pickup - delivery) // POSTCODE_DISTANCE_DIVISOR


def apply_vehicle_markup(base_price: int, vehicle_type: str) -> int:
    markup = VEHICLE_MARKUP.get(vehicle_type)
    if markup is None:
        return base_price
    # round() on floats is half-to-even
    return round(base_price * markup)


def compute_vehicle_price(base_price: int, vehicle_type: str) -> int:
    if not is_vehicle_valid(vehicle_type):
        raise InvalidVehicle()
    return apply_vehicle_markup(base_price, vehicle_type)


class QuoteEngine:
    """
    Calculates delivery quotes between two postcodes.

    The base price depends only on the postcodes; the vehicle price multiplies
    it by the vehicle markup; carrier prices add each carrier offer's markup
    to the vehicle price and are returned cheapest first.
    """

    def __init__(self, catalog: CarrierCatalog):
        self.catalog = catalog

    def compute_carrier_quote(self, pickup_postcode: str, delivery_postcode: str, vehicle_type: str) -> list[CarrierPrice]:
        if not is_vehicle_valid(vehicle_type):
            raise InvalidVehicle()

        base_price = compute_base_price(pickup_postcode, delivery_postcode)
        vehicle_price = apply_vehicle_markup(base_price, vehicle_type)

        offers = self.catalog.find_offers(vehicle_type)
        if not offers:
            raise NoCarrierServices()

        price_list = [
            CarrierPrice(
                carrier_name=offer.carrier_name,
                amount=vehicle_price + offer.markup,
                delivery_time=offer.delivery_time,
            )
            for offer in offers
        ]
        # sorted() is stable: equal amounts keep catalog order
        return sorted(price_list, key=lambda p: p.amount)

    def get_basic_quote(self, req: BasicQuoteRequest) -> BasicQuote:
        logger.debug(f"executing get_basic_quote with args: {req.model_dump()}")

        price = compute_base_price(req.pickup_postcode, req.delivery_postcode)
        return BasicQuote(
            pickup_postcode=req.pickup_postcode,
            delivery_postcode=req.delivery_postcode,
            price=price,
        )

    def get_quote_by_vehicle(self, req: VehicleQuoteRequest) -> VehicleQuote:
        logger.debug(f"executing get_quote_by_vehicle with args: {req.model_dump()}")

        if not is_vehicle_valid(req.vehicle):
            raise InvalidVehicle()

        base_price = compute_base_price(req.pickup_postcode, req.delivery_postcode)
        return VehicleQuote(
            pickup_postcode=req.pickup_postcode,
            delivery_postcode=req.delivery_postcode,
            vehicle=req.vehicle,
            price=compute_vehicle_price(base_price, req.vehicle),
        )

    def get_quote_by_carrier(self, req: CarrierQuoteRequest) -> CarrierQuote:
        logger.debug(f"executing get_quote_by_carrier with args: {req.model_dump()}")

        price_list = self.compute_carrier_quote(req.pickup_postcode, req.delivery_postcode, req.vehicle)
        return CarrierQuote(
            pickup_postcode=req.pickup_postcode,
            delivery_postcode=req.delivery_postcode,
            vehicle=req.vehicle,
            price_list=price_list,
        )

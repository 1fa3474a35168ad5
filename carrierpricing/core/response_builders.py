from carrierpricing.models.quote import BasicQuote, CarrierPrice, CarrierQuote, VehicleQuote
from carrierpricing.schemas.quote import (
    BasicQuoteResponse,
    CarrierQuoteResponse,
    PriceByCarrier,
    VehicleQuoteResponse,
)


def build_basic_quote_response(quote: BasicQuote) -> BasicQuoteResponse:
    return BasicQuoteResponse(
        pickup_postcode=quote.pickup_postcode,
        delivery_postcode=quote.delivery_postcode,
        price=quote.price,
    )


def build_vehicle_quote_response(quote: VehicleQuote) -> VehicleQuoteResponse:
    return VehicleQuoteResponse(
        pickup_postcode=quote.pickup_postcode,
        delivery_postcode=quote.delivery_postcode,
        vehicle=quote.vehicle,
        price=quote.price,
    )


def build_price_by_carrier(price: CarrierPrice) -> PriceByCarrier:
    return PriceByCarrier(
        service=price.carrier_name,
        price=price.amount,
        delivery_time=price.delivery_time,
    )


def build_carrier_quote_response(quote: CarrierQuote) -> CarrierQuoteResponse:
    return CarrierQuoteResponse(
        pickup_postcode=quote.pickup_postcode,
        delivery_postcode=quote.delivery_postcode,
        vehicle=quote.vehicle,
        price_list=[build_price_by_carrier(price) for price in quote.price_list],
    )

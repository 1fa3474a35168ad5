from pydantic import BaseModel, ConfigDict
from typing import List


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CarrierOffer(FrozenModel):
    carrier_name: str
    markup: int
    delivery_time: int  # minutes


class CarrierPrice(FrozenModel):
    carrier_name: str
    amount: int
    delivery_time: int


class BasicQuote(FrozenModel):
    pickup_postcode: str
    delivery_postcode: str
    price: int


class VehicleQuote(FrozenModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str
    price: int


class CarrierQuote(FrozenModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str
    price_list: List[CarrierPrice]

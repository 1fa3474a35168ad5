from pydantic import BaseModel
from typing import List


class BasicQuoteRequest(BaseModel):
    pickup_postcode: str
    delivery_postcode: str


class VehicleQuoteRequest(BaseModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str


class CarrierQuoteRequest(BaseModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str


class BasicQuoteResponse(BaseModel):
    pickup_postcode: str
    delivery_postcode: str
    price: int


class VehicleQuoteResponse(BaseModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str
    price: int


class PriceByCarrier(BaseModel):
    service: str
    price: int
    delivery_time: int


class CarrierQuoteResponse(BaseModel):
    pickup_postcode: str
    delivery_postcode: str
    vehicle: str
    price_list: List[PriceByCarrier]

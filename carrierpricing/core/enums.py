from enum import Enum


class VehicleType(str, Enum):
    BICYCLE = "bicycle"
    MOTORBIKE = "motorbike"
    PARCEL_CAR = "parcel_car"
    SMALL_VAN = "small_van"
    LARGE_VAN = "large_van"

    def __str__(self):
        return self.value


class CatalogSource(str, Enum):
    STATIC = "static"
    FILE = "file"

    def __str__(self):
        return self.value


class QuoteKind(str, Enum):
    BASIC = "basic"
    BY_VEHICLE = "by_vehicle"
    BY_CARRIER = "by_carrier"

    def __str__(self):
        return self.value

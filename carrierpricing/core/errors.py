"""Error types raised by the quote engine and the carrier catalogs"""


class QuoteError(Exception):
    """Base class for per-request quote failures; mapped to HTTP 400."""

    message = "quote could not be calculated"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidPostcode(QuoteError):
    message = "invalid postcode provided"


class InvalidVehicle(QuoteError):
    message = "invalid vehicle provided"


class NoCarrierServices(QuoteError):
    message = "no available carrier services for the given vehicle"


class CatalogLoadError(Exception):
    """The carrier catalog could not be built; fatal at startup."""

"""Quote endpoints: basic, by vehicle and by carrier"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from carrierpricing.core.enums import QuoteKind
from carrierpricing.core.errors import QuoteError
from carrierpricing.core.metrics import record_quote
from carrierpricing.core.response_builders import (
    build_basic_quote_response,
    build_carrier_quote_response,
    build_vehicle_quote_response,
)
from carrierpricing.schemas.quote import (
    BasicQuoteRequest,
    BasicQuoteResponse,
    CarrierQuoteRequest,
    CarrierQuoteResponse,
    VehicleQuoteRequest,
    VehicleQuoteResponse,
)
from carrierpricing.services.pricing import QuoteEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


def get_quote_engine(request: Request) -> QuoteEngine:
    engine = getattr(request.app.state, "quote_engine", None)
    if engine is None:
        raise RuntimeError("Quote engine not initialized. Start the application lifespan first.")
    return engine


def quote_failed(kind: QuoteKind, exc: QuoteError) -> HTTPException:
    logger.warning(f"{kind} quote rejected: {exc.message}")
    record_quote(kind.value, "rejected")
    return HTTPException(status_code=400, detail=exc.message)


@router.post("", response_model=BasicQuoteResponse)
@router.post("/basic", response_model=BasicQuoteResponse)
async def basic_quote(req: BasicQuoteRequest, engine: QuoteEngine = Depends(get_quote_engine)):
    try:
        quote = engine.get_basic_quote(req)
    except QuoteError as e:
        raise quote_failed(QuoteKind.BASIC, e) from e

    record_quote(QuoteKind.BASIC.value)
    return build_basic_quote_response(quote)


@router.post("/byvehicle", response_model=VehicleQuoteResponse)
async def quote_by_vehicle(req: VehicleQuoteRequest, engine: QuoteEngine = Depends(get_quote_engine)):
    try:
        quote = engine.get_quote_by_vehicle(req)
    except QuoteError as e:
        raise quote_failed(QuoteKind.BY_VEHICLE, e) from e

    record_quote(QuoteKind.BY_VEHICLE.value)
    return build_vehicle_quote_response(quote)


@router.post("/bycarrier", response_model=CarrierQuoteResponse)
async def quote_by_carrier(req: CarrierQuoteRequest, engine: QuoteEngine = Depends(get_quote_engine)):
    try:
        quote = engine.get_quote_by_carrier(req)
    except QuoteError as e:
        raise quote_failed(QuoteKind.BY_CARRIER, e) from e

    record_quote(QuoteKind.BY_CARRIER.value)
    return build_carrier_quote_response(quote)

from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from carrierpricing.api import quotes
from carrierpricing.core.config import settings
from carrierpricing.core.errors import CatalogLoadError
from carrierpricing.core.metrics import request_count, request_duration, carrier_catalog_carriers, get_metrics_text
from carrierpricing.services.carrier_catalog import FileBackedCatalog, build_catalog
from carrierpricing.services.pricing import QuoteEngine
import time
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code
            ).inc()

            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)

            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")

    logger.info(f"Loading carrier catalog (source: {settings.CATALOG_SOURCE})...")
    try:
        catalog = build_catalog(settings)
    except CatalogLoadError as e:
        logger.error(f"Carrier catalog could not be loaded: {e}")
        raise

    if isinstance(catalog, FileBackedCatalog):
        carrier_catalog_carriers.set(catalog.carrier_count)
    else:
        carrier_catalog_carriers.set(0)

    app.state.quote_engine = QuoteEngine(catalog)
    logger.info("Quote engine ready")

    yield

    logger.info("Application shutting down...")
    app.state.quote_engine = None
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(quotes.router)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check(request: Request):
    engine_ready = getattr(request.app.state, "quote_engine", None) is not None

    return {
        "status": "healthy" if engine_ready else "starting",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "carrier_catalog": settings.CATALOG_SOURCE if engine_ready else "not loaded"
        }
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

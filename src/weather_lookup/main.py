"""Main FastAPI application for the geocoding proxy service."""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_lookup import __version__
from weather_lookup.api.endpoints import InvalidRequest, router as places_router
from weather_lookup.config import (
    HOST, PORT, DEBUG, GOOGLE_API_KEY,
    KEEPALIVE_URL, KEEPALIVE_INTERVAL_SECONDS
)
from weather_lookup.keepalive import KeepalivePinger
from weather_lookup.logging_config import configure_logging
from weather_lookup.places.client import UpstreamError
from weather_lookup.places.models import ErrorResponse

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    pinger = None
    try:
        if not GOOGLE_API_KEY:
            logger.warning("GOOGLE_API_KEY is not set; upstream calls will be rejected by Google")

        if KEEPALIVE_URL:
            pinger = KeepalivePinger(KEEPALIVE_URL, KEEPALIVE_INTERVAL_SECONDS)
            pinger.start()
        else:
            logger.info("KEEPALIVE_URL not set, keepalive pinger disabled")
        app.state.keepalive = pinger

        logger.info("Starting Weather Lookup Geocoding Proxy")
        yield
    except Exception as e:
        logger.error(f"Startup error: {e}")
        logger.error(traceback.format_exc())
        raise
    finally:
        try:
            if pinger is not None:
                await pinger.stop()
            logger.info("Shutting down Weather Lookup Geocoding Proxy")
        except Exception as e:
            logger.error(f"Shutdown error: {e}")


async def invalid_request_handler(_request: Request, exc: InvalidRequest) -> JSONResponse:
    """Map a missing query parameter to a 400 error body."""
    return JSONResponse(status_code=400, content=ErrorResponse(error=exc.message).model_dump())


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Log an upstream relay failure and answer with a generic 500 body.

    The upstream detail stays in the log; clients only see the generic message.
    """
    logger.error(f"{type(exc).__name__} while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump())


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Lookup Geocoding Proxy",
        description="Relays Google Places autocomplete and details lookups without exposing the API key",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)

    # Include API routers
    app.include_router(places_router)

    @app.get("/health", tags=["root"])
    async def health_check() -> dict:
        """Health check endpoint, also the natural keepalive target.

        Returns:
            Health status response
        """
        return {"status": "healthy", "service": "weather-lookup"}

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the proxy service."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "weather_lookup.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()

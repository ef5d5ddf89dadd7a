"""
Terrain Backend — FastAPI Application Entry Point

Configures the FastAPI application, mounts the routers, sets up CORS and
loads the reference dataset on startup.

Architecture:
    - FastAPI application with auto-generated OpenAPI docs at /docs
    - Routers mounted under /api
    - Reference data loaded and validated in the lifespan handler; a
      ReferenceDataError aborts startup

Usage:
    python -m uvicorn terrain.main:app --host 127.0.0.1 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import settings
from .reference_data import get_reference_data
from .routers import indications, market

logger = logging.getLogger("terrain.api")

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    - On startup: configure logging, load and validate the reference data
    - On shutdown: nothing to release (the engine holds no resources)
    """
    settings.configure_logging()
    data = get_reference_data()
    logger.info(f"Terrain API {API_VERSION} ready (reference data v{data.version})")
    yield


app = FastAPI(
    title="Terrain Market Sizing API",
    description=(
        "REST API for life-sciences market opportunity sizing. "
        "Produces patient funnels, TAM/SAM/SOM by geography, pricing analysis, "
        "and ten-year bear/base/bull revenue projections."
    ),
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(market.router)       # /api/analyze
app.include_router(indications.router)  # /api/indications


@app.get("/")
def root():
    """API information endpoint."""
    return {
        "name": "Terrain API",
        "version": API_VERSION,
        "status": "running",
        "docs": "/docs",
        "reference_data_version": get_reference_data().version,
        "endpoints": {
            "market_sizing": "/api/analyze/market",
            "indication_search": "/api/indications?q=",
            "indication_lookup": "/api/indications/{name}",
        },
    }


@app.get("/health")
def health_check():
    """Simple health check for monitoring and MCP server connectivity."""
    return {"status": "healthy"}

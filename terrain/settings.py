"""
Terrain Configuration

All runtime configuration comes from environment variables, read once at
import time into module constants.

Environment:
    TERRAIN_LOG_LEVEL          logging level (default INFO)
    TERRAIN_CORS_ORIGINS       comma-separated list of allowed origins
    TERRAIN_CACHE_ENABLED      "false" disables analysis memoization
    TERRAIN_CACHE_TTL_SECONDS  lifetime of a memoized analysis (default 900)
    TERRAIN_CACHE_MAX_ENTRIES  upper bound on memoized analyses (default 256)
    TERRAIN_API_BASE           base URL the MCP server calls
"""

import logging
import os

LOG_LEVEL = os.environ.get("TERRAIN_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "TERRAIN_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8501",
    ).split(",")
    if origin.strip()
]

CACHE_ENABLED = os.environ.get("TERRAIN_CACHE_ENABLED", "true").lower() == "true"
CACHE_TTL_SECONDS = float(os.environ.get("TERRAIN_CACHE_TTL_SECONDS", "900"))
CACHE_MAX_ENTRIES = int(os.environ.get("TERRAIN_CACHE_MAX_ENTRIES", "256"))

API_BASE = os.environ.get("TERRAIN_API_BASE", "http://localhost:8000")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a root handler for the terrain.* loggers."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("terrain").setLevel(level)

"""
Market Sizing Router — /api/analyze/market

Runs the market-sizing engine for a validated MarketSizingInput.

Responses:
    200  {"success": true, "data": MarketSizingOutput, "cache_hit": bool}
    404  indication could not be resolved ("Indication not found: ...")
    422  request body failed validation
    500  unexpected engine failure
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import settings
from ..cache import AnalysisCache, cache_key
from ..exceptions import IndicationNotFoundError
from ..schemas import MarketSizingInput, MarketSizingResponse

logger = logging.getLogger("terrain.api")

router = APIRouter(prefix="/api/analyze", tags=["Market Sizing"])

analysis_cache = AnalysisCache(
    ttl_seconds=settings.CACHE_TTL_SECONDS,
    max_entries=settings.CACHE_MAX_ENTRIES,
)


@router.post("/market", response_model=MarketSizingResponse)
def analyze_market(market_input: MarketSizingInput):
    """Size the market opportunity for an indication and commercial assumptions."""
    key = cache_key("market", market_input)
    if settings.CACHE_ENABLED:
        cached = analysis_cache.get(key)
        if cached is not None:
            return MarketSizingResponse(data=cached, cache_hit=True)

    try:
        from ..engines.market_sizing import calculate_market_sizing
        output = calculate_market_sizing(market_input)
    except IndicationNotFoundError as e:
        logger.info(f"Indication lookup failed: {e.indication}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Market sizing failed for '{market_input.indication}'")
        raise HTTPException(status_code=500, detail=str(e))

    if settings.CACHE_ENABLED:
        analysis_cache.set(key, output)
    return MarketSizingResponse(data=output, cache_hit=False)

"""
Terrain — Market Sizing Orchestrator

Single entry point for a market-sizing analysis:

    resolve indication
      -> patient funnel, pricing, competitive context   (independent)
      -> geography allocation
      -> revenue projection
      -> output assembly

Pure and synchronous: the result depends only on the input and the
immutable reference data, so concurrent calls need no coordination.
The only error surfaced to callers is IndicationNotFoundError.
"""

import logging
import time
from typing import Optional

from ..reference_data import ReferenceData, get_reference_data
from ..schemas import MarketSizingInput, MarketSizingOutput
from .competitive_context import link_context
from .geography import allocate
from .indication_resolver import resolve_indication
from .output_assembler import assemble
from .patient_funnel import compute_funnel
from .pricing import analyze_pricing
from .revenue_projection import project_revenue

logger = logging.getLogger("terrain.engine")


def calculate_market_sizing(
    market_input: MarketSizingInput,
    reference: Optional[ReferenceData] = None,
) -> MarketSizingOutput:
    """
    Run the full market-sizing pipeline for one input.

    Args:
        market_input: Validated, immutable analysis input.
        reference: Reference dataset; defaults to the process-wide one.

    Returns:
        MarketSizingOutput with funnel, geography breakdown, pricing,
        ten-year projection, competitive context and narratives.

    Raises:
        IndicationNotFoundError: if the indication cannot be resolved.
    """
    started = time.perf_counter()
    data = reference if reference is not None else get_reference_data()

    record = resolve_indication(market_input.indication, data.index)

    funnel = compute_funnel(
        record,
        market_input.development_stage,
        patient_segment=market_input.patient_segment,
        subtype=market_input.subtype,
    )
    pricing = analyze_pricing(
        record,
        market_input.pricing_assumption,
        data.comparables,
        mechanism=market_input.mechanism,
    )
    competitive = link_context(
        record,
        data.competitive,
        mechanism=market_input.mechanism,
        molecular_target=market_input.molecular_target,
    )

    breakdown = allocate(funnel, pricing, market_input.geography, record, data.territories)
    projection = project_revenue(
        breakdown,
        pricing,
        market_input.development_stage,
        market_input.launch_year,
        record.therapy_area,
    )

    output = assemble(
        market_input, record, funnel, pricing, competitive, breakdown, projection, data.version,
    )

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"Market sizing for '{market_input.indication}' -> {record.name} "
        f"({market_input.development_stage}, {len(breakdown)} territories) in {elapsed_ms:.1f} ms"
    )
    return output

"""
Terrain — Risk Adjustment Module

Probability-of-success (PoS) multipliers for risk-adjusting projected
revenue by development stage.

Rules:
    - PoS is the likelihood of approval from the current stage, looked up by
      therapy area (LOA_BY_PHASE_AND_AREA) with DEFAULT_LOA as fallback
    - Approved assets carry PoS = 1.0
    - Within a therapy area PoS strictly increases with stage maturity

Stage order: preclinical -> phase1 -> phase2 -> phase3 -> approved
"""

from ..reference_data import assumptions

# Canonical stage order (fixed)
PHASE_ORDER = assumptions.DEVELOPMENT_STAGES


def get_phase_index(stage: str) -> int:
    """
    Returns the index of a stage in the canonical stage order.
    Raises ValueError if stage not found.
    """
    try:
        return PHASE_ORDER.index(stage)
    except ValueError:
        raise ValueError(
            f"Unknown development stage '{stage}'. Valid stages: {PHASE_ORDER}"
        )


def probability_of_success(stage: str, therapy_area: str) -> float:
    """
    Likelihood of approval from `stage` for an asset in `therapy_area`.

    Args:
        stage: Development stage, one of PHASE_ORDER.
        therapy_area: Therapy area key of the indication record.

    Returns:
        PoS in (0, 1].
    """
    get_phase_index(stage)
    table = assumptions.LOA_BY_PHASE_AND_AREA.get(therapy_area, assumptions.DEFAULT_LOA)
    return table[stage]


def scenario_multipliers(stage: str) -> dict:
    """
    Bear/base/bull revenue multipliers from the stage's market-share band.

    bear = low/mid, base = 1.0, bull = high/mid, so bear < base < bull.
    """
    band = assumptions.STAGE_MARKET_SHARE[PHASE_ORDER[get_phase_index(stage)]]
    return {
        "bear": band["low"] / band["mid"],
        "base": 1.0,
        "bull": band["high"] / band["mid"],
    }

"""
Terrain — Pricing Analyzer

Derives a WAC recommendation from comparable marketed drugs.

Comparable selection (first non-empty pool wins):
    1. indication   comparables whose indication_class is one of the
                    record's pricing_keys
    2. mechanism    same therapy area, mechanism overlaps the input mechanism
    3. therapy_area every comparable in the record's therapy area
    4. default      no comparables; single price point from
                    DEFAULT_WAC_BY_THERAPY_AREA

Price tiers over the pool's WACs (numpy percentiles):
    conservative = min(P25, P50 x 0.75)
    base         = P50
    premium      = max(P75, P50 x 1.35)

The median-multiple bounds keep the tiers strictly ordered even for a pool
of one. pricing_assumption picks which tier is the selected WAC; it never
changes the tiers themselves.
"""

from typing import List, Optional

import numpy as np

from ..reference_data import assumptions
from ..reference_data.pricing_comparables import DEFAULT_WAC_BY_THERAPY_AREA, PAYER_DYNAMICS
from ..schemas import ComparableDrug, PricingAnalysis, RecommendedWac

MAX_COMPARABLES_SHOWN = 6

_MECHANISM_STOPWORDS = {"inhibitor", "agonist", "antagonist", "receptor", "modulator", "therapy", "and"}


def gross_to_net(therapy_area: str) -> float:
    table = assumptions.GROSS_TO_NET_BY_THERAPY
    return table.get(therapy_area, table["default"])


def _mechanism_tokens(text: str) -> set:
    tokens = {t.strip("()/,").lower() for t in text.replace("/", " ").split()}
    return {t for t in tokens if len(t) > 2 and t not in _MECHANISM_STOPWORDS}


def select_comparables(record, comparables, mechanism: Optional[str] = None):
    """Return (pool, selection_basis) for a record."""
    keys = {k.lower() for k in record.pricing_keys}
    pool = [c for c in comparables if c.indication_class.lower() in keys]
    if pool:
        return pool, "indication"

    same_area = [c for c in comparables if c.therapy_area == record.therapy_area]
    if mechanism is not None:
        wanted = _mechanism_tokens(mechanism)
        pool = [c for c in same_area if wanted & _mechanism_tokens(c.mechanism)]
        if pool:
            return pool, "mechanism"

    if same_area:
        return same_area, "therapy_area"
    return [], "default"


def recommend_wac(prices: List[float]) -> dict:
    values = np.asarray(prices, dtype=float)
    p25, p50, p75 = np.percentile(values, [
        assumptions.PRICING_PERCENTILES["conservative"],
        assumptions.PRICING_PERCENTILES["base"],
        assumptions.PRICING_PERCENTILES["premium"],
    ])
    multipliers = assumptions.PRICING_MULTIPLIERS
    return {
        "conservative": round(float(min(p25, p50 * multipliers["conservative"]))),
        "base": round(float(p50 * multipliers["base"])),
        "premium": round(float(max(p75, p50 * multipliers["premium"]))),
    }


def analyze_pricing(record, pricing_assumption: str, comparables, mechanism: Optional[str] = None) -> PricingAnalysis:
    pool, basis = select_comparables(record, comparables, mechanism)
    gtn = gross_to_net(record.therapy_area)

    if pool:
        tiers = recommend_wac([c.wac_annual_price for c in pool])
    else:
        default_wac = DEFAULT_WAC_BY_THERAPY_AREA.get(
            record.therapy_area, DEFAULT_WAC_BY_THERAPY_AREA["default"]
        )
        tiers = recommend_wac([default_wac])

    shown = sorted(pool, key=lambda c: (-c.launch_year, c.drug_name))[:MAX_COMPARABLES_SHOWN]
    comparable_drugs = [
        ComparableDrug(
            name=c.drug_name,
            company=c.company,
            launch_year=c.launch_year,
            launch_wac=c.wac_annual_price,
            current_net_price=round(c.wac_annual_price * (1 - gtn)),
            indication=c.indication_class,
            mechanism=c.mechanism,
        )
        for c in shown
    ]

    if basis == "default":
        rationale = (
            f"No marketed comparables in {record.therapy_area.replace('_', ' ')}; "
            f"tiers anchored on a category default WAC of ${tiers['base']:,.0f}/year."
        )
    else:
        scope = {
            "indication": f"{record.name}",
            "mechanism": "mechanistically similar therapies",
            "therapy_area": f"the broader {record.therapy_area.replace('_', ' ')} category",
        }[basis]
        rationale = (
            f"Based on {len(pool)} comparable therapies in {scope}, with a median launch WAC of "
            f"${tiers['base']:,.0f}/year. {pricing_assumption.capitalize()} pricing selected at "
            f"${tiers[pricing_assumption]:,.0f}/year."
        )

    return PricingAnalysis(
        recommended_wac=RecommendedWac(**tiers),
        selected_wac=tiers[pricing_assumption],
        pricing_assumption=pricing_assumption,
        gross_to_net_estimate=gtn,
        comparable_drugs=comparable_drugs,
        selection_basis=basis,
        payer_dynamics=PAYER_DYNAMICS.get(record.therapy_area, PAYER_DYNAMICS["default"]),
        pricing_rationale=rationale,
    )

"""
Terrain — Output Assembler

Composes the component outputs into a MarketSizingOutput and adds the
report-level pieces: summary aggregates, methodology narrative, assumption
list, data-source citations and the generation timestamp. Pure
composition; no input is modified.
"""

from datetime import datetime, timezone

from ..reference_data import assumptions
from ..schemas import DataSource, MarketSizingOutput, MarketSummary
from .geography import territory_values
from .risk_adjustment import probability_of_success
from .revenue_projection import peak_sales_estimate
from .units import to_money_metric, to_usd

DATA_SOURCES = [
    DataSource(name="WHO Global Burden of Disease 2024", type="public",
               url="https://www.healthdata.org/gbd"),
    DataSource(name="ClinicalTrials.gov", type="public", url="https://clinicaltrials.gov"),
    DataSource(name="FDA Drug Approvals Database", type="public",
               url="https://www.accessdata.fda.gov/scripts/cder/daf/"),
    DataSource(name="IQVIA National Sales Perspectives", type="licensed"),
    DataSource(name="Terrain proprietary deal and pricing database", type="proprietary"),
    DataSource(name="SEC EDGAR company filings", type="public", url="https://www.sec.gov/edgar"),
]


def _cagr(record) -> float:
    if record.cagr_5yr is not None:
        return record.cagr_5yr
    table = assumptions.DEFAULT_CAGR_BY_THERAPY
    return table.get(record.therapy_area, table["default"])


def _growth_driver(record) -> str:
    if record.growth_driver is not None and len(record.growth_driver) >= 10:
        return record.growth_driver
    return assumptions.DEFAULT_GROWTH_DRIVER


def _methodology(record, funnel, pricing, breakdown, market_input) -> str:
    band = assumptions.STAGE_MARKET_SHARE[market_input.development_stage]
    territories = ", ".join(t.territory for t in breakdown)
    return "\n\n".join([
        (
            f"Patient Funnel: US prevalence of {funnel.us_prevalence:,} patients with "
            f"{record.name} is narrowed by a diagnosis rate of {funnel.diagnosed_rate:.0%} and a "
            f"treatment rate of {funnel.treated_rate:.0%}. An addressability factor of "
            f"{funnel.addressable_rate:.0%} reflects the patient segment and subtype, and a "
            f"{funnel.capturable_rate:.0%} capture rate reflects {market_input.development_stage} "
            "development maturity."
        ),
        (
            f"Market Share: peak share is bounded between {band['low']:.0%} (bear) and "
            f"{band['high']:.0%} (bull) with {band['mid']:.0%} as the base case, benchmarked "
            "against historical launches at the same development stage."
        ),
        (
            f"Pricing: {pricing.pricing_rationale} A gross-to-net discount of "
            f"{pricing.gross_to_net_estimate:.0%} is applied to convert list price to net revenue."
        ),
        (
            f"Geography: the US funnel is scaled to {territories} using per-territory "
            "epidemiology, price-level and market-access multipliers."
        ),
        (
            "Revenue Projection: a logistic launch ramp reaches peak about six years after launch, holds "
            "through loss of exclusivity, then erodes toward a floor. Revenue is risk-adjusted "
            "by the likelihood of approval for the development stage and therapy area."
        ),
        (
            "This analysis uses closed-form models over a static reference dataset and is "
            "intended for strategic planning. It is not investment advice."
        ),
    ])


def _assumptions(record, funnel, pricing, market_input) -> list:
    band = assumptions.STAGE_MARKET_SHARE[market_input.development_stage]
    pos = probability_of_success(market_input.development_stage, record.therapy_area)
    return [
        f"Peak market share of {band['low']:.0%}-{band['high']:.0%} for a "
        f"{market_input.development_stage} asset",
        f"{market_input.pricing_assumption.capitalize()} pricing at "
        f"${pricing.selected_wac:,.0f} annual WAC",
        f"Geographies: {', '.join(market_input.geography)}",
        f"Launch year {market_input.launch_year}",
        f"Patient segment: {market_input.patient_segment}"
        if market_input.patient_segment is not None else "Broad eligible population",
        "Revenue ramps on a logistic curve to peak about six years after launch",
        f"Probability of success of {pos:.0%} applied to projected revenue",
        f"Gross-to-net discount of {pricing.gross_to_net_estimate:.0%} based on "
        f"{record.therapy_area.replace('_', ' ')} payer dynamics",
        f"Incidence of {funnel.us_incidence:,} new US cases per year reported for context only",
    ]


def assemble(market_input, record, funnel, pricing, competitive, breakdown,
             projection, reference_version: str) -> MarketSizingOutput:
    us = territory_values("US", funnel, pricing.selected_wac, record)
    band = assumptions.STAGE_MARKET_SHARE[market_input.development_stage]
    som_range = (us["som"] * band["low"] / band["mid"], us["som"] * band["high"] / band["mid"])
    global_tam_usd = sum(to_usd(t.tam) for t in breakdown)

    summary = MarketSummary(
        tam_us=to_money_metric(us["tam"], "high"),
        sam_us=to_money_metric(us["sam"], "medium"),
        som_us=to_money_metric(us["som"], "medium", range_usd=som_range),
        global_tam=to_money_metric(global_tam_usd, "medium"),
        peak_sales_estimate=peak_sales_estimate(projection),
        cagr_5yr=_cagr(record),
        market_growth_driver=_growth_driver(record),
    )

    return MarketSizingOutput(
        input=market_input,
        indication=record.name,
        therapy_area=record.therapy_area,
        summary=summary,
        patient_funnel=funnel,
        geography_breakdown=breakdown,
        pricing_analysis=pricing,
        revenue_projection=projection,
        competitive_context=competitive,
        methodology=_methodology(record, funnel, pricing, breakdown, market_input),
        assumptions=_assumptions(record, funnel, pricing, market_input),
        data_sources=list(DATA_SOURCES),
        generated_at=datetime.now(timezone.utc),
        indication_validated=True,
        reference_data_version=reference_version,
    )

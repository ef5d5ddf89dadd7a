"""
Terrain — Revenue Projection Module

Projects ten calendar years of bear/base/bull revenue from launch using a
3-phase uptake curve:
  1. RAMP-UP (launch -> launch + time_to_peak): logistic
  2. PLATEAU (peak -> loss of exclusivity): uptake = 1.0
  3. POST-LOE EROSION: cliff to loe_cliff_rate, then linear decline to
     erosion_floor_pct over years_to_erosion_floor

Each calendar year's uptake is the trapezoidal integral of the curve over
that year. With the reference parameters revenue peaks in launch years 6-8
and eases to roughly three quarters of peak by year 10.

Peak (base) revenue:
    sum of territory SOM x (1 - gross_to_net) x PoS(stage, therapy area)

Bear and bull scale the base peak by the stage's market-share band
(scenario_multipliers), so bear <= base <= bull in every year. Values are
USD millions.
"""

import math
from typing import List

from ..reference_data import assumptions
from ..schemas import PeakSalesEstimate, RevenueProjectionYear
from .risk_adjustment import probability_of_success, scenario_multipliers
from .units import to_usd


def _logistic_uptake(tau: float, k: float, midpoint: float) -> float:
    """
    Logistic uptake value for normalized time tau ∈ [0, 1].

    uptake(tau) = 1 / (1 + exp(-k * (tau - midpoint)))

    Clipped to [0, 1].
    """
    raw = 1.0 / (1.0 + math.exp(-k * (tau - midpoint)))
    return max(0.0, min(1.0, raw))


def _uptake_at_time(
    t: float,
    launch_date: float,
    time_to_peak: float,
    loe_year: float,
    loe_cliff_rate: float,
    erosion_floor_pct: float,
    years_to_erosion_floor: float,
    logistic_k: float = 5.5,
    logistic_midpoint: float = 0.5,
) -> float:
    """Uptake multiplier (0-1) at continuous time t."""
    if t < launch_date:
        return 0.0

    peak_date = launch_date + time_to_peak
    if t < peak_date:
        tau = (t - launch_date) / time_to_peak if time_to_peak > 0 else 1.0
        return _logistic_uptake(min(1.0, tau), logistic_k, logistic_midpoint)

    if t < loe_year:
        return 1.0

    # loe_cliff_rate is the fraction of peak REMAINING right after LOE
    erosion_end = loe_year + years_to_erosion_floor
    if years_to_erosion_floor <= 0 or t >= erosion_end:
        return erosion_floor_pct

    fraction = (t - loe_year) / years_to_erosion_floor
    return loe_cliff_rate + (erosion_floor_pct - loe_cliff_rate) * fraction


def annual_uptake(year: int, launch_year: int, num_integration_steps: int = 12) -> float:
    """
    Average uptake over one calendar year, integrating the curve with the
    trapezoidal rule. Launch is taken as the start of launch_year.
    """
    curve = assumptions.REVENUE_CURVE
    launch_date = float(launch_year)
    params = dict(
        launch_date=launch_date,
        time_to_peak=curve["time_to_peak"],
        loe_year=launch_date + curve["loe_offset_years"],
        loe_cliff_rate=curve["loe_cliff_rate"],
        erosion_floor_pct=curve["erosion_floor_pct"],
        years_to_erosion_floor=curve["years_to_erosion_floor"],
        logistic_k=curve["logistic_k"],
        logistic_midpoint=curve["logistic_midpoint"],
    )

    dt = 1.0 / num_integration_steps
    total = 0.0
    for i in range(num_integration_steps):
        t_left = year + i * dt
        t_right = year + (i + 1) * dt
        total += (_uptake_at_time(t_left, **params) + _uptake_at_time(t_right, **params)) / 2.0 * dt
    return total


def peak_revenue_usd(geography_breakdown, pricing, development_stage: str, therapy_area: str) -> float:
    """Risk-adjusted net peak revenue (USD) across the requested territories."""
    som_total = sum(to_usd(t.som) for t in geography_breakdown)
    net_realization = 1.0 - pricing.gross_to_net_estimate
    return som_total * net_realization * probability_of_success(development_stage, therapy_area)


def project_revenue(
    geography_breakdown,
    pricing,
    development_stage: str,
    launch_year: int,
    therapy_area: str,
) -> List[RevenueProjectionYear]:
    peak_mm = peak_revenue_usd(geography_breakdown, pricing, development_stage, therapy_area) / 1e6
    scenarios = scenario_multipliers(development_stage)

    projection = []
    for offset in range(assumptions.PROJECTION_YEARS):
        year = launch_year + offset
        uptake = annual_uptake(year, launch_year)
        projection.append(RevenueProjectionYear(
            year=year,
            bear=round(peak_mm * scenarios["bear"] * uptake, 3),
            base=round(peak_mm * scenarios["base"] * uptake, 3),
            bull=round(peak_mm * scenarios["bull"] * uptake, 3),
        ))
    return projection


def peak_sales_estimate(projection: List[RevenueProjectionYear]) -> PeakSalesEstimate:
    return PeakSalesEstimate(
        low=max(y.bear for y in projection),
        base=max(y.base for y in projection),
        high=max(y.bull for y in projection),
    )

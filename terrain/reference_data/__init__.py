"""
Terrain Reference Data

Static, versioned reference dataset the market-sizing engine runs over:
indication epidemiology, pricing comparables, territory multipliers and the
competitive-landscape snapshot.

Architecture:
    - Raw tables live in plain Python modules next to this one
    - load_reference_data() validates them and builds frozen dataclasses
    - get_reference_data() memoizes the loaded dataset for the process lifetime
    - A validation failure raises ReferenceDataError; the API lifespan loads
      the dataset at startup so bad data stops the server from booting
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from ..exceptions import ReferenceDataError
from . import assumptions
from .competitive_landscape import COMPETITIVE_SNAPSHOTS
from .indications import INDICATIONS
from .pricing_comparables import PRICING_COMPARABLES
from .territories import (
    REGIONAL_PREVALENCE_FACTORS,
    TERRITORIES,
    US_POPULATION_M,
)

logger = logging.getLogger("terrain.reference_data")

REFERENCE_DATA_VERSION = "2025.2"


@dataclass(frozen=True)
class GeographyMultiplier:
    """Territory scaling relative to the US for one indication."""
    epidemiology: float
    price_index: float
    access_rate: float
    source: str = "therapy_area"


@dataclass(frozen=True)
class Territory:
    code: str
    name: str
    population_m: float
    regulatory_status: str


@dataclass(frozen=True)
class IndicationRecord:
    name: str
    synonyms: frozenset
    therapy_area: str
    us_prevalence: int
    us_incidence: int
    diagnosis_rate: float
    treatment_rate: float
    cagr_5yr: Optional[float] = None
    growth_driver: Optional[str] = None
    pricing_keys: tuple = ()
    competitive_key: Optional[str] = None
    subtypes: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    geography_multipliers: Mapping[str, GeographyMultiplier] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True)
class PricingComparable:
    drug_name: str
    company: str
    indication_class: str
    therapy_area: str
    mechanism: str
    launch_year: int
    wac_annual_price: float


@dataclass(frozen=True)
class CompetitiveSnapshot:
    crowding_score: int
    approved_products: int
    phase3_programs: int
    leading_products: tuple = ()


@dataclass(frozen=True)
class ReferenceData:
    """Everything the engine reads, loaded once and never mutated."""
    version: str
    indications: tuple
    comparables: tuple
    territories: Mapping[str, Territory]
    competitive: Mapping[str, CompetitiveSnapshot]
    index: object = None


def _build_geography_multipliers(therapy_area: str, overrides: dict) -> Mapping[str, GeographyMultiplier]:
    regional = REGIONAL_PREVALENCE_FACTORS.get(therapy_area, REGIONAL_PREVALENCE_FACTORS["default"])
    multipliers = {}
    for code, t in TERRITORIES.items():
        if code in overrides:
            prevalence_factor = overrides[code]
            source = "record"
        elif t["region"] == "us":
            prevalence_factor = 1.0
            source = "therapy_area"
        else:
            prevalence_factor = regional[t["region"]]
            source = "therapy_area"
        epidemiology = (t["population_m"] / US_POPULATION_M) * prevalence_factor * t["care_access"]
        multipliers[code] = GeographyMultiplier(
            epidemiology=epidemiology,
            price_index=t["price_index"],
            access_rate=t["access_rate"],
            source=source,
        )
    return MappingProxyType(multipliers)


def _build_indication(raw: dict) -> IndicationRecord:
    return IndicationRecord(
        name=raw["name"],
        synonyms=frozenset(raw.get("synonyms", [])),
        therapy_area=raw["therapy_area"],
        us_prevalence=int(raw["us_prevalence"]),
        us_incidence=int(raw.get("us_incidence", 0)),
        diagnosis_rate=float(raw["diagnosis_rate"]),
        treatment_rate=float(raw["treatment_rate"]),
        cagr_5yr=raw.get("cagr_5yr"),
        growth_driver=raw.get("growth_driver"),
        pricing_keys=tuple(raw.get("pricing_keys", [])),
        competitive_key=raw.get("competitive_key"),
        subtypes=MappingProxyType(dict(raw.get("subtypes", {}))),
        geography_multipliers=_build_geography_multipliers(
            raw["therapy_area"], raw.get("geography_overrides", {})
        ),
    )


def validate_indication(record: IndicationRecord) -> None:
    """Raise ReferenceDataError if an indication record breaks a funnel invariant."""
    if record.us_prevalence <= 0:
        raise ReferenceDataError(f"{record.name}: us_prevalence must be positive")
    if record.us_incidence < 0:
        raise ReferenceDataError(f"{record.name}: us_incidence must be non-negative")
    for rate_name in ("diagnosis_rate", "treatment_rate"):
        rate = getattr(record, rate_name)
        if not 0.0 < rate <= 1.0:
            raise ReferenceDataError(f"{record.name}: {rate_name}={rate} outside (0, 1]")
    for subtype, share in record.subtypes.items():
        if not 0.0 < share <= 1.0:
            raise ReferenceDataError(f"{record.name}: subtype '{subtype}' share {share} outside (0, 1]")
    if record.cagr_5yr is not None and record.cagr_5yr <= 0:
        raise ReferenceDataError(f"{record.name}: cagr_5yr must be positive")


def validate_snapshot(key: str, snapshot: CompetitiveSnapshot) -> None:
    if not 1 <= snapshot.crowding_score <= 10:
        raise ReferenceDataError(f"Competitive snapshot '{key}': crowding_score outside 1-10")
    if snapshot.approved_products < 0 or snapshot.phase3_programs < 0:
        raise ReferenceDataError(f"Competitive snapshot '{key}': negative program count")


def load_reference_data(
    indications: Optional[list] = None,
    comparables: Optional[list] = None,
    competitive: Optional[dict] = None,
) -> ReferenceData:
    """
    Build and validate the reference dataset.

    The default arguments load the bundled tables; tests pass their own
    tables to exercise fallbacks and validation.

    Raises:
        ReferenceDataError: on any inconsistent record.
    """
    from ..engines.indication_resolver import IndicationIndex

    raw_indications = INDICATIONS if indications is None else indications
    raw_comparables = PRICING_COMPARABLES if comparables is None else comparables
    raw_competitive = COMPETITIVE_SNAPSHOTS if competitive is None else competitive

    records = tuple(_build_indication(raw) for raw in raw_indications)
    for record in records:
        validate_indication(record)

    pool = tuple(PricingComparable(*row) for row in raw_comparables)
    for comp in pool:
        if comp.wac_annual_price <= 0:
            raise ReferenceDataError(f"Comparable {comp.drug_name}: WAC must be positive")

    snapshots = {}
    for key, raw in raw_competitive.items():
        snapshot = CompetitiveSnapshot(
            crowding_score=raw["crowding_score"],
            approved_products=raw["approved_products"],
            phase3_programs=raw["phase3_programs"],
            leading_products=tuple(raw.get("leading_products", [])),
        )
        validate_snapshot(key, snapshot)
        snapshots[key] = snapshot

    for record in records:
        if record.competitive_key and record.competitive_key not in snapshots:
            logger.warning(
                f"No competitive snapshot for {record.name} "
                f"(key '{record.competitive_key}'); baseline context will be used"
            )

    territories = MappingProxyType({
        code: Territory(
            code=code,
            name=t["name"],
            population_m=t["population_m"],
            regulatory_status=t["regulatory_status"],
        )
        for code, t in TERRITORIES.items()
    })

    data = ReferenceData(
        version=REFERENCE_DATA_VERSION,
        indications=records,
        comparables=pool,
        territories=territories,
        competitive=MappingProxyType(snapshots),
        index=IndicationIndex(records),
    )
    logger.info(
        f"Loaded reference data v{data.version}: {len(records)} indications, "
        f"{len(pool)} pricing comparables, {len(snapshots)} competitive snapshots"
    )
    return data


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Process-wide reference dataset, loaded on first use."""
    return load_reference_data()


__all__ = [
    "assumptions",
    "CompetitiveSnapshot",
    "GeographyMultiplier",
    "IndicationRecord",
    "PricingComparable",
    "ReferenceData",
    "REFERENCE_DATA_VERSION",
    "Territory",
    "get_reference_data",
    "load_reference_data",
]

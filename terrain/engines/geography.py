"""
Terrain — Geography Allocator

Scales the US funnel and selected WAC to each requested territory:

    TAM_t = treated     x epi_t x WAC x price_index_t
    SAM_t = addressable x epi_t x WAC x price_index_t x access_rate_t
    SOM_t = capturable  x epi_t x WAC x price_index_t x access_rate_t

epi_t, price_index_t and access_rate_t come from the indication record's
geography multiplier map. Territories the reference data does not know use
DEFAULT_GEOGRAPHY_MULTIPLIER and are flagged low confidence.

Because the funnel is non-increasing and access_rate <= 1, tam >= sam >= som
holds for every territory. Requested codes are de-duplicated (first
occurrence wins, matched case-insensitively on code or territory name) and
the breakdown is sorted by TAM, largest first.
"""

from typing import Iterable, List, Optional

from ..reference_data import GeographyMultiplier, assumptions
from ..schemas import GeographyTerritory
from .units import to_money_metric

UNKNOWN_REGULATORY_STATUS = "Regulatory pathway under evaluation"


def _canonical_code(requested: str, territories) -> str:
    wanted = requested.strip().lower()
    for code, territory in territories.items():
        if wanted in (code.lower(), territory.name.lower()):
            return code
    return requested.strip()


def dedupe_geographies(geographies: Iterable[str], territories) -> List[str]:
    seen = []
    for requested in geographies:
        code = _canonical_code(requested, territories)
        if code not in seen:
            seen.append(code)
    return seen


def territory_values(code: str, funnel, wac: float, record) -> dict:
    """Raw USD TAM/SAM/SOM for one territory."""
    multiplier = record.geography_multipliers.get(code)
    if multiplier is None:
        multiplier = GeographyMultiplier(source="default", **assumptions.DEFAULT_GEOGRAPHY_MULTIPLIER)

    price = wac * multiplier.price_index
    tam = funnel.treated * multiplier.epidemiology * price
    sam = funnel.addressable * multiplier.epidemiology * price * multiplier.access_rate
    som = funnel.capturable * multiplier.epidemiology * price * multiplier.access_rate
    return {
        "code": code,
        "tam": tam,
        "sam": sam,
        "som": som,
        "multiplier": multiplier,
    }


def _confidence(code: str, source: str) -> dict:
    if source == "default":
        return {"tam": "low", "sam": "low", "som": "low"}
    if code == "US":
        return {"tam": "high", "sam": "medium", "som": "medium"}
    return {"tam": "medium", "sam": "medium", "som": "low"}


def allocate(funnel, pricing, geographies: Iterable[str], record,
             territories: Optional[dict] = None) -> List[GeographyTerritory]:
    if territories is None:
        from ..reference_data import get_reference_data
        territories = get_reference_data().territories

    rows = []
    for position, code in enumerate(dedupe_geographies(geographies, territories)):
        values = territory_values(code, funnel, pricing.selected_wac, record)
        rows.append((position, values))
    rows.sort(key=lambda row: (-row[1]["tam"], row[0]))

    breakdown = []
    for _, values in rows:
        code = values["code"]
        multiplier = values["multiplier"]
        confidence = _confidence(code, multiplier.source)
        territory = territories.get(code)
        breakdown.append(GeographyTerritory(
            territory=territory.name if territory else code,
            code=code,
            tam=to_money_metric(values["tam"], confidence["tam"]),
            sam=to_money_metric(values["sam"], confidence["sam"]),
            som=to_money_metric(values["som"], confidence["som"]),
            population_m=territory.population_m if territory else None,
            market_multiplier=round(multiplier.epidemiology, 4),
            price_index=multiplier.price_index,
            regulatory_status=territory.regulatory_status if territory else UNKNOWN_REGULATORY_STATUS,
        ))
    return breakdown

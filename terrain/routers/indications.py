"""
Indications Router — /api/indications

Autocomplete search and canonical lookup over the indication reference
table.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query

from ..engines.indication_resolver import resolve_indication, search_indications
from ..exceptions import IndicationNotFoundError
from ..schemas import IndicationMatch, IndicationSummary

router = APIRouter(prefix="/api/indications", tags=["Indications"])


@router.get("", response_model=List[IndicationMatch])
def search(q: str = Query(..., min_length=1), limit: int = Query(10, ge=1, le=50)):
    """Ranked indication matches for a partial name or synonym."""
    return search_indications(q, limit=limit)


@router.get("/{name:path}", response_model=IndicationSummary)
def get_indication(name: str):
    """Resolve a name or synonym to its canonical indication record."""
    try:
        record = resolve_indication(name)
    except IndicationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return IndicationSummary(
        name=record.name,
        synonyms=sorted(record.synonyms),
        therapy_area=record.therapy_area,
        us_prevalence=record.us_prevalence,
        us_incidence=record.us_incidence,
        diagnosis_rate=record.diagnosis_rate,
        treatment_rate=record.treatment_rate,
        cagr_5yr=record.cagr_5yr,
        subtypes=list(record.subtypes),
    )

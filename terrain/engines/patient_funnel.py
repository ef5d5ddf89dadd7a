"""
Terrain — Patient Funnel Model

Narrows US prevalence to the patient count an asset could capture:

    diagnosed   = prevalence  x diagnosis_rate
    treated     = diagnosed   x treatment_rate
    addressable = treated     x segment_factor x subtype_share
    capturable  = addressable x capture_rate(stage)

Every stage is rounded and floored at 1, so the chain is monotonically
non-increasing and strictly positive. Incidence is reported alongside but
does not feed the chain.

segment_factor multiplies the factors of every narrowing category found in
the patient_segment text (biomarker-selected, later line, first line); an
absent or unrecognised segment leaves it at 1.0. subtype_share is the
record's share for a known subtype, DEFAULT_SUBTYPE_SHARE for an unknown
one, and 1.0 when no subtype is given.
"""

import re
from typing import List, Optional, Tuple

from ..reference_data import assumptions
from ..schemas import PatientFunnel
from .indication_resolver import normalize

_SEGMENT_RULES = tuple(
    (rule["category"], rule["factor"], tuple(re.compile(p) for p in rule["patterns"]))
    for rule in assumptions.SEGMENT_CATEGORIES
)


def segment_factor(patient_segment: Optional[str]) -> Tuple[float, List[str]]:
    """
    Addressability multiplier for a patient-segment description.

    Returns:
        (factor, matched category names)
    """
    if patient_segment is None:
        return 1.0, []
    text = patient_segment.lower()
    factor = 1.0
    matched = []
    for category, category_factor, patterns in _SEGMENT_RULES:
        if any(p.search(text) for p in patterns):
            factor *= category_factor
            matched.append(category)
    return factor, matched


def subtype_share(record, subtype: Optional[str]) -> float:
    """
    Share of the indication's patients in `subtype`.

    A subtype matches exactly or as a whole-word phrase of the request, so
    "EGFR" matches "EGFR-mutant" but "a" matches nothing. When several
    subtypes match ("Adenocarcinoma, EGFR-mutant") the narrowest share wins.
    """
    if subtype is None:
        return 1.0
    wanted = normalize(subtype)
    if not wanted:
        return assumptions.DEFAULT_SUBTYPE_SHARE
    shares = []
    for name, share in record.subtypes.items():
        key = normalize(name)
        if key == wanted:
            return share
        if f" {key} " in f" {wanted} " or f" {wanted} " in f" {key} ":
            shares.append(share)
    if shares:
        return min(shares)
    return assumptions.DEFAULT_SUBTYPE_SHARE


def capture_rate(development_stage: str) -> float:
    return assumptions.STAGE_MARKET_SHARE[development_stage]["mid"]


def _narrow(count: int, rate: float) -> int:
    return max(1, int(round(count * rate)))


def compute_funnel(
    record,
    development_stage: str,
    patient_segment: Optional[str] = None,
    subtype: Optional[str] = None,
) -> PatientFunnel:
    seg_factor, categories = segment_factor(patient_segment)
    addressable_rate = seg_factor * subtype_share(record, subtype)
    capturable_rate = capture_rate(development_stage)

    prevalence = max(1, int(record.us_prevalence))
    diagnosed = _narrow(prevalence, record.diagnosis_rate)
    treated = _narrow(diagnosed, record.treatment_rate)
    addressable = _narrow(treated, addressable_rate)
    capturable = _narrow(addressable, capturable_rate)

    return PatientFunnel(
        us_prevalence=prevalence,
        us_incidence=max(0, int(record.us_incidence)),
        diagnosed=diagnosed,
        treated=treated,
        addressable=addressable,
        capturable=capturable,
        diagnosed_rate=record.diagnosis_rate,
        treated_rate=record.treatment_rate,
        addressable_rate=round(addressable_rate, 4),
        capturable_rate=capturable_rate,
        segment_categories=categories,
    )

"""
Terrain — Competitive Context Linker

Attaches the competitive-landscape snapshot for an indication to the
market-sizing report. The snapshot is read, never computed here; when an
indication has no snapshot a zero baseline (crowding 1, no products) is
returned instead of failing.
"""

from typing import Optional

from ..schemas import CompetitiveContext

CROWDED_THRESHOLD = 8
MODERATE_THRESHOLD = 5


def _differentiation_note(crowding: int, approved: int, phase3: int, asset_label: Optional[str]) -> str:
    subject = f"A {asset_label} asset" if asset_label else "A new entrant"
    if crowding >= CROWDED_THRESHOLD:
        return (
            f"Crowded market with {approved} approved products and {phase3} Phase 3 programs. "
            f"{subject} needs clear differentiation on efficacy, safety, or convenience to win share."
        )
    if crowding >= MODERATE_THRESHOLD:
        return (
            f"Moderately competitive market ({approved} approved, {phase3} in Phase 3). "
            f"{subject} can compete with a differentiated profile or an underserved segment."
        )
    return (
        f"Limited competition ({approved} approved, {phase3} in Phase 3). "
        f"{subject} has room to establish first- or best-in-class positioning."
    )


def link_context(record, snapshots, mechanism: Optional[str] = None,
                 molecular_target: Optional[str] = None) -> CompetitiveContext:
    asset_label = " / ".join(v for v in (molecular_target, mechanism) if v is not None) or None
    snapshot = snapshots.get(record.competitive_key) if record.competitive_key else None

    if snapshot is None:
        return CompetitiveContext(
            crowding_score=1,
            approved_products=0,
            phase3_programs=0,
            leading_products=[],
            differentiation_note=(
                f"No competitive-landscape data available for {record.name}; "
                "treat crowding as unverified before committing to positioning."
            ),
            data_available=False,
        )

    return CompetitiveContext(
        crowding_score=snapshot.crowding_score,
        approved_products=snapshot.approved_products,
        phase3_programs=snapshot.phase3_programs,
        leading_products=list(snapshot.leading_products),
        differentiation_note=_differentiation_note(
            snapshot.crowding_score,
            snapshot.approved_products,
            snapshot.phase3_programs,
            asset_label,
        ),
        data_available=True,
    )

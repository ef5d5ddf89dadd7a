"""
Terrain Pydantic Schemas

Request/response models for the market-sizing engine and its REST API.
The engine accepts MarketSizingInput and returns MarketSizingOutput; both
are immutable once built.

Architecture:
    - Input schema: validated at the API boundary (the engine's caller)
    - Component schemas: one per engine output (funnel, pricing, ...)
    - Output schema: composes the component schemas into the final report

Units:
    - MoneyMetric values carry their own unit (B / M / K USD)
    - Revenue projection and peak sales are in USD millions
    - Prices (WAC, net price) are annual USD per patient
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

GeographyCode = Literal[
    "US", "EU5", "Germany", "France", "Italy", "Spain", "UK",
    "Japan", "China", "Canada", "Australia", "RoW",
]
DevelopmentStage = Literal["preclinical", "phase1", "phase2", "phase3", "approved"]
PricingAssumption = Literal["conservative", "base", "premium"]
MoneyUnit = Literal["B", "M", "K"]
Confidence = Literal["high", "medium", "low"]


# ---------------------------------------------------------------------------
# INPUT SCHEMA
# ---------------------------------------------------------------------------

class MarketSizingInput(BaseModel):
    """Request body for a market-sizing analysis."""
    model_config = {"frozen": True}

    indication: str = Field(..., min_length=1, max_length=200)
    geography: List[GeographyCode] = Field(..., min_length=1)
    development_stage: DevelopmentStage
    pricing_assumption: PricingAssumption = "base"
    launch_year: int = Field(2028, ge=2020, le=2050)
    mechanism: Optional[str] = Field(None, max_length=200)
    patient_segment: Optional[str] = Field(None, max_length=200)
    subtype: Optional[str] = Field(None, max_length=200)
    molecular_target: Optional[str] = Field(None, max_length=200)

    @field_validator("indication")
    @classmethod
    def validate_indication(cls, v):
        if not v.strip():
            raise ValueError("indication must not be blank")
        return v.strip()

    @field_validator("mechanism", "patient_segment", "subtype", "molecular_target")
    @classmethod
    def blank_to_none(cls, v):
        # An empty optional field means "not supplied"
        if v is not None and not v.strip():
            return None
        return v.strip() if v is not None else v


# ---------------------------------------------------------------------------
# COMPONENT SCHEMAS
# ---------------------------------------------------------------------------

class MoneyMetric(BaseModel):
    model_config = {"frozen": True}

    value: float = Field(..., gt=0)
    unit: MoneyUnit
    confidence: Confidence
    range: Optional[List[float]] = None


class PatientFunnel(BaseModel):
    model_config = {"frozen": True}

    us_prevalence: int = Field(..., ge=1)
    us_incidence: int = Field(..., ge=0)
    diagnosed: int = Field(..., ge=1)
    treated: int = Field(..., ge=1)
    addressable: int = Field(..., ge=1)
    capturable: int = Field(..., ge=1)
    diagnosed_rate: float
    treated_rate: float
    addressable_rate: float
    capturable_rate: float
    segment_categories: List[str] = []


class GeographyTerritory(BaseModel):
    model_config = {"frozen": True}

    territory: str
    code: str
    tam: MoneyMetric
    sam: MoneyMetric
    som: MoneyMetric
    population_m: Optional[float] = None
    market_multiplier: float
    price_index: float
    regulatory_status: str


class ComparableDrug(BaseModel):
    model_config = {"frozen": True}

    name: str
    company: str
    launch_year: int
    launch_wac: float
    current_net_price: float
    indication: str
    mechanism: str


class RecommendedWac(BaseModel):
    model_config = {"frozen": True}

    conservative: float
    base: float
    premium: float


class PricingAnalysis(BaseModel):
    model_config = {"frozen": True}

    recommended_wac: RecommendedWac
    selected_wac: float
    pricing_assumption: PricingAssumption
    gross_to_net_estimate: float = Field(..., gt=0, lt=1)
    comparable_drugs: List[ComparableDrug]
    selection_basis: Literal["indication", "mechanism", "therapy_area", "default"]
    payer_dynamics: str
    pricing_rationale: str


class CompetitiveContext(BaseModel):
    model_config = {"frozen": True}

    crowding_score: int = Field(..., ge=1, le=10)
    approved_products: int = Field(..., ge=0)
    phase3_programs: int = Field(..., ge=0)
    leading_products: List[str] = []
    differentiation_note: str
    data_available: bool


class RevenueProjectionYear(BaseModel):
    model_config = {"frozen": True}

    year: int
    bear: float = Field(..., ge=0)
    base: float = Field(..., ge=0)
    bull: float = Field(..., ge=0)


class PeakSalesEstimate(BaseModel):
    model_config = {"frozen": True}

    low: float
    base: float
    high: float


class DataSource(BaseModel):
    model_config = {"frozen": True}

    name: str
    type: Literal["public", "proprietary", "licensed"]
    url: Optional[str] = None


# ---------------------------------------------------------------------------
# OUTPUT SCHEMA
# ---------------------------------------------------------------------------

class MarketSummary(BaseModel):
    model_config = {"frozen": True}

    tam_us: MoneyMetric
    sam_us: MoneyMetric
    som_us: MoneyMetric
    global_tam: MoneyMetric
    peak_sales_estimate: PeakSalesEstimate
    cagr_5yr: float = Field(..., gt=0)
    market_growth_driver: str = Field(..., min_length=10)


class MarketSizingOutput(BaseModel):
    """Complete market-sizing report for one indication and input set."""
    model_config = {"frozen": True}

    input: MarketSizingInput
    indication: str
    therapy_area: str
    summary: MarketSummary
    patient_funnel: PatientFunnel
    geography_breakdown: List[GeographyTerritory]
    pricing_analysis: PricingAnalysis
    revenue_projection: List[RevenueProjectionYear]
    competitive_context: CompetitiveContext
    methodology: str
    assumptions: List[str]
    data_sources: List[DataSource]
    generated_at: datetime
    indication_validated: bool
    reference_data_version: str


# ---------------------------------------------------------------------------
# API RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class MarketSizingResponse(BaseModel):
    success: bool = True
    data: MarketSizingOutput
    cache_hit: bool = False


class IndicationMatch(BaseModel):
    name: str
    therapy_area: str
    matched_on: str
    score: float


class IndicationSummary(BaseModel):
    name: str
    synonyms: List[str]
    therapy_area: str
    us_prevalence: int
    us_incidence: int
    diagnosis_rate: float
    treatment_rate: float
    cagr_5yr: Optional[float] = None
    subtypes: List[str] = []

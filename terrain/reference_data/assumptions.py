"""
Versioned modelling assumptions.

Every numeric multiplier the engines apply lives here so that a reference
data release changes them in one place. Bump REFERENCE_DATA_VERSION in
terrain.reference_data when editing any value below.
"""

DEVELOPMENT_STAGES = ["preclinical", "phase1", "phase2", "phase3", "approved"]

# ---------------------------------------------------------------------------
# PATIENT FUNNEL
# ---------------------------------------------------------------------------

# Peak market share band by stage (low / mid / high). The mid value is the
# capture rate applied to the addressable population; low/mid and high/mid
# scale the bear and bull revenue scenarios.
STAGE_MARKET_SHARE = {
    "preclinical": {"low": 0.01, "mid": 0.03, "high": 0.06},
    "phase1":      {"low": 0.02, "mid": 0.05, "high": 0.10},
    "phase2":      {"low": 0.05, "mid": 0.10, "high": 0.18},
    "phase3":      {"low": 0.10, "mid": 0.18, "high": 0.28},
    "approved":    {"low": 0.15, "mid": 0.25, "high": 0.40},
}

# Patient-segment narrowing. Each category is matched independently against
# the lower-cased segment text; factors of all matched categories multiply.
SEGMENT_CATEGORIES = [
    {
        "category": "biomarker_selected",
        "factor": 0.35,
        "patterns": [
            r"mutat", r"mutant", r"positive", r"biomarker", r"fusion", r"rearrange",
            r"amplif", r"overexpress", r"deficien", r"\begfr\b", r"\balk\b", r"\bros1\b",
            r"\bkras\b", r"\bbraf\b", r"\bher2\b", r"\bbrca\d?\b", r"\bpd-?l1\b",
            r"\bmsi-?h\b", r"\bflt3\b", r"\bidh[12]?\b", r"\bhrd\b",
        ],
    },
    {
        "category": "later_line",
        "factor": 0.45,
        "patterns": [
            r"\b[2-9]l\b", r"\b[2-9]l\+", r"second[- ]line", r"third[- ]line", r"later[- ]line",
            r"relapsed", r"refractory", r"\br/r\b", r"previously treated", r"pre-?treated",
            r"progress(ed|ion) (on|after)", r"salvage",
        ],
    },
    {
        "category": "first_line",
        "factor": 0.85,
        "patterns": [
            r"\b1l\b", r"first[- ]line", r"front[- ]?line", r"treatment[- ]na[iï]ve",
            r"newly diagnosed", r"de novo",
        ],
    },
]

# Share of treated patients when a subtype is named but not in the record
DEFAULT_SUBTYPE_SHARE = 0.30

# ---------------------------------------------------------------------------
# PRICING
# ---------------------------------------------------------------------------

# Tier floors/ceilings as multiples of the comparable median WAC
PRICING_MULTIPLIERS = {"conservative": 0.75, "base": 1.0, "premium": 1.35}
PRICING_PERCENTILES = {"conservative": 25, "base": 50, "premium": 75}

# Gross-to-net discount off WAC (US payer dynamics)
GROSS_TO_NET_BY_THERAPY = {
    "oncology": 0.15,
    "rare_disease": 0.08,
    "neurology": 0.20,
    "immunology": 0.35,
    "cardiovascular": 0.30,
    "infectious_disease": 0.25,
    "default": 0.22,
}

# ---------------------------------------------------------------------------
# GEOGRAPHY
# ---------------------------------------------------------------------------

# Applied to territories the reference data knows nothing about
DEFAULT_GEOGRAPHY_MULTIPLIER = {"epidemiology": 0.05, "price_index": 0.30, "access_rate": 0.20}

# ---------------------------------------------------------------------------
# RISK & REVENUE
# ---------------------------------------------------------------------------

# Likelihood of approval from the given stage (BIO/Informa/QLS 2011-2020,
# CDER novel approvals 2021-2025)
LOA_BY_PHASE_AND_AREA = {
    "oncology":           {"preclinical": 0.05, "phase1": 0.07, "phase2": 0.15, "phase3": 0.40, "approved": 1.0},
    "immunology":         {"preclinical": 0.06, "phase1": 0.09, "phase2": 0.20, "phase3": 0.54, "approved": 1.0},
    "neurology":          {"preclinical": 0.03, "phase1": 0.06, "phase2": 0.12, "phase3": 0.46, "approved": 1.0},
    "rare_disease":       {"preclinical": 0.10, "phase1": 0.16, "phase2": 0.28, "phase3": 0.66, "approved": 1.0},
    "cardiovascular":     {"preclinical": 0.04, "phase1": 0.07, "phase2": 0.15, "phase3": 0.55, "approved": 1.0},
    "metabolic":          {"preclinical": 0.06, "phase1": 0.11, "phase2": 0.22, "phase3": 0.60, "approved": 1.0},
    "infectious_disease": {"preclinical": 0.05, "phase1": 0.10, "phase2": 0.21, "phase3": 0.58, "approved": 1.0},
    "hematology":         {"preclinical": 0.07, "phase1": 0.12, "phase2": 0.22, "phase3": 0.52, "approved": 1.0},
    "ophthalmology":      {"preclinical": 0.06, "phase1": 0.10, "phase2": 0.18, "phase3": 0.50, "approved": 1.0},
    "dermatology":        {"preclinical": 0.06, "phase1": 0.10, "phase2": 0.22, "phase3": 0.55, "approved": 1.0},
}
DEFAULT_LOA = {"preclinical": 0.05, "phase1": 0.08, "phase2": 0.17, "phase3": 0.50, "approved": 1.0}

# Uptake curve: logistic ramp to peak, plateau until exclusivity loss, then
# a cliff and linear erosion to a floor.
# Times in years from launch.
REVENUE_CURVE = {
    "time_to_peak": 5.5,
    "loe_offset_years": 8.0,
    "loe_cliff_rate": 0.90,
    "erosion_floor_pct": 0.60,
    "years_to_erosion_floor": 3.0,
    "logistic_k": 5.5,
    "logistic_midpoint": 0.5,
}
PROJECTION_YEARS = 10

# Market CAGR when the indication record carries none
DEFAULT_CAGR_BY_THERAPY = {
    "oncology": 8.5,
    "rare_disease": 12.0,
    "neurology": 6.5,
    "immunology": 7.0,
    "cardiovascular": 4.5,
    "default": 7.0,
}
DEFAULT_GROWTH_DRIVER = (
    "Growing diagnosed population, new mechanism entrants, and expanding treatment guidelines"
)

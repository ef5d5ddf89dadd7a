"""
Territory reference table and regional prevalence factors.

TERRITORIES rows:
    name               display label
    population_m       population in millions
    care_access        diagnosis x treatment intensity relative to the US
    price_index        net price level relative to US WAC
    access_rate        share of treated patients with reimbursed access
    regulatory_status  primary approval pathway

Regional prevalence factors express per-capita disease burden relative to
the US for each therapy area (IHME GBD 2024, GLOBOCAN 2024, IDF Atlas).
Individual countries inherit the factor of the region they belong to.
"""

US_POPULATION_M = 336.0

TERRITORIES = {
    "US": {
        "name": "United States", "population_m": 336.0, "care_access": 1.0,
        "price_index": 1.0, "access_rate": 0.80, "region": "us",
        "regulatory_status": "FDA regulated",
    },
    "EU5": {
        "name": "EU5 (DE, FR, IT, ES, UK)", "population_m": 330.0, "care_access": 0.95,
        "price_index": 0.55, "access_rate": 0.70, "region": "eu5",
        "regulatory_status": "EMA centralized procedure",
    },
    "Germany": {
        "name": "Germany", "population_m": 84.0, "care_access": 0.97,
        "price_index": 0.65, "access_rate": 0.75, "region": "eu5",
        "regulatory_status": "EMA + G-BA assessment",
    },
    "France": {
        "name": "France", "population_m": 68.0, "care_access": 0.95,
        "price_index": 0.55, "access_rate": 0.70, "region": "eu5",
        "regulatory_status": "EMA + HAS assessment",
    },
    "Italy": {
        "name": "Italy", "population_m": 59.0, "care_access": 0.92,
        "price_index": 0.50, "access_rate": 0.65, "region": "eu5",
        "regulatory_status": "EMA + AIFA pricing negotiation",
    },
    "Spain": {
        "name": "Spain", "population_m": 48.0, "care_access": 0.92,
        "price_index": 0.48, "access_rate": 0.65, "region": "eu5",
        "regulatory_status": "EMA + AEMPS pricing and reimbursement",
    },
    "UK": {
        "name": "United Kingdom", "population_m": 68.0, "care_access": 0.93,
        "price_index": 0.50, "access_rate": 0.65, "region": "eu5",
        "regulatory_status": "MHRA (post-Brexit)",
    },
    "Japan": {
        "name": "Japan", "population_m": 124.0, "care_access": 0.95,
        "price_index": 0.60, "access_rate": 0.75, "region": "japan",
        "regulatory_status": "PMDA regulated",
    },
    "China": {
        "name": "China", "population_m": 1410.0, "care_access": 0.45,
        "price_index": 0.25, "access_rate": 0.35, "region": "china",
        "regulatory_status": "NMPA regulated",
    },
    "Canada": {
        "name": "Canada", "population_m": 40.0, "care_access": 0.95,
        "price_index": 0.65, "access_rate": 0.70, "region": "us",
        "regulatory_status": "Health Canada + CADTH review",
    },
    "Australia": {
        "name": "Australia", "population_m": 26.0, "care_access": 0.95,
        "price_index": 0.55, "access_rate": 0.70, "region": "us",
        "regulatory_status": "TGA + PBAC listing",
    },
    "RoW": {
        "name": "Rest of World", "population_m": 6000.0, "care_access": 0.25,
        "price_index": 0.15, "access_rate": 0.20, "region": "row",
        "regulatory_status": "Various national agencies",
    },
}

# Prevalence per capita relative to the US, keyed by region
REGIONAL_PREVALENCE_FACTORS = {
    "oncology":           {"eu5": 1.05, "japan": 1.15, "china": 1.10, "row": 0.75},
    "neurology":          {"eu5": 1.10, "japan": 1.20, "china": 0.80, "row": 0.60},
    "immunology":         {"eu5": 1.05, "japan": 0.70, "china": 0.65, "row": 0.55},
    "cardiovascular":     {"eu5": 0.85, "japan": 0.65, "china": 1.30, "row": 1.15},
    "metabolic":          {"eu5": 0.80, "japan": 0.60, "china": 1.40, "row": 1.10},
    "rare_disease":       {"eu5": 1.00, "japan": 0.95, "china": 0.90, "row": 0.70},
    "infectious_disease": {"eu5": 0.60, "japan": 0.40, "china": 0.80, "row": 3.50},
    "hematology":         {"eu5": 0.95, "japan": 0.90, "china": 0.85, "row": 1.20},
    "ophthalmology":      {"eu5": 0.95, "japan": 1.15, "china": 1.05, "row": 0.80},
    "dermatology":        {"eu5": 1.10, "japan": 0.75, "china": 0.70, "row": 0.65},
    "default":            {"eu5": 1.00, "japan": 1.00, "china": 1.00, "row": 1.00},
}

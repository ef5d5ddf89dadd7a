"""
Indication reference table.

US epidemiology (prevalence, incidence, diagnosis and treatment rates),
market growth and linkage keys for each supported indication.

Sources: SEER, CDC, NIH/NINDS, disease foundations, WHO GBD 2024 and
published epidemiology. Rates are fractions of the previous funnel stage.

Per-record keys:
    pricing_keys         values of PricingComparable.indication_class
    competitive_key      key into competitive_landscape.COMPETITIVE_SNAPSHOTS
    subtypes             subtype name -> share of patients (0-1]
    geography_overrides  territory code -> regional prevalence factor,
                         replacing the therapy-area default for that code
"""

INDICATIONS = [
    # ONCOLOGY
    {
        "name": "Non-Small Cell Lung Cancer",
        "synonyms": ["NSCLC", "lung adenocarcinoma", "lung squamous cell carcinoma", "lung cancer"],
        "therapy_area": "oncology",
        "us_prevalence": 235000, "us_incidence": 236740,
        "diagnosis_rate": 0.85, "treatment_rate": 0.78, "cagr_5yr": 9.2,
        "growth_driver": "Expanding biomarker-selected populations, combination regimens, "
                         "and earlier-line treatment opportunities",
        "pricing_keys": ["NSCLC"],
        "competitive_key": "nsclc",
        "subtypes": {
            "Adenocarcinoma": 0.40, "Squamous Cell Carcinoma": 0.30,
            "Large Cell Carcinoma": 0.05, "EGFR-mutant": 0.17, "ALK-rearranged": 0.05,
            "KRAS G12C-mutant": 0.13, "PD-L1 High": 0.28,
        },
    },
    {
        "name": "Pancreatic Ductal Adenocarcinoma",
        "synonyms": ["PDAC", "pancreatic cancer", "pancreatic adenocarcinoma"],
        "therapy_area": "oncology",
        "us_prevalence": 62000, "us_incidence": 66440,
        "diagnosis_rate": 0.90, "treatment_rate": 0.75, "cagr_5yr": 11.5,
        "growth_driver": "Massive unmet need, rising incidence, KRAS targeted therapy emerging, "
                         "ADC combinations",
        "pricing_keys": [],
        "competitive_key": "pdac",
    },
    {
        "name": "Acute Myeloid Leukemia",
        "synonyms": ["AML", "acute myelogenous leukemia"],
        "therapy_area": "oncology",
        "us_prevalence": 35000, "us_incidence": 20800,
        "diagnosis_rate": 0.95, "treatment_rate": 0.85, "cagr_5yr": 8.8,
        "growth_driver": "Molecular subtype targeting expansion, frontline combination "
                         "opportunities, MRD-driven treatment strategies",
        "pricing_keys": ["AML"],
        "competitive_key": "aml",
        "subtypes": {"FLT3-mutant": 0.30, "IDH1/2-mutant": 0.20, "TP53-mutant": 0.10, "NPM1-mutant": 0.30},
    },
    {
        "name": "Triple Negative Breast Cancer",
        "synonyms": ["TNBC"],
        "therapy_area": "oncology",
        "us_prevalence": 42000, "us_incidence": 43000,
        "diagnosis_rate": 0.92, "treatment_rate": 0.88, "cagr_5yr": 10.1,
        "growth_driver": "ADC wave, TROP2 targets, immunotherapy combination, BRCA-targeted expansion",
        "pricing_keys": ["TNBC"],
        "competitive_key": "tnbc",
    },
    {
        "name": "Colorectal Cancer",
        "synonyms": ["CRC", "colon cancer", "rectal cancer", "colorectal adenocarcinoma"],
        "therapy_area": "oncology",
        "us_prevalence": 188000, "us_incidence": 154270,
        "diagnosis_rate": 0.87, "treatment_rate": 0.82, "cagr_5yr": 7.8,
        "growth_driver": "MSI-H immunotherapy expansion, KRAS-targeted therapies, EGFR combinations",
        "pricing_keys": [],
        "competitive_key": "crc",
        "subtypes": {"MSS/pMMR": 0.85, "MSI-H/dMMR": 0.15, "KRAS/NRAS mutant": 0.50, "BRAF V600E mutant": 0.10},
    },
    {
        "name": "Ovarian Cancer",
        "synonyms": ["ovarian carcinoma", "EOC", "epithelial ovarian cancer", "ovarian adenocarcinoma"],
        "therapy_area": "oncology",
        "us_prevalence": 72000, "us_incidence": 19680,
        "diagnosis_rate": 0.82, "treatment_rate": 0.90, "cagr_5yr": 9.5,
        "growth_driver": "PARP inhibitor maintenance expansion, HRD testing, ADC development, "
                         "VEGF combinations",
        "pricing_keys": ["Ovarian Cancer"],
        "competitive_key": "ovarian",
    },
    # NEUROLOGY
    {
        "name": "Alzheimer's Disease",
        "synonyms": ["Alzheimer's", "AD", "Alzheimer disease", "dementia Alzheimer type"],
        "therapy_area": "neurology",
        "us_prevalence": 6800000, "us_incidence": 500000,
        "diagnosis_rate": 0.45, "treatment_rate": 0.60, "cagr_5yr": 14.2,
        "growth_driver": "Anti-amyloid approvals opening premium treatment market, early detection "
                         "via blood biomarkers, pipeline for early-stage disease",
        "pricing_keys": [],
        "competitive_key": "alzheimers",
    },
    {
        "name": "Parkinson's Disease",
        "synonyms": ["Parkinson's", "PD", "Parkinson disease", "idiopathic Parkinson"],
        "therapy_area": "neurology",
        "us_prevalence": 1000000, "us_incidence": 90000,
        "diagnosis_rate": 0.75, "treatment_rate": 0.88, "cagr_5yr": 8.4,
        "growth_driver": "Disease-modifying therapy opportunity (alpha-synuclein, LRRK2), "
                         "device-aided therapies, digital health integration",
        "pricing_keys": [],
        "competitive_key": "parkinsons",
    },
    {
        "name": "Amyotrophic Lateral Sclerosis",
        "synonyms": ["ALS", "Lou Gehrig Disease", "motor neuron disease", "MND"],
        "therapy_area": "neurology",
        "us_prevalence": 32000, "us_incidence": 16000,
        "diagnosis_rate": 0.88, "treatment_rate": 0.82, "cagr_5yr": 15.2,
        "growth_driver": "Genetic subtype targeting (SOD1, FUS, TDP-43), gene therapy approaches, "
                         "high unmet need, rare disease pricing",
        "pricing_keys": ["ALS"],
        "competitive_key": "als",
    },
    {
        "name": "Multiple Sclerosis",
        "synonyms": ["MS", "relapsing MS", "RRMS", "relapsing-remitting multiple sclerosis",
                     "PPMS", "progressive MS"],
        "therapy_area": "neurology",
        "us_prevalence": 1000000, "us_incidence": 10000,
        "diagnosis_rate": 0.90, "treatment_rate": 0.82, "cagr_5yr": 5.8,
        "growth_driver": "Progressive MS treatment gap, neuroprotection/repair targets, "
                         "subtype-specific biologics",
        "pricing_keys": ["Multiple Sclerosis"],
        "competitive_key": "ms",
        "subtypes": {"Relapsing-Remitting": 0.85, "Secondary Progressive": 0.10, "Primary Progressive": 0.05},
    },
    {
        "name": "Spinal Muscular Atrophy",
        "synonyms": ["SMA", "spinal muscular atrophy type 1", "SMA1", "SMA2", "SMA3"],
        "therapy_area": "neurology",
        "us_prevalence": 10000, "us_incidence": 600,
        "diagnosis_rate": 0.95, "treatment_rate": 0.90, "cagr_5yr": 18.5,
        "growth_driver": "Gene therapy precedent, combination approaches, next-gen RNA splicing "
                         "therapies, newborn screening expansion",
        "pricing_keys": ["SMA"],
        "competitive_key": "sma",
    },
    # RARE DISEASE
    {
        "name": "Duchenne Muscular Dystrophy",
        "synonyms": ["DMD", "Duchenne MD", "X-linked muscular dystrophy"],
        "therapy_area": "rare_disease",
        "us_prevalence": 15000, "us_incidence": 500,
        "diagnosis_rate": 0.92, "treatment_rate": 0.85, "cagr_5yr": 22.0,
        "growth_driver": "Gene therapy expansion (all patients), exon skipping expansion, "
                         "stop codon readthrough, combination approaches",
        "pricing_keys": ["DMD"],
        "competitive_key": "dmd",
    },
    {
        "name": "Cystic Fibrosis",
        "synonyms": ["CF", "CF lung disease"],
        "therapy_area": "rare_disease",
        "us_prevalence": 35000, "us_incidence": 1000,
        "diagnosis_rate": 0.98, "treatment_rate": 0.92, "cagr_5yr": 6.5,
        "growth_driver": "Patients not eligible for current modulators, next-gen modulators, "
                         "mRNA/gene therapy, combination approaches",
        "pricing_keys": ["Cystic Fibrosis"],
        "competitive_key": "cf",
        # CFTR mutations are rare in East Asian populations
        "geography_overrides": {"Japan": 0.05, "China": 0.05},
    },
    {
        "name": "Sickle Cell Disease",
        "synonyms": ["SCD", "sickle cell anemia", "HbSS disease", "hemoglobin SS", "sickle cell"],
        "therapy_area": "rare_disease",
        "us_prevalence": 100000, "us_incidence": 2000,
        "diagnosis_rate": 0.98, "treatment_rate": 0.75, "cagr_5yr": 25.0,
        "growth_driver": "Gene therapy/editing expansion, anti-sickling agents, VOC prevention, "
                         "pediatric approaches",
        "pricing_keys": ["Sickle Cell Disease"],
        "competitive_key": "scd",
        "geography_overrides": {"Japan": 0.02, "China": 0.05, "RoW": 4.0},
    },
    # IMMUNOLOGY
    {
        "name": "Rheumatoid Arthritis",
        "synonyms": ["RA", "seronegative RA", "seropositive RA"],
        "therapy_area": "immunology",
        "us_prevalence": 1500000, "us_incidence": 75000,
        "diagnosis_rate": 0.72, "treatment_rate": 0.75, "cagr_5yr": 5.2,
        "growth_driver": "Post-Humira biosimilar dynamics, next-gen selective JAKi, B cell "
                         "depletion, bispecifics",
        "pricing_keys": ["Rheumatoid Arthritis"],
        "competitive_key": "ra",
    },
    # CARDIOVASCULAR / METABOLIC
    {
        "name": "Heart Failure with Reduced Ejection Fraction",
        "synonyms": ["HFrEF", "heart failure", "systolic heart failure", "CHF", "congestive heart failure"],
        "therapy_area": "cardiovascular",
        "us_prevalence": 3600000, "us_incidence": 550000,
        "diagnosis_rate": 0.80, "treatment_rate": 0.70, "cagr_5yr": 6.8,
        "growth_driver": "SGLT2 class expansion, combination regimens, HFpEF emerging market, "
                         "device-drug combination",
        "pricing_keys": ["Heart Failure"],
        "competitive_key": "hfref",
    },
    {
        "name": "Type 2 Diabetes",
        "synonyms": ["T2DM", "type 2 diabetes mellitus", "T2D", "diabetes", "adult-onset diabetes"],
        "therapy_area": "metabolic",
        "us_prevalence": 38000000, "us_incidence": 1900000,
        "diagnosis_rate": 0.79, "treatment_rate": 0.82, "cagr_5yr": 7.5,
        "growth_driver": "GLP-1 class expansion, NASH comorbidity treatment, weight management, "
                         "combination approaches, oral GLP-1 development",
        "pricing_keys": ["Type 2 Diabetes"],
        "competitive_key": "t2d",
    },
    {
        "name": "Obesity",
        "synonyms": ["overweight and obesity", "BMI > 30", "adiposity", "weight management"],
        "therapy_area": "metabolic",
        "us_prevalence": 108000000, "us_incidence": 8000000,
        "diagnosis_rate": 0.60, "treatment_rate": 0.25, "cagr_5yr": 32.0,
        "growth_driver": "Massive untreated population, next-gen triple agonists "
                         "(GIP/GLP-1/glucagon), oral formulations, monthly dosing",
        "pricing_keys": ["Obesity"],
        "competitive_key": "obesity",
    },
    # INFECTIOUS DISEASE
    {
        "name": "HIV/AIDS",
        "synonyms": ["HIV", "human immunodeficiency virus", "AIDS", "HIV infection", "HIV-1"],
        "therapy_area": "infectious_disease",
        "us_prevalence": 1200000, "us_incidence": 36000,
        "diagnosis_rate": 0.87, "treatment_rate": 0.80, "cagr_5yr": 4.2,
        "growth_driver": "Ultra-long-acting formulations (implant/annual), cure strategies, "
                         "broadly neutralizing antibodies, prevention expansion",
        "pricing_keys": ["HIV"],
        "competitive_key": "hiv",
    },
    # OPHTHALMOLOGY
    {
        "name": "Neovascular Age-Related Macular Degeneration",
        "synonyms": ["wet AMD", "nAMD", "neovascular AMD", "exudative AMD", "wet macular degeneration"],
        "therapy_area": "ophthalmology",
        "us_prevalence": 1800000, "us_incidence": 200000,
        "diagnosis_rate": 0.85, "treatment_rate": 0.70, "cagr_5yr": 7.8,
        "growth_driver": "Extended dosing intervals, gene therapy single-dose cure potential, "
                         "combination anti-VEGF approaches, GA prevention",
        "pricing_keys": ["Wet AMD"],
        "competitive_key": "namd",
    },
]

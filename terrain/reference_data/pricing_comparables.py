"""
Pricing comparable reference table.

US annual WAC at launch for marketed therapies, used as the sampling pool
for price-tier derivation. Prices in USD per patient-year.

Sources: company filings, SSR Health, Medi-Span WAC, public launch
announcements. Gene therapies are one-time list prices.
"""

# (drug, company, indication_class, therapy_area, mechanism, launch_year, wac)
PRICING_COMPARABLES = [
    # Oncology
    ("Keytruda", "Merck", "NSCLC", "oncology", "PD-1 inhibitor", 2014, 150000),
    ("Opdivo", "Bristol-Myers Squibb", "NSCLC", "oncology", "PD-1 inhibitor", 2014, 143000),
    ("Imfinzi", "AstraZeneca", "NSCLC", "oncology", "PD-L1 inhibitor", 2017, 180000),
    ("Tagrisso", "AstraZeneca", "NSCLC", "oncology", "EGFR TKI", 2015, 150000),
    ("Lumakras", "Amgen", "NSCLC", "oncology", "KRAS G12C inhibitor", 2021, 178000),
    ("Krazati", "Mirati/BMS", "NSCLC", "oncology", "KRAS G12C inhibitor", 2022, 196000),
    ("Gavreto", "Blueprint/Roche", "NSCLC", "oncology", "RET inhibitor", 2020, 210000),
    ("Retevmo", "Eli Lilly", "NSCLC", "oncology", "RET inhibitor", 2020, 208000),
    ("Tabrecta", "Novartis", "NSCLC", "oncology", "MET inhibitor", 2020, 196000),
    ("Tepmetko", "EMD Serono", "NSCLC", "oncology", "MET inhibitor", 2021, 208000),
    ("Trodelvy", "Gilead", "TNBC", "oncology", "ADC (Trop-2)", 2020, 180000),
    ("Enhertu", "Daiichi Sankyo/AstraZeneca", "Breast Cancer", "oncology", "ADC (HER2)", 2019, 170000),
    ("Lynparza", "AstraZeneca/Merck", "Ovarian Cancer", "oncology", "PARP inhibitor", 2014, 108000),
    ("Zejula", "GSK", "Ovarian Cancer", "oncology", "PARP inhibitor", 2017, 178000),
    ("Rubraca", "Clovis", "Ovarian Cancer", "oncology", "PARP inhibitor", 2016, 168000),
    ("Venclexta", "AbbVie/Roche", "AML", "oncology", "BCL-2 inhibitor", 2016, 120000),
    # Neurology
    ("Ocrevus", "Roche", "Multiple Sclerosis", "neurology", "Anti-CD20", 2017, 65000),
    ("Kesimpta", "Novartis", "Multiple Sclerosis", "neurology", "Anti-CD20", 2020, 68000),
    ("Zeposia", "Bristol-Myers Squibb", "Multiple Sclerosis", "neurology", "S1P modulator", 2020, 78000),
    ("Tysabri", "Biogen", "Multiple Sclerosis", "neurology", "Anti-integrin", 2006, 32000),
    ("Spinraza", "Biogen", "SMA", "neurology", "Antisense oligonucleotide", 2016, 750000),
    ("Evrysdi", "Roche", "SMA", "neurology", "SMN2 splicing modifier", 2020, 100000),
    ("Qalsody", "Biogen", "ALS", "neurology", "Antisense oligonucleotide (SOD1)", 2023, 180000),
    ("Radicava", "Mitsubishi Tanabe", "ALS", "neurology", "Free radical scavenger", 2017, 146000),
    ("Riluzole", "Generic", "ALS", "neurology", "Glutamate inhibitor", 1995, 6000),
    # Rare disease
    ("Zolgensma", "Novartis", "SMA", "rare_disease", "AAV gene therapy", 2019, 2125000),
    ("Elevidys", "Sarepta", "DMD", "rare_disease", "AAV gene therapy", 2023, 3200000),
    ("Trikafta", "Vertex", "Cystic Fibrosis", "rare_disease", "CFTR modulator", 2019, 311000),
    ("Orkambi", "Vertex", "Cystic Fibrosis", "rare_disease", "CFTR modulator", 2015, 259000),
    ("Kalydeco", "Vertex", "Cystic Fibrosis", "rare_disease", "CFTR potentiator", 2012, 294000),
    ("Casgevy", "Vertex/CRISPR", "Sickle Cell Disease", "rare_disease", "CRISPR gene editing", 2023, 2200000),
    ("Lyfgenia", "bluebird bio", "Sickle Cell Disease", "rare_disease", "Lentiviral gene therapy", 2023, 3100000),
    ("Oxbryta", "Pfizer", "Sickle Cell Disease", "rare_disease", "HbS polymerization inhibitor", 2019, 125000),
    ("Adakveo", "Novartis", "Sickle Cell Disease", "rare_disease", "Anti-P-selectin", 2019, 88000),
    # Immunology
    ("Rinvoq", "AbbVie", "Rheumatoid Arthritis", "immunology", "JAK1 inhibitor", 2019, 59000),
    ("Olumiant", "Eli Lilly", "Rheumatoid Arthritis", "immunology", "JAK1/2 inhibitor", 2018, 43000),
    ("Xeljanz", "Pfizer", "Rheumatoid Arthritis", "immunology", "JAK inhibitor", 2012, 25000),
    ("Humira", "AbbVie", "Rheumatoid Arthritis", "immunology", "TNF inhibitor", 2002, 19000),
    ("Dupixent", "Sanofi/Regeneron", "Atopic Dermatitis", "immunology", "IL-4Ra antagonist", 2017, 37000),
    # Cardiovascular
    ("Entresto", "Novartis", "Heart Failure", "cardiovascular", "ARNI", 2015, 4560),
    ("Verquvo", "Merck/Bayer", "Heart Failure", "cardiovascular", "sGC stimulator", 2021, 6600),
    ("Farxiga", "AstraZeneca", "Heart Failure", "cardiovascular", "SGLT2 inhibitor", 2014, 4800),
    ("Jardiance", "Boehringer Ingelheim/Lilly", "Heart Failure", "cardiovascular", "SGLT2 inhibitor", 2014, 4500),
    # Metabolic
    ("Ozempic", "Novo Nordisk", "Type 2 Diabetes", "metabolic", "GLP-1 receptor agonist", 2017, 9000),
    ("Mounjaro", "Eli Lilly", "Type 2 Diabetes", "metabolic", "GIP/GLP-1 receptor agonist", 2022, 12900),
    ("Wegovy", "Novo Nordisk", "Obesity", "metabolic", "GLP-1 receptor agonist", 2021, 16000),
    ("Zepbound", "Eli Lilly", "Obesity", "metabolic", "GIP/GLP-1 receptor agonist", 2023, 13000),
    # Infectious disease
    ("Biktarvy", "Gilead", "HIV", "infectious_disease", "INSTI/NRTI combination", 2018, 42000),
    ("Cabenuva", "ViiV Healthcare", "HIV", "infectious_disease", "Long-acting INSTI/NNRTI", 2021, 46000),
    ("Sunlenca", "Gilead", "HIV", "infectious_disease", "Capsid inhibitor", 2022, 42500),
    # Ophthalmology
    ("Eylea", "Regeneron", "Wet AMD", "ophthalmology", "Anti-VEGF", 2011, 11500),
    ("Eylea HD", "Regeneron", "Wet AMD", "ophthalmology", "Anti-VEGF", 2023, 14400),
    ("Vabysmo", "Roche", "Wet AMD", "ophthalmology", "Anti-VEGF/Ang-2 bispecific", 2022, 12000),
    ("Lucentis", "Genentech", "Wet AMD", "ophthalmology", "Anti-VEGF", 2006, 9000),
    ("Beovu", "Novartis", "Wet AMD", "ophthalmology", "Anti-VEGF", 2019, 12000),
]

# Fallback single price point when a therapy area has no comparables at all
DEFAULT_WAC_BY_THERAPY_AREA = {
    "oncology": 180000,
    "rare_disease": 400000,
    "neurology": 65000,
    "immunology": 50000,
    "cardiovascular": 35000,
    "gene_therapy": 800000,
    "default": 80000,
}

PAYER_DYNAMICS = {
    "oncology": (
        "Premium pricing environment. Payer willingness-to-pay is high. PBM rebating is lower "
        "than other categories (15-20% gross-to-net). Oncology carve-out provisions in many "
        "commercial plans."
    ),
    "rare_disease": (
        "Ultra-premium pricing potential ($200K-$2M+ annually). Orphan drug exclusivity provides "
        "7-year market protection. Small patient populations reduce payer resistance."
    ),
    "neurology": (
        "Moderate-to-high pricing. CNS conditions increasingly recognized as high unmet need. "
        "Alzheimer's and rare neurological conditions can command higher pricing than common CNS."
    ),
    "immunology": (
        "Competitive biosimilar pressure in biologics. High gross-to-net (30-35%). Formulary "
        "competition intense. Step therapy requirements common."
    ),
    "cardiovascular": (
        "Price-sensitive category. Significant generic competition. Demonstrated outcomes data "
        "required for formulary positioning."
    ),
    "default": (
        "Market pricing dynamics vary. Expect payer negotiations and formulary management. "
        "Target net price 75-85% of WAC."
    ),
}

"""
Competitive-landscape snapshot, keyed by IndicationRecord.competitive_key.

Counts and crowding scores are exported from the competitive-landscape
engine's dataset (ClinicalTrials.gov, FDA approvals, company pipelines).
crowding_score is on a 1-10 scale, 10 being the most crowded.
"""

COMPETITIVE_SNAPSHOTS = {
    "nsclc": {
        "crowding_score": 9, "approved_products": 24, "phase3_programs": 31,
        "leading_products": ["Keytruda", "Opdivo", "Tagrisso", "Alecensa", "Lorbrena", "Lumakras", "Krazati"],
    },
    "pdac": {
        "crowding_score": 5, "approved_products": 4, "phase3_programs": 9,
        "leading_products": ["Abraxane", "Onivyde", "Lynparza", "Folfirinox (generic)"],
    },
    "aml": {
        "crowding_score": 6, "approved_products": 11, "phase3_programs": 12,
        "leading_products": ["Venclexta", "Xospata", "Tibsovo", "Idhifa", "Rydapt"],
    },
    "tnbc": {
        "crowding_score": 5, "approved_products": 5, "phase3_programs": 14,
        "leading_products": ["Trodelvy", "Keytruda", "Lynparza", "Talzenna"],
    },
    "crc": {
        "crowding_score": 6, "approved_products": 14, "phase3_programs": 11,
        "leading_products": ["Avastin", "Erbitux", "Lonsurf", "Braftovi", "Keytruda"],
    },
    "ovarian": {
        "crowding_score": 5, "approved_products": 7, "phase3_programs": 8,
        "leading_products": ["Lynparza", "Zejula", "Rubraca", "Elahere"],
    },
    "alzheimers": {
        "crowding_score": 5, "approved_products": 6, "phase3_programs": 18,
        "leading_products": ["Leqembi", "Kisunla", "Aricept", "Namenda"],
    },
    "parkinsons": {
        "crowding_score": 6, "approved_products": 15, "phase3_programs": 10,
        "leading_products": ["Sinemet", "Rytary", "Nourianz", "Ongentys", "Vyalev"],
    },
    "als": {
        "crowding_score": 4, "approved_products": 3, "phase3_programs": 6,
        "leading_products": ["Qalsody", "Radicava", "Riluzole", "Relyvrio"],
    },
    "ms": {
        "crowding_score": 8, "approved_products": 22, "phase3_programs": 9,
        "leading_products": ["Ocrevus", "Kesimpta", "Zeposia", "Tysabri", "Mavenclad", "Briumvi"],
    },
    "sma": {
        "crowding_score": 3, "approved_products": 3, "phase3_programs": 2,
        "leading_products": ["Spinraza", "Zolgensma", "Evrysdi"],
    },
    "dmd": {
        "crowding_score": 6, "approved_products": 7, "phase3_programs": 6,
        "leading_products": ["Elevidys", "Exondys 51", "Vyondys 53", "Viltepso", "Amondys 45", "Agamree"],
    },
    "cf": {
        "crowding_score": 4, "approved_products": 4, "phase3_programs": 3,
        "leading_products": ["Trikafta", "Alyftrek", "Kalydeco", "Orkambi"],
    },
    "scd": {
        "crowding_score": 6, "approved_products": 5, "phase3_programs": 7,
        "leading_products": ["Casgevy", "Lyfgenia", "Adakveo", "Endari", "Hydroxyurea"],
    },
    "ra": {
        "crowding_score": 8, "approved_products": 28, "phase3_programs": 8,
        "leading_products": ["Humira", "Rinvoq", "Enbrel", "Actemra", "Orencia", "Olumiant"],
    },
    "hfref": {
        "crowding_score": 7, "approved_products": 19, "phase3_programs": 8,
        "leading_products": ["Entresto", "Farxiga", "Jardiance", "Verquvo", "Inpefa"],
    },
    "t2d": {
        "crowding_score": 9, "approved_products": 60, "phase3_programs": 22,
        "leading_products": ["Ozempic", "Mounjaro", "Jardiance", "Farxiga", "Trulicity", "Rybelsus"],
    },
    "obesity": {
        "crowding_score": 7, "approved_products": 6, "phase3_programs": 19,
        "leading_products": ["Wegovy", "Zepbound", "Saxenda", "Qsymia", "Contrave"],
    },
    "hiv": {
        "crowding_score": 7, "approved_products": 40, "phase3_programs": 7,
        "leading_products": ["Biktarvy", "Cabenuva", "Dovato", "Sunlenca", "Descovy"],
    },
    "namd": {
        "crowding_score": 7, "approved_products": 8, "phase3_programs": 9,
        "leading_products": ["Eylea", "Eylea HD", "Vabysmo", "Lucentis", "Beovu", "Susvimo"],
    },
}

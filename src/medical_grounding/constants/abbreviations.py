# ============================================================================
# src/medical_grounding/constants/abbreviations.py
# ============================================================================
"""
Clinical abbreviation expansions (lowercase abbreviation -> canonical name)

Matched whole-word and case-insensitively. No expansion may contain another
key as a whole word, otherwise normalization stops being idempotent.
"""

from types import MappingProxyType

ABBREVIATIONS = MappingProxyType({
    # Hematology
    "hb": "Hemoglobin",
    "hgb": "Hemoglobin",
    "wbc": "White Blood Cell Count",
    "rbc": "Red Blood Cell Count",
    "plt": "Platelet Count",
    "esr": "Erythrocyte Sedimentation Rate",
    "mcv": "Mean Corpuscular Volume",
    "mch": "Mean Corpuscular Hemoglobin",
    "mchc": "Mean Corpuscular Hemoglobin Concentration",
    "rdw": "Red Cell Distribution Width",
    "mpv": "Mean Platelet Volume",
    "pcv": "Packed Cell Volume",
    "hct": "Hematocrit",

    # Sugar
    "fbs": "Fasting Blood Sugar",
    "rbs": "Random Blood Sugar",
    "ppbs": "Post Prandial Blood Sugar",
    "hba1c": "Glycated Hemoglobin",

    # Lipids
    "ldl": "Low Density Lipoprotein",
    "hdl": "High Density Lipoprotein",

    # Thyroid
    "tsh": "Thyroid Stimulating Hormone",
    "t3": "Triiodothyronine",
    "t4": "Thyroxine",

    # Liver / kidney
    "sgpt": "Serum Glutamic Pyruvic Transaminase",
    "sgot": "Serum Glutamic Oxaloacetic Transaminase",
    "alt": "Alanine Aminotransferase",
    "ast": "Aspartate Aminotransferase",
    "bun": "Blood Urea Nitrogen",

    # Markers
    "crp": "C-Reactive Protein",
    "bnp": "B-type Natriuretic Peptide",
    "psa": "Prostate Specific Antigen",

    # Vitals
    "bp": "Blood Pressure",

    # Imaging / procedures
    "ecg": "Electrocardiogram",
    "ekg": "Electrocardiogram",
    "ct": "Computed Tomography",
    "mri": "Magnetic Resonance Imaging",
    "usg": "Ultrasonography",
})

# ============================================================================
# src/medical_grounding/constants/ocr_corrections.py
# ============================================================================
"""
Situational OCR corrections for medical documents

Each entry is (compiled pattern, replacement, description), applied in order;
a replacement is a template string or a callable taking the match.
Every replacement is a fixed point: running the table over its own output
changes nothing.
"""

import re

_RH_POSITIVE = r"(?:positive\b|pos\b|\+ve\b|\+(?!\s*\d))"
_RH_NEGATIVE = r"(?:negative\b|neg\b|-ve\b|-(?!\s*\d))"

OCR_CORRECTIONS = (
    # Blood group: degree sign or zero read in place of the letter O
    (
        re.compile(r"\b(blood\s*(?:group|type)[:\s]*)[°0](\s*(?:positive|negative|\+|-))", re.IGNORECASE),
        r"\1O\2",
        "blood-group label followed by °/0 and an Rh indicator",
    ),
    (
        re.compile(r"(?<![\w.°])[°0]\s*" + _RH_POSITIVE, re.IGNORECASE),
        "O Positive",
        "°/0 followed by positive",
    ),
    (
        re.compile(r"(?<![\w.°])[°0]\s*" + _RH_NEGATIVE, re.IGNORECASE),
        "O Negative",
        "°/0 followed by negative",
    ),

    # Digit/letter confusions, only next to digits
    (
        re.compile(r"\bl(?=\d)"),
        "1",
        "lowercase l directly before a digit",
    ),
    (
        re.compile(r"(?<=\d)[oO](?![A-Za-z])"),
        "0",
        "o/O directly after a digit",
    ),

    # Rh factor spellings
    (
        re.compile(r"\brh\s*(?:factor)?\s*[:\s]*" + _RH_POSITIVE, re.IGNORECASE),
        "Rh Positive",
        "Rh factor positive",
    ),
    (
        re.compile(r"\brh\s*(?:factor)?\s*[:\s]*" + _RH_NEGATIVE, re.IGNORECASE),
        "Rh Negative",
        "Rh factor negative",
    ),

    # Temperature notation
    (
        re.compile(r"(\d+(?:\.\d+)?)\s*[°º]\s*[fF]\b"),
        r"\1°F",
        "Fahrenheit degree notation",
    ),
    (
        re.compile(r"(\d+(?:\.\d+)?)\s*[°º]\s*[cC]\b"),
        r"\1°C",
        "Celsius degree notation",
    ),

    # Medical nouns with digit-for-letter misreads
    (
        re.compile(r"hem[o0]gl[o0]bin", re.IGNORECASE),
        "Hemoglobin",
        "hemoglobin",
    ),
    (
        re.compile(r"plat[e3]l[e3]t(s?)", re.IGNORECASE),
        lambda m: "Platelets" if m.group(1) else "Platelet",
        "platelet(s)",
    ),
    (
        re.compile(r"gl[u0]c[o0]se", re.IGNORECASE),
        "Glucose",
        "glucose",
    ),
    (
        re.compile(r"ch[o0]lester[o0]l", re.IGNORECASE),
        "Cholesterol",
        "cholesterol",
    ),
)

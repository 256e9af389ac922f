# ============================================================================
# src/medical_grounding/constants/recognizers.py
# ============================================================================
"""
Recognizer tables for fact extraction

All recognizers run over normalized text, so keywords cover both the short
forms and the canonical expansions written by the normalizer
("WBC" arrives as "White Blood Cell Count").

Adding a test or a dosage form is a data change here; the extractor's control
flow never needs to change.
"""

import re
from dataclasses import dataclass
from typing import Pattern

from ..core.context.enums import FactKind


@dataclass(frozen=True)
class LabRecognizer:
    """
    One lab value or vital.

    `pattern` must define a `value` group and may define a `unit` group.
    When the document's own unit is captured it overrides `unit`.
    """
    pattern: Pattern
    name: str
    unit: str
    kind: FactKind = FactKind.LAB_VALUE


@dataclass(frozen=True)
class MedicationRecognizer:
    """
    One prescription shorthand anchor ("Tab.", "Cap.", ...).

    `pattern` must define a `name` group and may define a `dose` group.
    """
    pattern: Pattern
    form: str


# ----------------------------------------------------------------------------
# Blood group
# ----------------------------------------------------------------------------

# Blood-group vocabulary earlier on the same line
_GROUP_WORD = r"(?i:\b(?:blood|group|type)\b)"

# Most specific first; the first pattern that matches wins. Every pattern
# needs blood-group vocabulary, so "Hepatitis B Negative" is not a group.
BLOOD_GROUP_PATTERNS = (
    # "Blood Group: O Positive", "Blood Type - AB-", "Blood Group: B +ve"
    re.compile(
        r"blood\s*(?:group|type)\s*[:\-]?\s*(?P<group>AB|A|B|O|0|°)\s*"
        r"(?:rh\s*)?(?P<rh>positive|negative|pos\b|neg\b|\+ve|-ve|\+|-)",
        re.IGNORECASE,
    ),
    # "Group: O Positive", "Type A NEGATIVE" (uppercase group letter required)
    re.compile(
        _GROUP_WORD + r"[^\n]*?(?<![\w-])(?P<group>AB|A|B|O)\s+(?:Rh\s+)?"
        r"(?P<rh>Positive|Negative|POSITIVE|NEGATIVE)\b"
    ),
    # "AB Rh Negative"
    re.compile(
        r"(?<![\w-])(?P<group>AB|A|B|O)\s+Rh\s+"
        r"(?P<rh>Positive|Negative|POSITIVE|NEGATIVE)\b"
    ),
    # "Donor blood: B+", "Group O+ve"
    re.compile(
        _GROUP_WORD + r"[^\n]*?(?<![\w+-])(?P<group>AB|A|B|O)(?P<rh>\+ve|-ve|\+|-)(?![\w+-])"
    ),
    # "Blood Group: A" with no Rh indicator
    re.compile(
        r"blood\s*(?:group|type)\s*[:\-]?\s*(?P<group>AB|A|B|O|0|°)(?![A-Za-z])"
        r"(?:\s*(?:rh\s*)?(?P<rh>positive|negative|pos\b|neg\b|\+|-))?",
        re.IGNORECASE,
    ),
)

RH_SIGNS = {
    "+": "+", "+ve": "+", "pos": "+", "positive": "+",
    "-": "-", "-ve": "-", "neg": "-", "negative": "-",
}

# ----------------------------------------------------------------------------
# Lab values and vitals
# ----------------------------------------------------------------------------

# 7,500 / 13.5 / 245
_VALUE = r"(?P<value>\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)"
_SEP = r"[:=\s]*"


def _lab(keyword: str, units: str = None) -> Pattern:
    unit_part = rf"\s*(?P<unit>{units})?" if units else ""
    return re.compile(rf"{keyword}{_SEP}{_VALUE}{unit_part}", re.IGNORECASE)


LAB_RECOGNIZERS = (
    LabRecognizer(
        # Not "Glycated Hemoglobin" or "Mean Corpuscular Hemoglobin"
        _lab(r"(?<!glycated )(?<!corpuscular )\bhemoglobin\b", r"g/dL|g%"),
        "Hemoglobin", "g/dL",
    ),
    LabRecognizer(
        _lab(r"\b(?:white\s*blood\s*cells?(?:\s*count)?|total\s*leu[ck]ocyte\s*count)\b",
             r"cells/cu\.?mm|/cu\.?mm|cells/µL|/µL"),
        "White Blood Cell Count", "cells/cu.mm",
    ),
    LabRecognizer(
        _lab(r"\bred\s*blood\s*cells?(?:\s*count)?\b",
             r"million/cu\.?mm|million/µL|cells/µL"),
        "Red Blood Cell Count", "million/cu.mm",
    ),
    LabRecognizer(
        _lab(r"\bplatelets?(?:\s*count)?\b",
             r"lakhs?(?:/cu\.?mm)?|thousand(?:/µL)?|/cu\.?mm|cells/µL"),
        "Platelet Count", "/cu.mm",
    ),
    LabRecognizer(
        _lab(r"\b(?:(?:fasting|random|post\s*prandial)\s*)?(?:blood\s*)?sugar\b",
             r"mg/dL|mmol/L"),
        "Blood Sugar", "mg/dL",
    ),
    LabRecognizer(
        _lab(r"\bglucose\b", r"mg/dL|mmol/L"),
        "Glucose", "mg/dL",
    ),
    LabRecognizer(
        _lab(r"\b(?:total\s*)?cholesterol\b", r"mg/dL|mmol/L"),
        "Cholesterol", "mg/dL",
    ),
    LabRecognizer(
        re.compile(
            rf"(?:\bbp\b|\bblood\s*pressure\b){_SEP}(?P<value>\d{{2,3}}\s*/\s*\d{{2,3}})\s*(?P<unit>mmHg)?",
            re.IGNORECASE,
        ),
        "Blood Pressure", "mmHg", FactKind.VITAL,
    ),
    LabRecognizer(
        _lab(r"\bpulse(?:\s*rate)?\b", r"/min|bpm|beats/min"),
        "Pulse Rate", "bpm", FactKind.VITAL,
    ),
    LabRecognizer(
        _lab(r"\btemp(?:erature)?\b\.?", r"°[FC]"),
        "Temperature", "°F", FactKind.VITAL,
    ),
    LabRecognizer(
        _lab(r"\b(?:esr|erythrocyte\s*sedimentation\s*rate)\b", r"mm/hr|mm/1st\s*hr"),
        "ESR", "mm/hr",
    ),
    LabRecognizer(
        _lab(r"\b(?:hba1c|glycated\s*hemoglobin|a1c)\b", r"%"),
        "HbA1c", "%",
    ),
    LabRecognizer(
        _lab(r"\b(?:serum\s*)?creatinine\b", r"mg/dL|µmol/L"),
        "Creatinine", "mg/dL",
    ),
    LabRecognizer(
        _lab(r"\burea\b", r"mg/dL|mmol/L"),
        "Urea", "mg/dL",
    ),
)

# ----------------------------------------------------------------------------
# Medications
# ----------------------------------------------------------------------------

# Up to two words on the same line (the second never being another anchor),
# then an optional strength
_MED_NAME = (
    r"(?P<name>[A-Za-z][A-Za-z\-]*"
    r"(?:[ \t]+(?!(?:tab|cap|syp|syr|inj)[a-z]*\b)[A-Za-z][A-Za-z\-]*)?)"
)
_MED_DOSE = r"(?:[ \t]*(?P<dose>\d+(?:\.\d+)?[ \t]*(?:mg|mcg|g|ml|iu|units?)\b))?"


def _medication(anchor: str) -> Pattern:
    return re.compile(
        rf"\b(?:{anchor})(?:\.[ \t]*|[ \t]+){_MED_NAME}{_MED_DOSE}",
        re.IGNORECASE,
    )


MEDICATION_PATTERNS = (
    MedicationRecognizer(_medication(r"tab(?:let)?s?"), "Tablet"),
    MedicationRecognizer(_medication(r"cap(?:sule)?s?"), "Capsule"),
    MedicationRecognizer(_medication(r"syp|syr(?:up)?"), "Syrup"),
    MedicationRecognizer(_medication(r"inj(?:ection)?"), "Injection"),
)

# Connectives that a loose name group can swallow
MEDICATION_STOPWORDS = frozenset({
    "the", "and", "for", "with", "after", "before", "daily", "once",
    "twice", "each", "per", "of", "to", "at", "in", "or",
})

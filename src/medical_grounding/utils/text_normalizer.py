# ============================================================================
# src/medical_grounding/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans up OCR text from uploaded medical documents:
- Corrects known OCR misreads in a medical context (blood group "0" -> "O",
  "l2" -> "12", "hem0globin" -> "Hemoglobin", degree notation)
- Expands clinical abbreviations to canonical names ("Hb" -> "Hemoglobin")
- Normalizes unit spellings ("mg%" -> "mg/dL")

The stages run in a fixed order because each one consumes the previous
stage's output. All substitutions come from the tables in
`medical_grounding.constants`; the functions here only apply them.

The output of normalize() is what downstream consumers (fact extraction,
LLM context, evidence lookup) must read, never the raw OCR text.
"""

import re
import logging
from typing import Any, Mapping, Pattern, Tuple

from ..constants import ABBREVIATIONS, UNIT_NORMALIZATIONS, OCR_CORRECTIONS

logger = logging.getLogger(__name__)


def _compile_alternation(table: Mapping[str, str], left: str, right: str) -> Pattern:
    # Longest first so "mchc" wins over "mch" and "cells/cumm" over "/cumm"
    keys = sorted(table, key=len, reverse=True)
    alternation = "|".join(re.escape(k) for k in keys)
    return re.compile(f"{left}({alternation}){right}", re.IGNORECASE)


# One combined pass per table, so an expansion is never fed back into the
# same table.
ABBREVIATION_PATTERN = _compile_alternation(ABBREVIATIONS, r"\b", r"\b")
UNIT_PATTERN = _compile_alternation(UNIT_NORMALIZATIONS, r"(?<![A-Za-z])", r"(?![A-Za-z])")


def correct_ocr_errors(text: str) -> str:
    """
    Apply the situational OCR correction table.

    Examples:
        "Blood Group: 0 Positive" -> "Blood Group: O Positive"
        "Hem0globin l2.5"         -> "Hemoglobin 12.5"
        "98.6 ° F"                -> "98.6°F"
    """
    if not text:
        return text

    result = text
    for pattern, replacement, _description in OCR_CORRECTIONS:
        result = pattern.sub(replacement, result)

    return result


def expand_abbreviations(text: str) -> str:
    """
    Expand whole-word clinical abbreviations, case-insensitively.

    Examples:
        "Hb: 13.5"   -> "Hemoglobin: 13.5"
        "FBS 110"    -> "Fasting Blood Sugar 110"
        "HbA1c 6.1"  -> "Glycated Hemoglobin 6.1"  (not "Hemoglobin A1c")
    """
    if not text:
        return text

    return ABBREVIATION_PATTERN.sub(lambda m: ABBREVIATIONS[m.group(1).lower()], text)


def normalize_units(text: str) -> str:
    """
    Replace unit spelling variants with canonical units.

    Examples:
        "110 mg%"       -> "110 mg/dL"
        "7000 /cumm"    -> "7000 /cu.mm"
    """
    if not text:
        return text

    return UNIT_PATTERN.sub(lambda m: UNIT_NORMALIZATIONS[m.group(1).lower()], text)


NORMALIZATION_STAGES: Tuple = (
    ("ocr_correction", correct_ocr_errors),
    ("abbreviation_expansion", expand_abbreviations),
    ("unit_normalization", normalize_units),
)


def normalize(raw_text: Any) -> str:
    """
    Normalize raw OCR text.

    Total and pure: never raises, returns "" for empty input and treats a
    non-string input as empty (logged as a caller defect).

    Idempotent: normalize(normalize(x)) == normalize(x).
    """
    if raw_text is None:
        return ""
    if not isinstance(raw_text, str):
        logger.warning(
            f"normalize() expected str, got {type(raw_text).__name__}; treating as empty text"
        )
        return ""
    if not raw_text:
        return raw_text

    result = raw_text
    for _stage, apply in NORMALIZATION_STAGES:
        result = apply(result)

    return result

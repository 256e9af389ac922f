# ============================================================================
# src/medical_grounding/extractors/fact_extractor.py
# ============================================================================
"""
Rule-based Medical Fact Extraction

Runs the recognizer tables from `constants.recognizers` over normalized text:

1. BLOOD GROUP (one fact at most, high confidence)
   - Ordered patterns, most specific first; first match wins
   - Letter uppercased ("0"/"°" read as O), Rh indicator -> "+" / "-" / ""

2. LAB VALUES / VITALS (one fact per recognizer at most, high confidence)
   - Medically specific keyword immediately before the number
   - Document's own unit overrides the canonical default

3. MEDICATIONS (one fact per match, medium confidence)
   - Anchored on prescription shorthand ("Tab.", "Cap.", "Syp.", "Inj.")
   - Stop-list drops names that swallowed a connective word

Overlapping matches for the same quantity are all kept; deduplication is the
consumer's concern.

A recognizer that raises is logged, counted and skipped; the remaining
recognizers still run.
"""

import logging
from typing import Callable, List, Optional

from ..config import extraction_settings
from ..constants.recognizers import (
    BLOOD_GROUP_PATTERNS,
    LAB_RECOGNIZERS,
    MEDICATION_PATTERNS,
    MEDICATION_STOPWORDS,
    RH_SIGNS,
    LabRecognizer,
    MedicationRecognizer,
)
from ..core.context import Confidence, FactKind, MedicalFact
from ..utils.exceptions import RecognizerError
from ..utils import metrics

logger = logging.getLogger(__name__)


def _run_isolated(name: str, recognizer: Callable[[], List[MedicalFact]]) -> List[MedicalFact]:
    """Run one recognizer; a failure costs only that recognizer's facts."""
    if not extraction_settings.ISOLATE_RECOGNIZER_ERRORS:
        return recognizer()

    try:
        return recognizer()
    except Exception as e:
        error = RecognizerError(f"Recognizer '{name}' failed: {e}", recognizer=name)
        logger.exception(str(error), extra={"recognizer": name})
        metrics.increment("recognizer_errors")
        return []


# ----------------------------------------------------------------------------
# Blood group
# ----------------------------------------------------------------------------

def extract_blood_group(text: str) -> Optional[MedicalFact]:
    """
    Find the patient's blood group.

    Returns None when no pattern matches; a group is never guessed.

    Examples:
        "Blood Group: O Positive" -> O+
        "Blood Type: AB-"         -> AB-
        "Blood Group: B"          -> B
    """
    for pattern in BLOOD_GROUP_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        group = match.group("group").upper()
        if group in ("0", "°"):
            group = "O"

        rh_token = match.group("rh")
        rh = RH_SIGNS.get(rh_token.lower(), "") if rh_token else ""

        return MedicalFact(
            kind=FactKind.BLOOD_GROUP,
            name="Blood Group",
            value=f"{group}{rh}",
            unit="",
            confidence=Confidence.HIGH,
            reason=f"Blood group {group}{rh} stated as '{match.group(0).strip()}'",
        )

    return None


# ----------------------------------------------------------------------------
# Lab values and vitals
# ----------------------------------------------------------------------------

def _match_lab(recognizer: LabRecognizer, text: str) -> List[MedicalFact]:
    match = recognizer.pattern.search(text)
    if not match:
        return []

    # "120 / 80" -> "120/80"
    value = "".join(match.group("value").split())
    if not value:
        return []

    groups = match.groupdict()
    unit = groups.get("unit") or recognizer.unit

    return [MedicalFact(
        kind=recognizer.kind,
        name=recognizer.name,
        value=value,
        unit=unit,
        confidence=Confidence.HIGH,
        reason=f"{recognizer.name} keyword followed by value in '{match.group(0).strip()}'",
    )]


def extract_lab_values(text: str) -> List[MedicalFact]:
    """
    Extract lab values and vitals, one fact per recognizer at most.

    Examples:
        "Hemoglobin: 13.5 g/dL" -> Hemoglobin 13.5 g/dL
        "Blood Pressure: 120/80 mmHg" -> Blood Pressure 120/80 mmHg (vital)
    """
    facts: List[MedicalFact] = []

    for recognizer in LAB_RECOGNIZERS:
        facts.extend(_run_isolated(
            recognizer.name,
            lambda r=recognizer: _match_lab(r, text),
        ))

    return facts


# ----------------------------------------------------------------------------
# Medications
# ----------------------------------------------------------------------------

def _clean_medication_name(name: str) -> Optional[str]:
    words = name.split()
    if not words or words[0].lower() in MEDICATION_STOPWORDS:
        return None
    if len(words) > 1 and words[1].lower() in MEDICATION_STOPWORDS:
        words = words[:1]
    return " ".join(words)


def _match_medications(recognizer: MedicationRecognizer, text: str) -> List[MedicalFact]:
    facts = []

    for match in recognizer.pattern.finditer(text):
        name = _clean_medication_name(match.group("name"))
        if not name:
            logger.debug(f"Skipping medication capture '{match.group(0).strip()}' (connective word)")
            continue

        dose = match.group("dose")
        # Without a strength the dosage form is the only value we can vouch for
        value = "".join(dose.split()) if dose else recognizer.form

        facts.append(MedicalFact(
            kind=FactKind.MEDICATION,
            name=name,
            value=value,
            unit="",
            confidence=Confidence.MEDIUM,
            reason=f"{recognizer.form} prescription shorthand in '{match.group(0).strip()}'",
        ))

    return facts


def extract_medications(text: str) -> List[MedicalFact]:
    """
    Extract medications from prescription shorthand, in table order then
    text order.

    Examples:
        "Tab. Paracetamol 500mg" -> Paracetamol, 500mg (medium)
        "Syp. Benadryl"          -> Benadryl, Syrup (medium)
    """
    facts: List[MedicalFact] = []

    for recognizer in MEDICATION_PATTERNS:
        facts.extend(_run_isolated(
            f"medication:{recognizer.form}",
            lambda r=recognizer: _match_medications(r, text),
        ))

    return facts


# ----------------------------------------------------------------------------
# Entry point
# ----------------------------------------------------------------------------

def extract_facts(corrected_text: str) -> List[MedicalFact]:
    """
    Extract all facts from normalized text.

    Order: blood group, then lab values/vitals, then medications.
    Returns [] when nothing is recognized, or when the input is not a string
    (logged as a caller defect).
    """
    if not isinstance(corrected_text, str):
        logger.warning(
            f"extract_facts() expected str, got {type(corrected_text).__name__}; no facts extracted"
        )
        return []
    if not corrected_text.strip():
        return []

    facts: List[MedicalFact] = []

    blood_group = _run_isolated(
        "blood_group",
        lambda: [f for f in [extract_blood_group(corrected_text)] if f],
    )
    facts.extend(blood_group)
    facts.extend(extract_lab_values(corrected_text))
    facts.extend(extract_medications(corrected_text))

    logger.debug(
        f"Extracted {len(facts)} facts "
        f"({len(blood_group)} blood group, "
        f"{sum(1 for f in facts if f.kind in (FactKind.LAB_VALUE, FactKind.VITAL))} lab/vital, "
        f"{sum(1 for f in facts if f.kind == FactKind.MEDICATION)} medication)"
    )
    metrics.increment("facts_extracted", len(facts))

    return facts

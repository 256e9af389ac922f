# ============================================================================
# FILE: tests/unit/test_fact_extractor.py
# ============================================================================
"""
Unit tests for rule-based fact extraction
"""

import pytest
from medical_grounding.core.context import Confidence, FactKind
from medical_grounding.constants.recognizers import LAB_RECOGNIZERS, LabRecognizer
from medical_grounding.extractors import fact_extractor
from medical_grounding.extractors.fact_extractor import (
    extract_facts,
    extract_blood_group,
    extract_lab_values,
    extract_medications,
)
from medical_grounding.utils.metrics import get_metrics
from medical_grounding.utils.text_normalizer import normalize


def test_blood_group_positive():
    """Test explicit blood group with Rh word"""
    facts = extract_facts(normalize("Blood Group: O Positive"))

    assert len(facts) == 1
    assert facts[0].kind == FactKind.BLOOD_GROUP
    assert facts[0].value == "O+"
    assert facts[0].confidence == Confidence.HIGH


def test_blood_group_zero_misread():
    """Test zero misread as O gives the same result after normalization"""
    facts = extract_facts(normalize("Blood Group: 0 Positive"))

    assert [f.value for f in facts] == ["O+"]
    assert facts[0].confidence == "high"


def test_blood_group_variants():
    """Test blood group spellings"""
    assert extract_blood_group("Blood Type: AB-").value == "AB-"
    assert extract_blood_group("Blood Group : B +ve").value == "B+"
    assert extract_blood_group("Group A Negative").value == "A-"
    assert extract_blood_group("Donor blood: O+").value == "O+"
    assert extract_blood_group("Patient is AB Rh Negative").value == "AB-"
    assert extract_blood_group("Blood Group: B").value == "B"


def test_blood_group_absent():
    """Test no blood group is guessed"""
    assert extract_blood_group("Hemoglobin: 13.5 g/dL") is None
    assert extract_blood_group("Vitamin B-12 level normal") is None


@pytest.mark.parametrize("text", [
    "Serology\nHepatitis B Negative\nHIV Negative",
    "Vitamin D: 22 ng/mL (Grade B-)",
    "Patient is O+ donor",
])
def test_blood_group_needs_group_vocabulary(text):
    """Test a group letter next to an Rh sign alone is not a blood group"""
    assert extract_blood_group(normalize(text)) is None
    assert [f for f in extract_facts(normalize(text)) if f.kind == FactKind.BLOOD_GROUP] == []


def test_hemoglobin_value():
    """Test hemoglobin with unit"""
    facts = extract_facts(normalize("Hemoglobin: 13.5 g/dL"))

    assert len(facts) == 1
    fact = facts[0]
    assert fact.kind == FactKind.LAB_VALUE
    assert fact.name == "Hemoglobin"
    assert fact.value == "13.5"
    assert fact.unit == "g/dL"
    assert fact.confidence == Confidence.HIGH


def test_hemoglobin_default_unit():
    """Test canonical unit is used when the document has none"""
    facts = extract_lab_values("Hemoglobin 12")

    assert facts[0].unit == "g/dL"


def test_glycated_hemoglobin_is_not_hemoglobin():
    """Test HbA1c is not reported as hemoglobin"""
    facts = extract_facts(normalize("HbA1c: 6.1 %"))

    assert [(f.name, f.value, f.unit) for f in facts] == [("HbA1c", "6.1", "%")]


def test_blood_pressure_vital():
    """Test blood pressure composite value"""
    facts = extract_facts(normalize("BP: 120/80 mmHg"))

    assert len(facts) == 1
    fact = facts[0]
    assert fact.kind == FactKind.VITAL
    assert fact.name == "Blood Pressure"
    assert fact.value == "120/80"
    assert fact.unit == "mmHg"


def test_blood_pressure_spaced():
    """Test spaces around the slash are dropped from the value"""
    facts = extract_lab_values("Blood Pressure 130 / 85")

    assert facts[0].value == "130/85"


def test_document_unit_overrides_default():
    """Test the document's own unit wins over the canonical one"""
    facts = extract_lab_values("Glucose: 5.4 mmol/L")

    assert facts[0].unit == "mmol/L"


def test_lab_recognizer_order(sample_blood_report_text):
    """Test facts follow blood group, then table order"""
    facts = extract_facts(normalize(sample_blood_report_text))

    assert [(f.name, f.value, f.unit) for f in facts] == [
        ("Blood Group", "O+", ""),
        ("Hemoglobin", "13.5", "g/dL"),
        ("White Blood Cell Count", "7,500", "/cu.mm"),
        ("Platelet Count", "250000", "/cu.mm"),
        ("Blood Sugar", "98", "mg/dL"),
        ("ESR", "12", "mm/hr"),
        ("HbA1c", "5.6", "%"),
    ]


def test_vitals_from_prescription(sample_prescription_text):
    """Test vitals written on a prescription"""
    facts = extract_facts(normalize(sample_prescription_text))
    vitals = {f.name: (f.value, f.unit) for f in facts if f.kind == FactKind.VITAL}

    assert vitals == {
        "Blood Pressure": ("130/85", "mmHg"),
        "Pulse Rate": ("78", "bpm"),
        "Temperature": ("99.1", "°F"),
    }


def test_overlapping_matches_kept():
    """Test generic and specific rules both report the same quantity"""
    facts = extract_lab_values("Fasting Blood Sugar: 98 mg/dL, Glucose: 98 mg/dL")

    assert [(f.name, f.value) for f in facts] == [("Blood Sugar", "98"), ("Glucose", "98")]


def test_medication_medium_confidence():
    """Test prescription shorthand yields medium confidence"""
    facts = extract_facts(normalize("Tab. Paracetamol 500mg"))

    assert len(facts) == 1
    fact = facts[0]
    assert fact.kind == FactKind.MEDICATION
    assert fact.name == "Paracetamol"
    assert fact.value == "500mg"
    assert fact.confidence == Confidence.MEDIUM


def test_medications_in_order(sample_prescription_text):
    """Test medications follow table order, then text order"""
    facts = extract_facts(normalize(sample_prescription_text))
    meds = [(f.name, f.value) for f in facts if f.kind == FactKind.MEDICATION]

    assert meds == [
        ("Paracetamol", "500mg"),
        ("Amoxicillin", "250mg"),
        ("Benadryl", "Syrup"),
    ]


def test_medication_two_word_name():
    """Test a two-word medicine name"""
    facts = extract_medications("Tab Paracetamol Forte 650 mg")

    assert facts[0].name == "Paracetamol Forte"
    assert facts[0].value == "650mg"


def test_medication_stopword_suppressed():
    """Test captures that are only connective words are dropped"""
    assert extract_medications("Tab. for fever") == []


def test_medication_stopword_trimmed():
    """Test a connective swallowed as the second word is trimmed"""
    facts = extract_medications("Cap. Omez with water")

    assert [f.name for f in facts] == ["Omez"]


def test_medication_anchor_needs_word_start():
    """Test words containing 'tab'/'cap' are not anchors"""
    assert extract_medications("Stable vitals, capital city") == []


def test_no_recognizable_patterns():
    """Test plain prose yields no facts"""
    assert extract_facts(normalize("Thank you for visiting. Please come again.")) == []


def test_non_string_input():
    """Test non-string input yields no facts"""
    assert extract_facts(None) == []
    assert extract_facts(42) == []


def test_every_fact_has_value(sample_blood_report_text, sample_prescription_text):
    """Test no fact is emitted with an empty value"""
    for text in (sample_blood_report_text, sample_prescription_text):
        for fact in extract_facts(normalize(text)):
            assert fact.value


def test_extraction_pure(sample_prescription_text):
    """Test identical input yields identical facts"""
    text = normalize(sample_prescription_text)

    assert extract_facts(text) == extract_facts(text)


class ExplodingPattern:
    """Pattern stand-in that fails on every match attempt"""

    def search(self, text):
        raise RuntimeError("boom")


def test_failing_recognizer_is_isolated(monkeypatch):
    """Test one broken recognizer does not abort extraction"""
    broken = LabRecognizer(ExplodingPattern(), "Broken", "")
    monkeypatch.setattr(fact_extractor, "LAB_RECOGNIZERS", (broken,) + LAB_RECOGNIZERS)

    facts = extract_facts("Hemoglobin: 13.5 g/dL")

    assert [f.name for f in facts] == ["Hemoglobin"]
    assert get_metrics().get_counter("recognizer_errors") == 1


def test_failing_recognizer_propagates_when_isolation_disabled(monkeypatch):
    """Test isolation can be switched off"""
    broken = LabRecognizer(ExplodingPattern(), "Broken", "")
    monkeypatch.setattr(fact_extractor, "LAB_RECOGNIZERS", (broken,))
    monkeypatch.setattr(fact_extractor.extraction_settings, "ISOLATE_RECOGNIZER_ERRORS", False)

    with pytest.raises(RuntimeError):
        extract_lab_values("Hemoglobin: 13.5 g/dL")

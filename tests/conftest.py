# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import date

from medical_grounding.core.context import DocumentType, SourceDocument
from medical_grounding.utils.metrics import get_metrics


@pytest.fixture
def sample_blood_report_text():
    """Sample OCR text of a blood test report"""
    return """
    CITY DIAGNOSTICS - BLOOD TEST REPORT
    Patient: Jane Doe        Date: 15/03/2024

    Blood Group: 0 Positive
    Hb: 13.5 gm%
    WBC: 7,500 /cumm
    Platelets: 250000 /cumm
    FBS: 98 mg%
    ESR: 12 mm/hr
    HbA1c: 5.6 %
    """


@pytest.fixture
def sample_prescription_text():
    """Sample OCR text of a handwritten-style prescription"""
    return """
    Dr. A. Kumar, MBBS
    Rx
    Date: 2024-01-09
    BP: 130/85 mmHg   Pulse: 78 bpm   Temp: 99.1 ° F

    Tab. Paracetamol 500mg  1-0-1 x 5 days
    Cap. Amoxicillin 250 mg
    Syp. Benadryl
    """


@pytest.fixture
def sample_scan_text():
    """Sample OCR text of an imaging report"""
    return """
    CT SCAN OF THE ABDOMEN
    Examination date: March 2, 2024

    Findings: Liver and spleen are normal in size.
    Impression: No abnormality detected.
    """


@pytest.fixture
def sample_corpus():
    """Two stored documents as handed to the evidence locator"""
    return [
        SourceDocument(
            document_id="doc-1",
            text=(
                "CITY DIAGNOSTICS\n"
                "Hemoglobin: 13.5 g/dL\n"
                "Blood Group: O Positive\n"
                "----\n"
                "Platelet Count: 250000 /cu.mm\n"
            ),
            document_type=DocumentType.BLOOD_REPORT,
            report_date=date(2024, 3, 15),
            file_name="cbc_march.jpg",
        ),
        SourceDocument(
            document_id="doc-2",
            text=(
                "Rx\n"
                "Tab. Paracetamol 500mg twice daily\n"
                "Review after 5 days\n"
            ),
            document_type=DocumentType.PRESCRIPTION,
            report_date=None,
            file_name="prescription.png",
        ),
    ]


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset global metrics after each test"""
    yield
    get_metrics().reset()

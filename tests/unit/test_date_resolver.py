# ============================================================================
# FILE: tests/unit/test_date_resolver.py
# ============================================================================
"""
Unit tests for report date resolution
"""

import pytest
from datetime import date

from medical_grounding.classifiers import resolve_date
from medical_grounding.config import extraction_settings
from medical_grounding.utils.text_normalizer import normalize


@pytest.mark.parametrize("text,expected", [
    ("Date: 15/03/2024", date(2024, 3, 15)),
    ("Date: 15-03-2024", date(2024, 3, 15)),
    ("Date: 5.3.2024", date(2024, 3, 5)),
    ("Date: 2024-03-15", date(2024, 3, 15)),
    ("Date: 2024/3/5", date(2024, 3, 5)),
    ("Reported on 15 Mar 2024", date(2024, 3, 15)),
    ("Reported on 15th March, 2024", date(2024, 3, 15)),
    ("Reported on March 15, 2024", date(2024, 3, 15)),
    ("Dec. 5 2023", date(2023, 12, 5)),
])
def test_date_formats(text, expected):
    """Test supported date layouts"""
    assert resolve_date(text) == expected


def test_fixture_dates(sample_blood_report_text, sample_prescription_text, sample_scan_text):
    """Test dates found in realistic documents"""
    assert resolve_date(normalize(sample_blood_report_text)) == date(2024, 3, 15)
    assert resolve_date(normalize(sample_prescription_text)) == date(2024, 1, 9)
    assert resolve_date(normalize(sample_scan_text)) == date(2024, 3, 2)


def test_first_pattern_wins():
    """Test pattern order decides, not position in the text"""
    text = "Printed 2024-05-01, sample collected 10/04/2024"

    assert resolve_date(text) == date(2024, 4, 10)


def test_impossible_date_is_none():
    """Test an impossible date is not replaced by a later candidate"""
    assert resolve_date("Date: 31/02/2024") is None
    assert resolve_date("Date: 31/02/2024, received 2024-03-01") is None


def test_month_first_setting(monkeypatch):
    """Test numeric dates can be read month-first"""
    monkeypatch.setattr(extraction_settings, "DAY_FIRST_DATES", False)

    assert resolve_date("03/15/2024") == date(2024, 3, 15)


def test_day_first_by_default():
    """Test month 15 does not exist when reading day-first"""
    assert resolve_date("03/15/2024") is None
    assert resolve_date("03/04/2024") == date(2024, 4, 3)


@pytest.mark.parametrize("text", [
    "No date on this page",
    "Lot 12/2024",
    "",
    None,
])
def test_no_date(text):
    """Test missing or invalid input yields None"""
    assert resolve_date(text) is None

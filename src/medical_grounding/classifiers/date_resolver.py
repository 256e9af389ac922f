# ============================================================================
# src/medical_grounding/classifiers/date_resolver.py
# ============================================================================
"""
Report Date Resolution

Patterns, tried in order (the first one that matches decides):
1. DD/MM/YYYY   (also - and . separators; day-first by deployment convention)
2. YYYY/MM/DD
3. DD Month YYYY   ("15 Mar 2024", "15th March, 2024")
4. Month DD, YYYY  ("March 15, 2024")

A missing or impossible date is None, which callers treat as "use the
ingestion timestamp", never as a failure.
"""

import re
import logging
from datetime import date
from typing import Any, Optional

from ..config import extraction_settings

logger = logging.getLogger(__name__)

MONTHS = {
    'jan': 1, 'feb': 2, 'mar': 3, 'apr': 4, 'may': 5, 'jun': 6,
    'jul': 7, 'aug': 8, 'sep': 9, 'oct': 10, 'nov': 11, 'dec': 12,
}

_MONTH = r"(?P<month>jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
_ORDINAL = r"(?:st|nd|rd|th)?"

# (name, pattern); named groups carry the parts
DATE_PATTERNS = (
    ("numeric_day_first", re.compile(
        r"(?<!\d)(?P<first>\d{1,2})[/.\-](?P<second>\d{1,2})[/.\-](?P<year>\d{4})(?!\d)"
    )),
    ("numeric_year_first", re.compile(
        r"(?<!\d)(?P<year>\d{4})[/.\-](?P<month>\d{1,2})[/.\-](?P<day>\d{1,2})(?!\d)"
    )),
    ("day_month_name", re.compile(
        rf"(?<!\d)(?P<day>\d{{1,2}}){_ORDINAL}[\s\-]*{_MONTH}[\s,\-]*(?P<year>\d{{4}})(?!\d)",
        re.IGNORECASE,
    )),
    ("month_name_day", re.compile(
        rf"\b{_MONTH}\s*(?P<day>\d{{1,2}}){_ORDINAL},?\s*(?P<year>\d{{4}})(?!\d)",
        re.IGNORECASE,
    )),
)


def _build_date(name: str, match: re.Match) -> Optional[date]:
    parts = match.groupdict()
    year = int(parts["year"])

    if name == "numeric_day_first":
        first, second = int(parts["first"]), int(parts["second"])
        day, month = (first, second) if extraction_settings.DAY_FIRST_DATES else (second, first)
    elif name == "numeric_year_first":
        month, day = int(parts["month"]), int(parts["day"])
    else:
        month = MONTHS[parts["month"][:3].lower()]
        day = int(parts["day"])

    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Ignoring impossible date '{match.group(0)}'")
        return None


def resolve_date(corrected_text: Any) -> Optional[date]:
    """
    Resolve the report's effective date from normalized text.

    Examples:
        "Date: 15/03/2024"   -> date(2024, 3, 15)
        "Date: 2024-03-15"   -> date(2024, 3, 15)
        "15 Mar 2024"        -> date(2024, 3, 15)
        "March 15, 2024"     -> date(2024, 3, 15)
        "31/02/2024"         -> None
    """
    if not isinstance(corrected_text, str):
        logger.warning(
            f"resolve_date() expected str, got {type(corrected_text).__name__}"
        )
        return None

    for name, pattern in DATE_PATTERNS:
        match = pattern.search(corrected_text)
        if match:
            return _build_date(name, match)

    return None

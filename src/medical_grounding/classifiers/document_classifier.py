# ============================================================================
# src/medical_grounding/classifiers/document_classifier.py
# ============================================================================
"""
Document Classification

Keyword decision list over normalized text; the first matching category wins:

1. blood_report  - "blood" AND ("report" OR "test")
2. prescription  - prescription / rx / tab. / cap.
3. scan          - scan / x-ray / mri / ct / ultrasound (and their expansions)
4. receipt       - receipt / invoice / bill / payment
5. unknown

Keywords are matched as substrings of the lowercased text, except "ct", "mri"
and "rx", which must stand alone.

This is a heuristic. A document matching several categories gets the first
one listed, so a prescription that mentions a scan is still a prescription.
"""

import re
import logging
from typing import Any, Dict, Pattern

from ..constants import DocumentType, CLASSIFICATION_RULES, WORD_BOUNDED_KEYWORDS

logger = logging.getLogger(__name__)


def _keyword_pattern(keyword: str) -> Pattern:
    if keyword in WORD_BOUNDED_KEYWORDS:
        return re.compile(r"(?<![a-z])" + re.escape(keyword) + r"(?![a-z])")
    return re.compile(re.escape(keyword))


_KEYWORD_PATTERNS: Dict[str, Pattern] = {
    keyword: _keyword_pattern(keyword)
    for _doc_type, groups in CLASSIFICATION_RULES
    for group in groups
    for keyword in group
}


def _has_any(text: str, keywords) -> bool:
    return any(_KEYWORD_PATTERNS[k].search(text) for k in keywords)


def classify_document(corrected_text: Any) -> DocumentType:
    """
    Infer the document category from normalized text.

    Returns DocumentType.UNKNOWN for empty or non-string input.
    """
    if not isinstance(corrected_text, str):
        logger.warning(
            f"classify_document() expected str, got {type(corrected_text).__name__}"
        )
        return DocumentType.UNKNOWN

    text = corrected_text.lower()
    if not text.strip():
        return DocumentType.UNKNOWN

    for doc_type, groups in CLASSIFICATION_RULES:
        if all(_has_any(text, group) for group in groups):
            logger.debug(f"Classified document as {doc_type.value}")
            return doc_type

    return DocumentType.UNKNOWN

# ============================================================================
# src/medical_grounding/grounding/evidence_locator.py
# ============================================================================
"""
Evidence Locator

Finds the document lines that plausibly support a generated answer, so the
answer can be shown with citations.

Recall-biased on purpose: a line qualifies when it contains any long-enough
term from the question or the answer. Showing an extra line is a display
nuisance; an answer with no citation at all undermines the trust model.

Every snippet is a verbatim slice of the document text it came from.
"""

import logging
from typing import Any, List, Optional, Sequence, Set

from ..config import grounding_settings
from ..core.context import EvidenceItem, SourceDocument
from ..utils import metrics

logger = logging.getLogger(__name__)

# Stripped from both ends of a token so "hemoglobin?" still matches
_TOKEN_PUNCTUATION = ".,;:!?\"'()[]{}"


def _as_text(value: Any, name: str) -> str:
    if isinstance(value, str):
        return value
    if value is not None:
        logger.warning(f"locate_evidence() expected str for {name}, got {type(value).__name__}")
    return ""


def extract_terms(question: str, answer: str, min_length: Optional[int] = None) -> Set[str]:
    """
    Lowercase whitespace-delimited terms of question + answer that are longer
    than `min_length` characters.

    Each token is kept as written and also with surrounding punctuation
    stripped, so "hemoglobin?" yields both "hemoglobin?" and "hemoglobin".
    """
    min_length = grounding_settings.MIN_TERM_LENGTH if min_length is None else min_length

    terms = set()
    for token in f"{question} {answer}".lower().split():
        for term in (token, token.strip(_TOKEN_PUNCTUATION)):
            if len(term) > min_length:
                terms.add(term)

    return terms


def locate_evidence(
    question: Any,
    answer: Any,
    corpus: Sequence[SourceDocument],
    max_items: Optional[int] = None,
) -> List[EvidenceItem]:
    """
    Collect up to `max_items` citations for an answer.

    Documents are scanned in corpus order and lines in text order; scanning
    stops as soon as the cap is reached. An empty list is a valid outcome:
    the caller shows the answer without citations.
    """
    max_items = grounding_settings.EVIDENCE_MAX_ITEMS if max_items is None else max_items
    min_line_length = grounding_settings.MIN_LINE_LENGTH
    snippet_max = grounding_settings.SNIPPET_MAX_CHARS

    terms = extract_terms(_as_text(question, "question"), _as_text(answer, "answer"))
    evidence: List[EvidenceItem] = []

    if not terms or max_items <= 0:
        return evidence

    for document in corpus or ():
        for line in (document.text or "").splitlines():
            trimmed = line.strip()
            if len(trimmed) <= min_line_length:
                continue

            line_lower = trimmed.lower()
            if not any(term in line_lower for term in terms):
                continue

            evidence.append(EvidenceItem(
                document_id=document.document_id,
                document_label=document.label,
                snippet=trimmed[:snippet_max],
            ))

            if len(evidence) >= max_items:
                break

        if len(evidence) >= max_items:
            break

    logger.debug(f"Located {len(evidence)} evidence lines across {len(corpus or ())} documents")
    metrics.record_value("evidence_items", len(evidence))

    return evidence

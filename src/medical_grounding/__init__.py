# ============================================================================
# src/medical_grounding/__init__.py
# ============================================================================
"""
Medical Grounding

Turns noisy OCR text from a patient's uploaded records into structured,
confidence-tagged facts, and points back from a generated answer to the
literal document lines that support it.

Pipeline:
    raw OCR text -> normalize -> {extract_facts, classify_document, resolve_date}
    -> ExtractedMedicalData

Query time:
    stored document texts + answer -> locate_evidence -> [EvidenceItem]
"""

from .core.context import (
    Confidence,
    DocumentType,
    EvidenceItem,
    ExtractedMedicalData,
    FactKind,
    MedicalFact,
    SourceDocument,
)
from .utils.text_normalizer import normalize
from .extractors.fact_extractor import extract_facts
from .classifiers.document_classifier import classify_document
from .classifiers.date_resolver import resolve_date
from .grounding.evidence_locator import locate_evidence
from .core.pipeline import process_text, process_ocr_result, process_batch

__version__ = "0.1.0"

__all__ = [
    "Confidence",
    "DocumentType",
    "EvidenceItem",
    "ExtractedMedicalData",
    "FactKind",
    "MedicalFact",
    "SourceDocument",
    "normalize",
    "extract_facts",
    "classify_document",
    "resolve_date",
    "locate_evidence",
    "process_text",
    "process_ocr_result",
    "process_batch",
]

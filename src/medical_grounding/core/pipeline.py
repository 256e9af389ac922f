# ============================================================================
# src/medical_grounding/core/pipeline.py
# ============================================================================
"""
Ingestion Pipeline

raw OCR text
    -> normalize
    -> extract_facts + classify_document + resolve_date
    -> ExtractedMedicalData (persisted by the caller)

Each document is processed independently with no shared state, so batches can
be spread over a thread pool without coordination.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence

from ..classifiers.date_resolver import resolve_date
from ..classifiers.document_classifier import classify_document
from ..config import extraction_settings
from ..extractors.fact_extractor import extract_facts
from ..extractors.ocr import OCRResult
from ..utils import metrics
from ..utils.logging import log_performance
from ..utils.text_normalizer import normalize
from .context import ExtractedMedicalData

logger = logging.getLogger(__name__)


@log_performance(logger, "Document extraction")
def process_text(raw_text: Any) -> ExtractedMedicalData:
    """
    Turn one document's raw OCR text into its extraction record.

    Never raises on content: an unrecognizable document yields no facts,
    DocumentType.UNKNOWN and no date.
    """
    with metrics.time_operation("extraction"):
        corrected_text = normalize(raw_text)
        facts = extract_facts(corrected_text)
        document_type = classify_document(corrected_text)
        report_date = resolve_date(corrected_text)

    metrics.increment("documents_processed")

    return ExtractedMedicalData(
        document_type=document_type,
        report_date=report_date,
        facts=tuple(facts),
        corrected_text=corrected_text,
    )


def process_ocr_result(result: OCRResult) -> ExtractedMedicalData:
    """Process the OCR engine's output; its confidence is only logged."""
    logger.info(f"Processing OCR text ({len(result.text)} chars, engine confidence {result.confidence:.0f}%)")
    return process_text(result.text)


def process_batch(
    texts: Sequence[Any],
    max_workers: Optional[int] = None,
) -> List[ExtractedMedicalData]:
    """
    Process many documents on a thread pool.

    Results are returned in input order.
    """
    if not texts:
        return []

    workers = max_workers or extraction_settings.MAX_BATCH_WORKERS
    workers = max(1, min(workers, len(texts)))

    logger.info(f"Processing batch of {len(texts)} documents with {workers} workers")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(process_text, texts))

# ============================================================================
# src/medical_grounding/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants

Every table here is built once at import time and never mutated.
"""

from .document_types import (
    DocumentType,
    DOCUMENT_TYPE_LABELS,
    CLASSIFICATION_RULES,
    WORD_BOUNDED_KEYWORDS,
)
from .abbreviations import ABBREVIATIONS
from .unit_normalizations import UNIT_NORMALIZATIONS
from .ocr_corrections import OCR_CORRECTIONS

# ============================================================================
# src/medical_grounding/extractors/__init__.py
# ============================================================================
"""
Fact extraction and the OCR collaborator boundary.
"""

from .fact_extractor import (
    extract_facts,
    extract_blood_group,
    extract_lab_values,
    extract_medications,
)
from .ocr import OCREngine, OCRResult

# ============================================================================
# src/medical_grounding/core/__init__.py
# ============================================================================
"""
Core data model and the ingestion pipeline.
"""

from .context import (
    DocumentType,
    FactKind,
    Confidence,
    MedicalFact,
    ExtractedMedicalData,
    SourceDocument,
    EvidenceItem,
)

# src/medical_grounding/core/context/__init__.py

from ...constants.document_types import DocumentType
from .enums import FactKind, Confidence
from .medical_fact import MedicalFact
from .extracted_data import ExtractedMedicalData
from .evidence import SourceDocument, EvidenceItem

__all__ = [
    "DocumentType",
    "FactKind",
    "Confidence",
    "MedicalFact",
    "ExtractedMedicalData",
    "SourceDocument",
    "EvidenceItem",
]

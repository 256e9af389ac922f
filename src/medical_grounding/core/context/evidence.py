# ============================================================================
# src/medical_grounding/core/context/evidence.py
# ============================================================================
"""
Citation types
- SourceDocument: one stored record handed to the evidence locator
- EvidenceItem: one cited line of a source document
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ...constants.document_types import DocumentType, DOCUMENT_TYPE_LABELS


@dataclass(frozen=True)
class SourceDocument:
    document_id: str
    text: str
    document_type: DocumentType = DocumentType.UNKNOWN
    report_date: Optional[date] = None
    file_name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "document_type", DocumentType(self.document_type))

    @property
    def type_label(self) -> str:
        return DOCUMENT_TYPE_LABELS[self.document_type]

    @property
    def label(self) -> str:
        """'<type> - <date>', falling back to the file name, then the type alone."""
        if self.report_date:
            return f"{self.type_label} - {self.report_date.isoformat()}"
        if self.file_name:
            return f"{self.type_label} - {self.file_name}"
        return self.type_label


@dataclass(frozen=True)
class EvidenceItem:
    document_id: str
    document_label: str
    snippet: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentId": self.document_id,
            "documentLabel": self.document_label,
            "snippet": self.snippet,
        }

# ============================================================================
# src/medical_grounding/core/context/extracted_data.py
# ============================================================================
"""
Per-document extraction envelope

Produced once per uploaded document at ingestion time and stored next to the
raw OCR text. Never mutated; re-processing a document yields a new instance.
"""

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ...constants.document_types import DocumentType
from .enums import FactKind
from .medical_fact import MedicalFact


@dataclass(frozen=True)
class ExtractedMedicalData:
    document_type: DocumentType
    report_date: Optional[date]
    facts: Tuple[MedicalFact, ...] = field(default_factory=tuple)
    corrected_text: str = ""

    def __post_init__(self):
        object.__setattr__(self, "document_type", DocumentType(self.document_type))
        object.__setattr__(self, "facts", tuple(self.facts))

    def facts_of_kind(self, kind: FactKind) -> Tuple[MedicalFact, ...]:
        """Facts of one kind, in extraction order."""
        kind = FactKind(kind)
        return tuple(f for f in self.facts if f.kind == kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentType": self.document_type.value,
            "reportDate": self.report_date.isoformat() if self.report_date else None,
            "facts": [f.to_dict() for f in self.facts],
            "correctedText": self.corrected_text,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Display-friendly JSON rendering of the record."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractedMedicalData":
        """Rehydrate a record persisted with to_dict()."""
        report_date = data.get("reportDate")
        return cls(
            document_type=data.get("documentType", DocumentType.UNKNOWN),
            report_date=date.fromisoformat(report_date) if report_date else None,
            facts=tuple(MedicalFact.from_dict(f) for f in data.get("facts", [])),
            corrected_text=data.get("correctedText", ""),
        )

# ============================================================================
# src/medical_grounding/core/context/medical_fact.py
# ============================================================================
"""
Single extracted medical datum
- Lab value, vital, medication, blood group, ...
- Carries a coarse confidence tag and a provenance reason
"""

from dataclasses import dataclass
from typing import Any, Dict

from .enums import FactKind, Confidence


@dataclass(frozen=True)
class MedicalFact:
    kind: FactKind
    name: str
    value: str
    unit: str = ""
    confidence: Confidence = Confidence.HIGH
    reason: str = ""

    def __post_init__(self):
        if not self.value or not str(self.value).strip():
            raise ValueError(f"MedicalFact '{self.name}' requires a non-empty value")
        # Accept plain strings from persisted records
        object.__setattr__(self, "kind", FactKind(self.kind))
        object.__setattr__(self, "confidence", Confidence(self.confidence))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "confidence": self.confidence.value,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MedicalFact":
        return cls(
            kind=data["kind"],
            name=data["name"],
            value=data["value"],
            unit=data.get("unit", ""),
            confidence=data.get("confidence", Confidence.HIGH),
            reason=data.get("reason", ""),
        )

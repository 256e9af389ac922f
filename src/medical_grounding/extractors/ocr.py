# ============================================================================
# src/medical_grounding/extractors/ocr.py
# ============================================================================
"""
OCR collaborator boundary

The OCR engine itself is external. This module only fixes the shape of what
it hands back, so the pipeline can accept it directly.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class OCRResult:
    """Raw engine output. `text` is untrusted; `confidence` is 0-100 and display-only."""
    text: str
    confidence: float = 0.0

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 100.0:
            raise ValueError(f"OCR confidence must be within 0-100, got {self.confidence}")


@runtime_checkable
class OCREngine(Protocol):
    def recognize(self, image_bytes: bytes) -> OCRResult:
        ...

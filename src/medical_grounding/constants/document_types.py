# ============================================================================
# src/medical_grounding/constants/document_types.py
# ============================================================================
"""
Document Types and Classification Keywords
- Supported document categories
- Display labels used in citations and LLM context
- Ordered keyword decision list (first matching category wins)
"""

from enum import Enum
from types import MappingProxyType


class DocumentType(str, Enum):
    """
    Document categories inferred from normalized text.
    """
    BLOOD_REPORT = "blood_report"
    PRESCRIPTION = "prescription"
    SCAN = "scan"
    RECEIPT = "receipt"
    UNKNOWN = "unknown"


DOCUMENT_TYPE_LABELS = MappingProxyType({
    DocumentType.BLOOD_REPORT: "Blood Report",
    DocumentType.PRESCRIPTION: "Prescription",
    DocumentType.SCAN: "Scan/Imaging Report",
    DocumentType.RECEIPT: "Medical Receipt",
    DocumentType.UNKNOWN: "Unknown",
})

# Each rule is (type, keyword groups). A rule matches when every group has at
# least one keyword present. Rules are evaluated in order.
# Keywords are plain substrings ("bloodtest" is a blood test) except the
# short ones in WORD_BOUNDED_KEYWORDS, which must stand alone ("ct" is not in
# "doctor"). Scan keywords include the expansions produced by the normalizer,
# since "CT" and "MRI" never survive normalization as bare words.
CLASSIFICATION_RULES = (
    (DocumentType.BLOOD_REPORT, (
        ("blood",),
        ("report", "test"),
    )),
    (DocumentType.PRESCRIPTION, (
        ("prescription", "rx", "tab.", "cap."),
    )),
    (DocumentType.SCAN, (
        ("scan", "x-ray", "mri", "ct", "ultrasound",
         "computed tomography", "magnetic resonance", "ultrasonography"),
    )),
    (DocumentType.RECEIPT, (
        ("receipt", "invoice", "bill", "payment"),
    )),
)

WORD_BOUNDED_KEYWORDS = frozenset({"ct", "mri", "rx"})

# ============================================================================
# src/medical_grounding/core/context/enums.py
# ============================================================================
"""
Extraction Enums
- Fact kinds
- Confidence tags
"""

from enum import Enum


class FactKind(str, Enum):
    LAB_VALUE = "lab_value"
    VITAL = "vital"
    DIAGNOSIS = "diagnosis"
    MEDICATION = "medication"
    BLOOD_GROUP = "blood_group"
    ALLERGY = "allergy"
    TEST = "test"
    PATIENT_INFO = "patient_info"


class Confidence(str, Enum):
    HIGH = "high"       # context-specific keyword + unit
    MEDIUM = "medium"   # pattern match without numeric context
    LOW = "low"         # degraded / fallback matches

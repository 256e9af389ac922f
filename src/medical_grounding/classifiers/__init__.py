# ============================================================================
# src/medical_grounding/classifiers/__init__.py
# ============================================================================
"""
Document classification and report date resolution.
"""

from .document_classifier import classify_document
from .date_resolver import resolve_date

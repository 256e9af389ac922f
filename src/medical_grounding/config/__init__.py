# ============================================================================
# src/medical_grounding/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .extraction_config import extraction_settings, ExtractionSettings
from .grounding_config import grounding_settings, GroundingSettings
from .logging_config import logging_settings, LoggingSettings

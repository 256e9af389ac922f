# ============================================================================
# src/medical_grounding/config/grounding_config.py
# ============================================================================
"""
Evidence Grounding Settings
- Citation cap
- Snippet length
- Line and term noise filters
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class GroundingSettings(BaseSettings):
    EVIDENCE_MAX_ITEMS: int = Field(
        default=5,
        ge=3, le=5,
        description="Maximum number of citations attached to one answer"
    )
    SNIPPET_MAX_CHARS: int = Field(
        default=200,
        ge=20, le=200,
        description="Snippets are truncated to this many characters"
    )
    MIN_LINE_LENGTH: int = Field(
        default=10,
        ge=0,
        description="A line must be longer than this (after trimming) to be cited"
    )
    MIN_TERM_LENGTH: int = Field(
        default=3,
        ge=0,
        description="Only question/answer terms longer than this are matched"
    )


grounding_settings = GroundingSettings()

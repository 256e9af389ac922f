# ============================================================================
# src/medical_grounding/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Date ordering convention
- Batch parallelism
- Recognizer failure isolation
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ExtractionSettings(BaseSettings):
    DAY_FIRST_DATES: bool = Field(
        default=True,
        description="Read ambiguous numeric dates (05/03/2024) as day-before-month. Regional convention for this deployment, not inferred from locale."
    )
    MAX_BATCH_WORKERS: int = Field(
        default=4,
        ge=1, le=64,
        description="Thread pool size used by process_batch"
    )
    ISOLATE_RECOGNIZER_ERRORS: bool = Field(
        default=True,
        description="Log and skip a recognizer that raises instead of aborting extraction"
    )


extraction_settings = ExtractionSettings()

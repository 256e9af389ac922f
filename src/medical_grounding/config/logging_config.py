# ============================================================================
# src/medical_grounding/config/logging_config.py
# ============================================================================
"""
Logging & Monitoring Settings
- Log level
- Output format
- Performance metrics
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit log records as JSON lines"
    )
    ENABLE_METRICS: bool = Field(
        default=True,
        description="Enable performance metric collection"
    )


logging_settings = LoggingSettings()

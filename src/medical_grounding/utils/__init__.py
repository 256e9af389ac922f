# ============================================================================
# src/medical_grounding/utils/__init__.py
# ============================================================================
"""
Utility modules for the medical grounding library.
"""

from .exceptions import (
    MedicalGroundingError,
    ConfigurationError,
    RecognizerError,
    LLMCallError,
)

from .logging import (
    setup_logging,
    get_logger,
    log_performance,
)

from .metrics import (
    MetricsCollector,
    Timer,
    get_metrics,
    increment,
    record_value,
    time_operation,
)

__all__ = [
    # Exceptions
    'MedicalGroundingError',
    'ConfigurationError',
    'RecognizerError',
    'LLMCallError',
    # Logging
    'setup_logging',
    'get_logger',
    'log_performance',
    # Metrics
    'MetricsCollector',
    'Timer',
    'get_metrics',
    'increment',
    'record_value',
    'time_operation',
]

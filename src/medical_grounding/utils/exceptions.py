# ============================================================================
# src/medical_grounding/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medical grounding library.

A recognizer finding nothing is never an error: absence of a signal is an
empty list or None. These exceptions cover defects and collaborator failures.
"""


class MedicalGroundingError(Exception):
    """Base exception for all medical grounding errors."""
    pass


class ConfigurationError(MedicalGroundingError):
    """Invalid configuration."""
    pass


class RecognizerError(MedicalGroundingError):
    """A recognizer table entry raised during its own match attempt."""
    def __init__(self, message: str, recognizer: str):
        super().__init__(message)
        self.recognizer = recognizer


class LLMCallError(MedicalGroundingError):
    """The language model collaborator failed to produce an answer."""
    pass

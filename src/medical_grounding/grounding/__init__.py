# ============================================================================
# src/medical_grounding/grounding/__init__.py
# ============================================================================
"""
Answer grounding: citations, LLM context assembly, grounded answering.
"""

from .evidence_locator import locate_evidence, extract_terms
from .context_builder import SYSTEM_PROMPT, build_medical_context, build_messages
from .responder import GroundedAnswer, GroundedResponder, LLMClient

# ============================================================================
# src/medical_grounding/grounding/responder.py
# ============================================================================
"""
Grounded answering

Wires the external language model to the evidence locator: build the
context from corrected text, ask the model, then cite the lines that support
whatever it said.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Sequence, runtime_checkable

from ..core.context import EvidenceItem, SourceDocument
from ..utils.exceptions import LLMCallError
from ..utils import metrics
from .context_builder import build_messages
from .evidence_locator import locate_evidence

logger = logging.getLogger(__name__)

NO_RECORDS_ANSWER = (
    "No medical records have been uploaded yet. Please upload your medical "
    "documents first."
)


@runtime_checkable
class LLMClient(Protocol):
    async def generate(self, messages: List[Dict[str, str]]) -> str:
        ...


@dataclass(frozen=True)
class GroundedAnswer:
    answer: str
    evidence: List[EvidenceItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "evidence": [e.to_dict() for e in self.evidence],
        }


class GroundedResponder:
    """
    Answers a patient's question from their own records, with citations.
    """

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client

    async def answer(self, question: str, documents: Sequence[SourceDocument]) -> GroundedAnswer:
        """
        Ask the model and attach evidence.

        With no documents the model is not called at all.

        Raises:
            LLMCallError: the model call failed
        """
        if not documents:
            return GroundedAnswer(answer=NO_RECORDS_ANSWER, evidence=[])

        messages = build_messages(documents, question)

        try:
            with metrics.time_operation("llm_call"):
                answer = await self.llm_client.generate(messages)
        except Exception as e:
            logger.error(f"LLM call failed: {e}")
            metrics.increment("llm_errors")
            raise LLMCallError(f"LLM call failed: {e}") from e

        answer = (answer or "").strip()
        evidence = locate_evidence(question, answer, documents)

        if not evidence:
            logger.info("Answer has no supporting lines; returning it without citations")

        return GroundedAnswer(answer=answer, evidence=evidence)

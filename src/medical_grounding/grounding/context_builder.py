# ============================================================================
# src/medical_grounding/grounding/context_builder.py
# ============================================================================
"""
LLM context assembly

The model only ever sees corrected text, one block per document, preceded by
a system instruction that restricts it to those blocks.
"""

from typing import Dict, List, Sequence

from ..core.context import SourceDocument

SYSTEM_PROMPT = """You are a medical record analyzer for a university hospital. Your role is to help patients understand their own medical records.

STRICT RULES:
1. Answer ONLY using the provided medical data from the patient's records
2. Do NOT guess, assume, or use external medical knowledge
3. Do NOT make diagnoses or give medical advice beyond what is in the records
4. If the answer is not present in the provided data, respond with: "Not found in your medical records"
5. Always mention the document type and date when citing information
6. Be clear and professional; use bullet points when they help readability

When referencing information, clearly state which document it came from (document type and date)."""

NO_RECORDS_CONTEXT = "No medical records available."


def build_medical_context(documents: Sequence[SourceDocument]) -> str:
    """Concatenate one delimited block per document (type, date, file, content)."""
    if not documents:
        return NO_RECORDS_CONTEXT

    blocks = []
    for index, document in enumerate(documents, start=1):
        report_date = document.report_date.isoformat() if document.report_date else "Unknown"
        blocks.append(
            f"--- DOCUMENT {index} ---\n"
            f"Type: {document.type_label}\n"
            f"Date: {report_date}\n"
            f"File: {document.file_name or 'Unknown'}\n"
            f"Content:\n"
            f"{document.text}\n"
            f"--- END DOCUMENT {index} ---"
        )

    return "\n\n".join(blocks)


def build_messages(documents: Sequence[SourceDocument], question: str) -> List[Dict[str, str]]:
    """System + user chat messages for one grounded question."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": (
                f"PATIENT'S MEDICAL RECORDS:\n{build_medical_context(documents)}\n\n"
                f"PATIENT'S QUESTION:\n{question}\n\n"
                "Please answer the patient's question using ONLY the information "
                "from their medical records above."
            ),
        },
    ]

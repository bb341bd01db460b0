"""
Legal Answer Template

Single-turn prompt for the legal assistant. Earlier turns of the
conversation are rendered inline so the provider keeps context without a
multi-turn request.
"""

from typing import Any, Dict, Sequence
from .base import PromptTemplate

INSTRUCTION = (
    "Du er ekspert i juridisk ret og skal give kort besvarelse af følgende spørgsmål. "
    "Husk konteksten fra tidligere spørgsmål i samtalen.\n\n"
)
USER_LABEL = "Bruger"
ASSISTANT_LABEL = "AI"


class LegalAnswerTemplate(PromptTemplate):
    """Template for answering a legal question with conversation history."""
    name = "legal_answer"
    version = "v1"

    def render(self, runtime: Dict[str, Any]) -> str:
        """
        Render the prompt.

        runtime keys:
            question: The current question
            history: Sequence of turns with ``text`` and ``is_user``
        """
        question = runtime["question"]
        history = runtime.get("history") or []

        prompt = INSTRUCTION
        if history:
            prompt += "Tidligere samtale:\n"
            prompt += self.render_history(history)
            prompt += f"\nNuværende spørgsmål: {question}\n\nSvar:"
        else:
            prompt += f"Spørgsmål: {question}\n\nSvar:"
        return prompt

    @staticmethod
    def render_history(history: Sequence) -> str:
        lines = []
        for turn in history:
            label = USER_LABEL if turn.is_user else ASSISTANT_LABEL
            lines.append(f"{label}: {turn.text}\n")
        return "".join(lines)

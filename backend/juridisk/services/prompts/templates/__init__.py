"""
Prompt Templates Module
"""

from .base import PromptTemplate
from .legal_answer import LegalAnswerTemplate

__all__ = [
    "PromptTemplate",
    "LegalAnswerTemplate",
]

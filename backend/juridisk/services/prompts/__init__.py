from .templates import PromptTemplate, LegalAnswerTemplate

__all__ = [
    "PromptTemplate",
    "LegalAnswerTemplate",
]

from typing import List, Optional
from .base import CamelModel
from .chat import ConversationTurn


class CompletionRequest(CamelModel):
    text: Optional[str] = None
    conversation_history: Optional[List[ConversationTurn]] = None


class CompletionResponse(CamelModel):
    summary: str

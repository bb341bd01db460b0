from .auth_service import AuthService
from .chat_service import ChatService
from .completion_service import CompletionService

__all__ = [
    "AuthService",
    "ChatService",
    "CompletionService",
]

from .user import User
from .chat import Chat, ChatMessage, DEFAULT_CHAT_TITLE, TITLE_MAX_LENGTH

__all__ = [
    "User",
    "Chat",
    "ChatMessage",
    "DEFAULT_CHAT_TITLE",
    "TITLE_MAX_LENGTH",
]

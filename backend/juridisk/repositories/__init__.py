from .base import BaseRepository
from .user_repository import UserRepository
from .chat_repository import ChatRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ChatRepository",
]

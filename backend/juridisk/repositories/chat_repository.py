from typing import Iterable, List, Optional
from datetime import datetime
from sqlalchemy.orm import Session
from ..models.chat import Chat, ChatMessage
from .base import BaseRepository


class ChatRepository(BaseRepository[Chat]):
    """Repository for Chat and ChatMessage models

    Every chat lookup filters on both the chat id and the owning user id.
    """

    def __init__(self, db: Session):
        super().__init__(Chat, db)

    def get_by_user_id(self, user_id: int) -> List[Chat]:
        """Get all chats for a user, most recently updated first"""
        return (
            self.db.query(Chat)
            .filter(Chat.user_id == user_id)
            .order_by(Chat.updated_at.desc(), Chat.id.desc())
            .all()
        )

    def get_by_user_and_id(self, user_id: int, chat_id: int) -> Optional[Chat]:
        """Get a chat by user ID and chat ID"""
        return self.db.query(Chat).filter(
            Chat.id == chat_id,
            Chat.user_id == user_id
        ).first()

    def delete_messages(self, chat_id: int) -> int:
        """Delete every message of a chat, returning the number of rows removed"""
        deleted = (
            self.db.query(ChatMessage)
            .filter(ChatMessage.chat_id == chat_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return deleted

    def create_messages(self, chat_id: int, turns: Iterable) -> List[ChatMessage]:
        """Insert one message per turn, numbering them by position"""
        messages = [
            ChatMessage(chat_id=chat_id, content=turn.text, is_user=turn.is_user, order=index)
            for index, turn in enumerate(turns)
        ]
        self.db.add_all(messages)
        self.db.flush()
        return messages

    def touch(self, chat: Chat, title: str, updated_at: datetime) -> Chat:
        """Set a chat's title and last-updated timestamp"""
        chat.title = title
        chat.updated_at = updated_at
        self.db.flush()
        return chat

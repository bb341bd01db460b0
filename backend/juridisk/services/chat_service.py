from typing import List, Optional, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..repositories import ChatRepository
from ..models import Chat, ChatMessage, DEFAULT_CHAT_TITLE, TITLE_MAX_LENGTH
from ..schemas import ConversationTurn
from ..exceptions import NotFoundError, InternalError
from ..core.telemetry import get_tracer
from ..utils import get_current_timestamp
from opentelemetry import trace
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


def derive_title(turns: Sequence[ConversationTurn]) -> str:
    """Title of a chat: the leading text of its first message, or the default"""
    if not turns:
        return DEFAULT_CHAT_TITLE
    return turns[0].text[:TITLE_MAX_LENGTH] or DEFAULT_CHAT_TITLE


class ChatService:
    """Service for chat operations

    All reads and writes go through an ownership check on (chat id, user id);
    a chat owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, db: Session):
        self.chat_repo = ChatRepository(db)
        self.db = db

    def _get_owned_chat(self, user_id: int, chat_id: int) -> Chat:
        try:
            chat = self.chat_repo.get_by_user_and_id(user_id, chat_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching chat {chat_id} for user {user_id}: {e}")
            self.chat_repo.rollback()
            raise InternalError()
        if not chat:
            logger.info(f"Chat {chat_id} not found for user {user_id}")
            raise NotFoundError("Chat")
        return chat

    def list_chats(self, user_id: int) -> List[Chat]:
        """List all chats for a user, most recently updated first"""
        logger.debug(f"Listing chats for user: {user_id}")
        try:
            return self.chat_repo.get_by_user_id(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching chats for user {user_id}: {e}")
            self.chat_repo.rollback()
            raise InternalError()

    def create_chat(self, user_id: int, title: Optional[str] = None) -> Chat:
        """Create a new chat, titled "Ny chat" unless a title is given"""
        logger.info(f"Creating chat for user {user_id}")
        with tracer.start_as_current_span("chat.create_chat") as span:
            span.set_attribute("chat.user_id", user_id)
            try:
                chat = self.chat_repo.create(
                    user_id=user_id,
                    title=(title or DEFAULT_CHAT_TITLE)[:TITLE_MAX_LENGTH],
                )
                self.chat_repo.commit()
                self.chat_repo.refresh(chat)
            except SQLAlchemyError as e:
                logger.error(f"Error creating chat for user {user_id}: {e}")
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                self.chat_repo.rollback()
                raise InternalError()
            logger.info(f"Chat created successfully: {chat.id}")
            span.set_attribute("chat.id", chat.id)
            return chat

    def get_chat(self, user_id: int, chat_id: int) -> Chat:
        """Get a chat with its messages ordered by position"""
        logger.debug(f"Getting chat {chat_id} for user {user_id}")
        chat = self._get_owned_chat(user_id, chat_id)
        try:
            # Loads the relationship, which is ordered by ChatMessage.order
            chat.messages
        except SQLAlchemyError as e:
            logger.error(f"Error fetching messages for chat {chat_id}: {e}")
            self.chat_repo.rollback()
            raise InternalError()
        return chat

    def delete_chat(self, user_id: int, chat_id: int) -> None:
        """Delete a chat; its messages go with it through the FK cascade"""
        logger.info(f"Deleting chat {chat_id} for user {user_id}")
        chat = self._get_owned_chat(user_id, chat_id)
        with tracer.start_as_current_span("chat.delete_chat") as span:
            span.set_attribute("chat.user_id", user_id)
            span.set_attribute("chat.id", chat_id)
            try:
                self.chat_repo.delete_instance(chat)
                self.chat_repo.commit()
            except SQLAlchemyError as e:
                logger.error(f"Error deleting chat {chat_id}: {e}")
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                self.chat_repo.rollback()
                raise InternalError()

    def replace_messages(
        self,
        user_id: int,
        chat_id: int,
        turns: Sequence[ConversationTurn]
    ) -> List[ChatMessage]:
        """
        Replace the complete message set of a chat

        Deletes the existing messages, inserts one row per turn with
        order equal to its index, and refreshes the chat's title and
        updated_at. The three steps share one transaction: if any of them
        fails the previous messages are kept.

        Args:
            user_id: Owning user
            chat_id: Chat to replace messages in
            turns: The full, ordered message list

        Returns:
            The inserted messages in order
        """
        chat = self._get_owned_chat(user_id, chat_id)

        with tracer.start_as_current_span("chat.replace_messages") as span:
            span.set_attribute("chat.user_id", user_id)
            span.set_attribute("chat.id", chat_id)
            span.set_attribute("chat.message_count", len(turns))
            try:
                removed = self.chat_repo.delete_messages(chat_id)
                messages = self.chat_repo.create_messages(chat_id, turns)
                self.chat_repo.touch(chat, derive_title(turns), get_current_timestamp())
                self.chat_repo.commit()
            except SQLAlchemyError as e:
                logger.error(
                    f"Error replacing messages for chat {chat_id} (user {user_id}): {e}"
                )
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                self.chat_repo.rollback()
                raise InternalError()

            logger.debug(f"Replaced {removed} messages with {len(messages)} in chat {chat_id}")
            return messages

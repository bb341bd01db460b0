"""
Chat session controller

Hosts one conversation on the client: sends questions, reveals answers with
the pseudo-streamer, and keeps the server-side chat in sync by replacing its
full message list after every answer.
"""
import asyncio
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional
import httpx
from ..utils import chat_title, format_clock_time
from .api_client import ApiError, JuridiskApiClient
from .state import UIState
from .streaming import PseudoStreamer, Sleep

logger = logging.getLogger(__name__)

ERROR_TEXT = "Beklager, der opstod en fejl. Prøv venligst igen."

# Errors of the API round trip that are reported in the conversation
CLIENT_ERRORS = (ApiError, httpx.HTTPError)


@dataclass
class DisplayMessage:
    id: str
    text: str
    is_user: bool
    timestamp: str
    is_error: bool = False


def _message_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class ChatSession:
    """Client-side state machine for one chat window"""

    def __init__(
        self,
        api: JuridiskApiClient,
        state: Optional[UIState] = None,
        sleep: Sleep = asyncio.sleep,
        on_update: Optional[Callable[[DisplayMessage], None]] = None,
    ):
        self.api = api
        self.state = state or UIState()
        self.messages: List[DisplayMessage] = []
        self.current_chat_id: Optional[int] = None
        self.is_loading = False
        self._on_update = on_update
        # Bumped whenever the displayed conversation is discarded
        self._generation = 0
        self.streamer = PseudoStreamer(self._update_message, sleep=sleep)

    def _notify(self, message: DisplayMessage) -> None:
        if self._on_update is not None:
            self._on_update(message)

    def _append(self, message: DisplayMessage) -> DisplayMessage:
        self.messages.append(message)
        self._notify(message)
        return message

    def _update_message(self, message_id: str, text: str) -> None:
        # A message removed by new_chat/load_chat is no longer a valid target
        for message in self.messages:
            if message.id == message_id:
                message.text = text
                self._notify(message)
                return
        logger.debug(f"Dropped update for removed message {message_id}")

    def conversation(self) -> List[Dict[str, object]]:
        """Messages as sent to the API; error notices are display-only"""
        return [
            {"text": message.text, "isUser": message.is_user}
            for message in self.messages
            if not message.is_error
        ]

    async def send_message(self, text: str) -> None:
        """Ask a question and reveal the answer into the conversation"""
        if not text.strip():
            return

        generation = self._generation
        history = self.conversation()
        self._append(DisplayMessage(_message_id("user"), text, True, format_clock_time()))
        self.is_loading = True

        try:
            if not history:
                self.state.announce_new_chat(self.current_chat_id, chat_title(text))
                await self.save_chat()

            summary = await self.api.ask(text, history)
            if generation != self._generation:
                return

            answer = self._append(DisplayMessage(_message_id("ai"), "", False, format_clock_time()))
            await self.streamer.start(answer.id, summary)

            if self.current_chat_id is not None:
                await self._save_messages(self.current_chat_id)
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug("Conversation discarded during reveal")
                return
            raise
        except CLIENT_ERRORS as e:
            logger.error(f"Error answering question: {e}")
            self._append(DisplayMessage(_message_id("error"), ERROR_TEXT, False, format_clock_time(), is_error=True))
        finally:
            self.is_loading = False

    async def save_chat(self) -> Optional[int]:
        """Persist the conversation, creating the chat on first save"""
        if not self.messages:
            return None

        chat_id = self.current_chat_id
        try:
            if chat_id is None:
                title = chat_title(self.messages[0].text)
                chat = await self.api.create_chat(title)
                chat_id = chat["id"]
                self.current_chat_id = chat_id
                self.state.announce_new_chat(chat_id, title)
        except CLIENT_ERRORS as e:
            logger.error(f"Error saving chat: {e}")
            return None

        await self._save_messages(chat_id)
        return chat_id

    async def _save_messages(self, chat_id: int) -> bool:
        try:
            await self.api.save_messages(chat_id, self.conversation())
        except CLIENT_ERRORS as e:
            logger.error(f"Error saving messages to chat {chat_id}: {e}")
            return False
        return True

    def _discard_conversation(self) -> None:
        self._generation += 1
        self.streamer.close()

    def new_chat(self) -> None:
        """Start an empty conversation"""
        self._discard_conversation()
        self.messages = []
        self.current_chat_id = None
        self.state.clear_new_chat()

    async def load_chat(self, chat_id: int) -> bool:
        """Replace the conversation with a stored chat"""
        try:
            chat = await self.api.get_chat(chat_id)
        except CLIENT_ERRORS as e:
            logger.error(f"Error loading chat {chat_id}: {e}")
            return False

        self._discard_conversation()
        seen = set()
        messages = []
        for stored in chat["messages"]:
            message_id = str(stored["id"])
            if message_id in seen:
                continue
            seen.add(message_id)
            created_at = datetime.fromisoformat(stored["createdAt"])
            messages.append(
                DisplayMessage(message_id, stored["content"], stored["isUser"], format_clock_time(created_at))
            )
        self.messages = messages
        self.current_chat_id = chat_id
        return True

    async def list_chats(self) -> List[Dict[str, object]]:
        return await self.api.list_chats()

    async def delete_chat(self, chat_id: int) -> None:
        await self.api.delete_chat(chat_id)
        if chat_id == self.current_chat_id:
            self.new_chat()

    def close(self) -> None:
        """Tear down the session, cancelling pending reveals"""
        self._discard_conversation()

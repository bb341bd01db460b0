from typing import List, Optional
from datetime import datetime
from .base import CamelModel


class ChatCreate(CamelModel):
    title: Optional[str] = None


class ChatSummary(CamelModel):
    id: int
    title: str
    created_at: datetime
    updated_at: datetime


class Chat(ChatSummary):
    user_id: int


class ChatMessage(CamelModel):
    id: int
    chat_id: int
    content: str
    is_user: bool
    order: int
    created_at: datetime


class ChatDetail(Chat):
    messages: List[ChatMessage] = []


class ConversationTurn(CamelModel):
    """A message as held by the client: display text plus author flag"""
    text: str
    is_user: bool


class MessagesReplace(CamelModel):
    messages: List[ConversationTurn]


# Response envelopes
class ChatListResponse(CamelModel):
    chats: List[ChatSummary]


class ChatResponse(CamelModel):
    chat: Chat


class ChatDetailResponse(CamelModel):
    chat: ChatDetail


class MessagesResponse(CamelModel):
    messages: List[ChatMessage]


class DeleteResponse(CamelModel):
    success: bool

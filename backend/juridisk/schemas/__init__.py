from .auth import UserRegister, UserLogin, Token
from .user import User, UserResponse, RegisterResponse
from .chat import (
    ChatCreate,
    ChatSummary,
    Chat,
    ChatMessage,
    ChatDetail,
    ConversationTurn,
    MessagesReplace,
    ChatListResponse,
    ChatResponse,
    ChatDetailResponse,
    MessagesResponse,
    DeleteResponse,
)
from .completion import CompletionRequest, CompletionResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "User",
    "UserResponse",
    "RegisterResponse",
    "ChatCreate",
    "ChatSummary",
    "Chat",
    "ChatMessage",
    "ChatDetail",
    "ConversationTurn",
    "MessagesReplace",
    "ChatListResponse",
    "ChatResponse",
    "ChatDetailResponse",
    "MessagesResponse",
    "DeleteResponse",
    "CompletionRequest",
    "CompletionResponse",
]

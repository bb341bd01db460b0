from fastapi import APIRouter, Body, Depends, status
from typing import Optional
from ...core.security import get_current_user
from ...models import User
from ...schemas import (
    ChatCreate,
    MessagesReplace,
    ChatListResponse,
    ChatResponse,
    ChatDetailResponse,
    MessagesResponse,
    DeleteResponse,
)
from ...services import ChatService
from ..dependencies import get_chat_service

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get("", response_model=ChatListResponse)
def list_chats(
    current_user: User = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """List the current user's chats, most recently updated first"""
    return {"chats": chat_service.list_chats(current_user.id)}


@router.post("", response_model=ChatResponse, status_code=status.HTTP_201_CREATED)
def create_chat(
    chat_data: Optional[ChatCreate] = Body(default=None),
    current_user: User = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """Create a new chat"""
    title = chat_data.title if chat_data else None
    return {"chat": chat_service.create_chat(current_user.id, title)}


@router.get("/{chat_id}", response_model=ChatDetailResponse)
def get_chat(
    chat_id: int,
    current_user: User = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """Get a chat with its messages"""
    return {"chat": chat_service.get_chat(current_user.id, chat_id)}


@router.delete("/{chat_id}", response_model=DeleteResponse)
def delete_chat(
    chat_id: int,
    current_user: User = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """Delete a chat and its messages"""
    chat_service.delete_chat(current_user.id, chat_id)
    return {"success": True}


@router.post("/{chat_id}/messages", response_model=MessagesResponse)
def replace_messages(
    chat_id: int,
    payload: MessagesReplace,
    current_user: User = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """Replace all messages of a chat with the posted list"""
    return {"messages": chat_service.replace_messages(current_user.id, chat_id, payload.messages)}

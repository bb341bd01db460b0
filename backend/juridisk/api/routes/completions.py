from fastapi import APIRouter, Depends
from ...core.security import get_current_user
from ...models import User
from ...schemas import CompletionRequest, CompletionResponse
from ...services import CompletionService
from ..dependencies import get_completion_service

router = APIRouter(prefix="/completions", tags=["completions"])


@router.post("", response_model=CompletionResponse)
async def create_completion(
    request: CompletionRequest,
    current_user: User = Depends(get_current_user),
    completion_service: CompletionService = Depends(get_completion_service)
):
    """Answer a legal question, using the posted conversation history as context"""
    summary = await completion_service.answer(request.text, request.conversation_history)
    return CompletionResponse(summary=summary)

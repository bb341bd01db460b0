"""
Dependency providers for API routes

Routes receive their services through these functions, which keeps service
construction in one place and lets tests swap in fakes through
app.dependency_overrides.
"""
from typing import Callable
from fastapi import Depends
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..clients import CompletionProvider, CompletionProviderFactory
from ..services import AuthService, ChatService, CompletionService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """
    Get AuthService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        AuthService instance
    """
    return AuthService(db)


def get_chat_service(db: Session = Depends(get_db)) -> ChatService:
    """
    Get ChatService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        ChatService instance
    """
    return ChatService(db)


def get_provider_factory() -> Callable[[], CompletionProvider]:
    """
    Get the function that builds the configured completion provider

    The provider is built by CompletionService only after the question has
    been validated, so a missing API key surfaces as an error on the
    completions endpoint and never hides an empty question.
    """
    return CompletionProviderFactory.create_provider


def get_completion_service(
    provider_factory: Callable[[], CompletionProvider] = Depends(get_provider_factory)
) -> CompletionService:
    """
    Get CompletionService instance

    Args:
        provider_factory: Builds the completion provider (injected by dependency)

    Returns:
        CompletionService instance
    """
    return CompletionService(provider_factory)

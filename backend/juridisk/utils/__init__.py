from datetime import datetime, timezone
from typing import Optional

DEFAULT_CHAT_TITLE = "Ny chat"
TITLE_MAX_LENGTH = 50


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp"""
    return datetime.now(timezone.utc)


def format_clock_time(dt: Optional[datetime] = None) -> str:
    """Format a timestamp as HH:MM for display next to a chat message"""
    return (dt or datetime.now()).strftime("%H:%M")


def chat_title(text: Optional[str]) -> str:
    """Chat title from the leading text of its first message"""
    return (text or "")[:TITLE_MAX_LENGTH] or DEFAULT_CHAT_TITLE

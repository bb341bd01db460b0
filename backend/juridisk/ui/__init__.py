from .streaming import PseudoStreamer, reveal_delay, visible_lines
from .formatting import Segment, format_line, format_message, render_message
from .state import UIState, PreferenceStore, InMemoryPreferenceStore, JsonFilePreferenceStore
from .api_client import JuridiskApiClient, ApiError
from .session import ChatSession, DisplayMessage

__all__ = [
    "PseudoStreamer",
    "reveal_delay",
    "visible_lines",
    "Segment",
    "format_line",
    "format_message",
    "render_message",
    "UIState",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "JuridiskApiClient",
    "ApiError",
    "ChatSession",
    "DisplayMessage",
]

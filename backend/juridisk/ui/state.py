"""
Client UI state and preference persistence
"""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"


class PreferenceStore(ABC):
    """Key/value store for user interface preferences"""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


class JsonFilePreferenceStore(PreferenceStore):
    """Preferences kept as a JSON object in a file, rewritten on every set"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")


@dataclass
class UIState:
    """Explicit state of the chat window

    new_chat_id/new_chat_title describe a chat created in this session that
    a chat list may show before it has been reloaded from the server.
    """
    preferences: PreferenceStore = field(default_factory=InMemoryPreferenceStore)
    dark_mode: bool = False
    sidebar_open: bool = True
    profile_sidebar_open: bool = False
    new_chat_id: Optional[int] = None
    new_chat_title: Optional[str] = None

    @classmethod
    def load(cls, preferences: PreferenceStore) -> "UIState":
        """Create state, restoring the saved dark mode preference"""
        return cls(preferences=preferences, dark_mode=bool(preferences.get(DARK_MODE_KEY, False)))

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        self.preferences.set(DARK_MODE_KEY, self.dark_mode)
        logger.debug(f"Dark mode set to {self.dark_mode}")
        return self.dark_mode

    def toggle_sidebar(self) -> bool:
        self.sidebar_open = not self.sidebar_open
        return self.sidebar_open

    def open_profile(self) -> None:
        self.profile_sidebar_open = True

    def close_profile(self) -> None:
        self.profile_sidebar_open = False

    def announce_new_chat(self, chat_id: Optional[int], title: str) -> None:
        self.new_chat_id = chat_id
        self.new_chat_title = title

    def clear_new_chat(self) -> None:
        self.new_chat_id = None
        self.new_chat_title = None

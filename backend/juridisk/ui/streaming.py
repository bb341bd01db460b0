"""
Pseudo-streaming of complete answers

The completion provider returns a whole answer at once. PseudoStreamer
reveals it line by line on the event loop so the reader sees it grow as if
it were generated live. Every reveal is an asyncio task keyed by the id of
the message it writes into, so a host can cancel one reveal or tear all of
them down.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

BASE_DELAY_MS = 80
PER_CHAR_DELAY_MS = 3
MAX_LENGTH_DELAY_MS = 200

Publish = Callable[[str, str], None]
Sleep = Callable[[float], Awaitable[None]]


def reveal_delay(line: str) -> int:
    """Milliseconds to wait after revealing a line"""
    return BASE_DELAY_MS + min(len(line) * PER_CHAR_DELAY_MS, MAX_LENGTH_DELAY_MS)


def visible_lines(text: str) -> List[str]:
    """Lines of text that produce a reveal step (blank lines are skipped)"""
    return [line for line in text.split("\n") if line.strip()]


class PseudoStreamer:
    """Reveals complete answers incrementally through a publish callback

    publish(message_id, content) receives the whole text revealed so far,
    never a delta. The callback owns the lookup of message_id; a target that
    no longer exists must be ignored there.
    """

    def __init__(self, publish: Publish, sleep: Sleep = asyncio.sleep):
        self._publish = publish
        self._sleep = sleep
        self._reveals: Dict[str, asyncio.Task] = {}

    async def reveal(self, message_id: str, text: str) -> str:
        """Reveal text into a message, returning the final content"""
        buffer = ""
        for line in text.split("\n"):
            if not line.strip():
                continue
            buffer += line + "\n"
            self._publish(message_id, buffer)
            await self._sleep(reveal_delay(line) / 1000)
        logger.debug(f"Revealed {len(buffer)} characters into message {message_id}")
        return buffer

    def start(self, message_id: str, text: str) -> asyncio.Task:
        """Schedule a reveal, replacing any reveal already running for the id"""
        self.cancel(message_id)
        task = asyncio.get_running_loop().create_task(self.reveal(message_id, text))
        self._reveals[message_id] = task
        task.add_done_callback(lambda done: self._forget(message_id, done))
        return task

    def _forget(self, message_id: str, task: asyncio.Task) -> None:
        if self._reveals.get(message_id) is task:
            del self._reveals[message_id]

    def is_active(self, message_id: str) -> bool:
        return message_id in self._reveals

    def cancel(self, message_id: str) -> bool:
        """Cancel the pending reveal for a message, if any"""
        task: Optional[asyncio.Task] = self._reveals.pop(message_id, None)
        if task is None or task.done():
            return False
        task.cancel()
        logger.debug(f"Cancelled reveal for message {message_id}")
        return True

    def close(self) -> None:
        """Cancel every pending reveal"""
        for message_id in list(self._reveals):
            self.cancel(message_id)

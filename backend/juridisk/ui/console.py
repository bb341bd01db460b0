"""
Interactive console front-end

Logs in, then reads questions from stdin and prints each answer as it is
revealed. Run with ``juridisk-chat --email ... --password ...``.
"""
import argparse
import asyncio
import logging
import os
from pathlib import Path
from typing import Dict, Optional
from .api_client import ApiError, JuridiskApiClient
from .formatting import format_message, BLANK
from .session import ChatSession, DisplayMessage
from .state import JsonFilePreferenceStore, UIState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
NEW_CHAT_COMMAND = "/ny"
DEFAULT_PREFERENCES = Path.home() / ".juridisk" / "preferences.json"


class RevealPrinter:
    """Prints only the lines of a message that have not been printed yet"""

    def __init__(self):
        self._printed: Dict[str, int] = {}

    def __call__(self, message: DisplayMessage) -> None:
        if message.is_user:
            return
        segments = [s for s in format_message(message.text) if s.kind != BLANK]
        already = self._printed.get(message.id, 0)
        for segment in segments[already:]:
            print(segment.text, flush=True)
        self._printed[message.id] = len(segments)


async def run(base_url: str, email: str, password: str, name: Optional[str] = None,
              preferences_path: Path = DEFAULT_PREFERENCES) -> None:
    async with JuridiskApiClient(base_url) as api:
        if name:
            try:
                await api.register(name, email, password)
                print("Bruger oprettet.")
            except ApiError as e:
                logger.info(f"Registration skipped: {e.detail}")
        await api.login(email, password)

        state = UIState.load(JsonFilePreferenceStore(preferences_path))
        session = ChatSession(api, state, on_update=RevealPrinter())
        print("Juridisk AI er klar. Skriv 'exit' for at afslutte, '/ny' for en ny chat.")
        try:
            while True:
                question = (await asyncio.to_thread(input, "\n> ")).strip()
                if question.lower() in EXIT_COMMANDS:
                    break
                if question == NEW_CHAT_COMMAND:
                    session.new_chat()
                    continue
                await session.send_message(question)
        finally:
            session.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Console client for Juridisk AI")
    parser.add_argument("--url", default=os.getenv("JURIDISK_API_URL", "http://localhost:8000"))
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", help="Register the user with this name before logging in")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)
    try:
        asyncio.run(run(args.url, args.email, args.password, args.name))
    except (KeyboardInterrupt, EOFError):
        print("\nFarvel!")


if __name__ == "__main__":
    main()

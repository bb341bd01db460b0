import asyncio

from httpx import ASGITransport

from juridisk.main import app
from juridisk.ui import ChatSession, JuridiskApiClient
from juridisk.ui.api_client import ApiError
from juridisk.ui.session import ERROR_TEXT

ANSWER = "**Svar**\n\nDette er et svar."
REVEALED = "**Svar**\nDette er et svar.\n"


async def no_sleep(seconds):
    pass


class FakeApi:
    """In-memory stand-in for JuridiskApiClient"""

    def __init__(self, answer=ANSWER):
        self.answer = answer
        self.ask_error = None
        self.created = []
        self.asked = []
        self.saved = []
        self.deleted = []
        self.chats = {}

    async def create_chat(self, title=None):
        self.created.append(title)
        return {"id": len(self.created), "title": title}

    async def ask(self, text, history):
        self.asked.append((text, history))
        if self.ask_error is not None:
            raise self.ask_error
        return self.answer

    async def save_messages(self, chat_id, messages):
        self.saved.append((chat_id, messages))
        return messages

    async def get_chat(self, chat_id):
        if chat_id not in self.chats:
            raise ApiError(404, "Chat not found")
        return self.chats[chat_id]

    async def delete_chat(self, chat_id):
        self.deleted.append(chat_id)

    async def list_chats(self):
        return list(self.chats.values())


def test_first_message_creates_chat_and_saves_answer():
    api = FakeApi()
    session = ChatSession(api, sleep=no_sleep)

    asyncio.run(session.send_message("Hvad er hævd?"))

    assert api.created == ["Hvad er hævd?"]
    assert session.current_chat_id == 1
    assert (session.state.new_chat_id, session.state.new_chat_title) == (1, "Hvad er hævd?")
    assert api.asked == [("Hvad er hævd?", [])]
    assert api.saved == [
        (1, [{"text": "Hvad er hævd?", "isUser": True}]),
        (1, [{"text": "Hvad er hævd?", "isUser": True}, {"text": REVEALED, "isUser": False}]),
    ]
    assert [(m.text, m.is_user) for m in session.messages] == [("Hvad er hævd?", True), (REVEALED, False)]
    assert session.is_loading is False


def test_blank_input_is_ignored():
    api = FakeApi()
    session = ChatSession(api, sleep=no_sleep)

    asyncio.run(session.send_message("   "))

    assert session.messages == []
    assert api.asked == []


def test_failed_answer_shows_error_that_is_never_sent():
    api = FakeApi()
    session = ChatSession(api, sleep=no_sleep)
    api.ask_error = ApiError(503, "Gemini AI er midlertidigt utilgængelig.")

    async def scenario():
        await session.send_message("Første")
        api.ask_error = None
        await session.send_message("Anden")

    asyncio.run(scenario())

    assert [m.text for m in session.messages] == ["Første", ERROR_TEXT, "Anden", REVEALED]
    assert session.messages[1].is_error
    assert api.asked[1] == ("Anden", [{"text": "Første", "isUser": True}])
    assert api.created == ["Første"]
    last_saved = api.saved[-1][1]
    assert ERROR_TEXT not in [m["text"] for m in last_saved]


def test_updates_are_reported_while_revealing():
    api = FakeApi(answer="a\nb\nc")
    seen = []
    session = ChatSession(api, sleep=no_sleep, on_update=lambda message: seen.append(message.text))

    asyncio.run(session.send_message("Spørgsmål"))

    assert seen == ["Spørgsmål", "", "a\n", "a\nb\n", "a\nb\nc\n"]


def test_new_chat_during_reveal_discards_answer():
    api = FakeApi(answer="første\nanden")

    async def scenario():
        gate = asyncio.Event()

        async def blocked_sleep(seconds):
            await gate.wait()

        session = ChatSession(api, sleep=blocked_sleep)
        sending = asyncio.create_task(session.send_message("Spørgsmål"))
        while len(session.messages) < 2 or not session.messages[1].text:
            await asyncio.sleep(0)

        session.new_chat()
        await sending
        return session

    session = asyncio.run(scenario())

    assert session.messages == []
    assert session.current_chat_id is None
    assert session.state.new_chat_id is None
    # Only the save made when the chat was created
    assert len(api.saved) == 1


def test_load_chat_skips_duplicate_messages():
    api = FakeApi()
    api.chats[5] = {
        "id": 5,
        "title": "Gammel chat",
        "messages": [
            {"id": 10, "content": "Spørgsmål", "isUser": True, "createdAt": "2024-05-01T09:15:00"},
            {"id": 10, "content": "Spørgsmål", "isUser": True, "createdAt": "2024-05-01T09:15:00"},
            {"id": 11, "content": "Svar", "isUser": False, "createdAt": "2024-05-01T09:16:30"},
        ],
    }
    session = ChatSession(api, sleep=no_sleep)

    assert asyncio.run(session.load_chat(5)) is True
    assert session.current_chat_id == 5
    assert [(m.id, m.text, m.timestamp) for m in session.messages] == [
        ("10", "Spørgsmål", "09:15"),
        ("11", "Svar", "09:16"),
    ]
    assert asyncio.run(session.load_chat(99)) is False
    assert session.current_chat_id == 5


def test_deleting_current_chat_resets_session():
    api = FakeApi()
    session = ChatSession(api, sleep=no_sleep)

    asyncio.run(session.send_message("Spørgsmål"))
    asyncio.run(session.delete_chat(1))

    assert api.deleted == [1]
    assert session.messages == []
    assert session.current_chat_id is None


def test_session_against_api(client, provider):
    async def scenario():
        transport = ASGITransport(app=app)
        async with JuridiskApiClient("http://testserver", transport=transport) as api:
            await api.register("Klient Bruger", "klient@example.com", "hemmeligt123")
            await api.login("klient@example.com", "hemmeligt123")

            session = ChatSession(api, sleep=no_sleep)
            await session.send_message("Hvad er hævd?")
            chat = await api.get_chat(session.current_chat_id)
            chats = await session.list_chats()
            return chat, chats

    chat, chats = asyncio.run(scenario())

    assert chat["title"] == "Hvad er hævd?"
    assert [(m["content"], m["isUser"], m["order"]) for m in chat["messages"]] == [
        ("Hvad er hævd?", True, 0),
        ("**Svar**\nDette er et svar.\n", False, 1),
    ]
    assert [c["id"] for c in chats] == [chat["id"]]
    assert len(provider.prompts) == 1

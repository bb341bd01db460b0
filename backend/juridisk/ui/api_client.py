"""
Async HTTP client for the Juridisk AI API
"""
import logging
from typing import Any, Dict, List, Optional
import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class ApiError(Exception):
    """The API answered with an error status"""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class JuridiskApiClient:
    """Thin wrapper over the REST endpoints; returns decoded JSON payloads"""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.token = token
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "JuridiskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = await self._client.request(method, f"/api{path}", headers=headers, **kwargs)
        if response.is_error:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning(f"{method} {path} failed with {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail)
        return response.json()

    async def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/auth/register", json={"name": name, "email": email, "password": password})
        return data["user"]

    async def login(self, email: str, password: str) -> str:
        data = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["access_token"]
        return self.token

    async def list_chats(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/chats")
        return data["chats"]

    async def create_chat(self, title: Optional[str] = None) -> Dict[str, Any]:
        data = await self._request("POST", "/chats", json={"title": title})
        return data["chat"]

    async def get_chat(self, chat_id: int) -> Dict[str, Any]:
        data = await self._request("GET", f"/chats/{chat_id}")
        return data["chat"]

    async def delete_chat(self, chat_id: int) -> None:
        await self._request("DELETE", f"/chats/{chat_id}")

    async def save_messages(self, chat_id: int, messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        data = await self._request("POST", f"/chats/{chat_id}/messages", json={"messages": messages})
        return data["messages"]

    async def ask(self, text: str, history: List[Dict[str, Any]]) -> str:
        data = await self._request("POST", "/completions", json={"text": text, "conversationHistory": history})
        return data["summary"]

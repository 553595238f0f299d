# app/client/api.py

from typing import List, Optional
import httpx

from app.data_schemas import Confession


class ConfessionsAPI:
    """Async client for the confessions HTTP API"""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Use the given httpx client, or open one against base_url"""
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url)

    async def list_confessions(self) -> List[Confession]:
        response = await self._client.get("/api/confessions")
        response.raise_for_status()
        return [Confession.model_validate(item) for item in response.json()]

    async def create_confession(self, message: str) -> Confession:
        response = await self._client.post("/api/confessions", json={"message": message})
        response.raise_for_status()
        return Confession.model_validate(response.json())

    async def like_confession(self, confession_id: int) -> Confession:
        response = await self._client.post(f"/api/confessions/{confession_id}/like")
        response.raise_for_status()
        return Confession.model_validate(response.json())

    async def aclose(self) -> None:
        await self._client.aclose()

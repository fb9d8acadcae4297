"""Client for the random joke API attached to new vehicles."""

from __future__ import annotations

import httpx
from pydantic import BaseModel

from .logging import get_logger

logger = get_logger(__name__)


class JokePayload(BaseModel):
    """Shape of a joke returned by the upstream API."""

    id: int
    type: str
    setup: str
    punchline: str


class JokeClient:
    """Fetches one random joke per call over a shared HTTP client.

    No retries and no fallback: any transport error, non-2xx status or
    malformed payload is logged and re-raised to the caller.
    """

    def __init__(self, http_client: httpx.AsyncClient, url: str):
        self._http_client = http_client
        self.url = url

    async def fetch_random_joke(self) -> JokePayload:
        try:
            response = await self._http_client.get(self.url)
            response.raise_for_status()
            return JokePayload.model_validate(response.json())
        except Exception as e:
            logger.error("Failed to fetch random joke from API", url=self.url, error=str(e))
            raise

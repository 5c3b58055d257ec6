"""Client for the public random joke API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from todoapp.models.joke import Joke
from todoapp.settings import DEFAULT_JOKE_API_URL

logger = logging.getLogger(__name__)


class JokeApiError(RuntimeError):
    """Error raised when fetching or decoding a joke fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class JokeClient:
    """Fetches one random joke per call. No retry and no caching."""

    def __init__(
        self,
        url: str = DEFAULT_JOKE_API_URL,
        timeout_seconds: float = 10.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def get_joke(self) -> Joke:
        timeout = httpx.Timeout(self.timeout_seconds)
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                raise JokeApiError(
                    f"Joke API error ({status}): {exc.response.text}", status_code=status
                ) from exc
            except httpx.RequestError as exc:
                raise JokeApiError(f"Joke API request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise JokeApiError("Joke API returned invalid JSON") from exc
        logger.debug("Joke API payload: %s", data)

        if not isinstance(data, dict):
            raise JokeApiError(f"Joke API returned {type(data).__name__}, expected an object")
        try:
            joke = Joke.from_json(data)
        except KeyError as exc:
            raise JokeApiError(f"Joke API payload is missing field {exc}") from exc
        except ValidationError as exc:
            raise JokeApiError(f"Joke API payload is malformed: {exc}") from exc
        logger.debug("Parsed joke: %r", joke)
        return joke

"""Wire transports used by :class:`~jmap_client.client.Client`."""

from __future__ import annotations

import abc
from typing import Any

import httpx
import structlog

from .config import ClientConfig
from .errors import JmapError

logger = structlog.get_logger()


class Transport(abc.ABC):
    """Sends a JSON request body and returns the decoded JSON response."""

    @abc.abstractmethod
    async def post(self, url: str, headers: dict[str, str], data: Any) -> Any:
        ...


class HttpxTransport(Transport):
    """:class:`Transport` backed by an :class:`httpx.AsyncClient`.

    Call :meth:`start` before the first request and :meth:`stop` when done.
    No retry is performed; failed requests raise straight to the caller.
    """

    def __init__(self, timeout_seconds: float = 30.0) -> None:
        self._timeout_seconds = timeout_seconds
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> HttpxTransport:
        """Build a transport using the timeout of *config*."""
        return cls(timeout_seconds=config.timeout_seconds)

    async def start(self) -> None:
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout_seconds))
        logger.info("transport_started", timeout_seconds=self._timeout_seconds)

    async def stop(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("transport_stopped")

    async def post(self, url: str, headers: dict[str, str], data: Any) -> Any:
        """POST *data* as JSON to *url*.

        Raises :class:`httpx.HTTPStatusError` on non-2xx responses.
        """
        if self._client is None:
            raise JmapError("Transport not started")

        response = await self._client.post(url, json=data, headers=headers)
        response.raise_for_status()
        logger.debug("transport_response", url=url, status_code=response.status_code)
        return response.json()

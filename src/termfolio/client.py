"""HTTP client for a running termfolio endpoint.

Sends key presses and text to the endpoint and reads back the screen,
so scripts and the ``termfolio send`` command can drive a terminal
hosted elsewhere.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class TerminalClient:
    """Drives a terminal through the endpoint's HTTP API.

    Example usage::

        async with TerminalClient(base_url="http://localhost:8080") as client:
            await client.send_line("open project1")
            print(await client.get_screen())
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the HTTP client and verify endpoint connectivity.

        Raises:
            TerminalClientError: If the endpoint is unreachable.
        """
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
        )
        try:
            resp = await self._client.get("/health")
            resp.raise_for_status()
            logger.info("Connected to endpoint at %s", self._base_url)
        except httpx.HTTPError as e:
            await self._client.aclose()
            self._client = None
            raise TerminalClientError(
                f"Failed to connect to endpoint: {e}", endpoint=self._base_url
            ) from e

    async def disconnect(self) -> None:
        """Close the HTTP client. Safe to call more than once."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from endpoint")

    async def send_keystroke(self, key: str, wait: bool = False) -> None:
        await self._post("/keystroke", {"key": key, "wait": wait})
        logger.debug("Sent keystroke: %s", key)

    async def send_text(self, text: str, wait: bool = False) -> None:
        await self._post("/text", {"text": text, "wait": wait})
        logger.debug("Sent text: %s", text[:50])

    async def send_line(self, text: str) -> None:
        """Type ``text``, press Enter, and wait until its output has rendered."""
        await self.send_text(text)
        await self.send_keystroke("Enter", wait=True)

    async def get_screen(self) -> str:
        resp = await self._request("GET", "/screen")
        return resp.json().get("content", "")

    async def _post(self, path: str, payload: dict) -> httpx.Response:
        return await self._request("POST", path, json=payload)

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        if self._client is None:
            raise TerminalClientError("Not connected to endpoint", endpoint=self._base_url)
        try:
            resp = await self._client.request(method, path, **kwargs)
            resp.raise_for_status()
            return resp
        except httpx.HTTPError as e:
            raise TerminalClientError(
                f"HTTP request to {path} failed: {e}", endpoint=self._base_url
            ) from e

    async def __aenter__(self) -> TerminalClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()


class TerminalClientError(Exception):
    """Raised when talking to the endpoint fails."""

    def __init__(self, message: str, endpoint: str = "") -> None:
        super().__init__(message)
        self.endpoint = endpoint

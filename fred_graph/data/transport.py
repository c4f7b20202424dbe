"""HTTP transport used by the FRED client."""

import logging
from pathlib import Path
from typing import Protocol

import httpx

from fred_graph.data.urls import mask_api_key
from fred_graph.exceptions import TransportError


logger = logging.getLogger(__name__)


class UrlDownloader(Protocol):
    """Fetches URLs for the client; swap in a fake to test without a network."""

    async def fetch_text(self, url: str) -> str:
        """Return the response body, raising TransportError on failure."""
        ...

    async def fetch_to_file(self, url: str, path: Path) -> None:
        """Write the response body to path, raising TransportError on failure."""
        ...


class HttpxDownloader:
    """UrlDownloader backed by httpx.AsyncClient."""

    def __init__(
        self, timeout: float = 30.0, client: httpx.AsyncClient | None = None
    ) -> None:
        self.timeout = timeout
        self._client = client

    def _open_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout)

    async def fetch_text(self, url: str) -> str:
        if self._client is not None:
            return await self._get_text(self._client, url)
        async with self._open_client() as client:
            return await self._get_text(client, url)

    async def fetch_to_file(self, url: str, path: Path) -> None:
        if self._client is not None:
            await self._stream_to_file(self._client, url, path)
            return
        async with self._open_client() as client:
            await self._stream_to_file(client, url, path)

    async def _get_text(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise _status_error(url, e.response, e.response.text) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Request to {mask_api_key(url)} failed: {e}", url=url
            ) from e
        return response.text

    async def _stream_to_file(
        self, client: httpx.AsyncClient, url: str, path: Path
    ) -> None:
        opened = False
        try:
            async with client.stream("GET", url) as response:
                if response.is_error:
                    body = (await response.aread()).decode("utf-8", errors="replace")
                    raise _status_error(url, response, body)
                # Destination is only opened once the service has accepted the request
                with open(path, "wb") as f:
                    opened = True
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
        except httpx.HTTPError as e:
            if opened:
                # Don't leave a truncated file behind
                Path(path).unlink(missing_ok=True)
            raise TransportError(
                f"Download from {mask_api_key(url)} failed: {e}", url=url
            ) from e
        logger.debug(f"Saved {mask_api_key(url)} to {path}")


def _status_error(url: str, response: httpx.Response, body: str) -> TransportError:
    return TransportError(
        f"HTTP {response.status_code} from {mask_api_key(url)}",
        url=url,
        status_code=response.status_code,
        body=body,
    )

from __future__ import annotations

import asyncio
import logging
import urllib.parse
from typing import Any

import aiohttp

from xsrf_client.errors import BadUrl, Cancelled, NetworkError, Timeout
from xsrf_client.expect import Response
from xsrf_client.request import HttpRequest

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """Executes request descriptions on an aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str | None = None,
        default_timeout_ms: float | None = None,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._base_url = base_url
        self._default_timeout_ms = default_timeout_ms
        self._in_flight: dict[str, set[asyncio.Task[Any]]] = {}
        self._cancelled: set[asyncio.Task[Any]] = set()

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session and self._owns_session:
            await self._session.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    def resolve_url(self, url: str) -> str:
        if not self._base_url or urllib.parse.urlparse(url).scheme:
            return url
        return urllib.parse.urljoin(self._base_url, url)

    async def send(self, request: HttpRequest) -> Any:
        """Send ``request`` and return whatever its response handler produces."""
        if request.tracker is None:
            return await self._send(request)

        tracker = request.tracker
        task = asyncio.ensure_future(self._send(request))
        self._in_flight.setdefault(tracker, set()).add(task)
        try:
            return await task
        except asyncio.CancelledError:
            if task in self._cancelled:
                raise Cancelled(tracker) from None
            raise
        finally:
            self._cancelled.discard(task)
            tasks = self._in_flight.get(tracker)
            if tasks is not None:
                tasks.discard(task)
                if not tasks:
                    del self._in_flight[tracker]

    def cancel(self, tracker: str) -> int:
        """Cancel every in-flight request sent with ``tracker``."""
        cancelled = 0
        for task in self._in_flight.get(tracker, set()):
            if not task.done():
                self._cancelled.add(task)
                task.cancel()
                cancelled += 1
        if cancelled:
            logger.debug("Cancelled %d request(s) tracked as %s", cancelled, tracker)
        return cancelled

    async def _send(self, request: HttpRequest) -> Any:
        url = self.resolve_url(request.url)
        headers = list(request.headers)
        data: bytes | None = None
        if not request.body.is_empty:
            data = request.body.content.encode("utf-8")
            if request.body.content_type and not any(name.lower() == "content-type" for name, _ in headers):
                headers.append(("Content-Type", request.body.content_type))

        kwargs: dict[str, Any] = {"headers": headers, "data": data}
        timeout_ms = request.timeout if request.timeout is not None else self._default_timeout_ms
        if timeout_ms is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout_ms / 1000)

        logger.debug("Sending %s %s", request.method, url)
        try:
            async with self._get_session().request(request.method, url, **kwargs) as resp:
                text = await resp.text()
                resp_headers: dict[str, str] = {}
                for name, value in resp.headers.items():
                    # repeated headers such as Set-Cookie are joined, not dropped
                    resp_headers[name] = f"{resp_headers[name]}, {value}" if name in resp_headers else value
                response = Response(
                    url=str(resp.url),
                    status=resp.status,
                    reason=resp.reason,
                    headers=resp_headers,
                    text=text,
                )
        except aiohttp.InvalidURL as exc:
            raise BadUrl(url) from exc
        except asyncio.TimeoutError as exc:
            raise Timeout(f"Request to {url} timed out after {timeout_ms}ms") from exc
        except aiohttp.ClientError as exc:
            raise NetworkError(f"Request to {url} failed: {exc}") from exc

        logger.debug("Received %s from %s %s", response.status, request.method, url)
        return request.expect(response)

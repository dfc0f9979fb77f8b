from __future__ import annotations

import logging
from typing import Any, Callable

from xsrf_client.config import XsrfClientSettings
from xsrf_client.cookie_token import extract_token
from xsrf_client.expect import Response, expect_string
from xsrf_client.request import Body, Header, HttpRequest, RequestSpec, build_request, empty_body, get, post, put
from xsrf_client.transport import AiohttpTransport

logger = logging.getLogger(__name__)


class XsrfClient:
    """Reads the XSRF token from a cookie source and sends decorated requests."""

    def __init__(
        self,
        settings: XsrfClientSettings | None = None,
        *,
        cookie_source: Any = None,
        transport: AiohttpTransport | None = None,
    ) -> None:
        self.settings = settings or XsrfClientSettings()
        self.cookie_source = cookie_source if cookie_source is not None else self.settings.cookie
        self._transport = transport or AiohttpTransport(
            base_url=self.settings.base_url_str,
            default_timeout_ms=self.settings.timeout_ms,
        )
        self._owns_transport = transport is None

    async def __aenter__(self) -> XsrfClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    @property
    def token(self) -> str | None:
        token = extract_token(self.settings.cookie_name, self.cookie_source)
        if token is None:
            logger.debug(
                "No %s cookie available; sending empty %s header",
                self.settings.cookie_name,
                self.settings.header_name,
            )
        return token

    def cancel(self, tracker: str) -> int:
        return self._transport.cancel(tracker)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: list[Header] | None = None,
        body: Body | None = None,
        expect: Callable[[Response], Any] | None = None,
        timeout: float | None = None,
        tracker: str | None = None,
    ) -> Any:
        spec = RequestSpec(
            method=method,
            headers=headers or [],
            url=url,
            body=body or empty_body(),
            expect=expect or expect_string(),
            timeout=timeout,
            tracker=tracker,
            xsrf_header_name=self.settings.header_name,
            xsrf_token=self.token,
        )
        return await self._transport.send(build_request(spec))

    async def get(self, url: str, expect: Callable[[Response], Any] | None = None) -> Any:
        return await self._send(get(url, expect or expect_string(), self.settings.header_name, self.token))

    async def post(self, url: str, body: Body, expect: Callable[[Response], Any] | None = None) -> Any:
        return await self._send(post(url, body, expect or expect_string(), self.settings.header_name, self.token))

    async def put(self, url: str, body: Body, expect: Callable[[Response], Any] | None = None) -> Any:
        return await self._send(put(url, body, expect or expect_string(), self.settings.header_name, self.token))

    async def _send(self, request: HttpRequest) -> Any:
        return await self._transport.send(request)

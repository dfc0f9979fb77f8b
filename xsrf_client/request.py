from __future__ import annotations

import json
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from xsrf_client.expect import Response

Header = tuple[str, str]


class Body(BaseModel):
    """Request payload descriptor."""

    model_config = ConfigDict(frozen=True)

    content_type: str | None = None
    content: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.content is None


def empty_body() -> Body:
    return Body()


def string_body(content_type: str, text: str) -> Body:
    return Body(content_type=content_type, content=text)


def json_body(value: Any) -> Body:
    return Body(content_type="application/json", content=json.dumps(value))


class HttpRequest(BaseModel):
    """Request description executed by a transport."""

    model_config = ConfigDict(frozen=True)

    method: str
    headers: list[Header] = Field(default_factory=list)
    url: str
    body: Body = Field(default_factory=Body)
    expect: Callable[[Response], Any]
    timeout: float | None = None
    tracker: str | None = None


class RequestSpec(BaseModel):
    """Everything needed to build an XSRF-decorated request."""

    model_config = ConfigDict(frozen=True)

    method: str
    headers: list[Header] = Field(default_factory=list)
    url: str
    body: Body = Field(default_factory=Body)
    expect: Callable[[Response], Any]
    timeout: float | None = None
    tracker: str | None = None
    xsrf_header_name: str
    xsrf_token: str | None = None


def build_request(spec: RequestSpec) -> HttpRequest:
    """
    Prepend the XSRF header to ``spec.headers`` and build the transport request.

    A missing token is sent as an empty header value rather than failing.
    """
    token_header = (spec.xsrf_header_name, spec.xsrf_token if spec.xsrf_token is not None else "")
    return HttpRequest(
        method=spec.method,
        headers=[token_header, *spec.headers],
        url=spec.url,
        body=spec.body,
        expect=spec.expect,
        timeout=spec.timeout,
        tracker=spec.tracker,
    )


def get(
    url: str,
    expect: Callable[[Response], Any],
    xsrf_header_name: str,
    xsrf_token: str | None = None,
) -> HttpRequest:
    return build_request(
        RequestSpec(
            method="GET",
            url=url,
            body=empty_body(),
            expect=expect,
            xsrf_header_name=xsrf_header_name,
            xsrf_token=xsrf_token,
        )
    )


def post(
    url: str,
    body: Body,
    expect: Callable[[Response], Any],
    xsrf_header_name: str,
    xsrf_token: str | None = None,
) -> HttpRequest:
    return build_request(
        RequestSpec(
            method="POST",
            url=url,
            body=body,
            expect=expect,
            xsrf_header_name=xsrf_header_name,
            xsrf_token=xsrf_token,
        )
    )


def put(
    url: str,
    body: Body,
    expect: Callable[[Response], Any],
    xsrf_header_name: str,
    xsrf_token: str | None = None,
) -> HttpRequest:
    return build_request(
        RequestSpec(
            method="PUT",
            url=url,
            body=body,
            expect=expect,
            xsrf_header_name=xsrf_header_name,
            xsrf_token=xsrf_token,
        )
    )

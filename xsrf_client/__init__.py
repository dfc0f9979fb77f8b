from xsrf_client.client import XsrfClient
from xsrf_client.config import XsrfClientSettings
from xsrf_client.cookie_token import extract_token
from xsrf_client.errors import BadBody, BadStatus, BadUrl, Cancelled, HttpError, NetworkError, Timeout
from xsrf_client.expect import Response, expect_json, expect_string, expect_whatever
from xsrf_client.request import (
    Body,
    HttpRequest,
    RequestSpec,
    build_request,
    empty_body,
    get,
    json_body,
    post,
    put,
    string_body,
)
from xsrf_client.transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "BadBody",
    "BadStatus",
    "BadUrl",
    "Body",
    "Cancelled",
    "HttpError",
    "HttpRequest",
    "NetworkError",
    "RequestSpec",
    "Response",
    "Timeout",
    "XsrfClient",
    "XsrfClientSettings",
    "build_request",
    "empty_body",
    "expect_json",
    "expect_string",
    "expect_whatever",
    "extract_token",
    "get",
    "json_body",
    "post",
    "put",
    "string_body",
]

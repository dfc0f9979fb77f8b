from __future__ import annotations


class HttpError(RuntimeError):
    """Base class for failures surfaced while sending a request."""


class BadUrl(HttpError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid request URL: {url}")
        self.url = url


class Timeout(HttpError):
    pass


class NetworkError(HttpError):
    pass


class Cancelled(HttpError):
    def __init__(self, tracker: str) -> None:
        super().__init__(f"Request cancelled: {tracker}")
        self.tracker = tracker


class BadStatus(HttpError):
    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"Request failed: {status} {body}".rstrip())
        self.status = status
        self.body = body


class BadBody(HttpError):
    pass

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xsrf_client.errors import BadBody, BadStatus

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class Response(BaseModel):
    """A completed response as handed to a response handler."""

    model_config = ConfigDict(frozen=True)

    url: str
    status: int
    reason: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


ResponseHandler = Callable[[Response], T]


def _check_status(response: Response) -> None:
    if not response.ok:
        raise BadStatus(response.status, response.text)


def expect_string() -> ResponseHandler[str]:
    def handler(response: Response) -> str:
        _check_status(response)
        return response.text

    return handler


def expect_whatever() -> ResponseHandler[None]:
    def handler(response: Response) -> None:
        _check_status(response)

    return handler


def expect_json(model: type[M] | None = None) -> ResponseHandler[Any]:
    """Decode the body as JSON, validating into ``model`` when given."""

    def handler(response: Response) -> Any:
        _check_status(response)
        try:
            if model is not None:
                return model.model_validate_json(response.text)
            return json.loads(response.text)
        except (ValueError, ValidationError) as exc:
            raise BadBody(f"Could not decode response from {response.url}: {exc}") from exc

    return handler

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from xsrf_client.config import XsrfClientSettings

logger = logging.getLogger(__name__)


class CookieEnvelope(BaseModel):
    """Structured cookie source: anything carrying a string ``cookie`` field."""

    model_config = ConfigDict(from_attributes=True, extra="ignore", frozen=True)

    cookie: StrictStr


def raw_cookie(source: Any) -> str | None:
    """Return the cookie text of a plain or structured source, or None."""
    if isinstance(source, str):
        return source
    try:
        return CookieEnvelope.model_validate(source).cookie
    except ValidationError as exc:
        logger.debug("Cookie source has no usable cookie field (%d error(s))", exc.error_count())
    return None


def extract_token(name: str, source: Any) -> str | None:
    """
    Extract the value of cookie ``name`` from ``source``.

    ``name`` includes its trailing separator, e.g. ``"XSRF-TOKEN="``:

        >>> extract_token("XSRF-TOKEN=", "A=1;XSRF-TOKEN=abc123;B=2")
        'abc123'

    Entries are not stripped, so ``"A=1; XSRF-TOKEN=x"`` only matches
    ``" XSRF-TOKEN="``. The first matching entry wins.
    """
    cookies = raw_cookie(source)
    if cookies is None:
        return None

    for entry in cookies.split(";"):
        if entry.startswith(name):
            return entry[len(name):]

    logger.debug("No cookie entry starts with %r", name)
    return None


def extract_token_from_settings(source: Any = None, settings: XsrfClientSettings | None = None) -> str | None:
    """Extract the configured token cookie, falling back to the configured cookie string."""
    settings = settings or XsrfClientSettings()
    if source is None:
        source = settings.cookie
    return extract_token(settings.cookie_name, source)

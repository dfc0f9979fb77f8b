from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from xsrf_client.client import XsrfClient
from xsrf_client.config import XsrfClientSettings
from xsrf_client.cookie_token import extract_token_from_settings
from xsrf_client.errors import HttpError
from xsrf_client.request import Body, empty_body, json_body, string_body


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_settings(**overrides: Any) -> XsrfClientSettings:
    load_dotenv()
    base_settings = XsrfClientSettings()
    update = {key: value for key, value in overrides.items() if value is not None}
    try:
        return XsrfClientSettings.model_validate({**base_settings.model_dump(), **update})
    except ValidationError as exc:
        raise click.ClickException(f"Invalid settings: {exc}") from exc


async def _fetch(settings: XsrfClientSettings, method: str, url: str, body: Body, tracker: str | None) -> str:
    async with XsrfClient(settings) as client:
        return await client.request(method, url, body=body, tracker=tracker)


@click.group()
def cli() -> None:
    """XSRF token helper CLI."""


@cli.command(name="token", help="Print the XSRF token found in a cookie string")
@click.option("--cookie", help="Raw cookie string (default: XSRF_COOKIE / XSRF_CLIENT_COOKIE)")
@click.option("--name", "cookie_name", help="Cookie name including '=' (default: XSRF-TOKEN=)")
def show_token(cookie: str | None, cookie_name: str | None) -> None:
    settings = _load_settings(cookie=cookie, cookie_name=cookie_name)
    token = extract_token_from_settings(settings=settings)
    if token is None:
        raise click.ClickException(f"No {settings.cookie_name} cookie found")
    click.echo(token)


@cli.command(name="fetch", help="Send an XSRF-decorated request and print the response body")
@click.argument("url")
@click.option(
    "--method",
    "-X",
    type=click.Choice(["GET", "POST", "PUT"], case_sensitive=False),
    default="GET",
    show_default=True,
)
@click.option("--data", "-d", help="Request body.")
@click.option("--json", "as_json", is_flag=True, help="Send --data as application/json.")
@click.option("--cookie", help="Raw cookie string to read the token from.")
@click.option("--header-name", help="XSRF header name (default: X-XSRF-TOKEN)")
@click.option(
    "--timeout-ms",
    type=click.FloatRange(min=0, min_open=True),
    help="Request timeout in milliseconds.",
)
@click.option("--tracker", help="Tracker name attached to the request.")
@click.option("--log-level", help="Log level (default: INFO)")
def fetch(
    url: str,
    method: str,
    data: str | None,
    as_json: bool,
    cookie: str | None,
    header_name: str | None,
    timeout_ms: float | None,
    tracker: str | None,
    log_level: str | None,
) -> None:
    settings = _load_settings(cookie=cookie, header_name=header_name, timeout_ms=timeout_ms, log_level=log_level)
    _configure_logging(settings.log_level)

    if data is None:
        body = empty_body()
    elif as_json:
        try:
            body = json_body(json.loads(data))
        except ValueError as exc:
            raise click.BadParameter(f"--data is not valid JSON: {exc}", param_hint="--data") from exc
    else:
        body = string_body("text/plain; charset=utf-8", data)

    try:
        text = asyncio.run(_fetch(settings, method.upper(), url, body, tracker))
    except HttpError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(text)


@cli.command(name="config", help="Print effective configuration from environment")
def show_settings() -> None:
    settings = XsrfClientSettings()
    for field, value in settings.model_dump().items():
        click.echo(f"{field}: {value}")


if __name__ == "__main__":
    cli()

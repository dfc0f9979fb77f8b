import asyncio
import logging
import sys

from pydantic import BaseModel

from xsrf_client import AiohttpTransport, HttpError, expect_json, extract_token, get, json_body, post

# Configure logging
logging.basicConfig(level="INFO")
logger = logging.getLogger(__name__)


class Item(BaseModel):
    id: int
    name: str


async def main(cookies: str) -> None:
    token = extract_token("XSRF-TOKEN=", cookies)
    async with AiohttpTransport(base_url="http://127.0.0.1:8000/api/", default_timeout_ms=5000) as transport:
        try:
            created = await transport.send(
                post("items", json_body({"name": "widget"}), expect_json(Item), "X-XSRF-TOKEN", token)
            )
            logger.info("Created %s", created)
            items = await transport.send(get("items", expect_json(), "X-XSRF-TOKEN", token))
            logger.info("Server has %d item(s)", len(items))
        except HttpError as exc:
            logger.error("Request failed: %s", exc)


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else ""))
    except KeyboardInterrupt:
        sys.exit(0)

from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from resource_url.core.errors import ConfigurationError
from resource_url.tools import (
    escape_path,
    resolve_url,
    sanitize_url,
    unescape_path,
)

logger = logging.getLogger("resource_url.mcp")

mcp = FastMCP("resource-url")


@mcp.tool()
def resolve_url_tool(
    template: str | None = None,
    placeholders: dict[str, Any] | None = None,
    permalink: str | None = None,
    order: str = "longest_first",
) -> dict:
    try:
        return resolve_url(template=template, placeholders=placeholders, permalink=permalink, order=order)
    except ConfigurationError as e:
        logger.warning("resolve_url rejected: %s", e)
        raise


@mcp.tool()
def sanitize_url_tool(url: str) -> dict:
    return sanitize_url(url=url)


@mcp.tool()
def escape_path_tool(path: str) -> dict:
    return escape_path(path=path)


@mcp.tool()
def unescape_path_tool(path: str) -> dict:
    return unescape_path(path=path)


def main() -> None:
    # stdio transport: keep stray log output off the protocol stream
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()

"""CLI entry point for the Medusa MCP server."""

from __future__ import annotations

import asyncio

import uvicorn

from .config import get_settings
from .logging import configure_logging
from .server import build_server, is_http_transport


async def _run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    mcp, app = await build_server(settings)
    if is_http_transport(settings):
        if not app:
            raise RuntimeError(f"HTTP app unavailable for transport={settings.mcp_transport}")
        config = uvicorn.Config(app, host=settings.mcp_host, port=settings.mcp_port)
        server = uvicorn.Server(config)
        await server.serve()
        return
    await mcp.run_stdio_async()


def main() -> None:
    asyncio.run(_run())


if __name__ == "__main__":
    main()

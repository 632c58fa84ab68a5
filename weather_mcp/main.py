"""Process entrypoint: serves the weather MCP server over stdio or streamable HTTP."""

import asyncio
import sys

import uvicorn
from loguru import logger

from weather_mcp.config import Settings
from weather_mcp.infrastructure.logging_setup import setup_logging
from weather_mcp.servers.server_registry import McpServersRegistry


def create_app(registry: McpServersRegistry):
    """Build an ASGI app that forwards lifespan and lazily initializes the registry."""
    inner_app = registry.get_registry().http_app(stateless_http=True)

    async def app(scope, receive, send):
        if scope["type"] == "lifespan":
            await inner_app(scope, receive, send)
            return
        if not registry.is_initialized:
            await registry.initialize()
        await inner_app(scope, receive, send)

    return app


async def serve_stdio(registry: McpServersRegistry) -> None:
    await registry.initialize()
    logger.info("Weather MCP server running on stdio")
    try:
        await registry.get_registry().run_async(transport="stdio")
    finally:
        await registry.close()


def main() -> None:
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)
    registry = McpServersRegistry(settings)

    try:
        if settings.MCP_TRANSPORT == "stdio":
            asyncio.run(serve_stdio(registry))
        else:
            logger.info(f"Weather MCP server listening on {settings.HOST}:{settings.PORT}")
            uvicorn.run(create_app(registry), host=settings.HOST, port=settings.PORT)
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Liveness endpoint for container orchestration.

Every GET path answers 200 "ok". It carries no data and reports nothing
about govc or vCenter reachability.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


def create_health_app() -> FastAPI:
    app = FastAPI(title="govc-mcp health", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/{path:path}", response_class=PlainTextResponse)
    async def health(path: str) -> str:
        return "ok"

    return app


async def serve_health(port: int, host: str = "0.0.0.0") -> None:
    """
    Serve the liveness endpoint until cancelled.

    A bind failure is logged and returns; it never takes the MCP server
    down with it.
    """
    config = uvicorn.Config(
        create_health_app(),
        host=host,
        port=port,
        # stdout is the MCP transport: no access log, uvicorn logs via the root logger
        access_log=False,
        log_config=None,
        log_level="warning",
    )
    server = uvicorn.Server(config)
    try:
        await server.serve()
    except (OSError, SystemExit) as e:
        # uvicorn exits with SystemExit(1) when it cannot bind
        logger.error(f"Health endpoint failed on port {port}: {e!r}")
        return
    logger.info(f"Health endpoint on port {port} stopped")

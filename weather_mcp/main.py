"""HTTP transport: MCP streamable HTTP endpoint (stateless, JSON responses) + health."""
import contextlib
import logging

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.routing import Route

from . import __version__
from .config import settings
from .server import SERVER_NAME, create_server

logger = logging.getLogger(__name__)

MCP_PATH = f"{settings.base_path}/mcp"

mcp_server = create_server()


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # A session manager can only be run once, so each app lifespan gets its own
    app.state.mcp_sessions = StreamableHTTPSessionManager(
        app=mcp_server, json_response=True, stateless=True,
    )
    async with app.state.mcp_sessions.run():
        logger.info(f"MCP endpoint ready at {MCP_PATH}")
        yield


app = FastAPI(title=SERVER_NAME, version=__version__, lifespan=lifespan)


@app.get("/health")
async def health():
    return {"ok": True}


class McpEndpoint:
    """ASGI endpoint handing /mcp requests to the session manager."""

    async def __call__(self, scope, receive, send):
        if settings.verbose_logs:
            logger.info(f"{scope['method']} {scope['path']}")
        await scope["app"].state.mcp_sessions.handle_request(scope, receive, send)


# POST only: no SSE stream (GET) and no sessions to terminate (DELETE)
app.router.routes.append(Route(MCP_PATH, endpoint=McpEndpoint(), methods=["POST"]))

"""HTTP transport for the tool server.

One route, `/`:
    GET  /  -> server status and tool names (HEAD answers the same)
    POST /  -> {"method": "tools/list"} or
               {"method": "tools/call", "params": {"name": ..., "arguments": {...}}}

Status codes:
    200  success, including soft tool failures
    400  body is not JSON, not an object, or not a known method / call shape
    500  the dispatcher raised a fault (unknown tool, bad arguments, tool crash)

Example:
    >>> app = create_http_app()
    >>> uvicorn.run(app, port=8787)
"""

from __future__ import annotations

import logging
from typing import Any

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ...foundation.config import RagBlogSettings, get_settings
from ...foundation.errors import DispatchFault, TransportError
from ...foundation.registry import ToolRegistry
from ...tools import build_registry
from .bridge import LIST_TOOLS, RpcRequest, call_envelope, parse_request
from .dispatcher import Dispatcher

logger = logging.getLogger("ragblog.server")


class HTTPToolServer:
    """Starlette front end for a `Dispatcher`."""

    __slots__ = ("_dispatcher", "_name", "_version", "_app")

    def __init__(self, dispatcher: Dispatcher, *, name: str = "RAG Blog MCP Server", version: str = "1.0.0") -> None:
        self._dispatcher = dispatcher
        self._name = name
        self._version = version
        self._app = Starlette(routes=[Route("/", self._route, methods=["GET", "POST"])])

    @property
    def name(self) -> str:
        return self._name

    @property
    def app(self) -> Starlette:
        """ASGI app, for uvicorn or embedding."""
        return self._app

    def status(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "version": self._version,
            "status": "running",
            "capabilities": self._dispatcher.registry.names,
        }

    async def _route(self, request: Request) -> JSONResponse:
        if request.method in ("GET", "HEAD"):
            return JSONResponse(self.status())
        return await self._handle_post(request)

    async def _handle_post(self, request: Request) -> JSONResponse:
        try:
            rpc = parse_request(await request.body())
        except TransportError as e:
            logger.info(f"Rejected request: {e.message}")
            return JSONResponse({"error": e.to_dict()}, status_code=400)

        try:
            if rpc.method == LIST_TOOLS:
                payload: dict[str, Any] = {"tools": [d.to_wire() for d in self._dispatcher.list_tools()]}
            else:
                result = await self._dispatcher.invoke(call_envelope(rpc))
                payload = result.to_wire()
        except TransportError as e:
            logger.info(f"Rejected request: {e.message}")
            return self._respond(rpc, {"error": e.to_dict()}, 400)
        except DispatchFault as e:
            logger.warning(f"{rpc.method} fault {int(e.code)}: {e.message}")
            return self._respond(rpc, {"error": e.to_dict()}, 500)

        return self._respond(rpc, payload)

    @staticmethod
    def _respond(rpc: RpcRequest, payload: dict[str, Any], status_code: int = 200) -> JSONResponse:
        if rpc.id is not None:
            payload = {"jsonrpc": "2.0", "id": rpc.id, **payload}
        return JSONResponse(payload, status_code=status_code)


def create_http_app(registry: ToolRegistry | None = None, *, settings: RagBlogSettings | None = None) -> Starlette:
    """Build the ASGI app, constructing the default registry when none is given."""
    settings = settings or get_settings()
    registry = registry if registry is not None else build_registry(settings=settings)
    server = HTTPToolServer(Dispatcher(registry), name=settings.server.name, version=settings.server.version)
    return server.app


def serve_http(
    registry: ToolRegistry | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
    settings: RagBlogSettings | None = None,
) -> None:
    """Start the HTTP server (blocking)."""
    settings = settings or get_settings()
    app = create_http_app(registry, settings=settings)
    host = host or settings.server.host
    port = port or settings.server.port
    logger.info(f"{settings.server.name} v{settings.server.version} listening on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=settings.logging.level.lower())

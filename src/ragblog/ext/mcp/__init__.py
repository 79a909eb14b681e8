"""MCP-style tool server: envelopes, dispatcher and HTTP transport.

Example:
    >>> from ragblog.ext.mcp import create_http_app
    >>> app = create_http_app()
"""

from .bridge import CALL_TOOL, LIST_TOOLS, RpcRequest, call_envelope, parse_request
from .dispatcher import Dispatcher
from .envelope import TextContent, ToolCallEnvelope, ToolResultEnvelope
from .server import HTTPToolServer, create_http_app, serve_http

__all__ = [
    "ToolCallEnvelope", "ToolResultEnvelope", "TextContent",
    "RpcRequest", "parse_request", "call_envelope", "LIST_TOOLS", "CALL_TOOL",
    "Dispatcher", "HTTPToolServer", "create_http_app", "serve_http",
]

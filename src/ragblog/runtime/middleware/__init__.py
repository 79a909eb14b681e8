"""Middleware chain around tool execution."""

from .middleware import Context, Middleware, Next, compose
from .plugins import LoggingMiddleware

__all__ = ["Context", "Middleware", "Next", "compose", "LoggingMiddleware"]

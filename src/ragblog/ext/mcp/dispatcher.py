"""Tool-call dispatch with a two-tier error model.

Hard tier: `DispatchFault`s replace the result envelope.
    - unknown tool            -> MethodNotFound
    - bad arguments           -> InvalidParams (also when a handler raises InvalidArgument)
    - anything else, plain tools -> InternalError("Tool execution failed: ...")

Soft tier: tools whose metadata sets `failure_prefix` report every other
exception as a normal envelope whose text is "<prefix>: <message>".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ...foundation.errors import InternalError, InvalidArgument, InvalidParams, MethodNotFound, ToolException
from ...foundation.registry import ToolDescriptor, ToolRegistry
from ...runtime.middleware import Context, LoggingMiddleware, Middleware, compose
from .envelope import ToolCallEnvelope, ToolResultEnvelope

logger = logging.getLogger("ragblog.dispatch")


def _describe(exc: Exception) -> str:
    if isinstance(exc, ToolException):
        return exc.message
    return str(exc) or type(exc).__name__


class Dispatcher:
    """Routes call envelopes to registered tools.

    Example:
        >>> dispatcher = Dispatcher(build_registry())
        >>> result = await dispatcher.invoke(ToolCallEnvelope(name="get_writing_style"))
        >>> json.loads(result.text())["total_guidelines"]
        5
    """

    __slots__ = ("_registry", "_chain")

    def __init__(self, registry: ToolRegistry, middleware: Sequence[Middleware] | None = None) -> None:
        self._registry = registry
        self._chain = compose(middleware if middleware is not None else (LoggingMiddleware(),))

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> list[ToolDescriptor]:
        return self._registry.list_tools()

    async def invoke(self, envelope: ToolCallEnvelope, ctx: Context | None = None) -> ToolResultEnvelope:
        """Run one tool call.

        Raises:
            MethodNotFound: no enabled tool has this name
            InvalidParams: arguments rejected by the tool's schema or handler
            InternalError: a plain tool failed
        """
        tool = self._registry.get(envelope.name)
        if tool is None or not tool.metadata.enabled:
            raise MethodNotFound(f"Unknown tool: {envelope.name}")

        try:
            params = tool.validate(envelope.arguments)
            text = await self._chain(tool, params, ctx or Context())
        except InvalidArgument as e:
            raise InvalidParams(e.message) from e
        except Exception as e:
            meta = tool.metadata
            if meta.soft_failures:
                logger.debug(f"[{meta.name}] soft failure reported as content: {e!r}")
                return ToolResultEnvelope.of_text(f"{meta.failure_prefix}: {_describe(e)}")
            raise InternalError(f"Tool execution failed: {_describe(e)}") from e

        return ToolResultEnvelope.of_text(text)

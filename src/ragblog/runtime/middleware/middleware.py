"""Core middleware types and chain composition.

Middleware follows continuation-passing style: each middleware receives
the tool, params, context, and a `next` function to call downstream.
"""

from __future__ import annotations

from collections.abc import Coroutine, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from ...foundation.core import BaseTool


@dataclass(slots=True)
class Context:
    """Request-scoped state shared along one tool call.

    Example:
        >>> ctx = Context()
        >>> ctx["request_id"] = 7
        >>> ctx.get("request_id")
        7
    """

    data: dict[str, object] = field(default_factory=dict)

    def __getitem__(self, key: str) -> object:
        return self.data[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: object = None) -> object:
        return self.data.get(key, default)


Next = Callable[["BaseTool[BaseModel]", BaseModel, Context], "Coroutine[Any, Any, str]"]


@runtime_checkable
class Middleware(Protocol):
    """Wraps tool execution for cross-cutting concerns.

    Example:
        >>> class TimingMiddleware:
        ...     async def __call__(self, tool, params, ctx, next):
        ...         start = time.perf_counter()
        ...         result = await next(tool, params, ctx)
        ...         ctx["duration"] = time.perf_counter() - start
        ...         return result
    """

    async def __call__(
        self,
        tool: BaseTool[BaseModel],
        params: BaseModel,
        ctx: Context,
        next: Next,
    ) -> str: ...


def compose(middleware: Sequence[Middleware]) -> Next:
    """Fold middleware around the tool's own `arun` (first = outermost)."""

    async def base(tool: BaseTool[BaseModel], params: BaseModel, ctx: Context) -> str:
        return await tool.arun(params)

    chain: Next = base
    for mw in reversed(middleware):
        def make_wrapper(m: Middleware, nxt: Next) -> Next:
            async def wrapped(tool: BaseTool[BaseModel], params: BaseModel, ctx: Context) -> str:
                return await m(tool, params, ctx, nxt)
            return wrapped
        chain = make_wrapper(mw, chain)

    return chain

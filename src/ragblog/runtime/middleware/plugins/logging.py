"""Logging middleware for tool execution."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

from ....foundation.errors import ToolException
from ..middleware import Context, Next

if TYPE_CHECKING:
    from ....foundation.core import BaseTool

logger = logging.getLogger("ragblog.middleware")


@dataclass(slots=True)
class LoggingMiddleware:
    """Log tool execution with timing and outcome.

    INFO for completed calls, WARNING for `ToolException`s (bad arguments,
    collaborator failures), full traceback for anything else. Exceptions are
    always re-raised. Duration is stored in context as 'duration_ms'.

    Args:
        log: Logger instance to use (defaults to ragblog.middleware)
        log_params: Whether to include params in the start line
    """

    log: logging.Logger = field(default_factory=lambda: logger)
    log_params: bool = False

    async def __call__(
        self,
        tool: BaseTool[BaseModel],
        params: BaseModel,
        ctx: Context,
        next: Next,
    ) -> str:
        name = tool.metadata.name
        start = time.perf_counter()

        param_str = f" params={params.model_dump()}" if self.log_params else ""
        self.log.info(f"[{name}] Starting{param_str}")

        try:
            result = await next(tool, params, ctx)
        except ToolException as e:
            ctx["duration_ms"] = duration_ms = (time.perf_counter() - start) * 1000
            self.log.warning(f"[{name}] {e.code} ({duration_ms:.1f}ms): {e.message}")
            raise
        except Exception as e:
            ctx["duration_ms"] = duration_ms = (time.perf_counter() - start) * 1000
            self.log.exception(f"[{name}] EXCEPTION ({duration_ms:.1f}ms): {e}")
            raise

        ctx["duration_ms"] = duration_ms = (time.perf_counter() - start) * 1000
        self.log.info(f"[{name}] OK ({duration_ms:.1f}ms)")
        return result

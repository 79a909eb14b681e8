"""Tests for envelopes and the two-tier dispatch error model."""

from __future__ import annotations

import json
import logging
from typing import ClassVar

import pytest
from pydantic import BaseModel, ValidationError

from ragblog.ext.mcp import Dispatcher, ToolCallEnvelope, ToolResultEnvelope
from ragblog.foundation.core import BaseTool, EmptyParams, ToolMetadata
from ragblog.foundation.errors import (
    CollaboratorFailure,
    FaultCode,
    InternalError,
    InvalidArgument,
    InvalidParams,
    MethodNotFound,
)
from ragblog.foundation.registry import ToolRegistry
from ragblog.runtime.middleware import Context, LoggingMiddleware


class BoomTool(BaseTool[EmptyParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(name="boom", description="Always fails with a plain error")

    def _run(self, params: EmptyParams) -> str:
        raise RuntimeError("boom")


class FlakyRemoteTool(BaseTool[EmptyParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="flaky_remote", description="Fails but reports the failure as text",
        failure_prefix="Error reaching remote",
    )

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def _async_run(self, params: EmptyParams) -> str:
        raise self.error


class CollaboratorTool(BaseTool[EmptyParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(name="collab", description="Plain tool whose collaborator fails")

    async def _async_run(self, params: EmptyParams) -> str:
        raise CollaboratorFailure("upstream down")


class DisabledTool(BaseTool[EmptyParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(name="disabled", description="Registered but switched off",
                                                    enabled=False)

    def _run(self, params: EmptyParams) -> str:
        return "never"


def call(name: str, **arguments: object) -> ToolCallEnvelope:
    return ToolCallEnvelope(name=name, arguments=arguments)


# ─────────────────────────────────────────────────────────────────────────────
# Envelopes
# ─────────────────────────────────────────────────────────────────────────────


def test_call_envelope_defaults_arguments() -> None:
    assert ToolCallEnvelope(name="x").arguments == {}
    assert ToolCallEnvelope.model_validate({"name": "x", "arguments": None}).arguments == {}


@pytest.mark.parametrize("raw", [{"arguments": {}}, {"name": 3}, {"name": "x", "arguments": [1]}])
def test_call_envelope_rejects_bad_shapes(raw: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        ToolCallEnvelope.model_validate(raw)


def test_result_envelope_wire_shape() -> None:
    envelope = ToolResultEnvelope.of_text("hello")
    assert envelope.to_wire() == {"content": [{"type": "text", "text": "hello"}]}
    assert envelope.text() == "hello"


# ─────────────────────────────────────────────────────────────────────────────
# Success paths
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_search_rag_knowledge_result(dispatcher: Dispatcher) -> None:
    result = await dispatcher.invoke(call("search_rag_knowledge", query="gamification", category="qa"))
    payload = json.loads(result.text())
    assert payload["query"] == "gamification"
    assert payload["category"] == "qa"
    assert payload["total_found"] == 1
    assert payload["data_source"] == "embedded_rag_data"
    assert payload["results"][0]["id"] == "q-what"


@pytest.mark.asyncio
async def test_search_defaults_to_all_categories(dispatcher: Dispatcher) -> None:
    payload = json.loads((await dispatcher.invoke(call("search_rag_knowledge", query="gamification"))).text())
    assert payload["category"] == "all"
    assert [r["id"] for r in payload["results"]] == ["q-what", "d-guide"]


@pytest.mark.asyncio
async def test_get_writing_style_without_arguments(dispatcher: Dispatcher) -> None:
    payload = json.loads((await dispatcher.invoke(call("get_writing_style"))).text())
    assert payload["category"] == "all"
    assert payload["total_guidelines"] == 2
    assert [g["id"] for g in payload["style_guidelines"]] == ["s-tone", "s-structure"]


@pytest.mark.asyncio
async def test_get_writing_style_with_category(dispatcher: Dispatcher) -> None:
    payload = json.loads((await dispatcher.invoke(call("get_writing_style", category="tone"))).text())
    assert payload["category"] == "tone"
    assert [g["id"] for g in payload["style_guidelines"]] == ["s-tone"]


# ─────────────────────────────────────────────────────────────────────────────
# Hard faults
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_unknown_tool_is_method_not_found(dispatcher: Dispatcher) -> None:
    with pytest.raises(MethodNotFound) as exc_info:
        await dispatcher.invoke(call("delete_everything"))
    assert exc_info.value.to_dict() == {"code": -32601, "message": "Unknown tool: delete_everything"}


@pytest.mark.parametrize("arguments", [
    {},                                         # missing query
    {"query": "   "},                           # blank after trim
    {"query": "hexad", "category": "podcasts"},  # outside the enum
    {"query": "hexad", "limit": "many"},
    {"query": "hexad", "unexpected": True},
])
@pytest.mark.asyncio
async def test_bad_arguments_are_invalid_params(dispatcher: Dispatcher, arguments: dict[str, object]) -> None:
    with pytest.raises(InvalidParams) as exc_info:
        await dispatcher.invoke(ToolCallEnvelope(name="search_rag_knowledge", arguments=arguments))
    assert exc_info.value.code == FaultCode.INVALID_PARAMS
    assert "search_rag_knowledge" in exc_info.value.message


@pytest.mark.asyncio
async def test_plain_tool_exception_is_internal_error() -> None:
    registry = ToolRegistry()
    registry.register(BoomTool())
    with pytest.raises(InternalError) as exc_info:
        await Dispatcher(registry).invoke(call("boom"))
    assert exc_info.value.message == "Tool execution failed: boom"
    assert exc_info.value.to_dict()["code"] == -32603


@pytest.mark.asyncio
async def test_collaborator_failure_on_plain_tool_escalates() -> None:
    registry = ToolRegistry()
    registry.register(CollaboratorTool())
    with pytest.raises(InternalError, match="upstream down"):
        await Dispatcher(registry).invoke(call("collab"))


@pytest.mark.asyncio
async def test_disabled_tool_is_not_found() -> None:
    registry = ToolRegistry()
    registry.register(DisabledTool())
    with pytest.raises(MethodNotFound):
        await Dispatcher(registry).invoke(call("disabled"))


# ─────────────────────────────────────────────────────────────────────────────
# Soft failures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("error", [CollaboratorFailure("remote timed out"), RuntimeError("remote timed out")])
@pytest.mark.asyncio
async def test_soft_tool_reports_failure_as_content(error: Exception) -> None:
    registry = ToolRegistry()
    registry.register(FlakyRemoteTool(error))
    result = await Dispatcher(registry).invoke(call("flaky_remote"))
    assert result.text() == "Error reaching remote: remote timed out"


@pytest.mark.asyncio
async def test_soft_tool_invalid_argument_is_still_a_fault() -> None:
    registry = ToolRegistry()
    registry.register(FlakyRemoteTool(InvalidArgument("bad url", "flaky_remote")))
    with pytest.raises(InvalidParams, match="bad url"):
        await Dispatcher(registry).invoke(call("flaky_remote"))


# ─────────────────────────────────────────────────────────────────────────────
# Middleware
# ─────────────────────────────────────────────────────────────────────────────


class RecordingMiddleware:
    def __init__(self) -> None:
        self.seen: list[str] = []

    async def __call__(self, tool: BaseTool[BaseModel], params: BaseModel, ctx: Context, next) -> str:  # noqa: A002
        self.seen.append(tool.metadata.name)
        return (await next(tool, params, ctx)).upper()


@pytest.mark.asyncio
async def test_middleware_wraps_tool_execution(registry: ToolRegistry) -> None:
    recorder = RecordingMiddleware()
    result = await Dispatcher(registry, middleware=[recorder]).invoke(call("get_writing_style", category="tone"))
    assert recorder.seen == ["get_writing_style"]
    assert '"CATEGORY": "TONE"' in result.text()


@pytest.mark.asyncio
async def test_logging_middleware_records_duration(
    registry: ToolRegistry, caplog: pytest.LogCaptureFixture,
) -> None:
    ctx = Context()
    with caplog.at_level(logging.INFO, logger="ragblog.middleware"):
        await Dispatcher(registry, middleware=[LoggingMiddleware()]).invoke(call("get_writing_style"), ctx)
    assert "duration_ms" in ctx
    assert "[get_writing_style] OK" in caplog.text


@pytest.mark.asyncio
async def test_logging_middleware_warns_on_tool_exception(caplog: pytest.LogCaptureFixture) -> None:
    registry = ToolRegistry()
    registry.register(FlakyRemoteTool(CollaboratorFailure("remote timed out")))
    with caplog.at_level(logging.WARNING, logger="ragblog.middleware"):
        await Dispatcher(registry).invoke(call("flaky_remote"))
    assert any(r.levelno == logging.WARNING and "remote timed out" in r.getMessage() for r in caplog.records)

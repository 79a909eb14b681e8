"""Translation between raw HTTP bodies and dispatcher types.

Everything that can go wrong before a tool is selected is decided here and
raised as a `TransportError` (HTTP 400).
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from ...foundation.errors import InvalidRequest, ParseError, format_validation_error
from .envelope import ToolCallEnvelope

LIST_TOOLS = "tools/list"
CALL_TOOL = "tools/call"
METHODS = (LIST_TOOLS, CALL_TOOL)


class RpcRequest(BaseModel):
    """A `POST /` body. `jsonrpc` and `id` are optional and only echoed back."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    method: StrictStr
    params: dict[str, Any] | None = None
    id: int | str | None = None


def _issues(exc: ValidationError) -> str:
    return format_validation_error(exc).removeprefix("Invalid parameters: ")


def parse_request(raw: bytes) -> RpcRequest:
    """Decode and shape-check a request body.

    Raises:
        ParseError: body is not JSON
        InvalidRequest: body is not an object, or lacks a known method
    """
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Parse error: {e}") from e
    if not isinstance(body, dict):
        raise InvalidRequest("Invalid request: body must be a JSON object")
    try:
        request = RpcRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequest(f"Invalid request: {_issues(e)}") from e
    if request.method not in METHODS:
        raise InvalidRequest(f"Unknown method: {request.method}")
    return request


def call_envelope(request: RpcRequest) -> ToolCallEnvelope:
    """Extract the tool call from a `tools/call` request.

    Raises:
        InvalidRequest: `params.name` missing or not a string, or `params.arguments` not an object
    """
    try:
        return ToolCallEnvelope.model_validate(request.params or {})
    except ValidationError as e:
        raise InvalidRequest(f"Invalid tools/call params: {_issues(e)}") from e

"""Dispatch and transport faults.

Faults are the hard tier of the error model: they replace a result envelope
instead of travelling inside one. Codes follow JSON-RPC 2.0, which MCP clients
already understand.
"""

from __future__ import annotations

from enum import IntEnum


class FaultCode(IntEnum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class DispatchFault(Exception):
    """Base for every failure that ends a call without a result envelope."""

    code: FaultCode = FaultCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        return {"code": int(self.code), "message": self.message}


class MethodNotFound(DispatchFault):
    code = FaultCode.METHOD_NOT_FOUND


class InvalidParams(DispatchFault):
    code = FaultCode.INVALID_PARAMS


class InternalError(DispatchFault):
    code = FaultCode.INTERNAL_ERROR


class TransportError(DispatchFault):
    """Malformed inbound request, rejected before dispatch (HTTP 400)."""

    code = FaultCode.INVALID_REQUEST


class ParseError(TransportError):
    code = FaultCode.PARSE_ERROR


class InvalidRequest(TransportError):
    code = FaultCode.INVALID_REQUEST

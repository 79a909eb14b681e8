"""Unified error handling for ragblog.

- ErrorCode: Standard error codes for tool failures
- ToolError/ToolException: Structured errors and exceptions raised by handlers
- InvalidArgument/CollaboratorFailure: The two handler-level failure kinds
- DispatchFault and subclasses: Hard faults surfaced by the dispatcher/transport
"""

from .errors import (
    CollaboratorFailure,
    ErrorCode,
    InvalidArgument,
    ToolError,
    ToolException,
    format_validation_error,
)
from .faults import (
    DispatchFault,
    FaultCode,
    InternalError,
    InvalidParams,
    InvalidRequest,
    MethodNotFound,
    ParseError,
    TransportError,
)

__all__ = [
    # Tool errors
    "ErrorCode", "ToolError", "ToolException",
    "format_validation_error", "InvalidArgument", "CollaboratorFailure",
    # Faults
    "FaultCode", "DispatchFault", "MethodNotFound", "InvalidParams", "InternalError",
    "TransportError", "ParseError", "InvalidRequest",
]

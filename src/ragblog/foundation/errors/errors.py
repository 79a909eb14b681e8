"""Standardized error handling for tools.

Provides error codes and structured error responses for agent feedback.
Handlers raise `ToolException` subclasses; the dispatcher decides whether a
failure becomes a fault or a soft, textual result.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ErrorCode(StrEnum):
    """Standard error codes for tool failures."""
    API_KEY_MISSING = "API_KEY_MISSING"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    INVALID_PARAMS = "INVALID_PARAMS"
    PARSE_ERROR = "PARSE_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"


def format_validation_error(exc: ValidationError, *, tool_name: str | None = None) -> str:
    """Flatten a pydantic ValidationError into one line an LLM can act on.

    >>> format_validation_error(err, tool_name="search_rag_knowledge")
    "Invalid parameters for 'search_rag_knowledge': query: Field required"
    """
    issues = "; ".join(
        f"{'.'.join(map(str, e['loc'])) or 'arguments'}: {e['msg']}" for e in exc.errors()
    )
    target = f" for '{tool_name}'" if tool_name else ""
    return f"Invalid parameters{target}: {issues}"


class ToolError(BaseModel):
    """Structured error response for tool failures.

    Attributes:
        tool_name: Name of the tool that failed
        message: Human-readable error message
        code: Machine-readable error code for programmatic handling
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, validate_default=True)

    tool_name: Annotated[str, Field(min_length=1, description="Name of the tool that produced the error")]
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(default=ErrorCode.EXTERNAL_SERVICE_ERROR, description="Machine-readable error classification")


class ToolException(Exception):
    """Exception wrapping a ToolError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: ToolError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class InvalidArgument(ToolException):
    """Malformed or missing tool argument, or a disallowed scrape target.

    Always surfaced to the caller as a fault; never rendered as soft content.
    """

    def __init__(self, message: str, tool_name: str = "ragblog") -> None:
        super().__init__(ToolError(
            tool_name=tool_name, message=message,
            code=ErrorCode.INVALID_PARAMS,
        ))


class CollaboratorFailure(ToolException):
    """Network or API failure from an external dependency (fetch, search API)."""

    def __init__(
        self,
        message: str,
        tool_name: str = "ragblog",
        code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
    ) -> None:
        super().__init__(ToolError(tool_name=tool_name, message=message, code=code))

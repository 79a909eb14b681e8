"""Foundation layer: tool base types, registry, errors and configuration."""

from .config import RagBlogSettings, SearchCredentials, get_settings
from .core import BaseTool, ConfigurableTool, EmptyParams, ToolConfig, ToolMetadata
from .errors import (
    CollaboratorFailure,
    DispatchFault,
    ErrorCode,
    InternalError,
    InvalidArgument,
    InvalidParams,
    MethodNotFound,
    ToolError,
    ToolException,
)
from .registry import ToolDescriptor, ToolRegistry

__all__ = [
    "BaseTool", "ConfigurableTool", "ToolConfig", "ToolMetadata", "EmptyParams",
    "ToolRegistry", "ToolDescriptor",
    "ErrorCode", "ToolError", "ToolException", "InvalidArgument", "CollaboratorFailure",
    "DispatchFault", "MethodNotFound", "InvalidParams", "InternalError",
    "RagBlogSettings", "SearchCredentials", "get_settings",
]

"""Core tool abstractions.

- BaseTool: Base class for all tools
- ConfigurableTool/ToolConfig: Tools with instance-level configuration
- ToolMetadata: Tool name, description and failure convention
- EmptyParams: Default parameter schema for parameterless tools
"""

from .base import BaseTool, ConfigurableTool, EmptyParams, ToolConfig, ToolMetadata

__all__ = ["BaseTool", "ConfigurableTool", "ToolConfig", "ToolMetadata", "EmptyParams"]

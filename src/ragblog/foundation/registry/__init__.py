"""Tool registry and descriptor generation."""

from .registry import RegistryFrozenError, ToolRegistry
from .schema import ToolDescriptor, get_input_schema, tool_descriptor

__all__ = ["ToolRegistry", "RegistryFrozenError", "ToolDescriptor", "tool_descriptor", "get_input_schema"]

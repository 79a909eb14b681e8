"""Bridge between BaseTool parameter models and published tool descriptors.

Converts pydantic parameter schemas into the plain JSON Schema shape MCP
clients expect in `tools/list`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..core import BaseTool


class ToolDescriptor(BaseModel):
    """Published description of one invocable tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


def _clean_property(prop: dict[str, object]) -> dict[str, object]:
    """Strip pydantic-specific metadata and collapse `X | None` to `X`."""
    cleaned = {k: v for k, v in prop.items() if k != "title"}
    if (variants := cleaned.pop("anyOf", None)) is not None:
        concrete = [v for v in variants if v.get("type") != "null"]  # type: ignore[union-attr]
        if len(concrete) == 1:
            cleaned = {**concrete[0], **cleaned}
        else:
            cleaned["anyOf"] = concrete
    if cleaned.get("default", ...) is None:
        del cleaned["default"]
    return cleaned


def get_tool_properties(tool: BaseTool[BaseModel]) -> dict[str, dict[str, object]]:
    """Extract cleaned property definitions."""
    properties = tool.params_schema.model_json_schema().get("properties", {})
    return {name: _clean_property(prop) for name, prop in properties.items()}


def get_required_params(tool: BaseTool[BaseModel]) -> list[str]:
    """Get list of required parameter names."""
    return list(tool.params_schema.model_json_schema().get("required", []))


def get_input_schema(tool: BaseTool[BaseModel]) -> dict[str, object]:
    """JSON Schema for a tool's arguments; `required` only appears when non-empty."""
    schema: dict[str, object] = {"type": "object", "properties": get_tool_properties(tool)}
    if required := get_required_params(tool):
        schema["required"] = required
    return schema


def tool_descriptor(tool: BaseTool[BaseModel]) -> ToolDescriptor:
    return ToolDescriptor(
        name=tool.metadata.name,
        description=tool.metadata.description,
        input_schema=get_input_schema(tool),
    )

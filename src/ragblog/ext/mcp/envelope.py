"""Request and result envelopes for tool calls.

Wire shapes:
    call   {"name": "search_rag_knowledge", "arguments": {"query": "hexad"}}
    result {"content": [{"type": "text", "text": "..."}]}
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolCallEnvelope(BaseModel):
    """An inbound request to run one tool. Missing or null arguments mean `{}`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr = Field(..., min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _none_is_empty(cls, v: object) -> object:
        return {} if v is None else v


class ToolResultEnvelope(BaseModel):
    """Outcome of a successful call. Soft failures also travel in this shape."""

    model_config = ConfigDict(frozen=True)

    content: list[TextContent]

    @classmethod
    def of_text(cls, text: str) -> ToolResultEnvelope:
        return cls(content=[TextContent(text=text)])

    def text(self) -> str:
        return "".join(part.text for part in self.content)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

"""Central registry for tool discovery.

The registry provides:
- Tool registration and lookup by name
- Order-stable descriptor listing for `tools/list`
- Freezing, after which the tool set is read-only configuration
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from ..core import BaseTool
from .schema import ToolDescriptor, tool_descriptor


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry that has been frozen."""


class ToolRegistry:
    """Registry of the tools a server exposes.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(SearchKnowledgeTool(engine))
        >>> registry.freeze()
        >>> [d.name for d in registry.list_tools()]
        ['search_rag_knowledge']
    """

    __slots__ = ("_tools", "_frozen", "_descriptors")

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}
        self._frozen = False
        self._descriptors: tuple[ToolDescriptor, ...] | None = None

    def register(self, tool: BaseTool[BaseModel]) -> None:
        """Register a tool instance with validation."""
        if self._frozen:
            raise RegistryFrozenError("Registry is frozen; tools are fixed at startup.")
        name = tool.metadata.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered.")
        if len(tool.metadata.description) < 10:
            raise ValueError(f"Tool '{name}' description too short for LLM selection.")
        self._tools[name] = tool
        self._descriptors = None

    def register_all(self, *tools: BaseTool[BaseModel]) -> None:
        for tool in tools:
            self.register(tool)

    def freeze(self) -> ToolRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> BaseTool[BaseModel] | None:
        """Get tool by name."""
        return self._tools.get(name)

    def __getitem__(self, name: str) -> BaseTool[BaseModel]:
        return self._tools[name]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    @property
    def names(self) -> list[str]:
        return [t.metadata.name for t in self if t.metadata.enabled]

    def list_tools(self) -> list[ToolDescriptor]:
        """Descriptors for all enabled tools, in registration order."""
        if self._descriptors is None:
            self._descriptors = tuple(tool_descriptor(t) for t in self if t.metadata.enabled)
        return list(self._descriptors)

    def __repr__(self) -> str:
        return f"ToolRegistry({', '.join(self._tools)})"

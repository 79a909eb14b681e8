"""Core tool abstractions: BaseTool, ToolMetadata, ToolConfig.

Tools are defined by subclassing BaseTool with a typed pydantic parameter
schema. A tool returns a string (usually a JSON document) for LLM consumption
and signals failure by raising a `ToolException` subclass.
"""

from __future__ import annotations

import asyncio
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidArgument, format_validation_error


class ToolMetadata(BaseModel):
    """Metadata describing a tool.

    Attributes:
        name: Unique identifier (snake_case, e.g., "search_internet")
        description: What the tool does (shown to LLM for selection)
        category: Grouping category (e.g., "knowledge", "web")
        failure_prefix: When set, the tool reports its own failures as
            result text ("<prefix>: <message>") instead of dispatch faults
        enabled: Whether tool is currently active
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)
    category: str = Field(default="general")
    failure_prefix: str | None = Field(default=None)
    enabled: bool = Field(default=True)

    @property
    def soft_failures(self) -> bool:
        return self.failure_prefix is not None


class EmptyParams(BaseModel):
    """Default parameter schema for tools with no required inputs."""
    pass


TParams = TypeVar("TParams", bound=BaseModel)
TConfig = TypeVar("TConfig", bound="ToolConfig")


class BaseTool(Generic[TParams]):
    """Base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the Pydantic model type
    - Implement `_run(params)` or, for I/O-bound tools, `_async_run(params)`

    Example:
        >>> class EchoParams(BaseModel):
        ...     text: str = Field(..., description="Text to echo")
        ...
        >>> class EchoTool(BaseTool[EchoParams]):
        ...     metadata = ToolMetadata(name="echo", description="Echo the given text back")
        ...     params_schema = EchoParams
        ...
        ...     def _run(self, params: EchoParams) -> str:
        ...         return params.text
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]] = EmptyParams

    def _invalid(self, message: str) -> InvalidArgument:
        return InvalidArgument(message, self.metadata.name)

    def validate(self, arguments: dict[str, object]) -> TParams:
        """Build the parameter model from a raw argument bag.

        Raises:
            InvalidArgument: arguments do not satisfy the schema
        """
        try:
            return self.params_schema.model_validate(arguments)  # type: ignore[return-value]
        except ValidationError as e:
            raise self._invalid(format_validation_error(e, tool_name=self.metadata.name)) from e

    def _run(self, params: TParams) -> str:
        """Execute the tool synchronously. Return a string for LLM consumption."""
        raise NotImplementedError(f"{type(self).__name__} implements neither _run nor _async_run")

    async def _async_run(self, params: TParams) -> str:
        """Execute the tool asynchronously.

        Default implementation wraps `_run` in a thread. Override for
        native async implementations (e.g., httpx calls).
        """
        return await asyncio.to_thread(self._run, params)

    async def arun(self, params: TParams) -> str:
        """Execute with already-validated parameters."""
        return await self._async_run(params)

    async def acall(self, **kwargs: object) -> str:
        """Validate keyword arguments and execute."""
        return await self.arun(self.validate(kwargs))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.metadata.name!r}>"


class ToolConfig(BaseModel):
    """Base configuration for configurable tools.

    Subclass this to define tool-specific, instance-level settings that are
    distinct from per-call parameters.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class ConfigurableTool(BaseTool[TParams], Generic[TParams, TConfig]):
    """Base class for tools with instance-level configuration.

    Separates tool parameters (per-call inputs) from configuration
    (allow-lists, user agents, limits).
    """

    config_class: ClassVar[type[ToolConfig]] = ToolConfig

    def __init__(self, config: TConfig | None = None) -> None:
        self._config: TConfig = config or self.config_class()  # type: ignore[assignment]

    @property
    def config(self) -> TConfig:
        """Current configuration (read-only access)."""
        return self._config

"""Static descriptors for the tools, resources and prompts this server declares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from weather_mcp.prompts import PromptArgument, PromptDefinition
from weather_mcp.schemas.weather import UnitSystem


@dataclass(frozen=True, slots=True)
class ToolParameter:
    name: str
    description: str
    required: bool = False
    choices: tuple[str, ...] = ()
    default: str | None = None

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "string", "description": self.description}
        if self.choices:
            schema["enum"] = list(self.choices)
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    name: str
    title: str
    description: str
    parameters: tuple[ToolParameter, ...]

    def parameter(self, name: str) -> ToolParameter:
        for param in self.parameters:
            if param.name == name:
                return param
        raise KeyError(f"{self.name} has no parameter {name!r}")

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, as advertised to MCP hosts."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }


@dataclass(frozen=True, slots=True)
class ResourceDescriptor:
    uri: str
    name: str
    description: str
    mime_type: str = "application/json"


@dataclass(frozen=True, slots=True)
class PromptDescriptor:
    name: str
    title: str
    description: str
    arguments: tuple[PromptArgument, ...]

    @classmethod
    def from_definition(cls, definition: PromptDefinition) -> PromptDescriptor:
        return cls(
            name=definition.name,
            title=definition.title,
            description=definition.description,
            arguments=definition.arguments,
        )


@dataclass(frozen=True, slots=True)
class Invocation:
    """A validated tool invocation, with defaults applied."""

    tool: str
    place: str
    units: UnitSystem

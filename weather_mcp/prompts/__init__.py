"""
Prompt definitions registry.

Local prompt templates are the source of truth. Each prompt module calls
register_prompt() to add its definition to PROMPT_REGISTRY, which the
prompt server and the capability catalog read at startup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PromptArgument:
    name: str
    description: str
    required: bool = True


@dataclass(frozen=True, slots=True)
class PromptDefinition:
    """A local prompt template with its MCP metadata."""

    # Identity
    name: str

    # Content
    template_text: str

    # MCP metadata
    title: str = ""
    description: str = ""
    arguments: tuple[PromptArgument, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def variables(self) -> list[str]:
        """Extract {{variable_name}} placeholders from template text."""
        return re.findall(r"\{\{(\w+)\}\}", self.template_text)

    def render(self, **kwargs: str) -> str:
        """Substitute {{variable}} placeholders with provided values."""
        text = self.template_text
        for var_name in self.variables:
            placeholder = "{{" + var_name + "}}"
            if var_name in kwargs:
                text = text.replace(placeholder, kwargs[var_name])
        return text


# Global registry: name -> PromptDefinition
PROMPT_REGISTRY: dict[str, PromptDefinition] = {}


def register_prompt(definition: PromptDefinition) -> PromptDefinition:
    """Register a prompt definition. Called at module import time."""
    if definition.name in PROMPT_REGISTRY:
        raise ValueError(f"Duplicate prompt name: {definition.name!r}")
    PROMPT_REGISTRY[definition.name] = definition
    return definition


def get_prompt(name: str) -> PromptDefinition:
    """Look up a registered prompt definition by name."""
    try:
        return PROMPT_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown prompt: {name!r}") from None

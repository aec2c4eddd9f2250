"""
Tool Registry - Name-keyed mapping from tool name to handler.

Lifecycle:
    1. Registration: tools are registered once at startup. Registering a name
       twice replaces the earlier tool (last registration wins).
    2. Serving: the registry is sealed and only read from then on.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .schemas import ToolResponse

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when a sealed registry is modified."""
    pass


@dataclass
class ToolContext:
    """Learner context passed to every tool execution. Built per request."""
    learner_level: str = "beginner"
    previous_topics: Set[str] = field(default_factory=set)


class TutorTool:
    """
    Base class for tools.

    Subclasses set `name` (the dispatch key) and implement `execute`. A tool
    may assume its input already matches its declared schema.
    """

    name: str = ""

    async def execute(self, tool_input: Any, ctx: ToolContext) -> ToolResponse:
        raise NotImplementedError


class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, TutorTool] = {}
        self._sealed = False

    def register(self, tool: TutorTool):
        if self._sealed:
            raise RegistryError(f"Cannot register '{tool.name}': registry is sealed")
        if tool.name in self._tools:
            logger.warning("Tool %s registered twice; replacing earlier registration", tool.name)
        self._tools[tool.name] = tool
        logger.debug("Registered tool %s", tool.name)

    def lookup(self, name: str) -> Optional[TutorTool]:
        return self._tools.get(name)

    def seal(self):
        """End the registration phase."""
        self._sealed = True
        logger.info("Tool registry sealed with %d tools: %s", len(self._tools), ", ".join(self.names()))

    @property
    def sealed(self) -> bool:
        return self._sealed

    def names(self) -> List[str]:
        return list(self._tools.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


# ==================== Process-wide Registry ====================

default_registry = ToolRegistry()

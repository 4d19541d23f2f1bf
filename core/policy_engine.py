"""Runtime policy gate.  Every sandboxed tool invocation can be checked here."""

from __future__ import annotations

import logging

from core.path_config import PathConfig
from core.path_registry import REGISTRY, ToolPolicyRegistry

logger = logging.getLogger(__name__)


class ToolForbidden(Exception):
    """Raised when a tool's policy denies execution."""

    def __init__(self, tool: str, config: PathConfig):
        super().__init__(f"'{tool}' is not allowed to be used in the build sandbox")
        self.tool = tool
        self.config = config


class PathPolicyEngine:
    def __init__(self, registry: ToolPolicyRegistry = REGISTRY):
        self.registry = registry

    def decide(self, name: str) -> PathConfig:
        return self.registry.lookup(name)

    def check_invocation(self, name: str) -> PathConfig:
        """Log flagged usage and raise ToolForbidden if the tool is denied."""
        config = self.registry.lookup(name)
        if config.deny_execution:
            if config.log_usage:
                logger.error("disallowed tool invoked: %s", name)
            raise ToolForbidden(name, config)
        if config.log_usage:
            logger.warning("audited tool invoked: %s", name)
        return config

    def symlinked_tools(self) -> list[str]:
        """Names that get a passthrough symlink in the sandboxed PATH."""
        return [name for name, config in self.registry.items() if config.allow_symlink]

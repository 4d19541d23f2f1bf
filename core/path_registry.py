"""Tool policy registry: base table + platform overrides, frozen after build.

The module-level REGISTRY is constructed once at import time for the host
platform. Nothing writes to it afterwards, so concurrent lookups need no
locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, MutableMapping
from types import MappingProxyType

from core.path_config import ALLOWED, CONFIGURATION, MISSING, PathConfig
from core.platform_config import PlatformDetector, PlatformKind

logger = logging.getLogger(__name__)

# Host tools that are safe to pass through on darwin.
DARWIN_HOST_TOOLS = ("sw_vers", "xcrun")


def initialize_platform_overrides(
    entries: MutableMapping[str, PathConfig],
    platform: PlatformKind,
) -> MutableMapping[str, PathConfig]:
    """Patch *entries* in place for *platform* and return it.

    On darwin there are no prebuilts for the linux-only tools, so those fall
    back to the host executable. Every other platform is left untouched.
    Applying the patch a second time changes nothing.
    """
    if platform is not PlatformKind.DARWIN:
        return entries

    for name in DARWIN_HOST_TOOLS:
        entries[name] = ALLOWED

    restricted = [name for name, config in entries.items() if config.platform_restricted]
    for name in restricted:
        entries[name] = ALLOWED
    logger.debug(
        "darwin overrides: %d host tools allowed, %d linux-only prebuilts replaced",
        len(DARWIN_HOST_TOOLS), len(restricted),
    )
    return entries


class ToolPolicyRegistry:
    """Read-only mapping of tool name to PathConfig with a MISSING fallback."""

    def __init__(self, entries: Mapping[str, PathConfig], platform: PlatformKind):
        self._entries = MappingProxyType(dict(entries))
        self.platform = platform

    @property
    def entries(self) -> Mapping[str, PathConfig]:
        return self._entries

    def lookup(self, name: str) -> PathConfig:
        """Exact-match lookup.  Never raises; unknown names get MISSING."""
        return self._entries.get(name, MISSING)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def items(self) -> list[tuple[str, PathConfig]]:
        return sorted(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"ToolPolicyRegistry(platform={self.platform.value}, tools={len(self)})"


def build_registry(platform: PlatformKind) -> ToolPolicyRegistry:
    """Copy the base table, apply overrides for *platform*, freeze the result."""
    entries = initialize_platform_overrides(dict(CONFIGURATION), platform)
    return ToolPolicyRegistry(entries, platform)


REGISTRY = build_registry(PlatformDetector.current())


def get_config(name: str) -> PathConfig:
    return REGISTRY.lookup(name)

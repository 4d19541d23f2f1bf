from __future__ import annotations

import sys
from enum import Enum


class PlatformKind(Enum):
    LINUX = "linux"
    DARWIN = "darwin"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> PlatformKind:
        """Parse a user-supplied platform name such as ``"Darwin"``.

        Raises ValueError for names that are not one of the enum values.
        """
        value = text.strip().lower()
        for kind in cls:
            if kind.value == value:
                return kind
        choices = ", ".join(k.value for k in cls)
        raise ValueError(f"Unknown platform '{text}' (expected one of: {choices})")


class PlatformDetector:
    """Helpers for identifying the host platform family."""

    @staticmethod
    def detect(platform: str) -> PlatformKind:
        """Map a ``sys.platform`` style string onto a PlatformKind.

        Older interpreters report ``linux2``, so only the prefix is checked.
        Anything unrecognised is OTHER, which never triggers overrides.
        """
        value = platform.lower()
        if value.startswith("linux"):
            return PlatformKind.LINUX
        if value == "darwin":
            return PlatformKind.DARWIN
        return PlatformKind.OTHER

    @staticmethod
    def current() -> PlatformKind:
        return PlatformDetector.detect(sys.platform)

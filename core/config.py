"""Load and validate application configuration from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.platform_config import PlatformDetector, PlatformKind

load_dotenv()


@dataclass(frozen=True)
class PlatformSettings:
    # None means detect from the running interpreter.
    override: PlatformKind | None = None


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    platform_settings: PlatformSettings
    log: LoggingConfig

    def platform(self) -> PlatformKind:
        return self.platform_settings.override or PlatformDetector.current()


def _getenv(name: str, default: str | None = None) -> str | None:
    """os.getenv wrapper that strips inline comments (e.g. 'darwin  # mac' → 'darwin')."""
    raw = os.getenv(name, default)
    if raw is None:
        return None
    # Split on first ' #' (space-hash) to drop inline comments, then strip
    return raw.split(" #")[0].strip()


def _platform_override() -> PlatformKind | None:
    value = _getenv("PATH_POLICY_PLATFORM")
    if not value:
        return None
    try:
        return PlatformKind.parse(value)
    except ValueError as exc:
        raise EnvironmentError(f"PATH_POLICY_PLATFORM: {exc}") from exc


def _log_level() -> str:
    level = (_getenv("PATH_POLICY_LOG_LEVEL", "INFO") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise EnvironmentError(f"PATH_POLICY_LOG_LEVEL '{level}' is not a logging level")
    return level


def load_config() -> AppConfig:
    """Build AppConfig from environment. Raises EnvironmentError on bad values."""
    return AppConfig(
        platform_settings=PlatformSettings(override=_platform_override()),
        log=LoggingConfig(level=_log_level()),
    )

"""Environment-backed engine settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "SCRIPT_COMPLETION_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Knobs the host may override through ``SCRIPT_COMPLETION_*`` variables."""

    untitled_stem: str = "Untitled"
    script_extension: str = ".py"
    log_preset: Optional[str] = None
    empty_is_dirty: bool = True

    def __post_init__(self) -> None:
        if not self.untitled_stem:
            raise ValueError("untitled_stem cannot be empty")
        if self.script_extension and not self.script_extension.startswith("."):
            object.__setattr__(self, "script_extension", f".{self.script_extension}")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            untitled_stem=env("UNTITLED_STEM") or "Untitled",
            script_extension=env("SCRIPT_EXTENSION", ".py") or "",
            log_preset=env("LOG_PRESET") or None,
            empty_is_dirty=env_flag("EMPTY_IS_DIRTY", True),
        )


_SETTINGS: Optional[EngineSettings] = None


def load_settings(*, reload: bool = False) -> EngineSettings:
    """Return the process settings, reading the environment on first use."""

    global _SETTINGS
    if _SETTINGS is None or reload:
        _SETTINGS = EngineSettings.from_env()
    return _SETTINGS


__all__ = ["ENV_PREFIX", "EngineSettings", "env", "env_flag", "load_settings"]

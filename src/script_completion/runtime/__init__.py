"""Runtime services: settings and telemetry."""

from .settings import EngineSettings, load_settings

__all__ = ["EngineSettings", "load_settings"]

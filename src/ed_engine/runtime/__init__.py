"""Runtime services: telemetry and session configuration."""

from .config import ENV_PREFIX, SessionConfig
from . import telemetry

__all__ = ["ENV_PREFIX", "SessionConfig", "telemetry"]

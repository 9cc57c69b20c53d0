"""Environment-driven configuration for editing sessions."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

ENV_PREFIX = "ED_ENGINE_"

_TRUTHY = {"1", "true", "yes", "on"}


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(slots=True)
class SessionConfig:
    """Formatting switches for one interpreter session.

    Neither flag changes buffer semantics. ``show_prompt`` controls whether
    ``Ed.get_prompt`` returns ``"*"`` in command mode, ``verbose_errors``
    whether failures carry their message after the ``"?"`` marker.
    """

    show_prompt: bool = True
    verbose_errors: bool = False

    @classmethod
    def from_env(cls, **overrides: bool) -> "SessionConfig":
        config = cls(
            show_prompt=env_flag("SHOW_PROMPT", True),
            verbose_errors=env_flag("VERBOSE_ERRORS", False),
        )
        if overrides:
            config = replace(config, **overrides)
        return config

    def copy(self) -> "SessionConfig":
        return replace(self)


__all__ = ["ENV_PREFIX", "SessionConfig", "env", "env_flag"]

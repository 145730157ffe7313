"""Editor configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "LINE_ENGINE_"

DEFAULT_INITIAL_CAPACITY = 64
INVISIBLE_START = 0x01
INVISIBLE_END = 0x02


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings for one editing session.

    ``invisible_start``/``invisible_end`` bracket prompt bytes that are written
    to the terminal but take up no columns (colour escapes and the like).
    ``max_capacity`` caps buffer growth; ``None`` leaves it unbounded.
    """

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    max_capacity: Optional[int] = None
    invisible_start: int = INVISIBLE_START
    invisible_end: int = INVISIBLE_END
    encoding: str = "utf-8"
    strict_restore: bool = False

    def __post_init__(self) -> None:
        if self.initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if self.max_capacity is not None and self.max_capacity < self.initial_capacity:
            raise ValueError("max_capacity cannot be smaller than initial_capacity")
        for name in ("invisible_start", "invisible_end"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be a single byte value")
        if self.invisible_start == self.invisible_end:
            raise ValueError("invisible_start and invisible_end must differ")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        initial = _env_int(env, "INITIAL_CAPACITY", DEFAULT_INITIAL_CAPACITY)
        max_capacity = _env_int(env, "MAX_CAPACITY", None)
        if initial is None or initial <= 0:
            initial = DEFAULT_INITIAL_CAPACITY
        if max_capacity is not None and max_capacity < initial:
            max_capacity = None
        return cls(
            initial_capacity=initial,
            max_capacity=max_capacity,
            encoding=env.get(f"{ENV_PREFIX}ENCODING", "utf-8"),
            strict_restore=_env_flag(env, "STRICT_RESTORE", False),
        )


def _env_int(
    env: Mapping[str, str], key: str, fallback: Optional[int]
) -> Optional[int]:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


__all__ = ["EditorConfig", "DEFAULT_INITIAL_CAPACITY", "INVISIBLE_START", "INVISIBLE_END"]

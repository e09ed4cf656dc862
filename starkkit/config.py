"""Engine kinds and logging set-up."""

from __future__ import annotations

import enum
import logging
import os

LOG_ENV_VAR = "STARKKIT_LOG"
PACKAGE_LOGGER = "starkkit"

_installed: dict[str, logging.Handler] = {}


class EngineType(enum.Enum):
    """Supported STARK engine configurations."""

    BABY_BEAR_POSEIDON2 = "BabyBearPoseidon2"
    BABY_BEAR_BLAKE3 = "BabyBearBlake3"
    BABY_BEAR_KECCAK = "BabyBearKeccak"
    GOLDILOCKS_POSEIDON = "GoldilocksPoseidon"

    def __str__(self) -> str:
        return self.value


DEFAULT_ENGINE_TYPE = EngineType.BABY_BEAR_POSEIDON2


def _resolve_level(level: int | str) -> int:
    if isinstance(level, bool):
        raise ValueError(f"invalid log level: {level!r}")
    if isinstance(level, int):
        if level < 0:
            raise ValueError(f"invalid log level: {level!r}")
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"invalid log level: {level!r}")
    return resolved


def setup_tracing() -> logging.Logger:
    """Set up package logging at INFO level."""
    return setup_tracing_with_log_level(logging.INFO)


def setup_tracing_with_log_level(level: int | str) -> logging.Logger:
    """Set up package logging.

    The level named by the ``STARKKIT_LOG`` environment variable wins when it
    is valid; otherwise ``level`` is used. A stream handler is installed once.
    """
    fallback = _resolve_level(level)
    env_value = os.environ.get(LOG_ENV_VAR)
    resolved = fallback
    if env_value:
        try:
            resolved = _resolve_level(env_value)
        except ValueError:
            resolved = fallback

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved)
    if "handler" not in _installed:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
        _installed["handler"] = handler
    return package_logger
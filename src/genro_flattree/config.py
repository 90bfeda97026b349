# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_ENV_PREFIX = "GENRO_FLATTREE_"


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_int(raw: str | None, *, default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _normalise_log_level(raw: str | None) -> str:
    if raw is None or raw.strip() == "":
        return "WARNING"
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unsupported log level '{raw}'")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-wide defaults.

    Attributes:
        log_level: Level applied to loggers from ``get_logger``.
        default_capacity: Slots reserved by ``FlatTree`` when no
            capacity hint is given.
        ascii_render: Use ASCII glyphs instead of box-drawing ones when
            rendering without an explicit style.
    """

    log_level: str = "WARNING"
    default_capacity: int = 1
    ascii_render: bool = False


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    default_capacity = _parse_int(
        os.getenv(f"{_ENV_PREFIX}DEFAULT_CAPACITY"), default=1
    )
    if default_capacity < 0:
        raise ValueError(
            f"{_ENV_PREFIX}DEFAULT_CAPACITY must be >= 0, got {default_capacity}"
        )
    return RuntimeConfig(
        log_level=_normalise_log_level(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL")),
        default_capacity=default_capacity,
        ascii_render=_bool_from_env(
            os.getenv(f"{_ENV_PREFIX}ASCII"), default=False
        ),
    )


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()

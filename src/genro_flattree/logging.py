# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Package logging utilities that honour ``RuntimeConfig``."""

from __future__ import annotations

import logging

from . import config as ft_config


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger configured according to the runtime configuration."""
    logger_name = "genro_flattree" if name is None else f"genro_flattree.{name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(ft_config.runtime_config().log_level)
    return logger

"""Shared helpers: logging setup and identifier generation."""

# Roundnet Pairing
# Copyright (C) 2025  Roundnet Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import uuid
from typing import Optional

from roundnetpairing.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
)

_ROOT_LOGGER_NAME = "roundnetpairing"


def _level_name(name: str) -> str:
    """Upper-cased level name, or the default when logging does not know it."""
    name = name.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a named logger, configuring the package logger on first use.

    The package logger gets a single stream handler. Its level comes from
    ``level`` or the ``ROUNDNET_PAIRING_LOG_LEVEL`` environment variable;
    unknown level names fall back to ``DEFAULT_LOG_LEVEL``.

    Args:
        name: Logger name, usually ``__name__``
        level: Optional level name overriding the environment

    Returns:
        The logger for ``name``
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(
            _level_name(level or os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        )
    elif level:
        root.setLevel(_level_name(level))
    return logging.getLogger(name)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``player-<uuid4>``."""
    return f"{prefix.lower()}-{uuid.uuid4()}"

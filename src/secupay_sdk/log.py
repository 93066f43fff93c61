# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for the Secupay SDK."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("SECUPAY_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, *, debug_file: str | None = None) -> None:
    """
    Configure standard logging for CLI/library use.

    When ``debug_file`` is given, records go to that file instead of stderr; this is
    where the dispatcher's request/response debug lines end up.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    handlers: list[logging.Handler] | None = None
    if debug_file:
        handlers = [logging.FileHandler(debug_file, encoding="utf-8")]
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )


__all__ = ["setup_logging"]

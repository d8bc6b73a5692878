# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Logging for the ``cliffbasic`` package.

Every module logs through :func:`get_logger`. The package is quiet by
default (WARNING); canonicalization and meet diagnostics appear at DEBUG.

The first :func:`get_logger` call configures the ``cliffbasic`` logger from
the environment:

    CLIFFBASIC_LOG_LEVEL  level name, default WARNING
    CLIFFBASIC_LOG_FILE   optional path, plain-text lines are appended

Call :func:`configure_logging` to override either at runtime.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_NAME = "cliffbasic"

_CONFIGURED = False

_LEVEL_COLORS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "35",
}


class _ColorFormatter(logging.Formatter):
    """Colours the level name; the record itself is left untouched."""

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        code = _LEVEL_COLORS.get(record.levelno)
        copy = logging.makeLogRecord(record.__dict__)
        if code:
            copy.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(copy)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get("CLIFFBASIC_LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.WARNING)


def configure_logging(level: Union[int, str, None] = None,
                      log_file: Optional[str] = None) -> logging.Logger:
    """(Re)configure the ``cliffbasic`` logger.

    Handlers installed by an earlier call are replaced, not stacked.

    Args:
        level: Level name or number. Defaults to ``CLIFFBASIC_LOG_LEVEL``.
        log_file: Path to append to. Defaults to ``CLIFFBASIC_LOG_FILE``.

    Returns:
        The package root logger.
    """
    global _CONFIGURED
    _CONFIGURED = True

    root = logging.getLogger(ROOT_NAME)
    root.setLevel(_resolve_level(level))
    for handler in [h for h in root.handlers if getattr(h, "_cliffbasic", False)]:
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter(
        "%(levelname)s %(name)s: %(message)s",
        use_color=hasattr(sys.stderr, "isatty") and sys.stderr.isatty(),
    ))
    console._cliffbasic = True
    root.addHandler(console)

    log_file = log_file or os.environ.get("CLIFFBASIC_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        fh._cliffbasic = True
        root.addHandler(fh)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``cliffbasic`` hierarchy.

    Args:
        name: Usually the caller's ``__name__``. Names outside the package
            are nested under it.
    """
    if not _CONFIGURED:
        configure_logging()
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")

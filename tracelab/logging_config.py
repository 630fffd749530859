"""Logging setup shared by the CLI and batch runs.

One stderr handler on the root logger, human-readable lines:

    2026-10-17T13:45:12.345Z | INFO     | tracelab.pipeline | traced glyph.png: 2 outlines, 1 hole

Repeated setup_logging() calls replace the handler instead of stacking them.
Library modules never call this; they only use logging.getLogger(__name__).
"""

import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

_handler: Optional[logging.Handler] = None


class LineFormatter(logging.Formatter):
    """`timestamp | LEVEL | logger | message` in UTC, optional ANSI colour."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True, stream=None):
        super().__init__()
        stream = stream if stream is not None else sys.stderr
        self.use_color = use_color and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"
        line = f"{ts_str} | {level} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    *,
    color: bool = True,
    stream=None,
    quiet_libs: Optional[List[str]] = None,
) -> logging.Handler:
    """Configure the root logger (idempotent) and return the installed handler.

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    color : bool
        ANSI colours when the stream is a terminal, default True
    stream : file-like, optional
        Defaults to sys.stderr
    quiet_libs : list[str], optional
        Loggers pinned to WARNING (default: PIL)
    """
    global _handler

    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.setLevel(level)

    stream = stream if stream is not None else sys.stderr
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(LineFormatter(use_color=color, stream=stream))
    root.addHandler(_handler)

    for lib in (quiet_libs if quiet_libs is not None else ["PIL"]):
        logging.getLogger(lib).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    return _handler

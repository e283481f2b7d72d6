"""Logging to STDOUT with a timestamp prefix. Callers may pass any text stream."""

from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s %(message)s"
DEFAULT_DATEFMT = "%Y/%m/%d %H:%M:%S"


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever sys.stdout is at emit time."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def get_logger(
    name: str,
    *,
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: Optional[str] = DEFAULT_DATEFMT,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream=stream) if stream is not None else _StdoutHandler()
        handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable

from .errors import InvalidWriteResult
from .format import terminate_line
from .sinks import ByteSink

"""
Line printers
- LinePrinter: terminate the line, encode it, one write to the bound sink
  * negative count from the sink => InvalidWriteResult
  * anything the sink raises propagates unchanged
- LinePrinterFunc: a plain callable used as a line printer
- logging_printer: wrap a printer, log failures, re-raise them
"""


@runtime_checkable
class LinePrinterProtocol(Protocol):
    def print_line(self, s: str) -> None: ...


class LinePrinter:
    """Writes one newline-terminated line per call to a byte sink."""

    def __init__(self, sink: ByteSink, *, encoding: str = "utf-8") -> None:
        self._sink = sink
        self._encoding = encoding

    @property
    def sink(self) -> ByteSink:
        return self._sink

    def print_line(self, s: str) -> None:
        data = terminate_line(s).encode(self._encoding)
        n = self._sink.write(data)
        # The count is only checked for sign; short writes are not detected.
        if n < 0:
            raise InvalidWriteResult()

    def __call__(self, s: str) -> None:
        self.print_line(s)


class LinePrinterFunc:
    """Adapts a ``str -> None`` callable to the line printer protocol."""

    def __init__(self, fn: Callable[[str], None]) -> None:
        self._fn = fn

    def print_line(self, s: str) -> None:
        self._fn(s)

    def __call__(self, s: str) -> None:
        self._fn(s)


# This function wraps a printer so failures are logged before they propagate.
def logging_printer(printer: LinePrinterProtocol, logger: logging.Logger) -> LinePrinterFunc:
    def _print(s: str) -> None:
        try:
            printer.print_line(s)
        except Exception:
            # one diagnostic line, even when s already carries its newline
            logger.error("error occurred printing %s", s.removesuffix("\n"))
            raise

    return LinePrinterFunc(_print)


__all__ = ["LinePrinterProtocol", "LinePrinter", "LinePrinterFunc", "logging_printer"]

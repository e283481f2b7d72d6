from __future__ import annotations

"""
Errors raised by line printers.
Sink errors are not wrapped; they reach the caller as the sink raised them.
"""


class LinePrintError(Exception):
    """Base class for errors raised by lineprint itself."""


# Raised when a sink reports a negative byte count.
class InvalidWriteResult(LinePrintError):
    def __init__(self, message: str = "negative write value") -> None:
        super().__init__(message)


__all__ = ["LinePrintError", "InvalidWriteResult"]

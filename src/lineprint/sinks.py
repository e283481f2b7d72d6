from __future__ import annotations

import errno
import socket
import sys
from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config import PrinterConfig

"""
Byte sinks:
  - ByteSink protocol: write(data) -> number of bytes accepted, raises on failure
  - StdoutSink, BufferSink, FileSink, TcpSink
  - open_sink(cfg) selects one from the configured output
No logging here; the logging printer reports failures.
"""


@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: bytes) -> int: ...


# This sink writes to the binary layer of the current standard output.
class StdoutSink:
    def write(self, data: bytes) -> int:
        # sys.stdout is looked up per call so redirection (and capsys) is honoured
        out = sys.stdout
        # closed (None) or text-only streams count as a bad file descriptor
        if out is None or not hasattr(out, "buffer"):
            raise OSError(errno.EBADF, "standard output is not writable as bytes")
        out.flush()
        n = out.buffer.write(data)
        out.buffer.flush()
        return n


# This sink keeps every payload in memory.
class BufferSink:
    def __init__(self) -> None:
        self.writes: List[bytes] = []

    def write(self, data: bytes) -> int:
        self.writes.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.writes)


# This sink appends to a file, creating it if it doesn't exist.
class FileSink:
    def __init__(self, path: str) -> None:
        self.path = path

    def write(self, data: bytes) -> int:
        with open(self.path, "ab") as f:
            n = f.write(data)
            f.flush()
        return n


# This sink sends each payload over a fresh TCP connection.
class TcpSink:
    def __init__(self, host: str, port: int, *, timeout: float = 3.0) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    def write(self, data: bytes) -> int:
        with socket.create_connection((self.host, self.port), timeout=self.timeout) as sock:
            sock.sendall(data)
        return len(data)


def open_sink(cfg: "PrinterConfig") -> ByteSink:
    """Build the sink named by ``cfg.output`` ('stdout', 'file:<path>' or 'tcp:<host>:<port>')."""
    out = cfg.output
    if out == "stdout":
        return StdoutSink()
    if out.startswith("file:"):
        return FileSink(out.split(":", 1)[1])
    if out.startswith("tcp:"):
        _, host, port_str = out.split(":", 2)
        return TcpSink(host, int(port_str))
    # validate_config rejects anything else
    raise ValueError(f"unsupported output: {out!r}")


__all__ = ["ByteSink", "StdoutSink", "BufferSink", "FileSink", "TcpSink", "open_sink"]

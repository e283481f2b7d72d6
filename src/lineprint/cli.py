from __future__ import annotations

from .config import PrinterConfig
from .errors import LinePrintError
from .log import get_logger
from .printer import LinePrinter, logging_printer
from .sinks import open_sink

"""
CLI entrypoint

Usage:
  python -m lineprint.cli

Behavior:
  - Prints the greeting to STDOUT as one newline-terminated line
  - Write failures are logged (timestamped, STDOUT) and the exit status stays 0
  - No flags, no environment variables, no config file
"""


# This function is the main function for the CLI.
def main() -> int:
    cfg = PrinterConfig()

    logger = get_logger(__name__, fmt=cfg.log_format, datefmt=cfg.log_datefmt)
    printer = logging_printer(LinePrinter(open_sink(cfg), encoding=cfg.encoding), logger)

    try:
        printer.print_line(cfg.greeting)
    except (LinePrintError, OSError):
        # already logged by logging_printer; not reflected in the exit status
        pass
    return 0


# Run the main function for the CLI.
if __name__ == "__main__":
    raise SystemExit(main())

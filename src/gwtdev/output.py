"""
Centralized logging and output module for gwtdev.

All console output is prefixed with the time elapsed since launch, in
MM:SS.cc format (minutes:seconds.centiseconds), so long-running DevMode and
CodeServer sessions show when each line was produced.

Example output:
    00:00.02 gwtdev v0.1.0
    00:00.05 Launching com.google.gwt.dev.codeserver.CodeServer...
    00:00.05       Modules: com.example.App
    00:03.41 The code server is ready at http://127.0.0.1:9876/

Usage:
    from gwtdev.output import configure_logging, log, log_detail

    configure_logging(logging.INFO)
    log("Launching ...")
    log_detail("Modules: com.example.App")
"""

import logging
import sys
import time
from typing import Optional, TextIO

# Global state for the timer
_start_time: Optional[float] = None
_output_stream: TextIO = sys.stdout

LOGGER_NAME = "gwtdev"


def init_timer(output_stream: Optional[TextIO] = None) -> None:
    """
    Initialize the program timer.

    Args:
        output_stream: Optional output stream (defaults to sys.stdout)
    """
    global _start_time, _output_stream
    _start_time = time.time()
    if output_stream is not None:
        _output_stream = output_stream


def get_elapsed() -> float:
    """Get elapsed time since timer initialization, in seconds."""
    global _start_time
    if _start_time is None:
        init_timer()
    return time.time() - _start_time  # type: ignore


def format_timestamp() -> str:
    """Format the current elapsed time as MM:SS.cc."""
    elapsed = get_elapsed()
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    return f"{minutes:02d}:{seconds:05.2f}"


def _print(message: str) -> None:
    _output_stream.write(f"{format_timestamp()} {message}\n")
    _output_stream.flush()


def log(message: str) -> None:
    """Log a message with timestamp."""
    _print(message)


def log_detail(message: str, indent: int = 6) -> None:
    """Log an indented detail message."""
    _print(f"{' ' * indent}{message}")


def log_header(title: str, version: str) -> None:
    _print(f"{title} v{version}")


def log_error(message: str) -> None:
    _print(f"ERROR: {message}")


class TimestampedHandler(logging.Handler):
    """Logging handler writing records through the timestamped output stream.

    INFO records are printed bare so GWT's own output reads as it would in a
    terminal; other levels carry their level name.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno == logging.INFO:
                _print(message)
            elif record.levelno == logging.WARNING:
                _print(f"WARNING: {message}")
            else:
                _print(f"{record.levelname}: {message}")
        except (ValueError, OSError):
            self.handleError(record)


def configure_logging(level: int) -> logging.Logger:
    """Route the gwtdev loggers to the timestamped console.

    Args:
        level: Logging level of the gwtdev package logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, TimestampedHandler):
            logger.removeHandler(handler)
    handler = TimestampedHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

"""Tests for the timestamped output module."""

import io
import logging
import re
from unittest.mock import patch

from gwtdev import output
from gwtdev.output import (
    LOGGER_NAME,
    TimestampedHandler,
    configure_logging,
    format_timestamp,
    init_timer,
    log,
    log_detail,
    log_error,
    log_header,
)

TIMESTAMP = r"\d{2}:\d{2}\.\d{2}"


def _stream() -> io.StringIO:
    stream = io.StringIO()
    init_timer(stream)
    return stream


class TestTimestamp:
    def test_format(self):
        init_timer(io.StringIO())
        assert re.fullmatch(TIMESTAMP, format_timestamp())

    def test_minutes_rollover(self):
        init_timer(io.StringIO())
        with patch("gwtdev.output.time.time", return_value=output._start_time + 75.5):
            assert format_timestamp() == "01:15.50"


class TestLogFunctions:
    def test_log(self):
        stream = _stream()
        log("Launching com.google.gwt.dev.DevMode...")
        assert re.fullmatch(rf"{TIMESTAMP} Launching com\.google\.gwt\.dev\.DevMode\.\.\.\n", stream.getvalue())

    def test_log_detail_indent(self):
        stream = _stream()
        log_detail("Modules: com.example.App")
        log_detail("flush", indent=0)
        lines = stream.getvalue().splitlines()
        assert lines[0].endswith("       Modules: com.example.App")
        assert re.fullmatch(rf"{TIMESTAMP} flush", lines[1])

    def test_header_and_error(self):
        stream = _stream()
        log_header("gwtdev", "0.1.0")
        log_error("boom")
        lines = stream.getvalue().splitlines()
        assert lines[0].endswith(" gwtdev v0.1.0")
        assert lines[1].endswith(" ERROR: boom")


class TestConfigureLogging:
    def test_levels_are_prefixed(self):
        stream = _stream()
        configure_logging(logging.DEBUG)
        child = logging.getLogger("gwtdev.launch.launcher")

        child.info("The code server is ready")
        child.warning("[WARN] something")
        child.debug("Arguments: x")
        child.error("bad")

        lines = stream.getvalue().splitlines()
        assert lines[0].endswith(" The code server is ready")
        assert lines[1].endswith(" WARNING: [WARN] something")
        assert lines[2].endswith(" DEBUG: Arguments: x")
        assert lines[3].endswith(" ERROR: bad")

    def test_level_filters(self):
        stream = _stream()
        configure_logging(logging.WARNING)
        logging.getLogger("gwtdev.resolve").info("hidden")
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self):
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)
        logger = logging.getLogger(LOGGER_NAME)
        handlers = [h for h in logger.handlers if isinstance(h, TimestampedHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG

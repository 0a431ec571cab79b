"""Pytest configuration and fixtures for gwtdev tests.

Restores the process-wide state gwtdev touches: stdout/stderr when a test
closes them, the output module's stream and timer, and the handlers the CLI
installs on the package logger.
"""

import logging
import sys
import warnings

import pytest

# Suppress ResourceWarnings from pipe cleanup in Python 3.13
if sys.version_info >= (3, 13):
    warnings.filterwarnings("ignore", category=ResourceWarning)


@pytest.fixture(autouse=True)
def _restore_stdio():  # noqa: PT004
    """Ensure stdout/stderr are always restored after each test."""
    yield

    if sys.stdout.closed:
        sys.stdout = sys.__stdout__
    if sys.stderr.closed:
        sys.stderr = sys.__stderr__


@pytest.fixture(autouse=True)
def _isolate_output_globals():  # noqa: PT004
    """Reset output.py globals and the gwtdev logger around each test."""
    from gwtdev import output

    original_start_time = output._start_time
    original_output_stream = output._output_stream
    package_logger = logging.getLogger(output.LOGGER_NAME)
    original_level = package_logger.level

    yield

    output._start_time = original_start_time
    output._output_stream = original_output_stream
    for handler in list(package_logger.handlers):
        if isinstance(handler, output.TimestampedHandler):
            package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(original_level)

"""Subprocess utilities for launching the GWT process.

This module provides:
- safe_popen: subprocess.Popen with platform-specific flags applied
- CommandLine: executable, arguments, working directory and environment of a launch
- ProcessRunner: protocol of the process-execution collaborator
- StreamingProcessRunner: default runner streaming output line by line
"""

import subprocess
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Callable, Optional, Protocol, runtime_checkable

LineConsumer = Callable[[str], None]


def get_subprocess_creation_flags() -> int:
    """Get platform-specific subprocess creation flags.

    Returns:
        - Windows: subprocess.CREATE_NO_WINDOW (prevents console window)
        - Other platforms: 0 (no special flags)
    """
    if sys.platform == "win32":
        return subprocess.CREATE_NO_WINDOW
    return 0


def safe_popen(cmd: list[str], **kwargs: Any) -> subprocess.Popen:
    """Execute subprocess.Popen with platform-specific flags.

    Automatically applies:
    - CREATE_NO_WINDOW on Windows (prevents console window)
    - stdin=DEVNULL (the child never reads from the terminal)

    Explicit 'creationflags' are OR'd with the platform defaults; an explicit
    'stdin' is used as-is.
    """
    default_flags = get_subprocess_creation_flags()

    if "creationflags" in kwargs:
        kwargs["creationflags"] = kwargs["creationflags"] | default_flags
    elif default_flags:
        kwargs["creationflags"] = default_flags

    if "stdin" not in kwargs:
        kwargs["stdin"] = subprocess.DEVNULL

    return subprocess.Popen(cmd, **kwargs)


@dataclass(frozen=True)
class CommandLine:
    """A process to launch.

    Attributes:
        executable: Path of the program to run
        arguments: Arguments passed after the executable
        working_directory: Directory the process starts in
        environment: Full environment of the process
    """

    executable: str
    arguments: tuple[str, ...]
    working_directory: Path
    environment: dict[str, str] = field(default_factory=dict)

    def to_list(self) -> list[str]:
        return [self.executable, *self.arguments]


@runtime_checkable
class ProcessRunner(Protocol):
    """Protocol for the process-execution collaborator.

    Implementations start the command, hand every stdout line to `on_stdout`
    and every stderr line to `on_stderr` while the process runs, and return
    its exit status once both streams are drained.
    """

    def run(self, command: CommandLine, on_stdout: LineConsumer, on_stderr: LineConsumer) -> int:
        """Run the command to completion.

        Raises:
            OSError: If the process cannot be started.
        """
        ...


def _pump(stream: Optional[IO[str]], consumer: LineConsumer) -> None:
    """Forward each line of a stream to a consumer until EOF."""
    assert stream is not None
    with stream:
        for line in stream:
            consumer(line.rstrip("\r\n"))


class StreamingProcessRunner:
    """Runs a command with one reader thread per output stream.

    Draining stdout and stderr concurrently keeps the child from blocking on
    a full pipe. Output is never buffered beyond a single line.
    """

    def run(self, command: CommandLine, on_stdout: LineConsumer, on_stderr: LineConsumer) -> int:
        proc = safe_popen(
            command.to_list(),
            cwd=str(command.working_directory),
            env=command.environment or None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

        readers = [
            threading.Thread(target=_pump, args=(proc.stdout, on_stdout), name="gwt-stdout", daemon=True),
            threading.Thread(target=_pump, args=(proc.stderr, on_stderr), name="gwt-stderr", daemon=True),
        ]
        for reader in readers:
            reader.start()

        returncode = proc.wait()
        # Both streams hit EOF once the child exits; join so no line is lost
        for reader in readers:
            reader.join()
        return returncode

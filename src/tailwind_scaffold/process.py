# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution with streamed output."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Protocol

OutputCallback = Callable[[str], None]

TIMEOUT_EXIT_CODE: Final[int] = 124


class ExternalProcessFailure(RuntimeError):
    """Raised when an invoked executable exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        """Initialise the error with the executed command and its exit status.

        Args:
            command: Argument vector that was executed.
            returncode: Exit status reported by the child process.
        """

        super().__init__(f"Command '{' '.join(command)}' exited with status {returncode}")
        self.command = tuple(command)
        self.returncode = returncode


class CommandRunner(Protocol):
    """Run an argument vector and report its exit code."""

    def run(
        self,
        argv: Sequence[str],
        on_output: OutputCallback | None = None,
        *,
        cwd: Path | None = None,
    ) -> int:
        """Execute ``argv`` and return the exit status."""


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


@dataclass(slots=True)
class ProcessRunner:
    """Run executables while streaming combined stdout/stderr to a callback.

    Calls block until the child exits. ``timeout`` is unset by default; when
    given, the child is killed after that many seconds and the run reports
    exit code 124.
    """

    env: Mapping[str, str] | None = None
    timeout: float | None = None

    def run(
        self,
        argv: Sequence[str],
        on_output: OutputCallback | None = None,
        *,
        cwd: Path | None = None,
    ) -> int:
        """Execute ``argv`` and return its exit status.

        Args:
            argv: Command and argument sequence to execute.
            on_output: Optional callback receiving output chunks as they arrive.
            cwd: Optional working directory for the child.

        Returns:
            int: Exit status of the child, or 124 when the timeout fired.

        Raises:
            FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        """

        normalized = _normalize_args(argv)
        # Bandit: commands originate from installer configuration; we pass
        # argument lists directly without shell expansion.
        with subprocess.Popen(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(self.env) if self.env is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
        ) as process:
            timed_out = threading.Event()
            timer = self._start_timer(process, timed_out)
            try:
                assert process.stdout is not None
                for chunk in process.stdout:
                    if on_output is not None:
                        on_output(chunk)
                returncode = process.wait()
            finally:
                if timer is not None:
                    timer.cancel()
        return TIMEOUT_EXIT_CODE if timed_out.is_set() else returncode

    def run_checked(
        self,
        argv: Sequence[str],
        on_output: OutputCallback | None = None,
        *,
        cwd: Path | None = None,
    ) -> None:
        """Execute ``argv`` and raise when it fails.

        Raises:
            ExternalProcessFailure: When the child exits with a non-zero status.
        """

        run_checked(self, argv, on_output, cwd=cwd)

    def _start_timer(self, process: subprocess.Popen[str], flag: threading.Event) -> threading.Timer | None:
        if self.timeout is None:
            return None

        def _expire() -> None:
            flag.set()
            process.kill()

        timer = threading.Timer(self.timeout, _expire)
        timer.daemon = True
        timer.start()
        return timer


@dataclass(slots=True)
class RecordingRunner:
    """Record commands without executing them; every command reports success."""

    commands: list[tuple[str, ...]] = field(default_factory=list)

    def run(
        self,
        argv: Sequence[str],
        on_output: OutputCallback | None = None,
        *,
        cwd: Path | None = None,
    ) -> int:
        del on_output, cwd
        self.commands.append(tuple(argv))
        return 0


def run_checked(
    runner: CommandRunner,
    argv: Sequence[str],
    on_output: OutputCallback | None = None,
    *,
    cwd: Path | None = None,
) -> None:
    """Run ``argv`` through ``runner`` and raise on a non-zero exit.

    Args:
        runner: Runner used to execute the command.
        argv: Command and argument sequence to execute.
        on_output: Optional callback receiving output chunks.
        cwd: Optional working directory for the child.

    Raises:
        ExternalProcessFailure: When the child exits with a non-zero status.
    """

    returncode = runner.run(argv, on_output, cwd=cwd)
    if returncode != 0:
        raise ExternalProcessFailure(argv, returncode)


__all__ = [
    "CommandRunner",
    "ExternalProcessFailure",
    "OutputCallback",
    "ProcessRunner",
    "RecordingRunner",
    "TIMEOUT_EXIT_CODE",
    "run_checked",
]

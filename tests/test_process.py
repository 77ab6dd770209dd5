# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the streaming process runner."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tailwind_scaffold.process import (
    TIMEOUT_EXIT_CODE,
    ExternalProcessFailure,
    ProcessRunner,
    RecordingRunner,
    run_checked,
)


def test_run_streams_combined_output() -> None:
    chunks: list[str] = []
    script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr)"

    code = ProcessRunner().run([sys.executable, "-c", script], chunks.append)

    assert code == 0
    assert "".join(chunks).split() == ["out", "err"]


def test_run_returns_exit_code() -> None:
    assert ProcessRunner().run([sys.executable, "-c", "raise SystemExit(3)"]) == 3


def test_run_uses_working_directory(tmp_path: Path) -> None:
    chunks: list[str] = []

    ProcessRunner().run([sys.executable, "-c", "import os; print(os.getcwd())"], chunks.append, cwd=tmp_path)

    assert Path("".join(chunks).strip()).resolve() == tmp_path.resolve()


def test_run_checked_raises_with_exit_code() -> None:
    runner = ProcessRunner()

    with pytest.raises(ExternalProcessFailure) as excinfo:
        runner.run_checked([sys.executable, "-c", "raise SystemExit(7)"])

    assert excinfo.value.returncode == 7
    assert excinfo.value.command[0] == sys.executable


def test_timeout_reports_124() -> None:
    runner = ProcessRunner(timeout=0.2)

    code = runner.run([sys.executable, "-c", "import time; time.sleep(10)"])

    assert code == TIMEOUT_EXIT_CODE


def test_missing_executable_raises() -> None:
    with pytest.raises(FileNotFoundError):
        ProcessRunner().run(["definitely-not-a-real-binary-xyz"])


def test_empty_command_rejected() -> None:
    with pytest.raises(ValueError):
        ProcessRunner().run([])


def test_recording_runner_captures_commands() -> None:
    runner = RecordingRunner()

    run_checked(runner, ["php", "artisan", "tailwindcss:build"])

    assert runner.commands == [("php", "artisan", "tailwindcss:build")]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `tailwind-scaffold install` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ..config import ConfigError, InstallerConfig, load_config
from ..filesystem import DryRunFileSystem, FileSystem, LocalFileSystem
from ..installer import InstallOptions, InstallResult, install_tailwind
from ..patching import AnchorNotFoundError
from ..process import CommandRunner, ExternalProcessFailure, ProcessRunner, RecordingRunner
from .shared import CLIError, CLILogger, build_cli_logger


@dataclass(slots=True)
class InstallCLIOptions:
    """Normalised CLI inputs for the install command."""

    root: Path
    config_file: Path | None
    install: InstallOptions
    dry_run: bool


def exit_code_for(returncode: int) -> int:
    """Map a child exit status onto a shell exit code.

    Signal deaths (negative statuses) follow the shell convention of
    ``128 + signal``; a zero status still reports failure.
    """

    if returncode < 0:
        return 128 - returncode
    return returncode or 1


def perform_installation(
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
    fs: FileSystem,
    runner: CommandRunner,
) -> InstallResult:
    """Load configuration and run the installer, translating failures to ``CLIError``.

    Args:
        options: Normalised CLI options.
        logger: Logger used to emit user-facing messages.
        fs: Filesystem provider handed to the installer.
        runner: Command runner handed to the installer.

    Returns:
        InstallResult: Outcome reported by :func:`install_tailwind`.

    Raises:
        CLIError: Raised when configuration, patching or a command fails.
    """

    try:
        config: InstallerConfig = load_config(options.root, config_file=options.config_file)
        return install_tailwind(
            config,
            fs=fs,
            runner=runner,
            options=options.install,
            on_output=lambda chunk: logger.echo(chunk, nl=False),
        )
    except (ConfigError, AnchorNotFoundError, FileNotFoundError) as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    except ExternalProcessFailure as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=exit_code_for(exc.returncode)) from exc


def emit_install_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
    fs: FileSystem,
) -> None:
    """Emit dry-run details after the installer finishes."""

    if not options.dry_run or not isinstance(fs, DryRunFileSystem):
        return
    for change in fs.changes:
        logger.warn(f"DRY RUN: would {change.action} {change.path}")
    for command in result.commands:
        logger.warn(f"DRY RUN: would run {' '.join(command)}")


def install_command(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        help="Laravel project root to install into.",
    ),
    download: bool = typer.Option(
        False,
        "--download",
        help="Download the Tailwind CSS binary even when it already exists.",
    ),
    cli_version: str | None = typer.Option(
        None,
        "--cli-version",
        help="Override the configured Tailwind CLI version.",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (defaults to <root>/.tailwindcss.toml).",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show actions without modifying files."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output."),
) -> None:
    """Install the Tailwind CSS scaffolding into a Laravel application."""

    options = InstallCLIOptions(
        root=root.resolve(),
        config_file=config_file.resolve() if config_file is not None else None,
        install=InstallOptions(download=download, cli_version=cli_version, use_emoji=emoji),
        dry_run=dry_run,
    )
    logger = build_cli_logger(emoji=emoji)
    fs: FileSystem = DryRunFileSystem() if dry_run else LocalFileSystem()
    runner: CommandRunner = RecordingRunner() if dry_run else ProcessRunner()

    logger.info(f"Installing Tailwind CSS in {options.root}")
    try:
        result = perform_installation(options, logger=logger, fs=fs, runner=runner)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(result, options, logger=logger, fs=fs)
    logger.ok("TailwindCSS Laravel was installed successfully.")
    raise typer.Exit(code=0)


__all__ = ["InstallCLIOptions", "emit_install_summary", "exit_code_for", "install_command", "perform_installation"]

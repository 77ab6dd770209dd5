# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing Tailwind CSS into a Laravel project."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import InstallerConfig
from ..filesystem import FileSystem
from ..logging import detect_tty, info, ok, section
from ..process import CommandRunner, OutputCallback, run_checked
from .ignore import add_ignore_lines
from .layouts import append_tailwind_styles_to_layouts
from .middleware import install_middleware
from .models import InstallOptions, InstallResult
from .stubs import ensure_tailwind_config_exists


def install_tailwind(
    config: InstallerConfig,
    *,
    fs: FileSystem,
    runner: CommandRunner,
    options: InstallOptions | None = None,
    on_output: OutputCallback | None = None,
) -> InstallResult:
    """Scaffold Tailwind configuration, register middleware and run a first build.

    Steps run in order and the first failure stops the run: stubs, the CLI
    binary, layouts, middleware, ``.gitignore``, first build, stale file
    cleanup.

    Args:
        config: Installer configuration describing the project.
        fs: Filesystem provider performing (or recording) mutations.
        runner: Runner executing the download and build commands.
        options: Per-run switches; defaults to :class:`InstallOptions`.
        on_output: Optional callback receiving child process output.

    Returns:
        InstallResult: Paths written, skipped and removed, and commands run.

    Raises:
        AnchorNotFoundError: If the middleware registration file lacks its markers.
        ExternalProcessFailure: If the download or build command fails.
    """

    resolved = options or InstallOptions()
    use_emoji = resolved.use_emoji
    result = InstallResult()
    use_color = detect_tty()

    section("Scaffolding", use_color=use_color)
    ensure_tailwind_config_exists(config, fs, result, use_emoji=use_emoji)
    ensure_tailwind_cli_binary_exists(config, fs, runner, result, options=resolved, on_output=on_output)
    append_tailwind_styles_to_layouts(config, fs, result, use_emoji=use_emoji)
    install_middleware(config, fs, result, use_emoji=use_emoji)
    add_ignore_lines(config, fs, result, use_emoji=use_emoji)

    section("Build", use_color=use_color)
    run_first_build(config, runner, result, use_emoji=use_emoji, on_output=on_output)
    remove_unused_files(config, fs, result)

    ok(f"Updated {len(result.written)} files, left {len(result.skipped)} unchanged", use_emoji=use_emoji)
    return result


def ensure_tailwind_cli_binary_exists(
    config: InstallerConfig,
    fs: FileSystem,
    runner: CommandRunner,
    result: InstallResult,
    *,
    options: InstallOptions,
    on_output: OutputCallback | None = None,
) -> None:
    """Run the download command when the binary is missing or a download is forced."""

    if fs.exists(config.bin_path) and not options.download:
        return
    argv = config.download_argv(options.cli_version)
    version = options.cli_version or config.cli_version
    info(f"Downloading Tailwind CLI {version}", use_emoji=options.use_emoji)
    _run(runner, argv, config, result, on_output)


def run_first_build(
    config: InstallerConfig,
    runner: CommandRunner,
    result: InstallResult,
    *,
    use_emoji: bool = True,
    on_output: OutputCallback | None = None,
) -> None:
    """Run the configured build command once."""

    info("Running the first Tailwind build", use_emoji=use_emoji)
    _run(runner, config.build_argv(), config, result, on_output)


def remove_unused_files(config: InstallerConfig, fs: FileSystem, result: InstallResult) -> None:
    """Delete files older Tailwind setups relied on."""

    for path in config.stale_files:
        if fs.exists(path):
            fs.delete(path)
            result.removed.append(path)


def _run(
    runner: CommandRunner,
    argv: Sequence[str],
    config: InstallerConfig,
    result: InstallResult,
    on_output: OutputCallback | None,
) -> None:
    result.commands.append(tuple(argv))
    run_checked(runner, argv, on_output, cwd=config.project_root)


__all__ = [
    "ensure_tailwind_cli_binary_exists",
    "install_tailwind",
    "remove_unused_files",
    "run_first_build",
]

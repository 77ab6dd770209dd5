# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Append Tailwind build artefacts to the project's ``.gitignore``."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import InstallerConfig
from ..filesystem import FileSystem
from ..logging import info
from .models import InstallResult


def ignore_block(entries: Sequence[str], binary: str) -> str:
    """Return the lines appended to ``.gitignore``, led by a blank separator."""

    lines = [*entries, binary]
    return "\n" + "\n".join(lines) + "\n"


def add_ignore_lines(
    config: InstallerConfig,
    fs: FileSystem,
    result: InstallResult,
    *,
    use_emoji: bool = True,
) -> None:
    """Ignore compiled assets and the downloaded binary.

    The binary's file name doubles as the marker: when it already appears in
    ``.gitignore`` nothing is appended. A missing ``.gitignore`` is created.

    Args:
        config: Installer configuration providing entries and the binary path.
        fs: Filesystem provider used to read and append.
        result: Result accumulator updated with the ``.gitignore`` path.
        use_emoji: Whether log output may include emoji glyphs.
    """

    gitignore = config.path(".gitignore")
    binary = config.bin_path.name
    existing = fs.read(gitignore) if fs.exists(gitignore) else ""
    if binary in existing:
        result.record(gitignore, changed=False)
        return

    info("Adding Tailwind artefacts to .gitignore", use_emoji=use_emoji)
    fs.append(gitignore, ignore_block(config.ignore_entries, binary))
    result.record(gitignore, changed=True)


__all__ = ["add_ignore_lines", "ignore_block"]

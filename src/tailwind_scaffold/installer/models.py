# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing installer inputs and outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Per-run switches that are not part of the project configuration."""

    download: bool = False
    cli_version: str | None = None
    use_emoji: bool = True


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from running the installer against a project."""

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    commands: list[tuple[str, ...]] = field(default_factory=list)

    def record(self, path: Path, *, changed: bool) -> None:
        """File ``path`` under written or skipped depending on ``changed``."""

        (self.written if changed else self.skipped).append(path)


__all__ = ["InstallOptions", "InstallResult"]

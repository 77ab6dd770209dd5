# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem providers consumed by the installer steps."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Protocol, runtime_checkable

ChangeAction = Literal["write", "append", "copy", "delete", "mkdir"]


@runtime_checkable
class FileSystem(Protocol):
    """Operations the installer needs from the filesystem."""

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists."""

    def read(self, path: Path) -> str:
        """Return the UTF-8 text stored at ``path``."""

    def write(self, path: Path, content: str) -> None:
        """Replace the contents of ``path`` with ``content``."""

    def append(self, path: Path, content: str) -> None:
        """Append ``content`` to ``path``, creating it when missing."""

    def copy(self, src: Path, dst: Path) -> None:
        """Copy ``src`` to ``dst``, creating parent directories."""

    def delete(self, path: Path) -> None:
        """Remove ``path`` when it exists."""

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""


class LocalFileSystem:
    """Perform filesystem operations directly against disk."""

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return path.exists()

    # newline="" keeps the document's own line endings byte-for-byte.
    def read(self, path: Path) -> str:
        with path.open(encoding=self.encoding, newline="") as handle:
            return handle.read()

    def write(self, path: Path, content: str) -> None:
        with path.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(content)

    def append(self, path: Path, content: str) -> None:
        with path.open("a", encoding=self.encoding, newline="") as handle:
            handle.write(content)

    def copy(self, src: Path, dst: Path) -> None:
        self.ensure_directory(dst.parent)
        shutil.copyfile(src, dst)

    def delete(self, path: Path) -> None:
        path.unlink(missing_ok=True)

    def ensure_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True, slots=True)
class PlannedChange:
    """Record a mutation that a dry run skipped."""

    action: ChangeAction
    path: Path


@dataclass(slots=True)
class DryRunFileSystem:
    """Read through to disk while recording mutations instead of performing them.

    Content written during the run is kept in an overlay so later steps read
    what they would have seen after a real run.
    """

    base: LocalFileSystem = field(default_factory=LocalFileSystem)
    changes: list[PlannedChange] = field(default_factory=list)
    _overlay: dict[Path, str | None] = field(default_factory=dict)

    def exists(self, path: Path) -> bool:
        if path in self._overlay:
            return self._overlay[path] is not None
        return self.base.exists(path)

    def read(self, path: Path) -> str:
        if path in self._overlay:
            content = self._overlay[path]
            if content is None:
                raise FileNotFoundError(f"{path} was deleted earlier in this dry run")
            return content
        return self.base.read(path)

    def write(self, path: Path, content: str) -> None:
        self._overlay[path] = content
        self._record("write", path)

    def append(self, path: Path, content: str) -> None:
        existing = self.read(path) if self.exists(path) else ""
        self._overlay[path] = existing + content
        self._record("append", path)

    def copy(self, src: Path, dst: Path) -> None:
        self._overlay[dst] = self.read(src)
        self._record("copy", dst)

    def delete(self, path: Path) -> None:
        if self.exists(path):
            self._overlay[path] = None
            self._record("delete", path)

    def ensure_directory(self, path: Path) -> None:
        if not self.base.exists(path):
            self._record("mkdir", path)

    @property
    def touched(self) -> list[Path]:
        """Return each path a real run would have modified, in first-touch order."""

        seen: dict[Path, None] = {}
        for change in self.changes:
            seen.setdefault(change.path, None)
        return list(seen)

    def _record(self, action: ChangeAction, path: Path) -> None:
        self.changes.append(PlannedChange(action=action, path=path))


__all__ = [
    "ChangeAction",
    "DryRunFileSystem",
    "FileSystem",
    "LocalFileSystem",
    "PlannedChange",
]

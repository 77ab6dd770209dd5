# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem providers used by installer steps."""

from __future__ import annotations

from .provider import ChangeAction, DryRunFileSystem, FileSystem, LocalFileSystem, PlannedChange

__all__ = [
    "ChangeAction",
    "DryRunFileSystem",
    "FileSystem",
    "LocalFileSystem",
    "PlannedChange",
]

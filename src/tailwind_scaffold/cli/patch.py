# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `tailwind-scaffold patch` command."""

from __future__ import annotations

import re
from pathlib import Path

import typer

from ..filesystem import LocalFileSystem
from ..patching import AnchorNotFoundError, AnchorSpec
from .shared import build_cli_logger

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}
_ESCAPE_PATTERN = re.compile(r"\\([nt\\])")


def unescape(value: str) -> str:
    """Expand ``\\n``, ``\\t`` and ``\\\\`` so fragments can span lines on the command line."""

    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPES[match.group(1)], value)


def patch_command(
    target: Path = typer.Argument(..., help="File to patch in place."),
    anchor: str = typer.Option(..., "--anchor", "-a", help="Literal text marking the insertion point."),
    fragment: str = typer.Option(..., "--fragment", "-f", help="Text to insert (\\n and \\t are expanded)."),
    identity: str = typer.Option(
        ...,
        "--identity",
        "-i",
        help="Text whose presence means the fragment is already applied.",
    ),
    before: bool = typer.Option(False, "--before", help="Insert ahead of the anchor instead of after it."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report the outcome without writing the file."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output."),
) -> None:
    """Insert a fragment next to an anchor in TARGET unless it is already there."""

    logger = build_cli_logger(emoji=emoji)
    fs = LocalFileSystem()
    path = target.resolve()
    spec = AnchorSpec(
        anchor=unescape(anchor),
        fragment=unescape(fragment),
        identity_token=unescape(identity),
        placement="before" if before else "after",
    )

    try:
        original = fs.read(path)
        if spec.is_applied(original):
            logger.ok(f"{path.name} already contains {spec.identity_token!r}; nothing to do.")
            raise typer.Exit(code=0)
        updated = spec.apply(original, source=str(path))
    except (AnchorNotFoundError, FileNotFoundError, ValueError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    if dry_run:
        logger.warn(f"DRY RUN: would patch {path}")
        raise typer.Exit(code=0)

    fs.write(path, updated)
    logger.ok(f"Patched {path}")
    raise typer.Exit(code=0)


__all__ = ["patch_command", "unescape"]

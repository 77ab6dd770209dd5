# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .install import install_command
from .patch import patch_command

app = typer.Typer(
    help="Install Tailwind CSS scaffolding into Laravel applications.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("install")(install_command)
app.command("patch")(patch_command)

__all__ = ["app"]

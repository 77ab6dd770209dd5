# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tailwind CSS installation services."""

from __future__ import annotations

from .layouts import append_tailwind_tag
from .middleware import register_bootstrap_middleware, register_kernel_middleware
from .models import InstallOptions, InstallResult
from .runner import install_tailwind

__all__ = [
    "InstallOptions",
    "InstallResult",
    "append_tailwind_tag",
    "install_tailwind",
    "register_bootstrap_middleware",
    "register_kernel_middleware",
]

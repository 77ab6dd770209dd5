# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Idempotent text patching primitives."""

from __future__ import annotations

from .errors import AnchorNotFoundError, RegionNotFoundError
from .models import AnchorSpec, Placement
from .text import insert_before, patch, patch_region

__all__ = [
    "AnchorNotFoundError",
    "AnchorSpec",
    "Placement",
    "RegionNotFoundError",
    "insert_before",
    "patch",
    "patch_region",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing reusable text patches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .text import insert_before, patch

Placement = Literal["after", "before"]


@dataclass(frozen=True, slots=True)
class AnchorSpec:
    """Describe where a fragment goes and how to recognise it once applied."""

    anchor: str
    fragment: str
    identity_token: str
    placement: Placement = "after"

    def apply(self, document: str, *, source: str | None = None) -> str:
        """Return ``document`` with this patch applied at most once.

        Args:
            document: Text to patch.
            source: Optional document identity used in error messages.

        Returns:
            str: Patched or unchanged document.
        """

        insert = insert_before if self.placement == "before" else patch
        return insert(document, self.anchor, self.fragment, self.identity_token, source=source)

    def is_applied(self, document: str) -> bool:
        """Return whether ``document`` already carries the identity token."""

        return bool(self.identity_token) and self.identity_token in document


__all__ = ["AnchorSpec", "Placement"]

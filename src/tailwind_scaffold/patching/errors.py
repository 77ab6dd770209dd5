# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised when a text patch cannot locate its insertion point."""

from __future__ import annotations


class AnchorNotFoundError(LookupError):
    """Raised when the anchor a patch inserts against is absent from the document."""

    def __init__(self, anchor: str, source: str | None = None) -> None:
        """Initialise the error with the missing anchor and document identity.

        Args:
            anchor: Literal anchor text that could not be located.
            source: Optional identity of the document (usually a file path).
        """

        location = f" in {source}" if source else ""
        super().__init__(f"Anchor {anchor!r} not found{location}")
        self.anchor = anchor
        self.source = source


class RegionNotFoundError(AnchorNotFoundError):
    """Raised when a delimiter bounding a patch region is absent."""

    def __init__(self, marker: str, source: str | None = None) -> None:
        """Initialise the error with the missing region marker.

        Args:
            marker: Region delimiter that could not be located.
            source: Optional identity of the document (usually a file path).
        """

        super().__init__(marker, source)
        location = f" in {source}" if source else ""
        self.args = (f"Region marker {marker!r} not found{location}",)
        self.marker = marker


__all__ = ["AnchorNotFoundError", "RegionNotFoundError"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Idempotent insertion of literal fragments into text documents.

Every helper here is a pure function over strings: it either returns the
document unchanged (the identity token is already present), returns a copy
with exactly one insertion, or raises without producing output.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import AnchorNotFoundError, RegionNotFoundError


def _validate(anchor: str, identity_token: str) -> None:
    """Reject empty anchors and identity tokens.

    Args:
        anchor: Literal insertion marker supplied by the caller.
        identity_token: Literal text whose presence marks the patch as applied.

    Raises:
        ValueError: If either argument is empty.
    """

    if not anchor:
        raise ValueError("anchor must be a non-empty string")
    if not identity_token:
        raise ValueError("identity_token must be a non-empty string")


def _locate(document: str, anchor: str, source: str | None) -> int:
    index = document.find(anchor)
    if index < 0:
        raise AnchorNotFoundError(anchor, source)
    return index


def patch(
    document: str,
    anchor: str,
    fragment: str,
    identity_token: str,
    *,
    source: str | None = None,
) -> str:
    """Insert ``fragment`` immediately after the first ``anchor`` unless already applied.

    Args:
        document: Full text of the document being patched.
        anchor: Literal substring marking the insertion point.
        fragment: Literal text inserted after ``anchor``.
        identity_token: Substring whose presence anywhere in ``document`` means
            the fragment was already applied.
        source: Optional document identity reported when the anchor is missing.

    Returns:
        str: ``document`` unchanged when already applied, otherwise a new
        document with ``fragment`` inserted once.

    Raises:
        AnchorNotFoundError: If the patch is not applied and ``anchor`` is absent.
        ValueError: If ``anchor`` or ``identity_token`` is empty.
    """

    _validate(anchor, identity_token)
    if identity_token in document:
        return document
    end = _locate(document, anchor, source) + len(anchor)
    return document[:end] + fragment + document[end:]


def insert_before(
    document: str,
    anchor: str,
    fragment: str,
    identity_token: str,
    *,
    source: str | None = None,
) -> str:
    """Insert ``fragment`` immediately before the first ``anchor`` unless already applied.

    Args:
        document: Full text of the document being patched.
        anchor: Literal substring marking the insertion point.
        fragment: Literal text inserted ahead of ``anchor``.
        identity_token: Substring signalling the fragment is already present.
        source: Optional document identity reported when the anchor is missing.

    Returns:
        str: Patched or unchanged document.

    Raises:
        AnchorNotFoundError: If the patch is not applied and ``anchor`` is absent.
        ValueError: If ``anchor`` or ``identity_token`` is empty.
    """

    _validate(anchor, identity_token)
    if identity_token in document:
        return document
    start = _locate(document, anchor, source)
    return document[:start] + fragment + document[start:]


def patch_region(
    document: str,
    start: str | Sequence[str],
    end: str,
    anchor: str,
    fragment: str,
    identity_token: str,
    *,
    source: str | None = None,
) -> str:
    """Apply :func:`patch` to the text between ``start`` and the next ``end``.

    The identity check only considers the region, so a token mentioned
    elsewhere in the document (another middleware group, a comment) does not
    suppress the insertion.

    Args:
        document: Full text of the document being patched.
        start: Literal marker opening the region, or a sequence of markers
            located one after another (``("$groups = [", "'web' => [")``).
            The region begins after the last marker.
        end: Literal marker closing the region; the first occurrence after
            the opening marker is used.
        anchor: Literal insertion marker searched for inside the region.
        fragment: Literal text inserted after ``anchor``.
        identity_token: Substring signalling the fragment is already present
            in the region.
        source: Optional document identity used in error messages.

    Returns:
        str: Patched or unchanged document.

    Raises:
        RegionNotFoundError: If a ``start`` marker or ``end`` is absent.
        AnchorNotFoundError: If ``anchor`` is absent from the region.
        ValueError: If any marker, ``anchor`` or ``identity_token`` is empty.
    """

    _validate(anchor, identity_token)
    markers = (start,) if isinstance(start, str) else tuple(start)
    if not markers or not all(markers) or not end:
        raise ValueError("region markers must be non-empty strings")

    region_start = 0
    for marker in markers:
        opening = document.find(marker, region_start)
        if opening < 0:
            raise RegionNotFoundError(marker, source)
        region_start = opening + len(marker)
    region_end = document.find(end, region_start)
    if region_end < 0:
        raise RegionNotFoundError(end, source)

    region = document[region_start:region_end]
    patched = patch(region, anchor, fragment, identity_token, source=source)
    if patched == region:
        return document
    return document[:region_start] + patched + document[region_end:]


__all__ = ["insert_before", "patch", "patch_region"]

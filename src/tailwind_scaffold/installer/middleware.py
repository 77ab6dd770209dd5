# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Register the preload middleware with the application's HTTP stack."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Final

from ..config import InstallerConfig
from ..filesystem import FileSystem
from ..logging import info
from ..patching import patch, patch_region
from .models import InstallResult

KERNEL_GROUPS_MARKER: Final[str] = "$middlewareGroups = ["
KERNEL_GROUP_END: Final[str] = "],"
KERNEL_ANCHOR: Final[str] = "SubstituteBindings::class,"

BOOTSTRAP_ANCHORS: Final[tuple[str, ...]] = (
    "->withMiddleware(function (Middleware $middleware) {",
    "->withMiddleware(function (Middleware $middleware): void {",
)


def _newline(document: str) -> str:
    return "\r\n" if "\r\n" in document else "\n"


def register_kernel_middleware(
    kernel: str,
    middleware: str,
    *,
    group: str = "web",
    after: str = KERNEL_ANCHOR,
    source: str | None = None,
) -> str:
    """Add ``middleware`` to ``group`` inside ``$middlewareGroups`` of ``app/Http/Kernel.php``.

    Only the group's own entries are considered when checking whether the
    middleware is already registered.

    Args:
        kernel: Source of the HTTP kernel.
        middleware: Middleware reference, e.g. ``\\Vendor\\Middleware::class``.
        group: Middleware group receiving the entry.
        after: Entry the new middleware is placed after.
        source: Optional file identity used in error messages.

    Returns:
        str: Updated kernel source.

    Raises:
        AnchorNotFoundError: If the groups block, the group or ``after`` is missing.
    """

    fragment = f"{_newline(kernel)}            {middleware},"
    return patch_region(
        kernel,
        (KERNEL_GROUPS_MARKER, f"'{group}' => ["),
        KERNEL_GROUP_END,
        after,
        fragment,
        middleware,
        source=source,
    )


def register_bootstrap_middleware(
    bootstrap: str,
    middleware: str,
    *,
    group: str = "web",
    modifier: str = "append",
    anchors: Sequence[str] = BOOTSTRAP_ANCHORS,
    source: str | None = None,
) -> str:
    """Add ``middleware`` to ``bootstrap/app.php`` via ``$middleware-><group>()``.

    Args:
        bootstrap: Source of ``bootstrap/app.php``.
        middleware: Middleware reference to register.
        group: Middleware group method called on the ``$middleware`` builder.
        modifier: Named argument passed to the group method (``append``/``prepend``).
        anchors: Accepted spellings of the ``withMiddleware`` closure opener,
            tried in order.
        source: Optional file identity used in error messages.

    Returns:
        str: Updated bootstrap source.

    Raises:
        AnchorNotFoundError: If none of ``anchors`` occurs and the middleware
            is not registered yet.
    """

    eol = _newline(bootstrap)
    fragment = (
        f"{eol}        $middleware->{group}({modifier}: ["
        f"{eol}            {middleware},"
        f"{eol}        ]);"
        f"{eol}"
    )
    anchor = next((candidate for candidate in anchors if candidate in bootstrap), anchors[0])
    return patch(bootstrap, anchor, fragment, middleware, source=source)


def install_middleware(
    config: InstallerConfig,
    fs: FileSystem,
    result: InstallResult,
    *,
    use_emoji: bool = True,
) -> Path:
    """Register the configured middleware in the Kernel or bootstrap file.

    Applications that still ship ``app/Http/Kernel.php`` get the Kernel
    edit; newer skeletons are patched through ``bootstrap/app.php``.

    Args:
        config: Installer configuration naming the middleware and group.
        fs: Filesystem provider used to read and write the target.
        result: Result accumulator updated with the target path.
        use_emoji: Whether log output may include emoji glyphs.

    Returns:
        Path: File that holds the registration.

    Raises:
        AnchorNotFoundError: If the target file lacks the expected markers.
        FileNotFoundError: If neither registration file exists.
    """

    kernel_path = config.path("app", "Http", "Kernel.php")
    if fs.exists(kernel_path):
        target = kernel_path
        original = fs.read(target)
        updated = register_kernel_middleware(
            original,
            config.middleware,
            group=config.middleware_group,
            source=str(target),
        )
    else:
        target = config.path("bootstrap", "app.php")
        original = fs.read(target)
        updated = register_bootstrap_middleware(
            original,
            config.middleware,
            group=config.middleware_group,
            source=str(target),
        )

    if updated != original:
        info(f"Registering middleware in {target.relative_to(config.project_root)}", use_emoji=use_emoji)
        fs.write(target, updated)
    result.record(target, changed=updated != original)
    return target


__all__ = [
    "BOOTSTRAP_ANCHORS",
    "KERNEL_ANCHOR",
    "install_middleware",
    "register_bootstrap_middleware",
    "register_kernel_middleware",
]

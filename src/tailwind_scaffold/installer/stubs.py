# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Copy Tailwind configuration stubs into the target project."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Final

from ..config import InstallerConfig
from ..filesystem import FileSystem
from ..logging import info
from .models import InstallResult

LEGACY_APP_CSS: Final[str] = "@tailwind base;\n@tailwind components;\n@tailwind utilities;"


def stub_root() -> Path:
    """Return the directory holding the packaged stub files."""

    return Path(str(resources.files("tailwind_scaffold") / "stubs"))


def app_css_needs_stub(fs: FileSystem, path: Path) -> bool:
    """Return whether the project's main stylesheet should be replaced.

    The stub is copied when the stylesheet is missing, blank, or still the
    three-directive file older Tailwind releases generated.

    Args:
        fs: Filesystem provider used to inspect the project.
        path: Location of ``resources/css/app.css``.

    Returns:
        bool: ``True`` when the stub should overwrite ``path``.
    """

    if not fs.exists(path):
        return True
    contents = fs.read(path).strip()
    if not contents:
        return True
    return contents.replace("\r\n", "\n") == LEGACY_APP_CSS


def copy_stub(fs: FileSystem, stub: Path, to: Path) -> None:
    fs.ensure_directory(to.parent)
    fs.copy(stub, to)


def ensure_tailwind_config_exists(
    config: InstallerConfig,
    fs: FileSystem,
    result: InstallResult,
    *,
    use_emoji: bool = True,
    stubs: Path | None = None,
) -> None:
    """Copy ``postcss.config.js`` and, when appropriate, ``resources/css/app.css``.

    Args:
        config: Installer configuration describing the project.
        fs: Filesystem provider receiving the copies.
        result: Result accumulator updated with written or skipped paths.
        use_emoji: Whether log output may include emoji glyphs.
        stubs: Optional override for the stub directory.
    """

    source_root = stubs or stub_root()

    postcss = config.path("postcss.config.js")
    info(f"Publishing {postcss.name}", use_emoji=use_emoji)
    copy_stub(fs, source_root / "postcss.config.js", postcss)
    result.record(postcss, changed=True)

    app_css = config.resource_path("css", "app.css")
    if app_css_needs_stub(fs, app_css):
        info("Publishing resources/css/app.css", use_emoji=use_emoji)
        copy_stub(fs, source_root / "resources" / "css" / "app.css", app_css)
        result.record(app_css, changed=True)
    else:
        result.record(app_css, changed=False)


__all__ = [
    "LEGACY_APP_CSS",
    "app_css_needs_stub",
    "copy_stub",
    "ensure_tailwind_config_exists",
    "stub_root",
]

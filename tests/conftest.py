# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpers.laravel import APP_LAYOUT, BOOTSTRAP_APP, HTTP_KERNEL

from tailwind_scaffold.config import BIN_PATH_ENV, CLI_VERSION_ENV


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of configuration loading."""

    monkeypatch.delenv(BIN_PATH_ENV, raising=False)
    monkeypatch.delenv(CLI_VERSION_ENV, raising=False)


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """Return a minimal Laravel 11 style project using ``bootstrap/app.php``."""

    root = tmp_path / "app"
    (root / "bootstrap").mkdir(parents=True)
    (root / "bootstrap" / "app.php").write_text(BOOTSTRAP_APP, encoding="utf-8")
    layouts = root / "resources" / "views" / "layouts"
    layouts.mkdir(parents=True)
    (layouts / "app.blade.php").write_text(APP_LAYOUT, encoding="utf-8")
    binary = root / "vendor" / "bin" / "tailwindcss"
    binary.parent.mkdir(parents=True)
    binary.write_text("", encoding="utf-8")
    (root / ".gitignore").write_text("/vendor\n/node_modules\n", encoding="utf-8")
    (root / "tailwind.config.js").write_text("module.exports = {}\n", encoding="utf-8")
    return root


@pytest.fixture
def kernel_project(laravel_project: Path) -> Path:
    """Return a project that still registers middleware in ``app/Http/Kernel.php``."""

    kernel = laravel_project / "app" / "Http" / "Kernel.php"
    kernel.parent.mkdir(parents=True)
    kernel.write_text(HTTP_KERNEL, encoding="utf-8")
    return laravel_project

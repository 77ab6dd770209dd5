# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for middleware registration patches."""

from __future__ import annotations

from pathlib import Path

import pytest

from tailwind_scaffold.config import DEFAULT_MIDDLEWARE, InstallerConfig
from tailwind_scaffold.filesystem import LocalFileSystem
from tailwind_scaffold.installer import InstallResult, register_bootstrap_middleware, register_kernel_middleware
from tailwind_scaffold.installer.middleware import install_middleware
from tailwind_scaffold.patching import AnchorNotFoundError

from helpers.laravel import BOOTSTRAP_APP, HTTP_KERNEL

MIDDLEWARE = "\\Acme\\Preload::class"


def test_kernel_registration_targets_web_group() -> None:
    result = register_kernel_middleware(HTTP_KERNEL, MIDDLEWARE)

    expected_web = (
        "            \\Illuminate\\Routing\\Middleware\\SubstituteBindings::class,\n"
        f"            {MIDDLEWARE},\n"
        "        ],\n\n        'api' => ["
    )
    assert expected_web in result
    assert result.count(MIDDLEWARE) == 1
    assert register_kernel_middleware(result, MIDDLEWARE) == result


def test_kernel_registration_ignores_mentions_outside_group() -> None:
    kernel = HTTP_KERNEL.replace("'api' => [", f"'api' => [\n            {MIDDLEWARE},")

    result = register_kernel_middleware(kernel, MIDDLEWARE)

    assert result.count(MIDDLEWARE) == 2


def test_kernel_without_group_raises() -> None:
    with pytest.raises(AnchorNotFoundError, match="'admin' => \\["):
        register_kernel_middleware(HTTP_KERNEL, MIDDLEWARE, group="admin")


def test_bootstrap_registration_appends_to_web() -> None:
    result = register_bootstrap_middleware(BOOTSTRAP_APP, MIDDLEWARE)

    assert (
        "->withMiddleware(function (Middleware $middleware) {\n"
        "        $middleware->web(append: [\n"
        f"            {MIDDLEWARE},\n"
        "        ]);\n"
        "\n        //\n"
    ) in result
    assert register_bootstrap_middleware(result, MIDDLEWARE) == result


def test_bootstrap_registration_supports_void_closure() -> None:
    bootstrap = BOOTSTRAP_APP.replace("(Middleware $middleware) {", "(Middleware $middleware): void {")

    result = register_bootstrap_middleware(bootstrap, MIDDLEWARE, modifier="prepend")

    assert "$middleware->web(prepend: [" in result


def test_bootstrap_registration_preserves_crlf() -> None:
    bootstrap = BOOTSTRAP_APP.replace("\n", "\r\n")

    result = register_bootstrap_middleware(bootstrap, MIDDLEWARE)

    assert "\n" not in result.replace("\r\n", "")


def test_bootstrap_without_anchor_raises() -> None:
    with pytest.raises(AnchorNotFoundError) as excinfo:
        register_bootstrap_middleware("<?php return [];\n", MIDDLEWARE, source="bootstrap/app.php")

    assert "withMiddleware" in excinfo.value.anchor
    assert excinfo.value.source == "bootstrap/app.php"


def test_install_middleware_prefers_kernel(kernel_project: Path) -> None:
    config = InstallerConfig(project_root=kernel_project)
    result = InstallResult()

    target = install_middleware(config, LocalFileSystem(), result, use_emoji=False)

    assert target == kernel_project.resolve() / "app" / "Http" / "Kernel.php"
    assert DEFAULT_MIDDLEWARE in target.read_text(encoding="utf-8")
    assert DEFAULT_MIDDLEWARE not in (kernel_project / "bootstrap" / "app.php").read_text(encoding="utf-8")
    assert result.written == [target]


def test_install_middleware_falls_back_to_bootstrap(laravel_project: Path) -> None:
    config = InstallerConfig(project_root=laravel_project)
    fs = LocalFileSystem()

    first = InstallResult()
    target = install_middleware(config, fs, first, use_emoji=False)
    second = InstallResult()
    install_middleware(config, fs, second, use_emoji=False)

    assert target.name == "app.php"
    assert first.written == [target]
    assert second.skipped == [target]
    assert target.read_text(encoding="utf-8").count(DEFAULT_MIDDLEWARE) == 1


def test_kernel_registration_preserves_crlf() -> None:
    kernel = HTTP_KERNEL.replace("\n", "\r\n")

    result = register_kernel_middleware(kernel, MIDDLEWARE)

    assert f"SubstituteBindings::class,\r\n            {MIDDLEWARE},\r\n        ]," in result
    assert "\n" not in result.replace("\r\n", "")
    assert register_kernel_middleware(result, MIDDLEWARE) == result

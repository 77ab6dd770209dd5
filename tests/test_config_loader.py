# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tailwind_scaffold.config import (
    BIN_PATH_ENV,
    CLI_VERSION_ENV,
    DEFAULT_CLI_VERSION,
    ConfigError,
    InstallerConfig,
    load_config,
)


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, env={})

    assert cfg.project_root == tmp_path.resolve()
    assert cfg.bin_path == tmp_path.resolve() / "vendor" / "bin" / "tailwindcss"
    assert cfg.cli_version == DEFAULT_CLI_VERSION
    assert cfg.stale_files == (tmp_path.resolve() / "tailwind.config.js",)
    assert cfg.download_argv() == ["php", "artisan", "tailwindcss:download", "--cli-version", DEFAULT_CLI_VERSION]
    assert cfg.build_argv() == ["php", "artisan", "tailwindcss:build"]


def test_config_file_and_env_layering(tmp_path: Path) -> None:
    (tmp_path / ".tailwindcss.toml").write_text(
        """
[tailwindcss]
cli_version = "v3.4.0"
php_binary = "${PHP_PATH}"
layouts = ["app"]
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(
        tmp_path,
        env={"PHP_PATH": "/usr/local/bin/php", BIN_PATH_ENV: "/opt/tailwindcss"},
    )

    assert cfg.cli_version == "v3.4.0"
    assert cfg.php_binary == "/usr/local/bin/php"
    assert cfg.bin_path == Path("/opt/tailwindcss")
    assert cfg.layouts == ("app",)
    assert cfg.download_argv("v4.0.0")[0] == "/usr/local/bin/php"
    assert cfg.download_argv("v4.0.0")[-1] == "v4.0.0"


def test_environment_beats_file_and_overrides_beat_environment(tmp_path: Path) -> None:
    (tmp_path / ".tailwindcss.toml").write_text('cli_version = "v3.0.0"\n', encoding="utf-8")

    from_env = load_config(tmp_path, env={CLI_VERSION_ENV: "v4.1.0"})
    overridden = load_config(tmp_path, env={CLI_VERSION_ENV: "v4.1.0"}, overrides={"cli_version": "v9"})

    assert from_env.cli_version == "v4.1.0"
    assert overridden.cli_version == "v9"


def test_explicit_config_file(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    config_file.write_text('middleware_group = "admin"\n', encoding="utf-8")

    cfg = load_config(tmp_path, config_file=config_file, env={})

    assert cfg.middleware_group == "admin"


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".tailwindcss.toml").write_text('unknown = "value"\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / ".tailwindcss.toml").write_text("cli_version = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path, env={})


def test_blank_command_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={}, overrides={"build_command": []})


def test_layout_paths(tmp_path: Path) -> None:
    cfg = InstallerConfig(project_root=tmp_path)

    assert cfg.layout_paths() == [
        tmp_path.resolve() / "resources" / "views" / "layouts" / "app.blade.php",
        tmp_path.resolve() / "resources" / "views" / "layouts" / "guest.blade.php",
    ]

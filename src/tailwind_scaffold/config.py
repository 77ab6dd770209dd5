# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installer configuration model and layered loader."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

CONFIG_FILENAME: Final[str] = ".tailwindcss.toml"
BIN_PATH_ENV: Final[str] = "TAILWINDCSS_BIN_PATH"
CLI_VERSION_ENV: Final[str] = "TAILWINDCSS_CLI_VERSION"

DEFAULT_CLI_VERSION: Final[str] = "v4.1.4"
DEFAULT_MIDDLEWARE: Final[str] = "\\Tonysm\\TailwindCss\\Http\\Middleware\\AddLinkHeaderForPreloadedAssets::class"

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class InstallerConfig(BaseModel):
    """Settings describing the target project and the commands run against it.

    ``download_command`` and ``build_command`` are argument templates; the
    ``{php}`` and ``{version}`` placeholders are substituted per element.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    project_root: Path
    bin_path: Path = Path("vendor/bin/tailwindcss")
    cli_version: str = DEFAULT_CLI_VERSION
    php_binary: str = "php"
    download_command: tuple[str, ...] = (
        "{php}",
        "artisan",
        "tailwindcss:download",
        "--cli-version",
        "{version}",
    )
    build_command: tuple[str, ...] = ("{php}", "artisan", "tailwindcss:build")
    stylesheet: str = "css/app.css"
    layouts: tuple[str, ...] = ("app", "guest")
    middleware: str = DEFAULT_MIDDLEWARE
    middleware_group: str = "web"
    ignore_entries: tuple[str, ...] = ("/public/css/", "/public/dist/", ".tailwindcss-manifest.json")
    stale_files: tuple[Path, ...] = (Path("tailwind.config.js"),)

    @field_validator("cli_version", "php_binary", "stylesheet", "middleware", "middleware_group")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("download_command", "build_command")
    @classmethod
    def _require_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("command must contain at least one argument")
        return value

    @model_validator(mode="after")
    def _resolve_paths(self) -> InstallerConfig:
        """Anchor relative paths at the project root.

        Returns:
            InstallerConfig: Instance whose path fields are absolute.
        """

        root = self.project_root.expanduser().resolve()
        object.__setattr__(self, "project_root", root)
        object.__setattr__(self, "bin_path", _resolve(root, self.bin_path))
        object.__setattr__(self, "stale_files", tuple(_resolve(root, path) for path in self.stale_files))
        return self

    def path(self, *parts: str) -> Path:
        """Return a path inside the project root."""

        return self.project_root.joinpath(*parts)

    def resource_path(self, *parts: str) -> Path:
        """Return a path inside the project's ``resources`` directory."""

        return self.path("resources", *parts)

    def layout_paths(self) -> list[Path]:
        """Return the candidate blade layout files, existing or not."""

        return [self.resource_path("views", "layouts", f"{name}.blade.php") for name in self.layouts]

    def download_argv(self, version: str | None = None) -> list[str]:
        """Return the command that fetches the Tailwind CLI binary.

        Args:
            version: Optional version overriding :attr:`cli_version`.

        Returns:
            list[str]: Rendered argument vector.
        """

        return self._render(self.download_command, version=version or self.cli_version)

    def build_argv(self) -> list[str]:
        """Return the command that runs the first Tailwind build."""

        return self._render(self.build_command, version=self.cli_version)

    def _render(self, template: tuple[str, ...], *, version: str) -> list[str]:
        return [part.replace("{php}", self.php_binary).replace("{version}", version) for part in template]


def _resolve(root: Path, value: Path) -> Path:
    candidate = value.expanduser()
    if candidate.is_absolute():
        return candidate
    return root / candidate


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda match: env.get(match.group(1), match.group(0)), value)
    if isinstance(value, Mapping):
        return {key: _expand_env_value(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(item, env) for item in value]
    return value


def read_config_file(path: Path, *, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Return the settings stored in a ``.tailwindcss.toml`` document.

    Settings may live at the top level or under a ``[tailwindcss]`` table.
    ``${VAR}`` references in string values are expanded from ``env``.

    Args:
        path: TOML file to read. Missing files yield an empty mapping.
        env: Environment used for ``${VAR}`` expansion; defaults to ``os.environ``.

    Returns:
        dict[str, Any]: Raw settings ready for model validation.

    Raises:
        ConfigError: If the document is not valid TOML.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    section = data.get("tailwindcss", data)
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tailwindcss] in {path} must be a table")
    return _expand_env_value(dict(section), env if env is not None else os.environ)


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> InstallerConfig:
    """Build an :class:`InstallerConfig` from layered sources.

    Precedence, lowest first: built-in defaults, the project's
    ``.tailwindcss.toml`` (or ``config_file``), ``TAILWINDCSS_BIN_PATH`` and
    ``TAILWINDCSS_CLI_VERSION`` from the environment, then ``overrides``.

    Args:
        root: Project root the installer targets.
        config_file: Optional explicit configuration file.
        env: Environment mapping; defaults to ``os.environ``.
        overrides: Final settings applied by the caller (usually CLI flags).

    Returns:
        InstallerConfig: Validated configuration.

    Raises:
        ConfigError: If any source holds invalid settings.
    """

    environment = env if env is not None else os.environ
    project_root = root.expanduser().resolve()
    source = config_file or project_root / CONFIG_FILENAME
    payload: dict[str, Any] = read_config_file(source, env=environment)
    payload.pop("project_root", None)

    if bin_path := environment.get(BIN_PATH_ENV):
        payload["bin_path"] = bin_path
    if cli_version := environment.get(CLI_VERSION_ENV):
        payload["cli_version"] = cli_version
    payload.update({key: value for key, value in (overrides or {}).items() if value is not None})

    try:
        return InstallerConfig(project_root=project_root, **payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration ({source}): {exc}") from exc


__all__ = [
    "BIN_PATH_ENV",
    "CLI_VERSION_ENV",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CLI_VERSION",
    "DEFAULT_MIDDLEWARE",
    "InstallerConfig",
    "load_config",
    "read_config_file",
]

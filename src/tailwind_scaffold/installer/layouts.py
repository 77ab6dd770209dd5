# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Add the Tailwind stylesheet tag to blade layouts."""

from __future__ import annotations

import re
from typing import Final

from ..config import InstallerConfig
from ..filesystem import FileSystem
from ..logging import info, warn
from ..patching import AnchorNotFoundError, insert_before
from .models import InstallResult

TAILWIND_CALL: Final[str] = "{{ tailwindcss("
HEAD_CLOSE: Final[str] = "</head>"

_HEAD_INDENT = re.compile(r"([ \t]*)</head>")
_VITE_DIRECTIVE = re.compile(r"^(?P<indent>[ \t]*)@vite\((?P<args>[^)]*)\)", re.MULTILINE)
_VITE_ENTRY = re.compile(r"""(['"])(?P<path>[^'"]+)\1""")


def _replace_vite_entry(contents: str, tag: str, stylesheet: str) -> str | None:
    """Swap the ``@vite`` entry for ``resources/<stylesheet>`` with ``tag``.

    Remaining entries stay in a ``@vite`` directive on the following line.
    Returns ``None`` when no directive loads the stylesheet.
    """

    target = f"resources/{stylesheet}"
    newline = "\r\n" if "\r\n" in contents else "\n"
    for match in _VITE_DIRECTIVE.finditer(contents):
        entries = list(_VITE_ENTRY.finditer(match.group("args")))
        kept = [entry.group(0) for entry in entries if entry.group("path") != target]
        if len(kept) == len(entries):
            continue
        indent = match.group("indent")
        replacement = f"{indent}{tag}"
        if kept:
            replacement += f"{newline}{indent}@vite([{', '.join(kept)}])"
        return contents[: match.start()] + replacement + contents[match.end() :]
    return None


def tailwind_tag(stylesheet: str) -> str:
    """Return the ``<link>`` tag referencing the compiled ``stylesheet``."""

    return f"<link rel=\"stylesheet\" href=\"{{{{ tailwindcss('{stylesheet}') }}}}\">"


def mix_tag(stylesheet: str) -> str:
    """Return the Laravel Mix tag the Tailwind tag replaces."""

    return f"<link rel=\"stylesheet\" href=\"{{{{ mix('{stylesheet}') }}}}\">"


def append_tailwind_tag(contents: str, *, stylesheet: str = "css/app.css", source: str | None = None) -> str:
    """Return ``contents`` with the Tailwind stylesheet tag present exactly once.

    A layout already calling ``tailwindcss()`` is returned unchanged. A Mix
    tag for the same stylesheet is swapped in place, and a ``@vite`` entry for
    it is replaced by the tag while other Vite entries are kept. Otherwise the
    tag is added on its own line before ``</head>``, indented one level deeper
    than the closing tag.

    Args:
        contents: Blade layout source.
        stylesheet: Stylesheet path passed to the ``tailwindcss()`` helper.
        source: Optional layout identity used in error messages.

    Returns:
        str: Updated layout source.

    Raises:
        AnchorNotFoundError: If the layout has no ``</head>`` to anchor on.
    """

    if TAILWIND_CALL in contents:
        return contents

    tag = tailwind_tag(stylesheet)
    legacy = mix_tag(stylesheet)
    if legacy in contents:
        return contents.replace(legacy, tag, 1)
    swapped = _replace_vite_entry(contents, tag, stylesheet)
    if swapped is not None:
        return swapped

    match = _HEAD_INDENT.search(contents)
    indent = match.group(1) if match else ""
    newline = "\r\n" if "\r\n" in contents else "\n"
    return insert_before(
        contents,
        HEAD_CLOSE,
        f"    {tag}{newline}{indent}",
        TAILWIND_CALL,
        source=source,
    )


def append_tailwind_styles_to_layouts(
    config: InstallerConfig,
    fs: FileSystem,
    result: InstallResult,
    *,
    use_emoji: bool = True,
) -> None:
    """Patch every existing layout listed in the configuration.

    Layouts without a ``</head>`` are reported and skipped; the remaining
    layouts are still patched.

    Args:
        config: Installer configuration naming the layouts.
        fs: Filesystem provider used to read and write layouts.
        result: Result accumulator updated per layout.
        use_emoji: Whether log output may include emoji glyphs.
    """

    for layout in config.layout_paths():
        if not fs.exists(layout):
            continue
        original = fs.read(layout)
        try:
            updated = append_tailwind_tag(original, stylesheet=config.stylesheet, source=str(layout))
        except AnchorNotFoundError as exc:
            warn(f"{exc}; add the Tailwind stylesheet tag manually", use_emoji=use_emoji)
            result.record(layout, changed=False)
            continue
        if updated == original:
            result.record(layout, changed=False)
            continue
        info(f"Adding Tailwind stylesheet tag to {layout.name}", use_emoji=use_emoji)
        fs.write(layout, updated)
        result.record(layout, changed=True)


__all__ = [
    "HEAD_CLOSE",
    "TAILWIND_CALL",
    "append_tailwind_styles_to_layouts",
    "append_tailwind_tag",
    "mix_tag",
    "tailwind_tag",
]

"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from deskicons.models.config import SearchConfig
from deskicons.settings import Settings


def write_entry(path: Path, body: str) -> Path:
    """Write a .desktop file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


def write_settings(path: Path, data: dict[str, Any]) -> Settings:
    """Write a settings file by hand and load it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return Settings(path)


def entry_body(name: str | None = None, icon: str | None = None, **extra: str) -> str:
    lines = ["[Desktop Entry]"]
    if name is not None:
        lines.append(f"Name={name}")
    if icon is not None:
        lines.append(f"Icon={icon}")
    lines.extend(f"{k}={v}" for k, v in extra.items())
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config and ~/.local/share."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr(Settings, "_instance", None)


@pytest.fixture
def icon_theme(tmp_path):
    """Fake /usr/share/icons layout; returns (icons_root, hicolor, pixmaps)."""
    icons = tmp_path / "icons"
    hicolor = icons / "hicolor"
    for sub in ("scalable", "48x48", "16x16", "32x32", "256x256"):
        (hicolor / sub / "apps").mkdir(parents=True)
    pixmaps = tmp_path / "pixmaps"
    pixmaps.mkdir()
    return icons, hicolor, pixmaps


@pytest.fixture
def apps_roots(tmp_path):
    """Two application directories; the second one does not exist yet."""
    system = tmp_path / "share" / "applications"
    system.mkdir(parents=True)
    user = tmp_path / "home" / ".local" / "share" / "applications"
    return system, user


@pytest.fixture
def search_config(apps_roots, icon_theme):
    icons, hicolor, pixmaps = icon_theme
    return SearchConfig(
        roots=apps_roots,
        icon_dirs=(
            hicolor / "scalable" / "apps",
            hicolor / "48x48" / "apps",
            pixmaps,
            icons,
        ),
        hicolor_root=hicolor,
    )

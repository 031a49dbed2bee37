"""Search configuration for the scanner and icon resolver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from deskicons.utils import expand_path, xdg_data_home

if TYPE_CHECKING:
    from deskicons.settings import Settings

log = logging.getLogger(__name__)

SYSTEM_APPLICATIONS_DIR = Path("/usr/share/applications")
HICOLOR_ROOT = Path("/usr/share/icons/hicolor")

DEFAULT_ICON_DIRS: tuple[Path, ...] = (
    HICOLOR_ROOT / "scalable" / "apps",
    HICOLOR_ROOT / "48x48" / "apps",
    Path("/usr/share/pixmaps"),
    Path("/usr/share/icons"),
)

# Order matters: earlier extensions win within one directory.
DEFAULT_ICON_EXTENSIONS: tuple[str, ...] = (".svg", ".png")

DESKTOP_SUFFIX = ".desktop"


def default_roots() -> tuple[Path, ...]:
    """System-wide and per-user application directories."""
    return (SYSTEM_APPLICATIONS_DIR, xdg_data_home() / "applications")


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Every filesystem location the core reads from.

    Instances are immutable; use :func:`dataclasses.replace` to derive
    variants (tests point all of these at a temporary tree).
    """

    roots: tuple[Path, ...] = field(default_factory=default_roots)
    entry_suffix: str = DESKTOP_SUFFIX
    icon_dirs: tuple[Path, ...] = DEFAULT_ICON_DIRS
    icon_extensions: tuple[str, ...] = DEFAULT_ICON_EXTENSIONS
    hicolor_root: Path = HICOLOR_ROOT

    @classmethod
    def default(cls) -> SearchConfig:
        return cls()

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchConfig:
        """Overlay user settings on top of the defaults.

        Recognised keys: ``scan.roots``, ``scan.suffix``,
        ``icons.search_dirs``, ``icons.extensions``, ``icons.hicolor_root``.
        Values of the wrong type are ignored.
        """
        config = cls.default()
        changes: dict[str, Any] = {}

        roots = _path_list(settings.get("scan.roots"), "scan.roots")
        if roots is not None:
            changes["roots"] = roots

        suffix = settings.get("scan.suffix")
        if suffix is not None:
            if isinstance(suffix, str) and suffix:
                changes["entry_suffix"] = suffix
            else:
                log.warning("Ignoring invalid setting scan.suffix: %r", suffix)

        icon_dirs = _path_list(settings.get("icons.search_dirs"), "icons.search_dirs")
        if icon_dirs is not None:
            changes["icon_dirs"] = icon_dirs

        extensions = settings.get("icons.extensions")
        if extensions is not None:
            if isinstance(extensions, list) and all(isinstance(e, str) and e for e in extensions):
                changes["icon_extensions"] = tuple(
                    e if e.startswith(".") else f".{e}" for e in extensions
                )
            else:
                log.warning("Ignoring invalid setting icons.extensions: %r", extensions)

        hicolor = settings.get("icons.hicolor_root")
        if hicolor is not None:
            if isinstance(hicolor, str) and hicolor:
                changes["hicolor_root"] = expand_path(hicolor)
            else:
                log.warning("Ignoring invalid setting icons.hicolor_root: %r", hicolor)

        return replace(config, **changes) if changes else config


def _path_list(value: Any, key: str) -> tuple[Path, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        log.warning("Ignoring invalid setting %s: %r", key, value)
        return None
    return tuple(expand_path(v) for v in value)

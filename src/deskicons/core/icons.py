"""Icon file lookup for desktop entries."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from deskicons.models.config import SearchConfig
from deskicons.models.icon import FALLBACK_ICON, IconFormat, ResolvedIcon

log = logging.getLogger(__name__)

_FORMATS: dict[str, IconFormat] = {
    ".svg": IconFormat.SVG,
    ".png": IconFormat.PNG,
}

_SIZE_DIR = re.compile(r"^(\d+)x(\d+)(?:@\d+)?$")


def _size_dir_key(name: str) -> tuple[int, int, str]:
    """Sort key for hicolor subdirectories.

    ``scalable`` first, then ``NxN`` buckets from largest to smallest,
    then anything else alphabetically.
    """
    if name == "scalable":
        return (0, 0, name)
    match = _SIZE_DIR.match(name)
    if match:
        return (1, -int(match.group(1)), name)
    return (2, 0, name)


class IconResolver:
    """Find the image file behind an ``Icon=`` value.

    Lookup order:
    1. An absolute path that exists is used as is.
    2. Each configured icon directory, trying each extension in turn.
    3. Every ``<hicolor>/<size>/apps/`` directory.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig.default()

    def find(self, icon_ref: str) -> Path | None:
        """Return the first existing icon file for *icon_ref*, or None."""
        if not icon_ref:
            return None

        extensions = self.config.icon_extensions

        candidate = Path(icon_ref)
        if candidate.is_absolute():
            if candidate.is_file():
                return candidate
            # Some entries drop the extension from an absolute Icon= path
            for ext in extensions:
                path = Path(f"{icon_ref}{ext}")
                if path.is_file():
                    return path
            log.debug("Absolute icon path %s does not exist", icon_ref)
            return None

        for directory in self.config.icon_dirs:
            for ext in extensions:
                path = Path(directory) / f"{icon_ref}{ext}"
                if path.is_file():
                    return path

        for size_dir in self._hicolor_size_dirs():
            apps = size_dir / "apps"
            for ext in extensions:
                path = apps / f"{icon_ref}{ext}"
                if path.is_file():
                    return path

        return None

    def resolve(self, icon_ref: str) -> ResolvedIcon:
        """Resolve *icon_ref* to a drawable icon or the fallback placeholder."""
        path = self.find(icon_ref)
        if path is None:
            log.debug("No icon found for %r", icon_ref)
            return FALLBACK_ICON
        fmt = _FORMATS.get(path.suffix.lower())
        if fmt is None:
            log.debug("Unsupported icon format for %r: %s", icon_ref, path)
            return FALLBACK_ICON
        return ResolvedIcon(path=path, format=fmt)

    def _hicolor_size_dirs(self) -> list[Path]:
        root = Path(self.config.hicolor_root)
        try:
            with os.scandir(root) as it:
                names = [e.name for e in it if e.is_dir()]
        except OSError as e:
            log.debug("Cannot list hicolor theme at %s: %s", root, e)
            return []
        return [root / name for name in sorted(names, key=_size_dir_key)]

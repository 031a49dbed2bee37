"""Minimal reader for the ``[Desktop Entry]`` section of .desktop files.

Only plain ``key=value`` lines are understood. Localized keys such as
``Name[de]`` are stored verbatim under their full key, values are not
unescaped, and ``Exec`` is left as the raw string.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from deskicons.models.desktop_entry import DesktopEntry

log = logging.getLogger(__name__)

SECTION_HEADER = "[Desktop Entry]"

NAME_KEY = "Name"
ICON_KEY = "Icon"


def parse_desktop_lines(lines: Iterable[str], source_path: Path | str) -> DesktopEntry | None:
    """Build a DesktopEntry from the lines of a .desktop file.

    Returns None unless the ``[Desktop Entry]`` section defines both
    ``Name`` and ``Icon``. Parsing stops at the first section header
    following ``[Desktop Entry]``.
    """
    values: dict[str, str] = {}
    in_section = False

    for raw in lines:
        line = raw.strip()
        if not in_section:
            if line == SECTION_HEADER:
                in_section = True
            continue
        if line.startswith("["):
            break
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            log.debug("Ignoring line with empty key in %s: %r", source_path, line)
            continue
        values[key] = value.strip()

    name = values.pop(NAME_KEY, None)
    icon = values.pop(ICON_KEY, None)
    if name is None or icon is None:
        return None
    return DesktopEntry(name=name, icon_ref=icon, source_path=Path(source_path), properties=values)


def parse_desktop_file(path: Path | str) -> DesktopEntry | None:
    """Parse a single .desktop file.

    Unreadable or undecodable files are treated like files without a
    usable entry: the error is logged and None is returned.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return parse_desktop_lines(f, path)
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Could not read %s: %s", path, e)
        return None

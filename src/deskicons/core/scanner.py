"""Recursive file listing for application directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)


def list_files(root: Path | str) -> list[Path]:
    """Return absolute paths of all regular files below *root*.

    Walks depth-first with ``os.scandir``, descending into every
    subdirectory including symlinked ones. Within a directory, names are
    visited in sorted order and files come before subdirectories, so the
    result is stable for a given filesystem state. A directory reached a
    second time (a symlink loop) is skipped.

    A missing or unreadable root yields an empty list.
    """
    files: list[Path] = []
    visited: set[tuple[int, int]] = set()
    stack: list[str] = [str(Path(root).absolute())]
    while stack:
        current = stack.pop()
        try:
            st = os.stat(current)
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.debug("Skipping %s: %s", current, e)
            continue

        key = (st.st_dev, st.st_ino)
        if key in visited:
            log.debug("Skipping %s: already visited", current)
            continue
        visited.add(key)

        subdirs: list[str] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    subdirs.append(entry.path)
                elif entry.is_file():
                    files.append(Path(entry.path))
            except OSError:
                continue
        # Reversed so the first subdirectory is popped first.
        stack.extend(reversed(subdirs))
    return files


def filter_by_suffix(paths: Iterable[Path], suffix: str = ".desktop") -> list[Path]:
    """Keep paths that end with *suffix* (exact, case-sensitive)."""
    return [p for p in paths if str(p).endswith(suffix)]

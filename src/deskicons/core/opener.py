"""Hand files to the desktop's default application."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

OPENER_COMMAND = "xdg-open"


def open_source(path: Path | str) -> bool:
    """Open *path* with the default handler without waiting for it.

    Returns True once the opener has been launched. Failures are logged
    and reported as False; nothing is raised.
    """
    path = Path(path)
    if not path.exists():
        log.warning("Cannot open %s: file does not exist", path)
        return False

    opener = shutil.which(OPENER_COMMAND)
    if opener is None:
        log.warning("Cannot open %s: %s not found", path, OPENER_COMMAND)
        return False

    try:
        subprocess.Popen(
            [opener, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        log.warning("Failed to launch %s for %s: %s", OPENER_COMMAND, path, e)
        return False

    log.debug("Opened %s with %s", path, opener)
    return True

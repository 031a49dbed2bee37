"""Deskicons GTK Application."""

from __future__ import annotations

import logging
import os
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from deskicons_gtk.window import DeskIconsWindow

APP_ID = "io.github.deskicons.Viewer"


class DeskIconsApplication(Adw.Application):
    """Main application class."""

    def __init__(self) -> None:
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )

    def do_activate(self) -> None:
        win = self.props.active_window
        if not win:
            win = DeskIconsWindow(application=self)
        win.present()


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("DESKICONS_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main() -> None:
    _setup_logging()
    app = DeskIconsApplication()
    sys.exit(app.run(sys.argv))

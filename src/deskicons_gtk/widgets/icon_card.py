"""Card showing one application icon with its name."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
gi.require_version("GdkPixbuf", "2.0")

from gi.repository import Gdk, GdkPixbuf, GLib, Gtk, Pango

from deskicons.core.catalog import Catalog
from deskicons.models.desktop_entry import DesktopEntry
from deskicons.models.icon import ResolvedIcon
from deskicons_gtk.constants import CARD_HEIGHT, ICON_SIZE, NAME_MAX_LINES

log = logging.getLogger(__name__)


def load_icon_pixbuf(icon: ResolvedIcon, size: int = ICON_SIZE) -> GdkPixbuf.Pixbuf | None:
    """Decode a resolved icon file into a pixbuf scaled to *size*.

    Safe to call off the main thread. Returns None for the fallback
    placeholder or when the file cannot be decoded; cards then show a
    blank image of the same size.
    """
    if icon.is_fallback or icon.path is None:
        return None
    try:
        pixbuf = GdkPixbuf.Pixbuf.new_from_file_at_scale(str(icon.path), size, size, True)
    except GLib.Error as e:
        log.warning("Could not load icon %s: %s", icon.path, e.message)
        return None
    return pixbuf


def load_catalog_pixbufs(
    catalog: Catalog, size: int = ICON_SIZE
) -> dict[Path, GdkPixbuf.Pixbuf | None]:
    """Decode every icon in *catalog*, keyed by entry source path.

    Each image file is decoded once even when several entries share it.
    """
    by_file: dict[Path | None, GdkPixbuf.Pixbuf | None] = {None: None}
    pixbufs: dict[Path, GdkPixbuf.Pixbuf | None] = {}
    for group in catalog.groups:
        for entry in group.entries:
            icon = catalog.icon_for(entry)
            if icon.path not in by_file:
                by_file[icon.path] = load_icon_pixbuf(icon, size)
            pixbufs[entry.source_path] = by_file[icon.path]
    return pixbufs


class IconCard(Gtk.Button):
    """Flat button with a 48 px icon above the application name.

    *pixbuf* is decoded beforehand by :func:`load_catalog_pixbufs`; None
    gives a blank image.
    """

    def __init__(
        self,
        entry: DesktopEntry,
        pixbuf: GdkPixbuf.Pixbuf | None,
        on_activate: Callable[[DesktopEntry], None],
    ) -> None:
        super().__init__()
        self.entry = entry
        self.add_css_class("card")
        self.set_tooltip_text(str(entry.source_path))
        self.set_size_request(-1, CARD_HEIGHT)

        box = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=8,
            valign=Gtk.Align.CENTER,
            margin_top=8,
            margin_bottom=8,
            margin_start=8,
            margin_end=8,
        )
        self.set_child(box)

        image = Gtk.Image(pixel_size=ICON_SIZE, halign=Gtk.Align.CENTER)
        if pixbuf is not None:
            image.set_from_paintable(Gdk.Texture.new_for_pixbuf(pixbuf))
        image.update_property([Gtk.AccessibleProperty.LABEL], [entry.name])
        box.append(image)

        label = Gtk.Label(
            label=entry.name,
            wrap=True,
            wrap_mode=Pango.WrapMode.WORD_CHAR,
            lines=NAME_MAX_LINES,
            ellipsize=Pango.EllipsizeMode.END,
            justify=Gtk.Justification.CENTER,
            max_width_chars=14,
        )
        label.add_css_class("caption")
        box.append(label)

        self.connect("clicked", lambda _btn: on_activate(self.entry))

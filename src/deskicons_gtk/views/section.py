"""One labelled grid of icon cards per application directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("GdkPixbuf", "2.0")

from gi.repository import GdkPixbuf, Gtk

from deskicons.models.desktop_entry import DesktopEntry, EntryGroup
from deskicons_gtk.constants import GRID_COLUMNS
from deskicons_gtk.widgets.icon_card import IconCard


def section_title(group: EntryGroup) -> str:
    return f"{group.root} ({len(group)})"


class DirectorySection(Gtk.Box):
    """Heading plus a fixed-width grid of the entries under one root."""

    def __init__(
        self,
        group: EntryGroup,
        pixbufs: Mapping[Path, GdkPixbuf.Pixbuf | None],
        on_activate: Callable[[DesktopEntry], None],
    ) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=8)

        heading = Gtk.Label(label=section_title(group), halign=Gtk.Align.START, selectable=True)
        heading.add_css_class("title-4")
        self.append(heading)

        flow = Gtk.FlowBox(
            homogeneous=True,
            min_children_per_line=GRID_COLUMNS,
            max_children_per_line=GRID_COLUMNS,
            column_spacing=8,
            row_spacing=8,
            selection_mode=Gtk.SelectionMode.NONE,
        )
        for entry in group.entries:
            flow.append(IconCard(entry, pixbufs.get(entry.source_path), on_activate))
        self.append(flow)

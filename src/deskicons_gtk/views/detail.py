"""Detail window listing every property of a desktop entry."""

from __future__ import annotations

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gtk

from deskicons.models.desktop_entry import DesktopEntry
from deskicons_gtk.widgets.common import action_button


class EntryDetailWindow(Adw.Window):
    """Key/value view of a single entry with an "Open Source File" action."""

    def __init__(
        self,
        parent: Gtk.Window,
        entry: DesktopEntry,
        on_open_source: Callable[[DesktopEntry], None],
    ) -> None:
        super().__init__(title=f"Details - {entry.name}")
        self.set_default_size(600, 520)
        self.set_transient_for(parent)
        self.entry = entry

        toolbar_view = Adw.ToolbarView()
        self.set_content(toolbar_view)

        header = Adw.HeaderBar()
        header.pack_end(
            action_button(
                "document-open-symbolic",
                "Open Source File",
                lambda _btn: on_open_source(self.entry),
                "suggested-action",
            )
        )
        toolbar_view.add_top_bar(header)

        page = Adw.PreferencesPage()
        toolbar_view.set_content(page)

        summary = Adw.PreferencesGroup(title="Entry")
        summary.add(self._row("Name", entry.name))
        summary.add(self._row("Icon", entry.icon_ref))
        summary.add(self._row("Source", str(entry.source_path)))
        page.add(summary)

        props = Adw.PreferencesGroup(title="Properties")
        if entry.properties:
            for key, value in entry.properties.items():
                props.add(self._row(key, value))
        else:
            props.set_description("No other keys in this entry.")
        page.add(props)

    @staticmethod
    def _row(key: str, value: str) -> Adw.ActionRow:
        row = Adw.ActionRow(title=key, subtitle=value or " ")
        row.set_subtitle_selectable(True)
        row.set_use_markup(False)
        return row

"""Main application window."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
gi.require_version("GdkPixbuf", "2.0")

from gi.repository import Adw, GdkPixbuf, Gio, GLib, Gtk

from deskicons.core.catalog import Catalog, build_catalog, run_in_background
from deskicons.core.opener import open_source
from deskicons.models.config import SearchConfig
from deskicons.models.desktop_entry import DesktopEntry
from deskicons.settings import Settings
from deskicons_gtk.views.detail import EntryDetailWindow
from deskicons_gtk.views.section import DirectorySection
from deskicons_gtk.widgets.icon_card import load_catalog_pixbufs

log = logging.getLogger(__name__)


def load_catalog_view(
    config: SearchConfig,
) -> tuple[Catalog, dict[Path, GdkPixbuf.Pixbuf | None]]:
    """Scan, resolve and decode everything the window shows. Runs off the main thread."""
    catalog = build_catalog(config)
    return catalog, load_catalog_pixbufs(catalog)


class DeskIconsWindow(Adw.ApplicationWindow):
    """Scrollable grid of application icons, one section per directory."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_default_size(900, 700)
        self.set_title("Desktop Icon Viewer")

        self.config = SearchConfig.from_settings(Settings.instance())
        self._generation = 0

        # Toast overlay wraps everything
        self.toast_overlay = Adw.ToastOverlay()
        self.set_content(self.toast_overlay)

        toolbar_view = Adw.ToolbarView()
        self.toast_overlay.set_child(toolbar_view)

        header = Adw.HeaderBar()
        self._reload_btn = Gtk.Button(icon_name="view-refresh-symbolic", tooltip_text="Reload")
        self._reload_btn.connect("clicked", lambda _btn: self.reload())
        header.pack_start(self._reload_btn)
        toolbar_view.add_top_bar(header)

        self.stack = Gtk.Stack(transition_type=Gtk.StackTransitionType.CROSSFADE)
        toolbar_view.set_content(self.stack)

        spinner = Gtk.Spinner(spinning=True, halign=Gtk.Align.CENTER, valign=Gtk.Align.CENTER)
        spinner.set_size_request(32, 32)
        self.stack.add_named(spinner, "loading")

        self.empty_status = Adw.StatusPage(
            icon_name="application-x-executable-symbolic",
            title="No Applications Found",
            description="No desktop entries with a name and an icon were found.",
        )
        self.stack.add_named(self.empty_status, "empty")

        self.error_status = Adw.StatusPage(
            icon_name="dialog-error-symbolic",
            title="Scan Failed",
        )
        self.stack.add_named(self.error_status, "error")

        self.scrolled = Gtk.ScrolledWindow(vexpand=True, hscrollbar_policy=Gtk.PolicyType.NEVER)
        self.stack.add_named(self.scrolled, "content")

        self.reload()

    def show_toast(self, message: str, timeout: int = 3) -> None:
        """Show a toast notification."""
        self.toast_overlay.add_toast(Adw.Toast(title=message, timeout=timeout))

    def reload(self) -> None:
        """Start a fresh scan and replace the view once it finishes."""
        self._generation += 1
        generation = self._generation
        self._reload_btn.set_sensitive(False)
        self.stack.set_visible_child_name("loading")

        future = run_in_background(load_catalog_view, self.config)
        future.add_done_callback(
            lambda f: GLib.idle_add(self._on_fetch_done, f, generation)
        )

    def _on_fetch_done(self, future: Future, generation: int) -> bool:
        """Swap in the scan result. Called via GLib.idle_add."""
        if generation != self._generation:
            return GLib.SOURCE_REMOVE
        self._reload_btn.set_sensitive(True)

        try:
            catalog, pixbufs = future.result()
        except Exception as e:
            log.exception("Scanning desktop entries failed")
            self.error_status.set_description(str(e))
            self.stack.set_visible_child_name("error")
            return GLib.SOURCE_REMOVE

        self._show_catalog(catalog, pixbufs)
        return GLib.SOURCE_REMOVE

    def _show_catalog(
        self,
        catalog: Catalog,
        pixbufs: dict[Path, GdkPixbuf.Pixbuf | None],
    ) -> None:
        if not catalog.groups:
            self.stack.set_visible_child_name("empty")
            return

        content = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=16,
            margin_top=16,
            margin_bottom=16,
            margin_start=16,
            margin_end=16,
        )
        for group in catalog.groups:
            content.append(DirectorySection(group, pixbufs, self.show_details))
        self.scrolled.set_child(content)
        self.stack.set_visible_child_name("content")

    def show_details(self, entry: DesktopEntry) -> None:
        """Open the detail window for *entry*."""
        EntryDetailWindow(self, entry, self.open_entry_source).present()

    def open_entry_source(self, entry: DesktopEntry) -> None:
        """Open the entry's .desktop file with the default application."""
        uri = entry.source_path.as_uri()
        try:
            Gio.AppInfo.launch_default_for_uri(uri, None)
            return
        except GLib.Error as e:
            log.info("Default handler for %s failed (%s), trying xdg-open", uri, e.message)

        if not open_source(entry.source_path):
            self.show_toast(f"Could not open {entry.source_path.name}")

"""Shared GTK widgets and helpers."""

from deskicons_gtk.widgets.common import action_button, icon_label
from deskicons_gtk.widgets.icon_card import IconCard, load_catalog_pixbufs, load_icon_pixbuf

__all__ = [
    "IconCard",
    "action_button",
    "icon_label",
    "load_catalog_pixbufs",
    "load_icon_pixbuf",
]

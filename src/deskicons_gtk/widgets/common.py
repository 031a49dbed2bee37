"""Common widget helpers."""

from __future__ import annotations

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk


def icon_label(icon_name: str, label: str) -> Gtk.Box:
    """Create a Box with an icon and label for use as a button child."""
    box = Gtk.Box(spacing=6)
    box.append(Gtk.Image.new_from_icon_name(icon_name))
    box.append(Gtk.Label(label=label))
    return box


def action_button(
    icon_name: str,
    label: str,
    on_clicked: Callable[[Gtk.Button], None],
    *css_classes: str,
) -> Gtk.Button:
    """Create a labelled button with a leading icon and a click handler."""
    button = Gtk.Button(child=icon_label(icon_name, label))
    for css_class in css_classes:
        button.add_css_class(css_class)
    button.connect("clicked", on_clicked)
    return button

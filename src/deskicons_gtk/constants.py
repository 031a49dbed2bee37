"""Shared constants for the Deskicons GTK frontend."""

from __future__ import annotations

# Cards per grid row in a directory section.
GRID_COLUMNS = 5

# Edge length of an icon inside a card, in logical pixels.
ICON_SIZE = 48

CARD_HEIGHT = 100

# Lines of text shown under an icon before ellipsizing.
NAME_MAX_LINES = 2

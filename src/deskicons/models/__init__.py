"""Deskicons data models."""

from deskicons.models.config import SearchConfig
from deskicons.models.desktop_entry import DesktopEntry, EntryGroup, GroupedEntries
from deskicons.models.icon import FALLBACK_ICON, IconFormat, ResolvedIcon

__all__ = [
    "DesktopEntry",
    "EntryGroup",
    "FALLBACK_ICON",
    "GroupedEntries",
    "IconFormat",
    "ResolvedIcon",
    "SearchConfig",
]

"""Desktop entry and grouping dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True, slots=True)
class DesktopEntry:
    """One parsed ``.desktop`` file.

    ``icon_ref`` is either an absolute path or a bare theme icon name.
    ``properties`` holds every other key of the ``[Desktop Entry]``
    section, in the order the keys first appeared.
    """

    name: str
    icon_ref: str
    source_path: Path
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True, slots=True)
class EntryGroup:
    """Entries found under a single scan root, in scan order."""

    root: Path
    entries: tuple[DesktopEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


class GroupedEntries:
    """Ordered, read-only association of scan roots to their entries."""

    __slots__ = ("_groups",)

    def __init__(self, groups: tuple[EntryGroup, ...] | list[EntryGroup] = ()) -> None:
        self._groups = tuple(groups)

    def get(self, root: Path | str) -> tuple[DesktopEntry, ...]:
        """Return the entries for *root*, or an empty tuple."""
        root = Path(root)
        for group in self._groups:
            if group.root == root:
                return group.entries
        return ()

    def roots(self) -> list[Path]:
        return [group.root for group in self._groups]

    @property
    def total(self) -> int:
        """Number of entries across all groups."""
        return sum(len(group) for group in self._groups)

    def __iter__(self) -> Iterator[EntryGroup]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __bool__(self) -> bool:
        return bool(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupedEntries):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self) -> str:
        return f"GroupedEntries({list(self._groups)!r})"

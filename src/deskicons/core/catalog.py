"""Scan, parse and group desktop entries across all configured roots."""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar

from deskicons.core.icons import IconResolver
from deskicons.core.parser import parse_desktop_file
from deskicons.core.scanner import filter_by_suffix, list_files
from deskicons.models.config import SearchConfig
from deskicons.models.desktop_entry import DesktopEntry, EntryGroup, GroupedEntries
from deskicons.models.icon import FALLBACK_ICON, ResolvedIcon

log = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_grouped(config: SearchConfig | None = None) -> GroupedEntries:
    """Collect every valid desktop entry, grouped by scan root.

    Roots are visited in configuration order and entries keep scan order
    within their root. Roots without any valid entry are left out.
    """
    config = config or SearchConfig.default()
    groups: list[EntryGroup] = []

    for root in config.roots:
        candidates = filter_by_suffix(list_files(root), config.entry_suffix)
        entries: list[DesktopEntry] = []
        for path in candidates:
            entry = parse_desktop_file(path)
            if entry is not None:
                entries.append(entry)
        log.debug(
            "%s: %d of %d %s files usable",
            root, len(entries), len(candidates), config.entry_suffix,
        )
        if entries:
            groups.append(EntryGroup(root=Path(root), entries=tuple(entries)))

    result = GroupedEntries(groups)
    log.info("Found %d desktop entries in %d directories", result.total, len(result))
    return result


@dataclass(frozen=True, slots=True)
class Catalog:
    """Grouped entries together with the icon resolved for each of them.

    ``icons`` is keyed by ``DesktopEntry.source_path``. Everything a
    display layer needs is in here, so rendering does no disk access
    beyond decoding the image files.
    """

    groups: GroupedEntries
    icons: Mapping[Path, ResolvedIcon] = field(default_factory=dict)

    def icon_for(self, entry: DesktopEntry) -> ResolvedIcon:
        return self.icons.get(entry.source_path, FALLBACK_ICON)


def build_catalog(config: SearchConfig | None = None) -> Catalog:
    """Fetch the grouped entries and resolve every icon they reference."""
    config = config or SearchConfig.default()
    groups = fetch_grouped(config)
    resolver = IconResolver(config)

    by_ref: dict[str, ResolvedIcon] = {}
    icons: dict[Path, ResolvedIcon] = {}
    for group in groups:
        for entry in group.entries:
            if entry.icon_ref not in by_ref:
                by_ref[entry.icon_ref] = resolver.resolve(entry.icon_ref)
            icons[entry.source_path] = by_ref[entry.icon_ref]

    missing = sum(1 for icon in icons.values() if icon.is_fallback)
    log.info("Resolved icons for %d entries (%d without a usable icon)", len(icons), missing)
    return Catalog(groups=groups, icons=MappingProxyType(icons))


def run_in_background(
    fn: Callable[..., T],
    *args: Any,
    executor: Executor | None = None,
) -> Future[T]:
    """Submit ``fn(*args)`` to a worker thread.

    The returned future completes once, with the result or with the
    exception raised by *fn*. When no executor is given a private
    single-thread pool is used and released as soon as the job finishes.
    """
    if executor is not None:
        return executor.submit(fn, *args)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="deskicons-scan")
    future = pool.submit(fn, *args)
    pool.shutdown(wait=False)
    return future


def fetch_grouped_async(
    config: SearchConfig | None = None,
    executor: Executor | None = None,
) -> Future[GroupedEntries]:
    """Run :func:`fetch_grouped` on a worker thread."""
    return run_in_background(fetch_grouped, config, executor=executor)


def build_catalog_async(
    config: SearchConfig | None = None,
    executor: Executor | None = None,
) -> Future[Catalog]:
    """Run :func:`build_catalog` on a worker thread."""
    return run_in_background(build_catalog, config, executor=executor)

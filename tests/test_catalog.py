"""Tests for scanning and grouping desktop entries."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from deskicons.core import catalog
from deskicons.core.catalog import (
    Catalog,
    build_catalog,
    build_catalog_async,
    fetch_grouped,
    fetch_grouped_async,
    run_in_background,
)
from deskicons.models.desktop_entry import GroupedEntries
from deskicons.models.icon import FALLBACK_ICON, IconFormat

from conftest import entry_body, write_entry


@pytest.fixture
def populated(apps_roots):
    system, user = apps_roots
    write_entry(system / "alpha.desktop", entry_body("Alpha", "alpha", Type="Application"))
    write_entry(system / "broken.desktop", entry_body(name="No Icon"))
    write_entry(system / "nested" / "beta.desktop", entry_body("Beta", "/opt/beta.png"))
    write_entry(system / "notes.txt", entry_body("Text", "text"))
    return system, user


class TestFetchGrouped:
    def test_two_valid_one_invalid(self, populated, search_config):
        system, _ = populated
        grouped = fetch_grouped(search_config)

        entries = grouped.get(system)
        assert [e.name for e in entries] == ["Alpha", "Beta"]
        assert entries[0].properties["Type"] == "Application"
        assert entries[1].icon_ref == "/opt/beta.png"

    def test_missing_root_is_omitted(self, populated, search_config):
        system, user = populated
        grouped = fetch_grouped(search_config)

        assert grouped.roots() == [system]
        assert grouped.get(user) == ()
        assert grouped.total == 2

    def test_groups_follow_config_order(self, populated, search_config):
        system, user = populated
        write_entry(user / "mine.desktop", entry_body("Mine", "mine"))

        grouped = fetch_grouped(search_config)
        assert grouped.roots() == [system, user]
        assert [e.name for e in grouped.get(user)] == ["Mine"]

        reversed_config = replace(search_config, roots=(user, system))
        assert fetch_grouped(reversed_config).roots() == [user, system]

    def test_custom_suffix(self, populated, search_config):
        system, _ = populated
        grouped = fetch_grouped(replace(search_config, entry_suffix=".txt"))
        assert [e.name for e in grouped.get(system)] == ["Text"]

    def test_no_roots_gives_empty_result(self, search_config):
        grouped = fetch_grouped(replace(search_config, roots=()))
        assert not grouped
        assert len(grouped) == 0
        assert grouped.total == 0

    def test_unreadable_file_does_not_abort_batch(self, populated, search_config):
        system, _ = populated
        (system / "latin1.desktop").write_bytes(b"[Desktop Entry]\nName=Caf\xe9\nIcon=cafe\n")
        unreadable = system / "locked.desktop"
        write_entry(unreadable, entry_body("Locked", "locked"))
        unreadable.chmod(0)
        try:
            names = [e.name for e in fetch_grouped(search_config).get(system)]
        finally:
            unreadable.chmod(0o644)

        assert "Alpha" in names
        assert "Beta" in names
        assert "Caf\u00e9" not in names

    def test_result_is_rebuilt_each_time(self, populated, search_config):
        system, _ = populated
        first = fetch_grouped(search_config)
        write_entry(system / "gamma.desktop", entry_body("Gamma", "gamma"))
        second = fetch_grouped(search_config)

        assert first.total == 2
        assert second.total == 3
        assert first != second


class TestFetchGroupedAsync:
    def test_matches_synchronous_result(self, populated, search_config):
        future = fetch_grouped_async(search_config)
        result = future.result(timeout=10)

        assert isinstance(result, GroupedEntries)
        assert result == fetch_grouped(search_config)

    def test_uses_given_executor(self, populated, search_config):
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = fetch_grouped_async(search_config, executor=pool)
            assert future.result(timeout=10).total == 2

    def test_errors_surface_through_future(self, search_config, monkeypatch):
        def boom(root):
            raise RuntimeError("scan exploded")

        monkeypatch.setattr(catalog, "list_files", boom)
        future = fetch_grouped_async(search_config)
        with pytest.raises(RuntimeError, match="scan exploded"):
            future.result(timeout=10)

    def test_done_callback_fires_once(self, populated, search_config):
        calls = []
        done = threading.Event()

        def on_done(f):
            calls.append(f)
            done.set()

        future = fetch_grouped_async(search_config)
        future.add_done_callback(on_done)
        assert done.wait(timeout=10)

        assert calls == [future]


class TestBuildCatalog:
    def test_resolves_every_entry(self, populated, search_config, icon_theme):
        system, _ = populated
        _, hicolor, _ = icon_theme
        svg = hicolor / "scalable" / "apps" / "alpha.svg"
        svg.write_text("<svg/>")

        result = build_catalog(search_config)
        alpha, beta = result.groups.get(system)

        assert result.groups == fetch_grouped(search_config)
        assert result.icon_for(alpha).path == svg
        assert result.icon_for(alpha).format is IconFormat.SVG
        assert result.icon_for(beta) == FALLBACK_ICON
        assert set(result.icons) == {alpha.source_path, beta.source_path}

    def test_unknown_entry_gets_fallback(self, populated, search_config):
        system, _ = populated
        result = build_catalog(search_config)
        other = fetch_grouped(search_config).get(system)[0]

        empty = Catalog(groups=GroupedEntries([]))
        assert empty.icon_for(other) == FALLBACK_ICON
        assert result.icon_for(other).is_fallback

    def test_icons_are_read_only(self, populated, search_config):
        result = build_catalog(search_config)
        with pytest.raises(TypeError):
            result.icons[populated[0] / "x.desktop"] = FALLBACK_ICON

    def test_shared_icon_ref_resolved_once(self, populated, search_config, monkeypatch):
        system, _ = populated
        write_entry(system / "alpha2.desktop", entry_body("Alpha Two", "alpha"))
        seen = []
        real_resolve = catalog.IconResolver.resolve

        def counting_resolve(self, icon_ref):
            seen.append(icon_ref)
            return real_resolve(self, icon_ref)

        monkeypatch.setattr(catalog.IconResolver, "resolve", counting_resolve)
        build_catalog(search_config)
        assert sorted(seen) == ["/opt/beta.png", "alpha"]


class TestBuildCatalogAsync:
    def test_matches_synchronous_result(self, populated, search_config):
        result = build_catalog_async(search_config).result(timeout=10)

        assert isinstance(result, Catalog)
        assert result.groups == build_catalog(search_config).groups

    def test_uses_given_executor(self, populated, search_config):
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = build_catalog_async(search_config, executor=pool)
            assert future.result(timeout=10).groups.total == 2


class TestRunInBackground:
    def test_runs_off_calling_thread(self):
        future = run_in_background(lambda: threading.current_thread().name)
        assert future.result(timeout=10).startswith("deskicons-scan")

    def test_passes_arguments(self):
        assert run_in_background(pow, 2, 10).result(timeout=10) == 1024

    def test_exception_is_kept_on_future(self):
        def fail():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            run_in_background(fail).result(timeout=10)

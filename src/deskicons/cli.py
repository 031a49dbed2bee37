"""CLI interface for Deskicons."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from deskicons.core.catalog import fetch_grouped
from deskicons.core.icons import IconResolver
from deskicons.core.opener import open_source
from deskicons.core.parser import parse_desktop_file
from deskicons.models.config import SearchConfig
from deskicons.models.desktop_entry import DesktopEntry
from deskicons.settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _load_config() -> SearchConfig:
    return SearchConfig.from_settings(Settings.instance())


def _entry_to_dict(entry: DesktopEntry, resolver: IconResolver | None = None) -> dict:
    data = {
        "name": entry.name,
        "icon": entry.icon_ref,
        "source_path": str(entry.source_path),
        "properties": dict(entry.properties),
    }
    if resolver is not None:
        icon = resolver.resolve(entry.icon_ref)
        data["icon_path"] = str(icon.path) if icon.path else None
    return data


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """Deskicons: browse the application shortcuts installed on this system."""
    _setup_logging(verbose)


# ── list ─────────────────────────────────────────────────────────────────

@main.command("list")
@click.option("--icons", "with_icons", is_flag=True, help="Also resolve each icon file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_cmd(with_icons: bool, as_json: bool) -> None:
    """List desktop entries grouped by application directory."""
    config = _load_config()
    grouped = fetch_grouped(config)
    resolver = IconResolver(config) if with_icons else None

    if as_json:
        data = [
            {
                "root": str(group.root),
                "entries": [_entry_to_dict(e, resolver) for e in group.entries],
            }
            for group in grouped
        ]
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if not grouped:
        click.echo("No desktop entries found.")
        return

    for group in grouped:
        click.echo(f"\n  {click.style(str(group.root), fg='blue', bold=True)} ({len(group)})")
        for entry in group.entries:
            line = f"    {click.style(entry.name.ljust(40), fg='cyan')}  {entry.icon_ref}"
            if resolver is not None:
                icon = resolver.resolve(entry.icon_ref)
                if icon.is_fallback:
                    line += click.style("  [no icon]", fg="bright_black")
                else:
                    line += click.style(f"  → {icon.path}", fg="green")
            click.echo(line)

    click.echo(f"\nTotal: {click.style(str(grouped.total), bold=True)} entries\n")


# ── show ─────────────────────────────────────────────────────────────────

@main.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(path: Path, as_json: bool) -> None:
    """Show the parsed contents of a single .desktop file."""
    entry = parse_desktop_file(path)
    if entry is None:
        click.echo(f"{path}: not a usable desktop entry (needs Name and Icon).", err=True)
        sys.exit(1)

    resolver = IconResolver(_load_config())
    if as_json:
        click.echo(json.dumps(_entry_to_dict(entry, resolver), indent=2, ensure_ascii=False))
        return

    icon = resolver.resolve(entry.icon_ref)
    icon_path = str(icon.path) if icon.path else click.style("fallback", fg="bright_black")
    click.echo(f"\n  {click.style('Name:', bold=True)}      {entry.name}")
    click.echo(f"  {click.style('Icon:', bold=True)}      {entry.icon_ref}")
    click.echo(f"  {click.style('Icon file:', bold=True)} {icon_path}")
    click.echo(f"  {click.style('Source:', bold=True)}    {entry.source_path}")
    if entry.properties:
        click.echo()
        width = max(len(k) for k in entry.properties)
        for key, value in entry.properties.items():
            click.echo(f"    {click.style(key.ljust(width), fg='cyan')}  {value}")
    click.echo()


# ── resolve ──────────────────────────────────────────────────────────────

@main.command()
@click.argument("icon")
def resolve(icon: str) -> None:
    """Print the file an Icon= value resolves to."""
    result = IconResolver(_load_config()).resolve(icon)
    if result.is_fallback:
        click.echo(f"fallback {icon}")
    else:
        click.echo(str(result.path))


# ── open ─────────────────────────────────────────────────────────────────

@main.command("open")
@click.argument("path", type=click.Path(path_type=Path))
def open_cmd(path: Path) -> None:
    """Open a file (usually a .desktop file) with the default application."""
    if not open_source(path):
        click.echo(f"Could not open {path}.", err=True)
        sys.exit(1)


# ── config ───────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def config(as_json: bool) -> None:
    """Show the effective search configuration."""
    settings = Settings.instance()
    cfg = SearchConfig.from_settings(settings)
    data = {
        "settings_file": str(settings.path),
        "roots": [str(p) for p in cfg.roots],
        "entry_suffix": cfg.entry_suffix,
        "icon_dirs": [str(p) for p in cfg.icon_dirs],
        "icon_extensions": list(cfg.icon_extensions),
        "hicolor_root": str(cfg.hicolor_root),
    }
    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    for key, value in data.items():
        if isinstance(value, list):
            click.echo(f"  {click.style(key + ':', bold=True)}")
            for item in value:
                click.echo(f"    {item}")
        else:
            click.echo(f"  {click.style(key + ':', bold=True)} {value}")

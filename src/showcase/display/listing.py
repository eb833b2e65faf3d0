"""
Display functions for discovered content and configuration.

Each function supports Rich formatting (interactive) and plain text
output (piping/CLI).
"""

import re
from typing import TYPE_CHECKING, Callable, Optional

from rich.markup import escape
from rich.table import Table

from showcase.display.console import get_console

if TYPE_CHECKING:
    from rich.console import Console

    from showcase.config import Settings
    from showcase.content import Experience, Project


def _strip_rich_markup(text: str) -> str:
    """Strip only Rich markup tags used by this module."""
    text = re.sub(r"(?<!\\)\[/?(?:bold|muted|title|path|link|kind|warning|error)\]", "", text)
    return text.replace("\\[", "[")


def _printer(console: Optional["Console"], use_rich: bool) -> tuple[Optional["Console"], Callable]:
    if use_rich and console is None:
        console = get_console()

    def _print(text: str = "", **kwargs) -> None:
        if use_rich and console:
            console.print(text, **kwargs)
        else:
            print(_strip_rich_markup(text))

    return console, _print


def _short(text: str, limit: int = 60) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."


def display_projects(
    projects: list["Project"],
    console: Optional["Console"] = None,
    use_rich: bool = True,
    empty_hint: str = "public/Projects",
) -> None:
    """
    Display projects with their cover, gallery size and links.

    Args:
        projects: Scanned projects
        console: Rich console for formatted output (optional)
        use_rich: Whether to use Rich formatting (False for plain text)
        empty_hint: Folder named in the placeholder when there are no projects
    """
    console, _print = _printer(console, use_rich)

    _print("\n[bold]Projects:[/bold]")
    _print("-" * 60)

    if not projects:
        _print(f"  [muted]No projects found. Add folders to {escape(empty_hint)}.[/muted]")
        _print()
        return

    if use_rich and console:
        table = Table(show_header=True, box=None)
        table.add_column("Title", style="title")
        table.add_column("Cover", style="path")
        table.add_column("Media", justify="right")
        table.add_column("Preview")
        table.add_column("Links", style="link")
        for project in projects:
            cover = project.cover
            table.add_row(
                escape(project.title),
                escape(cover.thumbnail) if cover else "-",
                str(len(project.images)),
                "video" if project.preview_video else "-",
                escape(", ".join(link.label for link in project.links)) or "-",
            )
        console.print(table)
        _print()
        return

    for project in projects:
        cover = project.cover
        _print(f"  {escape(project.title)} ({escape(project.slug)})")
        _print(f"    cover:   {escape(cover.thumbnail) if cover else '(none)'}")
        _print(f"    media:   {len(project.images)}")
        if project.preview_video:
            _print(f"    preview: {escape(project.preview_video)}")
        for link in project.links:
            _print(f"    link:    {escape(link.label)} -> {escape(link.url)}")
        if project.description:
            _print(f"    about:   {escape(_short(project.description))}")
    _print()


def display_experiences(
    experiences: list["Experience"],
    console: Optional["Console"] = None,
    use_rich: bool = True,
    empty_hint: str = "public/Experience",
) -> None:
    """Display experience entries with their image count."""
    console, _print = _printer(console, use_rich)

    _print("\n[bold]Experience:[/bold]")
    _print("-" * 60)

    if not experiences:
        _print(
            f"  [muted]No experience entries found. Add folders to {escape(empty_hint)}.[/muted]"
        )
        _print()
        return

    for exp in experiences:
        _print(f"  [title]{escape(exp.title)}[/title] [muted]({len(exp.images)} images)[/muted]")
        if exp.description:
            _print(f"    {escape(_short(exp.description))}")
    _print()


def display_stats(
    stats: dict,
    console: Optional["Console"] = None,
    use_rich: bool = True,
) -> None:
    """Display the counts produced by PortfolioCatalog.get_stats()."""
    console, _print = _printer(console, use_rich)

    _print("\n[bold]Content Overview:[/bold]")
    _print("-" * 60)
    _print(f"  Projects:            {stats['projects']}")
    _print(f"  Experience entries:  {stats['experiences']}")
    _print(f"  With preview video:  {stats['with_preview_video']}")
    _print(f"  With preview image:  {stats['with_preview_image']}")
    _print(f"  Links:               {stats['links']}")
    for kind, count in sorted(stats["media_by_kind"].items()):
        _print(f"  [kind]{kind}[/kind] files: {count}")
    _print()


def display_config(
    settings: "Settings",
    console: Optional["Console"] = None,
    use_rich: bool = True,
) -> None:
    """
    Display configuration paths and active settings.

    Args:
        settings: Current settings
        console: Rich console for formatted output (optional)
        use_rich: Whether to use Rich formatting (False for plain text)
    """
    console, _print = _printer(console, use_rich)

    paths = settings.config_paths

    _print("\n[bold]Configuration Paths:[/bold]")
    _print("-" * 60)
    if paths is not None:
        _print(f"  Local:   {paths.local_dir or '(none)'}")
        _print(f"  User:    {paths.user_dir or '(none)'}")
        _print(f"  .env:    {paths.env_file or '(none)'}")
        _print(f"  config:  {paths.config_file or '(none)'}")
    else:
        _print("  (not loaded from disk)")

    _print("\n[bold]Active Settings:[/bold]")
    _print("-" * 60)
    _print(f"  Public Directory:  {settings.public_dir}")
    _print(f"  Projects Root:     {settings.projects_root}")
    _print(f"  Experience Root:   {settings.experience_root}")
    _print(f"  Sort Entries:      {settings.sort_entries}")
    _print(f"  Theme:             {settings.color_theme}")
    _print()

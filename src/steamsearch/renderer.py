"""Rich terminal renderer for storefront results."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from steamsearch.errors import AmbiguousMatch
from steamsearch.models import AppDetails, SearchResult

console = Console()


def render_search_results(results: list[SearchResult], *, query: str = "") -> None:
    """Render raw search candidates in storefront order."""
    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    header = f"Found {len(results)} apps"
    if query:
        header += f' for "{query}"'
    console.print(header)
    console.print()

    for r in results:
        line = Text()
        line.append(f"[{r.app_id}] ", style="bold cyan")
        line.append(r.name, style="bold")
        console.print(line)
    console.print()
    console.print("  > Use `steamsearch review <name>` to see how an app was received", style="dim italic")


def render_resolved(app: SearchResult) -> None:
    line = Text()
    line.append(f"[{app.app_id}] ", style="bold cyan")
    line.append(app.name, style="bold")
    console.print(line)
    if app.logo_url:
        console.print(f"     {app.logo_url}", style="dim")


def render_review(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def render_ambiguous(error: AmbiguousMatch) -> None:
    """Render the candidates of an ambiguous name so the user can pick one."""
    console.print(f'[yellow]Multiple apps match "{error.query}":[/yellow]')
    for c in error.candidates:
        console.print(f"  {c.name}", markup=False, highlight=False)
    console.print()
    console.print("  > Re-run with the exact name of one of these", style="dim italic")


def render_app_details(app_id: str, entry: AppDetails) -> None:
    """Render a short summary of one app details entry."""
    if not entry.success:
        console.print(f"[yellow]No details available for app {app_id}.[/yellow]")
        return

    data = entry.data
    console.print(data.name or f"App {app_id}", style="bold")

    meta_parts = []
    if data.type:
        meta_parts.append(data.type)
    if data.release_date.date:
        meta_parts.append(data.release_date.date)
    if data.developers:
        meta_parts.append(", ".join(data.developers))
    meta_parts.append("free" if data.is_free else "paid")
    platforms = data.platforms.names()
    if platforms:
        meta_parts.append("/".join(platforms))
    console.print(" | ".join(meta_parts), style="dim")

    if data.genres:
        console.print(f"Genres: {', '.join(g.description for g in data.genres)}", style="dim")
    if data.content_descriptor_ids:
        ids = ", ".join(str(i) for i in data.content_descriptor_ids)
        console.print(f"Content descriptors: {ids}", style="dim")
        if data.content_descriptors.notes:
            console.print(f"     {data.content_descriptors.notes}", style="dim")

    if data.short_description:
        console.print()
        console.print(data.short_description)
    console.print()


def render_adult_verdict(app_id: str, is_adult: bool) -> None:
    if is_adult:
        console.print(f"[red]App {app_id} is flagged for adult sexual content.[/red]")
    else:
        console.print(f"[green]App {app_id} is not flagged for adult sexual content.[/green]")

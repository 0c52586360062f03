"""CLI interface for episode finder using Typer."""

import typer
from rich.table import Table
from rich.panel import Panel
from rich import box

from . import __version__
from .extractor import BASE_URL
from .models import SearchQuery, TorrentResult
from .scraper import search_episode_outcome, CATEGORIES
from .tracking import is_episode_available
from .utils import console, truncate

app = typer.Typer(
    name="episode-finder",
    help="Find nyaa.si releases of the next anime episode you need",
    add_completion=False,
)


def display_banner():
    """Display the application banner."""
    banner = """
    EPISODE FINDER
    Next-episode releases from Nyaa.si
    """
    console.print(Panel(banner, style="bold blue", box=box.DOUBLE))


def display_results_table(results: list[TorrentResult]) -> None:
    """Display matched releases in a table."""
    table = Table(
        title="Matching Torrents",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", min_width=40)
    table.add_column("Episode", style="white", width=8)
    table.add_column("Resolution", style="yellow", width=10)
    table.add_column("Seeders", style="green", width=8)
    table.add_column("Date", style="blue", width=12)

    for i, result in enumerate(results, 1):
        table.add_row(
            str(i),
            truncate(result.name),
            str(result.episode) if result.episode is not None else "?",
            result.resolution or "-",
            result.seeders,
            result.date.strftime("%Y-%m-%d"),
        )

    console.print(table)


def display_magnets(results: list[TorrentResult]) -> None:
    """Print the magnet link of each result, numbered like the table."""
    for i, result in enumerate(results, 1):
        if result.magnet_link:
            console.print(f"[dim]{i}.[/dim] {result.magnet_link}", soft_wrap=True)


@app.command()
def find(
    title: str = typer.Argument(..., help="Title of the anime (romaji or native)"),
    english: str | None = typer.Option(
        None, "--english", "-e", help="English title, preferred as search term"
    ),
    episode: int | None = typer.Option(
        None, "--episode", "-n", help="Episode to find (omit to list recent releases)"
    ),
    magnets: bool = typer.Option(
        False, "--magnets", "-m", help="Also print the magnet links"
    ),
    base_url: str = typer.Option(
        BASE_URL,
        "--base-url",
        envvar="EPISODE_FINDER_BASE_URL",
        help="Index root URL",
    ),
):
    """
    Search nyaa.si for releases of one episode.

    Only releases from the last three months are considered, and at most
    five are shown, most seeded first.
    """
    display_banner()

    query = SearchQuery(primary_title=title, alternate_title=english, target_episode=episode)
    console.print(f"\n[bold]Searching for:[/bold] {query.search_term}")
    if episode is not None:
        console.print(f"[bold]Episode:[/bold] {episode}")

    outcome = search_episode_outcome(query, base_url=base_url)

    if not outcome.results:
        console.print("[red]No torrents found. Try a different search term.[/red]")
        if outcome.error:
            console.print(f"[dim]{outcome.error}[/dim]")
        raise typer.Exit(1)

    display_results_table(outcome.results)
    if magnets:
        display_magnets(outcome.results)


@app.command()
def available(
    progress: int = typer.Argument(..., help="Episodes watched so far"),
    next_airing: int | None = typer.Argument(
        None, help="Number of the next episode scheduled to air"
    ),
):
    """Check whether the episode after PROGRESS has aired."""
    needed = progress + 1
    if is_episode_available(progress, next_airing):
        console.print(f"[green]Episode {needed} is available[/green]")
        return

    console.print(f"[yellow]Episode {needed} has not aired yet[/yellow]")
    raise typer.Exit(1)


@app.command()
def version():
    """Show the version number."""
    console.print(f"episode-finder version {__version__}")


@app.command()
def categories():
    """List available categories."""
    table = Table(title="Available Categories", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Code", style="dim")

    for name, code in CATEGORIES.items():
        table.add_row(name, code)

    console.print(table)


if __name__ == "__main__":
    app()

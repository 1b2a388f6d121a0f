"""Command-line interface for hrcard."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hrcard import CardRenderer, CardConfig, save_svg, __version__
from hrcard.config import AcquisitionMode, CacheBackend, LogFormat
from hrcard.core.exporter import to_json
from hrcard.exceptions import HrcardError

app = typer.Typer(
    name="hrcard",
    help="HackerRank achievement card renderer",
    add_completion=False,
)
console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"hrcard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """hrcard - HackerRank achievement card renderer."""
    pass


def _config(mode: AcquisitionMode, quiet: bool) -> CardConfig:
    return CardConfig(
        acquisition_mode=mode,
        cache_backend=CacheBackend.NONE,
        log_format=LogFormat.JSON if quiet else LogFormat.CONSOLE,
        log_level="ERROR" if quiet else "INFO",
    )


@app.command()
def render(
    username: str = typer.Argument(..., help="HackerRank username"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the SVG to this file instead of stdout"
    ),
    mode: AcquisitionMode = typer.Option(
        AcquisitionMode.STRUCTURED, "--mode", "-m", help="Upstream acquisition mode"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress logging, only show errors"
    ),
):
    """Render the achievement card for a profile."""
    config = _config(mode, quiet)

    async def run() -> str:
        async with CardRenderer(config) as renderer:
            return await renderer.render(username)

    try:
        markup = asyncio.run(run())
    except HrcardError as e:
        console.print(f"[red]Failed to render card for {username}: {e}[/red]")
        raise typer.Exit(1)

    if output:
        path = save_svg(markup, output)
        console.print(f"[green]✓[/green] Saved card to {path}")
    else:
        sys.stdout.write(markup + "\n")


@app.command()
def inspect(
    username: str = typer.Argument(..., help="HackerRank username"),
    mode: AcquisitionMode = typer.Option(
        AcquisitionMode.STRUCTURED, "--mode", "-m", help="Upstream acquisition mode"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the classified profile as JSON"
    ),
):
    """Show the classified badges and certificates of a profile."""
    config = _config(mode, quiet=as_json)

    async def run():
        async with CardRenderer(config) as renderer:
            return await renderer.collect(username)

    try:
        profile = asyncio.run(run())
    except HrcardError as e:
        console.print(f"[red]Failed to fetch profile: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        sys.stdout.write(to_json(profile) + "\n")
    else:
        _print_profile_tables(profile)


def _print_profile_tables(profile):
    """Print classified records as tables."""
    out = Console()
    out.print(
        f"\n[bold]@{profile.username}[/bold]  "
        f"{len(profile.badges)} badges · {len(profile.certificates)} certificates · "
        f"{profile.skill_count} skills"
    )

    badges = Table(title="Badges")
    badges.add_column("Title")
    badges.add_column("Skill", style="dim")
    badges.add_column("Stars", justify="right")
    badges.add_column("Category")
    for b in profile.badges:
        badges.add_row(b.title, b.skill_name or "-", str(b.star_count), b.visual_category.value)
    out.print(badges)

    certificates = Table(title="Certificates")
    certificates.add_column("Title")
    certificates.add_column("Type", style="dim")
    certificates.add_column("Category")
    for c in profile.certificates:
        certificates.add_row(c.title, c.type_label, c.visual_category.value)
    out.print(certificates)


if __name__ == "__main__":
    app()

"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.http_event_store import HttpEventStore
from ..adapters.json_event_store import JsonEventStore
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import OpenSlotsError
from ..services.availability_service import AvailabilityService, EventStoreProtocol

app = typer.Typer(
    name="openslots",
    help="Compute the free booking slots of the coming week from opening and appointment events",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
EventsOption = Annotated[Optional[Path], typer.Option("--events", "-e", help="JSON events file, overrides the configured source")]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the config file, or defaults when no file exists.
    
    An explicitly given file must exist.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)
    
    config_path = get_default_config_path()
    if config_path.exists():
        return AppConfig.load_from_yaml(config_path)
    return AppConfig()


def _build_event_store(config: AppConfig, events_file: Optional[Path]) -> EventStoreProtocol:
    """Pick the event store: --events, then events_url, then events_file."""
    if events_file is not None:
        return JsonEventStore(path=events_file, timezone=config.timezone)
    
    if config.events_url:
        return HttpEventStore(
            base_url=config.events_url,
            timezone=config.timezone,
            api_token=config.api_token,
            timeout=config.request_timeout
        )
    
    return JsonEventStore(path=config.get_events_file(), timezone=config.timezone)


def _parse_anchor_date(value: Optional[str], tz: str) -> pendulum.Date:
    if value is None:
        return pendulum.today(tz).date()
    
    try:
        return pendulum.from_format(value, "YYYY-MM-DD", tz=tz).date()
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{value}', expected YYYY-MM-DD") from e


@app.command()
def show(
    date: Annotated[Optional[str], typer.Option("--date", "-d", help="First day of the window (YYYY-MM-DD). Defaults to today.")] = None,
    config_file: ConfigOption = None,
    events_file: EventsOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the availabilities as JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Show the available slots for the seven days starting at --date.
    
    Examples:
    
        openslots show
        openslots show --date 2020-04-13 --events events.json
        openslots show --json
    """
    try:
        config = _load_config(config_file)
        _configure_logging("DEBUG" if verbose else config.log_level)
        
        anchor_date = _parse_anchor_date(date, config.timezone)
        service = AvailabilityService(event_store=_build_event_store(config, events_file))
        availabilities = service.compute_availabilities(anchor_date)
    
    except (OpenSlotsError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    
    if as_json:
        typer.echo(json.dumps([bucket.to_dict() for bucket in availabilities], indent=2))
        return
    
    if not availabilities:
        console.print("[yellow]⚠ No events configured, nothing to show.[/yellow]")
        return
    
    table = Table(
        title=f"Availabilities from {anchor_date.to_date_string()}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Date", style="bold yellow")
    table.add_column("Day")
    table.add_column("Free slots")
    
    for bucket in availabilities:
        table.add_row(
            bucket.date.to_date_string(),
            bucket.date.format("ddd"),
            ", ".join(bucket.slots) or "[dim]-[/dim]"
        )
    
    console.print()
    console.print(table)
    console.print()


@app.command()
def events(
    config_file: ConfigOption = None,
    events_file: EventsOption = None,
):
    """
    List all events in the event store.
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config.log_level)
        stored_events = _build_event_store(config, events_file).fetch_events()
    
    except (OpenSlotsError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    
    if not stored_events:
        console.print("[yellow]No events in store.[/yellow]")
        return
    
    table = Table(title="Events", show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="bold yellow")
    table.add_column("Starts at")
    table.add_column("Ends at")
    table.add_column("Weekly", justify="center")
    
    for event in stored_events:
        table.add_row(
            event.kind.value,
            event.starts_at.format("YYYY-MM-DD HH:mm"),
            event.ends_at.format("YYYY-MM-DD HH:mm"),
            "✓" if event.weekly_recurring else ""
        )
    
    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]openslots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()

"""Rich console output for smoke runs."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config import FrameworkConfig

console = Console()


def config_summary(config: FrameworkConfig) -> None:
    """Print the resolved configuration, secrets masked."""
    table = Table(title="Configuration", show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Key", style="dim")
    table.add_column("Value")
    values = config.as_dict()
    for entry in config.schema():
        value = values[entry.accessor]
        table.add_row(entry.accessor, entry.env_key, escape(value) if value is not None else "[dim]unset[/dim]")
    console.print(table)


def page_result(url: str, title: str, displayed: bool) -> None:
    """Print the home page check outcome."""
    status = "[bold green]visible[/bold green]" if displayed else "[bold yellow]not found[/bold yellow]"
    console.print(Panel(
        f"[bold]URL:[/bold] {escape(url)}\n[bold]Title:[/bold] {escape(title)}\n[bold]Heading:[/bold] {status}",
        title="Home page",
        border_style="green" if displayed else "yellow",
    ))


def error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")

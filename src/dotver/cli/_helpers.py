"""Output and loading helpers shared by the CLI commands."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import DotverConfig, load_config, with_overrides

console = Console()


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_failure(message: str) -> None:
    """Print a negative result that is not an error."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error line."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning line."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def load_settings(
    config: Path | None, delimiter: str | None = None, reverse: bool | None = None
) -> DotverConfig:
    """Load the config file and apply command-line overrides.

    Raises:
        ConfigError: If the config or an override is invalid.
    """
    return with_overrides(load_config(config), delimiter=delimiter, reverse=reverse)

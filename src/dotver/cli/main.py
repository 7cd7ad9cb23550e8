"""Command-line interface for dotver."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from .._version import __version__
from ..exceptions import ConfigError, InvalidVersionError
from ..version import Version
from ._helpers import (
    console,
    load_settings,
    print_error,
    print_failure,
    print_success,
    print_warning,
)

app = typer.Typer(help="Parse, compare and select dotted numeric versions")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or dotver.toml)",
    ),
]

DelimiterOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--delimiter",
        "-d",
        help="Part delimiter (default: from config, else '.')",
    ),
]

VersionsArgument = Annotated[
    list[str], typer.Argument(..., help="Version strings", show_default=False)
]

_ORDERING_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def _show_version(value: bool) -> None:
    if value:
        console.print(f"dotver {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-v", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            ...,
            "--version",
            help="Show the dotver version and exit",
            callback=_show_version,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Parse, compare and select dotted numeric versions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version string")],
    delimiter: DelimiterOption = None,
    config: ConfigOption = None,
) -> None:
    """Show the parts of a version."""
    try:
        settings = load_settings(config, delimiter)
        parsed = Version.parse(version, settings.delimiter)
    except (ConfigError, InvalidVersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    table = Table(title=f"Version {parsed}")
    table.add_column("Index", style="dim")
    table.add_column("Part", style="cyan")
    table.add_column("Kind", style="green")

    for index, part in enumerate(parsed):
        kind = "wildcard" if part.is_wildcard() else "number"
        table.add_row(str(index), str(part), kind)

    console.print(table)
    console.print(f"Dotted:     {parsed.to_string()}")
    console.print(f"Serialized: {parsed.to_string_serializer()}")
    console.print(
        f"[dim]has_wildcards={parsed.has_wildcards()} "
        f"is_number={parsed.is_number()} "
        f"is_wildcard={parsed.is_wildcard()}[/dim]"
    )


@app.command()
def compare(
    first: Annotated[str, typer.Argument(..., help="First version")],
    second: Annotated[str, typer.Argument(..., help="Second version")],
    delimiter: DelimiterOption = None,
    config: ConfigOption = None,
) -> None:
    """Compare two versions by sort order and by equality."""
    try:
        settings = load_settings(config, delimiter)
        left = Version.parse(first, settings.delimiter)
        right = Version.parse(second, settings.delimiter)
    except (ConfigError, InvalidVersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    symbol = _ORDERING_SYMBOLS[left.compare(right)]
    console.print(f"{first} {symbol} {second}")
    console.print(f"Equal: {'yes' if left == right else 'no'}")


@app.command()
def compatible(
    version: Annotated[str, typer.Argument(..., help="Concrete version")],
    pattern: Annotated[str, typer.Argument(..., help="Pattern, e.g. 1.*")],
    delimiter: DelimiterOption = None,
    config: ConfigOption = None,
) -> None:
    """Check whether a version satisfies a pattern.

    Exits with status 1 when it does not.
    """
    try:
        settings = load_settings(config, delimiter)
        candidate = Version.parse(version, settings.delimiter)
        constraint = Version.parse(pattern, settings.delimiter)
    except (ConfigError, InvalidVersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if candidate.is_compatible_with(constraint):
        print_success(f"{version} is compatible with {pattern}")
        return

    print_failure(f"{version} is not compatible with {pattern}")
    raise typer.Exit(1)


@app.command()
def sort(
    versions: VersionsArgument,
    reverse: Annotated[
        bool | None,
        typer.Option(
            ...,
            "--reverse/--no-reverse",
            help="Highest first (default: from config)",
        ),
    ] = None,
    delimiter: DelimiterOption = None,
    config: ConfigOption = None,
) -> None:
    """Sort versions, skipping any that do not parse."""
    try:
        settings = load_settings(config, delimiter, reverse)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    parsed: list[Version] = []
    for text in versions:
        version = Version.from_str(text, settings.delimiter)
        if version is None:
            print_warning(f"Skipping invalid version: {text}")
            continue
        parsed.append(version)

    if not parsed:
        print_error("No valid versions given")
        raise typer.Exit(1)

    for version in sorted(parsed, reverse=settings.reverse):
        console.print(version.to_string_with(settings.delimiter))


@app.command()
def latest(
    versions: VersionsArgument,
    pattern: Annotated[
        str | None,
        typer.Option(
            ...,
            "--pattern",
            "-p",
            help="Only consider versions compatible with this pattern",
        ),
    ] = None,
    delimiter: DelimiterOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the highest version, optionally limited to a pattern.

    Versions with wildcards and strings that do not parse are ignored.
    """
    try:
        settings = load_settings(config, delimiter)
        constraint = (
            Version.parse(pattern, settings.delimiter) if pattern is not None else None
        )
    except (ConfigError, InvalidVersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if constraint is None:
        found = Version.from_latest(versions, settings.delimiter)
        result = None if found is None else found.to_string_with(settings.delimiter)
    else:
        result = constraint.latest_compatible(versions, settings.delimiter)

    if result is None:
        message = "No valid versions given"
        if pattern is not None:
            message = f"No version compatible with {pattern}"
        print_error(message)
        raise typer.Exit(1)

    console.print(result)


if __name__ == "__main__":
    app()

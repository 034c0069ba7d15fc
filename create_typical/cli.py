"""
Create Typical Building CLI.

Command-line interface for generating typical building models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .constants import (
    CLIMATE_ZONES,
    DEFAULT_TEMPLATE,
    EXISTING_GEOMETRY,
    GEOMETRY_FILES,
    HVAC_TYPES,
    INFERRED,
    LOOKUP_FROM_MODEL,
    STANDARD_ENERGY_CODES,
)
from .core.idf_parser import get_parser
from .hvac.zone_mapping import ZoneMappingError, validate_zone_mapping
from .measure import CreateTypicalBuilding, MeasureRunner, MessageLevel
from .utils.logging_config import setup_logging

app = typer.Typer(
    name="create-typical",
    help="Create Typical Building - standard building models for energy simulation",
    add_completion=False,
)
console = Console()

MESSAGE_STYLES = {
    MessageLevel.INFO: "[green]✓[/green]",
    MessageLevel.WARNING: "[yellow]![/yellow]",
    MessageLevel.ERROR: "[red]✗[/red]",
}


@app.callback()
def main_callback(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for library output"),
):
    setup_logging(level=log_level)


@app.command()
def run(
    model_file: Path = typer.Argument(..., help="Input model IDF file"),
    geometry: str = typer.Option(EXISTING_GEOMETRY, "--geometry", "-g", help="Geometry preset"),
    climate_zone: str = typer.Option(LOOKUP_FROM_MODEL, "--climate-zone", "-c", help="ASHRAE 169 climate zone"),
    template: str = typer.Option(DEFAULT_TEMPLATE, "--template", "-t", help="Building energy code"),
    hvac_type: str = typer.Option(INFERRED, "--hvac-type", help="HVAC system type"),
    hvac_json: Optional[Path] = typer.Option(None, "--hvac-json", help="HVAC-to-zone mapping JSON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output IDF (default: overwrite input)"),
):
    """
    Generate a typical building model from an IDF file.
    """
    console.print(Panel.fit(
        "[bold blue]Create Typical Building[/bold blue]\n"
        f"{model_file}",
        border_style="blue"
    ))

    parser = get_parser()
    model = parser.load(model_file)

    user_arguments = {
        "geometry_file": geometry,
        "climate_zone": climate_zone,
        "template": template,
        "hvac_type": hvac_type,
    }
    if hvac_json is not None:
        user_arguments["user_hvac_json_path"] = str(hvac_json)

    runner = MeasureRunner()
    ok = CreateTypicalBuilding(parser=parser).run(model, runner, user_arguments)

    for message in runner.messages:
        console.print(f"{MESSAGE_STYLES[message.level]} {message.text}")

    if not ok:
        console.print("\n[bold red]Create Typical Building failed[/bold red]")
        raise typer.Exit(code=1)

    output = output or model_file
    parser.save(model, output)
    console.print(f"\n[bold green]{runner.final_condition}[/bold green]")
    console.print(f"[green]Saved:[/green] {output}")


@app.command("validate-mapping")
def validate_mapping(
    mapping_file: Path = typer.Argument(..., help="HVAC-to-zone mapping JSON"),
    model_file: Path = typer.Argument(..., help="Model IDF file providing the zone names"),
):
    """
    Check an HVAC-to-zone mapping against the zones of a model.
    """
    parser = get_parser()
    model = parser.load(model_file)
    zone_names = parser.get_zone_names(model)

    try:
        mapping = validate_zone_mapping(mapping_file, zone_names)
    except ZoneMappingError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"HVAC systems in {mapping_file.name}")
    table.add_column("#", justify="right")
    table.add_column("System", style="cyan")
    table.add_column("Thermal zones")

    for index, system in enumerate(mapping["systems"], start=1):
        label = system.get("system_type") or system.get("name") or "-"
        table.add_row(str(index), str(label), ", ".join(system["thermal_zones"]))

    console.print(table)
    console.print(f"[green]✓[/green] No issues found in: {mapping_file}")


@app.command()
def options():
    """List the geometry presets, climate zones, energy codes and HVAC types."""
    for title, values in [
        ("Geometry File", GEOMETRY_FILES),
        ("Climate Zone", CLIMATE_ZONES),
        ("Building Energy Code", STANDARD_ENERGY_CODES),
        ("HVAC Type", HVAC_TYPES),
    ]:
        table = Table(title=title, show_header=False)
        table.add_column("Value")
        for value in values:
            table.add_row(value)
        console.print(table)


@app.command()
def version():
    """Show version information."""
    from . import __version__
    console.print(f"Create Typical Building v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

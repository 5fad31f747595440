"""Command-line interface for beamcalc."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .calculator import BeamCalculator
from .config.settings import CalculatorConfig, config as default_config
from .errors import InvalidInputError, UnsupportedLoadTypeError
from .formulas import FORMULA_TABLE
from .materials import get_youngs_modulus, load_materials
from .models import BeamInput, BeamResult, LoadType
from .request import BeamForm, BeamRequest

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | {level} | {message}"

# Configure logger
logger.remove()  # Remove default handler
logger.add(sys.stderr, format=LOG_FORMAT, level="INFO")

app = typer.Typer(
    help="beamcalc: Moment and deflection of simply supported beams",
    rich_markup_mode="rich",
)
console = Console()
calculator = BeamCalculator()


def _set_verbose(verbose: bool):
    if verbose:
        logger.remove()
        logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG")


def _load_config(config_file: Optional[Path]) -> CalculatorConfig:
    if config_file is None:
        return default_config
    try:
        return CalculatorConfig.from_yaml(config_file)
    except (
        OSError,
        ValueError,
        yaml.YAMLError,
        AttributeError,
        UnsupportedLoadTypeError,
    ) as e:
        console.print(f"[red]Error:[/] invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)


def _run_calculation(beam_input: BeamInput) -> BeamResult:
    """Run the calculator and map its errors to exit codes."""
    logger.debug(f"Calculating {beam_input}")
    try:
        return calculator.calculate(beam_input)
    except InvalidInputError as e:
        console.print(f"[red]Invalid input:[/] {e.reason}")
        raise typer.Exit(1)
    except UnsupportedLoadTypeError as e:
        logger.error(f"Unsupported load type reached the calculator: {e.load_type!r}")
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(2)


def _print_result(
    beam_input: BeamInput, result: BeamResult, cfg: CalculatorConfig, as_json: bool
):
    if as_json:
        payload = {
            "input": {
                "length": beam_input.length,
                "load_type": beam_input.load_type.value,
                "load": beam_input.load,
                "youngs_modulus": beam_input.youngs_modulus,
                "moment_of_inertia": beam_input.moment_of_inertia,
            },
            "result": result.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    formula = FORMULA_TABLE[beam_input.load_type]
    table = Table(title=f"Simply Supported Beam: {formula.description}")
    table.add_column("Quantity", style="cyan")
    table.add_column("Formula")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Length L", "", f"{beam_input.length:g}")
    table.add_row("Load", "", f"{beam_input.load:g}")
    table.add_row("E", "", f"{beam_input.youngs_modulus:g}")
    table.add_row("I", "", f"{beam_input.moment_of_inertia:g}")
    table.add_row(
        "Max moment",
        formula.moment_expr,
        cfg.display.format_moment(result.max_moment),
    )
    table.add_row(
        "Max deflection",
        formula.deflection_expr,
        cfg.display.format_deflection(result.max_deflection),
    )
    console.print(table)


@app.command(name="calculate")
def calculate_beam(
    length: Optional[str] = typer.Option(
        None, "--length", "-L", help="Distance between supports"
    ),
    load: Optional[str] = typer.Option(
        None, "--load", "-P", help="Point load P or uniform load w"
    ),
    youngs_modulus: Optional[str] = typer.Option(
        None, "--youngs-modulus", "-E", help="Young's modulus E"
    ),
    moment_of_inertia: Optional[str] = typer.Option(
        None, "--moment-of-inertia", "-I", help="Second moment of area I"
    ),
    load_type: Optional[LoadType] = typer.Option(
        None, "--load-type", "-t", help="Load case"
    ),
    material: Optional[str] = typer.Option(
        None, "--material", "-m", help="Take E from the material library"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML file overriding defaults", exists=True
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
):
    """Calculate max moment and deflection from field values.

    Omitted fields take their configured defaults.
    """
    _set_verbose(verbose)
    cfg = _load_config(config_file)

    form = BeamForm(cfg.form)
    if length is not None:
        form.length_text = length
    if load is not None:
        form.load_text = load
    if moment_of_inertia is not None:
        form.moment_of_inertia_text = moment_of_inertia
    if load_type is not None:
        form.load_type = load_type

    if youngs_modulus is not None:
        form.youngs_modulus_text = youngs_modulus
    elif material is not None:
        try:
            form.youngs_modulus_text = repr(get_youngs_modulus(material))
        except KeyError as e:
            console.print(f"[red]Error:[/] {escape(e.args[0])}")
            raise typer.Exit(1)

    if not form.can_calculate:
        for message in form.errors().values():
            console.print(f"[red]✗[/] {message}")
        raise typer.Exit(1)

    beam_input = form.to_input()
    result = _run_calculation(beam_input)
    _print_result(beam_input, result, cfg, as_json)


@app.command(name="run")
def run_request(
    request_json: Path = typer.Argument(
        ..., help="Path to beam request JSON file", exists=True
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML file overriding display settings", exists=True
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
):
    """Calculate from a beam request JSON file."""
    _set_verbose(verbose)
    cfg = _load_config(config_file)

    # Load and parse request
    try:
        with open(request_json) as fp:
            request = BeamRequest.model_validate_json(fp.read())
    except ValidationError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        beam_input = request.to_input()
    except UnsupportedLoadTypeError as e:
        logger.error(f"Request {request_json} has an unsupported load type")
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(2)
    except KeyError as e:
        console.print(f"[red]Error:[/] {escape(e.args[0])}")
        raise typer.Exit(1)

    result = _run_calculation(beam_input)
    _print_result(beam_input, result, cfg, as_json)


@app.command(name="load-types")
def load_types():
    """List supported load cases and their formulas."""
    table = Table(title="Supported Load Cases")
    table.add_column("Load type", style="cyan")
    table.add_column("Description")
    table.add_column("Max moment")
    table.add_column("Max deflection")

    for lt, formula in FORMULA_TABLE.items():
        table.add_row(
            lt.value, formula.description, formula.moment_expr, formula.deflection_expr
        )

    console.print(table)


@app.command()
def materials():
    """List available materials and their Young's modulus."""
    table = Table(title="Available Materials")
    table.add_column("Material")
    table.add_column("E (Pa)", justify="right")
    table.add_column("Description")

    for mat_id, props in load_materials().items():
        table.add_row(
            mat_id, f"{props['youngs_modulus_pa']:.4g}", props.get("description", "")
        )

    console.print(table)


if __name__ == "__main__":
    app()

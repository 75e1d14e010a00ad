"""
Sampling Calculator CLI - Main Application

This is the main entry point for the sampling calculator command-line interface.
"""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from sampling_calculator.api.core.enums import PresetType
from sampling_calculator.api.core.exceptions import SamplingCalculatorError
from sampling_calculator.api.presets import get_preset_store
from sampling_calculator.api.sampling import calculate
from sampling_calculator.api.url_state import build_shareable_url, decode_state, encode_state
from sampling_calculator.api.validation import ensure_valid
from sampling_calculator.cli.commands import presets
from sampling_calculator.cli.utils.groups import SortedCommandsGroup
from sampling_calculator.cli.utils.output import print_comparison, print_error, print_json, print_result
from sampling_calculator.cli.utils.rig import (
    APERTURE_OPTION,
    BARLOW_OPTION,
    BINNING_OPTION,
    CAMERA_NAME_OPTION,
    CAMERA_OPTION,
    FOCAL_OPTION,
    HEIGHT_OPTION,
    NO_APERTURE_OPTION,
    PIXEL_OPTION,
    REDUCER_OPTION,
    RIG_OPTION,
    SEEING_OPTION,
    TELESCOPE_OPTION,
    URL_OPTION,
    WIDTH_OPTION,
    query_from_url,
    resolve_input,
)


# Create main app
app = typer.Typer(
    name="sampling-calc",
    help="Astrophotography sampling calculator",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Astrophotography Sampling Calculator

    Check how well your telescope and camera match the seeing, and get
    binning, reducer, or Barlow suggestions.

    [bold green]Examples:[/bold green]

        sampling-calc calculate --focal 800 --pixel 3.76 --seeing 2.0
        sampling-calc presets save camera "ASI2600" --pixel 3.76
        sampling-calc calculate --telescope "Newt 200" --camera ASI2600

    [bold blue]Environment Variables:[/bold blue]

        SAMPLING_CALCULATOR_CONFIG_DIR - Directory holding presets.json
        SAMPLING_CALCULATOR_SEEING     - Default seeing in arcseconds
        SAMPLING_CALCULATOR_BASE_URL   - Page URL used by the share command
    """
    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from sampling_calculator import __version__

    console.print(f"[bold]Sampling Calculator[/bold] version [cyan]{__version__}[/cyan]")


@app.command("calculate", rich_help_panel="Sampling")
def calculate_command(
    url: str | None = URL_OPTION,
    rig: str | None = RIG_OPTION,
    telescope: str | None = TELESCOPE_OPTION,
    camera: str | None = CAMERA_OPTION,
    focal: float | None = FOCAL_OPTION,
    aperture: float | None = APERTURE_OPTION,
    no_aperture: bool = NO_APERTURE_OPTION,
    reducer: float | None = REDUCER_OPTION,
    barlow: float | None = BARLOW_OPTION,
    pixel: float | None = PIXEL_OPTION,
    width: int | None = WIDTH_OPTION,
    height: int | None = HEIGHT_OPTION,
    binning: int | None = BINNING_OPTION,
    seeing: float | None = SEEING_OPTION,
    camera_name: str | None = CAMERA_NAME_OPTION,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Calculate pixel scale, field of view, and sampling for a rig.

    Unspecified values come from the presets or URL given, then from the
    built-in defaults (800mm f/4, 3.76µm 6248×4176 sensor, 2.0″ seeing).

    Examples:
        sampling-calc calculate --focal 2000 --pixel 2.0 --seeing 2.0
        sampling-calc calculate --rig "Backyard SCT" --binning 2 --json
    """
    try:
        sampling_input = ensure_valid(
            resolve_input(
                url=url,
                rig=rig,
                telescope=telescope,
                camera=camera,
                no_aperture=no_aperture,
                base_focal_length=focal,
                aperture_diameter=aperture,
                reducer_factor=reducer,
                barlow_factor=barlow,
                pixel_size=pixel,
                sensor_width_px=width,
                sensor_height_px=height,
                binning=binning,
                seeing=seeing,
                camera_name=camera_name,
            )
        )
        result = calculate(sampling_input)

        if json_output:
            print_json({"input": sampling_input.to_dict(), "result": result.to_dict()})
        else:
            print_result(sampling_input, result)

    except SamplingCalculatorError as e:
        print_error(f"Failed to calculate sampling: {e}")
        raise typer.Exit(code=1) from e


@app.command("compare", rich_help_panel="Sampling")
def compare_command(
    url: str | None = typer.Option(None, "--url", help="Shared URL or query string in compare mode"),
    rig_a: str | None = typer.Option(None, "--rig-a", help="Full-rig preset for setup A"),
    rig_b: str | None = typer.Option(None, "--rig-b", help="Full-rig preset for setup B"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Compare two setups side by side.

    Setups come from a compare-mode URL (cmp=1), and any rig presets given
    replace the corresponding setup.

    Examples:
        sampling-calc compare --url "?fl=1000&cmp=1&bfl=2000"
        sampling-calc compare --rig-a "Refractor" --rig-b "SCT"
    """
    try:
        input_a, input_b, _ = decode_state(query_from_url(url) if url else None)

        store = get_preset_store()
        if rig_a:
            input_a = store.find(PresetType.FULL_RIG, rig_a).apply_to(input_a)
        if rig_b:
            input_b = store.find(PresetType.FULL_RIG, rig_b).apply_to(input_b)

        result_a = calculate(ensure_valid(input_a))
        result_b = calculate(ensure_valid(input_b))

        if json_output:
            print_json(
                {
                    "a": {"input": input_a.to_dict(), "result": result_a.to_dict()},
                    "b": {"input": input_b.to_dict(), "result": result_b.to_dict()},
                }
            )
        else:
            print_comparison(input_a, result_a, input_b, result_b)

    except SamplingCalculatorError as e:
        print_error(f"Failed to compare setups: {e}")
        raise typer.Exit(code=1) from e


@app.command("share", rich_help_panel="Sharing")
def share_command(
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Page URL to attach the state to",
        envvar="SAMPLING_CALCULATOR_BASE_URL",
    ),
    url: str | None = URL_OPTION,
    rig: str | None = RIG_OPTION,
    telescope: str | None = TELESCOPE_OPTION,
    camera: str | None = CAMERA_OPTION,
    focal: float | None = FOCAL_OPTION,
    aperture: float | None = APERTURE_OPTION,
    no_aperture: bool = NO_APERTURE_OPTION,
    reducer: float | None = REDUCER_OPTION,
    barlow: float | None = BARLOW_OPTION,
    pixel: float | None = PIXEL_OPTION,
    width: int | None = WIDTH_OPTION,
    height: int | None = HEIGHT_OPTION,
    binning: int | None = BINNING_OPTION,
    seeing: float | None = SEEING_OPTION,
    camera_name: str | None = CAMERA_NAME_OPTION,
) -> None:
    """
    Print a shareable URL (or query string) for a rig.

    Example:
        sampling-calc share --focal 1200 --pixel 2.4 --base-url https://example.org/calc
    """
    try:
        sampling_input = ensure_valid(
            resolve_input(
                url=url,
                rig=rig,
                telescope=telescope,
                camera=camera,
                no_aperture=no_aperture,
                base_focal_length=focal,
                aperture_diameter=aperture,
                reducer_factor=reducer,
                barlow_factor=barlow,
                pixel_size=pixel,
                sensor_width_px=width,
                sensor_height_px=height,
                binning=binning,
                seeing=seeing,
                camera_name=camera_name,
            )
        )
        if base_url:
            console.print(build_shareable_url(base_url, sampling_input), soft_wrap=True, markup=False)
        else:
            console.print(encode_state(sampling_input) or "?", soft_wrap=True, markup=False)

    except SamplingCalculatorError as e:
        print_error(f"Failed to build share link: {e}")
        raise typer.Exit(code=1) from e


# Register command groups
app.add_typer(
    presets.app,
    name="presets",
    help="Saved preset commands",
    rich_help_panel="Presets",
)


if __name__ == "__main__":
    app()

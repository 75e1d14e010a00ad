"""
Preset Commands

Commands for saving, listing, and deleting named telescope, camera, and
full-rig presets.
"""

import dataclasses

import typer
from rich.table import Table

from sampling_calculator.api.core.enums import PresetType
from sampling_calculator.api.core.exceptions import SamplingCalculatorError
from sampling_calculator.api.presets import Preset, get_preset_store, new_preset
from sampling_calculator.api.validation import ensure_valid

from ..utils.groups import SortedCommandsGroup
from ..utils.output import console, print_error, print_info, print_json, print_success
from ..utils.rig import (
    APERTURE_OPTION,
    BARLOW_OPTION,
    BINNING_OPTION,
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
    resolve_input,
)


app = typer.Typer(help="Saved preset commands", cls=SortedCommandsGroup)


def _describe(preset: Preset) -> str:
    match preset.preset_type:
        case PresetType.TELESCOPE:
            aperture = f"{preset.aperture_diameter:g}mm" if preset.aperture_diameter is not None else "no aperture"
            return (
                f"{preset.base_focal_length:g}mm, {aperture}, "
                f"reducer {preset.reducer_factor:g}×, barlow {preset.barlow_factor:g}×"
            )
        case PresetType.CAMERA:
            return (
                f"{preset.pixel_size:g}µm, {preset.sensor_width_px}×{preset.sensor_height_px}px, "
                f"bin {preset.binning}"
            )
        case _:
            return (
                f"{preset.base_focal_length:g}mm, {preset.pixel_size:g}µm, "
                f"bin {preset.binning}, seeing {preset.seeing:g}″"
            )


@app.command("list", rich_help_panel="Presets")
def list_presets(
    preset_type: PresetType | None = typer.Option(None, "--type", help="Only list presets of this type"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List saved presets.

    Example:
        sampling-calc presets list
        sampling-calc presets list --type camera
    """
    try:
        store = get_preset_store()
        types = [preset_type] if preset_type else list(PresetType)

        if json_output:
            print_json({t.value: [p.to_dict() for p in store.list_presets(t)] for t in types})
            return

        table = Table(title="Saved Presets", show_header=True, header_style="bold magenta")
        table.add_column("Type", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Settings", style="white")
        table.add_column("ID", style="dim")

        count = 0
        for current_type in types:
            for preset in store.list_presets(current_type):
                table.add_row(current_type.value, preset.name, _describe(preset), preset.id[:8])
                count += 1

        if count == 0:
            print_info("No presets saved yet")
            return
        console.print(table)

    except SamplingCalculatorError as e:
        print_error(f"Failed to list presets: {e}")
        raise typer.Exit(code=1) from e


@app.command("save", rich_help_panel="Presets")
def save_preset(
    preset_type: PresetType = typer.Argument(..., help="Preset type"),
    name: str = typer.Argument(..., help="Preset name"),
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
) -> None:
    """
    Save the described rig (or part of it) as a named preset.

    Examples:
        sampling-calc presets save telescope "Newt 200" --focal 800 --aperture 200
        sampling-calc presets save camera "ASI2600" --pixel 3.76 --width 6248 --height 4176
    """
    if not name.strip():
        print_error("Preset name must not be empty")
        raise typer.Exit(code=1)

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
            )
        )
        store = get_preset_store()
        preset = new_preset(preset_type, sampling_input, name.strip())
        action = "Saved"
        # Names are the lookup key here, so saving an existing name updates it
        existing = store.find_by_name(preset_type, preset.name)
        if existing is not None:
            preset = dataclasses.replace(preset, id=existing.id, created_at=existing.created_at)
            action = "Updated"
        store.save(preset)
        print_success(f"{action} {preset_type.value} preset '{preset.name}' ({_describe(preset)})")

    except SamplingCalculatorError as e:
        print_error(f"Failed to save preset: {e}")
        raise typer.Exit(code=1) from e


@app.command("show", rich_help_panel="Presets")
def show_preset(
    preset_type: PresetType = typer.Argument(..., help="Preset type"),
    name: str = typer.Argument(..., help="Preset name or id"),
) -> None:
    """Show one preset as JSON."""
    try:
        preset = get_preset_store().find(preset_type, name)
        print_json(preset.to_dict())
    except SamplingCalculatorError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command("delete", rich_help_panel="Presets")
def delete_preset(
    preset_type: PresetType = typer.Argument(..., help="Preset type"),
    name: str = typer.Argument(..., help="Preset name or id"),
) -> None:
    """
    Delete a preset.

    Example:
        sampling-calc presets delete camera ASI2600
    """
    try:
        store = get_preset_store()
        preset = store.find(preset_type, name)
        store.delete(preset_type, preset.id)
        print_success(f"Deleted {preset_type.value} preset '{preset.name}'")
    except SamplingCalculatorError as e:
        print_error(f"Failed to delete preset: {e}")
        raise typer.Exit(code=1) from e


@app.command("clear", rich_help_panel="Presets")
def clear_presets(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete every saved preset."""
    if not yes and not typer.confirm("Delete all presets?"):
        print_info("Cancelled")
        return
    try:
        get_preset_store().clear_all()
        print_success("All presets deleted")
    except SamplingCalculatorError as e:
        print_error(f"Failed to clear presets: {e}")
        raise typer.Exit(code=1) from e

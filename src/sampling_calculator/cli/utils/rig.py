"""
Rig Options

Shared command-line options describing a rig, and the logic that layers
defaults, a shared URL, saved presets, and explicit options into one input.
"""

from typing import Any
from urllib.parse import urlsplit

import typer

from sampling_calculator.api.core.enums import PresetType
from sampling_calculator.api.models import CalculatorInput
from sampling_calculator.api.presets import get_preset_store
from sampling_calculator.api.url_state import decode_state


URL_OPTION = typer.Option(None, "--url", help="Start from a shared URL or query string")
RIG_OPTION = typer.Option(None, "--rig", help="Full-rig preset name or id")
TELESCOPE_OPTION = typer.Option(None, "--telescope", "-t", help="Telescope preset name or id")
CAMERA_OPTION = typer.Option(None, "--camera", "-c", help="Camera preset name or id")
FOCAL_OPTION = typer.Option(None, "--focal", "-f", help="Telescope focal length in mm")
APERTURE_OPTION = typer.Option(None, "--aperture", "-a", help="Aperture diameter in mm")
NO_APERTURE_OPTION = typer.Option(False, "--no-aperture", help="Treat aperture as unknown")
REDUCER_OPTION = typer.Option(None, "--reducer", help="Reducer factor (0.1-1.0)")
BARLOW_OPTION = typer.Option(None, "--barlow", help="Barlow factor (1.0-5.0)")
PIXEL_OPTION = typer.Option(None, "--pixel", "-p", help="Pixel size in µm")
WIDTH_OPTION = typer.Option(None, "--width", help="Sensor width in pixels")
HEIGHT_OPTION = typer.Option(None, "--height", help="Sensor height in pixels")
BINNING_OPTION = typer.Option(None, "--binning", "-b", help="Binning (1-4)")
SEEING_OPTION = typer.Option(
    None,
    "--seeing",
    "-s",
    help="Seeing FWHM in arcseconds",
    envvar="SAMPLING_CALCULATOR_SEEING",
)
CAMERA_NAME_OPTION = typer.Option(None, "--camera-name", help="Label for the camera")


def query_from_url(url: str) -> str:
    """Query part of a shared link, or of a bare query string, without the leading "?"."""
    parts = urlsplit(url.strip())
    if parts.scheme or parts.netloc:
        return parts.query
    return url.split("#", 1)[0].strip().lstrip("?")


def resolve_input(
    url: str | None = None,
    rig: str | None = None,
    telescope: str | None = None,
    camera: str | None = None,
    no_aperture: bool = False,
    **overrides: Any,
) -> CalculatorInput:
    """
    Build a calculator input from command-line sources.

    Later sources win: defaults, then ``url``, then the full-rig preset, then
    the telescope and camera presets, then explicit field overrides (``None``
    values are ignored).

    Raises:
        PresetNotFoundError: If a named preset does not exist
    """
    sampling_input = CalculatorInput()
    if url:
        sampling_input, _, _ = decode_state(query_from_url(url))

    store = get_preset_store()
    if rig:
        sampling_input = store.find(PresetType.FULL_RIG, rig).apply_to(sampling_input)
    if telescope:
        sampling_input = store.find(PresetType.TELESCOPE, telescope).apply_to(sampling_input)
    if camera:
        sampling_input = store.find(PresetType.CAMERA, camera).apply_to(sampling_input)

    changes = {name: value for name, value in overrides.items() if value is not None}
    if no_aperture:
        changes["aperture_diameter"] = None
    if changes:
        sampling_input = sampling_input.replace(**changes)

    return sampling_input

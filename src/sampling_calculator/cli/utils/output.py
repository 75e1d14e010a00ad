"""
CLI Output Utilities

Rich console formatting utilities for calculator output.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from sampling_calculator.api.core.enums import SamplingStatus
from sampling_calculator.api.models import CalculatorInput, CalculatorResult


# Create console with unicode detection
# If terminal doesn't support unicode properly, Rich will use ASCII alternatives
console = Console()

_use_unicode = console.is_terminal and not console.legacy_windows

STATUS_STYLES: dict[SamplingStatus, str] = {
    SamplingStatus.UNDERSAMPLED: "yellow",
    SamplingStatus.OPTIMAL: "green",
    SamplingStatus.OVERSAMPLED: "magenta",
}


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    # U+2139 is widely supported, unlike the circled info emoji
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def format_optional(value: float | None, fmt: str, suffix: str = "", prefix: str = "") -> str:
    """Format an optional number, showing n/a when absent."""
    if value is None:
        return "[dim]n/a[/dim]"
    return f"{prefix}{value:{fmt}}{suffix}"


def format_status(status: SamplingStatus) -> str:
    """Colored status label."""
    style = STATUS_STYLES[status]
    return f"[bold {style}]{status.display_name}[/bold {style}]"


def _result_rows(sampling_input: CalculatorInput, result: CalculatorResult) -> list[tuple[str, str]]:
    return [
        ("Effective focal length", f"{result.effective_focal_length:.0f} mm"),
        ("Focal ratio", format_optional(result.f_ratio, ".1f", prefix="f/")),
        ("Dawes limit", format_optional(result.dawes_limit_arcsec, ".2f", suffix="″")),
        ("Binning", f"{sampling_input.binning}×{sampling_input.binning}"),
        ("Pixel scale", f"{result.pixel_scale:.2f}″/px"),
        ("Optimal range", f"{result.optimal_range_min:.2f}-{result.optimal_range_max:.2f}″/px"),
        ("Field of view", f"{result.fov_width_deg:.2f}° × {result.fov_height_deg:.2f}°"),
        ("", f"{result.fov_width_arcmin:.1f}′ × {result.fov_height_arcmin:.1f}′"),
        ("Sampling", format_status(result.status)),
    ]


def print_result(sampling_input: CalculatorInput, result: CalculatorResult) -> None:
    """
    Print one calculation as a table followed by its advice.

    Args:
        sampling_input: Configuration that was calculated
        result: Calculation result
    """
    title = "Sampling"
    if sampling_input.camera_name:
        title = f"Sampling: {sampling_input.camera_name}"

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    for label, value in _result_rows(sampling_input, result):
        table.add_row(label, value)
    console.print(table)

    console.print(result.status_message)
    if result.binning_recommendation:
        print_info(result.binning_recommendation)
    if result.corrector_recommendation:
        print_info(result.corrector_recommendation)
    if result.extreme_warning:
        print_warning(result.extreme_warning)


def print_comparison(
    input_a: CalculatorInput,
    result_a: CalculatorResult,
    input_b: CalculatorInput,
    result_b: CalculatorResult,
) -> None:
    """Print two calculations side by side."""
    table = Table(title="Setup Comparison", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column(input_a.camera_name or "Setup A", style="green")
    table.add_column(input_b.camera_name or "Setup B", style="green")

    for (label, value_a), (_, value_b) in zip(
        _result_rows(input_a, result_a), _result_rows(input_b, result_b), strict=True
    ):
        table.add_row(label, value_a, value_b)
    console.print(table)

    for name, result in (("A", result_a), ("B", result_b)):
        console.print(f"[bold]{name}:[/bold] {result.status_message}")
        for advice in (result.binning_recommendation, result.corrector_recommendation):
            if advice:
                print_info(advice)
        if result.extreme_warning:
            print_warning(result.extreme_warning)

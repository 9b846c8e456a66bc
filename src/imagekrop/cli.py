"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Annotated, Optional, Tuple

import numpy as np
import typer
from PIL import Image
from rich import print
from rich.table import Table

from .core.adjustments import ADJUSTMENT_DEFAULTS, ADJUSTMENT_ORDER, AdjustmentParams, compile_adjustments
from .core.color_apply import apply_color_matrix
from .core.color_matrix import ColorMatrix, compose
from .core.crop.bitmap import CropShape, ImageFlip, crop_from_display, flip_pixels
from .core.crop.geometry import CropCorners
from .core.crop.mapper import map_to_pixels
from .core.filter_presets import get, list_presets
from .errors import ImageKropError

app = typer.Typer(help="Colour matrices, filter presets and crop mapping for images")

Brightness = Annotated[float, typer.Option(help="Brightness, -1..1")]
Exposure = Annotated[float, typer.Option(help="Exposure in stops, -1..1")]
Contrast = Annotated[float, typer.Option(help="Contrast factor, 0..2")]
Saturation = Annotated[float, typer.Option(help="Saturation factor, 0..2")]
Warmth = Annotated[float, typer.Option(help="Warmth, -1..1")]
Tint = Annotated[float, typer.Option(help="Tint, -1..1")]
Highlights = Annotated[float, typer.Option(help="Highlights, -1..1")]
Shadows = Annotated[float, typer.Option(help="Shadows, -1..1")]
Preset = Annotated[Optional[str], typer.Option(help="Filter preset applied after the adjustments")]
Strict = Annotated[bool, typer.Option(help="Reject values outside their range")]


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ImageKropError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_matrix(values: dict[str, float], preset: str | None, strict: bool) -> ColorMatrix:
    params = AdjustmentParams.from_dict(values)
    matrices = [compile_adjustments(params, strict=strict)]
    if preset:
        matrices.append(get(preset))
    return compose(matrices)


def _matrix_table(matrix: ColorMatrix, title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("")
    for column in ("R", "G", "B", "A", "Offset"):
        table.add_column(column, justify="right")
    for label, row in zip("RGBA", matrix.rows()):
        table.add_row(label, *(f"{value:.4f}" for value in row))
    return table


@app.command()
def presets(matrix: Annotated[bool, typer.Option("--matrix", help="Show each preset's matrix")] = False) -> None:
    """List the available filter presets."""

    if matrix:
        for preset in list_presets():
            print(_matrix_table(preset.matrix, title=f"{preset.name} ({preset.label})"))
        return
    table = Table(title="Filter presets")
    table.add_column("Name")
    table.add_column("Label")
    for preset in list_presets():
        table.add_row(preset.name, preset.label)
    print(table)


@app.command("matrix")
@_handle_errors
def show_matrix(
    brightness: Brightness = ADJUSTMENT_DEFAULTS["brightness"],
    exposure: Exposure = ADJUSTMENT_DEFAULTS["exposure"],
    contrast: Contrast = ADJUSTMENT_DEFAULTS["contrast"],
    saturation: Saturation = ADJUSTMENT_DEFAULTS["saturation"],
    warmth: Warmth = ADJUSTMENT_DEFAULTS["warmth"],
    tint: Tint = ADJUSTMENT_DEFAULTS["tint"],
    highlights: Highlights = ADJUSTMENT_DEFAULTS["highlights"],
    shadows: Shadows = ADJUSTMENT_DEFAULTS["shadows"],
    preset: Preset = None,
    strict: Strict = False,
) -> None:
    """Print the 4x5 colour matrix for the given adjustments."""

    values = dict(zip(ADJUSTMENT_ORDER, (brightness, exposure, contrast, saturation, warmth, tint, highlights, shadows)))
    print(_matrix_table(_build_matrix(values, preset, strict)))


@app.command("map-crop")
@_handle_errors
def map_crop(
    canvas_width: float,
    canvas_height: float,
    bitmap_width: int,
    bitmap_height: int,
    left: float,
    top: float,
    right: float,
    bottom: float,
) -> None:
    """Map a display crop rectangle onto bitmap pixels."""

    rect = map_to_pixels((left, top, right, bottom), canvas_width, canvas_height, bitmap_width, bitmap_height)
    print(f"left={rect.left} top={rect.top} width={rect.width} height={rect.height}")


@app.command()
@_handle_errors
def apply(
    src: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    dst: Path,
    brightness: Brightness = ADJUSTMENT_DEFAULTS["brightness"],
    exposure: Exposure = ADJUSTMENT_DEFAULTS["exposure"],
    contrast: Contrast = ADJUSTMENT_DEFAULTS["contrast"],
    saturation: Saturation = ADJUSTMENT_DEFAULTS["saturation"],
    warmth: Warmth = ADJUSTMENT_DEFAULTS["warmth"],
    tint: Tint = ADJUSTMENT_DEFAULTS["tint"],
    highlights: Highlights = ADJUSTMENT_DEFAULTS["highlights"],
    shadows: Shadows = ADJUSTMENT_DEFAULTS["shadows"],
    preset: Preset = None,
    strict: Strict = False,
    crop: Annotated[
        Optional[Tuple[float, float, float, float]],
        typer.Option(help="Crop rectangle LEFT TOP RIGHT BOTTOM in canvas coordinates"),
    ] = None,
    canvas: Annotated[
        Optional[Tuple[float, float]],
        typer.Option(help="Canvas WIDTH HEIGHT the crop rectangle refers to (default: image size)"),
    ] = None,
    flip: Annotated[Optional[ImageFlip], typer.Option(help="Flip before cropping")] = None,
    shape: Annotated[CropShape, typer.Option(help="Crop outline")] = CropShape.SHARP_CORNER,
) -> None:
    """Apply adjustments, a preset and an optional crop to an image file."""

    values = dict(zip(ADJUSTMENT_ORDER, (brightness, exposure, contrast, saturation, warmth, tint, highlights, shadows)))
    matrix = _build_matrix(values, preset, strict)

    with Image.open(src) as image:
        pixels = np.asarray(image.convert("RGBA"))
    result = apply_color_matrix(pixels, matrix)

    if crop is not None:
        canvas_size = canvas if canvas is not None else (float(result.shape[1]), float(result.shape[0]))
        result, rect = crop_from_display(
            result, CropCorners.from_bounds(*crop), canvas_size, flip=flip, shape=shape
        )
        print(f"[cyan]Cropped to {rect.width}x{rect.height} at ({rect.left}, {rect.top})")
    elif flip is not None:
        result = np.ascontiguousarray(flip_pixels(result, flip))

    output = Image.fromarray(result)
    if dst.suffix.lower() in (".jpg", ".jpeg"):
        output = output.convert("RGB")
    output.save(dst)
    print(f"[green]Saved {dst}")


if __name__ == "__main__":
    app()

"""Colour adjustment parameters and their compilation into a :class:`ColorMatrix`.

Each slider maps to one primitive matrix.  The primitives are combined in a
fixed order (brightness, exposure, contrast, saturation, warmth, tint,
highlights, shadows); composition is not commutative so the order is part of
the visible result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from ..errors import AdjustmentRangeError, UnknownAdjustmentError
from .color_matrix import ColorMatrix, compose

_LOGGER = logging.getLogger(__name__)

# Application order of the adjustments.  Also the order sliders are listed in.
ADJUSTMENT_ORDER: tuple[str, ...] = (
    "brightness",
    "exposure",
    "contrast",
    "saturation",
    "warmth",
    "tint",
    "highlights",
    "shadows",
)

ADJUSTMENT_RANGES: dict[str, tuple[float, float]] = {
    "brightness": (-1.0, 1.0),
    "exposure": (-1.0, 1.0),
    "contrast": (0.0, 2.0),
    "saturation": (0.0, 2.0),
    "warmth": (-1.0, 1.0),
    "tint": (-1.0, 1.0),
    "highlights": (-1.0, 1.0),
    "shadows": (-1.0, 1.0),
}

ADJUSTMENT_DEFAULTS: dict[str, float] = {
    "brightness": 0.0,
    "exposure": 0.0,
    "contrast": 1.0,
    "saturation": 1.0,
    "warmth": 0.0,
    "tint": 0.0,
    "highlights": 0.0,
    "shadows": 0.0,
}

ADJUSTMENT_LABELS: dict[str, str] = {
    "brightness": "Brightness",
    "exposure": "Exposure",
    "contrast": "Contrast",
    "saturation": "Saturation",
    "warmth": "Warmth",
    "tint": "Tint",
    "highlights": "Highlights",
    "shadows": "Shadows",
}


def _check_name(name: str) -> str:
    if name not in ADJUSTMENT_RANGES:
        raise UnknownAdjustmentError(f"Unknown adjustment: {name!r}")
    return name


def clamp_adjustment(name: str, value: float) -> float:
    """Clamp *value* into the documented range of adjustment *name*."""

    low, high = ADJUSTMENT_RANGES[_check_name(name)]
    return max(low, min(high, float(value)))


@dataclass(frozen=True)
class AdjustmentConfig:
    """Which adjustments are exposed for interactive editing.

    A disabled adjustment keeps its stored value; it only stops accepting
    slider input.
    """

    enable_brightness: bool = True
    enable_exposure: bool = True
    enable_contrast: bool = True
    enable_saturation: bool = True
    enable_warmth: bool = True
    enable_tint: bool = True
    enable_highlights: bool = True
    enable_shadows: bool = True

    def is_enabled(self, name: str) -> bool:
        return bool(getattr(self, f"enable_{_check_name(name)}"))

    def enabled_names(self) -> list[str]:
        return [name for name in ADJUSTMENT_ORDER if self.is_enabled(name)]


@dataclass
class AdjustmentParams:
    """Current values of the eight colour sliders."""

    brightness: float = ADJUSTMENT_DEFAULTS["brightness"]
    exposure: float = ADJUSTMENT_DEFAULTS["exposure"]
    contrast: float = ADJUSTMENT_DEFAULTS["contrast"]
    saturation: float = ADJUSTMENT_DEFAULTS["saturation"]
    warmth: float = ADJUSTMENT_DEFAULTS["warmth"]
    tint: float = ADJUSTMENT_DEFAULTS["tint"]
    highlights: float = ADJUSTMENT_DEFAULTS["highlights"]
    shadows: float = ADJUSTMENT_DEFAULTS["shadows"]

    def get(self, name: str) -> float:
        return float(getattr(self, _check_name(name)))

    def set(self, name: str, value: float) -> None:
        setattr(self, _check_name(name), float(value))

    def is_default(self, name: str) -> bool:
        return self.get(name) == ADJUSTMENT_DEFAULTS[name]

    def is_identity(self) -> bool:
        """Return ``True`` when every slider sits at its neutral value."""

        return all(self.is_default(name) for name in ADJUSTMENT_ORDER)

    def reset(self) -> None:
        """Restore every slider to its default value."""

        for name in ADJUSTMENT_ORDER:
            setattr(self, name, ADJUSTMENT_DEFAULTS[name])

    def copy(self) -> "AdjustmentParams":
        return replace(self)

    def out_of_range(self) -> list[str]:
        """Return the names of values lying outside their documented range."""

        invalid = []
        for name in ADJUSTMENT_ORDER:
            low, high = ADJUSTMENT_RANGES[name]
            if not low <= self.get(name) <= high:
                invalid.append(name)
        return invalid

    def to_dict(self) -> dict[str, float]:
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}

    @staticmethod
    def from_dict(data: Mapping[str, object]) -> "AdjustmentParams":
        params = AdjustmentParams()
        for name in ADJUSTMENT_ORDER:
            raw = data.get(name)
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                setattr(params, name, float(raw))
        return params


# ------------------------------------------------------------------
# Primitive matrices
# ------------------------------------------------------------------

def brightness_matrix(value: float) -> ColorMatrix:
    """Shift R, G and B by ``value * 100`` channel units."""

    shift = float(value) * 100.0
    return ColorMatrix.offset(shift, shift, shift)


def exposure_matrix(value: float) -> ColorMatrix:
    """Scale R, G and B by ``2 ** value``."""

    scale = 2.0 ** float(value)
    return ColorMatrix.scale(scale, scale, scale)


def contrast_matrix(value: float) -> ColorMatrix:
    """Scale R, G and B by *value* pivoting around mid-grey."""

    scale = float(value)
    translate = (-0.5 * scale + 0.5) * 255.0
    return ColorMatrix((
        scale, 0.0, 0.0, 0.0, translate,
        0.0, scale, 0.0, 0.0, translate,
        0.0, 0.0, scale, 0.0, translate,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def saturation_matrix(value: float) -> ColorMatrix:
    return ColorMatrix.saturation(value)


def warmth_matrix(value: float) -> ColorMatrix:
    """Boost red and cut blue (or the reverse for negative values)."""

    factor = float(value) * 0.2
    return ColorMatrix.scale(1.0 + factor, 1.0, 1.0 - factor)


def tint_matrix(value: float) -> ColorMatrix:
    """Shift the green-magenta balance; positive values add magenta."""

    factor = float(value) * 0.15
    return ColorMatrix.scale(1.0 + factor, 1.0 - factor, 1.0 + factor)


def highlights_matrix(value: float) -> ColorMatrix:
    """Uniform shift of ``value * 20`` on R, G and B.

    Not tonal-range selective: highlights and shadows share this formula.
    """

    shift = float(value) * 20.0
    return ColorMatrix.offset(shift, shift, shift)


def shadows_matrix(value: float) -> ColorMatrix:
    """Uniform shift of ``value * 20`` on R, G and B (see :func:`highlights_matrix`)."""

    shift = float(value) * 20.0
    return ColorMatrix.offset(shift, shift, shift)


ADJUSTMENT_BUILDERS = {
    "brightness": brightness_matrix,
    "exposure": exposure_matrix,
    "contrast": contrast_matrix,
    "saturation": saturation_matrix,
    "warmth": warmth_matrix,
    "tint": tint_matrix,
    "highlights": highlights_matrix,
    "shadows": shadows_matrix,
}

# Highlights and shadows only contribute a matrix when they are non-zero.
_OPTIONAL_ADJUSTMENTS = frozenset({"highlights", "shadows"})


def adjustment_matrix(name: str, value: float) -> ColorMatrix:
    """Return the primitive matrix for adjustment *name* at *value*."""

    return ADJUSTMENT_BUILDERS[_check_name(name)](value)


def adjustment_matrices(params: AdjustmentParams) -> list[ColorMatrix]:
    """Return the primitive matrices of *params* in application order."""

    matrices = []
    for name in ADJUSTMENT_ORDER:
        value = params.get(name)
        if name in _OPTIONAL_ADJUSTMENTS and value == 0.0:
            continue
        matrices.append(ADJUSTMENT_BUILDERS[name](value))
    return matrices


def compile_adjustments(params: AdjustmentParams, *, strict: bool = False) -> ColorMatrix:
    """Combine every adjustment of *params* into a single matrix.

    Values are used as given; callers clamp them beforehand.  With
    ``strict=True`` a value outside its range raises
    :class:`~imagekrop.errors.AdjustmentRangeError` instead.
    """

    if strict:
        invalid = params.out_of_range()
        if invalid:
            name = invalid[0]
            raise AdjustmentRangeError(name, params.get(name), ADJUSTMENT_RANGES[name])
    matrix = compose(adjustment_matrices(params))
    _LOGGER.debug("Compiled adjustments %s", params)
    return matrix

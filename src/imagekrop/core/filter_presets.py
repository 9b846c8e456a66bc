"""Catalog of named colour filter presets.

Every preset is a constant :class:`ColorMatrix`.  Some are literal coefficient
tables, others are built from the same primitives as the adjustment sliders
(saturation, contrast pivots) followed by a literal table.  The matrices are
computed once at import time and the catalog is read-only afterwards.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownPresetError
from .color_matrix import IDENTITY, ColorMatrix

_LOGGER = logging.getLogger(__name__)


class FilterPreset(str, enum.Enum):
    """Identifiers of the built-in filter presets, in display order."""

    ORIGINAL = "original"
    BLACK_AND_WHITE = "black_and_white"
    SEPIA = "sepia"
    INVERT = "invert"
    GRAYSCALE = "grayscale"
    VINTAGE = "vintage"
    TECHNICOLOR = "technicolor"
    POLAROID = "polaroid"
    COOL = "cool"
    WARM = "warm"
    HIGH_CONTRAST = "high_contrast"
    LOW_CONTRAST = "low_contrast"
    BRIGHTER = "brighter"
    DARKER = "darker"
    HUE_ROTATE_RED = "hue_rotate_red"
    HUE_ROTATE_GREEN = "hue_rotate_green"
    HUE_ROTATE_BLUE = "hue_rotate_blue"
    NIGHT_VISION = "night_vision"
    KODACHROME = "kodachrome"
    SATURATE = "saturate"
    SEPIA_ALTERNATIVE = "sepia_alternative"
    BOOST_RED = "boost_red"
    BOOST_GREEN = "boost_green"
    BOOST_BLUE = "boost_blue"
    CYANOTYPE = "cyanotype"
    MOON = "moon"
    LOMO = "lomo"
    CLARENDON = "clarendon"


@dataclass(frozen=True)
class PresetFilter:
    """A named preset with its display label and colour matrix."""

    preset: FilterPreset
    label: str
    matrix: ColorMatrix

    @property
    def name(self) -> str:
        return self.preset.value


def _pivot_contrast(factor: float) -> ColorMatrix:
    """Contrast around the 128 pivot used by the stylised presets."""

    offset = 128.0 * (1.0 - factor)
    return ColorMatrix((
        factor, 0.0, 0.0, 0.0, offset,
        0.0, factor, 0.0, 0.0, offset,
        0.0, 0.0, factor, 0.0, offset,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _mid_grey_contrast(scale: float) -> ColorMatrix:
    """Contrast around mid-grey, identical to the contrast slider formula."""

    translate = (-0.5 * scale + 0.5) * 255.0
    return ColorMatrix((
        scale, 0.0, 0.0, 0.0, translate,
        0.0, scale, 0.0, 0.0, translate,
        0.0, 0.0, scale, 0.0, translate,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


_SEPIA_TABLE = ColorMatrix((
    0.393, 0.769, 0.189, 0.0, 0.0,
    0.349, 0.686, 0.168, 0.0, 0.0,
    0.272, 0.534, 0.131, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
))


def _black_and_white() -> ColorMatrix:
    return ColorMatrix.saturation(0.0)


def _sepia() -> ColorMatrix:
    return ColorMatrix.saturation(0.0).compose(_SEPIA_TABLE)


def _invert() -> ColorMatrix:
    return ColorMatrix((
        -1.0, 0.0, 0.0, 0.0, 255.0,
        0.0, -1.0, 0.0, 0.0, 255.0,
        0.0, 0.0, -1.0, 0.0, 255.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _grayscale() -> ColorMatrix:
    return ColorMatrix((
        0.299, 0.587, 0.114, 0.0, 0.0,
        0.299, 0.587, 0.114, 0.0, 0.0,
        0.299, 0.587, 0.114, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _vintage() -> ColorMatrix:
    table = ColorMatrix((
        1.1, 0.0, 0.0, 0.0, -20.0,
        0.0, 1.05, 0.0, 0.0, -10.0,
        0.0, 0.0, 0.8, 0.0, 30.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    return ColorMatrix.saturation(0.2).compose(table)


def _technicolor() -> ColorMatrix:
    return ColorMatrix((
        1.5, 0.0, 0.0, 0.0, -50.0,
        0.0, 0.8, 0.0, 0.0, 0.0,
        0.0, 0.0, 1.5, 0.0, -50.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _polaroid() -> ColorMatrix:
    table = ColorMatrix((
        1.2, 0.1, 0.1, 0.0, -30.0,
        0.1, 1.2, 0.1, 0.0, -30.0,
        0.1, 0.1, 1.0, 0.0, -10.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    return ColorMatrix.saturation(0.5).compose(table)


def _cool() -> ColorMatrix:
    return ColorMatrix((
        0.9, 0.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0, 0.0,
        0.0, 0.0, 1.2, 0.0, 10.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _warm() -> ColorMatrix:
    return ColorMatrix((
        1.2, 0.0, 0.0, 0.0, 10.0,
        0.0, 1.1, 0.0, 0.0, 0.0,
        0.0, 0.0, 0.9, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _high_contrast() -> ColorMatrix:
    return _pivot_contrast(1.5)


def _low_contrast() -> ColorMatrix:
    return _pivot_contrast(0.7)


def _brighter() -> ColorMatrix:
    return ColorMatrix.offset(50.0, 50.0, 50.0)


def _darker() -> ColorMatrix:
    return ColorMatrix.offset(-50.0, -50.0, -50.0)


def _hue_rotate_red() -> ColorMatrix:
    return ColorMatrix((
        1.2, 0.0, -0.2, 0.0, 0.0,
        -0.1, 1.0, 0.1, 0.0, 0.0,
        -0.1, 0.2, 0.8, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _hue_rotate_green() -> ColorMatrix:
    return ColorMatrix((
        0.8, 0.2, 0.0, 0.0, 0.0,
        0.1, 1.1, -0.1, 0.0, 0.0,
        -0.2, 0.0, 1.2, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _hue_rotate_blue() -> ColorMatrix:
    return ColorMatrix((
        0.9, -0.1, 0.2, 0.0, 0.0,
        0.1, 0.8, 0.1, 0.0, 0.0,
        0.0, -0.2, 1.2, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _night_vision() -> ColorMatrix:
    table = ColorMatrix((
        0.1, 0.4, 0.1, 0.0, -30.0,
        0.3, 1.7, 0.3, 0.0, -40.0,
        0.1, 0.4, 0.1, 0.0, -30.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    return ColorMatrix.saturation(0.1).compose(table).compose(_pivot_contrast(1.3))


def _kodachrome() -> ColorMatrix:
    return ColorMatrix((
        1.12855, -0.39673, -0.03992, 0.0, 0.24991,
        -0.16404, 1.08352, -0.05498, 0.0, 0.09698,
        -0.16786, -0.56034, 1.60148, 0.0, 0.35334,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))


def _saturate() -> ColorMatrix:
    return ColorMatrix.saturation(1.5)


def _sepia_alternative() -> ColorMatrix:
    return _SEPIA_TABLE


def _boost_red() -> ColorMatrix:
    return IDENTITY.with_value(0, 0, 1.5)


def _boost_green() -> ColorMatrix:
    return IDENTITY.with_value(1, 1, 1.5)


def _boost_blue() -> ColorMatrix:
    return IDENTITY.with_value(2, 2, 1.5)


def _cyanotype() -> ColorMatrix:
    table = ColorMatrix((
        0.1, 0.5, 1.0, 0.0, 0.0,
        0.1, 0.4, 0.8, 0.0, 0.0,
        0.0, 0.3, 0.6, 0.0, 0.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    base = (
        ColorMatrix.saturation(0.0)
        .with_value(0, 4, 10.0)
        .with_value(1, 4, 20.0)
        .with_value(2, 4, 30.0)
    )
    return base.compose(table)


def _moon() -> ColorMatrix:
    table = ColorMatrix((
        0.8, 0.1, 0.1, 0.0, -20.0,
        0.1, 0.7, 0.1, 0.0, -20.0,
        0.2, 0.2, 1.0, 0.0, 10.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    return ColorMatrix.saturation(0.1).compose(table)


def _lomo() -> ColorMatrix:
    table = ColorMatrix((
        1.7, 0.1, 0.1, 0.0, -73.1,
        0.0, 1.7, 0.1, 0.0, -73.1,
        0.0, 0.1, 1.6, 0.0, -73.1,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    # The lomo contrast amount is added on top of the neutral scale of 1.
    return IDENTITY.compose(table).compose(_mid_grey_contrast(1.2 + 1.0))


def _clarendon() -> ColorMatrix:
    cyan_tint = ColorMatrix((
        0.9, 0.0, 0.0, 0.0, 5.0,
        0.0, 1.1, 0.0, 0.0, 5.0,
        0.0, 0.0, 1.25, 0.0, 10.0,
        0.0, 0.0, 0.0, 1.0, 0.0,
    ))
    return ColorMatrix.saturation(1.35).compose(_mid_grey_contrast(1.2)).compose(cyan_tint)


_DEFINITIONS = (
    (FilterPreset.ORIGINAL, "Original", ColorMatrix.identity),
    (FilterPreset.BLACK_AND_WHITE, "Black & White", _black_and_white),
    (FilterPreset.SEPIA, "Sepia", _sepia),
    (FilterPreset.INVERT, "Invert", _invert),
    (FilterPreset.GRAYSCALE, "Grayscale", _grayscale),
    (FilterPreset.VINTAGE, "Vintage", _vintage),
    (FilterPreset.TECHNICOLOR, "Technicolor", _technicolor),
    (FilterPreset.POLAROID, "Polaroid", _polaroid),
    (FilterPreset.COOL, "Cool", _cool),
    (FilterPreset.WARM, "Warm", _warm),
    (FilterPreset.HIGH_CONTRAST, "High Contrast", _high_contrast),
    (FilterPreset.LOW_CONTRAST, "Low Contrast", _low_contrast),
    (FilterPreset.BRIGHTER, "Brighter", _brighter),
    (FilterPreset.DARKER, "Darker", _darker),
    (FilterPreset.HUE_ROTATE_RED, "Hue Rotate (Red)", _hue_rotate_red),
    (FilterPreset.HUE_ROTATE_GREEN, "Hue Rotate (Green)", _hue_rotate_green),
    (FilterPreset.HUE_ROTATE_BLUE, "Hue Rotate (Blue)", _hue_rotate_blue),
    (FilterPreset.NIGHT_VISION, "Night Vision", _night_vision),
    (FilterPreset.KODACHROME, "Kodachrome", _kodachrome),
    (FilterPreset.SATURATE, "Saturate", _saturate),
    (FilterPreset.SEPIA_ALTERNATIVE, "Sepia Alt", _sepia_alternative),
    (FilterPreset.BOOST_RED, "Boost Red", _boost_red),
    (FilterPreset.BOOST_GREEN, "Boost Green", _boost_green),
    (FilterPreset.BOOST_BLUE, "Boost Blue", _boost_blue),
    (FilterPreset.CYANOTYPE, "Cyanotype", _cyanotype),
    (FilterPreset.MOON, "Moon", _moon),
    (FilterPreset.LOMO, "Lomo", _lomo),
    (FilterPreset.CLARENDON, "Clarendon", _clarendon),
)

PRESETS: MappingProxyType[FilterPreset, PresetFilter] = MappingProxyType({
    preset: PresetFilter(preset=preset, label=label, matrix=build())
    for preset, label, build in _DEFINITIONS
})


def resolve_preset(name: FilterPreset | str) -> FilterPreset:
    """Return the :class:`FilterPreset` for *name* (enum value or identifier)."""

    if isinstance(name, FilterPreset):
        return name
    key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return FilterPreset(key)
    except ValueError:
        raise UnknownPresetError(f"Unknown filter preset: {name!r}") from None


def get_preset(name: FilterPreset | str) -> PresetFilter:
    preset = PRESETS[resolve_preset(name)]
    _LOGGER.debug("Resolved preset %s", preset.name)
    return preset


def get(name: FilterPreset | str) -> ColorMatrix:
    """Return the colour matrix of preset *name*."""

    return get_preset(name).matrix


def list_presets() -> list[PresetFilter]:
    """Return every preset in display order."""

    return list(PRESETS.values())

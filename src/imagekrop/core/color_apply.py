"""NumPy executor applying a :class:`ColorMatrix` to pixel arrays."""

from __future__ import annotations

import numpy as np

from .adjustments import AdjustmentParams, compile_adjustments
from .color_matrix import ColorMatrix
from .filter_presets import FilterPreset, get


def _as_rgba(pixels: np.ndarray) -> np.ndarray:
    """Return a float32 ``(H, W, 4)`` copy of *pixels* in 0-255 units."""

    arr = np.asarray(pixels)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) array, got {arr.shape}")
    rgba = np.empty(arr.shape[:2] + (4,), dtype=np.float32)
    rgba[..., :3] = arr[..., :3]
    if arr.shape[2] == 4:
        rgba[..., 3] = arr[..., 3]
    else:
        rgba[..., 3] = 255.0
    return rgba


def apply_color_matrix(pixels: np.ndarray, matrix: ColorMatrix) -> np.ndarray:
    """Return *pixels* transformed by *matrix*.

    Each output channel is ``sum(M[r][c] * in[c]) + M[r][4]`` evaluated on
    0-255 channel values, rounded and clipped back into ``uint8``.  The result
    keeps the channel count of the input.
    """

    channels = np.asarray(pixels).shape[-1] if np.ndim(pixels) == 3 else 0
    rgba = _as_rgba(pixels)
    coeffs = matrix.as_array()
    linear = coeffs[:, :4]
    offset = coeffs[:, 4]

    transformed = rgba @ linear.T + offset
    result = np.clip(np.rint(transformed), 0, 255).astype(np.uint8)
    if channels == 3:
        return np.ascontiguousarray(result[..., :3])
    return result


def apply_adjustments(pixels: np.ndarray, params: AdjustmentParams) -> np.ndarray:
    return apply_color_matrix(pixels, compile_adjustments(params))


def apply_preset(pixels: np.ndarray, name: FilterPreset | str) -> np.ndarray:
    return apply_color_matrix(pixels, get(name))

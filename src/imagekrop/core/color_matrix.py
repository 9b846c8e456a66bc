"""4x5 affine colour matrix.

The matrix follows the layout used by Android and most 2D canvas APIs: four
rows (R, G, B, A output channels) of five coefficients each.  Columns 0-3 hold
the linear weights of the input channels, column 4 the additive offset which is
expressed in 0-255 channel units.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

ROWS = 4
COLUMNS = 5

# Rec. 709 luma weights used by the saturation matrix.
LUMA_R = 0.213
LUMA_G = 0.715
LUMA_B = 0.072

_IDENTITY_VALUES: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
)


@dataclass(frozen=True)
class ColorMatrix:
    """Immutable 4x5 colour transform stored as 20 row-major floats."""

    values: tuple[float, ...] = _IDENTITY_VALUES

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != ROWS * COLUMNS:
            raise ValueError(f"ColorMatrix needs {ROWS * COLUMNS} values, got {len(values)}")
        object.__setattr__(self, "values", values)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls) -> "ColorMatrix":
        return cls(_IDENTITY_VALUES)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "ColorMatrix":
        """Build a matrix from four rows of five coefficients."""

        if len(rows) != ROWS or any(len(row) != COLUMNS for row in rows):
            raise ValueError("ColorMatrix.from_rows expects 4 rows of 5 values")
        return cls(tuple(value for row in rows for value in row))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ColorMatrix":
        arr = np.asarray(array, dtype=np.float64)
        if arr.shape != (ROWS, COLUMNS):
            raise ValueError(f"Expected a (4, 5) array, got {arr.shape}")
        return cls(tuple(arr.reshape(-1).tolist()))

    @classmethod
    def scale(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "ColorMatrix":
        """Return a diagonal matrix scaling each channel independently."""

        return cls((
            red, 0.0, 0.0, 0.0, 0.0,
            0.0, green, 0.0, 0.0, 0.0,
            0.0, 0.0, blue, 0.0, 0.0,
            0.0, 0.0, 0.0, alpha, 0.0,
        ))

    @classmethod
    def offset(cls, red: float, green: float, blue: float) -> "ColorMatrix":
        """Return an identity matrix with additive RGB offsets."""

        return cls((
            1.0, 0.0, 0.0, 0.0, red,
            0.0, 1.0, 0.0, 0.0, green,
            0.0, 0.0, 1.0, 0.0, blue,
            0.0, 0.0, 0.0, 1.0, 0.0,
        ))

    @classmethod
    def saturation(cls, value: float) -> "ColorMatrix":
        """Return the luminance-preserving saturation matrix.

        ``0`` collapses every pixel to its luma, ``1`` is the identity and
        values above ``1`` push colours away from grey.
        """

        sat = float(value)
        inv = 1.0 - sat
        r = LUMA_R * inv
        g = LUMA_G * inv
        b = LUMA_B * inv
        return cls((
            r + sat, g, b, 0.0, 0.0,
            r, g + sat, b, 0.0, 0.0,
            r, g, b + sat, 0.0, 0.0,
            0.0, 0.0, 0.0, 1.0, 0.0,
        ))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise IndexError(f"ColorMatrix index out of range: {index}")
        return self.values[row * COLUMNS + column]

    def row(self, index: int) -> tuple[float, ...]:
        start = index * COLUMNS
        return self.values[start:start + COLUMNS]

    def rows(self) -> list[tuple[float, ...]]:
        return [self.row(index) for index in range(ROWS)]

    def with_value(self, row: int, column: int, value: float) -> "ColorMatrix":
        """Return a copy with the coefficient at (*row*, *column*) replaced."""

        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise IndexError(f"ColorMatrix index out of range: {(row, column)}")
        values = list(self.values)
        values[row * COLUMNS + column] = float(value)
        return ColorMatrix(tuple(values))

    def is_identity(self, tolerance: float = 0.0) -> bool:
        return all(
            abs(actual - expected) <= tolerance
            for actual, expected in zip(self.values, _IDENTITY_VALUES)
        )

    def as_array(self) -> np.ndarray:
        """Return the coefficients as a ``(4, 5)`` float32 array."""

        return np.asarray(self.values, dtype=np.float32).reshape(ROWS, COLUMNS)

    def to_list(self) -> list[float]:
        return list(self.values)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------
    def compose(self, other: "ColorMatrix") -> "ColorMatrix":
        """Return ``self * other``.

        The result applies *other* first and *self* second, so the offsets of
        *other* pass through the linear part of *self*::

            linear[r][c] = sum_k self[r][k] * other[k][c]
            offset[r]    = sum_k self[r][k] * other_offset[k] + self_offset[r]
        """

        a = self.values
        b = other.values
        result: list[float] = []
        for r in range(ROWS):
            base = r * COLUMNS
            a0, a1, a2, a3, a4 = a[base:base + COLUMNS]
            for c in range(COLUMNS - 1):
                result.append(
                    a0 * b[c]
                    + a1 * b[COLUMNS + c]
                    + a2 * b[2 * COLUMNS + c]
                    + a3 * b[3 * COLUMNS + c]
                )
            result.append(
                a0 * b[4]
                + a1 * b[COLUMNS + 4]
                + a2 * b[2 * COLUMNS + 4]
                + a3 * b[3 * COLUMNS + 4]
                + a4
            )
        return ColorMatrix(tuple(result))

    def __matmul__(self, other: "ColorMatrix") -> "ColorMatrix":
        if not isinstance(other, ColorMatrix):
            return NotImplemented
        return self.compose(other)


IDENTITY = ColorMatrix.identity()


def compose(matrices: Iterable[ColorMatrix]) -> ColorMatrix:
    """Left-fold *matrices* onto the identity using :meth:`ColorMatrix.compose`."""

    result = IDENTITY
    for matrix in matrices:
        result = result.compose(matrix)
    return result

"""Default configuration values for imagekrop."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Crop interaction constants (display pixels)
# ---------------------------------------------------------------------------

# Handles are hit-tested as circles whose radius is the larger of the two
# handle dimensions.
DEFAULT_HANDLE_WIDTH: Final[float] = 20.0
DEFAULT_HANDLE_HEIGHT: Final[float] = 4.0
DEFAULT_MINIMUM_CROP_SIZE: Final[float] = 160.0

# Fraction of the limiting canvas dimension covered by a freshly placed crop
# rectangle.
INITIAL_CROP_FRACTION: Final[float] = 0.8

# ---------------------------------------------------------------------------
# Bitmap crop constants (source pixels)
# ---------------------------------------------------------------------------

MIN_CROP_DIMENSION_PX: Final[int] = 1
SHAPE_RADIUS_FRACTION: Final[float] = 0.05
STAR_INNER_RADIUS_DIVISOR: Final[float] = 2.5

# ---------------------------------------------------------------------------
# Transform constants
# ---------------------------------------------------------------------------

DEFAULT_ZOOM_RANGE: Final[tuple[float, float]] = (0.4, 8.0)
ROTATION_RANGE: Final[tuple[int, int]] = (0, 360)

# Differences below this threshold are treated as "unchanged" when state
# holders decide whether to notify listeners.
CHANGE_EPSILON: Final[float] = 1e-6

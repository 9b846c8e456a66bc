"""Custom exception hierarchy for imagekrop."""

from __future__ import annotations


class ImageKropError(Exception):
    """Base class for all custom errors raised by imagekrop."""


class DomainError(ImageKropError):
    """Base class for domain-level errors."""


# --- Crop errors ---

class CropError(DomainError):
    """Base class for failures while turning a crop rectangle into pixels."""


class DegenerateCropError(CropError):
    """Raised when the requested pixel crop is one pixel or less on an axis."""

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        super().__init__(
            f"Calculated crop dimensions too small: {self.width}x{self.height}"
        )


class InvalidCropGeometryError(CropError):
    """Raised when the canvas, bitmap or crop rectangle has an impossible size."""


# --- Adjustment errors ---

class AdjustmentRangeError(DomainError):
    """Raised by strict compilation when a value lies outside its documented range."""

    def __init__(self, name: str, value: float, value_range: tuple[float, float]) -> None:
        self.name = name
        self.value = float(value)
        self.range = value_range
        low, high = value_range
        super().__init__(f"{name}={self.value:g} is outside [{low:g}, {high:g}]")


class UnknownAdjustmentError(DomainError):
    """Raised when an adjustment name is not one of the supported parameters."""


class UnknownPresetError(DomainError):
    """Raised when a filter preset name cannot be found in the catalog."""

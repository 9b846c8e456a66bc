"""Qt-observable state holders for the editing screens."""

from .filter import ImageFilterState
from .kolor import ImageKolorState
from .krop import ImageKropState

__all__ = ["ImageFilterState", "ImageKolorState", "ImageKropState"]

"""Aspect ratios offered for cropping and the resulting lock mode."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class AspectRatio(enum.Enum):
    """Predefined width:height ratios."""

    SQUARE = (1, 1)
    FOUR_BY_THREE = (4, 3)
    THREE_BY_FOUR = (3, 4)
    SIXTEEN_BY_NINE = (16, 9)
    NINE_BY_SIXTEEN = (9, 16)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @property
    def ratio(self) -> float:
        return self.width / self.height

    @property
    def label(self) -> str:
        return f"{self.width}:{self.height}"

    @classmethod
    def from_key(cls, key: str) -> "AspectRatio":
        """Return the member named *key* or labelled *key* (``"16:9"``)."""

        text = str(key).strip()
        for member in cls:
            if text.upper() == member.name or text == member.label:
                return member
        raise ValueError(f"Unknown aspect ratio: {key!r}")


@dataclass(frozen=True)
class LockMode:
    """Either free resizing (``ratio is None``) or resizing locked to a ratio."""

    ratio: float | None = None

    def __post_init__(self) -> None:
        if self.ratio is not None and self.ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {self.ratio}")

    @classmethod
    def free(cls) -> "LockMode":
        return cls(None)

    @classmethod
    def locked(cls, ratio: float | AspectRatio) -> "LockMode":
        if isinstance(ratio, AspectRatio):
            return cls(ratio.ratio)
        return cls(float(ratio))

    @property
    def is_locked(self) -> bool:
        return self.ratio is not None

"""Geometric primitives for hit testing."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import validate_bounds


@dataclass(frozen=True)
class Position:
    """Measured bounds of an element in the host's coordinate space."""

    top: float
    bottom: float
    left: float
    right: float

    def __post_init__(self) -> None:
        validate_bounds(self.top, self.bottom, self.left, self.right)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def expanded(self, margin: float) -> Position:
        """Return a copy grown by ``margin`` on every side."""
        return Position(
            top=self.top - margin,
            bottom=self.bottom + margin,
            left=self.left - margin,
            right=self.right + margin,
        )

    def contains(self, px: float, py: float, tolerance: float = 0.0) -> bool:
        """Strict interior test, optionally against the expanded bounds."""
        return (
            self.left - tolerance < px < self.right + tolerance
            and self.top - tolerance < py < self.bottom + tolerance
        )

    @classmethod
    def from_dict(cls, d: dict) -> Position:
        return cls(top=d["top"], bottom=d["bottom"], left=d["left"], right=d["right"])

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }

"""Rectangle model: plain width/height record with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle whose area is derived from its current dimensions."""

    width: float
    height: float

    def get_area(self) -> float:
        """Return ``width * height`` as of this call."""
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)

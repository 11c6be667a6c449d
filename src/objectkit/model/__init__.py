"""Objectkit model layer -- public type re-exports."""

from objectkit.model.rectangle import Rectangle, make_rectangle

__all__ = [
    "Rectangle",
    "make_rectangle",
]

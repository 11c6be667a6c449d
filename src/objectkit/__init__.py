"""Objectkit: object modeling exercises and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objectkit.model import Rectangle, make_rectangle
from objectkit.selector import SelectorBuilder, css_selector_builder, selector_builder
from objectkit.serialization import from_json_text, to_json_text

__all__ = [
    "__version__",
    "Rectangle",
    "make_rectangle",
    "SelectorBuilder",
    "css_selector_builder",
    "selector_builder",
    "from_json_text",
    "to_json_text",
]

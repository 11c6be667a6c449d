"""Selector builder error types."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objectkit.selector.model import PartKind


class SelectorError(ValueError):
    """Raised when selector parts are combined in a way CSS does not allow."""

    def __init__(self, message: str, *, kind: PartKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSingletonPartError(SelectorError):
    """Element, id or pseudo-element appended a second time."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector",
            kind=kind,
        )


class OutOfOrderPartError(SelectorError):
    """A part was appended after a part of higher rank."""

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
        self.previous = previous

"""Immutable, chainable CSS selector builder.

A compound selector is built from parts that must appear in this order:

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element may appear at most once; class, attribute
and pseudo-class may repeat. Every call returns a new builder, so partial
selectors can be shared and extended independently:

    base = css_selector_builder.element("a")
    base.attr('href$=".png"').pseudo_class("focus").stringify()
        => 'a[href$=".png"]:focus'

Compound selectors are joined into complex selectors with ``combine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from objectkit.selector.errors import DuplicateSingletonPartError, OutOfOrderPartError

__all__ = [
    "PartKind",
    "Combinator",
    "COMBINATORS",
    "SelectorBuilder",
    "css_selector_builder",
    "selector_builder",
]

logger = logging.getLogger(__name__)


class PartKind(IntEnum):
    """Category of a compound selector part, valued by its required rank."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Return the textual form of a part of this kind."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """Symbols that join two compound selectors."""

    DESCENDANT = " "
    ADJACENT = "+"
    SIBLING = "~"
    CHILD = ">"


COMBINATORS = frozenset(c.value for c in Combinator)


@dataclass(frozen=True)
class SelectorBuilder:
    """One step in a selector chain.

    Attributes:
        fragment: Selector text accumulated so far.
        used: Singleton part kinds already present in this compound selector.
        sequence: Kind of every appended part, in append order.
    """

    fragment: str = ""
    used: frozenset[PartKind] = field(default_factory=frozenset)
    sequence: tuple[PartKind, ...] = ()

    # --- part appenders -------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute part; *value* is the text between the brackets."""
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Return a new builder with a part of *kind* appended.

        Raises:
            DuplicateSingletonPartError: *kind* is a singleton already used.
            OutOfOrderPartError: a previously appended part outranks *kind*.
        """
        kind = PartKind(kind)
        if kind.is_singleton and kind in self.used:
            logger.debug("Rejected duplicate %s in %r", kind.name, self.fragment)
            raise DuplicateSingletonPartError(kind)

        sequence = (*self.sequence, kind)
        for previous, current in zip(sequence, sequence[1:]):
            if previous > current:
                logger.debug(
                    "Rejected %s after %s in %r",
                    current.name, previous.name, self.fragment,
                )
                raise OutOfOrderPartError(current, previous)

        used = self.used | {kind} if kind.is_singleton else self.used
        return SelectorBuilder(
            fragment=self.fragment + kind.render(value),
            used=used,
            sequence=sequence,
        )

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two built selectors with *combinator*.

        The result holds only the joined text; its part state starts empty.
        """
        return SelectorBuilder(
            fragment=f"{left.stringify()} {combinator} {right.stringify()}"
        )

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self.fragment

    def __str__(self) -> str:
        return self.fragment


def selector_builder() -> SelectorBuilder:
    """Return an empty builder."""
    return SelectorBuilder()


css_selector_builder = selector_builder()

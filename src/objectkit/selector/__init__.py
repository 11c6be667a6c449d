from objectkit.selector.errors import (
    DuplicateSingletonPartError,
    OutOfOrderPartError,
    SelectorError,
)
from objectkit.selector.model import (
    COMBINATORS,
    Combinator,
    PartKind,
    SelectorBuilder,
    css_selector_builder,
    selector_builder,
)

__all__ = [
    "PartKind",
    "Combinator",
    "COMBINATORS",
    "SelectorBuilder",
    "css_selector_builder",
    "selector_builder",
    "SelectorError",
    "DuplicateSingletonPartError",
    "OutOfOrderPartError",
]

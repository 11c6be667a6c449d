"""CLI command: objectkit selector -- build a selector from part tokens."""

from __future__ import annotations

import sys

import click

from objectkit.selector import (
    COMBINATORS,
    Combinator,
    PartKind,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)

# Token names accepted before "=" in a part token.
PART_NAMES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}

# "_" stands in for the descendant combinator, which is awkward to quote.
_COMBINATOR_ALIASES = {"_": Combinator.DESCENDANT.value}


def _combinator_token(token: str) -> str | None:
    token = _COMBINATOR_ALIASES.get(token, token)
    return token if token in COMBINATORS else None


def build_selector(tokens: list[str]) -> SelectorBuilder:
    """Fold part and combinator tokens into a single builder, left to right."""
    result: SelectorBuilder | None = None
    pending: str | None = None
    current = css_selector_builder

    def flush() -> SelectorBuilder:
        if result is None:
            return current
        return css_selector_builder.combine(result, pending, current)

    for token in tokens:
        combinator = _combinator_token(token)
        if combinator is not None:
            if not current.sequence:
                raise click.UsageError(f"Combinator {token!r} must follow a selector")
            result = flush()
            pending = combinator
            current = css_selector_builder
            continue

        name, sep, value = token.partition("=")
        if not sep or name not in PART_NAMES:
            raise click.UsageError(
                f"Invalid token {token!r}; expected KIND=VALUE with KIND one of "
                f"{', '.join(PART_NAMES)}"
            )
        current = current.add(PART_NAMES[name], value)

    if pending is not None and not current.sequence:
        raise click.UsageError("Selector cannot end with a combinator")
    return flush()


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from TOKENS.

    Each token is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: +, ~, > or _ for descendant.

    \b
    Example:
      objectkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        built = build_selector(list(tokens))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(built.stringify())

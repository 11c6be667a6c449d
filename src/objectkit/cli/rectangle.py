"""CLI commands: objectkit rectangle / area -- rectangle JSON round trip."""

from __future__ import annotations

import sys

import click

from objectkit.config import ObjectkitConfig
from objectkit.model import Rectangle, make_rectangle
from objectkit.serialization import MalformedJsonError, from_json_text, to_json_text


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", type=int, default=None, help="Indent the JSON output")
@click.pass_obj
def rectangle(config: ObjectkitConfig | None, width: float, height: float, indent: int | None) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    if indent is None and config is not None:
        indent = config.json_indent
    rect = make_rectangle(_number(width), _number(height))
    click.echo(to_json_text(rect, indent=indent))
    click.echo(f"Area: {_number(rect.get_area())}")


@click.command()
@click.argument("json_text")
def area(json_text: str) -> None:
    """Decode a rectangle from JSON_TEXT and print its area."""
    try:
        rect = from_json_text(Rectangle, json_text)
    except (MalformedJsonError, TypeError) as exc:
        click.echo(f"JSON error: {exc}", err=True)
        sys.exit(1)

    try:
        value = rect.get_area()
    except (AttributeError, TypeError) as exc:
        click.echo(f"Not a rectangle: {exc}", err=True)
        sys.exit(1)
    if not isinstance(value, (int, float)):
        click.echo(f"Not a rectangle: area {value!r} is not a number", err=True)
        sys.exit(1)
    click.echo(f"Area: {_number(value)}")


def _number(value: float) -> float | int:
    """Drop a zero fractional part so 10.0 prints as 10."""
    return int(value) if float(value).is_integer() else value

"""Objectkit CLI entry point: Click group with subcommands."""

from dataclasses import replace

import click

from objectkit import __version__
from objectkit.config import ConfigError, ObjectkitConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="objectkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to OBJECTKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Objectkit - CSS selector builder and object helpers."""
    try:
        config = ObjectkitConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    if log_level:
        config = replace(config, log_level=log_level.upper())
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from objectkit.cli.selector import selector  # noqa: E402
from objectkit.cli.rectangle import area, rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
cli.add_command(area)

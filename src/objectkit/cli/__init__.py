from objectkit.cli.main import cli

__all__ = ["cli"]

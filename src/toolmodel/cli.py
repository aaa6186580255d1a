"""toolmodel CLI entrypoint."""

from __future__ import annotations

import click

from toolmodel import __version__


@click.group()
@click.version_option(version=__version__, prog_name="toolmodel")
def main() -> None:
    """toolmodel: inspect MCP tool definitions and validate payloads."""


# Register subcommands
from toolmodel.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()

"""``toolmodel tags``: tag helpers."""

from __future__ import annotations

import click

from toolmodel.cli_commands._output import console
from toolmodel.tags import normalize_tags


@click.group()
def tags() -> None:
    """Work with tool tags."""


@tags.command("normalize")
@click.argument("raw_tags", nargs=-1, required=True)
def normalize(raw_tags: tuple[str, ...]) -> None:
    """Normalize RAW_TAGS as they would be indexed, one per line."""
    for tag in normalize_tags(raw_tags):
        console.print(tag)

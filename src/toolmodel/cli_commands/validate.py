"""``toolmodel validate``: validate a JSON/YAML instance against a schema file."""

from __future__ import annotations

import sys

import click

from toolmodel.cli_commands._output import console, print_error, print_valid
from toolmodel.errors import ToolLoadError, ToolModelError
from toolmodel.loader import load_document
from toolmodel.schema.models import ValidatorConfig
from toolmodel.schema.validator import DefaultValidator


@click.command("validate")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("instance_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format-checking", is_flag=True, help="Assert the 'format' keyword.")
def validate_cmd(schema_file: str, instance_file: str, format_checking: bool) -> None:
    """Validate INSTANCE_FILE against SCHEMA_FILE.

    Both files may be JSON (``.json``) or YAML.
    """
    try:
        schema = load_document(schema_file)
        instance = load_document(instance_file)
    except ToolLoadError as exc:
        console.print(f"[red]Error loading file:[/red] {exc}")
        sys.exit(1)

    validator = DefaultValidator(ValidatorConfig(format_checking=format_checking))
    try:
        validator.validate(schema, instance)
    except ToolModelError as exc:
        print_error(exc)
        sys.exit(1)

    print_valid()

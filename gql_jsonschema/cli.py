"""Command-line interface for gql-jsonschema."""

import json
import logging
import sys
from pathlib import Path

import click
from graphql import GraphQLError
from jsonschema import Draft6Validator
from jsonschema.exceptions import SchemaError

from .core.context import ConverterConfig, SchemaLayout
from .core.converter import SchemaConverter
from .core.errors import SchemaConversionError
from .core.loader import DocumentLoader
from .core.scalars import ScalarRegistry


def parse_scalar_option(value: str) -> tuple[str, str]:
    """Split a NAME=TYPE scalar mapping option."""
    name, sep, json_type = value.partition("=")
    if not sep or not name or not json_type:
        raise click.BadParameter(f"expected NAME=TYPE, got {value!r}")
    return name.strip(), json_type.strip()


def check_draft_06(schema: dict):
    """Validate a document against the draft-06 meta-schema.

    Raises:
        click.ClickException: If the document is not a valid draft-06 schema
    """
    try:
        Draft6Validator.check_schema(schema)
    except SchemaError as e:
        location = "/".join(str(p) for p in e.path) or "<root>"
        raise click.ClickException(f"Invalid draft-06 schema at {location}: {e.message}")


@click.group()
@click.version_option(package_name="gql-jsonschema")
def main():
    """Generate JSON Schema (draft-06) from GraphQL operations and types."""
    pass


@main.command()
@click.option(
    "--source",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL file or a directory of .graphql/.graphqls/.gql files.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output JSON file (default: stdout).",
)
@click.option(
    "--layout",
    type=click.Choice([layout.value for layout in SchemaLayout]),
    default=SchemaLayout.DEFINITIONS.value,
    show_default=True,
    help="Top-level map that holds operation entries.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a custom scalar to a JSON Schema type, e.g. DateTime=string.",
)
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
@click.option(
    "--check",
    is_flag=True,
    help="Validate the generated document against the draft-06 meta-schema.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error if any part of the input was skipped.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def convert(
    source: str,
    output: str | None,
    layout: str,
    scalars: tuple[str, ...],
    indent: int,
    check: bool,
    strict: bool,
    verbose: bool,
):
    """Convert GraphQL documents to a JSON Schema document.

    Examples:

        gql-jsonschema convert --source ./operations --output ./schema.json

        gql-jsonschema convert -s query.graphql --layout properties --check

        gql-jsonschema convert -s schema.graphqls --scalar DateTime=string
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    registry = ScalarRegistry()
    for value in scalars:
        name, json_type = parse_scalar_option(value)
        try:
            registry.register(name, json_type)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--scalar")

    source_path = Path(source).resolve()
    if verbose:
        click.echo(f"Source: {source_path}", err=True)
        click.echo(f"Layout: {layout}", err=True)

    loader = DocumentLoader(str(source_path))
    try:
        document = loader.load_all()
    except GraphQLError as e:
        raise click.ClickException(f"GraphQL syntax error: {e.message}")

    if verbose:
        click.echo(f"  Definitions: {len(document.definitions)}", err=True)

    converter = SchemaConverter(ConverterConfig(layout=SchemaLayout(layout), scalars=registry))
    try:
        result = converter.convert_document(document)
    except SchemaConversionError as e:
        raise click.ClickException(e.message)

    # With --verbose the log handler already prints each diagnostic
    if not verbose:
        for diagnostic in result.diagnostics:
            click.echo(f"warning: {diagnostic}", err=True)

    if check:
        check_draft_06(result.schema)
        if verbose:
            click.echo("Schema is valid draft-06", err=True)

    text = result.to_json(indent=indent)
    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n")
        click.echo(f"Done! Wrote schema to {output_path}", err=True)
    else:
        click.echo(text)

    if strict and not result.is_complete:
        click.echo(f"Error: {len(result.diagnostics)} part(s) of the input were skipped", err=True)
        sys.exit(1)


@main.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
def validate(schema_file: str):
    """Check that a JSON file is a valid draft-06 JSON Schema."""
    try:
        with open(schema_file) as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{schema_file} is not valid JSON: {e}")

    check_draft_06(schema)
    click.echo(f"{schema_file}: valid draft-06 schema")


if __name__ == "__main__":
    main()

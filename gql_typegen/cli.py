"""Command-line interface for gql-typegen."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError

from .core.config import GeneratorConfig
from .core.errors import TypegenError
from .core.generator import CodeGenerator
from .core.hooks import AddHeaderHook, HookRunner
from .core.loader import load_documents, load_schema
from .core.operations import transform_documents
from .core.schema_builder import build_schema_context


@click.group()
@click.version_option(package_name="gql-typegen")
def main():
    """GraphQL type generator.

    Generate TypeScript declarations from GraphQL schemas and operations.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to an SDL file, a directory of them, or an introspection JSON file.",
)
@click.option(
    "--documents",
    "-d",
    multiple=True,
    type=click.Path(exists=True),
    help="Operation document file or directory. May be repeated.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output directory for generated code.",
)
@click.option("--out-file", default=None, help="Name of the generated file (default: types.ts).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON config file.",
)
@click.option("--immutable-types", is_flag=True, help="Emit readonly fields and arrays.")
@click.option("--avoid-optionals", is_flag=True, help="Never emit '?' on fields.")
@click.option("--enums-as-types", is_flag=True, help="Render enums as string unions.")
@click.option("--no-flatten", is_flag=True, help="Inline nested selection shapes.")
@click.option("--no-schema", is_flag=True, help="Only emit enums and document types.")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the bundled ones.",
)
@click.option("--header", default=None, help="Text prepended to the generated file.")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: tuple[str, ...],
    output: str,
    out_file: str | None,
    config_path: str | None,
    immutable_types: bool,
    avoid_optionals: bool,
    enums_as_types: bool,
    no_flatten: bool,
    no_schema: bool,
    template_dir: str | None,
    header: str | None,
    verbose: bool,
):
    """Generate TypeScript types from a GraphQL schema and documents.

    Examples:

        gql-typegen generate --schema ./schema.graphql --output ./generated

        gql-typegen generate -s ./schema -d ./queries -o ./src/types --immutable-types

        gql-typegen generate -s ./schema.json -d ./queries -o ./out --no-schema
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    output_path = Path(output).resolve()
    if verbose:
        click.echo(f"Schema: {schema}")
        click.echo(f"Output: {output_path}")

    try:
        config = GeneratorConfig.load(config_path) if config_path else GeneratorConfig()
        config = config.merge(
            immutable_types=immutable_types or None,
            avoid_optionals=avoid_optionals or None,
            enums_as_types=enums_as_types or None,
            flatten_types=False if no_flatten else None,
            template_dir=template_dir,
            out_file=out_file,
        )

        click.echo("Parsing schema...")
        context = build_schema_context(load_schema(schema))
        if verbose:
            click.echo(f"  Scalars: {len(context.scalars)}")
            click.echo(f"  Enums: {len(context.enums)}")
            click.echo(f"  Types: {len(context.types)}")
            click.echo(f"  Inputs: {len(context.inputs)}")
            click.echo(f"  Interfaces: {len(context.interfaces)}")
            click.echo(f"  Unions: {len(context.unions)}")

        document_contexts = []
        if documents:
            click.echo("Transforming documents...")
            document_contexts.append(
                transform_documents(context, load_documents(list(documents)))
            )
            if verbose:
                click.echo(f"  Operations: {len(document_contexts[0].operations)}")
                click.echo(f"  Fragments: {len(document_contexts[0].fragments)}")

        hooks = HookRunner()
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        click.echo("Generating code...")
        generator = CodeGenerator(context, config, document_contexts, hooks)
        written = generator.generate(str(output_path), generate_schema=not no_schema)
    except (TypegenError, GraphQLError, FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    for path in written:
        click.echo(f"  Wrote {path}")
    click.echo(f"Done! Generated code in {output_path}")


if __name__ == "__main__":
    main()

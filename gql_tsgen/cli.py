"""Command-line interface for gql-tsgen."""

import asyncio
import logging
from pathlib import Path

import click

from . import __version__
from .core.config import DEFAULT_CONFIG_FILE, GeneratorConfig, load_config
from .core.errors import GenerationError
from .core.generator import CodeGenerator
from .core.parser import is_url, load_schema


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[gql-tsgen] %(levelname)s %(name)s: %(message)s",
    )


def resolve_config(config_path: str | None) -> GeneratorConfig:
    """Load the named config file, or the default one if it exists."""
    if config_path:
        return load_config(config_path)
    if Path(DEFAULT_CONFIG_FILE).is_file():
        return load_config(DEFAULT_CONFIG_FILE)
    return GeneratorConfig()


@click.group()
@click.version_option(__version__)
def main():
    """GraphQL to TypeScript type generator.

    Generate TypeScript interfaces, enums and type aliases from GraphQL schemas.
    """


@main.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help=f"Path to the JSON config file (default: ./{DEFAULT_CONFIG_FILE} if present).",
)
@click.option(
    "--schema",
    "-s",
    help="GraphQL endpoint URL, or path to an SDL file or directory.",
)
@click.option(
    "--output",
    "-o",
    help="Output directory for generated files.",
)
@click.option(
    "--ignore",
    "-i",
    multiple=True,
    help="Type name to skip. Can be repeated.",
)
@click.option(
    "--token",
    envvar="GQL_TSGEN_TOKEN",
    help="Bearer token for introspection requests.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(config_path, schema, output, ignore, token, verbose):
    """Generate TypeScript declarations from a GraphQL schema.

    Examples:

        gql-tsgen generate

        gql-tsgen generate --schema ./schema.graphql --output ./src/types/graphql

        gql-tsgen generate -s https://api.example.com/graphql -i Query -i Mutation
    """
    configure_logging(verbose)
    try:
        config = resolve_config(config_path)
        overrides = {}
        if schema:
            overrides["schema_source"] = schema
        if output:
            overrides["out_dir"] = output
        if ignore:
            overrides["ignore"] = [*config.ignore, *ignore]
        config = config.model_copy(update=overrides)
        source = config.require_schema()

        if verbose:
            click.echo(f"Schema: {source}")
            click.echo(f"Output: {config.out_dir}")

        ir = asyncio.run(
            load_schema(source, auth=config.build_auth(token), timeout=config.timeout)
        )
        if is_url(source):
            click.echo(f"Successfully fetched schema from {source}")
        else:
            click.echo(f"Successfully read schema from file {source}")

        if verbose:
            click.echo(f"  Enums: {len(ir.enums)}")
            click.echo(f"  Objects: {len(ir.objects)}")
            click.echo(f"  Interfaces: {len(ir.interfaces)}")
            click.echo(f"  Unions: {len(ir.unions)}")
            click.echo(f"  Scalars: {len(ir.scalars)}")

        generator = CodeGenerator(
            ir,
            config.out_dir,
            ignore=config.ignore,
            scalars=config.build_scalar_registry(),
            template_dir=config.template_dir,
            hooks=config.build_hooks(),
        )
        for path in generator.generate():
            click.echo(f"Generated {path}")
    except GenerationError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()

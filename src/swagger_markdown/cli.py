"""CLI entry point for swagger-markdown."""

import logging
from pathlib import Path

import click

from swagger_markdown.config import GeneratorConfig, DEFAULT_PAGINATION_HINT
from swagger_markdown.errors import SwaggerMarkdownError
from swagger_markdown.generator.pages import MarkdownGenerator
from swagger_markdown.generator.samples import supported_languages


@click.command()
@click.argument("doc_path", type=click.Path(path_type=Path))
@click.option("-o", "--output", default=".", show_default=True, envvar="SWAGGER_MARKDOWN_OUTPUT", type=click.Path(file_okay=False, path_type=Path), help="Output directory for the generated Markdown pages.")
@click.option("-l", "--language", "languages", multiple=True, type=click.Choice(supported_languages()), help="Code sample language (repeatable). Defaults to all.")
@click.option("--pagination-hint", default=DEFAULT_PAGINATION_HINT, help="Last row of every query parameter table.")
@click.option("-v", "--verbose", is_flag=True, help="Log every rendering step.")
def main(doc_path: Path, output: Path, languages: tuple[str, ...], pagination_hint: str, verbose: bool):
    """Generate Markdown API reference pages from a Swagger document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(
        languages=languages or tuple(supported_languages()),
        pagination_hint=pagination_hint,
    )

    click.echo(f"Reading {doc_path}...")
    try:
        written = MarkdownGenerator(config).emit(doc_path, output)
    except SwaggerMarkdownError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Unable to write pages to {output}: {e}") from e

    for path in written:
        click.echo(f"  Created {path}")
    click.echo(f"Generated {len(written)} pages in {output}")

"""CLI entry point for mermaid-core."""

import asyncio
import json
import logging
import sys

import click

from mermaid_core import api, lifecycle
from mermaid_core.diagram_api.detect import detect_type
from mermaid_core.errors import MermaidError
from mermaid_core.preprocess import preprocess_diagram


def _read_input(input: str | None) -> str:
    if not input:
        return sys.stdin.read()
    try:
        with open(input) as f:
            return f.read()
    except OSError as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)


def _write_output(output: str | None, text: str) -> None:
    if not output:
        click.echo(text, nl=False)
        return
    try:
        with open(output, "w") as f:
            f.write(text)
    except OSError as e:
        click.echo(f"error: cannot write '{output}': {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool) -> None:
    """Mermaid diagram preprocessing and rendering."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    lifecycle.init()


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
def preprocess(input: str | None) -> None:
    """Print the cleaned code, title and config as JSON."""
    text = _read_input(input)
    try:
        result = preprocess_diagram(text)
    except MermaidError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps({"code": result.code, "title": result.title, "config": result.config}, indent=2))


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
def detect(input: str | None) -> None:
    """Print the detected diagram type."""
    text = _read_input(input)
    try:
        code = preprocess_diagram(text).code
        click.echo(detect_type(code))
    except MermaidError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--id", "element_id", type=str, default="mermaid", help="Element id for the rendered diagram")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def render(input: str | None, element_id: str, output: str | None) -> None:
    """Parse a diagram and print its rendered text."""
    text = _read_input(input)
    try:
        rendered = asyncio.run(api.render(element_id, text))
    except MermaidError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    _write_output(output, rendered or "")


if __name__ == "__main__":
    main()

"""CLI entry point for api-doc-gen."""

import fnmatch
import json
import logging
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path

import click
from pydantic import ValidationError

from api_doc_gen.config import settings
from api_doc_gen.generator.html import generate_html
from api_doc_gen.parser.base import ApiDocumentation, Endpoint, SpecError
from api_doc_gen.parser.swagger import parse_openapi


def _filter_endpoints(endpoints: Sequence[Endpoint], patterns: tuple[str, ...]) -> list[Endpoint]:
    """Keep endpoints matching any pattern.

    A pattern is either ``"METHOD /path/glob"`` or just ``"/path/glob"``.
    """
    if not patterns:
        return list(endpoints)

    result = []
    for ep in endpoints:
        for pattern in patterns:
            parts = pattern.strip().split(None, 1)
            if len(parts) == 2:
                method, path_pattern = parts[0].upper(), parts[1]
                if ep.method != method:
                    continue
            else:
                path_pattern = parts[0]
            if fnmatch.fnmatchcase(ep.path, path_pattern):
                result.append(ep)
                break
    return result


def _parse_date(ctx, param, value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter("expected YYYY-MM-DD")


def _load_spec(spec_path: Path, patterns: tuple[str, ...], verbose: bool) -> ApiDocumentation:
    try:
        doc = parse_openapi(spec_path, max_example_depth=settings.max_example_depth)
    except SpecError as e:
        _fail(e, verbose)
    if patterns:
        doc = doc.model_copy(update={"endpoints": tuple(_filter_endpoints(doc.endpoints, patterns))})
    return doc


def _fail(error: SpecError, verbose: bool):
    message = error.message
    if verbose and error.detail:
        message = f"{message}\n{error.detail}"
    raise click.ClickException(message)


def _output_path(output: Path | None, default_name: str) -> Path:
    path = output if output is not None else settings.output_dir / default_name
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _endpoint_option(f):
    return click.option(
        "--endpoint", "patterns", multiple=True,
        help='Only document matching endpoints, e.g. "GET /pets/*" or "/users*". Repeatable.',
    )(f)


def _date_option(f):
    return click.option(
        "--date", "generated_at", default=None, callback=_parse_date,
        help="Generation date shown in the footer (YYYY-MM-DD). Defaults to today.",
    )(f)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging and error details.")
@click.pass_context
def main(ctx, verbose: bool):
    """API Doc Gen — turn OpenAPI/Swagger documents into standalone HTML documentation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file for the normalized model JSON.")
@_endpoint_option
@click.pass_context
def parse(ctx, spec_path: Path, output: Path | None, patterns: tuple[str, ...]):
    """Normalize an OpenAPI/Swagger document into a documentation model (JSON)."""
    click.echo(f"Parsing {spec_path}...")
    doc = _load_spec(spec_path, patterns, ctx.obj["verbose"])
    click.echo(f"Found {len(doc.endpoints)} endpoints.")

    output = _output_path(output, "api-doc.json")
    output.write_text(doc.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    click.echo(f"Model saved to {output}")


@main.command()
@click.argument("model_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output HTML file.")
@_date_option
@click.pass_context
def render(ctx, model_path: Path, output: Path | None, generated_at: date):
    """Render a documentation model (JSON, e.g. from `parse`) into HTML."""
    click.echo(f"Reading model from {model_path}...")
    try:
        doc = ApiDocumentation.model_validate(json.loads(model_path.read_text(encoding="utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        _fail(SpecError("Invalid documentation model", detail=str(e)), ctx.obj["verbose"])

    output = _output_path(output, "api-doc.html")
    output.write_text(generate_html(doc, generated_at, settings.generator_name), encoding="utf-8")
    click.echo(f"Documentation saved to {output}")


@main.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output HTML file.")
@_endpoint_option
@_date_option
@click.pass_context
def build(ctx, spec_path: Path, output: Path | None, patterns: tuple[str, ...], generated_at: date):
    """Full pipeline: parse spec -> render HTML documentation."""
    # Step 1: Parse
    click.echo(f"Parsing {spec_path}...")
    doc = _load_spec(spec_path, patterns, ctx.obj["verbose"])
    click.echo(f"Found {len(doc.endpoints)} endpoints.")

    # Step 2: Render
    output = _output_path(output, "api-doc.html")
    output.write_text(generate_html(doc, generated_at, settings.generator_name), encoding="utf-8")
    click.echo(f"Documentation saved to {output}")

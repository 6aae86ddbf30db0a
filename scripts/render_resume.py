#!/usr/bin/env python3
"""
Render Resume Documents with Registered Templates

Composes a resume document (YAML or JSON in the editor's format) under a named
template and writes the render tree as JSON or as a standalone HTML preview.

Examples:
    # List registered templates
    python scripts/render_resume.py templates

    # Print the render tree of a document
    python scripts/render_resume.py render resume.yaml --template popular-columns

    # Write an HTML preview with Chinese field formatting
    python scripts/render_resume.py render resume.yaml -t navigation --locale zh --format html -o preview.html
"""

import json
import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.composition import ResumeDocument, compose_document
from folio.contexts.composition.composer import DEFAULT_LOCALE
from folio.contexts.composition.logger import (
    log_composition_result,
    setup_composition_logger,
)
from folio.contexts.rendering import render_html
from folio.contexts.templating import (
    InvalidDocumentStructureError,
    TemplateRenderError,
    UnknownTemplateError,
    get_default_registry,
)
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

OUTPUT_FORMATS = ("json", "html")

app = typer.Typer(
    help="Compose resume documents into render trees and HTML previews",
    add_completion=False,
)


@app.command("templates")
def templates_command():
    """
    List registered template ids with their layouts.

    Examples:\n
        $ render_resume.py templates
    """
    registry = get_default_registry()
    for template_id in registry.template_ids():
        template = registry.get(template_id)
        typer.secho(template_id, bold=True, nl=False)
        typer.echo(f"  {template.name} (layout: {template.layout}, zones: {template.zone_policy.policy_id})")


@app.command("render")
def render_command(
    document_path: Annotated[
        Path,
        typer.Argument(help="Resume document (YAML or JSON)"),
    ],
    template_id: Annotated[
        str,
        typer.Option("--template", "-t", help="Registered template id"),
    ] = "popular-columns",
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale for field formatting (e.g., en, zh)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: json or html"),
    ] = "json",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output path (defaults to stdout)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """
    Compose a resume document with a template.

    Examples:\n
        $ render_resume.py render resume.yaml -t classic-split

        $ render_resume.py render resume.yaml -t navigation -f html -o preview.html
    """
    if output_format not in OUTPUT_FORMATS:
        typer.secho(
            f"Unknown format '{output_format}'. Available: {', '.join(OUTPUT_FORMATS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    locale = locale or DEFAULT_LOCALE

    if verbose:
        log_file = setup_composition_logger(
            LOGS_PATH / f"render_{now()}",
            template_id=template_id,
            locale=locale,
            document_path=document_path,
        )
        typer.echo(f"Logging to: {log_file}", err=True)

    try:
        document = ResumeDocument.from_file(document_path)
    except (FileNotFoundError, InvalidDocumentStructureError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    start_time = time.time()
    try:
        tree = compose_document(document, template_id, locale=locale)
    except UnknownTemplateError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    log_composition_result(template_id, tree, time.time() - start_time)

    if output_format == "html":
        try:
            rendered = render_html(tree)
        except TemplateRenderError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    else:
        rendered = json.dumps(tree.to_dict(), ensure_ascii=False, indent=2)

    if output is None:
        typer.echo(rendered)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.secho(f"Wrote {output_format.upper()} to {output}", fg=typer.colors.GREEN, err=True)


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Resume Export CLI

Renders a structured resume (JSON or YAML, as written by parse_document.py) to
PDF or DOCX with one of the bundled templates.

Examples:\n

    export_resume.py jane.yaml                                    # PDF, default template

    export_resume.py jane.json --to docx --template tech_saas     # DOCX

    export_resume.py jane.yaml --variant industrial --accent-color "#b45309"

    export_resume.py jane.yaml --list-templates                   # Show template ids
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from refit.contexts.intake import ParsedResume
from refit.contexts.rendering import RenderError, render_resume, write_rendered_document
from refit.contexts.rendering.logger import setup_rendering_logger
from refit.contexts.templating import InvalidTemplateTableError, load_template_registry
from refit.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "outs/exports"))


class ExportFormat(str, Enum):
    pdf = "pdf"
    docx = "docx"


def load_resume(path: Path) -> ParsedResume:
    """
    Load a ParsedResume from JSON or YAML (JSON is read as YAML).

    ${...} in resume text is kept verbatim, never resolved as interpolation.
    """
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a resume mapping")
    return ParsedResume.from_dict(data)


app = typer.Typer(
    help="Render a structured resume to PDF or DOCX",
    add_completion=False,
)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Structured resume (.json or .yaml)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_format: Annotated[
        ExportFormat,
        typer.Option("--to", "-t", help="Output format"),
    ] = ExportFormat.pdf,
    template_id: Annotated[
        Optional[str],
        typer.Option("--template", help="Template id (unknown ids use the default template)"),
    ] = None,
    variant: Annotated[
        Optional[str],
        typer.Option("--variant", help="Section ordering: general, tech_saas, industrial, leadership"),
    ] = None,
    accent_color: Annotated[
        Optional[str],
        typer.Option("--accent-color", help="Accent color override, e.g. #2563eb"),
    ] = None,
    header_color: Annotated[
        Optional[str],
        typer.Option("--header-color", help="Header color override"),
    ] = None,
    font: Annotated[
        Optional[str],
        typer.Option("--font", help="Font family override"),
    ] = None,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the rendered file", file_okay=False),
    ] = EXPORTS_PATH,
    list_templates: Annotated[
        bool,
        typer.Option("--list-templates", help="List template ids and exit"),
    ] = False,
):
    """
    Render a resume with a template and optional style overrides.

    Examples:\n

        $ export_resume.py jane.yaml --to docx --template leadership
    """
    try:
        registry = load_template_registry()
    except InvalidTemplateTableError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if list_templates:
        for tid in registry.template_ids:
            marker = " (default)" if tid == registry.default_template else ""
            typer.echo(f"  {tid}{marker}")
        raise typer.Exit()

    setup_rendering_logger(LOGS_PATH / f"export_{now()}", output_format.value)

    try:
        resume = load_resume(resume_file)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    overrides = {
        "variant": variant,
        "accentColor": accent_color,
        "headerColor": header_color,
        "font": font,
    }

    try:
        document = render_resume(
            resume,
            registry,
            template_id=template_id,
            overrides={k: v for k, v in overrides.items() if v is not None},
            output_format=output_format.value,
        )
        path = write_rendered_document(document, output_dir)
    except RenderError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    final_path = path.with_name(document.download_name(resume.name))
    path.replace(final_path)

    typer.secho(f"✓ Exported {output_format.value.upper()}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  File: {final_path}")
    if document.page_count is not None:
        typer.echo(f"  Pages: {document.page_count}")


if __name__ == "__main__":
    app()

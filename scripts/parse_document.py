#!/usr/bin/env python3
"""
Document Parsing CLI

Extracts text from resumes and job postings (PDF, DOC/DOCX, TXT) and prints the
structured result using the intake context.

Commands:
    resume - Parse a resume into a structured record
    job    - Parse a job posting heuristically

Examples:\n

    parse_document.py resume data/resumes/jane_doe.pdf                  # JSON to stdout

    parse_document.py resume jane_doe.docx --format yaml -o jane.yaml   # YAML to file

    parse_document.py resume jane_doe.txt --format text                 # Plain-text export

    parse_document.py job data/jobs/backend_engineer.txt                # Job posting
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from refit.contexts.intake import IngestionError
from refit.contexts.intake.job_parser import parse_job_file
from refit.contexts.intake.logger import setup_intake_logger
from refit.contexts.intake.resume_parser import parse_resume_file
from refit.contexts.templating import to_plaintext
from refit.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


class OutputStyle(str, Enum):
    json = "json"
    yaml = "yaml"
    text = "text"


def format_record(record: Dict[str, Any], style: OutputStyle) -> str:
    """Serialize a structured record for display."""
    if style is OutputStyle.yaml:
        return OmegaConf.to_yaml(OmegaConf.create(record))
    return json.dumps(record, indent=2, ensure_ascii=False) + "\n"


def emit(content: str, output: Optional[Path]) -> None:
    """Write to a file when given, otherwise to stdout."""
    if output is None:
        typer.echo(content, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)


app = typer.Typer(
    help="Parse resumes and job postings into structured records",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("resume")
def resume_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Resume file (.pdf, .doc, .docx, .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    style: Annotated[
        OutputStyle,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputStyle.json,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout", dir_okay=False),
    ] = None,
    include_text: Annotated[
        bool,
        typer.Option("--include-text", help="Include the raw extracted text in JSON/YAML output"),
    ] = False,
):
    """
    Parse a resume into name, contact, summary, experience, education and skills.

    Examples:\n

        $ parse_document.py resume cv.pdf

        $ parse_document.py resume cv.docx --format text
    """
    setup_intake_logger(LOGS_PATH / f"parse_{now()}", source=input_file.name)

    try:
        result = parse_resume_file(input_file)
    except IngestionError as e:
        typer.secho(f"Error: {e.user_message} ({e})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if result.resume.is_empty():
        typer.secho("Warning: no resume fields were recognized", fg=typer.colors.YELLOW, err=True)

    if style is OutputStyle.text:
        emit(to_plaintext(result.resume) + "\n", output)
        return

    record = result.resume.to_dict()
    if include_text:
        record["text"] = result.text
    emit(format_record(record, style), output)


@app.command("job")
def job_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Job posting file (.pdf, .doc, .docx, .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    style: Annotated[
        OutputStyle,
        typer.Option("--format", "-f", help="Output format (json or yaml)"),
    ] = OutputStyle.json,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout", dir_okay=False),
    ] = None,
):
    """
    Parse a job posting: skills, experience level and years of experience.

    Examples:\n

        $ parse_document.py job posting.txt --format yaml
    """
    setup_intake_logger(LOGS_PATH / f"parse_{now()}", source=input_file.name)

    if style is OutputStyle.text:
        typer.secho("Error: job postings support json or yaml only", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        posting = parse_job_file(input_file)
    except IngestionError as e:
        typer.secho(f"Error: {e.user_message} ({e})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    emit(format_record(posting.to_dict(), style), output)


if __name__ == "__main__":
    app()
